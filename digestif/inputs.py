# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Command line input arguments.
An input argument is one of:
* absent or '-': standard input;
* the path of an existing file: the contents of the file;
* anything else: the literal text, encoded as UTF-8.
'''

import sys
from contextlib import contextmanager
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Iterator

from .exceptions import InputReadError


def is_stdin_arg(arg:str|None) -> bool: return arg is None or arg == '-'


def input_file_path(arg:str|None) -> Path|None:
  'Return the path named by `arg` if it is an existing regular file (following symlinks), else None.'
  if is_stdin_arg(arg): return None
  assert arg is not None
  path = Path(arg)
  try: return path if path.is_file() else None
  except OSError: return None # E.g. the text is too long to be a path.


def input_desc(arg:str|None) -> str:
  'A short description of the input for error messages.'
  if is_stdin_arg(arg): return 'stdin'
  path = input_file_path(arg)
  return f'file {str(path)!r}' if path else 'literal text'


@contextmanager
def open_input(arg:str|None) -> Iterator[BinaryIO]:
  'Open the input named by `arg` for binary reading.'
  if is_stdin_arg(arg):
    yield sys.stdin.buffer
    return
  assert arg is not None
  if path := input_file_path(arg):
    try: f = open(path, 'rb')
    except OSError as e: raise InputReadError(input_desc(arg), e) from e
    with f: yield f
  else:
    yield BytesIO(arg.encode('utf8', errors='surrogateescape'))


def read_checksum(arg:str) -> bytes:
  'Read the checksum argument: the contents of an existing file, or else the literal text.'
  if path := input_file_path(arg):
    try: return path.read_bytes()
    except OSError as e: raise InputReadError(input_desc(arg), e) from e
  return arg.encode('utf8', errors='surrogateescape')
