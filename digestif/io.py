# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Printing helpers for the command line tool.'

from sys import stderr, stdout
from typing import Any, ByteString


def outZ(*items:Any, sep='', end='', flush=False) -> None:
  "Write `items` to std out; sep='', end=''."
  print(*items, sep=sep, end=end, flush=flush)

def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, flush=flush)


def outB(data:ByteString) -> None:
  'Write raw bytes to std out, flushing the text layer first so that output stays in order.'
  stdout.flush()
  stdout.buffer.write(data)
  stdout.buffer.flush()


def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)
