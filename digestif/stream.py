# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Single pass hashing of a byte stream with any number of algorithms.
'''

from io import BytesIO
from typing import BinaryIO, ByteString, Iterable

from .algorithms import Algorithm
from .digester import DigestResult, DigestSet
from .exceptions import InputReadError


default_buffer_size = 1 << 16
#^ a quick timing experiment suggested that chunk sizes larger than this are not faster.


def hash_stream(src:BinaryIO, digest_set:DigestSet, buffer_size:int=default_buffer_size, desc:str='input'
 ) -> list[DigestResult]:
  '''
  Read `src` to the end and return the digest of its contents for every algorithm in `digest_set`, in set order.
  The source is read exactly once: each chunk is fed to every digester before the next read.
  Sources that provide `readinto` are read into a single preallocated buffer.
  An `OSError` raised while reading is converted to `InputReadError`, described by `desc`.
  '''
  if buffer_size < 1: raise ValueError(f'buffer_size must be positive: {buffer_size}')
  try:
    readinto = getattr(src, 'readinto', None)
    if readinto is None:
      while chunk := src.read(buffer_size):
        digest_set.update(chunk)
    else:
      buffer = bytearray(buffer_size)
      view = memoryview(buffer)
      while n := readinto(buffer):
        digest_set.update(view[:n])
  except OSError as e:
    digest_set.finalize_reset() # Discard the partial computation.
    raise InputReadError(desc, e) from e
  return digest_set.finalize_reset()


def hash_bytes(data:ByteString, algorithms:Iterable[str|Algorithm]) -> list[DigestResult]:
  'Hash an in-memory byte string with each of `algorithms`.'
  return hash_stream(BytesIO(data), DigestSet(algorithms), desc='bytes')
