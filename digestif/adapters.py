# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Digest adapters give every hash primitive the same shape: `update(data)` and `finalize_reset() -> bytes`.
`finalize_reset` returns exactly `length` bytes and leaves the adapter ready for a new computation.

The underlying primitives come in several native shapes:
* hashlib-style hashers that can only be finalized once;
* `cryptography` hash contexts, which are consumed by `finalize()`;
* hashers that can be reset in place;
* extendable output functions (XOFs), which produce as many bytes as requested.
Each shape gets its own adapter class.
'''

from typing import Any, ByteString, Callable, Protocol


class Digester(Protocol):
  length:int

  def update(self, data:ByteString) -> None: ...

  def finalize_reset(self) -> bytes: ...


class FixedDigester:
  '''
  Adapts a hashlib-style hasher (`update`, `digest`) that cannot be reset.
  A new hasher is constructed after each finalization.
  '''

  def __init__(self, new_hasher:Callable[[],Any], length:int) -> None:
    self.new_hasher = new_hasher
    self.length = length
    self.hasher = new_hasher()


  def __repr__(self) -> str: return f'FixedDigester({self.hasher!r}, length={self.length})'


  def update(self, data:ByteString) -> None:
    self.hasher.update(data)


  def finalize_reset(self) -> bytes:
    digest = self.hasher.digest()
    self.hasher = self.new_hasher()
    assert len(digest) == self.length, (self, len(digest))
    return digest



class ContextDigester:
  '''
  Adapts a `cryptography` hash context.
  `finalize()` consumes the context, so a new one is constructed after each finalization.
  '''

  def __init__(self, new_context:Callable[[],Any], length:int) -> None:
    self.new_context = new_context
    self.length = length
    self.context = new_context()


  def __repr__(self) -> str: return f'ContextDigester({self.context.algorithm.name!r}, length={self.length})'


  def update(self, data:ByteString) -> None:
    self.context.update(data)


  def finalize_reset(self) -> bytes:
    digest = self.context.finalize()
    self.context = self.new_context()
    assert len(digest) == self.length, (self, len(digest))
    return digest



class ResettableDigester:
  'Adapts a hasher that provides `digest()` and an in-place `reset()`.'

  def __init__(self, hasher:Any, length:int) -> None:
    self.hasher = hasher
    self.length = length


  def __repr__(self) -> str: return f'ResettableDigester({self.hasher!r}, length={self.length})'


  def update(self, data:ByteString) -> None:
    self.hasher.update(data)


  def finalize_reset(self) -> bytes:
    digest = self.hasher.digest()
    self.hasher.reset()
    assert len(digest) == self.length, (self, len(digest))
    return digest



class XofDigester:
  '''
  Adapts an extendable output hasher, e.g. BLAKE3.
  Finalization reads exactly `length` bytes from the output stream, rather than the primitive's default length;
  the result is therefore deterministic for a given `length`, and shorter lengths are prefixes of longer ones.
  '''

  def __init__(self, hasher:Any, length:int) -> None:
    if length < 1: raise ValueError(f'XOF output length must be positive: {length}')
    self.hasher = hasher
    self.length = length


  def __repr__(self) -> str: return f'XofDigester({self.hasher!r}, length={self.length})'


  def update(self, data:ByteString) -> None:
    self.hasher.update(data)


  def finalize_reset(self) -> bytes:
    digest = self.hasher.digest(length=self.length)
    self.hasher.reset()
    return digest
