# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The registry of supported digest algorithms, and inference of candidate algorithms from a checksum length.

The order of `algorithms` is the preference ranking used for inference:
within a given length, modern algorithms come first and legacy algorithms last.
'''

import hashlib
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Iterable

from blake3 import blake3
from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives import hashes

from .adapters import ContextDigester, Digester, FixedDigester, ResettableDigester, XofDigester
from .exceptions import ConfigurationError
from .legacy import Ripemd128, Ripemd320, Whirlpool


_MakeDigester = Callable[[int],Digester] # Takes the output length in bytes.


@dataclass(frozen=True)
class Algorithm:
  name:str
  length:int
  make_digester:_MakeDigester = field(repr=False, compare=False)
  legacy:bool = False
  pure_python:bool = False # Implemented in `legacy`; hashes well under 1 MiB/s.

  def __str__(self) -> str: return self.name

  def new(self) -> Digester:
    'Construct a fresh digest adapter for this algorithm.'
    return self.make_digester(self.length)


def _fixed(new_hasher:Callable[[],Any]) -> _MakeDigester:
  return partial(FixedDigester, new_hasher)

def _context(hash_algorithm:type[hashes.HashAlgorithm]) -> _MakeDigester:
  return partial(ContextDigester, lambda: hashes.Hash(hash_algorithm()))

def _resettable(new_hasher:Callable[[],Any]) -> _MakeDigester:
  return lambda length: ResettableDigester(new_hasher(), length)

def _xof(new_hasher:Callable[[],Any]) -> _MakeDigester:
  return lambda length: XofDigester(new_hasher(), length)

def _blake2b(length:int) -> _MakeDigester:
  return _fixed(partial(hashlib.blake2b, digest_size=length))


def _openssl(name:str) -> Callable[[],Any]|None:
  'Return a constructor for the named OpenSSL digest, or None if this build of hashlib lacks it.'
  try: hashlib.new(name)
  except ValueError: return None
  return partial(hashlib.new, name)


# OpenSSL 3 only provides Whirlpool when its legacy provider is loaded.
_new_whirlpool = _openssl('whirlpool')


algorithms:tuple[Algorithm,...] = (
  Algorithm('sha2-224',       28, _fixed(hashlib.sha224)),
  Algorithm('sha2-512-t224',  28, _context(hashes.SHA512_224)),
  Algorithm('sha3-224',       28, _fixed(hashlib.sha3_224)),
  Algorithm('sha2-256',       32, _fixed(hashlib.sha256)),
  Algorithm('sha2-512-t256',  32, _context(hashes.SHA512_256)),
  Algorithm('blake2-256',     32, _blake2b(32)),
  Algorithm('sha3-256',       32, _fixed(hashlib.sha3_256)),
  Algorithm('blake3-256',     32, _xof(blake3)),
  Algorithm('sha2-384',       48, _fixed(hashlib.sha384)),
  Algorithm('sha3-384',       48, _fixed(hashlib.sha3_384)),
  Algorithm('blake2-384',     48, _blake2b(48)),
  Algorithm('blake3-384',     48, _xof(blake3)),
  Algorithm('sha2-512',       64, _fixed(hashlib.sha512)),
  Algorithm('sha3-512',       64, _fixed(hashlib.sha3_512)),
  Algorithm('blake2-512',     64, _blake2b(64)),
  Algorithm('blake3-512',     64, _xof(blake3)),
  (Algorithm('whirlpool',     64, _fixed(_new_whirlpool)) if _new_whirlpool else
   Algorithm('whirlpool',     64, _resettable(Whirlpool), pure_python=True)),
  Algorithm('ripemd320',      40, _resettable(Ripemd320), legacy=True, pure_python=True),
  Algorithm('sha1',           20, _fixed(hashlib.sha1), legacy=True),
  Algorithm('ripemd160',      20, _fixed(RIPEMD160.new), legacy=True),
  Algorithm('md5',            16, _fixed(hashlib.md5), legacy=True),
  Algorithm('ripemd128',      16, _resettable(Ripemd128), legacy=True, pure_python=True),
)

algorithms_by_name:dict[str,Algorithm] = { a.name: a for a in algorithms }
assert len(algorithms_by_name) == len(algorithms)

algorithm_names:list[str] = [a.name for a in algorithms]


def algorithm_for_name(name:str) -> Algorithm:
  'Look up an algorithm by its canonical name, ignoring case and surrounding whitespace.'
  try: return algorithms_by_name[name.strip().lower()]
  except KeyError: pass
  raise ConfigurationError(f'unknown algorithm: {name!r}; available algorithms: {", ".join(algorithm_names)}.')


def is_legacy(name:str) -> bool:
  try: return algorithms_by_name[name].legacy
  except KeyError: return False


def infer_algorithms(length:int) -> list[Algorithm]:
  '''
  Return every algorithm whose output length is `length` bytes.
  Non-legacy algorithms come before legacy ones; otherwise registry order is preserved.
  An unknown length yields an empty list.
  '''
  matches = [a for a in algorithms if a.length == length]
  return sorted(matches, key=lambda a: a.legacy) # Stable.


def infer_algorithms_for_lengths(lengths:Iterable[int]) -> list[Algorithm]:
  'Infer algorithms for each distinct length in first-seen order, returning the union without duplicates.'
  seen_lengths:set[int] = set()
  inferred:dict[str,Algorithm] = {}
  for length in lengths:
    if length in seen_lengths: continue
    seen_lengths.add(length)
    for a in infer_algorithms(length):
      inferred.setdefault(a.name, a)
  return list(inferred.values())
