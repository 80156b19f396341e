# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass
from typing import ByteString, Iterable, Iterator

from .adapters import Digester
from .algorithms import Algorithm, algorithm_for_name


@dataclass(frozen=True)
class DigestResult:
  algorithm:Algorithm
  digest:bytes

  def __post_init__(self) -> None:
    if len(self.digest) != self.algorithm.length:
      raise ValueError(f'{self.algorithm.name}: digest length {len(self.digest)} != {self.algorithm.length}')

  @property
  def name(self) -> str: return self.algorithm.name



class DigestSet:
  '''
  An ordered set of digest adapters, one per distinct requested algorithm.
  Every chunk passed to `update` is fed to each adapter in order,
  so that a single pass over the input produces all of the digests.
  Algorithms can be given as names or `Algorithm` values; all names are resolved before any adapter is constructed.
  '''

  def __init__(self, algorithms:Iterable[str|Algorithm]) -> None:
    resolved:dict[str,Algorithm] = {}
    for a in algorithms:
      algorithm = a if isinstance(a, Algorithm) else algorithm_for_name(a)
      resolved.setdefault(algorithm.name, algorithm)
    self.algorithms:tuple[Algorithm,...] = tuple(resolved.values())
    self.digesters:tuple[Digester,...] = tuple(a.new() for a in self.algorithms)
    self.byte_count = 0 # Byte count of the most recently finalized computation.
    self._pending_count = 0


  def __repr__(self) -> str: return f'DigestSet({self.names})'

  def __len__(self) -> int: return len(self.algorithms)

  def __iter__(self) -> Iterator[Algorithm]: return iter(self.algorithms)

  @property
  def names(self) -> list[str]: return [a.name for a in self.algorithms]


  def update(self, data:ByteString) -> None:
    for digester in self.digesters:
      digester.update(data)
    self._pending_count += len(data)


  def finalize_reset(self) -> list[DigestResult]:
    'Finalize every adapter in order and reset the set for a new computation.'
    results = [DigestResult(a, d.finalize_reset()) for a, d in zip(self.algorithms, self.digesters)]
    self.byte_count = self._pending_count
    self._pending_count = 0
    return results
