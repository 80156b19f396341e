# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Checksum verification: resolving checksum text into candidate byte strings,
and comparing computed digests against those candidates.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .algorithms import Algorithm
from .digester import DigestResult
from .encodings import Encoding, all_encodings, decode
from .exceptions import ConfigurationError, InvalidEncoding


@dataclass(frozen=True)
class EncodedChecksum:
  'A checksum decoded under one encoding.'
  encoding:str
  value:bytes


def detectable_encodings() -> tuple[Encoding,...]:
  'The encodings tried when the checksum encoding is not specified; `blob` is only used as the fallback.'
  return tuple(e for e in all_encodings() if e is not Encoding.blob)


def resolve_checksum(raw:bytes, encoding:Encoding|None=None, encodings:Iterable[Encoding]|None=None
 ) -> list[EncodedChecksum]:
  '''
  Resolve the raw checksum bytes into candidate decoded checksums.
  The checksum text is `raw` decoded as UTF-8, with surrounding whitespace removed.

  If `encoding` is given, the result is the single candidate under that encoding;
  `blob` uses `raw` verbatim, and for any other encoding a decoding failure raises `InvalidEncoding`.

  Otherwise each of `encodings` (default: every encoding except `blob`) is tried in order;
  every successful non-empty decoding contributes a candidate, and failures are skipped.
  If no encoding succeeds, the single candidate is `raw` under `blob`.
  '''
  if encoding is Encoding.blob:
    return [EncodedChecksum(Encoding.blob.value, bytes(raw))]

  try: text = bytes(raw).decode('utf8').strip()
  except UnicodeDecodeError as e:
    if encoding is not None:
      raise InvalidEncoding(encoding.value, bytes(raw).decode('utf8', errors='replace')) from e
    text = None

  if encoding is not None:
    assert text is not None
    return [EncodedChecksum(encoding.value, decode(text, encoding))]

  candidates:list[EncodedChecksum] = []
  if text is not None:
    for e in (detectable_encodings() if encodings is None else encodings):
      try: value = decode(text, e)
      except InvalidEncoding: continue
      if value: candidates.append(EncodedChecksum(e.value, value))
  if not candidates:
    candidates.append(EncodedChecksum(Encoding.blob.value, bytes(raw)))
  return candidates



class ByteOrder(Enum):
  big = 'big'
  little = 'little'

  def __str__(self) -> str: return self.value

  @property
  def label(self) -> str: return f'{self.value}-endian'

  def apply(self, digest:bytes) -> bytes:
    'Return the digest in this byte order; digests are computed big-endian.'
    return digest if self is ByteOrder.big else digest[::-1]

  @classmethod
  def parse(cls, name:'str|ByteOrder') -> 'ByteOrder':
    if isinstance(name, ByteOrder): return name
    key = name.strip().lower().removesuffix('-endian')
    try: return cls(key)
    except ValueError: pass
    raise ConfigurationError(f'unknown byte order: {name!r}; available byte orders: big, little.')


byte_orders:tuple[ByteOrder,...] = (ByteOrder.big, ByteOrder.little)


class Verdict(Enum):
  passed = 'pass'
  failed = 'fail'

  def __str__(self) -> str: return self.value



@dataclass(frozen=True)
class Trial:
  'The outcome of comparing one digest, in one byte order, against one checksum candidate.'
  algorithm:Algorithm
  byte_order:ByteOrder
  encoding:str
  checksum:bytes
  digest:bytes
  verdict:Verdict

  @property
  def name(self) -> str: return self.algorithm.name

  @property
  def passed(self) -> bool: return self.verdict is Verdict.passed

  @classmethod
  def compare(cls, result:DigestResult, candidate:EncodedChecksum, byte_order:ByteOrder) -> 'Trial':
    digest = byte_order.apply(result.digest)
    verdict = Verdict.passed if digest == candidate.value else Verdict.failed
    return cls(algorithm=result.algorithm, byte_order=byte_order, encoding=candidate.encoding,
      checksum=candidate.value, digest=digest, verdict=verdict)


def match_checksum(results:Iterable[DigestResult], candidates:Sequence[EncodedChecksum],
 byte_orders:Sequence[ByteOrder]=byte_orders) -> list[Trial]:
  '''
  Compare every digest against every candidate in every byte order.
  Trials are generated in (result, candidate, byte order) nesting order and then ordered with `order_trials`.
  '''
  return order_trials(Trial.compare(r, c, bo) for r in results for c in candidates for bo in byte_orders)


def order_trials(trials:Iterable[Trial]) -> list[Trial]:
  'Stable partition: passing trials first, each group in its original order.'
  return sorted(trials, key=lambda t: not t.passed)


def any_passed(trials:Iterable[Trial]) -> bool:
  return any(t.passed for t in trials)
