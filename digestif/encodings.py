# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Text encodings for digests.

The positional numeral encodings (binary, base10, the base58 family and base62) use the "base-x" scheme:
the bytes are interpreted as a big-endian integer and written in the given alphabet,
with each leading zero byte written as one leading zero digit (the first character of the alphabet).
Thus every byte string, including the empty string, round trips.
'''

import re
from base64 import standard_b64decode, standard_b64encode, urlsafe_b64decode, urlsafe_b64encode
from enum import Enum
from typing import ByteString

from .exceptions import ConfigurationError, InvalidEncoding


def _byte_index(alphabet:bytes, char:int) -> int:
  try: return alphabet.index(char)
  except ValueError: return 0xff

def _alphabet_inverse(alphabet:bytes) -> bytes:
  'Create a lookup table mapping each byte to its digit value, or 0xff for bytes outside of the alphabet.'
  return bytes(_byte_index(alphabet, c) for c in range(0x100))


binary_alphabet = b'01'
base10_alphabet = b'0123456789'

# The base58 alphabet as described by bitcoin removes 0, O, I, and l to improve readability.
# Monero uses the same alphabet.
base58_alphabet = b'123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'
assert len(base58_alphabet) == 58

# Flickr swaps the case ordering of the bitcoin alphabet.
flickr_alphabet = b'123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ'
assert len(flickr_alphabet) == 58

# Ripple uses a permutation of the bitcoin alphabet.
ripple_alphabet = b'rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz'
assert len(ripple_alphabet) == 58

# The base62 alphabet consists of all ASCII numbers and letters.
base62_alphabet = b'0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
assert len(base62_alphabet) == 62


def basex_encode(val:ByteString, alphabet:bytes) -> bytes:
  'Encode a byte string as a big-endian numeral in the specified base alphabet, preserving leading zero bytes.'
  m = len(alphabet)
  zero_count = len(val) - len(bytes(val).lstrip(b'\0'))
  n = int.from_bytes(val, byteorder='big')
  res = bytearray()
  while n:
    n, r = divmod(n, m)
    res.append(alphabet[r])
  res.extend(alphabet[:1] * zero_count)
  res.reverse()
  return bytes(res)


def basex_decode(encoded:ByteString, alphabet:bytes, alphabet_inverse:bytes) -> bytes:
  'Decode a big-endian numeral using the specified base alphabet and its inverse lookup table.'
  m = len(alphabet)
  zero_digit = alphabet[0]
  zero_count = 0
  for char in encoded:
    if char != zero_digit: break
    zero_count += 1
  n = 0
  for char in encoded:
    a = alphabet_inverse[char]
    if a >= m: raise ValueError(encoded)
    n = n*m + a
  return bytes(zero_count) + n.to_bytes((n.bit_length() + 7) // 8, byteorder='big')


def enc_b64url(val:ByteString, pad=False) -> bytes:
  '''
  Encode a byte string using the base64url alphabet (ending in "-_").
  If `pad` is False (the default), then trailing "=" characters are removed from the result.
  '''
  b = urlsafe_b64encode(val)
  if not pad: b = b.rstrip(b'=')
  return b


def dec_b64url(val:ByteString) -> bytes:
  '''
  Decode a byte string using the base64url alphabet (ending in "-_").
  If the input is not a multiple of 4 bytes, then "=" characters are added to the end prior to passing to `urlsafe_b64decode`.
  '''
  mod4 = len(val) % 4
  if mod4:
    val = bytes(val) + b'=' * (4 - mod4)
  return urlsafe_b64decode(val)



class Encoding(Enum):
  'Digest text encodings, in the order that they are tried when detecting the encoding of a checksum.'
  blob = 'blob'
  binary = 'binary'
  base10 = 'base10'
  base58 = 'base58'
  base62 = 'base62'
  base64 = 'base64'
  base64url = 'base64url'
  bitcoin = 'bitcoin'
  flickr = 'flickr'
  hex = 'hex'
  monero = 'monero'
  ripple = 'ripple'
  uphex = 'uphex'

  def __str__(self) -> str: return self.value

  @classmethod
  def parse(cls, name:'str|Encoding') -> 'Encoding':
    'Parse an encoding name or alias, ignoring case and surrounding whitespace.'
    if isinstance(name, Encoding): return name
    key = name.strip().lower()
    try: return cls(encoding_aliases.get(key, key))
    except ValueError: pass
    raise ConfigurationError(f'unknown encoding: {name!r}; available encodings: {", ".join(e.value for e in cls)}.')


encoding_aliases:dict[str,str] = {
  'bin': 'binary',
  'bs10': 'base10',
  'bs58': 'base58',
  'btc': 'bitcoin',
  'bs62': 'base62',
  'bs64': 'base64',
  'bs64u': 'base64url',
  'fkr': 'flickr',
  'lowhex': 'hex',
  'xmr': 'monero',
  'xrp': 'ripple',
  'uhx': 'uphex',
}


def all_encodings() -> tuple[Encoding,...]: return tuple(Encoding)


_positional_alphabets:dict[Encoding,bytes] = {
  Encoding.binary: binary_alphabet,
  Encoding.base10: base10_alphabet,
  Encoding.base58: base58_alphabet,
  Encoding.base62: base62_alphabet,
  Encoding.bitcoin: base58_alphabet,
  Encoding.flickr: flickr_alphabet,
  Encoding.monero: base58_alphabet,
  Encoding.ripple: ripple_alphabet,
}

_alphabet_inverses:dict[bytes,bytes] = { a: _alphabet_inverse(a) for a in _positional_alphabets.values() }

# Full-text patterns for the encodings that are decoded by the standard library.
_text_patterns:dict[Encoding,re.Pattern] = {
  Encoding.base64: re.compile(r'[A-Za-z0-9+/]*={0,2}'),
  Encoding.base64url: re.compile(r'[A-Za-z0-9_-]*={0,2}'),
  # Output case distinguishes hex from uphex; either accepts both cases.
  Encoding.hex: re.compile(r'(?:[0-9a-fA-F]{2})*'),
  Encoding.uphex: re.compile(r'(?:[0-9a-fA-F]{2})*'),
}


def encode(data:ByteString, encoding:Encoding) -> str:
  'Encode `data` as text. For `blob`, undecodable bytes are represented with surrogate escapes.'
  if encoding is Encoding.blob: return bytes(data).decode('utf8', errors='surrogateescape')
  if alphabet := _positional_alphabets.get(encoding): return basex_encode(data, alphabet).decode('ascii')
  if encoding is Encoding.base64: return standard_b64encode(data).decode('ascii')
  if encoding is Encoding.base64url: return enc_b64url(data).decode('ascii')
  if encoding is Encoding.hex: return bytes(data).hex()
  if encoding is Encoding.uphex: return bytes(data).hex().upper()
  raise ValueError(encoding)


def encode_to_bytes(data:ByteString, encoding:Encoding) -> bytes:
  'Encode `data` for output: the raw bytes for `blob`, and ASCII text otherwise.'
  if encoding is Encoding.blob: return bytes(data)
  return encode(data, encoding).encode('ascii')


def decode(text:str, encoding:Encoding) -> bytes:
  'Decode `text` under `encoding`, raising `InvalidEncoding` on failure.'
  if encoding is Encoding.blob: return text.encode('utf8', errors='surrogateescape')
  try:
    if alphabet := _positional_alphabets.get(encoding):
      return basex_decode(text.encode('ascii'), alphabet, _alphabet_inverses[alphabet])
    if not _text_patterns[encoding].fullmatch(text): raise ValueError(text)
    if encoding is Encoding.base64: return standard_b64decode(text)
    if encoding is Encoding.base64url: return dec_b64url(text.encode('ascii'))
    # hex and uphex; the pattern excludes the whitespace that fromhex permits.
    return bytes.fromhex(text)
  except ValueError as e: # Includes binascii.Error and UnicodeEncodeError.
    raise InvalidEncoding(encoding.value, text) from e


def recode(text:str, src:Encoding, tgt:Encoding) -> str:
  'Decode `text` under `src` and encode the result under `tgt`.'
  return encode(decode(text, src), tgt)
