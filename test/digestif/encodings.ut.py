# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from random import Random

from digestif.encodings import (all_encodings, base58_alphabet, basex_decode, basex_encode, dec_b64url, decode, enc_b64url,
  encode, encode_to_bytes, Encoding, flickr_alphabet, recode, ripple_alphabet)
from digestif.exceptions import ConfigurationError, InvalidEncoding
from utest import utest, utest_exc, utest_seq


utest_seq(['blob', 'binary', 'base10', 'base58', 'base62', 'base64', 'base64url', 'bitcoin', 'flickr', 'hex', 'monero',
  'ripple', 'uphex'], lambda: [e.value for e in all_encodings()])

utest(Encoding.hex, Encoding.parse, 'hex')
utest(Encoding.hex, Encoding.parse, 'lowhex')
utest(Encoding.uphex, Encoding.parse, 'UHX')
utest(Encoding.base64url, Encoding.parse, ' bs64u ')
utest(Encoding.bitcoin, Encoding.parse, 'btc')
utest(Encoding.ripple, Encoding.parse, 'xrp')
utest(Encoding.monero, Encoding.parse, 'xmr')
utest(Encoding.flickr, Encoding.parse, 'fkr')
utest(Encoding.binary, Encoding.parse, 'bin')
utest(Encoding.base10, Encoding.parse, 'bs10')
utest_exc(ConfigurationError, Encoding.parse, 'base32')


# Known values.
utest('', encode, b'', Encoding.hex)
utest('00ff10', encode, b'\x00\xff\x10', Encoding.hex)
utest('00FF10', encode, b'\x00\xff\x10', Encoding.uphex)
utest('YWJj', encode, b'abc', Encoding.base64)
utest('+/8=', encode, b'\xfb\xff', Encoding.base64)
utest('-_8', encode, b'\xfb\xff', Encoding.base64url)
utest('101', encode, b'\x05', Encoding.binary)
utest('256', encode, b'\x01\x00', Encoding.base10)
utest('StV1DL6CwTryKyV', encode, b'hello world', Encoding.bitcoin)
utest('StV1DL6CwTryKyV', encode, b'hello world', Encoding.base58)
utest('StV1DL6CwTryKyV', encode, b'hello world', Encoding.monero)
utest('112', encode, b'\x00\x00\x01', Encoding.base58)
utest('01', encode, b'\x00\x01', Encoding.base62)
utest('z', encode, b'\x3d', Encoding.base62)
utest('abc', encode, b'abc', Encoding.blob)

utest(b'\x00\x00\x01', basex_decode, b'112', base58_alphabet, bytes(base58_alphabet.index(c) if c in base58_alphabet else 0xff
  for c in range(0x100)))
utest(b'', basex_encode, b'', base58_alphabet)

# Ripple and flickr are permutations of the bitcoin alphabet.
btc = encode(b'hello world', Encoding.bitcoin)
utest(btc.translate(str.maketrans(base58_alphabet.decode(), ripple_alphabet.decode())), encode, b'hello world', Encoding.ripple)
utest(btc.translate(str.maketrans(base58_alphabet.decode(), flickr_alphabet.decode())), encode, b'hello world', Encoding.flickr)


# Strict decoding.
utest(b'\x00\xff', decode, '00ff', Encoding.hex)
utest(b'\x00\xff', decode, '00FF', Encoding.hex)
utest(b'\x00\xff', decode, '00ff', Encoding.uphex)
utest(b'\xab\xcd', decode, 'aBcD', Encoding.uphex)
utest_exc(InvalidEncoding, decode, '00 ff', Encoding.hex)
utest_exc(InvalidEncoding, decode, '0', Encoding.hex)
utest_exc(InvalidEncoding, decode, 'zz', Encoding.hex)
utest_exc(InvalidEncoding, decode, 'YWJ', Encoding.base64)
utest_exc(InvalidEncoding, decode, 'YW-j', Encoding.base64)
utest_exc(InvalidEncoding, decode, 'YW+j', Encoding.base64url)
utest(b'\xfb\xff', decode, '-_8', Encoding.base64url)
utest(b'\xfb\xff', decode, '-_8=', Encoding.base64url)
utest_exc(InvalidEncoding, decode, '102', Encoding.binary)
utest_exc(InvalidEncoding, decode, '0OIl', Encoding.bitcoin)
utest_exc(InvalidEncoding, decode, 'é', Encoding.base62)
utest_exc(InvalidEncoding, decode, '+', Encoding.base62)
utest(b'\xff\xfe', decode, encode(b'\xff\xfe', Encoding.blob), Encoding.blob)

utest(b'\xff', encode_to_bytes, b'\xff', Encoding.blob)
utest(b'ff', encode_to_bytes, b'\xff', Encoding.hex)

utest('AAH/', recode, '0001ff', Encoding.hex, Encoding.base64)
utest('0001FF', recode, 'AAH/', Encoding.base64, Encoding.uphex)
utest_exc(InvalidEncoding, recode, 'AAH', Encoding.base64, Encoding.hex)
utest_exc('InvalidEncoding("unable to decode text as base64: \'AAH\'")', recode, 'AAH', Encoding.base64, Encoding.hex)


# Round trips, including empty strings and leading zero bytes.
rand = Random(0)
samples = [b'', b'\x00', b'\x00\x00', b'\x00\x01', b'\x01\x00', b'\xff' * 3, bytes(32)]
samples.extend(rand.randbytes(n) for n in (1, 2, 3, 16, 20, 28, 32, 40, 48, 64))
samples.extend(b'\x00' + rand.randbytes(31) for _ in range(4))
for encoding in all_encodings():
  for sample in samples:
    utest(sample, decode, encode(sample, encoding), encoding)

for sample in samples:
  utest(sample, dec_b64url, enc_b64url(sample))
