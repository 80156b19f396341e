# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Pure Python implementations of RIPEMD-128, RIPEMD-320 and Whirlpool,
legacy hash functions that hashlib and the third party hash libraries do not reliably provide.

Each hasher offers the hashlib-style interface `update`, `digest`, `hexdigest` and `copy`, plus `reset`.
They run at well under 1 MiB/s, orders of magnitude slower than native implementations,
so the registry uses them only where no native implementation is available.

References:
* RIPEMD: https://homes.esat.kuleuven.be/~bosselae/ripemd160.html
* Whirlpool: https://web.archive.org/web/2017/http://www.larc.usp.br/~pbarreto/WhirlpoolPage.html
'''

from struct import pack, unpack
from typing import ByteString, Callable


class _BlockHasher:
  '''
  Merkle-Damgard block buffering and padding shared by the hashers below.
  Subclasses provide the initial state, the message length encoding, `_compress` and `_output`.
  '''
  name = ''
  block_size = 64
  digest_size = 0
  _initial_state:tuple[int,...] = ()
  _length_size = 8
  _length_byteorder = 'little'


  def __init__(self, data:ByteString=b'') -> None:
    self.reset()
    if data: self.update(data)


  def __repr__(self) -> str: return f'<{type(self).__name__} count={self._count}>'


  def reset(self) -> None:
    self._state = self._initial_state
    self._pending = b''
    self._count = 0


  def copy(self):
    h = type(self)()
    h._state = self._state
    h._pending = self._pending
    h._count = self._count
    return h


  def update(self, data:ByteString) -> None:
    data = bytes(data) # Copy, so that the caller may reuse its buffer.
    self._count += len(data)
    buf = self._pending + data
    end = len(buf) - (len(buf) % 64)
    state = self._state
    for i in range(0, end, 64):
      state = self._compress(state, buf[i:i+64])
    self._state = state
    self._pending = buf[end:]


  def digest(self) -> bytes:
    'Return the digest of the data so far; the hasher remains usable.'
    tail = self._pending + b'\x80'
    tail += bytes(-(len(tail) + self._length_size) % 64)
    bit_count = (self._count * 8) & ((1 << (8 * self._length_size)) - 1)
    tail += bit_count.to_bytes(self._length_size, self._length_byteorder)
    state = self._state
    for i in range(0, len(tail), 64):
      state = self._compress(state, tail[i:i+64])
    return self._output(state)


  def hexdigest(self) -> str: return self.digest().hex()


  def _compress(self, state:tuple[int,...], block:bytes) -> tuple[int,...]: raise NotImplementedError

  def _output(self, state:tuple[int,...]) -> bytes: raise NotImplementedError



# RIPEMD.

_mask32 = 0xffffffff

def _rol32(x:int, n:int) -> int:
  return ((x << n) | (x >> (32 - n))) & _mask32


def _rf0(x:int, y:int, z:int) -> int: return x ^ y ^ z
def _rf1(x:int, y:int, z:int) -> int: return (x & y) | (~x & z)
def _rf2(x:int, y:int, z:int) -> int: return ((x | ~y) ^ z) & _mask32
def _rf3(x:int, y:int, z:int) -> int: return (x & z) | (y & ~z)
def _rf4(x:int, y:int, z:int) -> int: return (x ^ (y | ~z)) & _mask32

_RoundFn = Callable[[int,int,int],int]

# Message word selection and rotation amounts; RIPEMD-128 uses the first four rounds of each.
_r_left = (
  0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
  7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
  3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
  1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
  4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13)

_r_right = (
  5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
  6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
  15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
  8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
  12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11)

_s_left = (
  11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
  7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
  11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
  11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
  9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6)

_s_right = (
  8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
  9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
  9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
  15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
  8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11)

_k_left = (0x00000000, 0x5a827999, 0x6ed9eba1, 0x8f1bbcdc, 0xa953fd4e)
_k_right_160 = (0x50a28be6, 0x5c4dd124, 0x6d703ef3, 0x7a6d76e9, 0x00000000)
_k_right_128 = (0x50a28be6, 0x5c4dd124, 0x6d703ef3, 0x00000000)

_fns_left:tuple[_RoundFn,...] = (_rf0, _rf1, _rf2, _rf3, _rf4)
_fns_right_160:tuple[_RoundFn,...] = (_rf4, _rf3, _rf2, _rf1, _rf0)
_fns_right_128:tuple[_RoundFn,...] = (_rf3, _rf2, _rf1, _rf0)


def _ripemd_round5(v:list[int], x:tuple[int,...], rnd:int, f:_RoundFn, k:int, r:tuple[int,...], s:tuple[int,...]) -> None:
  '''
  Perform the 16 steps of round `rnd` for one line of the five word variants, mutating `v` in place.
  The roles of the words rotate by one position each step while `v` keeps its positions fixed.
  A round is 16 steps, so after round `rnd` the word in role p sits at position `(p - 16*(rnd + 1)) % 5`.
  '''
  for j in range(16*rnd, 16*rnd + 16):
    i0 = -j % 5
    i1 = (1 - j) % 5
    i2 = (2 - j) % 5
    i3 = (3 - j) % 5
    i4 = (4 - j) % 5
    v[i0] = (_rol32((v[i0] + f(v[i1], v[i2], v[i3]) + x[r[j]] + k) & _mask32, s[j]) + v[i4]) & _mask32
    v[i2] = _rol32(v[i2], 10)


def _ripemd_round4(v:list[int], x:tuple[int,...], rnd:int, f:_RoundFn, k:int, r:tuple[int,...], s:tuple[int,...]) -> None:
  'Perform the 16 steps of round `rnd` for one line of the four word variants, mutating `v` in place.'
  for j in range(16*rnd, 16*rnd + 16):
    i0 = -j % 4
    i1 = (1 - j) % 4
    i2 = (2 - j) % 4
    i3 = (3 - j) % 4
    v[i0] = _rol32((v[i0] + f(v[i1], v[i2], v[i3]) + x[r[j]] + k) & _mask32, s[j])


class Ripemd128(_BlockHasher):
  name = 'ripemd128'
  digest_size = 16
  _initial_state = (0x67452301, 0xefcdab89, 0x98badcfe, 0x10325476)

  def _compress(self, state:tuple[int,...], block:bytes) -> tuple[int,...]:
    x = unpack('<16I', block)
    left = list(state)
    right = list(state)
    for rnd in range(4):
      _ripemd_round4(left, x, rnd, _fns_left[rnd], _k_left[rnd], _r_left, _s_left)
      _ripemd_round4(right, x, rnd, _fns_right_128[rnd], _k_right_128[rnd], _r_right, _s_right)
    h0, h1, h2, h3 = state
    return (
      (h1 + left[2] + right[3]) & _mask32,
      (h2 + left[3] + right[0]) & _mask32,
      (h3 + left[0] + right[1]) & _mask32,
      (h0 + left[1] + right[2]) & _mask32)

  def _output(self, state:tuple[int,...]) -> bytes: return pack('<4I', *state)


# After each round, RIPEMD-320 exchanges one register between the two lines: B, D, A, C, E.
# These are roles; after round `rnd` they all sit at position `rnd` of the fixed word lists.
_ripemd320_swaps = tuple((p - 16*(rnd + 1)) % 5 for rnd, p in enumerate((1, 3, 0, 2, 4)))
assert _ripemd320_swaps == (0, 1, 2, 3, 4)


class Ripemd320(_BlockHasher):
  name = 'ripemd320'
  digest_size = 40
  _initial_state = (
    0x67452301, 0xefcdab89, 0x98badcfe, 0x10325476, 0xc3d2e1f0,
    0x76543210, 0xfedcba98, 0x89abcdef, 0x01234567, 0x3c2d1e0f)

  def _compress(self, state:tuple[int,...], block:bytes) -> tuple[int,...]:
    x = unpack('<16I', block)
    left = list(state[:5])
    right = list(state[5:])
    for rnd in range(5):
      _ripemd_round5(left, x, rnd, _fns_left[rnd], _k_left[rnd], _r_left, _s_left)
      _ripemd_round5(right, x, rnd, _fns_right_160[rnd], _k_right_160[rnd], _r_right, _s_right)
      i = _ripemd320_swaps[rnd]
      left[i], right[i] = right[i], left[i]
    return tuple((h + v) & _mask32 for h, v in zip(state, left + right))

  def _output(self, state:tuple[int,...]) -> bytes: return pack('<10I', *state)



# Whirlpool.

_mask64 = (1 << 64) - 1

# The S-box is built from the exponential mini-box E, its inverse, and the pseudo-random mini-box R.
_wp_e = (0x1, 0xb, 0x9, 0xc, 0xd, 0x6, 0xf, 0x3, 0xe, 0x8, 0x7, 0x4, 0xa, 0x2, 0x5, 0x0)
_wp_e_inv = tuple(_wp_e.index(i) for i in range(16))
_wp_r = (0x7, 0xc, 0xb, 0xd, 0xe, 0x4, 0x9, 0xf, 0x6, 0x3, 0x8, 0xa, 0x2, 0x5, 0x1, 0x0)


def _wp_sbox_entry(u:int) -> int:
  a = _wp_e[u >> 4]
  b = _wp_e_inv[u & 0xf]
  r = _wp_r[a ^ b]
  return (_wp_e[a ^ r] << 4) | _wp_e_inv[b ^ r]


def _gf256_mul(a:int, b:int) -> int:
  'Multiply in GF(2^8) with the Whirlpool reduction polynomial x^8 + x^4 + x^3 + x^2 + 1.'
  p = 0
  while b:
    if b & 1: p ^= a
    a <<= 1
    if a & 0x100: a ^= 0x11d
    b >>= 1
  return p


def _rotr64(x:int, n:int) -> int:
  return ((x >> n) | (x << (64 - n))) & _mask64 if n else x


_wp_sbox = bytes(_wp_sbox_entry(u) for u in range(0x100))
assert _wp_sbox[:4] == b'\x18\x23\xc6\xe8'

# Each table combines the S-box, the column shift and the row multiplication by the circulant matrix (1,1,4,1,8,5,2,9).
_wp_c0 = tuple(int.from_bytes(bytes(_gf256_mul(s, c) for c in (1, 1, 4, 1, 8, 5, 2, 9)), 'big') for s in _wp_sbox)
_wp_tables = tuple(tuple(_rotr64(w, 8*j) for w in _wp_c0) for j in range(8))

_wp_round_constants = tuple(int.from_bytes(_wp_sbox[8*r:8*r + 8], 'big') for r in range(10))


def _wp_rho(a:list[int], k:list[int]) -> list[int]:
  'One Whirlpool round: substitution, column shift, row mixing, and key addition.'
  t0, t1, t2, t3, t4, t5, t6, t7 = _wp_tables
  return [k[i]
    ^ t0[a[i] >> 56]
    ^ t1[(a[(i - 1) & 7] >> 48) & 0xff]
    ^ t2[(a[(i - 2) & 7] >> 40) & 0xff]
    ^ t3[(a[(i - 3) & 7] >> 32) & 0xff]
    ^ t4[(a[(i - 4) & 7] >> 24) & 0xff]
    ^ t5[(a[(i - 5) & 7] >> 16) & 0xff]
    ^ t6[(a[(i - 6) & 7] >> 8) & 0xff]
    ^ t7[a[(i - 7) & 7] & 0xff]
    for i in range(8)]


class Whirlpool(_BlockHasher):
  name = 'whirlpool'
  digest_size = 64
  _initial_state = (0,) * 8
  _length_size = 32
  _length_byteorder = 'big'

  def _compress(self, state:tuple[int,...], block:bytes) -> tuple[int,...]:
    m = unpack('>8Q', block)
    k = list(state)
    a = [m[i] ^ k[i] for i in range(8)]
    for rc in _wp_round_constants:
      k = _wp_rho(k, [rc, 0, 0, 0, 0, 0, 0, 0])
      a = _wp_rho(a, k)
    return tuple(state[i] ^ a[i] ^ m[i] for i in range(8))

  def _output(self, state:tuple[int,...]) -> bytes: return pack('>8Q', *state)
