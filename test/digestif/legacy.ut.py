# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from digestif.legacy import Ripemd128, Ripemd320, Whirlpool
from utest import utest


def hexdigest(hasher_class:type, data:bytes) -> str: return hasher_class(data).hexdigest()

def hexdigest_chunked(hasher_class:type, data:bytes, size:int) -> str:
  h = hasher_class()
  for i in range(0, len(data), size):
    h.update(data[i:i+size])
  return h.hexdigest()


utest('cdf26213a150dc3ecb610f18f6b38b46', hexdigest, Ripemd128, b'')
utest('86be7afa339d0fc7cfc785e72f578d33', hexdigest, Ripemd128, b'a')
utest('c14a12199c66e4ba84636b0f69144c77', hexdigest, Ripemd128, b'abc')
utest('9e327b3d6e523062afc1132d7df9d1b8', hexdigest, Ripemd128, b'message digest')

utest('22d65d5661536cdc75c1fdf5c6de7b41b9f27325ebc61e8557177d705a0ec880151c3a32a00899b8', hexdigest, Ripemd320, b'')
utest('ce78850638f92658a5a585097579926dda667a5716562cfcf6fbe77f63542f99b04705d6970dff5d', hexdigest, Ripemd320, b'a')
utest('de4c01b3054f8930a79d09ae738e92301e5a17085beffdc1b8d116713e74f82fa942d64cdbc4682d', hexdigest, Ripemd320, b'abc')
utest('3a8e28502ed45d422f68844f9dd316e7b98533fa3f2a91d29f84d425c88d6b4eff727df66a7c0197', hexdigest, Ripemd320, b'message digest')
utest('cabdb1810b92470a2093aa6bce05952c28348cf43ff60841975166bb40ed234004b8824463e6b009', hexdigest, Ripemd320,
  b'abcdefghijklmnopqrstuvwxyz')
# Two blocks after padding.
utest('d034a7950cf722021ba4b84df769a5de2060e259df4c9bb4a4268c0e935bbc7470a969c9d072a1ac', hexdigest, Ripemd320,
  b'abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq')

utest('19fa61d75522a4669b44e39c1d2e1726c530232130d407f89afee0964997f7a7'
  '3e83be698b288febcf88e3e03c4f0757ea8964e59b63d93708b138cc42a66eb3', hexdigest, Whirlpool, b'')
utest('8aca2602792aec6f11a67206531fb7d7f0dff59413145e6973c45001d0087b42'
  'd11bc645413aeff63a42391a39145a591a92200d560195e53b478584fdae231a', hexdigest, Whirlpool, b'a')
utest('4e2448a4c6f486bb16b6562c73b4020bf3043e3a731bce721ae1b303d97e6d4c'
  '7181eebdb6c57e277d0e34957114cbd6c797fc9d95d8b582d225292076d4eef5', hexdigest, Whirlpool, b'abc')


# Chunk boundaries do not affect the result, including messages that straddle the padding boundary.
message = bytes(range(256)) * 3
for hasher_class in (Ripemd128, Ripemd320, Whirlpool):
  for length in (55, 56, 63, 64, 65, 127, 200, len(message)):
    exp = hexdigest(hasher_class, message[:length])
    for size in (1, 7, 64):
      utest(exp, hexdigest_chunked, hasher_class, message[:length], size)

  # digest() does not disturb the running state; copy() forks it; reset() clears it.
  h = hasher_class(b'ab')
  h.digest()
  fork = h.copy()
  h.update(b'c')
  utest(hexdigest(hasher_class, b'abc'), h.hexdigest)
  utest(hexdigest(hasher_class, b'ab'), fork.hexdigest)
  h.reset()
  utest(hexdigest(hasher_class, b''), h.hexdigest)
