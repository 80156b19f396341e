# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import hashlib
import sys
from pathlib import Path
from subprocess import run
from tempfile import TemporaryDirectory

from utest import utest_cmd, utest_val


digestif = [sys.executable, '-m', 'digestif']

abc_sha256_hex = 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
abc_sha512_t256_hex = '53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23'


# create.
utest_cmd(0, f'sha2-256 big-endian hex - {abc_sha256_hex}\n'.encode(), [*digestif, 'create', '-t', 'sha2-256', 'abc'])
utest_cmd(0, f'sha2-256 big-endian hex - {abc_sha256_hex}\n'.encode(), [*digestif, 'create', '-t', 'sha2-256'], input=b'abc')
utest_cmd(0, f'sha2-256 big-endian hex - {abc_sha256_hex}\n'.encode(), [*digestif, 'create', '-t', 'sha2-256', '-'], input=b'abc')

default_exp = ''.join(f'{name:13} big-endian hex - {digest}\n' for name, digest in [
  ('sha3-256', hashlib.sha3_256(b'abc').hexdigest()),
  ('sha2-256', abc_sha256_hex),
  ('sha2-512-t256', abc_sha512_t256_hex),
  ('blake2-256', hashlib.blake2b(b'abc', digest_size=32).hexdigest()),
]).encode()
utest_cmd(0, default_exp, [*digestif, 'create', 'abc'])

abc_sha256 = bytes.fromhex(abc_sha256_hex)
utest_cmd(0, (
  f'sha2-256 big   -endian hex   - {abc_sha256_hex}\n'
  f'sha2-256 big   -endian uphex - {abc_sha256_hex.upper()}\n'
  f'sha2-256 little-endian hex   - {abc_sha256[::-1].hex()}\n'
  f'sha2-256 little-endian uphex - {abc_sha256[::-1].hex().upper()}\n'
  ).encode(),
  [*digestif, 'create', '-t', 'sha2-256', '-b', 'big,little', '-e', 'hex,uhx', 'abc'])

md5_abc = hashlib.md5(b'abc').digest()
utest_cmd(0, b'md5 big-endian blob - ' + md5_abc + b'\n', [*digestif, 'create', '-t', 'md5', '-e', 'blob', 'abc'])

with TemporaryDirectory() as dir:
  path = Path(dir, 'data.bin')
  path.write_bytes(b'abc')
  utest_cmd(0, f'sha2-256 big-endian hex - {abc_sha256_hex}\n'.encode(), [*digestif, 'create', '-t', 'sha2-256', str(path)])

  checksum_path = Path(dir, 'data.bin.sha256')
  checksum_path.write_text(abc_sha256_hex + '\n')
  utest_cmd(0, b'sha2-256 big-endian hex - pass\n', [*digestif, 'verify', str(checksum_path), str(path)])

# Idempotence.
cmd = [*digestif, 'create', '-t', 'sha2-256,md5,whirlpool', '-e', 'hex,base64,ripple', '-b', 'big,little', 'abc']
outputs = [run(cmd, capture_output=True).stdout for _ in range(2)]
utest_val(outputs[0], outputs[1], 'create is idempotent')
utest_val(18, len(outputs[0].splitlines()), 'create line count')

utest_cmd(1, b'', [*digestif, 'create', '-t', 'nope', 'abc'])
utest_cmd(1, b'', [*digestif, 'create', '-e', 'base32', 'abc'])
utest_cmd(1, b'', [*digestif, 'create', '-b', 'middle', 'abc'])
utest_cmd(2, b'', [*digestif, 'create', '-t', 'md5,', 'abc'])


# verify.
utest_cmd(0, b'sha2-256 big-endian hex - pass\n', [*digestif, 'verify', abc_sha256_hex, 'abc'])
utest_cmd(0, b'sha2-256 little-endian hex - pass\n', [*digestif, 'verify', abc_sha256[::-1].hex(), 'abc'])
utest_cmd(0, b'sha2-256 big-endian hex - pass\n', [*digestif, 'verify', abc_sha256_hex], input=b'abc')
utest_cmd(0, b'md5 big-endian hex - pass\n', [*digestif, 'verify', md5_abc.hex(), 'abc'])
utest_cmd(0, b'ripemd320 big-endian hex - pass\n',
  [*digestif, 'verify', 'de4c01b3054f8930a79d09ae738e92301e5a17085beffdc1b8d116713e74f82fa942d64cdbc4682d', 'abc'])
utest_cmd(0, b'sha2-256 big-endian hex - pass\n', [*digestif, 'verify', '-e', 'hex', abc_sha256_hex.upper(), 'abc'])
# A failed verification still exits with status 0.
utest_cmd(0, None, [*digestif, 'verify', abc_sha256_hex, 'abd'])

utest_cmd(0, (
  'sha2-256 big-endian    hex - pass\n'
  'sha2-256 little-endian hex - fail\n').encode(),
  [*digestif, 'verify', '-v', '-t', 'sha2-256', '-e', 'hex', abc_sha256_hex, 'abc'])

utest_cmd(0, b'sha2-256 big-endian hex - fail\n',
  [*digestif, 'verify', '-t', 'sha2-256', '-e', 'hex', '-b', 'big', abc_sha256[::-1].hex(), 'abc'])

verbose = run([*digestif, 'verify', '-v', abc_sha256_hex, 'abc'], capture_output=True)
utest_val(0, verbose.returncode, 'verbose status')
verbose_lines = verbose.stdout.decode().splitlines()
utest_val(['sha2-256', 'big-endian', 'hex', '-', 'pass'], verbose_lines[0].split(), 'verbose first line')
# Lowercase hex text also decodes as uphex, so both pass.
utest_val(2, sum(line.endswith(' pass') for line in verbose_lines), 'verbose pass count')

utest_cmd(1, b'', [*digestif, 'verify', 'zz', 'abc']) # No algorithm has a matching length.
utest_cmd(1, b'', [*digestif, 'verify', '-e', 'hex', 'xyz', 'abc'])
utest_cmd(1, b'', [*digestif, 'verify', '-t', 'nope', abc_sha256_hex, 'abc'])


# recode.
utest_cmd(0, b'AAH/\n', [*digestif, 'recode', '-i', 'hex', '-o', 'base64', '0001ff'])
utest_cmd(0, b'0001ff\n', [*digestif, 'recode', '-i', 'base64', '-o', 'hex'], input=b'AAH/\n')
utest_cmd(0, b'\x00\x01\xff', [*digestif, 'recode', '-i', 'hex', '-o', 'blob', '0001ff'])
utest_cmd(1, b'', [*digestif, 'recode', '-i', 'hex', '-o', 'base64', '0g'],
  exp_err=b"digestif: error: unable to decode text as hex: '0g'\n")


# -dbg names the pure Python hashers before hashing.
dbg = run([*digestif, 'create', '-dbg', '-t', 'sha2-256,ripemd128', 'abc'], capture_output=True)
utest_val(b'digestif: pure Python implementations (under 1 MiB/s): ripemd128\n', dbg.stderr.splitlines(keepends=True)[0],
  'dbg pure Python note')


# algorithms.
algorithms = run([*digestif, 'algorithms'], capture_output=True)
utest_val(0, algorithms.returncode, 'algorithms status')
utest_val(22, len(algorithms.stdout.splitlines()), 'algorithms line count')
utest_val(True, algorithms.stdout.startswith(b'sha2-224 '), 'algorithms first line')
