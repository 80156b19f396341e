# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Compute and verify message digests.
`create` prints the digests of an input; `verify` checks a checksum against an input,
inferring the algorithm and encoding of the checksum when they are not specified.
'''

from argparse import Namespace
from typing import Sequence

from ..algorithms import algorithm_for_name, algorithms, infer_algorithms_for_lengths, is_legacy
from ..ansi import ljust_sgr, RST_OUT, TXT_G_OUT, TXT_R_OUT, TXT_Y_OUT
from ..argparse import comma_list, CommandParser
from ..checksum import byte_orders, ByteOrder, match_checksum, resolve_checksum, Trial, Verdict
from ..digester import DigestResult, DigestSet
from ..encodings import Encoding, encode, encode_to_bytes
from ..exceptions import DigestifError, InferenceExhausted
from ..inputs import input_desc, open_input, read_checksum
from ..io import errSL, outB, outL, outZ
from ..stream import hash_stream


default_create_types = ['sha3-256', 'sha2-256', 'sha2-512-t256', 'blake2-256']
default_create_encodings = ['hex']
default_create_byte_orders = ['big']

broken_algorithm_names = {'md5'}

verdict_colors = {
  Verdict.passed: TXT_G_OUT,
  Verdict.failed: TXT_R_OUT,
}


def main(args:Sequence[str]|None=None) -> None:
  parser = CommandParser(prog='digestif', description='Compute and verify message digests.')

  create = parser.add_command(main_create)
  create.add_argument('-t', '-types', dest='types', type=comma_list, default=default_create_types,
    help=f'Comma separated digest algorithms (default: {",".join(default_create_types)}).')
  create.add_argument('-e', '-encodings', dest='encodings', type=comma_list, default=default_create_encodings,
    help='Comma separated output encodings (default: hex).')
  create.add_argument('-b', '-byte-orders', dest='byte_orders', type=comma_list, default=default_create_byte_orders,
    help='Comma separated digest byte orders: big, little (default: big).')
  create.add_argument('-dbg', action='store_true', help='Print debug information to stderr.')
  create.add_argument('input', nargs='?', default=None,
    help='File path or literal text to hash; omit or pass "-" to read stdin.')

  verify = parser.add_command(main_verify)
  verify.add_argument('-t', '-types', dest='types', type=comma_list, default=None,
    help='Comma separated digest algorithms (default: inferred from the checksum length).')
  verify.add_argument('-e', '-encoding', dest='encoding', default=None,
    help='Checksum encoding (default: try every encoding).')
  verify.add_argument('-b', '-byte-order', dest='byte_order', default=None,
    help='Checksum byte order: big or little (default: try both).')
  verify.add_argument('-v', '-verbose', dest='verbose', action='store_true', help='Print every trial, not just the best.')
  verify.add_argument('-dbg', action='store_true', help='Print debug information to stderr.')
  verify.add_argument('checksum', help='Checksum file path or literal checksum text.')
  verify.add_argument('input', nargs='?', default=None,
    help='File path or literal text to hash; omit or pass "-" to read stdin.')

  recode = parser.add_command(main_recode)
  recode.add_argument('-i', '-input-encoding', dest='input_encoding', required=True, help='Encoding of the input text.')
  recode.add_argument('-o', '-output-encoding', dest='output_encoding', required=True, help='Encoding of the output.')
  recode.add_argument('text', nargs='?', default=None,
    help='File path or literal text to recode; omit or pass "-" to read stdin.')

  parser.add_command(main_algorithms)

  try: parser.parse_and_run_command(args)
  except DigestifError as e: exit(f'digestif: error: {e}')


def main_create(args:Namespace) -> None:
  'Print the digests of the input.'
  digest_set = DigestSet(args.types)
  encodings = list(dict.fromkeys(Encoding.parse(e) for e in args.encodings))
  orders = list(dict.fromkeys(ByteOrder.parse(b) for b in args.byte_orders))
  results = hash_input(args.input, digest_set, dbg=args.dbg)

  name_width = max(len(r.name) for r in results)
  order_width = max(len(bo.value) for bo in orders)
  enc_width = max(len(e.value) for e in encodings)
  for r in results:
    name = ljust_sgr(color_algorithm_name(r.name), name_width)
    for bo in orders:
      digest = bo.apply(r.digest)
      for e in encodings:
        prefix = f'{name} {bo.value:{order_width}}-endian {e.value:{enc_width}} - '
        if e is Encoding.blob:
          outZ(prefix)
          outB(encode_to_bytes(digest, e))
          outL()
        else:
          outL(prefix, encode(digest, e))


def main_verify(args:Namespace) -> None:
  'Verify a checksum against the digest of the input.'
  encoding = None if args.encoding is None else Encoding.parse(args.encoding)
  orders = byte_orders if args.byte_order is None else (ByteOrder.parse(args.byte_order),)
  # Resolve explicit algorithms before reading anything, so that configuration errors are reported first.
  explicit_algorithms = [algorithm_for_name(t) for t in args.types] if args.types else None

  raw_checksum = read_checksum(args.checksum)
  candidates = resolve_checksum(raw_checksum, encoding=encoding)
  if encoding is None and [c.encoding for c in candidates] == [Encoding.blob.value]:
    errSL('digestif: warning: checksum is not valid in any text encoding; comparing raw bytes.')
  if args.dbg:
    for c in candidates: errSL('digestif: candidate:', c.encoding, f'({len(c.value)} bytes)')

  if explicit_algorithms: verify_algorithms = explicit_algorithms
  else:
    verify_algorithms = infer_algorithms_for_lengths(len(c.value) for c in candidates)
    if not verify_algorithms: raise InferenceExhausted(sorted({len(c.value) for c in candidates}))
  if args.dbg: errSL('digestif: algorithms:', *(a.name for a in verify_algorithms))

  results = hash_input(args.input, DigestSet(verify_algorithms), dbg=args.dbg)
  trials = match_checksum(results, candidates, orders)
  if not args.verbose: trials = trials[:1]
  print_trials(trials)


def main_recode(args:Namespace) -> None:
  'Decode text under one encoding and print it under another.'
  src = Encoding.parse(args.input_encoding)
  tgt = Encoding.parse(args.output_encoding)
  with open_input(args.text) as f:
    raw = f.read()
  data = resolve_checksum(raw, encoding=src)[0].value
  if tgt is Encoding.blob: outB(data)
  else: outL(encode(data, tgt))


def main_algorithms(args:Namespace) -> None:
  'List the supported digest algorithms.'
  name_width = max(len(a.name) for a in algorithms)
  for a in algorithms:
    name = ljust_sgr(color_algorithm_name(a.name), name_width)
    outL(name, f' {a.length:>2} bytes', ' (legacy)' if a.legacy else '', ' (pure Python)' if a.pure_python else '')


def hash_input(arg:str|None, digest_set:DigestSet, dbg:bool) -> list[DigestResult]:
  desc = input_desc(arg)
  if dbg and (slow_names := [a.name for a in digest_set if a.pure_python]):
    errSL('digestif: pure Python implementations (under 1 MiB/s):', *slow_names)
  with open_input(arg) as f:
    results = hash_stream(f, digest_set, desc=desc)
  if dbg: errSL('digestif: hashed', digest_set.byte_count, 'bytes from', desc, 'with:', *digest_set.names)
  return results


def print_trials(trials:list[Trial]) -> None:
  name_width = max(len(t.name) for t in trials)
  order_width = max(len(t.byte_order.label) for t in trials)
  enc_width = max(len(t.encoding) for t in trials)
  for t in trials:
    name = ljust_sgr(color_algorithm_name(t.name), name_width)
    verdict = f'{verdict_colors[t.verdict]}{t.verdict}{RST_OUT}'
    outL(f'{name} {t.byte_order.label:{order_width}} {t.encoding:{enc_width}} - {verdict}')


def color_algorithm_name(name:str) -> str:
  'Color broken algorithms red and other legacy algorithms yellow.'
  if name in broken_algorithm_names: return f'{TXT_R_OUT}{name}{RST_OUT}'
  if is_legacy(name): return f'{TXT_Y_OUT}{name}{RST_OUT}'
  return name


if __name__ == '__main__': main()
