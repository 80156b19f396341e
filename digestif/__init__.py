# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
digestif computes message digests with many algorithms in a single pass over the input,
and verifies checksums whose algorithm, encoding and byte order may be unknown.
'''

from .algorithms import Algorithm, algorithm_for_name, algorithms, infer_algorithms, infer_algorithms_for_lengths
from .checksum import ByteOrder, EncodedChecksum, match_checksum, resolve_checksum, Trial, Verdict
from .digester import DigestResult, DigestSet
from .encodings import decode, encode, Encoding, recode
from .exceptions import ConfigurationError, DigestifError, InferenceExhausted, InputReadError, InvalidEncoding
from .stream import hash_bytes, hash_stream
