# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by digestif.
The library raises these; the command line tool converts them into a single error line and a nonzero exit status.
'''


class DigestifError(Exception):
  'Base class for all errors that are reported to the user.'


class ConfigurationError(DigestifError, ValueError):
  'An unknown algorithm, encoding or byte order was explicitly requested.'


class InferenceExhausted(DigestifError):
  'No algorithm was specified, and no decoded checksum length matches any known algorithm.'

  def __init__(self, lengths:list[int]) -> None:
    self.lengths = lengths
    lengths_str = ', '.join(str(l) for l in lengths) or 'none'
    super().__init__(f'unknown checksum length (decoded byte lengths: {lengths_str}); specify an algorithm with `-t`.')


class InvalidEncoding(DigestifError, ValueError):
  'Text could not be decoded under the requested encoding.'

  def __init__(self, encoding:str, text:str) -> None:
    self.encoding = encoding
    self.text = text
    super().__init__(f'unable to decode text as {encoding}: {text!r}')


class InputReadError(DigestifError, OSError):
  '''
  An input source could not be opened or read.
  The underlying `OSError` is chained as `__cause__`.
  '''

  def __init__(self, desc:str, cause:OSError) -> None:
    self.desc = desc
    self.cause = cause
    reason = cause.strerror or str(cause)
    super().__init__(f'unable to read {desc}: {reason}')
