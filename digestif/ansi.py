# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
ANSI Select Graphic Rendition (SGR) sequences for coloring terminal output.

The `*_OUT` variants are empty strings when stdout is not a TTY, so they can be interpolated unconditionally.

Names:
RST: reset
TXT: color text
R: red
G: green
Y: yellow
'''

import re as _re
from sys import stdout
from typing import Any, Sequence


is_out_tty = stdout.isatty()

# Use with `and` expressions to omit sgr for non-tty output, e.g. `TTY_OUT and sgr(...)`.
TTY_OUT = '!TTY_OUT' if is_out_tty else ''

# ANSI control sequence indicator.
CSI = '\x1B['

# Matches the SGR sequences emitted by this module.
sgr_re = _re.compile(r'\x1B\[[0-9;]*m')


def sgr(*seq:Any) -> str:
  'Select Graphic Rendition control sequence string.'
  return f'{CSI}{";".join(str(c) for c in seq)}m'


def len_strip_sgr(s:str) -> int:
  'Calculate the length of string if SGR sequences were stripped.'
  l = len(s)
  for m in sgr_re.finditer(s):
    l -= m.end() - m.start()
  return l


def ljust_sgr(s:str, width:int) -> str:
  'Left-justify a possibly colored string, ignoring the width of SGR sequences.'
  return s + ' ' * max(0, width - len_strip_sgr(s))


def _tty_out_seqs(seqs:tuple[str,...]) -> Sequence[str]:
  return seqs if is_out_tty else tuple('' for _ in seqs)


RST = sgr() # The empty sgr sequence is equivalent to sgr(0).
RST_OUT = (TTY_OUT and RST)

# 3-bit text colors: red, green, yellow.
cTXT_R, cTXT_G, cTXT_Y = txt_color_codes = (31, 32, 33)
TXT_R, TXT_G, TXT_Y = txt_color_seqs = tuple(sgr(c) for c in txt_color_codes)
TXT_R_OUT, TXT_G_OUT, TXT_Y_OUT = _tty_out_seqs(txt_color_seqs)
