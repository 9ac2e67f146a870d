from __future__ import annotations

from .armor import Bitstream
from .bits import read_unsigned
from .constants import BITS_PER_CHAR


def _sixbit_char(code: int) -> str:
    """Map a six-bit code to ASCII: 0..31 -> '@'..'_', 32..63 -> ' '..'?'."""
    c = code + 64 if code < 32 else code
    if 32 <= c <= 126:
        return chr(c)
    return ' '


def decode_text(stream: Bitstream, start: int, num_chars: int) -> str:
    """Decode `num_chars` six-bit characters starting at bit `start`.

    Stops at the end of the stream and returns what was decoded so far.
    Trailing spaces are stripped; interior spaces are kept.
    """
    chars = []
    for i in range(num_chars):
        code = read_unsigned(stream, start + i * BITS_PER_CHAR, BITS_PER_CHAR)
        if code is None:
            break
        chars.append(_sixbit_char(code))
    return ''.join(chars).rstrip(' ')
