from __future__ import annotations

from typing import Optional

from .armor import Bitstream


def read_unsigned(stream: Bitstream, start: int, length: int) -> Optional[int]:
    """Return `length` bits starting at `start` as an unsigned int, MSB-first.

    Returns None when the window runs past the end of the stream.
    """
    if start < 0 or start + length > stream.size:
        return None
    value = 0
    for b in stream[start:start + length]:
        value = (value << 1) | (int(b) & 1)
    return value


def read_signed(stream: Bitstream, start: int, length: int) -> Optional[int]:
    """Two's-complement variant of read_unsigned."""
    value = read_unsigned(stream, start, length)
    if value is None:
        return None
    if value >= 1 << (length - 1):
        value -= 1 << length
    return value
