from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .constants import ARMOR_OFFSET, ARMOR_GAP, ARMOR_GAP_THRESHOLD, BITS_PER_CHAR


Bitstream = NDArray[np.uint8]

_SHIFTS = np.arange(BITS_PER_CHAR - 1, -1, -1, dtype=np.int16)


def decode_armor(payload: str) -> Bitstream:
    """Dearmor an AIVDM payload into a read-only array of bits, MSB-first.

    Each character contributes exactly six bits. Characters outside the armor
    alphabet are not rejected; they produce whatever six bits the offset
    arithmetic leaves behind.
    """
    raw = payload.encode("ascii", errors="replace")
    codes = np.frombuffer(raw, dtype=np.uint8).astype(np.int16) - ARMOR_OFFSET
    codes[codes > ARMOR_GAP_THRESHOLD] -= ARMOR_GAP
    codes &= 0x3F
    bits = ((codes[:, None] >> _SHIFTS) & 1).astype(np.uint8).reshape(-1)
    bits.flags.writeable = False
    return bits


def encode_armor(bits: NDArray[np.uint8]) -> str:
    """Armor a bit array into payload characters, zero-padding the last one."""
    bits = np.asarray(bits, dtype=np.uint8)
    pad = (-bits.size) % BITS_PER_CHAR
    if pad:
        bits = np.concatenate([bits, np.zeros(pad, dtype=np.uint8)])
    chars = []
    for group in bits.reshape(-1, BITS_PER_CHAR):
        v = 0
        for b in group:
            v = (v << 1) | (int(b) & 1)
        if v >= ARMOR_GAP_THRESHOLD:
            v += ARMOR_GAP
        chars.append(chr(v + ARMOR_OFFSET))
    return "".join(chars)
