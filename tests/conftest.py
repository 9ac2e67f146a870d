import numpy as np
import pytest

from aisdecode.armor import encode_armor


SAMPLE_LINE = "!AIVDM,1,1,,A,38IFDN0Ohj7JvbN0fABtpbJ401w@,0*69"


def _sixbit_code(ch: str) -> int:
    o = ord(ch)
    return o - 64 if o >= 64 else o


def build_bits(nbits, fields=(), texts=()):
    """Bit array with (start, length, value) fields and (start, num_chars, text) strings.

    Negative values are stored two's-complement; text is space-padded.
    """
    bits = np.zeros(nbits, dtype=np.uint8)
    for start, length, value in fields:
        value &= (1 << length) - 1
        for i in range(length):
            bits[start + i] = (value >> (length - 1 - i)) & 1
    for start, num_chars, s in texts:
        for k, ch in enumerate(s.ljust(num_chars)[:num_chars]):
            code = _sixbit_code(ch)
            for i in range(6):
                bits[start + 6 * k + i] = (code >> (5 - i)) & 1
    return bits


def build_sentence(nbits, fields=(), texts=(), tag="!AIVDM"):
    return f"{tag},1,1,,A,{encode_armor(build_bits(nbits, fields, texts))},0*00"


def header(message_type, mmsi=123456789, repeat=0):
    return [(0, 6, message_type), (6, 2, repeat), (8, 30, mmsi)]


@pytest.fixture
def sample_line():
    return SAMPLE_LINE


@pytest.fixture
def make_bits():
    return build_bits


@pytest.fixture
def make_sentence():
    return build_sentence


@pytest.fixture
def ais_header():
    return header
