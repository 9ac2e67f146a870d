import numpy as np
import pytest

from aisdecode.armor import decode_armor, encode_armor


ALPHABET = "0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVW`abcdefghijklmnopqrstuvw"


def test_armor_alphabet_maps_to_all_sixbit_values():
    assert len(ALPHABET) == 64
    bits = decode_armor(ALPHABET)
    assert bits.size == 6 * 64
    values = [int("".join(str(b) for b in bits[6 * i:6 * i + 6]), 2) for i in range(64)]
    assert values == list(range(64))


@pytest.mark.parametrize("ch,expected", [
    ("0", [0, 0, 0, 0, 0, 0]),
    ("W", [1, 0, 0, 1, 1, 1]),
    ("`", [1, 0, 1, 0, 0, 0]),
    ("w", [1, 1, 1, 1, 1, 1]),
])
def test_single_character_msb_first(ch, expected):
    assert list(decode_armor(ch)) == expected


def test_length_is_six_bits_per_char_and_deterministic():
    rng = np.random.default_rng(42)
    for _ in range(50):
        n = int(rng.integers(0, 80))
        payload = "".join(ALPHABET[i] for i in rng.integers(0, 64, size=n))
        a = decode_armor(payload)
        b = decode_armor(payload)
        assert a.size == 6 * len(payload)
        assert np.array_equal(a, b)


def test_empty_payload_gives_empty_stream():
    assert decode_armor("").size == 0


def test_bitstream_is_read_only():
    bits = decode_armor("38IF")
    with pytest.raises(ValueError):
        bits[0] = 1


def test_characters_outside_alphabet_do_not_raise():
    bits = decode_armor("!,*~")
    assert bits.size == 24
    assert set(np.unique(bits)) <= {0, 1}


def test_encode_inverts_decode():
    payload = "38IFDN0Ohj7JvbN0fABtpbJ401w@"
    assert encode_armor(decode_armor(payload)) == payload


def test_encode_pads_partial_character():
    assert encode_armor(np.array([1, 1], dtype=np.uint8)) == "h"  # 110000 -> 48
