from __future__ import annotations

from typing import Any, Dict, Tuple

from .armor import Bitstream, decode_armor
from .bits import read_unsigned, read_signed
from .constants import BITS_PER_CHAR, HEADER_BITS, MIN_MESSAGE_TYPE, MAX_MESSAGE_TYPE
from .errors import NotAisSentence, Truncated, UnsupportedType
from .layouts import LAYOUTS, MessageType, Entry, Field, Position, Dispatch, FieldWindow
from .message import DecodedMessage
from .normalize import normalize_coordinate
from .sentence import extract_payload
from .text import decode_text


def _read_window(bits: Bitstream, window: FieldWindow, message_type: int) -> int:
    if window.signed:
        value = read_signed(bits, window.start, window.length)
    else:
        value = read_unsigned(bits, window.start, window.length)
    if value is None:
        # unreachable while layout minimums cover every unconditional window
        raise Truncated(bits.size, window.end, message_type)
    return value


def _unpack(bits: Bitstream, entries: Tuple[Entry, ...], message_type: int, values: Dict[str, Any]) -> None:
    """Apply layout entries to the bitstream, collecting field values."""
    for entry in entries:
        if isinstance(entry, Dispatch):
            selector = _read_window(bits, entry.selector, message_type)
            # Recursion handles variant layouts; unknown selectors decode nothing
            _unpack(bits, entry.variants.get(selector, ()), message_type, values)
        elif isinstance(entry, Position):
            lon = normalize_coordinate(_read_window(bits, entry.longitude, message_type), 'lon', entry.precision)
            lat = normalize_coordinate(_read_window(bits, entry.latitude, message_type), 'lat', entry.precision)
            # Only the longitude decides has_position
            if lon is not None:
                values['longitude'], values['lon_hemisphere'] = lon
                values['has_position'] = True
            if lat is not None:
                values['latitude'], values['lat_hemisphere'] = lat
        elif isinstance(entry, Field):
            if bits.size < entry.min_bits:
                continue
            if entry.kind == 'text':
                value: Any = decode_text(bits, entry.window.start, entry.window.length // BITS_PER_CHAR)
            else:
                value = _read_window(bits, entry.window, message_type)
                if entry.convert is not None:
                    value = entry.convert(value)
            values[entry.name] = value
        else:
            raise TypeError(f"unknown layout entry: {entry!r}")


def _dearmor(line: str) -> Tuple[str, Bitstream]:
    payload = extract_payload(line)
    if payload is None:
        raise NotAisSentence(line)
    return payload, decode_armor(payload)


def decode(line: str) -> DecodedMessage:
    """Decode one AIVDM/AIVDO sentence.

    Raises NotAisSentence, Truncated or UnsupportedType (all DecodeError);
    no partial record is ever returned.
    """
    _, bits = _dearmor(line)
    if bits.size < HEADER_BITS:
        raise Truncated(bits.size, HEADER_BITS)

    message_type = read_unsigned(bits, 0, 6)
    if not MIN_MESSAGE_TYPE <= message_type <= MAX_MESSAGE_TYPE:
        raise UnsupportedType(message_type)

    layout = LAYOUTS[MessageType(message_type)]
    if bits.size < layout.min_bits:
        raise Truncated(bits.size, layout.min_bits, message_type)

    values: Dict[str, Any] = {
        'message_type': message_type,
        'repeat_indicator': read_unsigned(bits, 6, 2),
        'mmsi': read_unsigned(bits, 8, 30),
    }
    _unpack(bits, layout.entries, message_type, values)
    return DecodedMessage(**values)


def inspect(line: str) -> Dict[str, Any]:
    """Raw, un-normalized view of a sentence's header for debugging.

    For class A position reports the raw kinematic fields are included too.
    Works on any bit length; fields that do not fit are reported as None.
    """
    payload, bits = _dearmor(line)
    info: Dict[str, Any] = {
        'payload': payload,
        'bit_length': int(bits.size),
        'message_type': read_unsigned(bits, 0, 6),
        'repeat_indicator': read_unsigned(bits, 6, 2),
        'mmsi': read_unsigned(bits, 8, 30),
    }
    if info['message_type'] in (1, 2, 3):
        info.update({
            'navigation_status': read_unsigned(bits, 38, 4),
            'rate_of_turn_raw': read_signed(bits, 42, 8),
            'speed_over_ground_raw': read_unsigned(bits, 50, 10),
            'position_accuracy': read_unsigned(bits, 60, 1),
            'longitude_raw': read_signed(bits, 61, 28),
            'latitude_raw': read_signed(bits, 89, 27),
        })
    return info
