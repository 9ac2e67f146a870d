"""AIVDM/AIVDO (AIS) single-sentence decoder.

Public API:
- decode(line) -> DecodedMessage, raising DecodeError
- decode_file(input_path, output_path) -> DecodeStats
"""
from .api import DecodeStats, decode_file, decode_lines, iter_lines, write_csv
from .armor import decode_armor, encode_armor
from .bits import read_signed, read_unsigned
from .decoder import decode, inspect
from .errors import DecodeError, NotAisSentence, Truncated, UnsupportedType
from .layouts import LAYOUTS, MessageType
from .message import CSV_FIELDS, DecodedMessage
from .sentence import extract_payload
from .text import decode_text

__all__ = [
    "decode",
    "inspect",
    "DecodedMessage",
    "CSV_FIELDS",
    "DecodeError",
    "NotAisSentence",
    "Truncated",
    "UnsupportedType",
    "MessageType",
    "LAYOUTS",
    "extract_payload",
    "decode_armor",
    "encode_armor",
    "read_unsigned",
    "read_signed",
    "decode_text",
    "DecodeStats",
    "decode_lines",
    "decode_file",
    "iter_lines",
    "write_csv",
]
