from __future__ import annotations


class DecodeError(ValueError):
    """Base class for a line that produced no DecodedMessage."""
    reason = "decode_error"


class NotAisSentence(DecodeError):
    reason = "not_ais_sentence"

    def __init__(self, line: str):
        super().__init__(f"not an AIVDM/AIVDO sentence: {line[:40]!r}")
        self.line = line


class Truncated(DecodeError):
    reason = "truncated"

    def __init__(self, bit_length: int, required: int, message_type: int | None = None):
        what = "header" if message_type is None else f"message type {message_type}"
        super().__init__(f"{bit_length} bits is too short for {what} (need {required})")
        self.bit_length = bit_length
        self.required = required
        self.message_type = message_type


class UnsupportedType(DecodeError):
    reason = "unsupported_type"

    def __init__(self, message_type: int):
        super().__init__(f"message type {message_type} outside 1..27")
        self.message_type = message_type
