from __future__ import annotations

from typing import Optional

from .constants import SENTENCE_TAGS, PAYLOAD_FIELD


def extract_payload(line: str) -> Optional[str]:
    """Return the armored payload of an AIVDM/AIVDO sentence, or None.

    The payload is comma field 5. The fill-bit/checksum field that follows it
    is never part of the result. Tags are matched case-sensitively.
    """
    if not line.startswith(SENTENCE_TAGS):
        return None
    fields = line.split(",")
    if len(fields) <= PAYLOAD_FIELD:
        return None
    return fields[PAYLOAD_FIELD]
