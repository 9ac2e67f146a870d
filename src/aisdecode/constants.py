from __future__ import annotations

"""
AIVDM/AIVDO framing constants, six-bit armor offsets and the reserved
"not available" values used by the message layouts.

Values follow ITU-R M.1371 and the AIVDM/AIVDO protocol notes published by
the GPSD project.
"""

# Sentence framing
SENTENCE_TAGS = ("!AIVDM", "!AIVDO")
PAYLOAD_FIELD = 5        # zero-based comma field holding the armored payload

# Six-bit armor
ARMOR_OFFSET = 48        # '0'
ARMOR_GAP = 8            # skip between 'W' and '`'
ARMOR_GAP_THRESHOLD = 40
BITS_PER_CHAR = 6

# Common header: type(6) + repeat(2) + MMSI(30)
HEADER_BITS = 38
MIN_MESSAGE_TYPE = 1
MAX_MESSAGE_TYPE = 27

# Rate of turn
ROT_NOT_AVAILABLE = -128
ROT_FAST_LEFT = -127
ROT_FAST_RIGHT = 127
ROT_DIVISOR = 4.733

# Speed / course over ground
SOG_NOT_AVAILABLE = 1023
SOG_SCALE = 10.0
COG_LIMIT = 3600
COG_SCALE = 10.0
LONG_RANGE_SOG_NOT_AVAILABLE = 63
LONG_RANGE_COG_LIMIT = 360

HEADING_NOT_AVAILABLE = 511
SECOND_NOT_AVAILABLE = 60
ALTITUDE_NOT_AVAILABLE = 4095

# Positions in 1/10000 minute (high) and 1/10 minute (low) resolution
HIGH_PRECISION_SCALE = 600000.0
LOW_PRECISION_SCALE = 600.0
LON_NOT_AVAILABLE = 0x6791AC0       # 181 degrees
LAT_NOT_AVAILABLE = 0x3412140       # 91 degrees
LOW_LON_NOT_AVAILABLE = 0x1A838
LOW_LAT_NOT_AVAILABLE = 0xD548

# Optional trailing name extension on message 21
NAME_EXTENSION_MIN_BITS = 360
