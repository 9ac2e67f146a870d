"""
Per-message-type field layouts.

Each supported message type is described by a MessageLayout: the minimum
bitstream length it needs and an ordered tuple of entries. An entry is one of

  Field     a numeric or text field at a fixed bit window, with an optional
            normalizer applied to the raw value
  Position  a longitude/latitude pair sharing one precision
  Dispatch  a selector window whose value picks a sub-layout (message 24)

Offsets are zero-origin bit positions into the dearmored payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .constants import (
    HEADER_BITS,
    BITS_PER_CHAR,
    LONG_RANGE_SOG_NOT_AVAILABLE,
    LONG_RANGE_COG_LIMIT,
    NAME_EXTENSION_MIN_BITS,
)
from .normalize import (
    Precision,
    HIGH_PRECISION,
    LOW_PRECISION,
    normalize_rate_of_turn,
    normalize_speed,
    normalize_course,
    normalize_heading,
    normalize_second,
    normalize_draught,
    normalize_altitude,
)


class MessageType(IntEnum):
    POSITION_REPORT_CLASS_A = 1
    POSITION_REPORT_CLASS_A_ASSIGNED = 2
    POSITION_REPORT_CLASS_A_RESPONSE = 3
    BASE_STATION_REPORT = 4
    STATIC_AND_VOYAGE_DATA = 5
    BINARY_ADDRESSED = 6
    BINARY_ACKNOWLEDGE = 7
    BINARY_BROADCAST = 8
    SAR_AIRCRAFT_POSITION = 9
    UTC_DATE_INQUIRY = 10
    UTC_DATE_RESPONSE = 11
    ADDRESSED_SAFETY = 12
    SAFETY_ACKNOWLEDGE = 13
    SAFETY_BROADCAST = 14
    INTERROGATION = 15
    ASSIGNMENT_MODE_COMMAND = 16
    DGNSS_BROADCAST = 17
    POSITION_REPORT_CLASS_B = 18
    EXTENDED_POSITION_REPORT_CLASS_B = 19
    DATA_LINK_MANAGEMENT = 20
    AID_TO_NAVIGATION = 21
    CHANNEL_MANAGEMENT = 22
    GROUP_ASSIGNMENT_COMMAND = 23
    STATIC_DATA_REPORT = 24
    SINGLE_SLOT_BINARY = 25
    MULTI_SLOT_BINARY = 26
    LONG_RANGE_BROADCAST = 27


@dataclass(frozen=True)
class FieldWindow:
    start: int
    length: int
    signed: bool = False

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class Field:
    name: str
    window: FieldWindow
    kind: str = 'unsigned'  # 'unsigned', 'signed' or 'text'
    convert: Optional[Callable[[int], Any]] = None
    min_bits: int = 0       # only decoded when the stream has this many bits


@dataclass(frozen=True)
class Position:
    longitude: FieldWindow
    latitude: FieldWindow
    precision: Precision


@dataclass(frozen=True)
class Dispatch:
    selector: FieldWindow
    variants: Mapping[int, Tuple["Entry", ...]] = field(default_factory=dict)


Entry = Union[Field, Position, Dispatch]


@dataclass(frozen=True)
class MessageLayout:
    min_bits: int
    entries: Tuple[Entry, ...] = ()


def uint(name: str, start: int, length: int, convert: Optional[Callable[[int], Any]] = None) -> Field:
    return Field(name, FieldWindow(start, length), 'unsigned', convert)


def sint(name: str, start: int, length: int, convert: Optional[Callable[[int], Any]] = None) -> Field:
    return Field(name, FieldWindow(start, length, signed=True), 'signed', convert)


def text(name: str, start: int, num_chars: int, min_bits: int = 0) -> Field:
    return Field(name, FieldWindow(start, num_chars * BITS_PER_CHAR), 'text', min_bits=min_bits)


def position(lon_start: int, lat_start: int, precision: Precision) -> Position:
    if precision is HIGH_PRECISION:
        lon_bits, lat_bits = 28, 27
    else:
        lon_bits, lat_bits = 18, 17
    return Position(
        FieldWindow(lon_start, lon_bits, signed=True),
        FieldWindow(lat_start, lat_bits, signed=True),
        precision,
    )


def dimensions(start: int) -> Tuple[Field, ...]:
    """Reference point to bow/stern (9 bits each) and port/starboard (6 bits each)."""
    return (
        uint("dim_a", start, 9),
        uint("dim_b", start + 9, 9),
        uint("dim_c", start + 18, 6),
        uint("dim_d", start + 24, 6),
    )


# Message-type-specific layouts begin here.

class_a_position = MessageLayout(168, (
    uint("navigation_status",   38,  4),
    sint("rate_of_turn",        42,  8, normalize_rate_of_turn),
    uint("speed_over_ground",   50, 10, normalize_speed),
    uint("position_accuracy",   60,  1),
    position(61, 89, HIGH_PRECISION),
    uint("course_over_ground", 116, 12, normalize_course),
    uint("true_heading",       128,  9, normalize_heading),
    uint("utc_second",         137,  6, normalize_second),
    uint("raim_flag",          148,  1),
    uint("sync_state",         149,  2),
    uint("slot_timeout",       151,  3),
))

base_station = MessageLayout(168, (
    uint("position_accuracy",   78,  1),
    position(79, 107, HIGH_PRECISION),
    uint("raim_flag",          148,  1),
))

# The 4-bit EPFD fix type at 270 is reported through position_accuracy.
static_and_voyage = MessageLayout(424, (
    uint("ais_version",         38,  2),
    uint("imo",                 40, 30),
    text("callsign",            70,  7),
    text("ship_name",          112, 20),
    uint("ship_type",          232,  8),
    *dimensions(240),
    uint("position_accuracy",  270,  4),
    uint("draught",            294,  8, normalize_draught),
    text("destination",        302, 20),
    uint("dte",                422,  1),
))

sar_aircraft = MessageLayout(168, (
    uint("altitude",            38, 12, normalize_altitude),
    uint("speed_over_ground",   50, 10, normalize_speed),
    uint("position_accuracy",   60,  1),
    position(61, 89, HIGH_PRECISION),
    uint("course_over_ground", 116, 12, normalize_course),
    uint("utc_second",         128,  6, normalize_second),
    uint("dte",                142,  1),
    uint("raim_flag",          147,  1),
))

dgnss_broadcast = MessageLayout(80, (
    position(40, 58, LOW_PRECISION),
))

class_b_kinematics = (
    uint("speed_over_ground",   46, 10, normalize_speed),
    uint("position_accuracy",   56,  1),
    position(57, 85, HIGH_PRECISION),
    uint("course_over_ground", 112, 12, normalize_course),
    uint("true_heading",       124,  9, normalize_heading),
    uint("utc_second",         133,  6, normalize_second),
)

class_b_position = MessageLayout(168, class_b_kinematics + (
    uint("raim_flag",          147,  1),
    uint("sync_state",         149,  2),
    uint("slot_timeout",       151,  3),
))

class_b_extended = MessageLayout(312, class_b_kinematics + (
    text("ship_name",          143, 20),
    uint("ship_type",          263,  8),
    *dimensions(271),
    uint("raim_flag",          305,  1),
    uint("dte",                306,  1),
))

aid_to_navigation = MessageLayout(272, (
    uint("aid_type",            38,  5),
    text("ship_name",           43, 20),
    uint("position_accuracy",  163,  1),
    position(164, 192, HIGH_PRECISION),
    *dimensions(219),
    uint("utc_second",         253,  6, normalize_second),
    uint("off_position",       259,  1),
    uint("raim_flag",          268,  1),
    text("name_extension",     272, 14, min_bits=NAME_EXTENSION_MIN_BITS),
))

# Part A carries the name, part B the type, call sign and dimensions.
static_data_report = MessageLayout(168, (
    Dispatch(FieldWindow(38, 2), {
        0: (
            text("ship_name",       40, 20),
        ),
        1: (
            uint("ship_type",       40,  8),
            text("callsign",        90,  7),
            *dimensions(132),
        ),
    }),
))

long_range_broadcast = MessageLayout(96, (
    uint("position_accuracy",   38,  1),
    uint("raim_flag",           39,  1),
    uint("navigation_status",   40,  4),
    position(44, 62, LOW_PRECISION),
    uint("speed_over_ground",   79,  6,
         partial(normalize_speed, not_available=LONG_RANGE_SOG_NOT_AVAILABLE, scale=1.0)),
    uint("course_over_ground",  85,  9,
         partial(normalize_course, limit=LONG_RANGE_COG_LIMIT, scale=1.0)),
    uint("gnss",                94,  1),
))

# Message-type-specific layouts end here.

HEADER_ONLY = MessageLayout(HEADER_BITS)

_DECODED: Dict[MessageType, MessageLayout] = {
    MessageType.POSITION_REPORT_CLASS_A: class_a_position,
    MessageType.POSITION_REPORT_CLASS_A_ASSIGNED: class_a_position,
    MessageType.POSITION_REPORT_CLASS_A_RESPONSE: class_a_position,
    MessageType.BASE_STATION_REPORT: base_station,
    MessageType.STATIC_AND_VOYAGE_DATA: static_and_voyage,
    MessageType.SAR_AIRCRAFT_POSITION: sar_aircraft,
    MessageType.UTC_DATE_RESPONSE: base_station,
    MessageType.DGNSS_BROADCAST: dgnss_broadcast,
    MessageType.POSITION_REPORT_CLASS_B: class_b_position,
    MessageType.EXTENDED_POSITION_REPORT_CLASS_B: class_b_extended,
    MessageType.AID_TO_NAVIGATION: aid_to_navigation,
    MessageType.STATIC_DATA_REPORT: static_data_report,
    MessageType.LONG_RANGE_BROADCAST: long_range_broadcast,
}

# Types without decode rules still yield a header-only record.
LAYOUTS: Dict[MessageType, MessageLayout] = {t: _DECODED.get(t, HEADER_ONLY) for t in MessageType}
