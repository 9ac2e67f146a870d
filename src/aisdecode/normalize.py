"""
Sentinel handling and unit conversion for navigational fields.

Every function maps a raw integer taken from the bitstream to the value that is
stored on a DecodedMessage. The same function is used wherever a field recurs
across message types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    ROT_NOT_AVAILABLE,
    ROT_FAST_LEFT,
    ROT_FAST_RIGHT,
    ROT_DIVISOR,
    SOG_NOT_AVAILABLE,
    SOG_SCALE,
    COG_LIMIT,
    COG_SCALE,
    HEADING_NOT_AVAILABLE,
    SECOND_NOT_AVAILABLE,
    ALTITUDE_NOT_AVAILABLE,
    HIGH_PRECISION_SCALE,
    LOW_PRECISION_SCALE,
    LON_NOT_AVAILABLE,
    LAT_NOT_AVAILABLE,
    LOW_LON_NOT_AVAILABLE,
    LOW_LAT_NOT_AVAILABLE,
)


@dataclass(frozen=True)
class Precision:
    scale: float
    lon_not_available: int
    lat_not_available: int


HIGH_PRECISION = Precision(HIGH_PRECISION_SCALE, LON_NOT_AVAILABLE, LAT_NOT_AVAILABLE)
LOW_PRECISION = Precision(LOW_PRECISION_SCALE, LOW_LON_NOT_AVAILABLE, LOW_LAT_NOT_AVAILABLE)


def normalize_rate_of_turn(raw: int) -> str:
    """Signed ROT in degrees/minute from the raw ROT_AIS byte.

    -128 is "not available", -127/127 are turning left/right at more than
    5 degrees per 30 s; these are rendered as fixed markers.
    """
    if raw == ROT_NOT_AVAILABLE:
        return "-128.0"
    if raw == ROT_FAST_LEFT:
        return "-720.0"
    if raw == ROT_FAST_RIGHT:
        return "+127.0"
    if raw == 0:
        return "+0.0"
    degrees = (abs(raw) / ROT_DIVISOR) ** 2
    sign = "+" if raw > 0 else "-"
    return f"{sign}{degrees:.1f}"


def normalize_speed(raw: int, not_available: int = SOG_NOT_AVAILABLE, scale: float = SOG_SCALE) -> str:
    if raw == not_available:
        return "0.0"
    return f"{raw / scale:.1f}"


def normalize_course(raw: int, limit: int = COG_LIMIT, scale: float = COG_SCALE) -> str:
    if raw >= limit:
        return "360.0"
    return f"{raw / scale:.1f}"


def normalize_coordinate(raw: int, axis: str, precision: Precision) -> Optional[Tuple[str, str]]:
    """Return (magnitude in degrees with 7 decimals, hemisphere) or None.

    axis is 'lon' or 'lat'. None means the raw value is the "not available"
    marker for that axis and precision.
    """
    if axis == 'lon':
        if raw == precision.lon_not_available:
            return None
        hemisphere = 'E' if raw >= 0 else 'W'
    elif axis == 'lat':
        if raw == precision.lat_not_available:
            return None
        hemisphere = 'N' if raw >= 0 else 'S'
    else:
        raise ValueError(f"unknown axis: {axis!r}")
    degrees = raw / precision.scale
    return f"{abs(degrees):.7f}", hemisphere


def normalize_heading(raw: int) -> int:
    # 511 is kept as-is; it already means "not available"
    return HEADING_NOT_AVAILABLE if raw == HEADING_NOT_AVAILABLE else raw


def normalize_second(raw: int) -> int:
    """UTC second 0..59; 60 and the positioning-mode codes 61..63 collapse to 60."""
    return SECOND_NOT_AVAILABLE if raw >= SECOND_NOT_AVAILABLE else raw


def normalize_draught(raw: int) -> str:
    if raw == 0:
        return "0"
    return f"{raw / 10.0:.1f}"


def normalize_altitude(raw: int) -> int:
    return 0 if raw == ALTITUDE_NOT_AVAILABLE else raw
