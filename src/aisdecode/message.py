from __future__ import annotations

from dataclasses import dataclass, fields, astuple
from typing import Tuple


@dataclass(frozen=True)
class DecodedMessage:
    """One decoded AIS message.

    Superset of the fields of every supported message type. Fields that a
    given type does not carry keep the defaults below.
    """
    # identity
    message_type: int = 0
    repeat_indicator: int = 0
    mmsi: int = 0
    # kinematics
    navigation_status: int = -1
    rate_of_turn: str = "0"
    speed_over_ground: str = "0.0"
    position_accuracy: int = 0
    # position
    longitude: str = "0"
    lon_hemisphere: str = "E"
    latitude: str = "0"
    lat_hemisphere: str = "N"
    course_over_ground: str = "0.0"
    true_heading: int = 511
    # timing / communication state
    utc_second: int = 60
    sync_state: int = 0
    slot_timeout: int = 0
    raim_flag: int = 0
    # static and voyage data (5, 19, 24)
    ship_name: str = ""
    ship_type: int = 0
    callsign: str = ""
    destination: str = ""
    draught: str = "0"
    imo: int = 0
    dim_a: int = 0
    dim_b: int = 0
    dim_c: int = 0
    dim_d: int = 0
    ais_version: int = 0
    dte: int = 0
    # SAR aircraft (9)
    altitude: int = 0
    # aid to navigation (21)
    aid_type: int = 0
    name_extension: str = ""
    off_position: int = 0
    # long range (27)
    gnss: int = 0
    has_position: bool = False

    def as_row(self) -> Tuple:
        """Field values in CSV_FIELDS order, flags rendered as 0/1."""
        return tuple(int(v) if isinstance(v, bool) else v for v in astuple(self))


CSV_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(DecodedMessage))
