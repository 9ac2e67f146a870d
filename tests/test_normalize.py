import pytest

from aisdecode.normalize import (
    HIGH_PRECISION,
    LOW_PRECISION,
    normalize_rate_of_turn,
    normalize_speed,
    normalize_course,
    normalize_coordinate,
    normalize_heading,
    normalize_second,
    normalize_draught,
    normalize_altitude,
)


@pytest.mark.parametrize("raw,expected", [
    (0, "+0.0"),
    (127, "+127.0"),
    (-128, "-128.0"),
    (-127, "-720.0"),
    (10, "+4.5"),      # (10 / 4.733)^2 = 4.464
    (-10, "-4.5"),
    (5, "+1.1"),       # (5 / 4.733)^2 = 1.116
    (1, "+0.0"),       # (1 / 4.733)^2 = 0.045
])
def test_rate_of_turn(raw, expected):
    assert normalize_rate_of_turn(raw) == expected


def test_rate_of_turn_keeps_sign_symmetric():
    for r in range(1, 127):
        pos = normalize_rate_of_turn(r)
        neg = normalize_rate_of_turn(-r)
        assert pos.startswith("+") and neg.startswith("-")
        assert pos[1:] == neg[1:]


@pytest.mark.parametrize("raw,expected", [(1023, "0.0"), (0, "0.0"), (102, "10.2"), (1022, "102.2")])
def test_speed_tenths(raw, expected):
    assert normalize_speed(raw) == expected


def test_long_range_speed_whole_knots():
    assert normalize_speed(63, not_available=63, scale=1.0) == "0.0"
    assert normalize_speed(17, not_available=63, scale=1.0) == "17.0"


@pytest.mark.parametrize("raw,expected", [(0, "0.0"), (3599, "359.9"), (3600, "360.0"), (4095, "360.0")])
def test_course_tenths(raw, expected):
    assert normalize_course(raw) == expected


def test_long_range_course_whole_degrees():
    assert normalize_course(359, limit=360, scale=1.0) == "359.0"
    assert normalize_course(360, limit=360, scale=1.0) == "360.0"
    assert normalize_course(511, limit=360, scale=1.0) == "360.0"


def test_coordinate_sentinels():
    assert normalize_coordinate(0x6791AC0, 'lon', HIGH_PRECISION) is None
    assert normalize_coordinate(0x3412140, 'lat', HIGH_PRECISION) is None
    assert normalize_coordinate(0x1A838, 'lon', LOW_PRECISION) is None
    assert normalize_coordinate(0xD548, 'lat', LOW_PRECISION) is None
    # the longitude sentinel is an ordinary latitude value and vice versa
    assert normalize_coordinate(0x3412140, 'lon', HIGH_PRECISION) is not None


def test_coordinate_hemispheres_and_scale():
    assert normalize_coordinate(0, 'lon', HIGH_PRECISION) == ("0.0000000", "E")
    assert normalize_coordinate(-600000, 'lon', HIGH_PRECISION) == ("1.0000000", "W")
    assert normalize_coordinate(-300000, 'lat', HIGH_PRECISION) == ("0.5000000", "S")
    assert normalize_coordinate(758091, 'lat', HIGH_PRECISION) == ("1.2634850", "N")
    assert normalize_coordinate(-6000, 'lon', LOW_PRECISION) == ("10.0000000", "W")
    assert normalize_coordinate(30, 'lat', LOW_PRECISION) == ("0.0500000", "N")


def test_coordinate_unknown_axis():
    with pytest.raises(ValueError):
        normalize_coordinate(0, 'alt', HIGH_PRECISION)


def test_heading_second_draught_altitude():
    assert normalize_heading(511) == 511
    assert normalize_heading(359) == 359
    assert normalize_second(59) == 59
    assert [normalize_second(s) for s in (60, 61, 62, 63)] == [60, 60, 60, 60]
    assert normalize_draught(0) == "0"
    assert normalize_draught(123) == "12.3"
    assert normalize_altitude(4095) == 0
    assert normalize_altitude(1000) == 1000
