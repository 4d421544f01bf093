import pytest

from waypoints.validation import (
    CoordinateOutOfRangeError,
    WaypointValidationError,
    parse_waypoint,
    validate_coordinates,
)


def test_valid_input_from_form_strings():
    waypoint = parse_waypoint("  Office ", "28.6139", "77.2090", waypoint_id="office")

    assert waypoint.id == "office"
    assert waypoint.name == "Office"
    assert waypoint.coordinates == (28.6139, 77.209)


def test_generated_id_when_missing():
    first = parse_waypoint("Home", 1, 2)
    second = parse_waypoint("Home", 1, 2)

    assert first.id and second.id
    assert first.id != second.id


@pytest.mark.parametrize("name", ["", "   ", None])
def test_name_required(name):
    with pytest.raises(WaypointValidationError, match="Location name is required"):
        parse_waypoint(name, 0, 0)


@pytest.mark.parametrize("lat, lon", [("abc", 0), (0, ""), (None, 1), (float("nan"), 0), (0, "inf")])
def test_coordinates_must_be_numbers(lat, lon):
    with pytest.raises(WaypointValidationError, match="Coordinates must be valid numbers"):
        parse_waypoint("X", lat, lon)


def test_latitude_range():
    with pytest.raises(CoordinateOutOfRangeError, match="Latitude must be between -90 and 90"):
        parse_waypoint("X", 90.5, 0)


def test_longitude_range():
    with pytest.raises(CoordinateOutOfRangeError, match="Longitude must be between -180 and 180"):
        parse_waypoint("X", 0, -180.01)


def test_bounds_are_inclusive():
    validate_coordinates(-90, -180)
    validate_coordinates(90, 180)


def test_range_error_is_a_validation_error():
    assert issubclass(CoordinateOutOfRangeError, WaypointValidationError)
    assert issubclass(WaypointValidationError, ValueError)
