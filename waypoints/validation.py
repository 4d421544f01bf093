"""
Purpose: Waypoint ingestion rules.
What it does:
- Turns raw user input (name, latitude, longitude) into a Waypoint
- Rejects blank names, non numeric coordinates and out of range coordinates

The distance code downstream does not check ranges, so anything that reaches
build_matrix must have passed through here first.
"""
from __future__ import annotations

import math
from typing import Any, Optional

from .models import Waypoint

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class WaypointValidationError(ValueError):
    """Raised when user supplied waypoint data cannot be accepted."""
    pass


class CoordinateOutOfRangeError(WaypointValidationError):
    """Latitude or longitude outside the valid geographic range."""
    pass


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_coordinates(latitude: float, longitude: float) -> None:
    """
    Range check only. Raises CoordinateOutOfRangeError on the first bad value.
    """
    if latitude < MIN_LATITUDE or latitude > MAX_LATITUDE:
        raise CoordinateOutOfRangeError("Latitude must be between -90 and 90")

    if longitude < MIN_LONGITUDE or longitude > MAX_LONGITUDE:
        raise CoordinateOutOfRangeError("Longitude must be between -180 and 180")


def parse_waypoint(
    name: Optional[str],
    latitude: Any,
    longitude: Any,
    waypoint_id: Optional[str] = None,
) -> Waypoint:
    """
    Validate raw input and build a Waypoint.

    Checks run in this order and the first failure wins:
      1) name must be non blank (it is stripped)
      2) both coordinates must parse as finite numbers
      3) latitude in [-90, 90], longitude in [-180, 180]

    Args:
        name: display name
        latitude, longitude: numbers or numeric strings (form input)
        waypoint_id: optional caller supplied id; a uuid is generated otherwise

    Returns:
        Waypoint with the stripped name and float coordinates.
    """
    clean_name = name.strip() if isinstance(name, str) else ""
    if not clean_name:
        raise WaypointValidationError("Location name is required")

    lat = _to_float(latitude)
    lon = _to_float(longitude)
    if lat is None or lon is None:
        raise WaypointValidationError("Coordinates must be valid numbers")

    validate_coordinates(lat, lon)

    return Waypoint.new(clean_name, lat, lon, waypoint_id=waypoint_id)
