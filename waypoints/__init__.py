"""
Waypoints domain package.

Public API:
- Domain models: Waypoint, LatLon
- Ingestion: parse_waypoint, validate_coordinates
- (Itinerary lives in waypoints.itinerary; it depends on the tour package,
  which itself imports waypoints.models, so it is not re-exported here.)
"""
from .models import LatLon, Waypoint
from .validation import (
    CoordinateOutOfRangeError,
    WaypointValidationError,
    parse_waypoint,
    validate_coordinates,
)

__all__ = ["LatLon",
           "Waypoint",
             "parse_waypoint",
             "validate_coordinates",
               "WaypointValidationError",
               "CoordinateOutOfRangeError",
               ]
