"""
Purpose: Domain models for the Waypoints capability.
What it does:
- Defines the coordinate type used everywhere: LatLon = (lat, lon)
- Defines Waypoint (id, name, coordinates)

The tour engine only ever reads `coordinates`; id and name are carried through
so the caller can print a labelled tour.

Rule: No distance math, no validation. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
import uuid

# internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Waypoint:
    """
    A named geographic point to be visited.
    """
    id: str
    name: str
    coordinates: LatLon

    @property
    def lat(self) -> float:
        return self.coordinates[0]

    @property
    def lon(self) -> float:
        return self.coordinates[1]

    @classmethod
    def new(
        cls,
        name: str,
        lat: float,
        lon: float,
        waypoint_id: Optional[str] = None,
    ) -> Waypoint:
        #uuid for unique waypoint id generation when the caller has none
        return cls(
            id=waypoint_id or str(uuid.uuid4()),
            name=name,
            coordinates=(float(lat), float(lon)),
        )
