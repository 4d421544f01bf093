"""
Purpose: In-memory itinerary state (the list the user is editing).
What it does:
- Holds waypoints in entry order
- Holds the last optimized tour, and drops it whenever the list changes
- Runs the planner on demand

Rule: Itinerary owns the list and its lifecycle, the tour package owns the
ordering logic.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from tour.heuristic import InvalidTourInput, RandomSource
from tour.planner import TourResult, plan_tour
from tour.policy import MIN_WAYPOINTS_FOR_TOUR
from .models import Waypoint

logger = logging.getLogger(__name__)


@dataclass
class Itinerary:
    _waypoints: List[Waypoint] = field(default_factory=list)
    _optimized: Optional[TourResult] = None

    @property
    def waypoints(self) -> List[Waypoint]:
        return list(self._waypoints)

    @property
    def optimized(self) -> Optional[TourResult]:
        return self._optimized

    def __len__(self) -> int:
        return len(self._waypoints)

    def add_waypoint(self, waypoint: Waypoint) -> None:
        """
        Append a waypoint. Adding an id that is already present is a no-op.
        """
        if any(existing.id == waypoint.id for existing in self._waypoints):
            #idempotency : dont double insert
            return
        self._waypoints.append(waypoint)
        self._optimized = None

    def remove_waypoint(self, waypoint_id: str) -> bool:
        """
        Remove by id. Returns False when the id is unknown.
        """
        remaining = [waypoint for waypoint in self._waypoints if waypoint.id != waypoint_id]
        if len(remaining) == len(self._waypoints):
            return False
        self._waypoints = remaining
        self._optimized = None
        return True

    def optimize(self, rng: Optional[RandomSource] = None) -> TourResult:
        """
        Plan a tour over the current waypoints and remember it.
        """
        if len(self._waypoints) < MIN_WAYPOINTS_FOR_TOUR:
            raise InvalidTourInput(
                f"at least {MIN_WAYPOINTS_FOR_TOUR} waypoints are required to calculate a tour"
            )

        self._optimized = plan_tour(self._waypoints, rng=rng)
        logger.debug("itinerary optimized: %s", [waypoint.name for waypoint in self._optimized.waypoints])
        return self._optimized
