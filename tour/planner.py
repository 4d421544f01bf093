"""
Purpose: The tour "orchestrator" (single entry point for callers with waypoints).
What it does:
- takes waypoints in entry order
- builds the distance matrix (matrix.py)
- runs the heuristic (heuristic.py)
- maps the index permutation back onto the waypoint objects
- reports the straight-line length of the resulting open path

Rule: Planner is the only file callers holding Waypoint objects should need.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from waypoints.models import Waypoint
from .heuristic import RandomSource, Tour, build_tour
from .matrix import build_matrix, path_length_km

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TourResult:
    """
    Output of a planning run.
    """
    waypoints: List[Waypoint]
    order: Tour
    distance_km: float = 0.0


def plan_tour(waypoints: Sequence[Waypoint], rng: Optional[RandomSource] = None) -> TourResult:
    """
    Order `waypoints` into a short open tour.

    With zero or one waypoint there is nothing to order: the input comes back
    unchanged and `rng` is never called.

    Parameters
    ----------
    waypoints:
        Validated waypoints (see waypoints.validation). Ids should be unique.
    rng:
        Random source for the heuristic. When omitted a fresh random.Random()
        is created for this call only.

    Returns
    -------
    TourResult with the reordered waypoints, the index order and the path length in km.
    """
    if len(waypoints) <= 1:
        return TourResult(waypoints=list(waypoints), order=list(range(len(waypoints))))

    if rng is None:
        rng = random.Random().random

    matrix = build_matrix(waypoints)
    order = build_tour(matrix, rng)
    distance_km = path_length_km(matrix, order)

    logger.info("planned tour over %d waypoints (%.2f km)", len(waypoints), distance_km)

    return TourResult(
        waypoints=[waypoints[index] for index in order],
        order=order,
        distance_km=distance_km,
    )
