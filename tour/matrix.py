"""
Purpose: Pairwise distance matrix for a list of waypoints.
What it does:
- Builds an NxN matrix of haversine distances (km), zero on the diagonal
- Sums the legs of an open path over such a matrix

Rule: Pure functions, no caching between calls.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from waypoints.models import LatLon, Waypoint
from .distance import haversine_km

logger = logging.getLogger(__name__)

# matrix[i][j] = km from point i to point j
DistanceMatrix = List[List[float]]


def build_matrix_from_coordinates(coordinates: Sequence[LatLon]) -> DistanceMatrix:
    """
    Same as build_matrix but over raw (lat, lon) tuples.
    """
    n = len(coordinates)
    matrix: DistanceMatrix = [[0.0 for _ in range(n)] for _ in range(n)]

    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            matrix[i][j] = haversine_km(coordinates[i], coordinates[j])

    logger.debug("built %dx%d distance matrix", n, n)
    return matrix


def build_matrix(waypoints: Sequence[Waypoint]) -> DistanceMatrix:
    """
    Build the NxN distance matrix for `waypoints` in their given order.

    Empty input gives an empty matrix. Callers that want a real tour should
    reject fewer than two waypoints before going on to build_tour.
    """
    return build_matrix_from_coordinates([waypoint.coordinates for waypoint in waypoints])


def path_length_km(matrix: DistanceMatrix, tour: Sequence[int]) -> float:
    """
    Total length of the open path `tour` (no return leg to the start).
    """
    return sum(matrix[tour[step]][tour[step + 1]] for step in range(len(tour) - 1))
