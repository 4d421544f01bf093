"""
Tour construction package.

Public API:
- haversine_km
- build_matrix
- build_tour, InvalidTourInput
- plan_tour, TourResult
"""

from .distance import haversine_km, EARTH_RADIUS_KM
from .matrix import DistanceMatrix, build_matrix, build_matrix_from_coordinates, path_length_km
from .heuristic import InvalidTourInput, RandomSource, Tour, build_tour
from .planner import TourResult, plan_tour

__all__ = [
    "haversine_km",
    "EARTH_RADIUS_KM",
    "DistanceMatrix",
    "build_matrix",
    "build_matrix_from_coordinates",
    "path_length_km",
    "InvalidTourInput",
    "RandomSource",
    "Tour",
    "build_tour",
    "TourResult",
    "plan_tour",
]
