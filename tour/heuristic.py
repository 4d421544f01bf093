"""
Purpose: Randomized nearest-neighbor tour construction.
What it does:
- Picks a random start point
- Repeatedly extends the path to a close unvisited point:
    * with probability GREEDY_PROBABILITY -> the closest one
    * otherwise -> a uniform pick among the RANDOM_WINDOW closest
- Returns an open path (no return to start) covering every index once

Randomness is always injected. Given the same matrix and the same sequence of
values from `rng`, the output is identical.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Set, Tuple

from .policy import GREEDY_PROBABILITY, RANDOM_WINDOW

logger = logging.getLogger(__name__)

# Anything returning uniform floats in [0, 1) on each call,
# e.g. random.Random(42).random
RandomSource = Callable[[], float]

# permutation of 0..N-1, open path
Tour = List[int]


class InvalidTourInput(ValueError):
    """Matrix shape (or waypoint count) cannot produce a tour."""
    pass


def _validate_square(matrix: Sequence[Sequence[float]]) -> int:
    if matrix is None:
        raise InvalidTourInput("distance matrix is required")

    n = len(matrix)
    for row_index, row in enumerate(matrix):
        try:
            row_length = len(row)
        except TypeError:
            raise InvalidTourInput(f"matrix row {row_index} is not a sequence") from None
        if row_length != n:
            raise InvalidTourInput(
                f"distance matrix must be square: row {row_index} has {row_length} columns, expected {n}"
            )
    return n


def _pick_index(rng: RandomSource, size: int) -> int:
    # clamp so a misbehaving source returning 1.0 cannot index past the end
    return min(int(rng() * size), size - 1)


def build_tour(matrix: Sequence[Sequence[float]], rng: RandomSource) -> Tour:
    """
    Build a visiting order over the points of `matrix`.

    Args:
        matrix: NxN distances, matrix[i][j] = distance from i to j
        rng: random source, called once for the start and then once or twice per step

    Returns:
        List of indices, a permutation of range(N). Empty for N = 0.

    Raises:
        InvalidTourInput if the matrix is not square. Nothing is drawn from
        `rng` before the shape check passes.
    """
    n = _validate_square(matrix)
    if n == 0:
        return []

    start = _pick_index(rng, n)
    path: Tour = [start]
    visited: Set[int] = {start}

    while len(path) < n:
        last = path[-1]

        candidates: List[Tuple[int, float]] = [
            (index, matrix[last][index]) for index in range(n) if index not in visited
        ]
        # sorted() is stable, equal distances keep index order
        candidates.sort(key=lambda candidate: candidate[1])

        if rng() < GREEDY_PROBABILITY:
            next_index = candidates[0][0]
        else:
            top_n = min(RANDOM_WINDOW, len(candidates))
            next_index = candidates[_pick_index(rng, top_n)][0]

        path.append(next_index)
        visited.add(next_index)

    logger.debug("built tour over %d points starting at %d", n, start)
    return path
