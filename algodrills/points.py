"""Minimum time to visit points in order, moving one step (possibly diagonal) per second."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

Point = Sequence[int]


def _require_points(points: Sequence[Point]) -> None:
    if not points:
        raise ValueError("at least one point is required")


def _step_towards(current: int, goal: int) -> int:
    if current < goal:
        return current + 1
    if current > goal:
        return current - 1
    return current


def min_time_to_visit_all_points_brute(points: Sequence[Point]) -> int:
    """Simulate the walk one step at a time. Raises ValueError on no points."""
    _require_points(points)
    time = 0
    for (x, y), (x2, y2) in pairwise(points):
        while (x, y) != (x2, y2):
            x = _step_towards(x, x2)
            y = _step_towards(y, y2)
            time += 1
    return time


def min_time_to_visit_all_points(points: Sequence[Point]) -> int:
    """Sum the Chebyshev distances between consecutive points.

    Raises ValueError on no points.
    """
    _require_points(points)
    return sum(
        max(abs(x2 - x1), abs(y2 - y1))
        for (x1, y1), (x2, y2) in pairwise(points)
    )