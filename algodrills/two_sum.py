"""Find two positions whose values add up to a target."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def two_sum_brute(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Try every pair of positions in order; return the first match or None."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Single pass with a value-to-index map; return the first match or None.

    The second index is the earliest position that completes a pair; the
    first is the latest earlier position holding the complement.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None