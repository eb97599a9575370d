"""Detect whether a sequence holds any repeated value."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from itertools import combinations


def contains_duplicate_brute(nums: Sequence[Hashable]) -> bool:
    """Compare every pair of elements."""
    return any(a == b for a, b in combinations(nums, 2))


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Remember seen values and stop at the first repeat."""
    seen: set[Hashable] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False