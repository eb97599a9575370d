"""Squares of a sorted sequence, returned in ascending order."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def sorted_squares_brute(nums: Iterable[int]) -> list[int]:
    """Square every element, then sort."""
    return sorted(num * num for num in nums)


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Merge from both ends of an ascending sequence, largest square first."""
    lo, hi = 0, len(nums) - 1
    descending: list[int] = []
    while lo <= hi:
        low_sq = nums[lo] * nums[lo]
        high_sq = nums[hi] * nums[hi]
        if low_sq > high_sq:
            descending.append(low_sq)
            lo += 1
        else:
            descending.append(high_sq)
            hi -= 1
    descending.reverse()
    return descending