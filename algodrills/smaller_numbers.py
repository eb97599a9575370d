"""For each element, count how many elements are strictly smaller."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

MAX_VALUE = 100


def smaller_numbers_than_current_brute(nums: Sequence[int]) -> list[int]:
    """Count smaller elements by comparing against every element."""
    return [sum(other < num for other in nums) for num in nums]


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """Count smaller elements with a frequency table over 0..100.

    Raises ValueError if any value lies outside that range.
    """
    counts = [0] * (MAX_VALUE + 1)
    for num in nums:
        if not 0 <= num <= MAX_VALUE:
            raise ValueError(f"value {num} outside range 0..{MAX_VALUE}")
        counts[num] += 1
    at_most = list(accumulate(counts))
    return [at_most[num - 1] if num > 0 else 0 for num in nums]