"""List the numbers in 1..n that do not appear in a list of length n."""

from __future__ import annotations

from collections.abc import Sequence


def find_disappeared_numbers_brute(nums: Sequence[int]) -> list[int]:
    """Search the list for each of 1..n in turn."""
    return [value for value in range(1, len(nums) + 1) if value not in nums]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Mark each value seen, then collect the unmarked ones.

    Every element must lie in 1..n; otherwise ValueError is raised.
    The input is left unchanged.
    """
    n = len(nums)
    seen = [False] * n
    for value in nums:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} outside range 1..{n}")
        seen[value - 1] = True
    return [index + 1 for index, marked in enumerate(seen) if not marked]