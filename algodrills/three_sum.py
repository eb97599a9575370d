"""Find every distinct triplet of numbers that sums to zero."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

Triplet = list[int]


def three_sum_brute(nums: Sequence[int]) -> list[Triplet]:
    """Check every triplet and return the distinct zero-sum ones, sorted.

    Each triplet is in ascending order. The list of triplets is in
    lexicographic order.
    """
    if len(nums) < 3:
        return []
    found = {
        tuple(sorted(triplet))
        for triplet in combinations(nums, 3)
        if sum(triplet) == 0
    }
    return [list(triplet) for triplet in sorted(found)]


def three_sum(nums: Sequence[int]) -> list[Triplet]:
    """Return the distinct zero-sum triplets using sorting and two pointers.

    The input is left unchanged. Each triplet is in ascending order, and
    the triplets come out in lexicographic order.
    """
    values = sorted(nums)
    n = len(values)
    result: list[Triplet] = []
    if n < 3:
        return result

    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, n - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                result.append([first, values[lo], values[hi]])
                lo += 1
                hi -= 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
                while lo < hi and values[hi] == values[hi + 1]:
                    hi -= 1
    return result