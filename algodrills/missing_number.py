"""Find the one number missing from a list holding 1..n with a single gap."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def missing_number_brute(nums: Sequence[int], n: int) -> int:
    """Search the first ``n - 1`` elements for each of 1..n in turn.

    Returns the first value not found. Raises ValueError when every value
    in 1..n is present, which can only happen when ``n`` is below 1.
    """
    present = list(nums)[: max(n - 1, 0)]
    for candidate in range(1, n + 1):
        if candidate not in present:
            return candidate
    raise ValueError(f"no number missing from the range 1..{n}")


def _xor_all(values: Iterable[int]) -> int:
    return reduce(xor, values, 0)


def missing_number(nums: Iterable[int], n: int) -> int:
    """XOR 1..n with every element; the pairs cancel, leaving the gap."""
    return _xor_all(range(1, n + 1)) ^ _xor_all(nums)