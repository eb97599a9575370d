"""Longest prefix shared by every string in a collection."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile


def longest_common_prefix_brute(strs: Sequence[str]) -> str:
    """Compare each character of the first string against all the others."""
    if not strs:
        return ""
    first, *rest = strs
    for i, ch in enumerate(first):
        if any(i >= len(other) or other[i] != ch for other in rest):
            return first[:i]
    return first


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Compare only the smallest and largest strings in sorted order.

    The input is left unchanged.
    """
    if not strs:
        return ""
    first, last = min(strs), max(strs)
    shared = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(first, last)))
    return first[:shared]