"""Length of the longest strictly rising-then-falling run in a sequence."""

from __future__ import annotations

from collections.abc import Sequence


def _is_peak(arr: Sequence[int], i: int) -> bool:
    return arr[i - 1] < arr[i] > arr[i + 1]


def _mountain_bounds(arr: Sequence[int], peak: int) -> tuple[int, int]:
    """Return the outermost indices of the mountain around ``peak``."""
    left, right = peak - 1, peak + 1
    while left > 0 and arr[left - 1] < arr[left]:
        left -= 1
    last = len(arr) - 1
    while right < last and arr[right] > arr[right + 1]:
        right += 1
    return left, right


def longest_mountain_brute(arr: Sequence[int]) -> int:
    """Expand around every peak independently; return 0 if there is none."""
    best = 0
    for i in range(1, len(arr) - 1):
        if _is_peak(arr, i):
            left, right = _mountain_bounds(arr, i)
            best = max(best, right - left + 1)
    return best if best >= 3 else 0


def longest_mountain(arr: Sequence[int]) -> int:
    """Expand around peaks, skipping past each processed mountain."""
    best = 0
    i = 1
    while i < len(arr) - 1:
        if _is_peak(arr, i):
            left, right = _mountain_bounds(arr, i)
            best = max(best, right - left + 1)
            i = right
        else:
            i += 1
    return best if best >= 3 else 0