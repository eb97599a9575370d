"""Best single buy-then-sell profit over a series of prices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def max_profit_brute(prices: Sequence[int]) -> int:
    """Try every buy/sell pair; return the best profit, never below zero."""
    return max((sell - buy for buy, sell in combinations(prices, 2)), default=0) if len(prices) > 1 and max(
        sell - buy for buy, sell in combinations(prices, 2)
    ) > 0 else 0


def max_profit(prices: Sequence[int]) -> int:
    """Track the lowest price so far; return the best profit, never below zero."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best