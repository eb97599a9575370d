"""Count islands of land cells joined horizontally or vertically."""

from __future__ import annotations

from collections.abc import Sequence

Grid = Sequence[Sequence[str]]

LAND = "1"
WATER = "0"


def _flood(land: set[tuple[int, int]], start: tuple[int, int]) -> None:
    """Remove every cell connected to ``start`` from ``land``."""
    stack = [start]
    land.discard(start)
    while stack:
        r, c = stack.pop()
        for neighbour in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if neighbour in land:
                land.discard(neighbour)
                stack.append(neighbour)


def num_islands(grid: Grid) -> int:
    """Return the number of islands in a grid of ``"1"`` and ``"0"`` cells.

    An island starts at a ``"1"`` cell and spreads to every orthogonally
    adjacent cell that is not ``"0"``. The grid itself is left unchanged.
    """
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell != WATER
    }
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == LAND and (r, c) in land:
                _flood(land, (r, c))
                count += 1
    return count