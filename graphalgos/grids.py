"""Searches over rectangular grids: flood fill, enclaves, rotting oranges and regions."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

Cell = tuple[int, int]
T = TypeVar("T")

FRESH = 1
ROTTEN = 2
OPEN = "O"
CLOSED = "X"

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _neighbours(grid: Sequence[Sequence[Any]], row: int, col: int) -> Iterator[Cell]:
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def _cells(grid: Sequence[Sequence[Any]]) -> Iterator[Cell]:
    for r, line in enumerate(grid):
        for c in range(len(line)):
            yield r, c


def _border_cells(grid: Sequence[Sequence[Any]]) -> Iterator[Cell]:
    last_row = len(grid) - 1
    for r, c in _cells(grid):
        if r in (0, last_row) or c in (0, len(grid[r]) - 1):
            yield r, c


def _reachable(
    grid: Sequence[Sequence[T]],
    starts: Iterable[Cell],
    passable: Callable[[T], bool],
) -> set[Cell]:
    """Return the start cells and every cell reached from them through passable cells."""
    seen = set(starts)
    queue = deque(seen)
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(grid, row, col):
            if (r, c) not in seen and passable(grid[r][c]):
                seen.add((r, c))
                queue.append((r, c))
    return seen


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the region around ``(row, col)`` painted ``color``.

    The region is the cells of the starting cell's value joined to it up,
    down, left or right. Raises IndexError if the start is outside the image.
    """
    if not (0 <= row < len(image) and 0 <= col < len(image[row])):
        raise IndexError(f"cell ({row}, {col}) is outside the image")
    painted = [list(line) for line in image]
    source = image[row][col]
    if source == color:
        return painted
    for r, c in _reachable(image, [(row, col)], lambda value: value == source):
        painted[r][c] = color
    return painted


def _land_from_border(grid: Sequence[Sequence[T]], land: T) -> set[Cell]:
    starts = [(r, c) for r, c in _border_cells(grid) if grid[r][c] == land]
    return _reachable(grid, starts, lambda value: value == land)


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Count the land cells (value 1) from which the border cannot be walked to."""
    escaped = _land_from_border(grid, 1)
    return sum(
        1 for r, c in _cells(grid) if grid[r][c] == 1 and (r, c) not in escaped
    )


def minutes_to_rot(grid: Sequence[Sequence[int]]) -> int | None:
    """Return the minutes until every fresh orange (1) is rotten (2).

    Each minute a rotten orange spoils its fresh neighbours. Returns None
    if some fresh orange is never reached.
    """
    state = [list(line) for line in grid]
    frontier = [(r, c) for r, c in _cells(state) if state[r][c] == ROTTEN]
    fresh = sum(1 for r, c in _cells(state) if state[r][c] == FRESH)
    minutes = 0
    while frontier:
        spoiled: list[Cell] = []
        for row, col in frontier:
            for r, c in _neighbours(state, row, col):
                if state[r][c] == FRESH:
                    state[r][c] = ROTTEN
                    fresh -= 1
                    spoiled.append((r, c))
        if spoiled:
            minutes += 1
        frontier = spoiled
    return minutes if fresh == 0 else None


def count_rotted_by_spread(grid: Sequence[Sequence[int]]) -> int | None:
    """Return how many fresh oranges (1) the rotten ones (2) end up spoiling.

    Returns None if some fresh orange is never reached.
    """
    rotten = [(r, c) for r, c in _cells(grid) if grid[r][c] == ROTTEN]
    reached = _reachable(grid, rotten, lambda value: value == FRESH)
    spoiled = sum(1 for r, c in reached if grid[r][c] == FRESH)
    fresh = sum(1 for r, c in _cells(grid) if grid[r][c] == FRESH)
    return spoiled if spoiled == fresh else None


def capture_regions(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a copy of ``board`` with every 'O' cut off from the border turned to 'X'."""
    free = _land_from_border(board, OPEN)
    return [
        [
            CLOSED if value == OPEN and (r, c) not in free else value
            for c, value in enumerate(line)
        ]
        for r, line in enumerate(board)
    ]


def clear_enclosed(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of ``grid`` with every 1 cut off from the border set to 0."""
    free = _land_from_border(grid, 1)
    return [
        [0 if value == 1 and (r, c) not in free else value for c, value in enumerate(line)]
        for r, line in enumerate(grid)
    ]