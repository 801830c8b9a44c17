"""Grid searches: flood-filled deposits, maze exploration and the hexagonal spiral."""

from __future__ import annotations

import itertools
from collections.abc import Generator, Iterator, Sequence
from dataclasses import dataclass

_EIGHT_WAYS = ((1, 0), (0, 1), (1, 1), (-1, 0), (0, -1), (-1, -1), (1, -1), (-1, 1))
_FOUR_WAYS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_WALL = 1

Cell = tuple[int, int]


def count_deposits(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of '@' cells connected horizontally, vertically or diagonally."""
    pockets = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "@"
    }
    deposits = 0
    while pockets:
        deposits += 1
        stack = [pockets.pop()]
        while stack:
            r, c = stack.pop()
            for dr, dc in _EIGHT_WAYS:
                neighbour = (r + dr, c + dc)
                if neighbour in pockets:
                    pockets.remove(neighbour)
                    stack.append(neighbour)
    return deposits


@dataclass(frozen=True)
class MazeState:
    """A snapshot of a maze search after one cell has been expanded."""

    grid: tuple[tuple[int, ...], ...]
    visited: frozenset[Cell]
    current: Cell

    def render(self) -> str:
        """Draw the maze: C current, V visited, # wall, . open."""

        def symbol(cell: Cell, value: int) -> str:
            if cell == self.current:
                return "C"
            if cell in self.visited:
                return "V"
            if value == _WALL:
                return "#"
            return "."

        return "\n".join(
            "".join(f"{symbol((r, c), value)} " for c, value in enumerate(row))
            for r, row in enumerate(self.grid)
        )


def explore(
    grid: Sequence[Sequence[int]], start: Cell, end: Cell
) -> Generator[MazeState, None, bool]:
    """Depth-first search from ``start``, yielding a state after each expansion.

    Cells holding 1 are walls. The generator's return value tells whether ``end`` was reached.
    """
    rows = tuple(tuple(row) for row in grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("maze rows must all have the same length")

    def inside(cell: Cell) -> bool:
        return 0 <= cell[0] < height and 0 <= cell[1] < width

    start, end = tuple(start), tuple(end)
    for name, cell in (("start", start), ("end", end)):
        if not inside(cell):
            raise ValueError(f"{name} {cell} lies outside the maze")

    visited = {start}
    stack = [start]
    while stack:
        current = stack.pop()
        if current == end:
            return True
        for dr, dc in _FOUR_WAYS:
            neighbour = (current[0] + dr, current[1] + dc)
            if (
                inside(neighbour)
                and neighbour not in visited
                and rows[neighbour[0]][neighbour[1]] != _WALL
            ):
                stack.append(neighbour)
                visited.add(neighbour)
        yield MazeState(rows, frozenset(visited), current)
    return False


def find_path(grid: Sequence[Sequence[int]], start: Cell, end: Cell) -> bool:
    """Return True if ``end`` can be reached from ``start`` without crossing walls."""
    states = explore(grid, start, end)
    while True:
        try:
            next(states)
        except StopIteration as finished:
            return bool(finished.value)


_RING_SIDES = ((-1, 0), (0, -1), (1, -1), (1, 0), (0, 1))


def _spiral_steps() -> Iterator[Cell]:
    for ring in itertools.count(1):
        yield (0, 1)
        yield from itertools.repeat((-1, 1), ring - 1)
        for step in _RING_SIDES:
            yield from itertools.repeat(step, ring)


def maja_position(n: int) -> Cell:
    """Return the hexagonal coordinates of honeycomb cell ``n`` on Maja's spiral."""
    if n < 1:
        raise ValueError(f"cell number must be at least 1, got {n}")
    x = y = 0
    for dx, dy in itertools.islice(_spiral_steps(), n - 1):
        x += dx
        y += dy
    return x, y