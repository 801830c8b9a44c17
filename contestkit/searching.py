"""Searching sorted data and binary searching on the answer."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence


def can_fill(vessels: Iterable[int], containers: int, capacity: int) -> bool:
    """Tell whether the vessels, poured in order, fit into ``containers`` of ``capacity``.

    Each container takes a consecutive run of vessels. A new container is started
    whenever the next vessel would overflow the current one.
    """
    used = 1
    current = 0
    for vessel in vessels:
        if current + vessel > capacity:
            used += 1
            current = vessel
            if used > containers:
                return False
        else:
            current += vessel
    return True


def min_capacity(vessels: Iterable[int], containers: int) -> int:
    """Return the smallest capacity that lets the vessels fill at most ``containers``."""
    amounts = list(vessels)
    if not amounts:
        raise ValueError("at least one vessel is required")
    if containers < 1:
        raise ValueError(f"at least one container is required, got {containers}")

    low, high = max(amounts), sum(amounts)
    while low < high:
        mid = low + (high - low) // 2
        if can_fill(amounts, containers, mid):
            high = mid
        else:
            low = mid + 1
    return low


def neighbours(heights: Sequence[int], height: int) -> tuple[int | None, int | None]:
    """Return the tallest height below and the shortest above ``height``.

    ``heights`` must be sorted ascending. A missing side is reported as None.
    """
    lower = bisect_left(heights, height)
    upper = bisect_right(heights, height)
    shorter = heights[lower - 1] if lower > 0 else None
    taller = heights[upper] if upper < len(heights) else None
    return shorter, taller


def locate_marbles(marbles: Iterable[int], queries: Iterable[int]) -> list[int | None]:
    """Return, for each query, its first 1-based position among the sorted marbles.

    A query that is not among the marbles gives None.
    """
    ordered = sorted(marbles)
    positions: list[int | None] = []
    for query in queries:
        index = bisect_left(ordered, query)
        if index < len(ordered) and ordered[index] == query:
            positions.append(index + 1)
        else:
            positions.append(None)
    return positions