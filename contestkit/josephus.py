"""Josephus-style elimination puzzles."""

from __future__ import annotations

import itertools

# Zero-based survivor index that means region 13 is switched off last,
# once region 1 has been switched off first.
_LAST_REGION_OFFSET = 11


def survivor_offset(count: int, step: int) -> int:
    """Return the zero-based position of the last one left when every ``step``-th is removed."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if step < 1:
        raise ValueError(f"step must be at least 1, got {step}")
    survivor = 0
    for size in range(2, count + 1):
        survivor = (survivor + step) % size
    return survivor


def power_crisis_step(n: int) -> int:
    """Return the smallest step that switches off region 13 last among ``n`` regions.

    Region 1 is always switched off first; counting then continues around the rest.
    """
    for step in range(1, n):
        if survivor_offset(n - 1, step) == _LAST_REGION_OFFSET:
            return step
    raise ValueError(f"no step switches off region 13 last among {n} regions")


def _good_survive(k: int, m: int) -> bool:
    position = 0
    for removed in range(k):
        position = (position + m - 1) % (2 * k - removed)
        if position < k:
            return False
    return True


def joseph_min_m(k: int) -> int:
    """Return the smallest m that removes people k+1 .. 2k before any of 1 .. k."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    return next(m for m in itertools.count(k + 1) if _good_survive(k, m))