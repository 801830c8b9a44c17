"""Counting distinct lines through pairs of lattice points."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from contestkit.arithmetic import gcd

Point = Sequence[int]


@dataclass(frozen=True, order=True)
class Line:
    """The line a*x + b*y = c with integer coefficients."""

    a: int
    b: int
    c: int


def line_through(p: Point, q: Point) -> Line:
    """Return the integer line through ``p`` and ``q``.

    Coefficients are divided by their gcd when that is positive, then signed so that
    a > 0, or a == 0 and b >= 0.
    """
    (x1, y1), (x2, y2) = p, q
    a = y1 - y2
    b = x2 - x1
    c = a * x1 + b * y1
    g = gcd(a, gcd(b, c))
    if g > 0:
        a, b, c = a // g, b // g, c // g
    if a < 0 or (a == 0 and b < 0):
        a, b, c = -a, -b, -c
    return Line(a, b, c)


def count_unique_lines(points: Iterable[Point]) -> int:
    """Count the distinct integer lines through every pair of ``points``."""
    return len({line_through(p, q) for p, q in itertools.combinations(list(points), 2)})


def count_unique_lines_float(points: Iterable[Point]) -> int:
    """Count distinct lines by floating-point slope and intercept.

    Vertical lines are keyed by an infinite slope and their x coordinate.
    """
    keys: set[tuple[float, float]] = set()
    for (x1, y1), (x2, y2) in itertools.combinations(list(points), 2):
        dx = x2 - x1
        dy = y2 - y1
        if dx == 0:
            keys.add((math.inf, float(x1)))
        else:
            slope = dy / dx
            keys.add((slope, y1 - slope * x1))
    return len(keys)