"""Small number-theory helpers: gcd, last digit of power sums, and sumsets."""

from __future__ import annotations

import itertools
from collections.abc import Iterable

# Last digit of i**i, indexed by the last digit of i.
_POWER_DIGITS = (0, 1, 4, 7, 6, 5, 6, 3, 6, 9)
_RUNNING_DIGITS = tuple(
    itertools.accumulate(
        (_POWER_DIGITS[i % 10] for i in range(100)),
        lambda total, digit: (total + digit) % 10,
    )
)


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Euclid's gcd using a remainder that takes the sign of the dividend.

    For non-negative inputs this is the ordinary gcd; with negatives the sign of the
    result follows the remainder chain.
    """
    while b:
        a, b = b, _truncated_mod(a, b)
    return a


def last_digit(number: int | str) -> int:
    """Return the last digit of 1**1 + 2**2 + ... + N**N for a decimal ``number``.

    Only the last two digits of ``number`` matter, so it may be arbitrarily long.
    """
    text = str(number).strip()
    if not text or any(ch not in "0123456789" for ch in text):
        raise ValueError(f"not a non-negative decimal number: {number!r}")
    return _RUNNING_DIGITS[int(text[-2:])]


def sumset_max(values: Iterable[int]) -> int | None:
    """Return the largest d in ``values`` with d = a + b + c for distinct a, b, c, d.

    Returns None when no such d exists.
    """
    pool = set(values)
    ordered = sorted(pool, reverse=True)
    for d in ordered:
        for b, c in itertools.combinations(ordered, 2):
            if d in (b, c):
                continue
            a = d - b - c
            if a in (d, b, c):
                continue
            if a in pool:
                return d
    return None