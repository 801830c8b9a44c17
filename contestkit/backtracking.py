"""Exhaustive search by backtracking: n-queens counting and string permutations."""

from __future__ import annotations


def count_queens(n: int) -> int:
    """Return the number of ways to place ``n`` non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")

    columns: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in rising or row - col in falling:
                continue
            columns.add(col)
            rising.add(row + col)
            falling.add(row - col)
            total += place(row + 1)
            columns.discard(col)
            rising.discard(row + col)
            falling.discard(row - col)
        return total

    return place(0)


def permutations(s: str) -> list[str]:
    """Return every arrangement of ``s``, in the order produced by swap-based recursion.

    Repeated characters yield repeated arrangements; an empty string yields none.
    """
    chars = list(s)
    if not chars:
        return []
    last = len(chars) - 1
    result: list[str] = []

    def permute(start: int) -> None:
        if start == last:
            result.append("".join(chars))
            return
        for i in range(start, len(chars)):
            chars[start], chars[i] = chars[i], chars[start]
            permute(start + 1)
            chars[start], chars[i] = chars[i], chars[start]

    permute(0)
    return result