"""Dynamic programming and exhaustive optimisation problems."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Sequence
from functools import lru_cache

DEFAULT_COINS = (1, 5, 10, 50, 100, 500, 1000)

STAN_WINS = "Stan wins"
OLLIE_WINS = "Ollie wins"


def min_coins(amount: int, coins: Iterable[int] = DEFAULT_COINS) -> int:
    """Return the fewest coins from ``coins`` that add up to ``amount``."""
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    denominations = sorted(set(coins))
    if not denominations or denominations[0] <= 0:
        raise ValueError("coin values must be positive and at least one is required")

    best: list[float] = [0] + [math.inf] * amount
    for value in range(1, amount + 1):
        best[value] = min(
            (best[value - coin] for coin in denominations if coin <= value),
            default=math.inf,
        ) + 1
    if math.isinf(best[amount]):
        raise ValueError(f"{amount} cannot be made from coins {denominations}")
    return int(best[amount])


def optimal_bst_cost(freq: Sequence[int]) -> int:
    """Return the minimum weighted search cost of a BST over keys with ``freq``.

    Keys are assumed sorted; each key costs its frequency times its depth (root is 1).
    """
    weights = tuple(freq)
    prefix = list(itertools.accumulate(weights, initial=0))

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if j < i:
            return 0
        if i == j:
            return weights[i]
        subtree = min(cost(i, r - 1) + cost(r + 1, j) for r in range(i, j + 1))
        return subtree + prefix[j + 1] - prefix[i]

    return cost(0, len(weights) - 1)


def longest_common_subsequence(a: str, b: str) -> str:
    """Return one longest common subsequence of ``a`` and ``b``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ca in enumerate(a, 1):
        for j, cb in enumerate(b, 1):
            if ca == cb:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    picked: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def bachet_winner(n: int, moves: Iterable[int]) -> str:
    """Decide Bachet's game: who wins with ``n`` stones when Stan moves first."""
    if n < 0:
        raise ValueError(f"stone count must be non-negative, got {n}")
    allowed = list(moves)
    if any(move < 1 for move in allowed):
        raise ValueError("moves must be positive")

    wins = [False] * (n + 1)
    for stones in range(1, n + 1):
        wins[stones] = any(
            move <= stones and not wins[stones - move] for move in allowed
        )
    return STAN_WINS if wins[n] else OLLIE_WINS


def shortest_tour(graph: Sequence[Sequence[int]], source: int = 0) -> int:
    """Return the weight of the cheapest round trip from ``source`` through every vertex."""
    size = len(graph)
    if size == 0 or any(len(row) != size for row in graph):
        raise ValueError("graph must be a non-empty square matrix")
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex of the graph")

    others = [vertex for vertex in range(size) if vertex != source]
    return min(
        sum(graph[u][v] for u, v in itertools.pairwise((source, *order, source)))
        for order in itertools.permutations(others)
    )