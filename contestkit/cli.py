"""Command line front end that solves the contest problems from standard input."""

from __future__ import annotations

import argparse
import itertools
import re
import sys
from collections.abc import Callable, Iterator

from contestkit.arithmetic import last_digit, sumset_max
from contestkit.backtracking import count_queens, permutations
from contestkit.disktree import DiskTree
from contestkit.dynamic import (
    bachet_winner,
    longest_common_subsequence,
    min_coins,
    optimal_bst_cost,
    shortest_tour,
)
from contestkit.geometry import count_unique_lines
from contestkit.grids import count_deposits, explore, maja_position
from contestkit.josephus import joseph_min_m, power_crisis_step
from contestkit.searching import locate_marbles, min_capacity, neighbours
from contestkit.text import extend_to_palindrome, uncompress

_WORD_PATTERN = re.compile(r"\S+")
_CHAR = re.compile(r"\S")


class _Scanner:
    """Reads whitespace-separated words, integers or single characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        match = pattern.search(self._text, self._pos)
        if match is None:
            raise ValueError(f"unexpected end of input while reading {what}")
        self._pos = match.end()
        return match.group()

    def word(self) -> str:
        return self._take(_WORD_PATTERN, "a word")

    def char(self) -> str:
        return self._take(_CHAR, "a character")

    def number(self) -> int:
        text = self.word()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected an integer, got {text!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def exhausted(self) -> bool:
        return _WORD_PATTERN.search(self._text, self._pos) is None

    def words(self) -> Iterator[str]:
        while not self.exhausted():
            yield self.word()


def _or_x(value: int | None) -> str:
    return "X" if value is None else str(value)


def _queens(text: str) -> Iterator[str]:
    yield str(count_queens(_Scanner(text).number()))


def _permute(text: str) -> Iterator[str]:
    for word in _Scanner(text).words():
        yield from permutations(word)


def _change(text: str) -> Iterator[str]:
    for word in _Scanner(text).words():
        try:
            amount = int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None
        yield str(min_coins(amount))


def _obst(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    freq = scanner.numbers(scanner.number())
    yield f"Cost of Optimal BST is {optimal_bst_cost(freq)}"


def _lcs(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    yield longest_common_subsequence(scanner.word(), scanner.word())


def _bachet(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        stones, count = scanner.number(), scanner.number()
        yield bachet_winner(stones, scanner.numbers(count))


def _oil(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        rows, cols = scanner.number(), scanner.number()
        if rows == 0 and cols == 0:
            break
        grid = ["".join(scanner.char() for _ in range(cols)) for _ in range(rows)]
        yield str(count_deposits(grid))


def _maze(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    rows, cols = scanner.number(), scanner.number()
    grid = [scanner.numbers(cols) for _ in range(rows)]
    start = (scanner.number(), scanner.number())
    end = (scanner.number(), scanner.number())
    states = explore(grid, start, end)
    while True:
        try:
            state = next(states)
        except StopIteration as finished:
            found = bool(finished.value)
            break
        yield "Current state:"
        yield state.render()
        yield ""
    yield "We found the Path!!!" if found else "Path not found :("


def _palindrome(text: str) -> Iterator[str]:
    for word in _Scanner(text).words():
        yield extend_to_palindrome(word)


def _containers(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        count, containers = scanner.number(), scanner.number()
        yield str(min_capacity(scanner.numbers(count), containers))


def _chimp(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    heights = scanner.numbers(scanner.number())
    for query in scanner.numbers(scanner.number()):
        shorter, taller = neighbours(heights, query)
        yield f"{_or_x(shorter)} {_or_x(taller)}"


def _marble(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    for case in itertools.count(1):
        if scanner.exhausted():
            break
        count, queries_count = scanner.number(), scanner.number()
        if count == 0 and queries_count == 0:
            break
        marbles = scanner.numbers(count)
        queries = scanner.numbers(queries_count)
        yield f"CASE# {case}:"
        for query, position in zip(queries, locate_marbles(marbles, queries)):
            if position is None:
                yield f"{query} not found"
            else:
                yield f"{query} found at {position}"


def _joseph(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        k = scanner.number()
        if k == 0:
            break
        yield str(joseph_min_m(k))


def _last_digit(text: str) -> Iterator[str]:
    for word in _Scanner(text).words():
        if word == "0":
            break
        yield str(last_digit(word))


def _power_crisis(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        regions = scanner.number()
        if regions == 0:
            break
        try:
            step = power_crisis_step(regions)
        except ValueError:
            step = 0
        yield str(step)


def _sumset(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        count = scanner.number()
        if count == 0:
            break
        best = sumset_max(scanner.numbers(count))
        yield "no solution" if best is None else str(best)


def _lines(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    for _ in range(scanner.number()):
        count = scanner.number()
        points = [(scanner.number(), scanner.number()) for _ in range(count)]
        yield str(count_unique_lines(points))


def _beemaja(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        x, y = maja_position(scanner.number())
        yield f"{x} {y}"


def _disktree(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    while not scanner.exhausted():
        tree = DiskTree()
        for _ in range(scanner.number()):
            tree.add_path(scanner.word())
        yield from tree.lines()
        yield ""


def _uncompress(text: str) -> Iterator[str]:
    expanded = uncompress(text)
    yield from expanded.removesuffix("\n").split("\n") if expanded else ()


def _tsp(text: str) -> Iterator[str]:
    scanner = _Scanner(text)
    size = scanner.number()
    graph = [scanner.numbers(size) for _ in range(size)]
    yield str(shortest_tour(graph, 0))


_COMMANDS: dict[str, tuple[Callable[[str], Iterator[str]], str]] = {
    "queens": (_queens, "count n-queens placements"),
    "permute": (_permute, "list permutations of each word"),
    "change": (_change, "fewest coins for each amount"),
    "obst": (_obst, "cost of an optimal binary search tree"),
    "lcs": (_lcs, "longest common subsequence of two words"),
    "bachet": (_bachet, "winner of Bachet's game"),
    "oil": (_oil, "count oil deposits"),
    "maze": (_maze, "trace a depth-first maze search"),
    "palindrome": (_palindrome, "extend words to palindromes"),
    "containers": (_containers, "smallest container capacity"),
    "chimp": (_chimp, "nearest shorter and taller heights"),
    "marble": (_marble, "positions of marbles after sorting"),
    "joseph": (_joseph, "smallest step that removes the bad guys first"),
    "lastdigit": (_last_digit, "last digit of 1^1 + ... + N^N"),
    "powercrisis": (_power_crisis, "step that switches off region 13 last"),
    "sumset": (_sumset, "largest d with d = a + b + c"),
    "lines": (_lines, "count distinct lines through point pairs"),
    "beemaja": (_beemaja, "coordinates on Maja's honeycomb spiral"),
    "disktree": (_disktree, "draw directory trees"),
    "uncompress": (_uncompress, "expand move-to-front compressed text"),
    "tsp": (_tsp, "cheapest round trip through all vertices"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve contest problems read from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one problem solver over standard input and print its answers."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    text = sys.stdin.read()
    try:
        for line in handler(text):
            sys.stdout.write(f"{line}\n")
    except ValueError as error:
        print(f"{parser.prog}: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())