"""Directory trees built from backslash-separated paths and drawn with indentation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_SEPARATOR = "\\"


def split_path(path: str) -> list[str]:
    """Split a backslash-separated path into its non-empty components."""
    return [part for part in path.split(_SEPARATOR) if part]


class DiskTree:
    """A tree of directory names, listed depth-first with children in sorted order."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._root: dict[str, dict] = {}
        for path in paths:
            self.add_path(path)

    def insert(self, parts: Iterable[str]) -> None:
        """Add the chain of directory names ``parts`` below the root."""
        node = self._root
        for part in parts:
            node = node.setdefault(part, {})

    def add_path(self, path: str) -> None:
        """Add a backslash-separated path."""
        self.insert(split_path(path))

    def lines(self) -> Iterator[str]:
        """Yield each directory name indented by one space per level below the top."""

        def walk(node: dict[str, dict], depth: int) -> Iterator[str]:
            for name in sorted(node):
                yield " " * depth + name
                yield from walk(node[name], depth + 1)

        return walk(self._root, 0)

    def render(self) -> str:
        """Return the listing with every line ended by a newline."""
        return "".join(f"{line}\n" for line in self.lines())