"""String algorithms: prefix function, palindrome extension and move-to-front decoding."""

from __future__ import annotations

import io
from collections.abc import Sequence


def prefix_function(pattern: Sequence[object]) -> list[int]:
    """Return, for each position, the length of the longest proper border ending there."""
    borders = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            borders[i] = length
            i += 1
        elif length:
            length = borders[length - 1]
        else:
            i += 1
    return borders


def extend_to_palindrome(s: str) -> str:
    """Extend ``s`` by mirroring everything after its longest palindromic prefix."""
    chars = list(s)
    pattern: list[object] = [*chars, None, *reversed(chars)]
    keep = prefix_function(pattern)[-1]
    return s + s[keep:][::-1]


def _recall(recent: list[str], number: int) -> str:
    if number > len(recent):
        raise ValueError(f"reference {number} exceeds the {len(recent)} words seen so far")
    word = recent.pop(number - 1)
    recent.insert(0, word)
    return word


def uncompress(text: str) -> str:
    """Expand move-to-front word references in ``text``.

    Letters form words; a number n stands for the n-th most recently used word, which
    then becomes the most recent. Processing stops at a line holding only "0".
    """
    recent: list[str] = []
    output: list[str] = []
    for raw in io.StringIO(text):
        line = raw.removesuffix("\n")
        if line == "0":
            break
        word: list[str] = []
        number = 0
        for ch in line + "\n":
            if ch.isascii() and ch.isalpha():
                word.append(ch)
            elif "0" <= ch <= "9":
                number = number * 10 + int(ch)
            else:
                if word:
                    token = "".join(word)
                    recent.insert(0, token)
                    output.append(token)
                elif number:
                    output.append(_recall(recent, number))
                word.clear()
                number = 0
                output.append(ch)
    return "".join(output)