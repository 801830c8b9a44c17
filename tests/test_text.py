import pytest

from contestkit.text import extend_to_palindrome, prefix_function, uncompress


def test_prefix_function_empty():
    assert prefix_function("") == []


def test_prefix_function_repeated_letter():
    assert prefix_function("aaaa") == [0, 1, 2, 3]


@pytest.mark.parametrize("pattern", ["abacaba", "aabaaab", "abcabcabx", "zzzyzz"])
def test_prefix_function_gives_borders(pattern):
    borders = prefix_function(pattern)
    assert len(borders) == len(pattern)
    assert borders[0] == 0
    for i, length in enumerate(borders):
        assert length <= i
        assert pattern[:length] == pattern[i - length + 1 : i + 1]


@pytest.mark.parametrize("word", ["racecar", "a", "abba", "zz"])
def test_palindromes_are_unchanged(word):
    assert extend_to_palindrome(word) == word


def test_empty_string_stays_empty():
    assert extend_to_palindrome("") == ""


@pytest.mark.parametrize("word", ["abc", "aab", "abaxyz", "qwerty", "amanap"])
def test_extension_mirrors_after_palindromic_prefix(word):
    result = extend_to_palindrome(word)
    assert result.startswith(word)
    tail = result[len(word):]
    head = word[: len(word) - len(tail)]
    assert head
    assert head == head[::-1]
    assert word[len(head):] == tail[::-1]


def test_uncompress_worked_example():
    source = "Dear Sally Please please do it 1 would 4 Mary very 1 much And 4 6\n0\n"
    expected = (
        "Dear Sally Please please do it it would please "
        "Mary very very much And Mary would\n"
    )
    assert uncompress(source) == expected


def test_uncompress_keeps_plain_text_and_stops_at_zero():
    assert uncompress("hello, world!\nbye.\n0\nignored\n") == "hello, world!\nbye.\n"


def test_uncompress_moves_reference_to_front():
    assert uncompress("a b 2 2\n") == "a b a b\n"


def test_uncompress_bad_reference():
    with pytest.raises(ValueError):
        uncompress("one 2\n")