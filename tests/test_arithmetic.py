import math

import pytest

from contestkit.arithmetic import gcd, last_digit, sumset_max


@pytest.mark.parametrize("a", range(0, 40, 3))
@pytest.mark.parametrize("b", range(0, 40, 7))
def test_gcd_matches_standard_for_non_negative(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(-4, 6), (4, -6), (-12, -18), (35, -14)])
def test_gcd_magnitude_with_negatives(a, b):
    result = gcd(a, b)
    assert abs(result) == math.gcd(a, b)
    assert a % result == 0 and b % result == 0


def test_gcd_with_zero():
    assert gcd(17, 0) == 17


def test_last_digit_of_one():
    assert last_digit("1") == 1


def test_last_digit_zero():
    assert last_digit("0") == 0


@pytest.mark.parametrize("k", [1, 7, 42, 99])
def test_last_digit_repeats_every_hundred(k):
    assert last_digit(str(k)) == last_digit(str(k + 100))
    assert last_digit(k) == last_digit(str(k))


def test_last_digit_huge_number():
    huge = "2" + "0" * 90 + "95"
    assert last_digit(huge) == last_digit("95")


def test_last_digit_in_range():
    assert {last_digit(n) for n in range(200)} <= set(range(10))


@pytest.mark.parametrize("bad", ["", "-5", "12a", "1.5"])
def test_last_digit_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        last_digit(bad)


def test_sumset_example():
    assert sumset_max([2, 3, 5, 7, 12]) == 12


def test_sumset_no_solution():
    assert sumset_max([2, 16, 64, 256, 1024]) is None


def test_sumset_needs_four_distinct_values():
    assert sumset_max([1, 2, 3]) is None


def test_sumset_result_is_a_sum_of_three_others():
    values = [1, 4, 9, 10, 15, 21, 30]
    d = sumset_max(values)
    others = [v for v in values if v != d]
    assert d in values
    assert any(
        a + b + c == d
        for a in others
        for b in others
        for c in others
        if len({a, b, c}) == 3
    )
    assert all(sumset_max([v for v in values if v <= x]) != x for x in values if x > d)