import math

import pytest

from contestkit.geometry import (
    Line,
    count_unique_lines,
    count_unique_lines_float,
    line_through,
)

DIAGONAL = [(0, 0), (1, 1), (2, 2), (3, 3)]
SQUARE = [(0, 0), (0, 1), (1, 0), (1, 1)]
PARABOLA = [(x, x * x) for x in range(6)]


@pytest.mark.parametrize(
    "p, q", [((0, 0), (1, 1)), ((2, 5), (-3, 7)), ((4, 4), (4, 9)), ((-6, 2), (3, 2))]
)
def test_line_contains_both_points(p, q):
    line = line_through(p, q)
    assert line.a * p[0] + line.b * p[1] == line.c
    assert line.a * q[0] + line.b * q[1] == line.c


@pytest.mark.parametrize("p, q", [((0, 0), (1, 1)), ((2, 5), (-3, 7)), ((-6, 2), (3, 2))])
def test_line_sign_is_normalised(p, q):
    line = line_through(p, q)
    assert line.a > 0 or (line.a == 0 and line.b >= 0)


def test_scaled_pairs_give_the_same_line():
    assert line_through((0, 0), (1, 1)) == line_through((0, 0), (2, 2))


def test_lines_are_ordered_by_coefficients():
    assert sorted([Line(1, 2, 3), Line(0, 5, 1), Line(1, 0, 9)]) == [
        Line(0, 5, 1),
        Line(1, 0, 9),
        Line(1, 2, 3),
    ]


def test_collinear_points_form_one_line():
    assert count_unique_lines(DIAGONAL) == 1
    assert count_unique_lines_float(DIAGONAL) == 1


def test_horizontal_points_form_one_line():
    assert count_unique_lines([(0, 0), (1, 0), (2, 0)]) == 1


def test_vertical_points_form_one_float_line():
    assert count_unique_lines_float([(0, 0), (0, 1), (0, 2)]) == 1


@pytest.mark.parametrize("points", [SQUARE, PARABOLA])
def test_general_position_gives_every_pair(points):
    pairs = math.comb(len(points), 2)
    assert count_unique_lines(points) == pairs
    assert count_unique_lines_float(points) == pairs


@pytest.mark.parametrize("points", [[], [(3, 4)]])
def test_too_few_points_give_no_lines(points):
    assert count_unique_lines(points) == 0
    assert count_unique_lines_float(points) == 0