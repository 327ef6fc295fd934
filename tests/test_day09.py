import pytest

from adventcode.day09 import (
    extrapolate_next,
    extrapolate_previous,
    part_a,
    part_b,
)

EXAMPLE = [
    "0 3 6 9 12 15",
    "1 3 6 10 15 21",
    "10 13 16 21 30 45",
]


def test_part_a_example():
    assert part_a(EXAMPLE) == 114


def test_part_b_example():
    assert part_b(EXAMPLE) == 2


def test_extrapolate_next_linear():
    assert extrapolate_next([0, 3, 6, 9, 12, 15]) == 18


@pytest.mark.parametrize("value", [-7, 0, 5])
def test_constant_sequence_stays_constant(value):
    values = [value] * 4
    assert extrapolate_next(values) == value
    assert extrapolate_previous(values) == value


def test_single_value_repeats():
    assert extrapolate_next([9]) == 9
    assert extrapolate_previous([9]) == 9


@pytest.mark.parametrize(
    "polynomial",
    [
        lambda k: 3 * k - 4,
        lambda k: k * k,
        lambda k: k**3 - 2 * k + 1,
    ],
)
def test_polynomials_extend_both_ways(polynomial):
    values = [polynomial(k) for k in range(1, 7)]
    assert extrapolate_next(values) == polynomial(7)
    assert extrapolate_previous(values) == polynomial(0)


@pytest.mark.parametrize("values", [[1, 4, 2, 8], [5, -3, 0], [2, 2, 7, 1, 9]])
def test_previous_is_next_of_reversed(values):
    assert extrapolate_previous(values) == extrapolate_next(values[::-1])


def test_parts_are_sums_of_lines():
    assert part_a(EXAMPLE) == sum(extrapolate_next([int(x) for x in line.split()]) for line in EXAMPLE)
    assert part_b(EXAMPLE) == sum(extrapolate_previous([int(x) for x in line.split()]) for line in EXAMPLE)


def test_empty_sequence_rejected():
    with pytest.raises(ValueError):
        extrapolate_next([])
    with pytest.raises(ValueError):
        extrapolate_previous([])


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        part_a(["1 2 x"])