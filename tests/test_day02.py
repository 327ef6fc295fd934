import pytest

from adventcode.day02 import CubeSet, Game, parse_game, part_a, part_b

SAMPLE = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


def test_part_a_sample():
    assert part_a(SAMPLE) == 8


def test_part_b_sample():
    assert part_b(SAMPLE) == 2286


def test_parse_game_reads_every_set():
    game = parse_game("Game 12: 3 red, 4 blue; 1 green")
    assert game == Game(12, [CubeSet(red=3, blue=4), CubeSet(green=1)])


def test_parse_game_counts_every_set_of_sample():
    games = [parse_game(line) for line in SAMPLE]
    assert [len(game.sets) for game in games] == [3, 3, 3, 3, 2]
    assert [game.number for game in games] == [1, 2, 3, 4, 5]


def test_game_over_limit_is_excluded():
    line = "Game 7: 13 red"
    assert part_a([line]) == 0
    assert part_a(["Game 7: 12 red, 13 green, 14 blue"]) == 7


def test_missing_colour_gives_zero_power():
    assert part_b(["Game 1: 5 red, 6 green"]) == 0


def test_part_a_is_additive():
    assert part_a(SAMPLE) == sum(part_a([line]) for line in SAMPLE)


def test_parse_game_rejects_missing_colon():
    with pytest.raises(ValueError):
        parse_game("Game 1 3 red")


def test_parse_game_rejects_unknown_colour():
    with pytest.raises(ValueError):
        parse_game("Game 1: 3 purple")