import pytest

from adventcode.day07 import HandType, hand_type, joker_hand_type, part_a, part_b

SAMPLE = [
    "32T3K 765",
    "T55J5 684",
    "KK677 28",
    "KTJJT 220",
    "QQQJA 483",
]


def test_part_a_sample():
    assert part_a(SAMPLE) == 6440


def test_part_b_sample():
    assert part_b(SAMPLE) == 5905


@pytest.mark.parametrize(
    "cards, expected",
    [
        ("AAAAA", HandType.FIVE_OF_A_KIND),
        ("AA8AA", HandType.FOUR_OF_A_KIND),
        ("23332", HandType.FULL_HOUSE),
        ("TTT98", HandType.THREE_OF_A_KIND),
        ("23432", HandType.TWO_PAIRS),
        ("A23A4", HandType.ONE_PAIR),
        ("23456", HandType.HIGH_CARD),
    ],
)
def test_hand_type(cards, expected):
    assert hand_type(cards) is expected


@pytest.mark.parametrize(
    "cards, expected",
    [
        ("QJJQ2", HandType.FOUR_OF_A_KIND),
        ("JJJJJ", HandType.FIVE_OF_A_KIND),
        ("T55J5", HandType.FOUR_OF_A_KIND),
        ("KTJJT", HandType.FOUR_OF_A_KIND),
        ("32T3K", HandType.ONE_PAIR),
        ("2345J", HandType.ONE_PAIR),
        ("2233J", HandType.FULL_HOUSE),
    ],
)
def test_joker_hand_type(cards, expected):
    assert joker_hand_type(cards) is expected


@pytest.mark.parametrize("line", SAMPLE)
def test_jokers_never_weaken_a_hand(line):
    cards = line.split()[0]
    assert joker_hand_type(cards) >= hand_type(cards)


def test_single_hand_wins_its_bid():
    assert part_a(["KK677 28"]) == 28
    assert part_b(["KK677 28"]) == 28


def test_order_of_lines_does_not_matter():
    assert part_a(list(reversed(SAMPLE))) == part_a(SAMPLE)
    assert part_b(list(reversed(SAMPLE))) == part_b(SAMPLE)


def test_stronger_hand_earns_the_higher_rank():
    strong_pays = part_a(["AAAAA 10", "23456 1"])
    weak_pays = part_a(["AAAAA 1", "23456 10"])
    assert strong_pays > weak_pays


def test_joker_is_weakest_card_on_ties():
    joker_high = part_b(["J2345 10", "22345 1"])
    two_high = part_b(["J2345 1", "22345 10"])
    assert two_high > joker_high


def test_without_jokers_both_parts_agree():
    hands = ["32T3K 765", "KK677 28", "AA8AA 5", "23432 17"]
    assert part_b(hands) == part_a(hands)


def test_unknown_card_rejected():
    with pytest.raises(ValueError):
        part_a(["XXXXX 1"])


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        part_a(["AAAAA"])
    with pytest.raises(ValueError):
        part_b(["AAAAA many"])