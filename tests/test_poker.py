import pytest

from katas.poker import winning_hands


CASES = [
    (["4S 5S 7H 8D JC"], ["4S 5S 7H 8D JC"]),
    (["4D 5S 6S 8D 3C", "2S 4C 7S 9H 10H", "3S 4S 5D 6H JH"], ["3S 4S 5D 6H JH"]),
    (
        ["4D 5S 6S 8D 3C", "2S 4C 7S 9H 10H", "3S 4S 5D 6H JH", "3H 4H 5C 6C JD"],
        ["3S 4S 5D 6H JH", "3H 4H 5C 6C JD"],
    ),
    (["3S 5H 6S 8D 7H", "2S 5D 6D 8C 7S"], ["3S 5H 6S 8D 7H"]),
    (["2S 5H 6S 8D 7H", "3S 4D 6D 8C 7S"], ["2S 5H 6S 8D 7H"]),
    (["4S 5H 6C 8D KH", "2S 4H 6S 4D JH"], ["2S 4H 6S 4D JH"]),
    (["4S 2H 6S 2D JH", "2S 4H 6C 4D JD"], ["2S 4H 6C 4D JD"]),
    (["4H 4S AH JC 3D", "4C 4D AS 5D 6C"], ["4H 4S AH JC 3D"]),
    (["2S 8H 6S 8D JH", "4S 5H 4C 8C 5C"], ["4S 5H 4C 8C 5C"]),
    (["2S 8H 2D 8D 3H", "4S 5H 4C 8S 5D"], ["2S 8H 2D 8D 3H"]),
    (["2S QS 2C QD JH", "JD QH JS 8D QC"], ["JD QH JS 8D QC"]),
    (["JD QH JS 8D QC", "JS QS JC 2D QD"], ["JD QH JS 8D QC"]),
    (["6S 6H 3S 3H AS", "7H 7S 2H 2S AC"], ["7H 7S 2H 2S AC"]),
    (["5C 2S 5S 4H 4C", "6S 2S 6H 7C 2C"], ["6S 2S 6H 7C 2C"]),
    (["2S 8H 2H 8D JH", "4S 5H 4C 8S 4H"], ["4S 5H 4C 8S 4H"]),
    (["2S 2H 2C 8D JH", "4S AH AS 8C AD"], ["4S AH AS 8C AD"]),
    (["5S AH AS 7C AD", "4S AH AS 8C AD"], ["4S AH AS 8C AD"]),
    (["4S 5H 4C 8D 4H", "3S 4D 2S 6D 5C"], ["3S 4D 2S 6D 5C"]),
    (["4S 5H 4C 8D 4H", "10D JH QS KD AC"], ["10D JH QS KD AC"]),
    (["4S 5H 4C 8D 4H", "4D AH 3S 2D 5C"], ["4D AH 3S 2D 5C"]),
    (["2C 3D 7H 5H 2S", "QS KH AC 2D 3S"], ["2C 3D 7H 5H 2S"]),
    (["4S 6C 7S 8D 5H", "5S 7H 8S 9D 6H"], ["5S 7H 8S 9D 6H"]),
    (["2H 3C 4D 5D 6H", "4S AH 3S 2D 5H"], ["2H 3C 4D 5D 6H"]),
    (["4C 6H 7D 8D 5H", "2S 4S 5S 6S 7S"], ["2S 4S 5S 6S 7S"]),
    (["2H 7H 8H 9H 6H", "3S 5S 6S 7S 8S"], ["2H 7H 8H 9H 6H"]),
    (["3H 6H 7H 8H 5H", "4S 5H 4C 5D 4H"], ["4S 5H 4C 5D 4H"]),
    (["4H 4S 4D 9S 9D", "5H 5S 5D 8S 8D"], ["5H 5S 5D 8S 8D"]),
    (["5H 5S 5D 9S 9D", "5H 5S 5D 8S 8D"], ["5H 5S 5D 9S 9D"]),
    (["4S 5H 4D 5D 4H", "3S 3H 2S 3D 3C"], ["3S 3H 2S 3D 3C"]),
    (["2S 2H 2C 8D 2D", "4S 5H 5S 5D 5C"], ["4S 5H 5S 5D 5C"]),
    (["3S 3H 2S 3D 3C", "3S 3H 4S 3D 3C"], ["3S 3H 4S 3D 3C"]),
    (["4S 5H 5S 5D 5C", "7S 8S 9S 6S 10S"], ["7S 8S 9S 6S 10S"]),
    (["KC AH AS AD AC", "10C JC QC KC AC"], ["10C JC QC KC AC"]),
    (["KS AH AS AD AC", "4H AH 3H 2H 5H"], ["4H AH 3H 2H 5H"]),
    (["2C AC QC 10C KC", "QH KH AH 2H 3H"], ["2C AC QC 10C KC"]),
    (["4H 6H 7H 8H 5H", "5S 7S 8S 9S 6S"], ["5S 7S 8S 9S 6S"]),
    (["2H 3H 4H 5H 6H", "4D AD 3D 2D 5D"], ["2H 3H 4H 5H 6H"]),
]


@pytest.mark.parametrize("hands, expected", CASES)
def test_winning_hands(hands, expected):
    assert set(winning_hands(hands)) == set(expected)


def test_no_hands_no_winners():
    assert winning_hands([]) == []


def test_winners_keep_input_order():
    hands = ["3H 4H 5C 6C JD", "2S 4C 7S 9H 10H", "3S 4S 5D 6H JH"]
    assert winning_hands(hands) == ["3H 4H 5C 6C JD", "3S 4S 5D 6H JH"]


def test_invalid_card_is_rejected():
    with pytest.raises(ValueError):
        winning_hands(["4S 5S 7H 8D 1C"])


def test_wrong_card_count_is_rejected():
    with pytest.raises(ValueError):
        winning_hands(["4S 5S 7H 8D"])