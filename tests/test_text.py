import logging

import pytest

from wargear.text import (
    FindValues,
    find_string,
    find_value,
    percent_to_str,
    stat_percent_pair_str,
    stat_percent_str,
    string_with_precision,
)

ARMOR_NAMES = [
    "destroyer_battlehelm",
    "pendant_of_the_perilous",
    "destroyer_shoulderblades",
    "thalassian_wildercloak",
    "bulwark_of_ancient_kings",
    "bracers_of_eradication",
    "destroyer_gauntlets",
    "belt_of_one_hundred_deaths",
    "destroyer_greaves",
    "warboots_of_obliteration",
]


@pytest.mark.parametrize("index,name", list(enumerate(ARMOR_NAMES)))
def test_find_values_integers(index, name):
    fv = FindValues(ARMOR_NAMES, list(range(10)))
    assert fv.find(name) == index


@pytest.mark.parametrize("index,name", list(enumerate(ARMOR_NAMES)))
def test_find_values_floats(index, name):
    fv = FindValues(ARMOR_NAMES, [float(i) for i in range(10)])
    assert fv.find(name) == float(index)


def test_find_values_missing_uses_default():
    fv = FindValues(ARMOR_NAMES, list(range(10)))
    assert fv.find("unknown_item") == 0
    assert fv.find("unknown_item", 42) == 42


def test_find_values_first_match_wins():
    fv = FindValues(["a", "b", "a"], [1, 2, 3])
    assert fv.find("a") == 1


@pytest.mark.parametrize(
    "value,expected",
    [
        (12.3456, "12.3%"),
        (0.5, "0.5%"),
        (100.0, "100%"),
        (1234.5, "1.23e+03%"),
        (0.0, "0%"),
    ],
)
def test_percent_to_str(value, expected):
    assert percent_to_str(value) == expected


def test_stat_percent_str():
    assert stat_percent_str("Crit", 25.123, "from gear") == "Crit: <b>25.1%</b> from gear<br>"


def test_stat_percent_pair_str():
    result = stat_percent_pair_str("Hit", 9.0, "total", 1.25, "over cap")
    assert result == "Hit: <b>9%</b> total. (<b>1.25%</b> over cap)<br>"


def test_string_with_precision_integer():
    assert string_with_precision(42) == "42"
    assert string_with_precision(-7) == "-7"


def test_string_with_precision_fixed():
    assert string_with_precision(3.14159, 3) == "3.142"
    assert string_with_precision(2.0, 2) == "2.00"


def test_find_string():
    assert find_string(ARMOR_NAMES, "destroyer_greaves") is True
    assert find_string(ARMOR_NAMES, "missing") is False


def test_find_value_present():
    assert find_value(["a", "b", "c"], [1.5, 2.5, 3.5], "b") == 2.5


def test_find_value_missing_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert find_value(["a"], [1.0], "zzz") == 0.0
    assert "zzz" in caplog.text