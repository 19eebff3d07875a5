import math

import pytest

from xmpextract.xmp_values import accumulate, coerce_value, microsoft_rating, parse_float, parse_int


@pytest.mark.parametrize("text, expected", [
    ("5", 5),
    ("4.7", 4),
    ("-3", -3),
    ("12px", 12),
    ("0x1F", 31),
])
def test_parse_int(text, expected):
    value = parse_int(text)
    assert value == expected
    assert isinstance(value, int)


@pytest.mark.parametrize("text", ["", "abc", "x5", ".", "0x", "0xg", "-0x"])
def test_parse_int_non_numeric_is_nan(text):
    assert math.isnan(parse_int(text))


@pytest.mark.parametrize("text, expected", [
    ("0.25", 0.25),
    ("1", 1.0),
    ("-.5", -0.5),
    ("1e3x", 1000.0),
    ("2.5e", 2.5),
])
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_parse_float_infinity_and_nan():
    assert parse_float("Infinity") == float('inf')
    assert math.isnan(parse_float("wide"))


@pytest.mark.parametrize("percent, stars", [
    ("0", 1),
    ("1", 1),
    ("25", 2),
    ("50", 3),
    ("75", 4),
    ("88", 5),
    ("99", 5),
])
def test_microsoft_rating(percent, stars):
    assert microsoft_rating(percent) == stars


def test_microsoft_rating_non_numeric_is_nan():
    assert math.isnan(microsoft_rating("unrated"))


def test_coerce_value_dispatches_on_tag_name():
    assert coerce_value('stArea:w', '0.1') == 0.1
    assert coerce_value('xmp:Rating', '5') == 5
    assert coerce_value('MicrosoftPhoto:Rating', '0') == 1
    assert coerce_value('dc:title', '42') == '42'
    assert coerce_value('stArea:unit', 'normalized') == 'normalized'


def test_accumulate_scalar_pair_then_list():
    mapping = {}
    accumulate(mapping, 'k', 'a')
    assert mapping == {'k': 'a'}
    accumulate(mapping, 'k', 'b')
    assert mapping == {'k': ['a', 'b']}
    accumulate(mapping, 'k', 'c')
    assert mapping == {'k': ['a', 'b', 'c']}


def test_accumulate_keeps_keys_independent():
    mapping = {}
    accumulate(mapping, 'a', 1)
    accumulate(mapping, 'b', 2)
    accumulate(mapping, 'a', 3)
    assert mapping == {'a': [1, 3], 'b': 2}
