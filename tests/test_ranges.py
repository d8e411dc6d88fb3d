import pytest

from highlighter.macro.ranges import (
    expand_ranges,
    expand_ranges_within,
    parse_int,
    range_to_sequence,
)


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("", []),
        ("[3]", [3]),
        ("3", [3]),
        ("1,3,5", [1, 3, 5]),
        ("1-3", [1, 2, 3]),
        ("[1,3,5-7]", [1, 3, 5, 6, 7]),
        ("5-2", []),
        ("1,a,3", [1, 3]),
        ("1-2-3", []),
        ("4-4", [4]),
    ],
)
def test_expand_ranges(spec, expected):
    assert expand_ranges(spec) == expected


def test_expand_ranges_keeps_order_and_duplicates():
    assert expand_ranges("5,1-3,2") == [5, 1, 2, 3, 2]


def test_expand_ranges_skips_bad_tokens_between_good_ones():
    assert expand_ranges("[1,x-2,3-y,,4-6,7-5,8]") == [1, 4, 5, 6, 8]


def test_expand_ranges_strips_only_matching_brackets():
    # A lone bracket is not stripped, so the token fails to parse
    assert expand_ranges("[1,2") == [2]
    assert expand_ranges("1,2]") == [1]
    assert expand_ranges("[]") == []


def test_expand_ranges_is_deterministic():
    spec = "[2,4-6,9]"
    assert expand_ranges(spec) == expand_ranges(spec) == [2, 4, 5, 6, 9]


def test_range_to_sequence():
    assert range_to_sequence("1-3") == [1, 2, 3]
    assert range_to_sequence("10-12") == [10, 11, 12]


@pytest.mark.parametrize("token", ["5-2", "1-2-3", "a-3", "3-", "-3", "-", "1--2"])
def test_range_to_sequence_invalid_is_empty(token):
    assert range_to_sequence(token) == []


@pytest.mark.parametrize("spec", ["1_0", " 3", "3 ", "0x10", "٣"])
def test_expand_ranges_rejects_non_plain_integers(spec):
    assert expand_ranges(spec) == []


def test_expand_ranges_rejects_padded_range_bounds():
    assert expand_ranges("1_0,2 - 3,4-5") == [4, 5]


def test_expand_ranges_accepts_explicit_plus_sign():
    assert expand_ranges("+2,+3-4") == [2, 3, 4]


def test_parse_int():
    assert parse_int("42") == 42
    assert parse_int("-7") == -7
    assert parse_int("") is None
    assert parse_int("4 2") is None


def test_expand_ranges_within_clips_ranges():
    assert expand_ranges_within("[1,3-8,9,20-2]", 2, 5) == [3, 4, 5]
    assert expand_ranges_within("1-1000000000", 1, 3) == [1, 2, 3]
    assert expand_ranges_within("5-2,x,1-2-3", 1, 10) == []


def test_expand_ranges_within_keeps_order_and_duplicates():
    assert expand_ranges_within("4,1-3,2", 1, 4) == [4, 1, 2, 3, 2]
