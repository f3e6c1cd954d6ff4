import io

import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    count_numbers,
    has_duplicates,
    init_stacks,
    is_sorted,
    parse_arguments,
    parse_int,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7", -7),
        ("+13", 13),
        ("--5", 5),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("2147483647", INT_MAX),
        ("-2147483648", INT_MIN),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_out_of_range_exits_with_zero(text):
    with pytest.raises(InputError) as info:
        parse_int(text)
    assert info.value.status == 0
    assert str(info.value) == "Error"


def test_count_numbers_counts_across_arguments():
    assert count_numbers(["1 2 3", "4"]) == 4


def test_count_numbers_ignores_extra_spaces():
    assert count_numbers(["  1   -2 ", "+3"]) == 3


def test_count_numbers_with_nothing():
    assert count_numbers([]) == 0
    assert count_numbers(["", "   "]) == 0


@pytest.mark.parametrize(
    "args", [["1a"], ["1-2"], ["+-1"], ["-"], ["1\t2"], ["3", "x"], ["5+"]]
)
def test_count_numbers_rejects_malformed(args):
    with pytest.raises(InputError) as info:
        count_numbers(args)
    assert info.value.status == 1


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 -1", "+2"]) == [3, -1, 2]


def test_parse_arguments_round_trips_printed_numbers():
    values = [INT_MIN, -40, 0, 7, INT_MAX]
    assert parse_arguments([" ".join(map(str, values))]) == values


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1])
    assert is_sorted([1, 2, 2, 9])
    assert not is_sorted([2, 1])


def test_has_duplicates():
    assert has_duplicates([1, 2, 1])
    assert not has_duplicates([1, 2, 3])
    assert not has_duplicates([])


def test_init_stacks_builds_stack_a():
    out = io.StringIO()
    stacks = init_stacks(["3 1", "2"], out)
    assert stacks.a == [3, 1, 2]
    assert stacks.b == []
    assert stacks.out is out


def test_init_stacks_returns_none_when_sorted():
    assert init_stacks(["1 2 3"]) is None
    assert init_stacks(["5"]) is None


def test_init_stacks_returns_none_without_numbers():
    assert init_stacks(["   "]) is None


def test_init_stacks_rejects_duplicates():
    with pytest.raises(InputError) as info:
        init_stacks(["3 1 3"])
    assert info.value.status == 1


def test_init_stacks_overflow_exits_with_zero():
    with pytest.raises(InputError) as info:
        init_stacks(["3 1 2147483648"])
    assert info.value.status == 0


def test_form_is_checked_before_range():
    with pytest.raises(InputError) as info:
        init_stacks(["99999999999", "x"])
    assert info.value.status == 1