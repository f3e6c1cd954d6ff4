"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TextIO

from pushswap.stacks import Stacks

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_LEADING_DIGITS = re.compile(r"[0-9]*")
_WELL_FORMED_NUMBER = re.compile(r"[+-]?[0-9]+")
_NUMBER_LIKE = re.compile(r"[0-9+-]+")


class InputError(ValueError):
    """The input cannot be sorted; ``status`` is the exit status to use."""

    def __init__(self, message: str = "Error", status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def parse_int(text: str) -> int:
    """Read an integer like ``atol``, refusing values outside a 32-bit int.

    Leading whitespace is skipped, any run of signs is accepted (each ``-``
    flips the sign) and reading stops at the first non-digit. An
    out-of-range value raises :class:`InputError` with status 0.
    """
    rest = text.lstrip(_WHITESPACE)
    unsigned = rest.lstrip("+-")
    signs = rest[: len(rest) - len(unsigned)]
    sign = -1 if signs.count("-") % 2 else 1
    digits = _LEADING_DIGITS.match(unsigned).group()
    value = sign * int(digits) if digits else 0
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(status=0)
    return value


def count_numbers(args: Iterable[str]) -> int:
    """Count the numbers in the arguments, checking their form.

    Numbers are separated by spaces and each is an optional sign followed
    by digits; anything else raises :class:`InputError`.
    """
    count = 0
    for arg in args:
        for piece in arg.split(" "):
            if not piece:
                continue
            if not _WELL_FORMED_NUMBER.fullmatch(piece):
                raise InputError()
            count += 1
    return count


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Return every number found in the arguments, in order."""
    return [
        parse_int(match.group())
        for arg in args
        for match in _NUMBER_LIKE.finditer(arg)
    ]


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values are in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def has_duplicates(values: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    return len(set(values)) != len(values)


def init_stacks(args: Iterable[str], out: TextIO | None = None) -> Stacks | None:
    """Build the stacks from the arguments.

    Returns None when there is nothing to sort: no numbers at all, or
    numbers already in order. Malformed, out-of-range or repeated numbers
    raise :class:`InputError`.
    """
    args = list(args)
    if count_numbers(args) == 0:
        return None
    values = parse_arguments(args)
    if has_duplicates(values):
        raise InputError()
    if is_sorted(values):
        return None
    return Stacks(values, [], out)