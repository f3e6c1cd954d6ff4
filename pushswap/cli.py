"""Command line entry point: print the operations that sort the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from pushswap.parsing import InputError, init_stacks
from pushswap.sorting import sort_stacks


def has_blank_argument(args: Iterable[str]) -> bool:
    """Tell whether any argument is empty or made only of spaces."""
    return any(not arg.strip(" ") for arg in args)


def main(argv: list[str] | None = None) -> int:
    """Sort the numbers given as arguments and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if has_blank_argument(args):
        sys.stderr.write("Error\n")
        return 1
    try:
        stacks = init_stacks(args)
    except InputError as error:
        sys.stderr.write("Error\n")
        return error.status
    if stacks is None:
        return 1
    sort_stacks(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())