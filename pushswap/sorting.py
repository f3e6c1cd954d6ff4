"""Sorting strategies that solve the stacks with the eight operations."""

from __future__ import annotations

from pushswap.parsing import is_sorted
from pushswap.search import max_index, min_index, nth_smallest
from pushswap.stacks import Stacks

SMALL_INPUT_CHUNK = 20
LARGE_INPUT_CHUNK = 70
LARGE_INPUT_THRESHOLD = 250
CHUNK_SORT_THRESHOLD = 20


def tiny_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three elements."""
    a = stacks.a
    if is_sorted(a):
        return
    largest = max(a)
    if len(a) == 2 or a[2] == largest:
        stacks.sa()
        return
    if a[0] == largest:
        stacks.ra()
    if a[0] > a[1]:
        stacks.sa()
        return
    if a[0] < a[1] and a[2] == largest:
        return
    if a[1] == largest:
        stacks.sa()
        stacks.ra()
    if a[0] > a[1]:
        stacks.sa()


def sort_five(stacks: Stacks) -> None:
    """Sort five elements: park the two smallest on b, sort three, bring back."""
    pushed = 0
    while pushed < 2:
        smallest = min_index(stacks.a)
        if smallest == 0:
            stacks.pb()
            pushed += 1
        elif smallest < len(stacks.a) // 2:
            stacks.ra()
        else:
            stacks.rra()
    tiny_sort(stacks)
    stacks.pa()
    stacks.pa()


def selection_sort(stacks: Stacks) -> None:
    """Push the smallest of a onto b until one is left, then pull all back."""
    while len(stacks.a) > 1:
        smallest = min_index(stacks.a)
        size = len(stacks.a)
        if smallest <= size // 2:
            for _ in range(smallest):
                stacks.ra()
        else:
            for _ in range(size - smallest):
                stacks.rra()
        stacks.pb()
    while stacks.b:
        stacks.pa()


def push_chunk(stacks: Stacks, upper_bound: int, midpoint: int, chunk_size: int) -> None:
    """Push up to ``chunk_size`` values not above ``upper_bound`` onto b.

    Pushed values not above ``midpoint`` are rotated to the bottom of b.
    """
    rotations = 0
    pushed = 0
    while rotations < len(stacks.a):
        if pushed >= chunk_size:
            break
        if stacks.a[0] <= upper_bound:
            stacks.pb()
            pushed += 1
            if stacks.b[0] <= midpoint:
                stacks.rb()
        else:
            stacks.ra()
            rotations += 1


def _chunk_bounds(values: list[int], chunk_size: int) -> tuple[int, int]:
    upper = nth_smallest(values, chunk_size)
    spread = upper - values[min_index(values)]
    return upper, upper - spread // 2


def push_to_b(stacks: Stacks, chunk_size: int) -> None:
    """Empty a onto b chunk by chunk, smallest chunks first."""
    while stacks.a:
        upper, midpoint = _chunk_bounds(stacks.a, chunk_size)
        push_chunk(stacks, upper, midpoint, chunk_size)


def push_to_a(stacks: Stacks) -> None:
    """Bring b back onto a, largest value first, so that a ends sorted."""
    while stacks.b:
        largest_at = max_index(stacks.b)
        largest = stacks.b[largest_at]
        while stacks.b[0] != largest:
            if largest_at > len(stacks.b) // 2:
                stacks.rrb()
            else:
                stacks.rb()
        stacks.pa()


def chunk_sort(stacks: Stacks) -> None:
    """Sort a large stack by pushing it to b in chunks and pulling it back."""
    if len(stacks.a) <= LARGE_INPUT_THRESHOLD:
        chunk_size = SMALL_INPUT_CHUNK
    else:
        chunk_size = LARGE_INPUT_CHUNK
    push_to_b(stacks, chunk_size)
    push_to_a(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy that suits the size of a and run it."""
    size = len(stacks.a)
    if size <= 3:
        tiny_sort(stacks)
    elif size == 5:
        sort_five(stacks)
    elif size < CHUNK_SORT_THRESHOLD:
        selection_sort(stacks)
    else:
        chunk_sort(stacks)