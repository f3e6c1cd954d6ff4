# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. It prints the sequence of operations that sorts the
numbers in stack `a` into ascending order, one per line.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` | swap the top two elements of `a` / `b` |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` | rotate `a` / `b` up: the top element goes to the bottom |
| `rra` / `rrb` | rotate `a` / `b` down: the bottom element goes to the top |

## Installation

```
pip install .
```

## Usage

```
push-swap 3 2 1
push-swap "5 4 3 2 1"
push-swap 42 -7 "13 0" +8
```

Numbers may be given as separate arguments, as one argument with the numbers
separated by spaces, or as a mix of both. Each may carry a leading `+` or `-`.

Outcomes and exit statuses:

* no arguments: prints nothing, exits with 0;
* numbers sorted: prints the operations, exits with 0;
* numbers already in order: prints nothing, exits with 1;
* an argument that is empty or only spaces, a token that is not a number,
  or a repeated value: writes `Error` to standard error, exits with 1;
* a number outside the 32-bit signed range: writes `Error` to standard
  error, exits with 0.

How it sorts depends on the count:

* up to 3 numbers: a small fixed sequence of swaps and rotations;
* exactly 5: move the two smallest to `b`, sort the remaining three, push them back;
* other counts below 20: selection sort, pushing each minimum to `b`;
* 20 or more: chunked pushes to `b` (20 per chunk up to 250 numbers, 70
  above that), then the largest values are pulled back to `a` one at a time.

## Library use

```python
import io

from pushswap.parsing import init_stacks
from pushswap.sorting import sort_stacks

out = io.StringIO()
stacks = init_stacks(["3 1 2"], out)
sort_stacks(stacks)
print(out.getvalue())
```

* `pushswap.parsing.init_stacks(args, out)` returns a `Stacks`, or `None` when
  there are no numbers or they are already in order; it raises
  `pushswap.parsing.InputError` (with a `status` attribute) on invalid input.
  The module also has `parse_int`, `count_numbers`, `parse_arguments`,
  `is_sorted` and `has_duplicates`.
* `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, index 0 the
  top) and has one method per operation; each writes its name to `out`, or to
  standard output when `out` is `None`.
* `pushswap.sorting` has `sort_stacks`, which picks a strategy, and the
  strategies themselves: `tiny_sort`, `sort_five`, `selection_sort` and
  `chunk_sort` (with its steps `push_chunk`, `push_to_b` and `push_to_a`).
* `pushswap.search` has the selection helpers `nth_smallest`, `min_index`
  and `max_index`.
* `pushswap.cli` has `main(argv=None)`, behind the `push-swap` command, and
  `has_blank_argument`.

## What it does not do

There is no checker: the package does not read a list of operations and
verify that they sort a given input.

## Tests

```
pip install .[test]
pytest
```