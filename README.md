# stacksort

`stacksort` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints the operations it uses, one per line.
It also provides a few small helpers: character tests, number conversions,
string functions, a printf-style formatter and a chunked line reader.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The same entry point can be run as `python -m stacksort.cli`.

Numbers can be given as separate arguments or as a single space-separated
argument. Each value is replaced by its rank in sorted order, the ranks are
loaded into stack `a` (first number on top), and the command prints the
operations it applies to sort them in ascending order:

| op    | effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of `a`                 |
| `sb`  | swap the top two elements of `b`                 |
| `ss`  | swap the tops of `a` and `b`                     |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` upward (the top goes to the bottom)   |
| `rb`  | rotate `b` upward                                |
| `rr`  | rotate `a` and `b` upward                        |
| `rra` | rotate `a` downward (the bottom goes to the top) |
| `rrb` | rotate `b` downward                              |
| `rrr` | rotate `a` and `b` downward                      |

An operation on a stack with fewer elements than it needs (an empty stack for
`pa`/`pb`, fewer than two elements otherwise) does nothing and prints nothing.
`ss` and `rr` act on `a` and are only reported when `b` can also be changed;
`rrr` rotates `b` downward twice and reports `rrb` followed by `rrr`.

The command prints `Error` to standard error when:

- an argument is not an optional sign followed by digits,
- a value falls outside the 32-bit signed range,
- a value appears more than once,
- the first argument is empty.

When the input is already sorted, the command prints nothing. With no
arguments it does nothing.

## Library use

```python
from stacksort.parsing import parse
from stacksort.stacks import Stacks
from stacksort.algo import solve

ops = []
stacks = Stacks(parse(["3", "1", "2"]), [], ops.append)
solve(stacks)
print(ops)
print(list(stacks.a))
```

`parse` returns each value's rank in sorted order. It raises
`stacksort.parsing.ParseError` (a `ValueError`) when the input is invalid.
`Stacks` keeps the two stacks as deques in `a` and `b`, top at index 0, and
passes each reported operation name to its `emit` callable, which prints to
standard output when none is given. `stacksort.cli.push_swap(args, out, err)`
runs the whole command against the given text streams.

Other modules:

- `stacksort.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`, `atoi`, `atoll` and `itoa`.
- `stacksort.strings`: `split`, `strchr`, `strrchr`, `strlcat`, `strlcpy`,
  `strncmp`, `strnstr`, `strtrim`, `substr`, `strjoin`, `strmapi`, `striteri`,
  `memchr` and `memcmp`. Search functions return an index or `None`;
  `strlcpy` and `strlcat` return the resulting string together with the
  length they tried to build.
- `stacksort.printf`: `format_printf` and `printf`, which accept
  `%c %s %p %d %i %u %x %X %%` (integers are treated as 32-bit, pointers as
  64-bit; `None` prints as `(null)` for `%s` and `(nil)` for `%p`), plus
  `put_char`, `put_str`, `put_endl` and `put_nbr`. `printf` writes to
  standard output unless a `file` is given and returns the length written.
- `stacksort.next_line`: `LineReader` and `read_lines`, which read lines,
  newline included, from a text or binary stream in chunks of
  `buffer_size` (5 by default), keeping any data read past a line for the
  next call.

## What it does not do

There is no checker command: the package prints a sequence of operations but
does not read one back to verify that it sorts a given input.

## Tests

```
pip install ".[test]"
pytest
```