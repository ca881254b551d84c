"""Command-line entry point: print the commands that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .algo import solve
from .parsing import ParseError, is_sorted, parse
from .stacks import Stacks

_ERROR = "Error\n"


def push_swap(
    args: Sequence[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """Write to out the commands sorting args, or "Error" to err if they are invalid."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    try:
        ranks = parse(args)
    except ParseError:
        err.write(_ERROR)
        return
    if is_sorted(ranks):
        return
    stacks = Stacks(ranks, emit=lambda name: out.write(name + "\n"))
    solve(stacks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run with the given arguments (the command line by default)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if args[0] == "":
        sys.stderr.write(_ERROR)
    else:
        push_swap(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())