"""The two stacks of the sorting puzzle and the commands that act on them."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterable, Optional


def _print_command(name: str) -> None:
    print(name)


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    Every command that changes something reports its name through ``emit``,
    which prints it on standard output by default.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.a: Deque[int] = deque(a)
        self.b: Deque[int] = deque(b)
        self._emit = emit if emit is not None else _print_command

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: Deque[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks.

        When a is too short nothing happens; when only b is too short, a is
        swapped and no command is reported.
        """
        if len(self.a) < 2:
            return
        self._swap(self.a)
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._emit("ss")

    def ra(self) -> None:
        """Rotate a: its top goes to the bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate b: its top goes to the bottom."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks.

        When a is too short nothing happens; when only b is too short, a is
        rotated and no command is reported.
        """
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate a: its bottom comes to the top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom comes to the top."""
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks.

        b is reverse-rotated once more through ``rrb``, which reports itself
        before ``rrr`` is reported. When a is too short nothing happens; when
        only b is too short, a is reverse-rotated and nothing is reported.
        """
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self.rrb()
        self._emit("rrr")

    def index_of(self, value: int) -> int:
        """Position of value in a, counted from the top."""
        try:
            return self.a.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in stack a") from None