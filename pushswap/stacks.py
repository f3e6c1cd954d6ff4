"""The two stacks and the eight operations that move numbers between them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, index 0 being the top of each.

    Every operation that changes a stack writes its name, one per line,
    to ``out`` (standard output when ``out`` is None).
    """

    a: list[int]
    b: list[int] = field(default_factory=list)
    out: TextIO | None = None

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)

    def _emit(self, name: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(name + "\n")

    def pa(self) -> None:
        """Move the top of b onto the top of a."""
        if not self.b:
            raise IndexError("pa: stack b is empty")
        self.a.insert(0, self.b.pop(0))
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto the top of b."""
        if not self.a:
            raise IndexError("pb: stack a is empty")
        self.b.insert(0, self.a.pop(0))
        self._emit("pb")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if len(self.a) < 2:
            raise IndexError("sa: stack a holds fewer than two elements")
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if len(self.b) < 2:
            raise IndexError("sb: stack b holds fewer than two elements")
        self.b[0], self.b[1] = self.b[1], self.b[0]
        self._emit("sb")

    def ra(self) -> None:
        """Rotate a upwards; does nothing when a holds at most one element."""
        if len(self.a) <= 1:
            return
        self.a.append(self.a.pop(0))
        self._emit("ra")

    def rb(self) -> None:
        """Rotate b upwards: its top goes to the bottom."""
        if not self.b:
            raise IndexError("rb: stack b is empty")
        self.b.append(self.b.pop(0))
        self._emit("rb")

    def rra(self) -> None:
        """Rotate a downwards: its bottom goes to the top."""
        if not self.a:
            raise IndexError("rra: stack a is empty")
        self.a.insert(0, self.a.pop())
        self._emit("rra")

    def rrb(self) -> None:
        """Rotate b downwards: its bottom goes to the top."""
        if not self.b:
            raise IndexError("rrb: stack b is empty")
        self.b.insert(0, self.b.pop())
        self._emit("rrb")