"""Simple counters, including one driven by matching characters."""

from __future__ import annotations

from typing import Any


class Counter:
    """An integer counter that steps up and down."""

    def __init__(self) -> None:
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def add(self) -> None:
        self._count += 1

    def sub(self) -> None:
        self._count -= 1

    def reset(self) -> None:
        self._count = 0


class Cumulative(Counter):
    """Counts up on ``add_char`` and down on ``sub_char``.

    The two characters must differ; a setter given the other's value is ignored.
    """

    def __init__(self, add_char: Any, sub_char: Any) -> None:
        super().__init__()
        self._add: Any = None
        self._sub: Any = None
        self.add_char = add_char
        self.sub_char = sub_char

    @property
    def add_char(self) -> Any:
        return self._add

    @add_char.setter
    def add_char(self, value: Any) -> None:
        if self._sub == value:
            return
        self._add = value

    @property
    def sub_char(self) -> Any:
        return self._sub

    @sub_char.setter
    def sub_char(self, value: Any) -> None:
        if self._add == value:
            return
        self._sub = value

    def update(self, value: Any) -> int:
        """Step the count for ``value`` and return the new count."""
        if value == self._add:
            self.add()
        elif value == self._sub:
            self.sub()
        return self.count