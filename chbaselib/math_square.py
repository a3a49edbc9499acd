"""Sets of axis-aligned rectangles with intersection and difference."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; ``top`` lies above ``bottom`` (y grows upward)."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def is_valid(self) -> bool:
        """True when the width and height are not negative."""
        return self.width >= 0 and self.height >= 0

    def _has_area(self) -> bool:
        return self.width > 0 and self.height > 0

    def overlaps(self, other: Rect) -> bool:
        """True when the two rectangles share an area larger than zero."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.bottom < other.top
            and other.bottom < self.top
        )

    def intersection(self, other: Rect) -> Rect:
        """The rectangle common to both (possibly invalid when they do not meet)."""
        return Rect(
            max(self.left, other.left),
            min(self.top, other.top),
            min(self.right, other.right),
            max(self.bottom, other.bottom),
        )


Shape = Union[Rect, "MathSquare"]


class MathSquare:
    """An ordered collection of rectangles.

    Rectangles with a negative width or height are never stored.
    """

    def __init__(self, *args: object) -> None:
        self._rects: list[Rect] = []
        if not args:
            return
        if len(args) == 4:
            self.set_square(Rect(*(float(a) for a in args)))  # type: ignore[arg-type]
        elif len(args) == 1:
            self.set_square(args[0])  # type: ignore[arg-type]
        else:
            raise TypeError("MathSquare takes a shape, an iterable of Rect or four numbers")

    @staticmethod
    def _collect(square: object) -> list[Rect]:
        if isinstance(square, MathSquare):
            return list(square._rects)
        if isinstance(square, Iterable):
            rects = list(square)
            if not all(isinstance(r, Rect) for r in rects):
                raise TypeError("expected Rect items")
            return rects
        raise TypeError(f"cannot use {type(square).__name__} as rectangles")

    def set_square(self, square: Shape | Iterable[Rect]) -> None:
        """Replace the contents; an invalid single rectangle is ignored."""
        if isinstance(square, Rect):
            if not square.is_valid():
                return
            self._rects = [square]
            return
        rects = self._collect(square)
        self._rects = []
        for rect in rects:
            self.add_square(rect)

    def add_square(self, square: Shape | Iterable[Rect]) -> None:
        """Append a rectangle, or every rectangle of another collection."""
        if isinstance(square, Rect):
            if square.is_valid():
                self._rects.append(square)
            return
        for rect in self._collect(square):
            self.add_square(rect)

    def rects(self) -> list[Rect]:
        return list(self._rects)

    def first(self) -> Rect:
        if not self._rects:
            raise IndexError("no rectangles")
        return self._rects[0]

    def last(self) -> Rect:
        if not self._rects:
            raise IndexError("no rectangles")
        return self._rects[-1]

    def __len__(self) -> int:
        return len(self._rects)

    def __getitem__(self, index: int) -> Rect:
        return self._rects[index]

    def __iter__(self) -> Iterator[Rect]:
        return iter(list(self._rects))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MathSquare):
            return NotImplemented
        return self._rects == other._rects

    def __repr__(self) -> str:
        return f"MathSquare({self._rects!r})"

    def is_empty(self) -> bool:
        return not self._rects

    def _apply(self, other: Shape, operation: Callable[[Shape, Shape], MathSquare]) -> None:
        if isinstance(other, MathSquare):
            if other.is_empty():
                return
        elif self.is_empty():
            return
        self.set_square(operation(self, other))

    def and_(self, other: Shape) -> None:
        """Keep only the parts that lie inside ``other``."""
        self._apply(other, MathSquare.intersect)

    def or_(self, other: Shape) -> None:
        """Replace the contents with ``union(self, other)``."""
        self._apply(other, MathSquare.union)

    def sub(self, other: Shape) -> None:
        """Replace the contents with ``subtract(self, other)``."""
        self._apply(other, MathSquare.subtract)

    @staticmethod
    def intersect(base: Shape, other: Shape) -> MathSquare:
        """The overlap of each rectangle of ``base`` with each of ``other``."""
        return _combine(base, other, _intersect_rects)

    @staticmethod
    def union(base: Shape, other: Shape) -> MathSquare:
        """For each pair: the part of base outside other, then the overlap twice."""
        return _combine(base, other, _union_rects)

    @staticmethod
    def subtract(base: Shape, other: Shape) -> MathSquare:
        """For each rectangle of ``other``: the parts of ``base`` outside it."""
        return _combine(base, other, _subtract_rects)


def _as_square(shape: Shape) -> MathSquare:
    if isinstance(shape, MathSquare):
        return shape
    if isinstance(shape, Rect):
        return MathSquare(shape)
    raise TypeError(f"expected Rect or MathSquare, got {type(shape).__name__}")


def _combine(
    base: Shape, other: Shape, pair: Callable[[Rect, Rect], MathSquare]
) -> MathSquare:
    if isinstance(base, Rect) and isinstance(other, Rect):
        return pair(base, other)
    base_square = _as_square(base)
    result = MathSquare()
    if base_square.is_empty():
        return result
    if isinstance(other, Rect):
        for rect in base_square:
            result.add_square(pair(rect, other))
        return result
    for rect in _as_square(other):
        result.add_square(_combine(base_square, rect, pair))
    return result


def _intersect_rects(base: Rect, other: Rect) -> MathSquare:
    result = MathSquare()
    if not base._has_area() or not other._has_area():
        return result
    if not base.overlaps(other):
        return result
    result.add_square(base.intersection(other))
    return result


def _union_rects(base: Rect, other: Rect) -> MathSquare:
    result = _subtract_rects(base, other)
    result.add_square(_intersect_rects(base, other))
    result.add_square(_intersect_rects(other, base))
    return result


def _subtract_rects(base: Rect, sub: Rect) -> MathSquare:
    result = MathSquare()
    if not base._has_area():
        return result
    if not sub._has_area():
        result.add_square(base)
        return result
    if (
        base.right < sub.left
        or base.left > sub.right
        or base.top < sub.bottom
        or base.bottom > sub.top
    ):
        result.add_square(base)
        return result

    hole = base.intersection(sub)
    pieces = (
        Rect(base.left, base.top, hole.left, hole.top),
        Rect(hole.left, base.top, hole.right, hole.top),
        Rect(hole.right, base.top, base.right, hole.top),
        Rect(hole.right, hole.top, base.right, hole.bottom),
        Rect(hole.right, hole.bottom, base.right, base.bottom),
        Rect(hole.left, hole.bottom, hole.right, base.bottom),
        Rect(base.left, hole.bottom, hole.left, base.bottom),
        Rect(base.left, hole.top, hole.left, hole.bottom),
    )
    for piece in pieces:
        if piece._has_area():
            result.add_square(piece)
    return result