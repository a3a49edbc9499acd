"""Base types and text helpers shared by the JSON value classes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .counter import Cumulative
from .text_object import TextObject

NULL_TEXT = "null"

_BREAK_BEFORE = "}]"
_BREAK_AFTER = "[{,"
_OPENERS = "[{"


class JsonFormatError(ValueError):
    """Raised when text cannot be read as the requested JSON value."""


class JsonValue(ABC):
    """A JSON value that can be read from and written to text."""

    @abstractmethod
    def load(self, text: str) -> None:
        """Replace this value with the one written in ``text``.

        Raises JsonFormatError when the text does not hold such a value.
        """

    @abstractmethod
    def dump(self) -> str:
        """Return the value written as JSON text."""

    def __str__(self) -> str:
        return self.dump()


class JsonNull(JsonValue):
    """The JSON null value."""

    def load(self, text: str) -> None:
        """Accept any text; a null has nothing to read."""

    def dump(self) -> str:
        return NULL_TEXT

    def __repr__(self) -> str:
        return "JsonNull()"


def tab_text(count: int) -> str:
    """Return ``count`` tab characters."""
    return "\t" * max(0, count)


def format_document(text: str) -> str:
    """Lay compact JSON text out over several lines with tab indentation.

    A line break follows every ``[``, ``{`` and ``,`` and precedes every
    ``}`` and ``]`` (except at the very start of the text).
    """
    objects = Cumulative("{", "}")
    arrays = Cumulative("[", "]")
    parts: list[str] = []
    for index, char in enumerate(text):
        objects.update(char)
        arrays.update(char)
        indent = "\n" + tab_text(objects.count + arrays.count)
        if char in _BREAK_BEFORE and index > 0:
            parts.append(indent)
        parts.append(char)
        if char in _BREAK_AFTER:
            parts.append(indent)
    return "".join(parts)


def extract_string(value: str) -> str:
    """Drop whitespace and control characters that stand outside strings.

    Characters inside a quoted string, or inside a nested object or array,
    are kept as they are.
    """
    objects = Cumulative("{", "}")
    arrays = Cumulative("[", "]")
    in_string = False
    nested = False
    kept: list[str] = []
    for char in value:
        if not in_string and not nested:
            code = ord(char)
            if code <= 32 or code == 127:
                continue
        kept.append(char)
        objects.update(char)
        arrays.update(char)
        nested = objects.count > 0 or arrays.count > 0
        if nested:
            continue
        if char == '"':
            in_string = not in_string
    return "".join(kept)


def join_raw_text(
    position: int, text: str, lines: TextObject, object_flag: bool
) -> tuple[str, int]:
    """Rejoin a nested object or array that was cut apart at commas.

    ``text`` is the value found on line ``position`` of ``lines``. When it
    opens an object or array, following lines are joined back on with commas
    until the brackets balance. With ``object_flag`` the value came from a
    ``name:value`` line split at colons, and the colon-separated pieces past
    the value are joined back first.

    Returns the joined text and the index of the last line used. The text is
    empty when the lines run out before the brackets balance.
    """
    if not text or text[0] not in _OPENERS:
        return text, position

    start = text[0]
    end = "]" if start == "[" else "}"
    result = text

    if object_flag:
        extra = lines.line(position).split(":")[2:]
        result += "".join(":" + piece for piece in extra)

    depth = Cumulative(start, end)
    for char in result:
        depth.update(char)

    while depth.count > 0:
        position += 1
        if position >= len(lines):
            return "", position
        line = lines.line(position)
        result += "," + line
        for char in line:
            depth.update(char)

    return result, position