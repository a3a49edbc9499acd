"""JSON booleans, numbers and strings."""

from __future__ import annotations

import math
import re
from typing import Union

from .json_base import JsonFormatError, JsonValue

TRUE_TEXT = "true"
FALSE_TEXT = "false"

_NUMBER_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")

# Characters written with a backslash escape, paired with the letter used
# after the backslash.  A tab is neither escaped nor accepted as "\t".
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("'", "'"),
    ('"', '"'),
    ("\\", "\\"),
    ("\b", "b"),
    ("\f", "f"),
    ("\n", "n"),
    ("\r", "r"),
)
_ESCAPE_OUT = {raw: "\\" + letter for raw, letter in _ESCAPES}
_ESCAPE_IN = {letter: raw for raw, letter in _ESCAPES}
_QUOTES = "'\""

Number = Union[int, float]


def _number_text(value: Number) -> str:
    """Write a number the way a fixed six-decimal conversion does."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.6f}"


class JsonBoolean(JsonValue):
    """A JSON ``true`` or ``false``."""

    def __init__(self, value: Union[bool, JsonBoolean] = False) -> None:
        self.value = bool(value)

    def load(self, text: str) -> None:
        if text == TRUE_TEXT:
            self.value = True
        elif text == FALSE_TEXT:
            self.value = False
        else:
            raise JsonFormatError(f"not a JSON boolean: {text!r}")

    def dump(self) -> str:
        return TRUE_TEXT if self.value else FALSE_TEXT

    def __bool__(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return self.dump()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonBoolean):
            return self.value == other.value
        if isinstance(other, bool):
            return self.value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonBoolean({self.value!r})"


def _number_of(other: object) -> float:
    if isinstance(other, JsonNumber):
        return other.value
    if isinstance(other, (int, float)) and not isinstance(other, bool):
        return float(other)
    raise TypeError(f"cannot use {type(other).__name__} as a JSON number")


class JsonNumber(JsonValue):
    """A JSON number held as a float.

    Division by zero divides by one instead; ``%`` follows ``math.fmod``.
    """

    def __init__(self, value: Union[Number, JsonNumber] = 0.0) -> None:
        self.value = _number_of(value)

    def load(self, text: str) -> None:
        if not _NUMBER_PATTERN.fullmatch(text):
            raise JsonFormatError(f"not a JSON number: {text!r}")
        self.value = float(text)

    def dump(self) -> str:
        text = f"{self.value:.6f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def __str__(self) -> str:
        return self.dump()

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __eq__(self, other: object) -> bool:
        try:
            return self.value == _number_of(other)
        except TypeError:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        self.value += _number_of(other)
        return self

    def __isub__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        self.value -= _number_of(other)
        return self

    def __imul__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        self.value *= _number_of(other)
        return self

    def __itruediv__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        divisor = _number_of(other)
        self.value /= divisor if divisor != 0.0 else 1.0
        return self

    def __imod__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        self.value = math.fmod(self.value, _number_of(other))
        return self

    def __add__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        result = JsonNumber(self)
        result += other
        return result

    def __sub__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        result = JsonNumber(self)
        result -= other
        return result

    def __mul__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        result = JsonNumber(self)
        result *= other
        return result

    def __truediv__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        result = JsonNumber(self)
        result /= other
        return result

    def __mod__(self, other: Union[Number, JsonNumber]) -> JsonNumber:
        result = JsonNumber(self)
        result %= other
        return result

    def __repr__(self) -> str:
        return f"JsonNumber({self.value!r})"


class JsonString(JsonValue):
    """A JSON string; numbers given to it are stored as their text."""

    def __init__(self, value: Union[str, Number, JsonString] = "") -> None:
        self.value = self._text_of(value)

    @staticmethod
    def _text_of(value: object) -> str:
        if isinstance(value, JsonString):
            return value.value
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return _number_text(value)
        raise TypeError(f"cannot use {type(value).__name__} as a JSON string")

    def load(self, text: str) -> None:
        if len(text) < 2 or text[0] not in _QUOTES or text[-1] != text[0]:
            raise JsonFormatError(f"not a quoted JSON string: {text!r}")
        body = text[1:-1]
        chars: list[str] = []
        pos = 0
        while pos < len(body):
            char = body[pos]
            if char == "\n":
                raise JsonFormatError("line break inside a JSON string")
            if char == "\\":
                letter = body[pos + 1] if pos + 1 < len(body) else ""
                if letter not in _ESCAPE_IN:
                    raise JsonFormatError(f"unknown escape sequence at {pos}")
                chars.append(_ESCAPE_IN[letter])
                pos += 2
                continue
            chars.append(char)
            pos += 1
        self.value = "".join(chars)

    def dump(self) -> str:
        body = "".join(_ESCAPE_OUT.get(char, char) for char in self.value)
        return f'"{body}"'

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonString):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: Union[str, JsonString]) -> JsonString:
        if not isinstance(other, (str, JsonString)):
            return NotImplemented
        self.value += self._text_of(other)
        return self

    def __add__(self, other: Union[str, JsonString]) -> JsonString:
        if not isinstance(other, (str, JsonString)):
            return NotImplemented
        return JsonString(self.value + self._text_of(other))

    def __repr__(self) -> str:
        return f"JsonString({self.value!r})"