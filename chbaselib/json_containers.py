"""JSON arrays and objects, and reading any JSON value from text."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional, TypeVar, Union

from .json_base import JsonFormatError, JsonNull, JsonValue, NULL_TEXT, extract_string, join_raw_text
from .json_scalars import JsonBoolean, JsonNumber, JsonString
from .text_object import TextObject

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

_V = TypeVar("_V", bound=JsonValue)


def _try_load(cls: type[_V], text: str) -> Optional[_V]:
    value = cls()
    try:
        value.load(text)
    except JsonFormatError:
        return None
    return value


def _loose_number(text: str) -> Optional[JsonNumber]:
    """Read text as a number the lenient way: any longer text becomes one.

    A single non-digit character is not a number. Otherwise the leading
    numeric part is used, or zero when there is none.
    """
    if not text:
        return None
    if len(text) == 1 and not text.isdigit():
        return None
    number = _try_load(JsonNumber, text)
    if number is not None:
        return number
    match = _LEADING_NUMBER.match(text)
    return JsonNumber(float(match.group()) if match else 0.0)


def parse_value(text: str) -> JsonValue:
    """Read one JSON value from text that has no surrounding whitespace.

    Tries object, array, string, boolean and number in that order; text
    that is none of these gives a JsonNull.
    """
    if text == NULL_TEXT:
        return JsonNull()
    for cls in (JsonObject, JsonArray, JsonString, JsonBoolean):
        value = _try_load(cls, text)
        if value is not None:
            return value
    number = _loose_number(text)
    if number is not None:
        return number
    return JsonNull()


def to_json_value(value: object) -> JsonValue:
    """Wrap a Python value (None, bool, number, str, list, dict) as a JsonValue."""
    if isinstance(value, JsonValue):
        return value
    if value is None:
        return JsonNull()
    if isinstance(value, bool):
        return JsonBoolean(value)
    if isinstance(value, (int, float)):
        return JsonNumber(value)
    if isinstance(value, str):
        return JsonString(value)
    if isinstance(value, Mapping):
        result = JsonObject()
        for name, item in value.items():
            result[str(name)] = item
        return result
    if isinstance(value, Iterable):
        return JsonArray.from_values(value)
    raise TypeError(f"cannot use {type(value).__name__} as a JSON value")


def _split_lines(inner: str) -> TextObject:
    return TextObject(extract_string(inner), ",")


def _cast(value: Optional[JsonValue], cls: type[_V]) -> Optional[_V]:
    return value if isinstance(value, cls) else None


class JsonArray(JsonValue):
    """An ordered list of JSON values."""

    def __init__(self, values: Optional[Iterable[object]] = None) -> None:
        self._values: list[JsonValue] = []
        if values is not None:
            for value in values:
                self.append(value)

    @classmethod
    def from_values(cls, values: Iterable[object]) -> JsonArray:
        """Build an array from Python values, nesting lists as arrays."""
        return cls(values)

    def load(self, text: str) -> None:
        if len(text) < 2 or text[0] != "[" or text[-1] != "]":
            raise JsonFormatError(f"not a JSON array: {text!r}")
        lines = _split_lines(text[1:-1])
        values: list[JsonValue] = []
        position = 0
        while position < len(lines):
            raw, position = join_raw_text(position, lines.line(position), lines, False)
            position += 1
            if not raw:
                continue
            values.append(parse_value(raw))
        self._values = values

    def dump(self) -> str:
        return "[" + ",".join(value.dump() for value in self._values) + "]"

    def append(self, value: object) -> None:
        """Add a value at the end; None is ignored."""
        if value is None:
            return
        self._values.append(to_json_value(value))

    def __getitem__(self, index: int) -> JsonValue:
        return self._values[index]

    def __setitem__(self, index: int, value: object) -> None:
        """Replace an element; setting None removes it."""
        if value is None:
            del self[index]
            return
        self._values[index] = to_json_value(value)

    def __delitem__(self, index: int) -> None:
        """Remove the element at index; raises IndexError when there is none."""
        if not -len(self._values) <= index < len(self._values):
            raise IndexError(f"array index out of range: {index}")
        self._values.pop(index)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(list(self._values))

    def clear(self) -> None:
        self._values.clear()

    def _get(self, index: int) -> Optional[JsonValue]:
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_object(self, index: int) -> Optional[JsonObject]:
        return _cast(self._get(index), JsonObject)

    def get_array(self, index: int) -> Optional[JsonArray]:
        return _cast(self._get(index), JsonArray)

    def get_string(self, index: int) -> Optional[JsonString]:
        return _cast(self._get(index), JsonString)

    def get_boolean(self, index: int) -> Optional[JsonBoolean]:
        return _cast(self._get(index), JsonBoolean)

    def get_number(self, index: int) -> Optional[JsonNumber]:
        return _cast(self._get(index), JsonNumber)

    def __repr__(self) -> str:
        return f"JsonArray({self._values!r})"


class JsonObject(JsonValue):
    """Named JSON values, kept and written in sorted name order."""

    def __init__(self) -> None:
        self._values: dict[str, JsonValue] = {}

    @staticmethod
    def _check_name(name: str) -> None:
        if '"' in name:
            raise ValueError(f"parameter name must not hold a quote: {name!r}")

    def load(self, text: str) -> None:
        if len(text) < 2 or text[0] != "{" or text[-1] != "}":
            raise JsonFormatError(f"not a JSON object: {text!r}")
        lines = _split_lines(text[1:-1])
        values: dict[str, JsonValue] = {}
        position = 0
        while position < len(lines):
            parts = lines.line(position).split(":")
            if len(parts) < 2:
                position += 1
                continue
            name = parts[0]
            if len(name) < 2 or name[0] != '"' or name[-1] != '"':
                raise JsonFormatError(f"parameter name is not quoted: {name!r}")
            name = name[1:-1]
            if '"' in name:
                raise JsonFormatError(f"parameter name holds a quote: {name!r}")
            raw, position = join_raw_text(position, parts[1], lines, True)
            position += 1
            if not raw:
                raise JsonFormatError(f"missing or unbalanced value for {name!r}")
            values[name] = parse_value(raw)
        self._values = values

    def dump(self) -> str:
        items = (f'"{name}":{self._values[name].dump()}' for name in self.keys())
        return "{" + ",".join(items) + "}"

    def __setitem__(self, name: str, value: object) -> None:
        """Set a value; None stores a JSON null."""
        self._check_name(name)
        self._values[name] = to_json_value(value)

    def __getitem__(self, name: str) -> JsonValue:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._values)

    def remove(self, name: str) -> None:
        """Replace the value with null; a missing name is ignored."""
        if name in self._values:
            self._values[name] = JsonNull()

    def __delitem__(self, name: str) -> None:
        """Drop the name and its value; raises KeyError when it is missing."""
        if name not in self._values:
            raise KeyError(name)
        self._values.pop(name)

    def clear(self) -> None:
        self._values.clear()

    def keys(self) -> list[str]:
        return sorted(self._values)

    def values(self) -> list[JsonValue]:
        return [self._values[name] for name in self.keys()]

    def keys_array(self) -> JsonArray:
        return JsonArray(JsonString(name) for name in self.keys())

    def values_array(self) -> JsonArray:
        return JsonArray(self.values())

    def get_object(self, name: str) -> Optional[JsonObject]:
        return _cast(self._values.get(name), JsonObject)

    def get_array(self, name: str) -> Optional[JsonArray]:
        return _cast(self._values.get(name), JsonArray)

    def get_string(self, name: str) -> Optional[JsonString]:
        return _cast(self._values.get(name), JsonString)

    def get_boolean(self, name: str) -> Optional[JsonBoolean]:
        return _cast(self._values.get(name), JsonBoolean)

    def get_number(self, name: str) -> Optional[JsonNumber]:
        return _cast(self._values.get(name), JsonNumber)

    def __repr__(self) -> str:
        return f"JsonObject({self._values!r})"


JsonContainer = Union[JsonArray, JsonObject]