"""Text held as a list of lines split around a separator string."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CUT_CHAR = "\r\n"


class TextObject:
    """A piece of text stored as lines separated by ``cut_char``."""

    def __init__(self, text: str | None = None, cut_char: str = DEFAULT_CUT_CHAR) -> None:
        if not cut_char:
            raise ValueError("cut_char must not be empty")
        self._cut_char = cut_char
        self._lines: list[str] = []
        if text is not None:
            self.text = text

    @property
    def text(self) -> str:
        """The whole text, lines joined with the separator."""
        return self._cut_char.join(self._lines)

    @text.setter
    def text(self, value: str) -> None:
        self._lines = value.split(self._cut_char)

    @property
    def cut_char(self) -> str:
        """The separator; changing it splits the current text again."""
        return self._cut_char

    @cut_char.setter
    def cut_char(self, value: str) -> None:
        if not value:
            raise ValueError("cut_char must not be empty")
        if value == self._cut_char:
            return
        current = self.text
        self._cut_char = value
        self.text = current

    def line(self, index: int = 0) -> str:
        """Return one line, or an empty string when ``index`` is out of range."""
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return ""

    def __getitem__(self, index: int) -> str:
        return self.line(index)

    def substring(self, start: int = 0, end: int | None = None) -> str:
        """Return up to ``end`` characters of the text, beginning at ``start``."""
        text = self.text
        if start < 0 or start > len(text):
            raise IndexError("start position is out of range")
        if end is None:
            return text[start:]
        return text[start:start + end]

    def sub_object(self, start: int = 0, end: int | None = None) -> TextObject:
        """Return a new object (default separator) holding ``substring(start, end)``."""
        return TextObject(self.substring(start, end))

    def find_line(self, find_str: str, start: int = 0) -> int:
        """Return the 1-based number of the line holding the first match, 0 if none."""
        text = self.text
        base = text.find(find_str)
        if base < 0:
            return 0
        count = 1
        position = start
        while True:
            position = text.find(self._cut_char, position)
            if position < 0 or position >= base:
                return count
            count += 1
            position += 1

    def find(self, find_str: str, start: int = 0) -> int:
        """Return the position of ``find_str`` in the text, or -1."""
        return self.text.find(find_str, start)

    def insert_lines(self, text: str, index: int = 0) -> None:
        """Split ``text`` into lines and insert them before line ``index``.

        An index past the end is ignored.
        """
        if index < 0 or index > len(self._lines):
            return
        self._lines[index:index] = text.split(self._cut_char)

    def char_length(self) -> int:
        """Number of characters in the whole text."""
        return len(self.text)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def __repr__(self) -> str:
        return f"TextObject({self.text!r}, cut_char={self._cut_char!r})"