"""A small immutable string type with lookup and substring search."""

from __future__ import annotations

from typing import Union


class MyString:
    """An immutable string; indexing past the end yields a NUL character."""

    __slots__ = ("_text",)

    def __init__(self, text: Union[str, "MyString"] = "") -> None:
        self._text = str(text)

    def __len__(self) -> int:
        return len(self._text)

    def empty(self) -> bool:
        """Return True if the string has no characters."""
        return not self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MyString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MyString):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __getitem__(self, index: int) -> str:
        """Return the character at ``index``, or "\\0" when past the end."""
        if index < 0:
            raise IndexError(f"index must not be negative, got {index}")
        if index >= len(self._text):
            return "\0"
        return self._text[index]

    def find(self, substring: Union[str, "MyString"]) -> int:
        """Return the first index of ``substring``, or -1 if absent."""
        return self._text.find(str(substring))