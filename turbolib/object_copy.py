"""A character buffer with value semantics: copies never share storage."""

from __future__ import annotations

from typing import List

_TERMINATOR = "\0"


class String:
    """Mutable string backed by its own character buffer.

    The buffer holds the characters followed by a terminating NUL. Index
    access is allowed up to and including the terminator position.
    """

    def __init__(self, text: str) -> None:
        self._buffer: List[str] = list(text)
        self._size = len(self._buffer)
        self._buffer.append(_TERMINATOR)

    def copy(self) -> String:
        """Return a new String with its own copy of the buffer."""
        duplicate = String.__new__(String)
        duplicate._size = self._size
        duplicate._buffer = list(self._buffer)
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> String:
        return self.copy()

    def _check(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError("index must be an integer")
        if index < 0 or index > self._size:
            raise IndexError("out of bounds")

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> str:
        self._check(index)
        return self._buffer[index]

    def __setitem__(self, index: int, value: str) -> None:
        self._check(index)
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("value must be a single character")
        self._buffer[index] = value

    def __str__(self) -> str:
        text = "".join(self._buffer)
        return text.split(_TERMINATOR, 1)[0]

    def __repr__(self) -> str:
        return f"String({str(self)!r})"