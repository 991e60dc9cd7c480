"""A last-in, first-out stack built on a singly linked list."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: str, next_node: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next_node


class Stack:
    """LIFO stack of strings."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, value: str) -> None:
        """Put a value on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> str:
        """Remove and return the top value; IndexError if empty."""
        head = self._head
        if head is None:
            raise IndexError("pop from an empty stack")
        self._head = head.next
        self._size -= 1
        return head.value

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write each value as '-> value', top first, then a blank line; nothing if empty."""
        if self._head is None:
            return
        out = sys.stdout if file is None else file
        for value in self:
            out.write(f"-> {value}\n")
        out.write("\n")
        out.flush()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next