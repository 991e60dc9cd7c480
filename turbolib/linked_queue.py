"""A first-in, first-out queue built on a doubly linked list."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class Queue:
    """FIFO queue of integers."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Add a value at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the head; IndexError if empty."""
        head = self._head
        if head is None:
            raise IndexError("dequeue from an empty queue")
        self._head = head.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return head.value

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write each value as '-> value', head first, followed by a blank line."""
        out = sys.stdout if file is None else file
        for value in self:
            out.write(f"-> {value}\n")
        out.write("\n")
        out.flush()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next