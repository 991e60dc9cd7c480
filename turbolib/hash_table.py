"""A fixed-width hash table of string records, bucketed by key length."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO


@dataclass
class Record:
    """A key/value pair; an empty key marks a free slot."""

    key: str = ""
    value: str = ""


class HashTable:
    """Hash table with `width` buckets, each starting with `depth` free slots."""

    def __init__(self, width: int, depth: int) -> None:
        self.width = width
        self.depth = depth
        empty = Record()
        self._table: List[List[Record]] = [[empty] * depth for _ in range(width)]

    def _bucket(self, key: str) -> List[Record]:
        return self._table[len(key) % self.width]

    def create_item(self, key: str, value: str) -> None:
        """Store a record in the first free slot of its bucket, growing the bucket if full."""
        if not key:
            raise ValueError("key cannot be empty")
        bucket = self._bucket(key)
        record = Record(key, value)
        for index, slot in enumerate(bucket):
            if not slot.key:
                bucket[index] = record
                return
        bucket.append(record)
        self.depth += 1

    def update_item(self, key: str, value: str) -> None:
        """Replace the record with this key; KeyError if there is none."""
        if not key:
            raise ValueError("key cannot be empty")
        bucket = self._bucket(key)
        for index, slot in enumerate(bucket):
            if slot.key == key:
                bucket[index] = Record(key, value)
                return
        raise KeyError(key)

    def query_item(self, key: str) -> Record:
        """Return the record with this key; KeyError("item not found") if absent."""
        for record in self._bucket(key):
            if record.key == key:
                return record
        raise KeyError("item not found")

    def delete_item(self, key: str) -> None:
        """Clear the record with this key in place; KeyError if there is none."""
        for record in self._bucket(key):
            if record.key == key:
                record.key = ""
                record.value = ""
                return
        raise KeyError(key)

    def format_table(self) -> str:
        """Render every bucket, showing free slots as 'nil'."""
        lines = ["["]
        for bucket in self._table:
            cells = (
                f"{{{record.key}: {record.value}}}" if record.key else "nil"
                for record in bucket
            )
            lines.append(f"    [{', '.join(cells)}]")
        lines.append("]")
        return "\n".join(lines)

    def print_table(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered table followed by a newline."""
        out = sys.stdout if file is None else file
        out.write(self.format_table() + "\n")
        out.flush()