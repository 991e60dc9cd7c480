"""An unbalanced binary search tree of integers without duplicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class TreeNode:
    """A tree node; smaller values go left, larger go right."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinarySearchTree:
    """Binary search tree; inserting an existing value does nothing."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: int) -> None:
        """Insert a value unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        current = self.root
        while True:
            if value == current.value:
                return
            if value < current.value:
                if current.left is None:
                    current.left = TreeNode(value)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(value)
                    return
                current = current.right

    def contains(self, value: int) -> bool:
        """Return whether the value is in the tree."""
        current = self.root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def dfs_pre_order(self) -> List[int]:
        """Return the values in depth-first pre-order: node, left subtree, right subtree."""
        return list(self._walk(self.root))

    @classmethod
    def _walk(cls, node: Optional[TreeNode]) -> Iterator[int]:
        stack = [node] if node is not None else []
        while stack:
            current = stack.pop()
            yield current.value
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)