"""Shapes whose subclasses compute their area in their own way."""

from __future__ import annotations


class Shape:
    """A shape with integer width and height."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height

    def area(self) -> int:
        """Width times height."""
        return self.width * self.height

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}, {self.height})"


class Rectangle(Shape):
    """A rectangle."""

    def area(self) -> int:
        """Width times height."""
        return self.width * self.height


class Triangle(Shape):
    """A triangle given by base width and height."""

    def area(self) -> int:
        """Half of width times height, truncated toward zero."""
        product = self.width * self.height
        half = abs(product) // 2
        return half if product >= 0 else -half