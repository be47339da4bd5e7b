"""Grid positions, sizes and rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A non-negative cell coordinate on a grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"position coordinates must be non-negative: {self}")

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Size:
    """A strictly positive width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"size dimensions must be positive: {self.width}x{self.height}"
            )

    def bounding_square(self) -> Size:
        """Return the smallest square that holds this size."""
        side = max(self.width, self.height)
        return Size(side, side)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    top_left: Position
    size: Size

    def contains(self, pos: Position) -> bool:
        """Whether ``pos`` lies inside the rectangle (right and bottom edges excluded)."""
        return (
            self.top_left.x <= pos.x < self.top_left.x + self.size.width
            and self.top_left.y <= pos.y < self.top_left.y + self.size.height
        )