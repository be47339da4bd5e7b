"""A rectangular grid holding elements that may span several cells."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from bolognaise.geometry import Position, Size


@runtime_checkable
class GridElement(Protocol):
    """Anything that can be placed on a grid."""

    def size(self) -> Size: ...

    def display_char(self) -> str: ...


class GridError(Exception):
    """Base class of grid errors."""


class OutOfBoundError(GridError):
    """The element would stick out of the grid."""


class InsertionWouldOverlapError(GridError):
    """The element would cover a cell that is already taken."""


@dataclass(frozen=True)
class _Ref:
    """A cell covered by an element whose top-left corner is ``origin``."""

    origin: Position


T = TypeVar("T", bound=GridElement)


class Grid(Generic[T]):
    """A ``width`` x ``height`` grid, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be non-negative: {width}x{height}")
        self._width = width
        self._height = height
        self._cells: list[T | _Ref | None] = [None] * (width * height)

    @classmethod
    def from_fn(cls, width: int, height: int, f: Callable[[int, int], T]) -> Grid[T]:
        """Build a grid whose every cell holds ``f(x, y)``."""
        grid = cls(width, height)
        grid._cells = [f(x, y) for y in range(height) for x in range(width)]
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, pos: Position) -> int:
        return pos.y * self._width + pos.x

    def render(self) -> str:
        """Draw the grid, one line per row, a space for each empty cell."""
        lines = []
        for y in range(self._height):
            row = (self.get(Position(x, y)) for x in range(self._width))
            lines.append(
                "".join(" " if data is None else data.display_char() for data in row)
            )
        return "".join(f"{line}\n" for line in lines)

    def display(self) -> None:
        """Print the drawing of the grid."""
        print(self.render())

    def insert(self, top_left: Position, data: T) -> None:
        """Place ``data`` with its top-left corner at ``top_left``.

        Raises OutOfBoundError or InsertionWouldOverlapError; the grid is left
        unchanged when either is raised.
        """
        size = data.size()
        if top_left.x + size.width > self._width:
            raise OutOfBoundError(
                f"element of width {size.width} at {top_left} exceeds grid width {self._width}"
            )
        if top_left.y + size.height > self._height:
            raise OutOfBoundError(
                f"element of height {size.height} at {top_left} exceeds grid height {self._height}"
            )

        covered = [
            self._index(Position(x, y))
            for x in range(top_left.x, top_left.x + size.width)
            for y in range(top_left.y, top_left.y + size.height)
        ]
        if any(self._cells[index] is not None for index in covered):
            raise InsertionWouldOverlapError(
                f"element at {top_left} would overlap an existing element"
            )

        ref = _Ref(top_left)
        for index in covered:
            self._cells[index] = ref
        self._cells[self._index(top_left)] = data

    def get(self, pos: Position) -> T | None:
        """Return the element covering ``pos``, or None if the cell is empty or outside."""
        if pos.x >= self._width or pos.y >= self._height:
            return None
        cell = self._cells[self._index(pos)]
        if isinstance(cell, _Ref):
            anchor = self._cells[self._index(cell.origin)]
            if anchor is None or isinstance(anchor, _Ref):
                raise RuntimeError(
                    f"Invalid grid layout: ref cell at {pos} points to invalid cell at {cell.origin}"
                )
            return anchor
        return cell

    def cells(self) -> Iterator[T]:
        """Iterate over the placed elements in row order."""
        return (
            cell for cell in self._cells if cell is not None and not isinstance(cell, _Ref)
        )

    def positioned_cells(self) -> Iterator[tuple[Position, T]]:
        """Iterate over the placed elements in row order, with their top-left positions."""
        for index, cell in enumerate(self._cells):
            if cell is not None and not isinstance(cell, _Ref):
                yield Position(index % self._width, index // self._width), cell