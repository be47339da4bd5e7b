"""Superpositions of possible values and the errors raised while collapsing them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, List, TypeVar

from bolognaise.geometry import Position, Size
from bolognaise.items import Direction, Item, Liquid, Orientation
from bolognaise.recipes import (
    ASSEMBLING_MACHINE_RECIPES,
    CHEMICAL_PLANT_RECIPES,
    OIL_REFINERY_RECIPES,
    SMELTING_RECIPES,
    AssemblerRecipe,
    ChemicalRecipe,
    FurnaceRecipe,
    RefineryRecipe,
)

T = TypeVar("T")


class QuanticError(Exception):
    """Base class of errors raised while constraining or collapsing a superposition."""

    default_message = "Quantic error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class TooMuchConstraintsError(QuanticError):
    """The constraints left no possible value."""

    default_message = "Too much constraints!"


class EmptyCantCollapseError(QuanticError):
    """A superposition with no possible value cannot collapse."""

    default_message = "Can't collapse state with no possible values!"


class AlreadyCollapsedError(QuanticError):
    """The state has already collapsed to a single value."""

    default_message = "Can't collapse from an already collapsed state!"


class Superposition(List[T], Generic[T]):
    """An ordered list of the values a state may still collapse to."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        super().__init__(values)

    def entropy(self) -> float:
        """The number of values still possible."""
        return float(len(self))

    def collapse(self) -> T:
        """Pick the first possible value; raise EmptyCantCollapseError if there is none."""
        if not self:
            raise EmptyCantCollapseError()
        return self[0]

    def can_collapse_to(self, value: T) -> bool:
        """Whether ``value`` is among the possible values."""
        return value in self


def all_orientations() -> Superposition[Orientation]:
    """Every orientation."""
    return Superposition(Orientation)


def all_directions() -> Superposition[Direction]:
    """Every belt direction."""
    return Superposition(Direction)


def all_items() -> Superposition[Item]:
    """Every item."""
    return Superposition(Item)


def all_liquids() -> Superposition[Liquid]:
    """Every liquid."""
    return Superposition(Liquid)


def all_furnace_recipes() -> Superposition[FurnaceRecipe]:
    """Every smelting recipe."""
    return Superposition(SMELTING_RECIPES)


def all_assembler_recipes() -> Superposition[AssemblerRecipe]:
    """Every assembling machine recipe."""
    return Superposition(ASSEMBLING_MACHINE_RECIPES)


def all_chemical_recipes() -> Superposition[ChemicalRecipe]:
    """Every chemical plant recipe."""
    return Superposition(CHEMICAL_PLANT_RECIPES)


def all_refinery_recipes() -> Superposition[RefineryRecipe]:
    """Every oil refinery recipe."""
    return Superposition(OIL_REFINERY_RECIPES)


def all_in_rect(rect: Size, pos: Position, grid_size: Size) -> Superposition[Position]:
    """Offsets within a ``rect`` footprint that the tile at ``pos`` may stand for.

    An offset is kept only if the footprint it implies stays inside the grid.
    The footprint height is taken from its width, so footprints are treated
    as squares. Offsets are listed column by column.
    """
    width = rect.width
    height = rect.width
    start_x = max(0, pos.x + rect.width - grid_size.width)
    start_y = max(0, pos.y + rect.height - grid_size.height)
    end_x = min(width, pos.x + 1)
    end_y = min(height, pos.y + 1)
    return Superposition(
        Position(x, y) for x in range(start_x, end_x) for y in range(start_y, end_y)
    )