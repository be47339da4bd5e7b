"""Placed buildings: their kind, parameters and the tile of the footprint they stand on."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from bolognaise.geometry import Position, Size
from bolognaise.items import Direction, Item, Liquid, Orientation
from bolognaise.recipes import (
    AssemblerRecipe,
    ChemicalRecipe,
    FurnaceRecipe,
    RefineryRecipe,
)

_ORIGIN = Position(0, 0)


class Building:
    """Base class of every building kind.

    ``offset`` is the position of the tile, within the building's footprint,
    that this value stands for.
    """

    _SIZE = Size(1, 1)
    _CHAR = "?"

    def size(self) -> Size:
        """Footprint of the building."""
        return self._SIZE

    def display_char(self) -> str:
        """Single character used when drawing the building on a grid."""
        return self._CHAR

    def with_offset(self, offset: Position) -> Building:
        """Return the building placed at another tile of its footprint.

        Single-tile buildings have no offset and are returned unchanged.
        """
        return self


class _MultiTile(Building):
    def with_offset(self, offset: Position) -> Building:
        return dataclasses.replace(self, offset=offset)


class _SingleTile(Building):
    @property
    def offset(self) -> Position:
        return _ORIGIN


@dataclass(frozen=True)
class ElectricMiningDrill(_MultiTile):
    orientation: Orientation
    offset: Position = _ORIGIN
    _SIZE = Size(3, 3)
    _CHAR = "D"


@dataclass(frozen=True)
class Pumpjack(_MultiTile):
    orientation: Orientation
    offset: Position = _ORIGIN
    _SIZE = Size(3, 3)
    _CHAR = "P"


@dataclass(frozen=True)
class OffshorePump(_MultiTile):
    orientation: Orientation
    offset: Position = _ORIGIN
    _SIZE = Size(1, 1)
    _CHAR = "p"


_FURNACE_CHARS = {
    Position(0, 0): "🭅",
    Position(0, 1): "🯮",
    Position(1, 0): "🭐",
    Position(1, 1): "🯭",
}


@dataclass(frozen=True)
class StoneFurnace(_MultiTile):
    recipe: FurnaceRecipe
    offset: Position = _ORIGIN
    _SIZE = Size(2, 2)

    def display_char(self) -> str:
        try:
            return _FURNACE_CHARS[self.offset]
        except KeyError:
            raise ValueError(
                f"offset {self.offset} is outside the furnace footprint"
            ) from None


@dataclass(frozen=True)
class OilRefinery(_MultiTile):
    orientation: Orientation
    recipe: RefineryRecipe
    offset: Position = _ORIGIN
    _SIZE = Size(4, 4)
    _CHAR = "R"


@dataclass(frozen=True)
class ChemicalPlant(_MultiTile):
    orientation: Orientation
    recipe: ChemicalRecipe
    offset: Position = _ORIGIN
    _SIZE = Size(2, 2)
    _CHAR = "C"


@dataclass(frozen=True)
class AssemblingMachine(_MultiTile):
    recipe: AssemblerRecipe
    offset: Position = _ORIGIN
    _SIZE = Size(3, 3)
    _CHAR = "A"


@dataclass(frozen=True)
class TransportBelt(_SingleTile):
    orientation: Orientation
    item: Item
    _CHAR = "T"


@dataclass(frozen=True)
class UndergroundBelt(_SingleTile):
    orientation: Orientation
    direction: Direction
    item: Item
    _CHAR = "U"


@dataclass(frozen=True)
class Pipe(_SingleTile):
    liquid: Liquid
    _CHAR = "="


@dataclass(frozen=True)
class PipeToGround(_SingleTile):
    orientation: Orientation
    liquid: Liquid
    _CHAR = "-"


@dataclass(frozen=True)
class Inserter(_SingleTile):
    orientation: Orientation
    item: Item
    _CHAR = "i"


@dataclass(frozen=True)
class LongHandedInserter(_SingleTile):
    orientation: Orientation
    item: Item
    _CHAR = "I"


@dataclass(frozen=True)
class Lab(_MultiTile):
    offset: Position = _ORIGIN
    _SIZE = Size(3, 3)
    _CHAR = "L"