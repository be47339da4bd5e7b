"""Game enumerations: orientations, directions, items, liquids and ground tiles."""

from __future__ import annotations

from enum import Enum, auto


class Orientation(Enum):
    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()


class Direction(Enum):
    INPUT = auto()
    OUTPUT = auto()


class Item(Enum):
    IRON_ORE = auto()
    COPPER_ORE = auto()
    STONE = auto()
    COAL = auto()
    WATER = auto()
    CRUDE_OIL = auto()
    IRON_PLATE = auto()
    COPPER_PLATE = auto()
    STEEL_PLATE = auto()
    IRON_GEAR_WHEEL = auto()
    COPPER_CABLE = auto()
    ELECTRONIC_CIRCUIT = auto()
    ADVANCED_CIRCUIT = auto()
    PROCESSING_UNIT = auto()
    ENGINE_UNIT = auto()
    ELECTRIC_ENGINE_UNIT = auto()
    PETROLEUM_GAS = auto()
    PLASTIC_BAR = auto()
    SULFUR = auto()
    SULFURIC_ACID = auto()
    BATTERY = auto()
    LUBRICANT = auto()
    PIPE = auto()
    IRON_STICK = auto()
    FLYING_ROBOT_FRAME = auto()
    TRANSPORT_BELT = auto()
    INSERTER = auto()
    AUTOMATION_SCIENCE_PACK = auto()
    LOGISTIC_SCIENCE_PACK = auto()
    CHEMICAL_SCIENCE_PACK = auto()
    PRODUCTION_SCIENCE_PACK = auto()
    UTILITY_SCIENCE_PACK = auto()


class Liquid(Enum):
    WATER = auto()
    CRUDE_OIL = auto()
    PETROLEUM_GAS = auto()
    SULFURIC_ACID = auto()
    LUBRICANT = auto()

    def to_item(self) -> Item:
        """Return the item that represents this liquid."""
        return _LIQUID_ITEMS[self]


_LIQUID_ITEMS = {
    Liquid.WATER: Item.WATER,
    Liquid.CRUDE_OIL: Item.CRUDE_OIL,
    Liquid.PETROLEUM_GAS: Item.PETROLEUM_GAS,
    Liquid.SULFURIC_ACID: Item.SULFURIC_ACID,
    Liquid.LUBRICANT: Item.LUBRICANT,
}


class Tile(Enum):
    GROUND = auto()
    WATER = auto()
    CRUDE_OIL = auto()
    IRON_ORE = auto()
    COPPER_ORE = auto()
    COAL_ORE = auto()
    STONE = auto()