"""Recipes and the recipe tables of each kind of production building."""

from __future__ import annotations

from dataclasses import dataclass

from bolognaise.items import Item


@dataclass(frozen=True)
class Recipe:
    """Crafting of ``output_amount`` of ``output`` from the given ``(item, count)`` inputs."""

    output: Item
    inputs: tuple[tuple[Item, int], ...]
    output_amount: int


@dataclass(frozen=True)
class FurnaceRecipe(Recipe):
    """A recipe made in a furnace."""


@dataclass(frozen=True)
class AssemblerRecipe(Recipe):
    """A recipe made in an assembling machine."""


@dataclass(frozen=True)
class ChemicalRecipe(Recipe):
    """A recipe made in a chemical plant."""


@dataclass(frozen=True)
class RefineryRecipe(Recipe):
    """A recipe made in an oil refinery."""


SMELTING_RECIPES: tuple[FurnaceRecipe, ...] = (
    FurnaceRecipe(Item.IRON_PLATE, ((Item.IRON_ORE, 1),), 1),
    FurnaceRecipe(Item.COPPER_PLATE, ((Item.COPPER_ORE, 1),), 1),
    FurnaceRecipe(Item.STEEL_PLATE, ((Item.IRON_PLATE, 5),), 1),
)

ASSEMBLING_MACHINE_RECIPES: tuple[AssemblerRecipe, ...] = (
    AssemblerRecipe(Item.IRON_GEAR_WHEEL, ((Item.IRON_PLATE, 2),), 1),
    AssemblerRecipe(Item.COPPER_CABLE, ((Item.COPPER_PLATE, 1),), 2),
    AssemblerRecipe(
        Item.ELECTRONIC_CIRCUIT,
        ((Item.IRON_PLATE, 1), (Item.COPPER_CABLE, 3)),
        1,
    ),
    AssemblerRecipe(
        Item.ADVANCED_CIRCUIT,
        (
            (Item.ELECTRONIC_CIRCUIT, 2),
            (Item.COPPER_CABLE, 4),
            (Item.PLASTIC_BAR, 2),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.PROCESSING_UNIT,
        (
            (Item.ELECTRONIC_CIRCUIT, 20),
            (Item.ADVANCED_CIRCUIT, 2),
            (Item.SULFURIC_ACID, 5),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.ENGINE_UNIT,
        (
            (Item.STEEL_PLATE, 2),
            (Item.IRON_GEAR_WHEEL, 1),
            (Item.PIPE, 2),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.ELECTRIC_ENGINE_UNIT,
        (
            (Item.ENGINE_UNIT, 1),
            (Item.ELECTRONIC_CIRCUIT, 2),
            (Item.LUBRICANT, 5),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.BATTERY,
        (
            (Item.IRON_PLATE, 1),
            (Item.COPPER_PLATE, 1),
            (Item.SULFURIC_ACID, 20),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.TRANSPORT_BELT,
        ((Item.IRON_PLATE, 1), (Item.IRON_GEAR_WHEEL, 1)),
        2,
    ),
    AssemblerRecipe(
        Item.INSERTER,
        (
            (Item.IRON_PLATE, 1),
            (Item.IRON_GEAR_WHEEL, 1),
            (Item.IRON_STICK, 1),
            (Item.ELECTRONIC_CIRCUIT, 1),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.FLYING_ROBOT_FRAME,
        (
            (Item.ELECTRIC_ENGINE_UNIT, 1),
            (Item.ADVANCED_CIRCUIT, 3),
            (Item.STEEL_PLATE, 1),
        ),
        1,
    ),
    AssemblerRecipe(
        Item.AUTOMATION_SCIENCE_PACK,
        ((Item.IRON_GEAR_WHEEL, 1), (Item.COPPER_PLATE, 1)),
        1,
    ),
    AssemblerRecipe(
        Item.LOGISTIC_SCIENCE_PACK,
        ((Item.TRANSPORT_BELT, 1), (Item.INSERTER, 1)),
        1,
    ),
    AssemblerRecipe(
        Item.CHEMICAL_SCIENCE_PACK,
        (
            (Item.ADVANCED_CIRCUIT, 3),
            (Item.ENGINE_UNIT, 2),
            (Item.SULFUR, 1),
        ),
        2,
    ),
    AssemblerRecipe(
        Item.PRODUCTION_SCIENCE_PACK,
        (
            (Item.BATTERY, 1),
            (Item.STEEL_PLATE, 1),
            (Item.ELECTRIC_ENGINE_UNIT, 1),
        ),
        2,
    ),
    AssemblerRecipe(
        Item.UTILITY_SCIENCE_PACK,
        (
            (Item.PROCESSING_UNIT, 1),
            (Item.BATTERY, 1),
            (Item.FLYING_ROBOT_FRAME, 1),
        ),
        3,
    ),
)

CHEMICAL_PLANT_RECIPES: tuple[ChemicalRecipe, ...] = (
    ChemicalRecipe(
        Item.PLASTIC_BAR,
        ((Item.PETROLEUM_GAS, 20), (Item.COAL, 1)),
        2,
    ),
    ChemicalRecipe(
        Item.SULFUR,
        ((Item.PETROLEUM_GAS, 30), (Item.WATER, 30)),
        2,
    ),
    ChemicalRecipe(
        Item.SULFURIC_ACID,
        ((Item.SULFUR, 5), (Item.WATER, 100)),
        50,
    ),
)

OIL_REFINERY_RECIPES: tuple[RefineryRecipe, ...] = (
    RefineryRecipe(
        Item.PETROLEUM_GAS,
        ((Item.CRUDE_OIL, 5), (Item.WATER, 100)),
        50,
    ),
)