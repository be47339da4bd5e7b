from bolognaise.items import Item
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


def test_steel_smelting():
    steel = FurnaceRecipe(Item.STEEL_PLATE, ((Item.IRON_PLATE, 5),), 1)
    assert steel in SMELTING_RECIPES


def test_copper_cable_yields_two():
    cable = AssemblerRecipe(Item.COPPER_CABLE, ((Item.COPPER_PLATE, 1),), 2)
    assert cable in ASSEMBLING_MACHINE_RECIPES
    assert AssemblerRecipe(Item.COPPER_CABLE, ((Item.COPPER_PLATE, 1),), 1) not in (
        ASSEMBLING_MACHINE_RECIPES
    )


def test_sulfuric_acid_recipe():
    acid = ChemicalRecipe(
        Item.SULFURIC_ACID, ((Item.SULFUR, 5), (Item.WATER, 100)), 50
    )
    assert acid in CHEMICAL_PLANT_RECIPES


def test_refinery_recipe():
    gas = RefineryRecipe(
        Item.PETROLEUM_GAS, ((Item.CRUDE_OIL, 5), (Item.WATER, 100)), 50
    )
    assert list(OIL_REFINERY_RECIPES) == [gas]


def test_tables_hold_their_own_recipe_kind():
    iron = (Item.IRON_PLATE, ((Item.IRON_ORE, 1),), 1)
    assert FurnaceRecipe(*iron) in SMELTING_RECIPES
    assert AssemblerRecipe(*iron) not in SMELTING_RECIPES
    gear = (Item.IRON_GEAR_WHEEL, ((Item.IRON_PLATE, 2),), 1)
    assert AssemblerRecipe(*gear) in ASSEMBLING_MACHINE_RECIPES
    assert FurnaceRecipe(*gear) not in ASSEMBLING_MACHINE_RECIPES


def test_recipe_kinds_are_not_equal_with_same_content():
    content = (Item.IRON_PLATE, ((Item.IRON_ORE, 1),), 1)
    assert FurnaceRecipe(*content) == FurnaceRecipe(*content)
    assert FurnaceRecipe(*content) != AssemblerRecipe(*content)


def test_recipe_fields():
    recipe = ChemicalRecipe(Item.PLASTIC_BAR, ((Item.PETROLEUM_GAS, 20), (Item.COAL, 1)), 2)
    assert recipe.output is Item.PLASTIC_BAR
    assert recipe.inputs == ((Item.PETROLEUM_GAS, 20), (Item.COAL, 1))
    assert recipe.output_amount == 2
    assert recipe in CHEMICAL_PLANT_RECIPES