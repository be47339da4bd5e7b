# bolognaise

Building blocks for planning factory layouts on a grid with a
wave-function-collapse approach: a grid cell starts as a superposition of every
building it could hold, and constraints (the ground under it, a building placed
nearby) narrow that down until it collapses to one building.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
bolognaise [DATA_PATH]
```

loads the game library from the file `items.txt` in `DATA_PATH` (default
`./data/`) and prints a short summary: where it was loaded from and how many
items and liquids it holds. If the file cannot be read or parsed, the error is
printed as `Failed to load game library: ...` and the command exits with
status 1.

### The data file

`items.txt` is a plain text file with an `[Items]` section followed by a
`[Liquids]` section. Each section is a list of names made of the letters
`a-z` and `A-Z`, every name followed by a comma. A `#` starts a comment that
runs to the end of the line; spaces, tabs and line breaks are ignored.

```
# raw materials and products
[Items]
IronOre, CopperOre, IronPlate,

[Liquids]
Water, CrudeOil,
```

## Library use

```python
from bolognaise.buildings import StoneFurnace
from bolognaise.geometry import Position, Size
from bolognaise.grid import Grid
from bolognaise.items import Tile
from bolognaise.library import Library
from bolognaise.quantic_building import BuildingSuperposition
from bolognaise.recipes import SMELTING_RECIPES

# A grid of placed buildings, drawn as characters.
grid = Grid(8, 4)
grid.insert(Position(1, 1), StoneFurnace(SMELTING_RECIPES[0]))
print(grid.render())

# Every building a cell could still become, narrowed by the ground under it.
options = BuildingSuperposition.all(Position(0, 0), Size(10, 10))
options.constrain_ground(Tile.IRON_ORE)
print(options.entropy())
building = options.collapse()  # an ElectricMiningDrill

# The item library read from a data directory.
library = Library.load("./data")
print(library.info())
```

The modules:

- `bolognaise.geometry`: `Position`, `Size` (`bounding_square`) and `Rect`
  (`contains`).
- `bolognaise.items`: the enums `Orientation`, `Direction`, `Item`, `Liquid`
  (with `to_item`) and `Tile`.
- `bolognaise.recipes`: `Recipe` and its furnace, assembler, chemical plant and
  refinery kinds, with the tables `SMELTING_RECIPES`,
  `ASSEMBLING_MACHINE_RECIPES`, `CHEMICAL_PLANT_RECIPES` and
  `OIL_REFINERY_RECIPES`.
- `bolognaise.buildings`: `Building` and its kinds (`ElectricMiningDrill`,
  `Pumpjack`, `OffshorePump`, `StoneFurnace`, `OilRefinery`, `ChemicalPlant`,
  `AssemblingMachine`, `TransportBelt`, `UndergroundBelt`, `Pipe`,
  `PipeToGround`, `Inserter`, `LongHandedInserter`, `Lab`), each with
  `size`, `display_char` and `with_offset`.
- `bolognaise.grid`: `Grid` of elements that may span several cells, with
  `insert`, `get`, `render`, `display`, `cells`, `positioned_cells` and
  `from_fn`; `insert` raises `OutOfBoundError` or `InsertionWouldOverlapError`
  (both `GridError`) when an element does not fit.
- `bolognaise.parser`: `Parser`, the tokenizer for the data files, raising
  `ParseError`.
- `bolognaise.library`: `Library`, loaded from a data directory with
  `Library.load`.
- `bolognaise.quantic`: `Superposition` of values with `entropy`, `collapse`
  and `can_collapse_to`, the `all_*` constructors and `all_in_rect`, and the
  errors `TooMuchConstraintsError`, `EmptyCantCollapseError` and
  `AlreadyCollapsedError` (all `QuanticError`).
- `bolognaise.quantic_building`: `BuildingTile` (with `constrain_ground` and
  `constrain_building_placed`) and `BuildingSuperposition`.

## What it does not do

The package gives the pieces of a layout solver but not the solver itself:
nothing here fills a whole grid of superpositions, picks the cell of lowest
entropy, collapses it and spreads the constraints to its neighbours. The
command line only loads the item library and summarises it; it does not plan
or draw a layout. The library reads item and liquid names only, and gives
each the id 0.