"""Superpositions of the buildings a grid tile may still turn into."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bolognaise.buildings import (
    AssemblingMachine,
    Building,
    ChemicalPlant,
    ElectricMiningDrill,
    Inserter,
    Lab,
    LongHandedInserter,
    OffshorePump,
    OilRefinery,
    Pipe,
    PipeToGround,
    Pumpjack,
    StoneFurnace,
    TransportBelt,
    UndergroundBelt,
)
from bolognaise.geometry import Position, Rect, Size
from bolognaise.items import Tile
from bolognaise.quantic import (
    EmptyCantCollapseError,
    Superposition,
    TooMuchConstraintsError,
    all_assembler_recipes,
    all_chemical_recipes,
    all_directions,
    all_furnace_recipes,
    all_in_rect,
    all_items,
    all_liquids,
    all_orientations,
    all_refinery_recipes,
)

_MINABLE = frozenset({Tile.STONE, Tile.COAL_ORE, Tile.IRON_ORE, Tile.COPPER_ORE})


@dataclass
class BuildingTile:
    """One building kind whose parameters are each still a superposition.

    ``options`` maps every parameter of ``kind`` (orientation, offset, recipe,
    item, direction, liquid) to the values it may still take.
    """

    kind: type[Building]
    options: dict[str, Superposition[Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.options = {
            name: values if isinstance(values, Superposition) else Superposition(values)
            for name, values in dict(self.options).items()
        }

    def entropy(self) -> float:
        """Sum of the entropies of the parameters."""
        return sum((values.entropy() for values in self.options.values()), 0.0)

    def collapse(self) -> Building:
        """Build the kind from the first possible value of each parameter."""
        return self.kind(**{name: values.collapse() for name, values in self.options.items()})

    def can_collapse_to(self, building: Building) -> bool:
        """Whether ``building`` is of this kind with every parameter still possible."""
        if type(building) is not self.kind:
            return False
        for param in dataclasses.fields(building):
            values = self.options.get(param.name)
            if values is None or not values.can_collapse_to(getattr(building, param.name)):
                return False
        return True

    def constrain_ground(self, ground: Tile) -> None:
        """Raise TooMuchConstraintsError if this kind cannot stand on ``ground``."""
        kind = self.kind
        if ground is Tile.WATER:
            allowed = kind is OffshorePump
        elif kind is OffshorePump:
            allowed = False
        elif ground is Tile.CRUDE_OIL:
            allowed = kind is Pumpjack
        elif kind is Pumpjack:
            allowed = False
        elif kind is ElectricMiningDrill:
            allowed = ground in _MINABLE
        else:
            allowed = True
        if not allowed:
            raise TooMuchConstraintsError(
                f"{kind.__name__} cannot stand on {ground.name.lower()}"
            )

    def constrain_building_placed(
        self, building: Building, at: Position, own_pos: Position
    ) -> None:
        """Check this tile against ``building``, placed with its offset tile at ``at``.

        If ``own_pos`` falls inside the footprint of the placed building, this
        tile must be able to become the matching part of it; otherwise
        TooMuchConstraintsError is raised.
        """
        offset = building.offset
        origin = Position(at.x - offset.x, at.y - offset.y)
        footprint = Rect(origin, building.size())
        if not footprint.contains(own_pos):
            return
        required = Position(own_pos.x - origin.x, own_pos.y - origin.y)
        if not self.can_collapse_to(building.with_offset(required)):
            raise TooMuchConstraintsError(
                f"tile at {own_pos} cannot be part of {type(building).__name__} at {origin}"
            )


class BuildingSuperposition(Superposition[BuildingTile]):
    """Every building kind a grid tile may still become, in a fixed order."""

    @classmethod
    def all(cls, pos: Position, grid_size: Size) -> BuildingSuperposition:
        """Every building kind with every parameter value possible at ``pos``."""

        def offsets(width: int, height: int) -> Superposition[Position]:
            return all_in_rect(Size(width, height), pos, grid_size)

        def tile(kind: type[Building], **options: Superposition[Any]) -> BuildingTile:
            return BuildingTile(kind, options)

        return cls(
            [
                tile(ElectricMiningDrill, orientation=all_orientations(), offset=offsets(3, 3)),
                tile(Pumpjack, orientation=all_orientations(), offset=offsets(3, 3)),
                tile(OffshorePump, orientation=all_orientations(), offset=offsets(2, 2)),
                tile(StoneFurnace, recipe=all_furnace_recipes(), offset=offsets(2, 2)),
                tile(
                    OilRefinery,
                    orientation=all_orientations(),
                    recipe=all_refinery_recipes(),
                    offset=offsets(4, 4),
                ),
                tile(
                    ChemicalPlant,
                    orientation=all_orientations(),
                    recipe=all_chemical_recipes(),
                    offset=offsets(2, 2),
                ),
                tile(AssemblingMachine, recipe=all_assembler_recipes(), offset=offsets(3, 3)),
                tile(TransportBelt, orientation=all_orientations(), item=all_items()),
                tile(
                    UndergroundBelt,
                    orientation=all_orientations(),
                    direction=all_directions(),
                    item=all_items(),
                ),
                tile(Pipe, liquid=all_liquids()),
                tile(PipeToGround, orientation=all_orientations(), liquid=all_liquids()),
                tile(Inserter, orientation=all_orientations(), item=all_items()),
                tile(LongHandedInserter, orientation=all_orientations(), item=all_items()),
                tile(Lab, offset=offsets(3, 3)),
            ]
        )

    def entropy(self) -> float:
        """Sum of the entropies of the building kinds still possible."""
        return sum((tile.entropy() for tile in self), 0.0)

    def collapse(self) -> Building:
        """Collapse the first possible building kind."""
        if not self:
            raise EmptyCantCollapseError()
        return self[0].collapse()

    def can_collapse_to(self, building: Building) -> bool:
        """Whether any building kind still possible can become ``building``."""
        return any(tile.can_collapse_to(building) for tile in self)

    def constrain_ground(self, ground: Tile) -> None:
        """Drop the kinds that cannot stand on ``ground``.

        Raises TooMuchConstraintsError if no kind is left.
        """
        self[:] = [tile for tile in self if _fits_ground(tile, ground)]
        if not self:
            raise TooMuchConstraintsError()


def _fits_ground(tile: BuildingTile, ground: Tile) -> bool:
    try:
        tile.constrain_ground(ground)
    except TooMuchConstraintsError:
        return False
    return True


def _as_mapping(options: Mapping[str, Any]) -> dict[str, Superposition[Any]]:
    return {name: Superposition(values) for name, values in options.items()}