from dataclasses import dataclass

import pytest

from bolognaise.buildings import Lab, TransportBelt
from bolognaise.geometry import Position, Size
from bolognaise.grid import (
    Grid,
    GridElement,
    GridError,
    InsertionWouldOverlapError,
    OutOfBoundError,
)
from bolognaise.items import Item, Orientation


@dataclass(frozen=True)
class Marker:
    x: int
    y: int

    def size(self) -> Size:
        return Size(1, 1)

    def display_char(self) -> str:
        return str(self.x)


@pytest.fixture
def belt():
    return TransportBelt(Orientation.NORTH, Item.IRON_PLATE)


def test_new_grid_is_empty():
    grid = Grid(3, 2)
    assert (grid.width, grid.height) == (3, 2)
    assert list(grid.cells()) == []
    assert all(grid.get(Position(x, y)) is None for x in range(3) for y in range(2))


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_insert_covers_whole_footprint():
    grid = Grid(4, 4)
    lab = Lab()
    grid.insert(Position(0, 0), lab)
    for x in range(3):
        for y in range(3):
            assert grid.get(Position(x, y)) is lab
    assert grid.get(Position(3, 0)) is None
    assert grid.get(Position(0, 3)) is None


def test_insert_out_of_bounds():
    grid = Grid(4, 4)
    with pytest.raises(OutOfBoundError):
        grid.insert(Position(2, 0), Lab())
    with pytest.raises(OutOfBoundError):
        grid.insert(Position(0, 2), Lab())
    assert list(grid.cells()) == []


def test_insert_overlap_leaves_grid_unchanged(belt):
    grid = Grid(4, 4)
    lab = Lab()
    grid.insert(Position(0, 0), lab)
    with pytest.raises(InsertionWouldOverlapError):
        grid.insert(Position(1, 1), belt)
    assert list(grid.cells()) == [lab]
    assert grid.get(Position(1, 1)) is lab


def test_errors_share_base_class():
    grid = Grid(1, 1)
    with pytest.raises(GridError):
        grid.insert(Position(0, 0), Lab())


def test_cells_and_positions_in_row_order(belt):
    grid = Grid(4, 4)
    lab = Lab()
    grid.insert(Position(3, 3), belt)
    grid.insert(Position(0, 0), lab)
    assert list(grid.cells()) == [lab, belt]
    assert list(grid.positioned_cells()) == [
        (Position(0, 0), lab),
        (Position(3, 3), belt),
    ]


def test_get_outside_grid_is_none(belt):
    grid = Grid(2, 2)
    grid.insert(Position(0, 1), belt)
    assert grid.get(Position(2, 0)) is None
    assert grid.get(Position(0, 5)) is None


def test_render_shows_elements(belt):
    grid = Grid(4, 4)
    grid.insert(Position(0, 0), Lab())
    grid.insert(Position(3, 3), belt)
    assert grid.render() == "LLL \nLLL \nLLL \n   T\n"


def test_render_empty_grid_shape():
    grid = Grid(5, 3)
    lines = grid.render().splitlines()
    assert len(lines) == 3
    assert all(line == " " * 5 for line in lines)


def test_display_prints_render(capsys, belt):
    grid = Grid(2, 2)
    grid.insert(Position(1, 0), belt)
    grid.display()
    assert capsys.readouterr().out == grid.render() + "\n"


def test_from_fn_fills_every_cell():
    grid = Grid.from_fn(3, 2, Marker)
    assert isinstance(Marker(0, 0), GridElement)
    assert len(list(grid.cells())) == 6
    for x in range(3):
        for y in range(2):
            assert grid.get(Position(x, y)) == Marker(x, y)
    for pos, marker in grid.positioned_cells():
        assert (pos.x, pos.y) == (marker.x, marker.y)


def test_from_fn_grid_is_full():
    grid = Grid.from_fn(2, 2, Marker)
    with pytest.raises(InsertionWouldOverlapError):
        grid.insert(Position(0, 0), Marker(9, 9))