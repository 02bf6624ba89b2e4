"""Grid, tile, and direction model tests."""

from __future__ import annotations

import pytest

from backend.models.grid import Axis, Direction, Grid
from backend.models.tile import Tile, rank_value


# -- tiles --------------------------------------------------------------------


@pytest.mark.parametrize(("rank", "value"), [(1, 2), (2, 4), (11, 2048), (12, 4096)])
def test_rank_value(rank: int, value: int) -> None:
    assert rank_value(rank) == value
    assert Tile(0, 0, rank).value == value


def test_tile_copy_is_independent() -> None:
    tile = Tile(1, 2, 3)
    clone = tile.copy()
    clone.rank = 4

    assert tile == Tile(1, 2, 3)
    assert clone.position == (1, 2)


# -- grid construction --------------------------------------------------------


def test_from_rows_places_tiles() -> None:
    grid = Grid.from_rows([[0, 1, 0], [0, 0, 0], [3, 0, 2]])

    assert grid.size == 3
    assert len(grid) == 3
    assert grid.tile_at(1, 0) == Tile(1, 0, 1)
    assert grid.tile_at(0, 2) == Tile(0, 2, 3)
    assert grid.tile_at(1, 1) is None
    assert grid.to_rows() == [[0, 1, 0], [0, 0, 0], [3, 0, 2]]


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [[0, 1], [0]],
        [[0, 1, 0], [0, 0, 0]],
        [[0, -1], [0, 0]],
    ],
)
def test_from_rows_rejects_malformed_input(rows: list[list[int]]) -> None:
    with pytest.raises(ValueError):
        Grid.from_rows(rows)


# -- grid queries -------------------------------------------------------------


def test_totals_and_fullness() -> None:
    grid = Grid.from_rows([[1, 2], [3, 0]])

    assert grid.total_value() == 2 + 4 + 8
    assert grid.max_rank() == 3
    assert grid.max_value() == 8
    assert grid.occupied() == {(0, 0), (1, 0), (0, 1)}
    assert not grid.is_full()

    grid.tiles.append(Tile(1, 1, 1))
    assert grid.is_full()


def test_empty_grid_queries() -> None:
    grid = Grid(size=4)

    assert len(grid) == 0
    assert grid.total_value() == 0
    assert grid.max_rank() == 0
    assert grid.max_value() == 0
    assert grid.snapshot() == ()


def test_snapshot_order_and_detachment() -> None:
    grid = Grid(size=3, tiles=[Tile(2, 2, 1), Tile(0, 1, 2), Tile(1, 0, 3)])

    snap = grid.snapshot()

    assert [t.position for t in snap] == [(1, 0), (0, 1), (2, 2)]
    snap[0].rank = 10
    assert grid.tile_at(1, 0).rank == 3  # type: ignore[union-attr]


def test_copy_is_deep() -> None:
    grid = Grid.from_rows([[1, 0], [0, 0]])
    clone = grid.copy()
    clone.tiles[0].x = 1

    assert grid.to_rows() == [[1, 0], [0, 0]]


# -- directions ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("direction", "axis", "wall"),
    [
        (Direction.UP, Axis.Y, 0),
        (Direction.DOWN, Axis.Y, 3),
        (Direction.LEFT, Axis.X, 0),
        (Direction.RIGHT, Axis.X, 3),
    ],
)
def test_sweep_axis_and_wall(direction: Direction, axis: Axis, wall: int) -> None:
    sweep = direction.sweep
    assert sweep.axis is axis
    assert sweep.wall(4) == wall


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (Direction.UP, [(2, 0), (0, 1), (1, 3)]),
        (Direction.DOWN, [(1, 3), (0, 1), (2, 0)]),
        (Direction.LEFT, [(0, 1), (1, 3), (2, 0)]),
        (Direction.RIGHT, [(2, 0), (1, 3), (0, 1)]),
    ],
)
def test_priority_puts_wall_side_first(
    direction: Direction, expected: list[tuple[int, int]]
) -> None:
    tiles = [Tile(0, 1), Tile(2, 0), Tile(1, 3)]

    ordered = sorted(tiles, key=direction.sweep.priority)

    assert [t.position for t in ordered] == expected


def test_is_ahead_needs_same_line_and_wall_side() -> None:
    sweep = Direction.LEFT.sweep
    tile = Tile(2, 1)

    assert sweep.is_ahead(tile, Tile(0, 1))
    assert not sweep.is_ahead(tile, Tile(3, 1))
    assert not sweep.is_ahead(tile, Tile(0, 2))
    assert not sweep.is_ahead(tile, Tile(2, 1))


def test_direction_values() -> None:
    assert [d.value for d in Direction] == ["up", "down", "left", "right"]
    assert Direction("down") is Direction.DOWN
