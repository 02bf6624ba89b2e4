"""Grid model for the 2048-style puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.tile import Tile, rank_value


class Axis(StrEnum):
    X = "x"
    Y = "y"

    @property
    def other(self) -> Axis:
        return Axis.Y if self is Axis.X else Axis.X


@dataclass(frozen=True)
class Sweep:
    """How tiles travel for one direction.

    ``step`` is -1 when tiles travel toward coordinate 0 and +1 when they
    travel toward ``size - 1``.
    """

    axis: Axis
    step: int

    def along(self, tile: Tile) -> int:
        return getattr(tile, self.axis)

    def across(self, tile: Tile) -> int:
        return getattr(tile, self.axis.other)

    def wall(self, size: int) -> int:
        return 0 if self.step < 0 else size - 1

    def priority(self, tile: Tile) -> int:
        """Sort key: tiles nearest the wall come first."""
        return -self.step * self.along(tile)

    def is_ahead(self, tile: Tile, other: Tile) -> bool:
        """True if *other* sits between *tile* and the wall."""
        return (
            self.across(other) == self.across(tile)
            and (self.along(other) - self.along(tile)) * self.step > 0
        )

    def place(self, tile: Tile, coord: int) -> None:
        setattr(tile, self.axis, coord)


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def sweep(self) -> Sweep:
        return _SWEEPS[self]


_SWEEPS: dict[Direction, Sweep] = {
    Direction.UP: Sweep(Axis.Y, -1),
    Direction.DOWN: Sweep(Axis.Y, 1),
    Direction.LEFT: Sweep(Axis.X, -1),
    Direction.RIGHT: Sweep(Axis.X, 1),
}


@dataclass
class Grid:
    """An N×N field holding an unordered collection of tiles.

    ``y`` grows downward and ``x`` grows to the right, so ``(0, 0)`` is the
    top-left cell.
    """

    size: int
    tiles: list[Tile] = field(default_factory=list)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Grid:
        """Create a grid from row-major ranks, ``0`` meaning empty.

        Example::

            Grid.from_rows([
                [1, 0, 0, 1],
                [0, 0, 0, 0],
                [0, 2, 0, 0],
                [0, 0, 0, 0],
            ])
        """
        size = len(rows)
        if size == 0:
            raise ValueError("A grid needs at least one row.")
        tiles: list[Tile] = []
        for y, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Expected {size} cells in row {y} of a {size}×{size} "
                    f"grid, got {len(row)}."
                )
            for x, rank in enumerate(row):
                if rank < 0:
                    raise ValueError(f"Negative rank {rank} at ({x}, {y}).")
                if rank:
                    tiles.append(Tile(x, y, rank))
        return cls(size=size, tiles=tiles)

    # -- queries --------------------------------------------------------------

    def tile_at(self, x: int, y: int) -> Tile | None:
        """Tile at (x, y), or None.  Used by tests to inspect single cells."""
        for tile in self.tiles:
            if tile.x == x and tile.y == y:
                return tile
        return None

    def occupied(self) -> set[tuple[int, int]]:
        return {tile.position for tile in self.tiles}

    def is_full(self) -> bool:
        return len(self.tiles) >= self.size * self.size

    def total_value(self) -> int:
        return sum(rank_value(tile.rank) for tile in self.tiles)

    def max_rank(self) -> int:
        return max((tile.rank for tile in self.tiles), default=0)

    def max_value(self) -> int:
        """Largest displayed number, or 0 on an empty grid."""
        rank = self.max_rank()
        return rank_value(rank) if rank else 0

    def snapshot(self) -> tuple[Tile, ...]:
        """Return detached copies of every tile, ordered top-left first."""
        return tuple(
            tile.copy() for tile in sorted(self.tiles, key=lambda t: (t.y, t.x))
        )

    def to_rows(self) -> list[list[int]]:
        rows = [[0] * self.size for _ in range(self.size)]
        for tile in self.tiles:
            rows[tile.y][tile.x] = tile.rank
        return rows

    def copy(self) -> Grid:
        """Deep copy, so tests can compare a grid before and after a move."""
        return Grid(size=self.size, tiles=[tile.copy() for tile in self.tiles])

    def __len__(self) -> int:
        return len(self.tiles)
