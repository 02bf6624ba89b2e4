"""A single numbered tile on the grid."""

from __future__ import annotations

from dataclasses import dataclass


def rank_value(rank: int) -> int:
    """Return the displayed number for *rank* (rank 1 is 2, rank 11 is 2048)."""
    return 2**rank


@dataclass
class Tile:
    x: int
    y: int
    rank: int = 1

    @property
    def value(self) -> int:
        return rank_value(self.rank)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def copy(self) -> Tile:
        return Tile(self.x, self.y, self.rank)
