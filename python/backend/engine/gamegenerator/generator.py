"""Places new tiles on the grid."""

from __future__ import annotations

import logging
import random

from backend.models.grid import Grid
from backend.models.tile import Tile

logger = logging.getLogger(__name__)

SPAWN_RANK = 1


class TileSpawner:
    """Stateless spawner — all methods are static.

    *rng* is any object with a ``randrange`` method, normally a
    ``random.Random`` owned by the caller.
    """

    @staticmethod
    def try_spawn(grid: Grid, rng: random.Random) -> bool:
        """Insert a rank-1 tile at a uniformly random free cell.

        Returns ``False`` without drawing from *rng* if the grid is full.
        """
        if grid.is_full():
            logger.debug("Grid full, nothing spawned")
            return False

        occupied = grid.occupied()
        x, y = rng.randrange(grid.size), rng.randrange(grid.size)
        while (x, y) in occupied:
            x, y = rng.randrange(grid.size), rng.randrange(grid.size)

        grid.tiles.append(Tile(x, y, SPAWN_RANK))
        logger.debug("Spawned tile at (%d, %d)", x, y)
        return True

    @staticmethod
    def populate(grid: Grid, rng: random.Random, count: int) -> int:
        """Spawn up to *count* tiles.  Returns how many were placed."""
        placed = 0
        for _ in range(count):
            if not TileSpawner.try_spawn(grid, rng):
                break
            placed += 1
        return placed
