"""Core gameplay logic — slides and merges tiles, spawns, detects game over."""

from __future__ import annotations

import dataclasses
import logging
import random
from dataclasses import dataclass

from backend.config import GameConfig
from backend.engine.gamegenerator import TileSpawner
from backend.engine.gamestate import GameState
from backend.models.grid import Direction, Grid
from backend.models.tile import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one ``move`` (and, via ``turn``, of the spawn after it).

    ``direction`` is ``None`` when the input was rejected.
    """

    direction: Direction | None
    moved: int = 0
    merged: int = 0
    spawned: bool = False

    @property
    def changed(self) -> bool:
        return self.moved > 0 or self.merged > 0

    def __bool__(self) -> bool:
        return self.changed


class GamePlay:
    """Owns the grid and runs one game session."""

    def __init__(
        self, config: GameConfig | None = None, rng: random.Random | None = None
    ) -> None:
        config = config or GameConfig()
        self._setup(config, Grid(size=config.size), rng)
        TileSpawner.populate(self.grid, self.rng, config.initial_tiles)
        self._check_terminal()

    @classmethod
    def from_grid(cls, grid: Grid, rng: random.Random | None = None) -> GamePlay:
        """Create a game session around an existing grid (e.g. a test layout)."""
        obj = object.__new__(cls)
        obj._setup(GameConfig(size=grid.size, initial_tiles=0), grid, rng)
        obj._check_terminal()
        return obj

    def _setup(
        self, config: GameConfig, grid: Grid, rng: random.Random | None
    ) -> None:
        self.config = config
        self.size = config.size
        self.grid = grid
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.state = GameState()

    def restart(self) -> GamePlay:
        """Return a fresh game with the same settings and random source."""
        return GamePlay(self.config, rng=self.rng)

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction | str) -> MoveResult:
        """Slide every tile toward *direction*, merging equal neighbours.

        Tiles are visited nearest-the-wall first, so each tile only ever
        meets tiles that have already settled.  A tile that absorbed a merge
        does not absorb a second one in the same call.  Unknown directions
        leave the grid untouched.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            logger.debug("Ignoring unknown direction %r", direction)
            return MoveResult(direction=None)

        sweep = direction.sweep
        grid = self.grid
        wall = sweep.wall(grid.size)
        absorbed: list[Tile] = []
        moved = merged = 0

        for tile in sorted(grid.tiles, key=sweep.priority):
            ahead = [
                other
                for other in grid.tiles
                if other is not tile and sweep.is_ahead(tile, other)
            ]
            blocker = max(ahead, key=sweep.priority, default=None)

            if (
                blocker is not None
                and blocker.rank == tile.rank
                and not any(blocker is t for t in absorbed)
            ):
                self._discard(tile)
                blocker.rank += 1
                absorbed.append(blocker)
                merged += 1
                continue

            target = wall - sweep.step * len(ahead)
            if sweep.along(tile) != target:
                sweep.place(tile, target)
                moved += 1

        logger.debug(
            "Move %s: %d moved, %d merged, %d tiles",
            direction.value, moved, merged, len(grid),
        )
        return MoveResult(direction=direction, moved=moved, merged=merged)

    def try_spawn(self, rng: random.Random | None = None) -> bool:
        """Spawn a rank-1 tile at a random free cell; ``False`` if full."""
        return TileSpawner.try_spawn(self.grid, rng if rng is not None else self.rng)

    def turn(self, direction: Direction | str) -> MoveResult:
        """Run one input cycle: move, spawn if anything changed, check game over.

        An empty grid also spawns, since no move can ever change it.
        """
        if self.state.over:
            logger.debug("Game is over, ignoring %r", direction)
            return MoveResult(direction=None)

        result = self.move(direction)
        if result.direction is None:
            return result

        spawned = False
        if result.changed or len(self.grid) == 0:
            spawned = self.try_spawn()
        if result.changed or spawned:
            self.state.record_turn(result.merged)

        self._check_terminal()
        return dataclasses.replace(result, spawned=spawned)

    # -- queries --------------------------------------------------------------

    def is_terminal(self) -> bool:
        """True once the grid holds all but one cell."""
        return len(self.grid) == self.size * self.size - 1

    @property
    def is_over(self) -> bool:
        return self.state.over

    def snapshot(self) -> tuple[Tile, ...]:
        return self.grid.snapshot()

    # -- helpers --------------------------------------------------------------

    def _discard(self, tile: Tile) -> None:
        for i, other in enumerate(self.grid.tiles):
            if other is tile:
                del self.grid.tiles[i]
                return

    def _check_terminal(self) -> None:
        if not self.state.over and self.is_terminal():
            self.state.finish()
            logger.info(
                "Game over after %d moves, highest tile %d",
                self.state.moves, self.grid.max_value(),
            )
