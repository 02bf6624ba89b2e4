"""Game configuration and its validation."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 4
MIN_UI_SIZE = 2
MAX_UI_SIZE = 8


class InvalidConfigError(ValueError):
    """Raised when a ``GameConfig`` can never produce a playable grid."""


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of one game.

    ``initial_tiles`` is the number of rank-1 tiles placed before the first
    input.  ``seed`` feeds the engine-owned random source; ``None`` seeds
    from the OS.
    """

    size: int = DEFAULT_SIZE
    initial_tiles: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise InvalidConfigError(
                f"Grid size must be at least 1, got {self.size}."
            )
        if self.initial_tiles < 0:
            raise InvalidConfigError(
                f"initial_tiles cannot be negative, got {self.initial_tiles}."
            )
        if self.initial_tiles > self.cell_count - 1:
            raise InvalidConfigError(
                f"A {self.size}×{self.size} grid holds at most "
                f"{self.cell_count - 1} initial tiles, got {self.initial_tiles}."
            )

    @property
    def cell_count(self) -> int:
        return self.size * self.size
