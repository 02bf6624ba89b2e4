"""Tracks the bookkeeping of a game in progress."""

from __future__ import annotations

import time


class GameState:
    """Holds turn counters, the game-over flag, and elapsed time."""

    def __init__(self) -> None:
        self.moves: int = 0
        self.merges: int = 0
        self.over: bool = False
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- turns ----------------------------------------------------------------

    def record_turn(self, merged: int) -> None:
        self.moves += 1
        self.merges += merged

    def finish(self) -> None:
        """Mark the game over and stop the clock."""
        self.over = True
        self.pause()
