"""PyQt6 GUI frontend.

A single window with the grid, live stats, and a game-over banner.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.models.grid import Direction
from backend.models.tile import rank_value

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
_BASE = "#faf8ef"
_BOARD = "#bbada0"
_EMPTY = "#cdc1b4"
_TEXT_DARK = "#776e65"
_TEXT_LIGHT = "#f9f6f2"
_RED = "#f65e3b"

# Tile backgrounds, indexed by rank - 1 and cycled past 2048.
_TILE_BG = [
    "#eee4da", "#ede0c8", "#f2b179", "#f59563", "#f67c5f", "#f65e3b",
    "#edcf72", "#edcc61", "#edc850", "#edc53f", "#edc22e",
]

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT_DARK}; }}
"""

_CONTROLS = "Arrows / WASD  move     R  restart     Esc  quit"

_KEY_DIRECTIONS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _fmt(secs: float) -> str:
    m, s = divmod(int(secs), 60)
    return f"{m:02d}:{s:02d}"


class _GamePage(QWidget):
    """The grid of tile labels with live stats."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = game
        size = game.size

        tile_px = max(40, min(100, 420 // size))
        self._font = QFont("Helvetica", max(11, tile_px // 4), QFont.Weight.Bold)

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(16, 10, 16, 10)

        title = QLabel(f"Doge48  {size}×{size}")
        title.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_BOARD}; border-radius:8px;")
        grid = QGridLayout(frame)
        grid.setSpacing(6)
        grid.setContentsMargins(6, 6, 6, 6)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._cells: list[list[QLabel]] = []
        for y in range(size):
            row: list[QLabel] = []
            for x in range(size):
                cell = QLabel()
                cell.setFixedSize(tile_px, tile_px)
                cell.setFont(self._font)
                cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
                grid.addWidget(cell, y, x)
                row.append(cell)
            self._cells.append(row)

        self._hint = QLabel(_CONTROLS)
        self._hint.setFont(QFont("Helvetica", 11))
        self._hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._hint)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(500)

        self._sync()

    # -- helpers --

    def _sync(self) -> None:
        rows = self.game.grid.to_rows()
        for y, row in enumerate(rows):
            for x, rank in enumerate(row):
                cell = self._cells[y][x]
                if rank == 0:
                    cell.setText("")
                    cell.setStyleSheet(f"background:{_EMPTY}; border-radius:6px;")
                    continue
                bg = _TILE_BG[(rank - 1) % len(_TILE_BG)]
                fg = _TEXT_DARK if rank <= 2 else _TEXT_LIGHT
                cell.setText(str(rank_value(rank)))
                cell.setStyleSheet(
                    f"background:{bg}; color:{fg}; border-radius:6px;"
                )

        if self.game.is_over:
            self._timer.stop()
            self._hint.setText("Game over!   R  play again     Esc  quit")
            self._hint.setStyleSheet(f"color:{_RED}; font-weight:bold;")
        self._tick()

    def _tick(self) -> None:
        state = self.game.state
        self._stats.setText(
            f"Moves: {state.moves}    "
            f"Best: {self.game.grid.max_value()}    "
            f"Time: {_fmt(state.elapsed_time)}"
        )

    # -- actions --

    def move(self, direction: Direction) -> None:
        self.game.turn(direction)
        self._sync()


class _MainWindow(QMainWindow):
    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.setWindowTitle("Doge48")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(480, 560)
        self._page = _GamePage(GamePlay(config))
        self.setCentralWidget(self._page)

    def _restart(self) -> None:
        self._page = _GamePage(self._page.game.restart())
        self.setCentralWidget(self._page)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in _KEY_DIRECTIONS:
            self._page.move(_KEY_DIRECTIONS[key])
        elif key == Qt.Key.Key_R:
            self._restart()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the PyQt6 window."""
    logger.debug("Starting PyQt frontend with %s", config)
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config)
    window.show()
    qapp.exec()
