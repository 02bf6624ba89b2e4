"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import logging
import sys

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.models.grid import Grid
from backend.models.tile import rank_value
from frontend.cli.input_handler import get_key, to_direction

logger = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

# Foreground per rank, cycling once the 2048 tile is passed.
_RANK_COLOURS = [
    "\033[37m",      # 2
    "\033[37;1m",    # 4
    "\033[33m",      # 8
    "\033[33;1m",    # 16
    "\033[31m",      # 32
    "\033[31;1m",    # 64
    "\033[35m",      # 128
    "\033[35;1m",    # 256
    "\033[34;1m",    # 512
    "\033[36;1m",    # 1024
    "\033[32;1m",    # 2048
]

_HELP = (
    f"  {_C}↑↓←→{_R} / {_C}WASD{_R} move   "
    f"{_C}R{_R} restart   {_C}Q{_R} quit"
)


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _cell_width(grid: Grid) -> int:
    return max(4, len(str(grid.max_value())))


# -- grid rendering -----------------------------------------------------------


def format_grid(grid: Grid, colour: bool = False) -> str:
    """Return a boxed text drawing of *grid*, optionally ANSI-coloured."""
    width = _cell_width(grid)
    sep = "+" + (("-" * (width + 2) + "+") * grid.size)

    lines: list[str] = [sep]
    for row in grid.to_rows():
        cells: list[str] = []
        for rank in row:
            if rank == 0:
                text = f" {'·':>{width}} "
                cells.append(f"{_DIM}{text}{_R}" if colour else text)
                continue
            text = f" {rank_value(rank):>{width}} "
            if colour:
                code = _RANK_COLOURS[(rank - 1) % len(_RANK_COLOURS)]
                text = f"{code}{text}{_R}"
            cells.append(text)
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _stats_line(game: GamePlay) -> str:
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Tiles: {_Y}{len(game.grid)}{_R}  |  "
        f"Best: {_Y}{game.grid.max_value()}{_R}"
    )


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    _clear()
    size = game.size
    print()
    print(f"  {_BOLD}=== D O G E 4 8  ({size}×{size}) ==={_R}")
    print()
    print(format_grid(game.grid, colour=True))
    print()
    print(_stats_line(game))
    if status:
        print(f"  {status}")
    print()
    print(_HELP)
    sys.stdout.flush()


def _draw_over(game: GamePlay) -> None:
    _clear()
    print()
    print(f"  {_RED}=== G A M E   O V E R ==={_R}")
    print()
    print(format_grid(game.grid, colour=True))
    print()
    print(_stats_line(game))
    print()
    print(f"  {_DIM}Press R to play again, Q to quit.{_R}")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    status = ""
    while True:
        if game.is_over:
            _draw_over(game)
            key = get_key()
            if key == "restart":
                game = game.restart()
            elif key == "quit":
                return
            continue

        _draw_game(game, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            result = game.turn(direction)
            if not (result.changed or result.spawned):
                status = f"{_DIM}Nothing moves {direction.value}.{_R}"
        elif key == "restart":
            game = game.restart()
            status = f"{_Y}New game.{_R}"
        elif key == "help":
            status = _HELP
        elif key == "quit":
            return


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the vanilla terminal frontend."""
    logger.debug("Starting vanilla frontend with %s", config)
    try:
        _play(GamePlay(config))
    finally:
        print(f"\n  {_C}Goodbye!{_R}\n")
