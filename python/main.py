#!/usr/bin/env python3
"""Doge48 — a 2048-style sliding tile game.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich -s 5       # Rich terminal, 5×5
    python main.py -f pygame          # Pygame window
    python main.py --seed 7 --moves LLUR   # replay moves, print the grid
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
ASSETS_DIR = PROJECT_ROOT / "assets"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_SIZE,
    MAX_UI_SIZE,
    MIN_UI_SIZE,
    GameConfig,
    InvalidConfigError,
)

logger = logging.getLogger("doge48")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

# Frontends that draw textures from ASSETS_DIR.
_TEXTURED = {Frontend.pygame}


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_MOVE_LETTERS = {"u": "up", "d": "down", "l": "left", "r": "right"}


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _launch(frontend: Frontend, config: GameConfig) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend in _TEXTURED:
        mod.run(config=config, assets_dir=ASSETS_DIR)
    else:
        mod.run(config=config)


def _parse_moves(moves: str) -> list[str]:
    """Turn ``"UlDr"`` into direction names; whitespace is ignored."""
    parsed: list[str] = []
    for ch in moves:
        if ch.isspace():
            continue
        name = _MOVE_LETTERS.get(ch.lower())
        if name is None:
            raise typer.BadParameter(
                f"Unknown move {ch!r}; use U, D, L or R.", param_hint="--moves"
            )
        parsed.append(name)
    return parsed


def _replay(config: GameConfig, moves: list[str]) -> None:
    """Play *moves* without a UI and print the resulting grid."""
    from backend.engine.gameplay import GamePlay
    from frontend.cli.vanilla.app import format_grid

    game = GamePlay(config)
    for played, name in enumerate(moves):
        if game.is_over:
            logger.info("Game over, %d move(s) left unplayed", len(moves) - played)
            break
        game.turn(name)

    typer.echo(format_grid(game.grid))
    typer.echo(f"moves: {game.state.moves}")
    typer.echo(f"tiles: {len(game.grid)}")
    typer.echo(f"terminal: {str(game.is_terminal()).lower()}")


def _menu_loop(config: GameConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("             D O G E 4 8              ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        frontend = {
            "1": Frontend.vanilla,
            "2": Frontend.rich,
            "3": Frontend.pygame,
            "4": Frontend.pyqt,
        }.get(choice)
        if frontend is None:
            print("  Unknown option.")
            continue
        _launch(frontend, config)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_UI_SIZE, max=MAX_UI_SIZE,
        envvar="DOGE48_SIZE",
        help=f"Grid side length ({MIN_UI_SIZE}-{MAX_UI_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="DOGE48_SEED",
        help="Seed for tile spawning. Omit for a random game.",
    ),
    initial_tiles: int = typer.Option(
        1, "--initial-tiles",
        min=0,
        help="Tiles placed before the first move.",
    ),
    moves: Optional[str] = typer.Option(
        None, "--moves",
        help="Play these moves (U/D/L/R) headless and print the grid.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        envvar="DOGE48_LOG_LEVEL",
        help="Logging level.",
    ),
) -> None:
    """Doge48 sliding tile game."""
    _setup_logging(log_level)

    try:
        config = GameConfig(size=size, initial_tiles=initial_tiles, seed=seed)
    except InvalidConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logger.debug("Using %s", config)

    if moves is not None:
        _replay(config, _parse_moves(moves))
        return

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config)


if __name__ == "__main__":
    app()
