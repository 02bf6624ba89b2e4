"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.models.grid import Grid
from backend.models.tile import rank_value
from frontend.cli.input_handler import get_key, get_key_timeout, to_direction

logger = logging.getLogger(__name__)

console = Console()

# Tile styles per rank, cycling once the 2048 tile is passed.
_RANK_STYLES = [
    "bold #776e65 on #eee4da",
    "bold #776e65 on #ede0c8",
    "bold white on #f2b179",
    "bold white on #f59563",
    "bold white on #f67c5f",
    "bold white on #f65e3b",
    "bold white on #edcf72",
    "bold white on #edcc61",
    "bold white on #edc850",
    "bold white on #edc53f",
    "bold white on #edc22e",
]


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _rank_style(rank: int) -> str:
    return _RANK_STYLES[(rank - 1) % len(_RANK_STYLES)]


# -- grid rendering -----------------------------------------------------------


def _render_grid(grid: Grid) -> Table:
    """Return a Rich Table representing the grid."""
    width = max(4, len(str(grid.max_value())))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="#bbada0",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for row in grid.to_rows():
        cells: list[Text] = []
        for rank in row:
            if rank == 0:
                cells.append(Text("·", style="dim"))
            else:
                cells.append(
                    Text(f"{rank_value(rank):>{width}}", style=_rank_style(rank))
                )
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(game.grid.max_value()), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()
    size = game.size

    panel = Panel(
        Align.center(_render_grid(game.grid)),
        title=f"[bold #f67c5f]Doge48  {size}×{size}[/bold #f67c5f]",
        border_style="#bbada0",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_over(game: GamePlay) -> None:
    console.clear()
    size = game.size

    banner = Text()
    banner.append("\n  GAME OVER", style="bold red")
    banner.append("  — no room for another tile\n", style="red")

    group = Group(
        Align.center(_render_grid(game.grid)),
        Align.center(banner),
        Align.center(_stats(game)),
    )
    panel = Panel(
        group,
        title=f"[bold red]Doge48  {size}×{size}[/bold red]",
        border_style="bold red",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(
            Text("\n  Press R to play again, Q to quit.\n", style="dim")
        )
    )


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

        # Redraw every second so the clock keeps ticking.
        key = get_key_timeout(1.0)
        if key is None:
            continue

        direction = to_direction(key)
        if direction is not None:
            result = game.turn(direction)
            if not (result.changed or result.spawned):
                status = f"[dim]Nothing moves {direction.value}.[/dim]"
            elif result.merged:
                status = f"[cyan]{result.merged} merge(s)[/cyan]"
        elif key == "restart":
            game = game.restart()
            status = "[yellow]New game.[/yellow]"
        elif key == "quit":
            return


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich terminal frontend."""
    logger.debug("Starting rich frontend with %s", config)
    try:
        _play(GamePlay(config))
    finally:
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
