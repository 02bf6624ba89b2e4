"""Pygame GUI frontend.

One window, one tile texture per rank.  Textures are read from
``assets/pics/<value>.png``; ranks without an image are drawn as
coloured squares with their number.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.models.grid import Direction
from backend.models.tile import rank_value

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_BACKGROUND = (250, 214, 114)
COL_LINE = (0, 0, 0)
COL_TEXT_DARK = (119, 110, 101)
COL_TEXT_LIGHT = (249, 246, 242)
COL_OVERLAY = (0, 0, 0, 150)

# Fallback tile fills, indexed by rank - 1 and cycled past 2048.
TILE_FILLS = [
    (238, 228, 218),
    (237, 224, 200),
    (242, 177, 121),
    (245, 149, 99),
    (246, 124, 95),
    (246, 94, 59),
    (237, 207, 114),
    (237, 204, 97),
    (237, 200, 80),
    (237, 197, 63),
    (237, 194, 46),
]

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 800, 800
CAPTION = "Doge48"

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


# ---------------------------------------------------------------------------
# Texture bank
# ---------------------------------------------------------------------------
class TextureBank:
    """Maps a tile rank to the surface drawn for it.

    Surfaces are built on first use and cached.  Only the presentation
    layer knows about this mapping.
    """

    def __init__(self, pics_dir: Path, cell_px: int) -> None:
        self._pics_dir = pics_dir
        self._cell_px = cell_px
        self._cache: dict[int, pygame.Surface] = {}
        self._font = pygame.font.SysFont("Helvetica", max(12, cell_px // 4), bold=True)

    def get(self, rank: int) -> pygame.Surface:
        surf = self._cache.get(rank)
        if surf is None:
            surf = self._load(rank) or self._draw(rank)
            self._cache[rank] = surf
        return surf

    def _load(self, rank: int) -> pygame.Surface | None:
        path = self._pics_dir / f"{rank_value(rank)}.png"
        if not path.is_file():
            logger.debug("No texture at %s, drawing tile", path)
            return None
        try:
            image = pygame.image.load(str(path)).convert_alpha()
        except pygame.error as exc:
            logger.warning("Could not load image %s: %s", path, exc)
            return None
        return pygame.transform.smoothscale(image, (self._cell_px, self._cell_px))

    def _draw(self, rank: int) -> pygame.Surface:
        surf = pygame.Surface((self._cell_px, self._cell_px))
        surf.fill(TILE_FILLS[(rank - 1) % len(TILE_FILLS)])
        fg = COL_TEXT_DARK if rank <= 2 else COL_TEXT_LIGHT
        label = self._font.render(str(rank_value(rank)), True, fg)
        surf.blit(
            label,
            (
                (self._cell_px - label.get_width()) // 2,
                (self._cell_px - label.get_height()) // 2,
            ),
        )
        return surf


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig, assets_dir: Path) -> None:
        self._game = GamePlay(config)

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption(CAPTION)

        self._cell_px = min(WIN_W, WIN_H) // config.size
        self._textures = TextureBank(assets_dir / "pics", self._cell_px)
        self._f_big = pygame.font.SysFont("Helvetica", 64, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 24)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_lines(self) -> None:
        size = self._game.size
        extent = self._cell_px * size
        for i in range(size + 1):
            pos = i * self._cell_px
            pygame.draw.line(self._surf, COL_LINE, (pos, 0), (pos, extent))
            pygame.draw.line(self._surf, COL_LINE, (0, pos), (extent, pos))

    def _draw_tiles(self) -> None:
        for tile in self._game.snapshot():
            self._surf.blit(
                self._textures.get(tile.rank),
                (tile.x * self._cell_px, tile.y * self._cell_px),
            )

    def _draw_over(self) -> None:
        shade = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
        shade.fill(COL_OVERLAY)
        self._surf.blit(shade, (0, 0))

        title = self._f_big.render("GAME OVER", True, COL_TEXT_LIGHT)
        hint = self._f_body.render(
            "R  play again     Esc  quit", True, COL_TEXT_LIGHT
        )
        self._surf.blit(title, ((WIN_W - title.get_width()) // 2, WIN_H // 2 - 60))
        self._surf.blit(hint, ((WIN_W - hint.get_width()) // 2, WIN_H // 2 + 20))

    def _draw(self) -> None:
        self._surf.fill(COL_BACKGROUND)
        self._draw_lines()
        self._draw_tiles()
        if self._game.is_over:
            self._draw_over()
        pygame.display.flip()

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        """Apply one event.  Returns False when the app should quit."""
        if ev.type == pygame.QUIT:
            return False
        if ev.type != pygame.KEYDOWN:
            return True

        if ev.key == pygame.K_ESCAPE:
            return False
        if ev.key == pygame.K_r:
            self._game = self._game.restart()
        elif ev.key in _KEY_DIRECTIONS:
            self._game.turn(_KEY_DIRECTIONS[ev.key])
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self._draw()
        running = True
        while running:
            # Block until input; one move-spawn-render cycle per event.
            running = self._handle(pygame.event.wait())
            if running:
                self._draw()

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig, assets_dir: Path = Path("assets")) -> None:
    """Launch the Pygame window."""
    logger.debug("Starting pygame frontend with %s", config)
    app = PygameApp(config, assets_dir)
    app.run_loop()
