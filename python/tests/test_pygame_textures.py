"""Pygame frontend tests — texture fallback and key handling, headless."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

pygame = pytest.importorskip("pygame")

from backend.config import GameConfig  # noqa: E402
from frontend.gui.pygame.app import PygameApp  # noqa: E402


# -- fixtures -----------------------------------------------------------------


@pytest.fixture
def app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pics = tmp_path / "pics"
    pics.mkdir()
    # Rank 2 (value 4) has a file that is not an image; rank 1 has none.
    (pics / "4.png").write_bytes(b"definitely not a png")

    instance = PygameApp(GameConfig(seed=1), tmp_path)
    yield instance
    pygame.quit()


# -- textures -----------------------------------------------------------------


def test_missing_texture_is_drawn(app: PygameApp) -> None:
    surf = app._textures.get(1)

    assert surf.get_size() == (app._cell_px, app._cell_px)


def test_broken_texture_is_logged_and_drawn(
    app: PygameApp, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="frontend.gui.pygame.app"):
        surf = app._textures.get(2)

    assert surf.get_size() == (app._cell_px, app._cell_px)
    assert any("Could not load image" in r.getMessage() for r in caplog.records)


def test_textures_are_cached(app: PygameApp) -> None:
    assert app._textures.get(1) is app._textures.get(1)


# -- event handling -----------------------------------------------------------


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_arrow_key_plays_and_escape_quits(app: PygameApp) -> None:
    app._draw()

    assert app._handle(_key(pygame.K_LEFT))
    app._draw()
    assert app._game.size == 4

    assert not app._handle(_key(pygame.K_ESCAPE))


def test_restart_key_starts_a_new_game(app: PygameApp) -> None:
    before = app._game

    assert app._handle(_key(pygame.K_r))

    assert app._game is not before
    assert len(app._game.grid) == 1


def test_quit_event_stops_the_loop(app: PygameApp) -> None:
    assert not app._handle(pygame.event.Event(pygame.QUIT))
