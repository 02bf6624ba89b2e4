"""Single-keypress reader shared by the terminal frontends.

Arrow keys, WASD, and a handful of commands are read without Enter on
macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.grid import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "k": "up",
    "s": "down",
    "j": "down",
    "a": "left",
    "h": "left",
    "d": "right",
    "l": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "?": "help",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of the ESC [ x sequences sent by arrow keys.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def to_direction(action: str | None) -> Direction | None:
    """Return the ``Direction`` for a movement action, else ``None``."""
    if action is None:
        return None
    return _DIRECTIONS.get(action)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — arrows, WASD, HJKL
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "help"                         — ?
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but return ``None`` after *timeout* seconds of silence.

    Reads with ``os.read`` so ``select`` sees the remaining bytes of an
    arrow-key escape sequence.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def _next(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return resolve(ch)

        # ESC [ A/B/C/D, or a bare Escape
        if _next(0.1) != "[":
            return "quit"
        final = _next(0.1)
        return _ARROW_MAP.get(final, "") if final else ""
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
