"""
input_manager.py
----------------
Non-blocking keyboard input for the tick loop.

Provides:
- Key sources that yield at most one character per tick, or None
- A binding table mapping characters to named actions
- A unit movement vector for the latest movement action
"""

import codecs
import os
import sys
from typing import Iterable, Optional

import pygame

from tickgrid.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_up": ["w"],
    "move_down": ["s"],
    "move_left": ["a"],
    "move_right": ["d"],
    "pause": ["p"],
    "quit": ["q"],
}

MOVE_VECTORS = {
    "move_up": (0, -1),
    "move_down": (0, 1),
    "move_left": (-1, 0),
    "move_right": (1, 0),
}


# ===========================================================
# Key Sources
# ===========================================================

class TerminalKeySource:
    """
    Reads single keystrokes from the terminal without waiting.

    Use as a context manager so the terminal's line mode is restored on exit.
    When stdin is not a terminal, ``poll`` always returns None.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._saved_mode = None
        self._msvcrt = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.enabled = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def open(self):
        if not self._is_tty():
            DebugLogger.system("stdin is not a terminal - keyboard disabled", category="input")
            return
        if sys.platform == "win32":
            import msvcrt
            self._msvcrt = msvcrt
        else:
            import termios
            import tty
            fd = self.stream.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        self.enabled = True

    def close(self):
        if self._saved_mode is not None:
            import termios
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None
        self.enabled = False

    def poll(self) -> Optional[str]:
        """Return the next pressed key, or None if nothing is waiting."""
        if not self.enabled:
            return None
        if self._msvcrt is not None:
            if self._msvcrt.kbhit():
                return self._msvcrt.getwch()
            return None

        import select
        # os.read bypasses the stream buffer so select sees every pending key
        fd = self.stream.fileno()
        while select.select([fd], [], [], 0)[0]:
            data = os.read(fd, 1)
            if not data:
                return None
            key = self._decoder.decode(data)
            if key:
                return key
        return None

    def _is_tty(self) -> bool:
        try:
            return self.stream.isatty()
        except (AttributeError, ValueError):
            return False


class ScriptedKeySource:
    """
    Replays a fixed key sequence, one entry per tick.

    Entries that are None or empty mean "no key this tick".
    """

    def __init__(self, keys: Iterable[Optional[str]]):
        self._keys = iter(keys)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def poll(self) -> Optional[str]:
        key = next(self._keys, None)
        return key or None


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Samples one key per tick and exposes it as an action.

    Usage:
        input_manager.update()
        if input_manager.action_pressed("pause"):
            engine.toggle_pause()
        dx, dy = input_manager.move()
    """

    def __init__(self, source=None, key_bindings=None):
        """
        Args:
            source: Object with ``poll() -> str | None`` (defaults to no input).
            key_bindings: Action -> list of keys (uses DEFAULT_KEY_BINDINGS if None).
        """
        self.source = source
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._key_to_action = {}
        for action_name, keys in self.key_bindings.items():
            for key in keys:
                self._key_to_action[key] = action_name

        self.last_key: Optional[str] = None
        self.current_action: Optional[str] = None

    def update(self) -> Optional[str]:
        """Poll the source once and return the resulting action, if any."""
        key = self.source.poll() if self.source is not None else None
        self.last_key = key
        self.current_action = self._key_to_action.get(key) if key else None
        if key is not None:
            DebugLogger.trace(f"Key {key!r} -> {self.current_action}", category="input")
        return self.current_action

    def action_pressed(self, action: str) -> bool:
        """True if this tick's key is bound to ``action``."""
        return self.current_action == action

    def move(self) -> pygame.Vector2:
        """Unit direction for this tick's movement action (zero if none)."""
        return pygame.Vector2(MOVE_VECTORS.get(self.current_action, (0, 0)))

    def consume(self) -> None:
        """Forget this tick's action so it is applied only once."""
        self.current_action = None
