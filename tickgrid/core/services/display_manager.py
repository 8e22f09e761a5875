"""
display_manager.py
------------------
Terminal render sink.

Each frame arrives as one multi-line text block; the display optionally
clears the screen before writing it. One-off lines (labels, banners) go
through ``announce``.
"""

import sys

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import Display


CLEAR_SEQUENCE = "\033[2J\033[H"


class DisplayManager:
    """Writes frames and announcements to a text stream."""

    def __init__(self, stream=None, clear_screen: bool = Display.CLEAR_SCREEN):
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen
        self.frames_presented = 0

    def present(self, frame: str) -> None:
        """Write one complete frame."""
        if self.clear_screen:
            self.stream.write(CLEAR_SEQUENCE)
        self.stream.write(frame)
        self.stream.flush()
        self.frames_presented += 1
        DebugLogger.trace(f"Frame {self.frames_presented} presented", category="render")

    def announce(self, line: str) -> None:
        """Write a single line outside the frame cycle."""
        self.stream.write(f"{line}\n")
        self.stream.flush()
