"""
test_display_manager.py
-----------------------
Unit tests for the terminal render sink.
"""

import io

from tickgrid.core.services.display_manager import CLEAR_SEQUENCE, DisplayManager


def test_present_writes_frame_with_clear():
    out = io.StringIO()
    display = DisplayManager(out, clear_screen=True)
    display.present("..\n")
    assert out.getvalue() == CLEAR_SEQUENCE + "..\n"
    assert display.frames_presented == 1


def test_present_without_clear():
    out = io.StringIO()
    DisplayManager(out, clear_screen=False).present("P.\n")
    assert out.getvalue() == "P.\n"


def test_announce_appends_newline():
    out = io.StringIO()
    DisplayManager(out).announce("--- Start ---")
    assert out.getvalue() == "--- Start ---\n"
