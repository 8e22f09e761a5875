"""
tickgrid
--------
Terminal-rendered, tick-based 2D game runtime with live config reload.
"""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

__version__ = "0.3.1"
