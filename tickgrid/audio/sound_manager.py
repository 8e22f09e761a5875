"""
sound_manager.py
----------------
Audio sink for routed game events.

Every play request is written as ``[SND][<category>][prio=<priority>] <message>``.
When the mixer is enabled and a cue file exists for the category, the cue is
played through pygame as well. Missing cues or a missing audio device are
tolerated; ``play`` never raises.
"""

import os
import sys
from collections import deque

import pygame

from tickgrid.core.debug.debug_logger import DebugLogger


class SoundManager:
    HISTORY_LIMIT = 256

    CUE_PATHS = {
        "collision": "assets/audio/bfx/Collision.wav",
        "config": "assets/audio/ui/Notice.wav",
        "system": "assets/audio/ui/Start.wav",
    }

    def __init__(self, stream=None, enable_mixer=False, cue_paths=None):
        self.stream = stream or sys.stdout
        self.cue_paths = cue_paths if cue_paths is not None else dict(self.CUE_PATHS)
        self.cues = {}
        self.history = deque(maxlen=self.HISTORY_LIMIT)
        self.mixer_enabled = enable_mixer and self._init_mixer()
        if self.mixer_enabled:
            self.load_cues()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            return True
        except pygame.error as e:
            DebugLogger.warn(f"Audio device unavailable: {e}", category="audio")
            return False

    def load_cues(self):
        for category, route in self.cue_paths.items():
            if not os.path.exists(route):
                continue
            try:
                self.cues[category] = pygame.mixer.Sound(route)
            except pygame.error as e:
                DebugLogger.warn(f"Failed to load cue {route}: {e}", category="audio")

    @staticmethod
    def format_line(category, priority, message):
        return f"[SND][{category}][prio={priority}] {message}"

    def play(self, category, priority, message):
        self.history.append((category, priority, message))
        self.stream.write(self.format_line(category, priority, message) + "\n")

        cue = self.cues.get(category)
        if cue is not None:
            try:
                cue.play()
            except pygame.error as e:
                DebugLogger.warn(f"Cue '{category}' failed: {e}", category="audio")

    def shutdown(self):
        if self.mixer_enabled:
            pygame.mixer.quit()
            self.mixer_enabled = False
