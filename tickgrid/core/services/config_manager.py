"""
config_manager.py
-----------------
Loads world configuration from a base file and an optional profile overlay.

Features:
- Line-oriented ``key = value`` grammar with ``#`` comments
- Profile overlay (``config.<profile>.toml``) whose scalars win over the base
- Obstacles append within the base file; an overlay replaces them
- Missing files fall back to defaults without raising
- Modification-time watcher for hot reload
"""

import os
from dataclasses import dataclass, fields
from typing import Callable, Iterable, Optional, Tuple

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import Audio, ConfigDefaults, Paths
from tickgrid.core.utils.tokenizers import iter_key_values, parse_int, parse_obstacle_pairs
from tickgrid.systems.collision.rect import Rect


# ===========================================================
# Configuration Record
# ===========================================================

@dataclass(frozen=True)
class Configuration:
    """One fully resolved configuration. Reloads build a new instance."""
    width: int = ConfigDefaults.WIDTH
    height: int = ConfigDefaults.HEIGHT
    start_x: int = ConfigDefaults.START_X
    start_y: int = ConfigDefaults.START_Y
    obstacles: Tuple[Rect, ...] = ()
    profile: str = ""
    sprite_player: str = ""
    sprite_obstacle: str = ""
    audio_map: str = ""
    lang: str = ConfigDefaults.LANG

    def diff(self, other: "Configuration") -> Tuple[str, ...]:
        """Names of the fields whose values differ from ``other``."""
        return tuple(
            f.name for f in fields(self)
            if getattr(self, f.name) != getattr(other, f.name)
        )


# Config key -> Configuration field, for keys assigned by plain overwrite
INT_KEYS = {
    "width": "width",
    "height": "height",
    "player_x": "start_x",
    "player_y": "start_y",
}

STR_KEYS = {
    "sprite_player": "sprite_player",
    "sprite_obstacle": "sprite_obstacle",
    "profile": "profile",
    "audio_map": "audio_map",
    "lang": "lang",
}

OBSTACLES_KEY = "obstacles"


# ===========================================================
# Loader
# ===========================================================

class ConfigManager:
    """
    Resolves a Configuration from disk.

    The loader never validates ranges; callers run ConfigSchema on the result
    and decide how to react.
    """

    def __init__(self, sink=None, profile_pattern: str = Paths.PROFILE_PATTERN):
        """
        Args:
            sink: Audio sink notified when the grid size had to be reset.
            profile_pattern: File name pattern for overlays, formatted with ``profile``.
        """
        self.sink = sink
        self.profile_pattern = profile_pattern

    def load(self, path: str = Paths.CONFIG_FILE) -> Configuration:
        """
        Read the base file and, when it names a profile, its overlay.

        Args:
            path: Base config file.

        Returns:
            Configuration: Defaults for anything neither layer sets.
        """
        values = _default_values()

        lines = _read_lines(path)
        if lines is None:
            DebugLogger.system(f"No config at {path} - using defaults", category="config")
        else:
            self._apply_layer(values, lines, overlay=False)
            DebugLogger.system(f"Loaded {os.path.basename(path)}", category="config")
        self._normalize(values)

        profile = values["profile"]
        if profile:
            overlay_path = self.profile_path(path, profile)
            overlay_lines = _read_lines(overlay_path)
            if overlay_lines is not None:
                # Overlay sizes are not normalized; ConfigSchema rejects them
                self._apply_layer(values, overlay_lines, overlay=True)
                DebugLogger.system(f"Applied profile '{profile}'", category="config")
            else:
                DebugLogger.trace(f"No overlay for profile '{profile}'", category="config")

        values["obstacles"] = tuple(values["obstacles"])
        return Configuration(**values)

    def profile_path(self, base_path: str, profile: str) -> str:
        """Overlay file for ``profile``, next to the base file."""
        directory = os.path.dirname(base_path)
        return os.path.join(directory, self.profile_pattern.format(profile=profile))

    # ===========================================================
    # Layer Parsing
    # ===========================================================

    def _apply_layer(self, values: dict, lines: Iterable[str], overlay: bool) -> None:
        """Assign every recognized key from one file onto ``values``."""
        for kv in iter_key_values(lines):
            if kv.key in INT_KEYS:
                number = parse_int(kv.value)
                if number is None:
                    DebugLogger.warn(
                        f"Line {kv.line_no}: '{kv.key}' is not an integer ('{kv.value}')",
                        category="config"
                    )
                    continue
                values[INT_KEYS[kv.key]] = number

            elif kv.key in STR_KEYS:
                # An overlay cannot chain to another profile
                if overlay and kv.key == "profile":
                    continue
                values[STR_KEYS[kv.key]] = kv.value

            elif kv.key == OBSTACLES_KEY:
                cells = [Rect.unit(x, y) for x, y in parse_obstacle_pairs(kv.value)]
                if overlay:
                    values["obstacles"].clear()
                values["obstacles"].extend(cells)

    def _normalize(self, values: dict) -> None:
        """Reset a non-positive grid size to the defaults and say so."""
        if values["width"] > 0 and values["height"] > 0:
            return
        values["width"] = ConfigDefaults.WIDTH
        values["height"] = ConfigDefaults.HEIGHT
        DebugLogger.warn("Invalid width/height - defaults applied", category="config")
        if self.sink is not None:
            self.sink.play(
                Audio.CONFIG_CATEGORY,
                Audio.INVALID_PRIORITY,
                "invalid width/height; defaults applied"
            )


def load_config(path: str = Paths.CONFIG_FILE, sink=None) -> Configuration:
    """Load a configuration with a throwaway ConfigManager."""
    return ConfigManager(sink).load(path)


# ===========================================================
# Hot Reload
# ===========================================================

def file_mtime(path: str) -> Optional[float]:
    """Last modification time of ``path``, or None when it cannot be read."""
    try:
        return os.stat(path).st_mtime
    except OSError:
        return None


class ConfigWatcher:
    """
    Polls a file's modification time.

    The stat function is injectable so tests can drive the watcher with a
    fake filesystem.
    """

    def __init__(self, path: str, stat: Callable[[str], Optional[float]] = file_mtime):
        self.path = path
        self.stat = stat
        self.last_mtime: Optional[float] = None

    def prime(self) -> None:
        """Record the current mtime without reporting a change."""
        self.last_mtime = self.stat(self.path)

    def changed(self) -> bool:
        """True if the file's mtime advanced since the previous check."""
        mtime = self.stat(self.path)
        if mtime is None:
            return False
        if self.last_mtime is not None and mtime <= self.last_mtime:
            return False
        self.last_mtime = mtime
        return True


# ===========================================================
# File Helpers
# ===========================================================

def _default_values() -> dict:
    values = {f.name: f.default for f in fields(Configuration)}
    values["obstacles"] = []
    return values


def _read_lines(path: str) -> Optional[list]:
    """All lines of ``path``, or None if it is missing or unreadable."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.readlines()
    except OSError as e:
        if os.path.exists(path):
            DebugLogger.warn(f"Failed to read {path}: {e} - using defaults", category="config")
        return None
