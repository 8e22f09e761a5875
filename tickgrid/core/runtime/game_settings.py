"""
game_settings.py
----------------
Centralized constants for all runtime systems.
"""


# ===========================================================
# Display
# ===========================================================

class Display:
    """Grid size used whenever configuration is missing or rejected."""
    DEFAULT_WIDTH: int = 40
    DEFAULT_HEIGHT: int = 12
    EMPTY_CELL: str = "."
    CLEAR_SCREEN: bool = True


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Tick loop timing."""
    TARGET_FPS: int = 60
    TICK_COUNT: int = 300
    MOVE_STEP: float = 1.0


# ===========================================================
# File Locations
# ===========================================================

class Paths:
    """Default file names, resolved relative to the working directory."""
    CONFIG_FILE: str = "config.toml"
    PROFILE_PATTERN: str = "config.{profile}.toml"
    LOCALE_DIR: str = "."
    LOCALE_PATTERN: str = "strings_{lang}.txt"
    HIGHSCORE_FILE: str = "highscore.txt"


# ===========================================================
# Configuration Defaults & Schema
# ===========================================================

class ConfigDefaults:
    """Values used when a key is absent from every config layer."""
    WIDTH: int = 40
    HEIGHT: int = 12
    START_X: int = 2
    START_Y: int = 2
    LANG: str = "es"


class Schema:
    """Accepted ranges checked by ConfigSchema."""
    WIDTH_RANGE: tuple = (10, 100)
    HEIGHT_RANGE: tuple = (5, 60)


# ===========================================================
# Sprites & Resources
# ===========================================================

class Sprites:
    """Cached glyph resources and their default content."""
    PLAYER_KEY: str = "player"
    PLAYER_GLYPH: str = "P"
    OBSTACLE_KEY: str = "obstacle"
    OBSTACLE_GLYPH: str = "O"
    FIXED_OBSTACLE: tuple = (1, 1)


# ===========================================================
# Audio Routing
# ===========================================================

class Audio:
    """Routing defaults and notification priorities."""
    DEFAULT_CATEGORY: str = "events"
    DEFAULT_PRIORITY: int = 5
    CONFIG_CATEGORY: str = "config"
    INVALID_PRIORITY: int = 1
    RELOAD_PRIORITY: int = 2


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    NAME: str = "Eddi"
