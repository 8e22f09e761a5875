"""
Runtime configuration exports.

Provides project-wide constants and per-run counters. All exports are
lightweight classes with no initialization overhead; import the engine
from ``tickgrid.core.runtime.engine``.
"""

from tickgrid.core.runtime.game_settings import (
    Display,
    Physics,
    Paths,
    ConfigDefaults,
    Schema,
    Sprites,
    Audio,
    PlayerDefaults,
)
from tickgrid.core.runtime.session_stats import SessionStats

__all__ = [
    # Display & grid
    'Display',
    'Physics',
    # Configuration
    'Paths',
    'ConfigDefaults',
    'Schema',
    # Content
    'Sprites',
    'Audio',
    'PlayerDefaults',
    # Session
    'SessionStats',
]
