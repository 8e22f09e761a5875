"""
Core services exports.

Provides configuration loading, the resource cache, event routing,
localization, persistence and the terminal input/output boundaries.
"""

from tickgrid.core.services.config_manager import (
    Configuration,
    ConfigManager,
    ConfigWatcher,
    load_config,
)
from tickgrid.core.services.config_schema import ConfigSchema
from tickgrid.core.services.event_manager import AudioRoute, EventManager
from tickgrid.core.services.resource_manager import ResourceManager
from tickgrid.core.services.locale_manager import LocaleManager
from tickgrid.core.services.settings_manager import SettingsManager
from tickgrid.core.services.input_manager import InputManager, ScriptedKeySource, TerminalKeySource
from tickgrid.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'Configuration',
    'ConfigManager',
    'ConfigWatcher',
    'ConfigSchema',
    'load_config',
    # Events & resources
    'AudioRoute',
    'EventManager',
    'ResourceManager',
    # Services
    'LocaleManager',
    'SettingsManager',
    'InputManager',
    'ScriptedKeySource',
    'TerminalKeySource',
    'DisplayManager',
]
