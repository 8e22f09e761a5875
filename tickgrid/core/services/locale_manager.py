"""
locale_manager.py
-----------------
Language-keyed UI strings with built-in fallbacks.

Locale files use the same ``key = value`` grammar as the config file and
are named ``strings_<lang>.txt``. Lookups never fail: unknown keys come
back unchanged.
"""

import os
from typing import Dict

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import Paths
from tickgrid.core.utils.tokenizers import iter_key_values


class LocaleManager:
    """Key -> localized string table for one language at a time."""

    DEFAULTS = {
        "version_label": "Versión actual:",
        "start_label": "--- Start ---",
        "end_label": "--- Fin Ejecución ---",
    }

    def __init__(self, locale_dir: str = Paths.LOCALE_DIR, pattern: str = Paths.LOCALE_PATTERN):
        self.locale_dir = locale_dir
        self.pattern = pattern
        self.lang = None
        self._table: Dict[str, str] = dict(self.DEFAULTS)

    def path_for(self, lang: str) -> str:
        return os.path.join(self.locale_dir, self.pattern.format(lang=lang))

    def load(self, lang: str) -> None:
        """Replace the table with ``lang``'s strings, then fill in missing defaults."""
        self._table.clear()
        self.lang = lang
        path = self.path_for(lang)

        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                for kv in iter_key_values(f):
                    self._table[kv.key] = kv.value
            DebugLogger.system(f"Loaded {len(self._table)} strings for '{lang}'", category="locale")
        except OSError:
            DebugLogger.warn(f"No strings for '{lang}' at {path}", category="locale")

        for key, value in self.DEFAULTS.items():
            self._table.setdefault(key, value)

    def get(self, key: str) -> str:
        """Localized string for ``key``, or ``key`` itself."""
        return self._table.get(key, key)

    def __contains__(self, key: str) -> bool:
        return key in self._table
