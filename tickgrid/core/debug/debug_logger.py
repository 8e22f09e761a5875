"""
debug_logger.py
---------------
Category-filtered diagnostic logger for the engine and its services.

Diagnostics share stdout with the rendered frames. Failures always go to
stderr and are never filtered by category.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core Engine
        "system": True,
        "timing": False,

        # Configuration
        "config": True,
        "reload": True,
        "locale": False,
        "persistence": True,

        # Runtime Services
        "resource": False,
        "event": False,
        "audio": False,
        "input": False,

        # World
        "collision": False,
        "render": False,
    }

    SHOW_TIMESTAMP = True
    SHOW_SOURCE = True
    USE_COLOR = True  # only when the target stream is a terminal

    @classmethod
    def apply(cls, level=None, quiet=False, categories=()):
        """
        Adjust verbosity from command-line options.

        Args:
            level: One of LEVELS (case-insensitive), or None to keep the current one.
            quiet: Disable logging entirely.
            categories: Extra categories to switch on.
        """
        if quiet:
            cls.ENABLE_LOGGING = False
        if level:
            cls.LOG_LEVEL = level.upper()
        for category in categories:
            if category in cls.CATEGORIES:
                cls.CATEGORIES[category] = True
            else:
                DebugLogger.warn(f"Unknown log category '{category}'")


# ===========================================================
# Debug Logger
# ===========================================================

RESET = "\033[0m"

LEVELS = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

# tag -> (level, color)
TAGS = {
    "SYSTEM": ("INFO", "\033[95m"),
    "STATE": ("INFO", "\033[96m"),
    "ACTION": ("INFO", "\033[92m"),
    "TRACE": ("VERBOSE", "\033[94m"),
    "WARN": ("WARN", "\033[93m"),
    "FAIL": ("ERROR", "\033[91m"),
}

STATUS_COLORS = {"OK": "\033[92m", "LOADING": "\033[96m", "FAIL": "\033[91m"}


class DebugLogger:
    """Static logger; every public method takes a message and a category."""

    LINE_LENGTH = 59

    @staticmethod
    def enabled(category: str, level: str) -> bool:
        """True if a ``level`` message in ``category`` would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if LEVELS.get(level, 3) > LEVELS.get(LoggerConfig.LOG_LEVEL, 3):
            return False
        return level == "ERROR" or LoggerConfig.CATEGORIES.get(category, False)

    @staticmethod
    def _source(depth: int = 3) -> str:
        """Class name of the caller's ``self``, else its module name."""
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "?"
        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        module = frame.f_globals.get("__name__", "?")
        return module.rsplit(".", 1)[-1]

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        level, color = TAGS[tag]
        if not DebugLogger.enabled(category, level):
            return

        stream = sys.stderr if level == "ERROR" else sys.stdout
        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}]")
        head = f"[{DebugLogger._source()}]" if LoggerConfig.SHOW_SOURCE else ""
        parts.append(f"{head}[{tag}]")
        line = f"{' '.join(parts)} {msg}"

        if LoggerConfig.USE_COLOR and _is_tty(stream):
            line = f"{color}{line}{RESET}"
        print(line, file=stream)

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        """Failure log. Always reaches stderr while logging is enabled."""
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a centered section header."""
        if not DebugLogger.enabled("system", "INFO"):
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}\n")

    @staticmethod
    def init_entry(name: str, status: str = "OK"):
        """Print ``> name ........ [STATUS]`` padded to LINE_LENGTH."""
        if not DebugLogger.enabled("system", "INFO"):
            return
        label = f"> {name}"
        badge = f"[{status}]"
        dots = max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 2, 1)
        if LoggerConfig.USE_COLOR and _is_tty(sys.stdout):
            badge = f"{STATUS_COLORS.get(status.upper(), '')}{badge}{RESET}"
        print(f"{label} {'.' * dots} {badge}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print an indented bullet under the last entry."""
        if not DebugLogger.enabled("system", "INFO"):
            return
        print(f"{' ' * (level * 4)}• {detail}")


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
