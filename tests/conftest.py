"""
conftest.py
-----------
Shared pytest configuration and fixtures for tickgrid tests.

Contains:
- Recording fakes for the audio, render and input boundaries
- Fake clock and fake filesystem stat for the tick loop and hot reload
- Helpers for writing config files into a temporary directory
"""

import pytest
import sys
import os
from unittest.mock import MagicMock

# Add project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tickgrid.core.debug.debug_logger import LoggerConfig
from tickgrid.core.services.input_manager import InputManager, ScriptedKeySource


# ===========================================================
# Boundary Fakes
# ===========================================================

class RecordingSink:
    """Audio sink that remembers every (category, priority, message)."""

    def __init__(self):
        self.calls = []

    def play(self, category, priority, message):
        self.calls.append((category, priority, message))

    def by_category(self, category):
        return [c for c in self.calls if c[0] == category]


class RecordingDisplay:
    """Render sink that keeps frames and announcements."""

    def __init__(self):
        self.frames = []
        self.lines = []

    def present(self, frame):
        self.frames.append(frame)

    def announce(self, line):
        self.lines.append(line)


class FakeStat:
    """Stat function backed by a dict of path -> mtime."""

    def __init__(self):
        self.mtimes = {}

    def touch(self, path, mtime):
        self.mtimes[path] = mtime

    def __call__(self, path):
        return self.mtimes.get(path)


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep log output out of captured stdout unless a test enables it."""
    previous = (LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL, dict(LoggerConfig.CATEGORIES))
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL, categories = previous
    LoggerConfig.CATEGORIES.clear()
    LoggerConfig.CATEGORIES.update(categories)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def fake_stat():
    return FakeStat()


@pytest.fixture
def mock_clock():
    """Clock whose tick() never sleeps."""
    clock = MagicMock()
    clock.tick.return_value = 0
    return clock


@pytest.fixture
def write_file(tmp_path):
    """Write ``text`` to ``tmp_path/name`` and return the path as a string."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def scripted_input():
    """Factory for an InputManager replaying keys one per update()."""
    def _build(*keys):
        return InputManager(ScriptedKeySource(keys))
    return _build


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
