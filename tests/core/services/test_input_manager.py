"""
test_input_manager.py
---------------------
Unit tests for key sources and action lookup.
"""

import io
import os
import select
import sys

import pytest

from tickgrid.core.services.input_manager import (
    InputManager,
    ScriptedKeySource,
    TerminalKeySource,
)


def test_scripted_source_replays_then_runs_dry():
    source = ScriptedKeySource(["w", None, "", "d"])
    assert [source.poll() for _ in range(6)] == ["w", None, None, "d", None, None]


def test_actions_from_keys(scripted_input):
    manager = scripted_input("w", "p", "x", None)
    assert manager.update() == "move_up"
    assert tuple(manager.move()) == (0, -1)
    assert manager.update() == "pause"
    assert manager.action_pressed("pause")
    assert manager.update() is None             # unbound key
    assert manager.last_key == "x"
    assert manager.update() is None
    assert tuple(manager.move()) == (0, 0)


def test_consume_clears_action(scripted_input):
    manager = scripted_input("d")
    manager.update()
    manager.consume()
    assert tuple(manager.move()) == (0, 0)


def test_custom_bindings():
    manager = InputManager(ScriptedKeySource(["k"]), key_bindings={"move_up": ["k"]})
    assert manager.update() == "move_up"


def test_no_source_means_no_input():
    assert InputManager().update() is None


def test_terminal_source_disabled_without_tty():
    with TerminalKeySource(io.StringIO("wasd")) as source:
        assert not source.enabled
        assert source.poll() is None


@pytest.mark.parametrize("key", ["W", "D", "P", "Q"])
def test_bindings_are_case_sensitive(scripted_input, key):
    manager = scripted_input(key)
    assert manager.update() is None
    assert tuple(manager.move()) == (0, 0)


# ===========================================================
# Terminal Source (pty-backed)
# ===========================================================

@pytest.fixture
def pty_pair():
    """A pseudo-terminal: (master fd, slave text stream)."""
    pty = pytest.importorskip("pty")
    master, slave = pty.openpty()
    stream = os.fdopen(slave, "r")
    yield master, stream
    stream.close()
    os.close(master)


def wait_readable(stream, timeout=1.0):
    select.select([stream.fileno()], [], [], timeout)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX terminals only")
def test_terminal_source_returns_each_pending_key(pty_pair):
    master, stream = pty_pair
    with TerminalKeySource(stream) as source:
        assert source.enabled
        os.write(master, b"dd")
        wait_readable(stream)
        assert (source.poll(), source.poll()) == ("d", "d")
        assert source.poll() is None


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX terminals only")
def test_terminal_source_decodes_multibyte_key(pty_pair):
    master, stream = pty_pair
    with TerminalKeySource(stream) as source:
        os.write(master, "ñw".encode("utf-8"))
        wait_readable(stream)
        assert source.poll() == "ñ"
        assert source.poll() == "w"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX terminals only")
def test_terminal_source_restores_mode_on_exit(pty_pair):
    import termios
    _, stream = pty_pair
    before = termios.tcgetattr(stream.fileno())
    with TerminalKeySource(stream):
        assert termios.tcgetattr(stream.fileno()) != before
    assert termios.tcgetattr(stream.fileno()) == before
