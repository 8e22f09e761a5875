#!/usr/bin/env python3
"""
main.py
-------
Process entry point for tickgrid.

Usage:
    python -m tickgrid                         # Play with config.toml in cwd
    python -m tickgrid --config level.toml     # Use another base config
    python -m tickgrid --ticks 60 --keys ddss  # Headless run with scripted keys

Exit codes:
    0  normal completion (or Ctrl+C)
    1  any error that escaped the engine
"""

import argparse
import sys
import traceback

from tickgrid import __version__
from tickgrid.audio.sound_manager import SoundManager
from tickgrid.core.debug.debug_logger import LEVELS, DebugLogger, LoggerConfig
from tickgrid.core.runtime.engine import Engine
from tickgrid.core.runtime.game_settings import Paths, Physics
from tickgrid.core.services.display_manager import DisplayManager
from tickgrid.core.services.input_manager import InputManager, ScriptedKeySource, TerminalKeySource
from tickgrid.core.services.locale_manager import LocaleManager
from tickgrid.core.services.settings_manager import SettingsManager


def build_parser():
    parser = argparse.ArgumentParser(prog="tickgrid", description="Tick-based terminal game runtime")
    parser.add_argument("--config", default=Paths.CONFIG_FILE,
                        help="Base config file (watched for changes)")
    parser.add_argument("--ticks", type=int, default=Physics.TICK_COUNT,
                        help="Number of ticks to run")
    parser.add_argument("--fps", type=int, default=Physics.TARGET_FPS,
                        help="Target ticks per second")
    parser.add_argument("--highscore", default=Paths.HIGHSCORE_FILE,
                        help="High score file")
    parser.add_argument("--locale-dir", default=Paths.LOCALE_DIR,
                        help="Directory holding strings_<lang>.txt files")
    parser.add_argument("--keys", default=None,
                        help="Replay these keys, one per tick, instead of reading the keyboard")
    parser.add_argument("--no-clear", action="store_true",
                        help="Do not clear the screen between frames")
    parser.add_argument("--mixer", action="store_true",
                        help="Play audio cues through the pygame mixer")
    parser.add_argument("--quiet", action="store_true",
                        help="Disable diagnostic logging")
    parser.add_argument("--log-level", choices=sorted(LEVELS, key=LEVELS.get), type=str.upper,
                        help="Most verbose level to print")
    parser.add_argument("--log", action="append", default=[], metavar="CATEGORY",
                        help="Also log this category (repeatable)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Run the engine and translate the outcome into an exit code."""
    args = build_parser().parse_args(argv)
    LoggerConfig.apply(level=args.log_level, quiet=args.quiet, categories=args.log)

    source = ScriptedKeySource(args.keys) if args.keys is not None else TerminalKeySource()
    sound = None
    try:
        with source:
            sound = SoundManager(enable_mixer=args.mixer)
            engine = Engine(
                config_path=args.config,
                sound=sound,
                display=DisplayManager(clear_screen=not args.no_clear),
                input_manager=InputManager(source),
                settings=SettingsManager(args.highscore),
                locale=LocaleManager(args.locale_dir),
                tick_count=args.ticks,
                target_fps=args.fps,
            )
            engine.run()
    except KeyboardInterrupt:
        DebugLogger.system("Interrupted")
        return 0
    except Exception as e:
        DebugLogger.fail(f"Unhandled error: {e}")
        traceback.print_exc(file=sys.stderr)
        return 1
    finally:
        if sound is not None:
            sound.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
