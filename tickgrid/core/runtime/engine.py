"""
engine.py
---------
Defines the Engine class that owns the world and runs the tick loop.

Responsibilities
----------------
- Load, validate and apply configuration (falling back to safe values)
- Maintain the fixed tick loop (input → update → reload check → draw → pace)
- Score obstacle collisions and route their sounds through the EventManager
- Hot-reload the config file when its modification time advances
- Persist the high score when the run ends

State machine
-------------
UNINITIALIZED → RUNNING ⇄ PAUSED → STOPPED
"""

from dataclasses import replace
from enum import Enum
from typing import List, Optional

import pygame

from tickgrid import __version__
from tickgrid.audio.sound_manager import SoundManager
from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import (
    Audio, ConfigDefaults, Display, Paths, Physics, Sprites
)
from tickgrid.core.runtime.session_stats import SessionStats
from tickgrid.core.services.config_manager import (
    ConfigManager, ConfigWatcher, Configuration, file_mtime
)
from tickgrid.core.services.config_schema import ConfigSchema
from tickgrid.core.services.display_manager import DisplayManager
from tickgrid.core.services.event_manager import EventManager
from tickgrid.core.services.input_manager import InputManager
from tickgrid.core.services.locale_manager import LocaleManager
from tickgrid.core.services.resource_manager import ResourceManager
from tickgrid.core.services.settings_manager import SettingsManager
from tickgrid.core.utils.tokenizers import parse_audio_map
from tickgrid.entities.player import Player
from tickgrid.systems.collision.collision_manager import CollisionManager
from tickgrid.systems.collision.rect import Rect


class EngineStatus(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class Engine:
    """Core runtime controller that owns all world state."""

    def __init__(
        self,
        config_path: str = Paths.CONFIG_FILE,
        sound=None,
        display=None,
        input_manager=None,
        settings=None,
        locale=None,
        clock=None,
        stat=file_mtime,
        tick_count: int = Physics.TICK_COUNT,
        target_fps: int = Physics.TARGET_FPS,
    ):
        """
        Wire collaborators. Anything not supplied gets its terminal default.

        Args:
            config_path: Base config file, also the file watched for reloads.
            sound: Audio sink with ``play(category, priority, message)``.
            display: Render sink with ``present(frame)`` and ``announce(line)``.
            input_manager: InputManager sampling one key per tick.
            settings: High-score store with ``load()`` and ``save(value)``.
            locale: LocaleManager for UI labels.
            clock: Object with ``tick(fps)``; a pygame Clock is created by ``run``.
            stat: ``stat(path) -> mtime | None`` used by the reload watcher.
            tick_count: Number of ticks ``run`` performs.
            target_fps: Frame rate set by ``start`` and used for pacing.
        """
        self.config_path = config_path
        self.tick_count = tick_count
        self.requested_fps = target_fps

        # -------------------------------------------------------
        # Collaborators
        # -------------------------------------------------------
        self.sound = sound or SoundManager()
        self.display = display or DisplayManager()
        self.input = input_manager or InputManager()
        self.settings = settings or SettingsManager()
        self.locale = locale or LocaleManager()
        self.clock = clock

        # -------------------------------------------------------
        # Owned systems
        # -------------------------------------------------------
        self.loader = ConfigManager(self.sound)
        self.schema = ConfigSchema()
        self.watcher = ConfigWatcher(config_path, stat)
        self.resources = ResourceManager()
        self.events = EventManager(self.sound)
        self.collisions = CollisionManager()
        self.stats = SessionStats()

        # -------------------------------------------------------
        # World state
        # -------------------------------------------------------
        self.running = False
        self.paused = False
        self.target_fps = 0
        self.width = 0
        self.height = 0
        self.profile = ""
        self.player = Player()
        self.obstacles: List[Rect] = []
        self.ascii_player = ""
        self.ascii_obstacle = ""
        self.config: Optional[Configuration] = None
        self.status = EngineStatus.UNINITIALIZED

    # ===========================================================
    # Stats Accessors
    # ===========================================================
    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def level(self) -> int:
        return self.stats.level

    @property
    def high_score(self) -> int:
        return self.stats.high_score

    @high_score.setter
    def high_score(self, value: int):
        self.stats.high_score = value

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def start(self):
        """Reset the run, load and apply configuration, restore the high score."""
        DebugLogger.section("Starting Engine")

        self.running = True
        self.paused = False
        self.target_fps = self.requested_fps
        self.stats.reset()

        cfg = self.loader.load(self.config_path)
        self.profile = cfg.profile
        self._apply_world(cfg)
        if not self.schema.validate(cfg):
            self.sound.play(Audio.CONFIG_CATEGORY, Audio.INVALID_PRIORITY, "invalid; defaults")
            cfg = self._apply_safe_defaults(cfg)
        DebugLogger.init_entry("Configuration")
        DebugLogger.init_sub(f"Grid {self.width}x{self.height}, {len(cfg.obstacles)} obstacles")

        # Cached glyphs; explicit config sprites win
        self.resources.load(Sprites.PLAYER_KEY, Sprites.PLAYER_GLYPH)
        self.resources.load(Sprites.OBSTACLE_KEY, Sprites.OBSTACLE_GLYPH)
        self.ascii_player = cfg.sprite_player or self.resources.get(Sprites.PLAYER_KEY)
        self.ascii_obstacle = cfg.sprite_obstacle or self.resources.get(Sprites.OBSTACLE_KEY)
        DebugLogger.init_entry("Resources")

        self.locale.load(cfg.lang)
        routes = self._apply_audio_map(cfg.audio_map)
        DebugLogger.init_entry("Audio Routes")
        DebugLogger.init_sub(f"{routes} routes from config")

        self.sound.play("system", 1, "start")
        self.events.emit("start", "")

        self.stats.restore_high_score(self.settings.load())
        self.watcher.prime()
        self.config = cfg
        self.status = EngineStatus.RUNNING

        self.display.announce(self.locale.get("start_label"))
        self.display.announce(f"{self.locale.get('version_label')} {__version__}")
        self.display.announce(self.player.describe())

    def stop(self):
        """Ask the loop to finish after the current tick."""
        self.running = False
        DebugLogger.action("Stop requested")

    def toggle_pause(self):
        self.paused = not self.paused
        self.status = EngineStatus.PAUSED if self.paused else EngineStatus.RUNNING
        DebugLogger.state(f"Engine {self.status.value}")

    def shutdown(self):
        """Release cached resources, persist the high score and close the run."""
        self.resources.release(Sprites.PLAYER_KEY)
        self.resources.release(Sprites.OBSTACLE_KEY)
        self.settings.save(self.high_score)
        self.running = False
        self.status = EngineStatus.STOPPED
        self.display.announce(self.locale.get("end_label"))
        DebugLogger.system(f"Run finished after {self.stats.ticks} ticks")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """
        Start, run a fixed number of ticks, then shut down.

        The loop bound is ``tick_count``; clearing ``running`` (quit key)
        ends it early.
        """
        self.start()
        clock = self.clock or pygame.time.Clock()

        DebugLogger.section("Tick Loop")
        for _ in range(self.tick_count):
            if not self.running:
                break
            dt = 1.0 / self.target_fps if self.target_fps > 0 else 0.0
            self.tick(dt)
            clock.tick(self.target_fps)

        self.shutdown()

    def tick(self, dt: float):
        """One loop iteration: input → update → reload check → draw."""
        self.handle_input()
        self.update(dt)
        self.input.consume()
        self.check_reload()
        self.draw()
        self.stats.add_tick()

    def handle_input(self):
        """Sample the input source and handle system keys (pause, quit)."""
        action = self.input.update()
        if action == "quit":
            self.stop()
        elif action == "pause":
            self.toggle_pause()

    def update(self, dt: float):
        """
        Move the player and score the first obstacle it overlaps.

        Does nothing while paused. At most one collision is scored per call,
        even if several obstacles overlap the player.
        """
        if self.paused:
            return

        direction = self.input.move()
        if direction.length_squared() > 0:
            self.player.move(direction.x * Physics.MOVE_STEP, direction.y * Physics.MOVE_STEP)

        hit = self.collisions.first_hit(self.player.get_rect(), self.obstacles)
        if hit is not None:
            self.stats.add_score(1)
            self.stats.add_collision()
            self.events.emit("collision", "player")

    # ===========================================================
    # Hot Reload
    # ===========================================================
    def check_reload(self) -> bool:
        """
        Reload the config if its file changed since the last check.

        Reload problems never stop the loop; they fall back to safe values.

        Returns:
            True if a reload was attempted.
        """
        if not self.watcher.changed():
            return False

        try:
            self._reload()
        except Exception as e:
            DebugLogger.fail(f"Reload failed: {e}", category="reload")
            self.sound.play(Audio.CONFIG_CATEGORY, Audio.INVALID_PRIORITY, "reload failed; defaults")
            self.config = self._apply_safe_defaults(self.config or Configuration())
        return True

    def _reload(self):
        cfg = self.loader.load(self.config_path)
        previous = self.config or Configuration()
        changed = cfg.diff(previous)
        DebugLogger.system(f"Config changed: {', '.join(changed) or 'nothing'}", category="reload")

        if "width" in changed or "height" in changed:
            self.width, self.height = cfg.width, cfg.height
        if "start_x" in changed or "start_y" in changed:
            self.player.place(cfg.start_x, cfg.start_y)
        if "obstacles" in changed:
            self._set_obstacles(cfg.obstacles)
        if "lang" in changed:
            self.locale.load(cfg.lang)
        self.profile = cfg.profile

        if not self.schema.validate(cfg):
            self.sound.play(Audio.CONFIG_CATEGORY, Audio.INVALID_PRIORITY, "invalid reload; defaults")
            cfg = self._apply_safe_defaults(cfg)

        if cfg.sprite_player:
            self.ascii_player = cfg.sprite_player
        if cfg.sprite_obstacle:
            self.ascii_obstacle = cfg.sprite_obstacle

        self._apply_audio_map(cfg.audio_map)
        self.sound.play(Audio.CONFIG_CATEGORY, Audio.RELOAD_PRIORITY, "reload")
        self.config = cfg

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self) -> str:
        """Render the grid and status line, present it, and return it."""
        w = self.width if self.width > 0 else Display.DEFAULT_WIDTH
        h = self.height if self.height > 0 else Display.DEFAULT_HEIGHT
        rows = [[Display.EMPTY_CELL] * w for _ in range(h)]

        obstacle_glyph = self.ascii_obstacle[0] if self.ascii_obstacle else Sprites.OBSTACLE_GLYPH
        for obstacle in self.obstacles:
            ox, oy = int(obstacle.x), int(obstacle.y)
            if 0 <= ox < w and 0 <= oy < h:
                rows[oy][ox] = obstacle_glyph

        px, py = int(self.player.x), int(self.player.y)
        if 0 <= px < w and 0 <= py < h:
            rows[py][px] = self.ascii_player[0] if self.ascii_player else Sprites.PLAYER_GLYPH

        frame = "".join("".join(row) + "\n" for row in rows)
        frame += self.stats.status_line() + "\n"
        self.display.present(frame)
        return frame

    # ===========================================================
    # Configuration Helpers
    # ===========================================================
    def _apply_world(self, cfg: Configuration):
        """Copy size, start position and obstacles from ``cfg``."""
        self.width, self.height = cfg.width, cfg.height
        self.player.place(cfg.start_x, cfg.start_y)
        self._set_obstacles(cfg.obstacles)

    def _set_obstacles(self, obstacles):
        """Replace the obstacle list; the fixed obstacle always comes last."""
        self.obstacles = list(obstacles)
        self.obstacles.append(Rect.unit(*Sprites.FIXED_OBSTACLE))

    def _apply_safe_defaults(self, cfg: Configuration) -> Configuration:
        """
        Reset grid size and player start to hard-coded safe values.

        Returns:
            ``cfg`` with those fields replaced, i.e. what is now in effect.
        """
        self.width, self.height = Display.DEFAULT_WIDTH, Display.DEFAULT_HEIGHT
        self.player.place(ConfigDefaults.START_X, ConfigDefaults.START_Y)
        DebugLogger.warn("Safe defaults applied", category="config")
        return replace(
            cfg,
            width=Display.DEFAULT_WIDTH,
            height=Display.DEFAULT_HEIGHT,
            start_x=ConfigDefaults.START_X,
            start_y=ConfigDefaults.START_Y,
        )

    def _apply_audio_map(self, raw: str) -> int:
        if not raw:
            return 0
        return self.events.apply_routes(parse_audio_map(raw))
