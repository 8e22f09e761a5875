"""
event_manager.py
----------------
Routes named game events to audio categories.

Events carry no handlers of their own: every emit resolves the event's
(category, priority) route and forwards the payload to the audio sink.
Events without an explicit route fall back to ("events", 5).
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol

from tickgrid.core.debug.debug_logger import DebugLogger
from tickgrid.core.runtime.game_settings import Audio


# ===========================================================
# Sink Contract
# ===========================================================

class AudioSink(Protocol):
    """Receives routed sounds. Must not raise."""

    def play(self, category: str, priority: int, message: str) -> None: ...


# ===========================================================
# Route Definitions
# ===========================================================

@dataclass(frozen=True)
class AudioRoute:
    """Audio category and priority an event is played with."""
    category: str = Audio.DEFAULT_CATEGORY
    priority: int = Audio.DEFAULT_PRIORITY


DEFAULT_ROUTE = AudioRoute()


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Event -> audio routing table with an observational subscriber list."""

    def __init__(self, sink: AudioSink):
        self.sink = sink
        self._routes: Dict[str, AudioRoute] = {}
        self._subscribers: Dict[str, List[str]] = {}

    # ===========================================================
    # Routing
    # ===========================================================

    def set_audio(self, event: str, category: str, priority: int) -> None:
        """Create or replace the route for ``event``."""
        self._routes[event] = AudioRoute(category, priority)
        DebugLogger.system(
            f"Route '{event}' -> {category} (prio={priority})",
            category="event"
        )

    def apply_routes(self, routes: Iterable) -> int:
        """
        Upsert routes from decoded audio-map entries.

        Args:
            routes: Objects with ``event``, ``category`` and ``priority``.

        Returns:
            Number of routes applied.
        """
        count = 0
        for route in routes:
            self.set_audio(route.event, route.category, route.priority)
            count += 1
        return count

    def resolve(self, event: str) -> AudioRoute:
        """Route for ``event``, or the default route when none is set."""
        return self._routes.get(event, DEFAULT_ROUTE)

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event: str, name: str) -> None:
        """
        Record interest in an event.

        Subscribers are kept for observability only; dispatch goes to the
        audio sink regardless of who subscribed.
        """
        names = self._subscribers.setdefault(event, [])
        if name in names:
            return
        names.append(name)
        DebugLogger.system(f"Subscribed '{name}' to '{event}'", category="event")

    def get_subscriber_count(self, event: Optional[str] = None) -> int:
        """Subscribers of one event, or of all events when ``event`` is None."""
        if event is not None:
            return len(self._subscribers.get(event, []))
        return sum(len(names) for names in self._subscribers.values())

    # ===========================================================
    # Dispatch
    # ===========================================================

    def emit(self, event: str, payload: str = "") -> AudioRoute:
        """
        Play ``payload`` through the route resolved for ``event``.

        Returns:
            The route that was used.
        """
        route = self.resolve(event)
        DebugLogger.trace(f"Emit '{event}' via {route.category}", category="event")
        self.sink.play(route.category, route.priority, payload)
        return route

    def clear(self) -> None:
        """Forget all routes and subscribers."""
        self._routes.clear()
        self._subscribers.clear()
