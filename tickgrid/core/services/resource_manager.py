"""
resource_manager.py
-------------------
Reference-counted store for named text resources (sprite glyphs).

Responsibilities
----------------
- Keep the first content loaded under a name; later loads only add a holder.
- Evict content and count together once the last holder releases.
- Never fail on lookups or releases of unknown names.
"""

from typing import Dict

from tickgrid.core.debug.debug_logger import DebugLogger


class ResourceManager:
    """Ref-counted name -> content cache owned by a single engine."""

    def __init__(self):
        self._content: Dict[str, str] = {}
        self._refs: Dict[str, int] = {}

    # ===========================================================
    # Lifetime
    # ===========================================================

    def load(self, name: str, content: str) -> None:
        """
        Acquire a reference to ``name``.

        The first load stores ``content``. Loading a name that is already
        cached only increments its count; the new content is ignored.
        """
        if name not in self._refs:
            self._refs[name] = 1
            self._content[name] = content
            DebugLogger.state(f"Loaded '{name}'", category="resource")
        else:
            self._refs[name] += 1
            DebugLogger.trace(f"Retained '{name}' (refs={self._refs[name]})", category="resource")

    def release(self, name: str) -> None:
        """Drop one reference; evict when none remain. Unknown names are ignored."""
        if name not in self._refs:
            return
        self._refs[name] -= 1
        if self._refs[name] <= 0:
            del self._refs[name]
            self._content.pop(name, None)
            DebugLogger.state(f"Evicted '{name}'", category="resource")

    # ===========================================================
    # Queries
    # ===========================================================

    def get(self, name: str) -> str:
        """Return cached content, or an empty string when absent."""
        return self._content.get(name, "")

    def ref_count(self, name: str) -> int:
        return self._refs.get(name, 0)

    def __contains__(self, name: str) -> bool:
        return name in self._content

    def __len__(self) -> int:
        return len(self._content)
