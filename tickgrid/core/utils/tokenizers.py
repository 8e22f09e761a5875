"""
tokenizers.py
-------------
Small text decoders shared by the config and locale loaders.

Each decoder turns raw text into structured records and silently drops
malformed pieces, so one bad token never spoils the rest of a line or file.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from tickgrid.core.debug.debug_logger import DebugLogger


DEFAULT_AUDIO_PRIORITY = 5

_HSPACE = " \t"
_TRAILING = " \t\r\n"
_NUMBER_CHARS = "0123456789-"


# ===========================================================
# Records
# ===========================================================

@dataclass(frozen=True)
class KeyValue:
    """One ``key = value`` assignment and the line it came from."""
    key: str
    value: str
    line_no: int


@dataclass(frozen=True)
class AudioRouteSpec:
    """One decoded ``event:category[:priority]`` triple."""
    event: str
    category: str
    priority: int = DEFAULT_AUDIO_PRIORITY


# ===========================================================
# Key/Value Lines
# ===========================================================

def trim(text: str) -> str:
    """Strip spaces/tabs on the left and spaces/tabs/CR/LF on the right."""
    return text.lstrip(_HSPACE).rstrip(_TRAILING)


def strip_comment(line: str) -> str:
    """Drop everything from the first ``#`` onward."""
    hash_pos = line.find("#")
    return line if hash_pos < 0 else line[:hash_pos]


def iter_key_values(lines: Iterable[str]) -> Iterator[KeyValue]:
    """
    Yield assignments from a line-oriented ``key = value`` document.

    Blank and comment-only lines are skipped, as are lines without ``=``
    or with an empty key. Only the first ``=`` splits; the value keeps any
    later ones.
    """
    for line_no, raw in enumerate(lines, start=1):
        line = trim(strip_comment(raw))
        if not line:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            DebugLogger.trace(f"Line {line_no}: no '=' found, skipped", category="config")
            continue
        key = trim(key)
        if not key:
            continue
        yield KeyValue(key, trim(value), line_no)


def parse_int(text: str) -> Optional[int]:
    """
    Parse a signed decimal integer; None if the text is not one.

    Only ASCII digits and ``-`` are accepted, the same characters
    ``scan_integers`` collects.
    """
    token = trim(text)
    if not token or any(ch not in _NUMBER_CHARS for ch in token):
        return None
    try:
        return int(token)
    except ValueError:
        return None


# ===========================================================
# Obstacle Lists
# ===========================================================

def scan_integers(text: str) -> List[int]:
    """
    Collect integers from runs of digits and ``-``.

    Any other character ends the current run. Runs that are not a valid
    integer on their own (``-``, ``3-4``) are dropped.
    """
    numbers = []
    run = []

    def flush():
        if not run:
            return
        token = "".join(run)
        run.clear()
        try:
            numbers.append(int(token))
        except ValueError:
            DebugLogger.warn(f"Dropped malformed number '{token}'", category="config")

    for ch in text:
        if ch in _NUMBER_CHARS:
            run.append(ch)
        else:
            flush()
    flush()
    return numbers


def parse_obstacle_pairs(text: str) -> List[Tuple[int, int]]:
    """
    Pair integers consecutively into (x, y) cells.

    A trailing unpaired integer is discarded.
    """
    numbers = scan_integers(text)
    return [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]


# ===========================================================
# Audio Map
# ===========================================================

def parse_audio_map(text: str) -> List[AudioRouteSpec]:
    """
    Decode ``event:category[:priority]`` entries separated by ``;``.

    Entries with fewer than two parts are dropped. A missing or empty
    priority means the default; a priority that is not an integer drops
    the whole entry.
    """
    routes = []
    for entry in text.split(";"):
        if not entry:
            continue
        parts = entry.split(":")
        if len(parts) < 2:
            DebugLogger.warn(f"Dropped audio route '{entry}': expected event:category", category="config")
            continue

        event, category = parts[0], parts[1]
        priority = DEFAULT_AUDIO_PRIORITY
        if len(parts) >= 3 and parts[2].strip():
            priority = parse_int(parts[2])
            if priority is None:
                DebugLogger.warn(f"Dropped audio route '{entry}': bad priority", category="config")
                continue

        routes.append(AudioRouteSpec(event, category, priority))
    return routes
