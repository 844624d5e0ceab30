"""Centralized game constants.

Board dimensions, level-file characters and runner defaults live here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 10
"""Board width in columns."""

GRID_HEIGHT = 20
"""Board height in rows."""

DEFAULT_SOURCE = "move left;\nmove right;\n"
"""Source text shown in the editor when a session starts."""

TICK_INTERVAL_MS = 1000
"""Interval between ticks for a UI-driven run, in milliseconds."""

DEFAULT_MAX_TICKS = 500
"""Tick cap for headless runs; programs may loop forever."""

FLUSH_THRESHOLD = 8_192
"""Flush trace rows to Parquet once this in-memory row count is reached."""

MAX_NESTING_DEPTH = 64
"""Deepest block nesting the parser accepts; deeper source is a syntax error."""

LEVEL_CHAR_EMPTY = "e"
LEVEL_CHAR_ROCK = "r"
LEVEL_CHAR_FINISH = "f"
LEVEL_CHAR_START = "s"
"""Level-file cell characters. A start cell is an Empty tile holding a salmon."""

LEVEL_FILE_GLOB = "level*.txt"
"""Filename pattern matched when loading a levels directory."""
