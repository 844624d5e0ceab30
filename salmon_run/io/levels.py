"""Level-file reader.

A level file holds ``GRID_HEIGHT`` lines of exactly ``GRID_WIDTH`` cell
characters, each terminated by a newline, followed by the level number::

    eeeeeeeeee
    esrrrrrrre
    ...
    3

Cells: ``e`` Empty, ``r`` Rock, ``f`` Finish, ``s`` a salmon start on an
Empty tile. Starts are ordered row by row, left to right.
"""

from __future__ import annotations

import logging
from pathlib import Path

from salmon_run.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    LEVEL_CHAR_START,
    LEVEL_FILE_GLOB,
)
from salmon_run.domain.grid_types import Coords, Tile
from salmon_run.domain.level import Level, empty_tile_map

logger = logging.getLogger(__name__)


class LevelFormatError(ValueError):
    """Level text does not follow the fixed-grid file format."""


def parse_level(text: str) -> Level:
    """Parse level-file *text* into a :class:`Level`."""
    text = text.replace("\r\n", "\n")
    row_len = GRID_WIDTH + 1
    grid_len = GRID_HEIGHT * row_len
    if len(text) < grid_len:
        raise LevelFormatError(f"expected {GRID_HEIGHT} rows of {GRID_WIDTH} cells")

    tiles = empty_tile_map()
    starts: list[Coords] = []
    for y in range(GRID_HEIGHT):
        row = text[y * row_len : (y + 1) * row_len]
        if row[-1] != "\n":
            raise LevelFormatError(f"row {y} must be exactly {GRID_WIDTH} cells wide")
        for x, char in enumerate(row[:-1]):
            if char == LEVEL_CHAR_START:
                starts.append(Coords(x, y))
                continue
            tile = Tile.from_level_char(char)
            if tile is None:
                raise LevelFormatError(f"unknown cell {char!r} at row {y}, column {x}")
            tiles[y, x] = tile.value

    number_raw = text[grid_len:].strip()
    try:
        number = int(number_raw)
    except ValueError as exc:
        raise LevelFormatError(f"invalid level number: {number_raw!r}") from exc
    if number < 1:
        raise LevelFormatError("level number must be >= 1")

    return Level(number=number, tiles=tiles, starts=tuple(starts))


def load_level_file(path: Path) -> Level:
    return parse_level(Path(path).read_text(encoding="utf-8"))


def load_levels(directory: Path) -> list[Level]:
    """Load every ``level*.txt`` in *directory*, ordered by level number.

    Unreadable or malformed files are skipped with a warning.
    """
    levels: list[Level] = []
    for path in sorted(Path(directory).glob(LEVEL_FILE_GLOB)):
        try:
            levels.append(load_level_file(path))
        except (OSError, LevelFormatError) as exc:
            logger.warning("Skipping level file %s: %s", path, exc)
    levels.sort(key=lambda level: level.number)
    logger.debug("Loaded %d levels from %s", len(levels), directory)
    return levels
