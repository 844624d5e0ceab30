"""Primitive grid vocabulary: directions, tiles and board coordinates.

Edge policy: a step that would leave the board is refused. ``in_direction``
returns the original coordinate in that case, so a move never wraps and
never goes negative. The right edge is ``GRID_WIDTH - 1`` and the bottom
edge is ``GRID_HEIGHT - 1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from salmon_run.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    LEVEL_CHAR_EMPTY,
    LEVEL_CHAR_FINISH,
    LEVEL_CHAR_ROCK,
)


class Direction(Enum):
    """One of the four compass steps on the board."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Tile(Enum):
    """Static board cell. Values are the codes stored in the tile map."""

    EMPTY = 0
    ROCK = 1
    FINISH = 2

    @classmethod
    def from_level_char(cls, char: str) -> Tile | None:
        """Map a level-file character to a tile, or None when unknown."""
        return _LEVEL_CHARS.get(char)


_LEVEL_CHARS: dict[str, Tile] = {
    LEVEL_CHAR_EMPTY: Tile.EMPTY,
    LEVEL_CHAR_ROCK: Tile.ROCK,
    LEVEL_CHAR_FINISH: Tile.FINISH,
}

# (dx, dy) per direction; y grows downward.
DIR_DELTA: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Coords:
    """An on-board (x, y) position."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < GRID_WIDTH and 0 <= self.y < GRID_HEIGHT):
            raise ValueError(f"coordinate out of bounds: ({self.x}, {self.y})")

    def in_direction_checked(self, direction: Direction) -> Coords | None:
        """Return the neighbor in *direction*, or None if it is off the board."""
        dx, dy = DIR_DELTA[direction]
        nx, ny = self.x + dx, self.y + dy
        if not (0 <= nx < GRID_WIDTH and 0 <= ny < GRID_HEIGHT):
            return None
        return Coords(nx, ny)

    def in_direction(self, direction: Direction) -> Coords:
        """Return the neighbor in *direction*, staying put at the board edge."""
        neighbor = self.in_direction_checked(direction)
        return self if neighbor is None else neighbor
