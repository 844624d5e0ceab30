"""Level value type: static tile map plus salmon start positions."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from salmon_run.config.constants import GRID_HEIGHT, GRID_WIDTH
from salmon_run.domain.grid_types import Coords, Tile


def empty_tile_map() -> np.ndarray:
    """Return a fresh ``(GRID_HEIGHT, GRID_WIDTH)`` map filled with Empty."""
    return np.full((GRID_HEIGHT, GRID_WIDTH), Tile.EMPTY.value, dtype=np.uint8)


@dataclass(eq=False)
class Level:
    """One puzzle: tile map indexed ``[y, x]`` and ordered start coordinates."""

    number: int
    tiles: np.ndarray = field(default_factory=empty_tile_map)
    starts: tuple[Coords, ...] = ()

    def __post_init__(self) -> None:
        if self.tiles.shape != (GRID_HEIGHT, GRID_WIDTH):
            raise ValueError(
                f"tile map must have shape {(GRID_HEIGHT, GRID_WIDTH)}, got {self.tiles.shape}"
            )

    def tile_at(self, coords: Coords) -> Tile:
        return Tile(int(self.tiles[coords.y, coords.x]))

    def set_tile(self, coords: Coords, tile: Tile) -> None:
        self.tiles[coords.y, coords.x] = tile.value
