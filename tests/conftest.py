from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from salmon_run.domain.grid_types import Coords, Tile
from salmon_run.domain.level import Level

LevelFactory = Callable[..., Level]


@pytest.fixture
def make_level() -> LevelFactory:
    """Build a level from (x, y) lists; every other tile is Empty."""

    def _make(
        starts: Iterable[tuple[int, int]] = (),
        rocks: Iterable[tuple[int, int]] = (),
        finishes: Iterable[tuple[int, int]] = (),
        number: int = 1,
    ) -> Level:
        level = Level(number=number, starts=tuple(Coords(x, y) for x, y in starts))
        for x, y in rocks:
            level.set_tile(Coords(x, y), Tile.ROCK)
        for x, y in finishes:
            level.set_tile(Coords(x, y), Tile.FINISH)
        return level

    return _make
