"""Statement tree produced by the parser and consumed by the compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from salmon_run.domain.grid_types import Direction, Tile


@dataclass(frozen=True)
class TileCheck:
    """Holds when the tile next to the agent in ``direction`` equals ``tile``."""

    direction: Direction
    tile: Tile


Condition = TileCheck


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Loop:
    """Repeat ``body`` forever; only reaching a Finish tile ends it."""

    body: tuple[Node, ...]


@dataclass(frozen=True)
class If:
    """Run ``body`` only when ``condition`` holds, otherwise skip it."""

    condition: Condition
    body: tuple[Node, ...]


Node = Union[Move, Loop, If]
