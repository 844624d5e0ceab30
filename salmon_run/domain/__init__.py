"""Domain layer: grid vocabulary, levels and typed snapshots.

The interpreter lives in :mod:`salmon_run.domain.grid`; it is not
re-exported here because it depends on the language package, which in
turn depends on this package's grid vocabulary.
"""

from salmon_run.domain.grid_types import DIR_DELTA, Coords, Direction, Tile
from salmon_run.domain.level import Level, empty_tile_map
from salmon_run.domain.snapshot import AgentState, Snapshot

__all__ = [
    "AgentState",
    "Coords",
    "DIR_DELTA",
    "Direction",
    "Level",
    "Snapshot",
    "Tile",
    "empty_tile_map",
]
