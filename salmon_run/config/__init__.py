"""Configuration layer: constants and typed config dataclasses."""

from salmon_run.config.constants import (
    DEFAULT_MAX_TICKS,
    DEFAULT_SOURCE,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_NESTING_DEPTH,
    TICK_INTERVAL_MS,
)
from salmon_run.config.types import RunConfig, RunResult

__all__ = [
    "DEFAULT_MAX_TICKS",
    "DEFAULT_SOURCE",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MAX_NESTING_DEPTH",
    "RunConfig",
    "RunResult",
    "TICK_INTERVAL_MS",
]
