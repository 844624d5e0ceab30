"""Configuration and result dataclasses for headless runs."""

from __future__ import annotations

from dataclasses import dataclass

from salmon_run.config.constants import DEFAULT_MAX_TICKS

__all__ = [
    "RunConfig",
    "RunResult",
]


@dataclass(frozen=True)
class RunResult:
    """Outcome of driving one level to completion or to the tick cap."""

    level_number: int
    completed: bool
    ticks: int
    remaining_agents: int


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for the headless tick driver."""

    max_ticks: int = DEFAULT_MAX_TICKS
    record_trace: bool = True

    def __post_init__(self) -> None:
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
