"""Headless tick driver: run one program on one level, optionally logging a trace."""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow.parquet as pq

from salmon_run.config.constants import FLUSH_THRESHOLD
from salmon_run.config.types import RunConfig, RunResult
from salmon_run.domain.grid import Grid
from salmon_run.domain.level import Level
from salmon_run.domain.snapshot import Snapshot
from salmon_run.io.paths import logs_dir, run_summary_path, trace_log_path
from salmon_run.io.schemas import TRACE_SCHEMA_VERSION
from salmon_run.lang.instructions import Program
from salmon_run.simulation.persistence import (
    flush_trace_columns,
    new_trace_columns,
    write_run_summary,
)

logger = logging.getLogger(__name__)


def _append_snapshot(
    trace_columns: dict[str, list[int]], level_number: int, tick: int, snapshot: Snapshot
) -> None:
    for state in snapshot:
        trace_columns["level"].append(level_number)
        trace_columns["tick"].append(tick)
        trace_columns["agent_id"].append(state.agent_id)
        trace_columns["x"].append(state.x)
        trace_columns["y"].append(state.y)
        trace_columns["pc"].append(state.pc)


def run_level(
    level: Level,
    program: Program,
    config: RunConfig | None = None,
    out_dir: Path | None = None,
) -> RunResult:
    """Tick *program* on *level* until every salmon finishes or the cap is hit.

    When *out_dir* is given a one-row summary is written to
    ``logs/run_summary.parquet``; if ``config.record_trace`` is set the
    agent states at tick 0 and after every tick go to
    ``logs/trace_log.parquet``.
    """
    run_config = config or RunConfig()
    grid = Grid.load_level(level, program)

    record = out_dir is not None and run_config.record_trace
    trace_writer: pq.ParquetWriter | None = None
    trace_columns = new_trace_columns()
    if out_dir is not None:
        out_dir = Path(out_dir)
        logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    ticks = 0
    try:
        if record:
            _append_snapshot(trace_columns, level.number, 0, grid.snapshot())
        while not grid.is_complete and ticks < run_config.max_ticks:
            grid.tick()
            ticks += 1
            if record:
                _append_snapshot(trace_columns, level.number, ticks, grid.snapshot())
                if len(trace_columns["tick"]) >= FLUSH_THRESHOLD:
                    trace_writer = flush_trace_columns(
                        trace_columns, trace_log_path(out_dir), trace_writer
                    )
        if record:
            trace_writer = flush_trace_columns(trace_columns, trace_log_path(out_dir), trace_writer)
    finally:
        if trace_writer is not None:
            trace_writer.close()

    result = RunResult(
        level_number=level.number,
        completed=grid.is_complete,
        ticks=ticks,
        remaining_agents=len(grid.agents),
    )
    if result.completed:
        logger.info("Level %d complete after %d ticks", level.number, ticks)
    else:
        logger.info(
            "Level %d stopped at tick cap %d with %d salmon left",
            level.number,
            ticks,
            result.remaining_agents,
        )

    if out_dir is not None:
        write_run_summary(
            {
                "schema_version": TRACE_SCHEMA_VERSION,
                "level": result.level_number,
                "program_length": len(program),
                "completed": result.completed,
                "ticks": result.ticks,
                "remaining_agents": result.remaining_agents,
            },
            run_summary_path(out_dir),
        )
    return result
