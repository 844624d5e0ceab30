"""Simulation engine: headless tick driver and Parquet trace persistence."""

from salmon_run.simulation.engine import run_level
from salmon_run.simulation.persistence import flush_trace_columns

__all__ = [
    "flush_trace_columns",
    "run_level",
]
