"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def trace_log_path(out_dir: Path) -> Path:
    """Return path to the per-tick trace Parquet file."""
    return logs_dir(out_dir) / "trace_log.parquet"


def run_summary_path(out_dir: Path) -> Path:
    """Return path to the run summary Parquet file."""
    return logs_dir(out_dir) / "run_summary.parquet"
