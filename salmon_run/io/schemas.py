"""Parquet schema definitions for run artifacts.

Every module that writes or reads trace and summary logs works against
these column contracts.
"""

from __future__ import annotations

import pyarrow as pa

TRACE_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("level", pa.int64()),
        ("tick", pa.int64()),
        ("agent_id", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("pc", pa.int64()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("level", pa.int64()),
        ("program_length", pa.int64()),
        ("completed", pa.bool_()),
        ("ticks", pa.int64()),
        ("remaining_agents", pa.int64()),
    ]
)
