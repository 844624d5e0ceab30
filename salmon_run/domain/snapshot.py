"""Typed domain model for agent state snapshots.

``AgentState`` records one salmon after a tick. Field order matches the
trace log columns: ``(agent_id, x, y, pc)``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AgentState:
    """Immutable snapshot of a single agent at one point in time."""

    agent_id: int
    x: int
    y: int
    pc: int


Snapshot = tuple[AgentState, ...]
"""Ordered tuple of agent states capturing every live agent after one tick."""
