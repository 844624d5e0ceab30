"""Flat bytecode executed by the grid interpreter.

Addresses are zero-based indices into a ``Program``. ``Goto`` and a taken
``BranchIfNot`` set the program counter directly; every other dispatch
advances it by one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from salmon_run.domain.grid_types import Direction
from salmon_run.lang.ast import Condition


@dataclass(frozen=True)
class MoveOp:
    direction: Direction


@dataclass(frozen=True)
class Goto:
    address: int


@dataclass(frozen=True)
class BranchIfNot:
    """Jump to ``dest`` when ``condition`` is false, else fall into the body."""

    condition: Condition
    dest: int


Instruction = Union[MoveOp, Goto, BranchIfNot]

Program = tuple[Instruction, ...]
"""Immutable compiled program shared by every agent on the grid."""


def jump_targets(program: Program) -> list[int]:
    """Return every address a ``Goto`` or ``BranchIfNot`` can jump to."""
    targets: list[int] = []
    for instruction in program:
        if isinstance(instruction, Goto):
            targets.append(instruction.address)
        elif isinstance(instruction, BranchIfNot):
            targets.append(instruction.dest)
    return targets


def format_instruction(instruction: Instruction) -> str:
    if isinstance(instruction, MoveOp):
        return f"move {instruction.direction.value}"
    if isinstance(instruction, Goto):
        return f"goto {instruction.address}"
    cond = instruction.condition
    return (
        f"branch_if_not {cond.direction.value} {cond.tile.name.lower()} -> {instruction.dest}"
    )


def format_program(program: Program) -> list[str]:
    """Render a numbered, one-instruction-per-line listing."""
    width = len(str(max(len(program) - 1, 0)))
    return [f"{addr:>{width}}  {format_instruction(ins)}" for addr, ins in enumerate(program)]
