"""Lower a statement tree to address-resolved bytecode.

Addresses are assigned in one left-to-right pass by threading a running
address counter ``loc`` through the recursion; no labels are emitted and
nothing is back-patched. Every node advances ``loc`` by one, plus the
length of any nested body:

- ``Move``  occupies one slot.
- ``Loop``  places its body at ``loc`` and appends ``Goto(loc)``.
- ``If``    reserves ``loc`` for ``BranchIfNot`` and places the body at
  ``loc + 1``; the branch skips to ``loc + len(body) + 1``.
"""

from __future__ import annotations

from collections.abc import Sequence

from salmon_run.lang.ast import If, Loop, Move, Node
from salmon_run.lang.instructions import BranchIfNot, Goto, Instruction, MoveOp, Program
from salmon_run.lang.parser import parse_program


def flatten(start: int, nodes: Sequence[Node]) -> tuple[int, list[Instruction]]:
    """Flatten *nodes* as if the first emitted instruction sits at *start*.

    Returns ``(length, instructions)`` where ``length == len(instructions)``.
    """
    loc = start
    instructions: list[Instruction] = []
    for node in nodes:
        if isinstance(node, Move):
            instructions.append(MoveOp(node.direction))
        elif isinstance(node, Loop):
            length, body = flatten(loc, node.body)
            instructions.extend(body)
            instructions.append(Goto(loc))
            loc += length
        elif isinstance(node, If):
            length, body = flatten(loc + 1, node.body)
            instructions.append(BranchIfNot(node.condition, dest=loc + length + 1))
            instructions.extend(body)
            loc += length
        else:
            raise TypeError(f"unknown statement node: {node!r}")
        loc += 1
    return loc - start, instructions


def compile_program(source: str) -> Program:
    """Parse and flatten *source* into a ``Program``.

    An empty program compiles to ``()``; callers decide whether it is
    usable. Raises :exc:`ProgramSyntaxError` when *source* does not parse.
    """
    _, instructions = flatten(0, parse_program(source))
    return tuple(instructions)
