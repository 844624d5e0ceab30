"""Language front-end: parser, statement tree, bytecode and compiler."""

from salmon_run.lang.ast import Condition, If, Loop, Move, Node, TileCheck
from salmon_run.lang.compiler import compile_program, flatten
from salmon_run.lang.instructions import (
    BranchIfNot,
    Goto,
    Instruction,
    MoveOp,
    Program,
    format_program,
    jump_targets,
)
from salmon_run.lang.parser import ProgramSyntaxError, parse_program

__all__ = [
    "BranchIfNot",
    "Condition",
    "Goto",
    "If",
    "Instruction",
    "Loop",
    "Move",
    "MoveOp",
    "Node",
    "Program",
    "ProgramSyntaxError",
    "TileCheck",
    "compile_program",
    "flatten",
    "format_program",
    "jump_targets",
    "parse_program",
]
