"""Program lifecycle for an interactive game session.

Every source edit is recompiled. A compile that yields at least one
instruction becomes the active program and restarts the level; a syntax
error or an empty program only flips the compile status, leaving the last
good program and the running simulation untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from salmon_run.config.constants import DEFAULT_SOURCE, TICK_INTERVAL_MS
from salmon_run.domain.grid import Grid
from salmon_run.domain.grid_types import Direction
from salmon_run.domain.level import Level
from salmon_run.lang.compiler import compile_program
from salmon_run.lang.instructions import MoveOp, Program
from salmon_run.lang.parser import ProgramSyntaxError

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM: Program = (MoveOp(Direction.LEFT), MoveOp(Direction.RIGHT))
"""Compiled form of ``DEFAULT_SOURCE``."""


class CompileStatus(Enum):
    """Result of the most recent compile, for the presentation layer."""

    OK = "ok"
    SYNTAX_ERROR = "syntax_error"
    EMPTY = "empty"


class Session:
    """Level selection, source text, active program and run state.

    ``level`` is a 1-based position in *levels* (sorted by the caller), not
    the number read from a level file; ``current_level.number`` is that.
    ``tick_interval_ms`` is the period a UI timer should call :meth:`tick` at.
    """

    def __init__(self, levels: Sequence[Level]) -> None:
        if not levels:
            raise ValueError("a session needs at least one level")
        self.levels = list(levels)
        self.level = 1
        self.source = DEFAULT_SOURCE
        self.program: Program = DEFAULT_PROGRAM
        self.compile_status = CompileStatus.OK
        self.last_error: ProgramSyntaxError | None = None
        self.running = False
        self.tick_interval_ms = TICK_INTERVAL_MS
        self.grid = Grid.load_level(self.current_level, self.program)

    @property
    def current_level(self) -> Level:
        return self.levels[self.level - 1]

    @property
    def code_is_good(self) -> bool:
        return self.compile_status is CompileStatus.OK

    def restart(self) -> None:
        """Reload the current level with the active program and stop running."""
        self.grid = Grid.load_level(self.current_level, self.program)
        self.running = False

    def edit_source(self, source: str) -> CompileStatus:
        """Replace the source text and recompile it."""
        self.source = source
        try:
            program = compile_program(source)
        except ProgramSyntaxError as exc:
            logger.debug("Source rejected: %s", exc)
            self.last_error = exc
            self.compile_status = CompileStatus.SYNTAX_ERROR
            return self.compile_status

        self.last_error = None
        if not program:
            self.compile_status = CompileStatus.EMPTY
            return self.compile_status

        self.program = program
        self.compile_status = CompileStatus.OK
        self.restart()
        return self.compile_status

    def switch_level(self, number: int) -> None:
        if not 1 <= number <= len(self.levels):
            raise ValueError(f"level must be between 1 and {len(self.levels)}")
        self.level = number
        self.restart()

    def toggle_running(self) -> bool:
        self.running = not self.running
        return self.running

    def tick(self) -> bool:
        """Advance the grid one tick while running.

        Returns True when the level is complete. Completing a level stops
        the run.
        """
        if not self.running:
            return self.grid.is_complete
        complete = self.grid.tick()
        if complete:
            logger.info("Level %d complete", self.current_level.number)
            self.running = False
        return complete
