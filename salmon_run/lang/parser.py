"""Recursive-descent parser for salmon programs.

Grammar::

    program    := WS* (statement WS*)* EOF
    statement  := move_stmt | loop_stmt | if_stmt
    move_stmt  := "move " direction WS* ";"
    loop_stmt  := "loop" WS* block
    if_stmt    := "if " direction WS+ tile WS* block
    block      := "{" WS* (statement WS*)* "}"
    direction  := "up" | "down" | "left" | "right"
    tile       := "rock" | "empty" | "finish"

``move`` and ``if`` are matched together with exactly one trailing space,
so ``move  up;`` is rejected. A ``}`` with no open block, or end of input
inside a block, is a syntax error, as is nesting blocks deeper than
``MAX_NESTING_DEPTH``.
"""

from __future__ import annotations

from typing import TypeVar

from salmon_run.config.constants import MAX_NESTING_DEPTH
from salmon_run.domain.grid_types import Direction, Tile
from salmon_run.lang.ast import If, Loop, Move, Node, TileCheck

_T = TypeVar("_T")

DIRECTION_WORDS: dict[str, Direction] = {d.value: d for d in Direction}

TILE_WORDS: dict[str, Tile] = {
    "rock": Tile.ROCK,
    "empty": Tile.EMPTY,
    "finish": Tile.FINISH,
}


class ProgramSyntaxError(ValueError):
    """Source text could not be parsed.

    ``position`` is the offset where parsing stopped; ``remainder`` is the
    unconsumed text from that offset.
    """

    def __init__(self, message: str, source: str, position: int) -> None:
        self.source = source
        self.position = position
        self.reason = message
        snippet = self.remainder[:20]
        super().__init__(f"{message} at line {self.line}, column {self.column}: {snippet!r}")

    @property
    def remainder(self) -> str:
        return self.source[self.position :]

    @property
    def line(self) -> int:
        return self.source.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.source.rfind("\n", 0, self.position) + 1) + 1


class _Parser:
    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.depth = 0

    def error(self, message: str) -> ProgramSyntaxError:
        return ProgramSyntaxError(message, self.source, self.pos)

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek_is(self, text: str) -> bool:
        return self.source.startswith(text, self.pos)

    def skip_ws(self) -> int:
        start = self.pos
        while not self.at_end() and self.source[self.pos].isspace():
            self.pos += 1
        return self.pos - start

    def expect(self, text: str) -> None:
        if not self.peek_is(text):
            raise self.error(f"expected {text!r}")
        self.pos += len(text)

    def expect_word(self, words: dict[str, _T], what: str) -> _T:
        for word, value in words.items():
            if self.peek_is(word):
                self.pos += len(word)
                return value
        raise self.error(f"expected {what}")

    def parse_program(self) -> tuple[Node, ...]:
        statements = self.parse_sequence()
        if not self.at_end():
            # parse_sequence only stops early on a closing brace
            raise self.error("unmatched '}'")
        return statements

    def parse_sequence(self) -> tuple[Node, ...]:
        statements: list[Node] = []
        self.skip_ws()
        while not self.at_end() and not self.peek_is("}"):
            statements.append(self.parse_statement())
            self.skip_ws()
        return tuple(statements)

    def parse_statement(self) -> Node:
        if self.peek_is("move "):
            self.pos += len("move ")
            direction = self.expect_word(DIRECTION_WORDS, "direction")
            self.skip_ws()
            self.expect(";")
            return Move(direction)
        if self.peek_is("loop"):
            self.pos += len("loop")
            self.skip_ws()
            return Loop(self.parse_block())
        if self.peek_is("if "):
            self.pos += len("if ")
            direction = self.expect_word(DIRECTION_WORDS, "direction")
            if self.skip_ws() == 0:
                raise self.error("expected whitespace before tile")
            tile = self.expect_word(TILE_WORDS, "tile")
            self.skip_ws()
            return If(TileCheck(direction, tile), self.parse_block())
        raise self.error("expected statement")

    def parse_block(self) -> tuple[Node, ...]:
        if self.depth >= MAX_NESTING_DEPTH:
            raise self.error(f"blocks nested deeper than {MAX_NESTING_DEPTH}")
        self.expect("{")
        self.depth += 1
        body = self.parse_sequence()
        if self.at_end():
            raise self.error("unterminated block")
        self.expect("}")
        self.depth -= 1
        return body


def parse_program(source: str) -> tuple[Node, ...]:
    """Parse *source* into a statement tree.

    Returns an empty tuple for empty or whitespace-only input. Raises
    :exc:`ProgramSyntaxError` on any malformed input.
    """
    return _Parser(source).parse_program()
