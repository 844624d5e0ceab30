"""Tests for salmon_run.domain.grid module."""

from __future__ import annotations

import pytest

from salmon_run.config.constants import GRID_HEIGHT, GRID_WIDTH
from salmon_run.domain.grid import Grid
from salmon_run.domain.grid_types import Coords, Direction, Tile
from salmon_run.lang.ast import TileCheck
from salmon_run.lang.compiler import compile_program
from salmon_run.lang.instructions import BranchIfNot, Goto, MoveOp


class TestLoadLevel:
    def test_agents_start_at_level_starts_with_pc_zero(self, make_level) -> None:
        level = make_level(starts=[(1, 2), (3, 4)])
        grid = Grid.load_level(level, (MoveOp(Direction.UP),))
        assert [a.coords for a in grid.agents] == [Coords(1, 2), Coords(3, 4)]
        assert [a.pc for a in grid.agents] == [0, 0]
        assert [a.agent_id for a in grid.agents] == [0, 1]

    def test_empty_program_rejected(self, make_level) -> None:
        with pytest.raises(ValueError):
            Grid.load_level(make_level(starts=[(0, 0)]), ())

    @pytest.mark.parametrize(
        "program",
        [
            (MoveOp(Direction.UP), Goto(5)),
            (Goto(-1),),
            (BranchIfNot(TileCheck(Direction.UP, Tile.ROCK), dest=3), MoveOp(Direction.UP)),
        ],
    )
    def test_out_of_range_jump_rejected(self, make_level, program) -> None:
        with pytest.raises(ValueError, match="jumps outside"):
            Grid.load_level(make_level(starts=[(0, 0)]), program)

    def test_trailing_branch_to_program_end_accepted(self, make_level) -> None:
        program = compile_program("move up; if up rock { move down; }")
        assert program[1] == BranchIfNot(TileCheck(Direction.UP, Tile.ROCK), dest=3)
        grid = Grid.load_level(make_level(starts=[(0, 5)]), program)
        assert grid.program == program

    def test_tile_map_is_copied(self, make_level) -> None:
        level = make_level(starts=[(0, 0)])
        grid = Grid.load_level(level, (MoveOp(Direction.RIGHT),))
        level.set_tile(Coords(1, 0), Tile.ROCK)
        grid.tick()
        assert grid.agents[0].coords == Coords(1, 0)


class TestMove:
    def test_end_to_end_two_moves_reach_finish(self, make_level) -> None:
        level = make_level(starts=[(0, 0)], finishes=[(2, 0)])
        grid = Grid.load_level(level, compile_program("move right; move right;"))
        assert grid.tick() is False
        assert grid.agents[0].coords == Coords(1, 0)
        assert grid.tick() is True
        assert grid.agents == []

    def test_rock_blocks_but_pc_advances(self, make_level) -> None:
        level = make_level(starts=[(0, 0)], rocks=[(1, 0)])
        grid = Grid.load_level(level, compile_program("move right; move right;"))
        pcs = []
        for _ in range(5):
            grid.tick()
            pcs.append(grid.agents[0].pc)
            assert grid.agents[0].coords == Coords(0, 0)
        assert pcs == [1, 0, 1, 0, 1]

    def test_single_instruction_program_wraps_to_zero(self, make_level) -> None:
        grid = Grid.load_level(make_level(starts=[(5, 5)]), (MoveOp(Direction.DOWN),))
        grid.tick()
        assert grid.agents[0].pc == 0
        assert grid.agents[0].coords == Coords(5, 6)

    @pytest.mark.parametrize(
        ("start", "direction"),
        [
            ((0, 3), Direction.LEFT),
            ((GRID_WIDTH - 1, 3), Direction.RIGHT),
            ((4, 0), Direction.UP),
            ((4, GRID_HEIGHT - 1), Direction.DOWN),
        ],
    )
    def test_off_board_move_stays_put(self, make_level, start, direction) -> None:
        grid = Grid.load_level(make_level(starts=[start]), (MoveOp(direction),))
        grid.tick()
        assert grid.agents[0].coords == Coords(*start)


class TestBranching:
    def test_if_up_rock_taken_and_skipped(self, make_level) -> None:
        level = make_level(starts=[(0, 5), (3, 5)], rocks=[(0, 4)])
        grid = Grid.load_level(level, compile_program("if up rock { move right; }"))
        grid.tick()
        blocked, clear = grid.agents
        assert blocked.pc == 1
        # dest == 2 is past the end and wraps to 0
        assert clear.pc == 0
        grid.tick()
        assert blocked.coords == Coords(1, 5)
        assert blocked.pc == 0
        assert clear.coords == Coords(3, 5)

    def test_condition_uses_pre_instruction_position(self, make_level) -> None:
        level = make_level(starts=[(2, 2)], finishes=[(3, 2)])
        grid = Grid.load_level(level, compile_program("if right finish { move right; }"))
        assert grid.tick() is False
        assert grid.tick() is True

    def test_off_board_senses_as_rock_at_top_left(self, make_level) -> None:
        grid = Grid.load_level(make_level(starts=[(0, 0)]), (MoveOp(Direction.UP),))
        origin = Coords(0, 0)
        assert grid.check(TileCheck(Direction.UP, Tile.ROCK), origin) is True
        assert grid.check(TileCheck(Direction.LEFT, Tile.ROCK), origin) is True
        assert grid.check(TileCheck(Direction.UP, Tile.EMPTY), origin) is False
        assert grid.check(TileCheck(Direction.LEFT, Tile.FINISH), origin) is False

    def test_off_board_sense_ignores_tile_map(self, make_level) -> None:
        level = make_level(starts=[(0, 0)], finishes=[(0, 1), (1, 0)])
        grid = Grid.load_level(level, (MoveOp(Direction.UP),))
        assert grid.check(TileCheck(Direction.UP, Tile.ROCK), Coords(0, 0)) is True

    def test_right_edge_senses_as_rock(self, make_level) -> None:
        grid = Grid.load_level(make_level(starts=[(9, 9)]), (MoveOp(Direction.UP),))
        assert grid.check(TileCheck(Direction.RIGHT, Tile.ROCK), Coords(9, 9)) is True

    def test_goto_does_not_advance(self, make_level) -> None:
        program = (MoveOp(Direction.DOWN), Goto(0))
        grid = Grid.load_level(make_level(starts=[(0, 0)]), program)
        grid.tick()
        assert grid.agents[0].pc == 1
        grid.tick()
        assert grid.agents[0].pc == 0

    def test_branch_not_taken_falls_into_body(self, make_level) -> None:
        program = (
            BranchIfNot(TileCheck(Direction.DOWN, Tile.EMPTY), dest=2),
            MoveOp(Direction.DOWN),
            MoveOp(Direction.RIGHT),
        )
        grid = Grid.load_level(make_level(starts=[(0, 0)]), program)
        grid.tick()
        assert grid.agents[0].pc == 1


class TestLoopAndRemoval:
    def test_loop_never_halts_without_finish(self, make_level) -> None:
        grid = Grid.load_level(make_level(starts=[(0, 0)]), compile_program("loop { move right; }"))
        for _ in range(50):
            assert grid.tick() is False
        assert grid.agents[0].coords == Coords(GRID_WIDTH - 1, 0)

    def test_removal_keeps_remaining_agents(self, make_level) -> None:
        level = make_level(starts=[(0, 0), (0, 1), (0, 2)], finishes=[(1, 1), (1, 2)])
        grid = Grid.load_level(level, compile_program("move right;"))
        assert grid.tick() is False
        assert [a.agent_id for a in grid.agents] == [0]
        assert grid.agents[0].coords == Coords(1, 0)

    def test_simultaneous_finish_completes(self, make_level) -> None:
        level = make_level(starts=[(0, 0), (0, 1)], finishes=[(1, 0), (1, 1)])
        grid = Grid.load_level(level, compile_program("move right;"))
        assert grid.tick() is True
        assert grid.is_complete

    def test_pc_stays_in_range_for_nested_program(self, make_level) -> None:
        source = """
            loop {
                if right rock { move down; }
                if down finish { loop { move down; } }
                move right;
            }
        """
        program = compile_program(source)
        level = make_level(starts=[(0, 0), (4, 7)], rocks=[(5, 0), (2, 9)])
        grid = Grid.load_level(level, program)
        for _ in range(200):
            grid.tick()
            for agent in grid.agents:
                assert 0 <= agent.pc < len(program)

    def test_snapshot_reports_live_agents(self, make_level) -> None:
        level = make_level(starts=[(0, 0), (3, 3)])
        grid = Grid.load_level(level, (MoveOp(Direction.DOWN),))
        grid.tick()
        snap = grid.snapshot()
        assert [(s.agent_id, s.x, s.y, s.pc) for s in snap] == [(0, 0, 1, 0), (1, 3, 4, 0)]
