"""Fixed-size board that runs a compiled program for every live salmon.

Tick semantics: each agent dispatches exactly one instruction per tick, in
storage order. Agents never block each other; only Rock tiles block
movement. Sensing a cell off the board reads as Rock. A program counter
that runs past the end of the program restarts at address 0. Agents that
end a dispatch on a Finish tile are removed once every agent has moved.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from salmon_run.domain.grid_types import Coords, Tile
from salmon_run.domain.level import Level
from salmon_run.domain.snapshot import AgentState, Snapshot
from salmon_run.lang.ast import Condition
from salmon_run.lang.instructions import BranchIfNot, Goto, MoveOp, Program, jump_targets


@dataclass
class Agent:
    """A salmon: its position and the address of its next instruction."""

    agent_id: int
    coords: Coords
    pc: int = 0


@dataclass
class Grid:
    """Static tile map, live agents and the shared active program."""

    tiles: np.ndarray  # [y, x] -> Tile value
    agents: list[Agent]
    program: Program

    @classmethod
    def load_level(cls, level: Level, program: Program) -> Grid:
        """Start a fresh run of *program* on *level* with every pc at 0."""
        if not program:
            raise ValueError("program must contain at least one instruction")
        # a branch past the last instruction lands on len(program) and wraps to 0
        if any(not 0 <= target <= len(program) for target in jump_targets(program)):
            raise ValueError("program jumps outside its own addresses")
        agents = [Agent(agent_id=i, coords=start) for i, start in enumerate(level.starts)]
        return cls(tiles=level.tiles.copy(), agents=agents, program=tuple(program))

    @property
    def is_complete(self) -> bool:
        return not self.agents

    def tile_at(self, coords: Coords) -> Tile:
        return Tile(int(self.tiles[coords.y, coords.x]))

    def check(self, condition: Condition, coords: Coords) -> bool:
        """Evaluate a tile check from *coords*; off-board reads as Rock."""
        neighbor = coords.in_direction_checked(condition.direction)
        if neighbor is None:
            return condition.tile == Tile.ROCK
        return self.tile_at(neighbor) == condition.tile

    def _dispatch(self, agent: Agent) -> None:
        """Execute one instruction for *agent* and update its pc in place."""
        instruction = self.program[agent.pc]
        next_pc = agent.pc + 1

        if isinstance(instruction, MoveOp):
            dest = agent.coords.in_direction(instruction.direction)
            if self.tile_at(dest) != Tile.ROCK:
                agent.coords = dest
        elif isinstance(instruction, Goto):
            next_pc = instruction.address
        elif isinstance(instruction, BranchIfNot):
            if not self.check(instruction.condition, agent.coords):
                next_pc = instruction.dest

        agent.pc = next_pc if next_pc < len(self.program) else 0

    def tick(self) -> bool:
        """Advance every agent by one instruction.

        Returns True when no agents remain (the level is complete).
        """
        finished: list[int] = []
        for index, agent in enumerate(self.agents):
            self._dispatch(agent)
            if self.tile_at(agent.coords) == Tile.FINISH:
                finished.append(index)

        for index in reversed(finished):
            del self.agents[index]

        return self.is_complete

    def snapshot(self) -> Snapshot:
        """Return the ordered state of every live agent."""
        return tuple(
            AgentState(agent_id=a.agent_id, x=a.coords.x, y=a.coords.y, pc=a.pc)
            for a in self.agents
        )
