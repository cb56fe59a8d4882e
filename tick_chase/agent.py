"""Agent controller - turns directional intent into maze-constrained motion."""
from __future__ import annotations

from tick_chase.components import Agent
from tick_chase.config import ChaseConfig
from tick_chase.maze import MazeGrid
from tick_chase.types import Cell, Direction


class AgentController:
    def __init__(self, maze: MazeGrid, config: ChaseConfig) -> None:
        self._maze = maze
        self._config = config

    def spawn(self, cell: Cell) -> Agent:
        return Agent(
            position=self._maze.to_continuous(*cell),
            speed=self._config.agent_speed,
            radius=self._config.agent_radius,
        )

    def respawn(self, agent: Agent, cell: Cell) -> None:
        agent.position = self._maze.to_continuous(*cell)
        agent.direction = Direction.RIGHT
        agent.requested_direction = None
        agent.alive = True
        agent.death_elapsed = 0.0

    def update(self, agent: Agent, dt: float) -> None:
        """Advance *agent* by one tick of *dt* milliseconds.

        A pending turn is tried first, then the agent always tries to
        move forward along whatever direction it now has.
        """
        if not agent.alive:
            agent.death_elapsed += dt
            return

        maze = self._maze
        col, row = maze.to_cell(agent.position)
        cx, cy = maze.to_continuous(col, row)

        wanted = agent.requested_direction
        if wanted is not None:
            x, y = agent.position
            window = agent.speed * 2
            if (
                not maze.is_wall(col + wanted.dx, row + wanted.dy)
                and abs(x - cx) < window
                and abs(y - cy) < window
            ):
                agent.position = (cx, cy)
                agent.direction = wanted
                agent.requested_direction = None

        self._advance(agent, col, row)

    def _advance(self, agent: Agent, col: int, row: int) -> None:
        maze = self._maze
        cs = maze.cell_size
        x, y = agent.position
        d = agent.direction
        nx = x + d.dx * agent.speed
        ny = y + d.dy * agent.speed
        ncol, nrow = maze.to_cell((nx, ny))

        # Tunnel wrap triggers on the cell index leaving the grid.
        if ncol < 0:
            agent.position = ((maze.cols - 1) * cs + cs / 2, y)
        elif ncol >= maze.cols:
            agent.position = (cs / 2, y)
        elif nrow < 0:
            agent.position = (x, (maze.rows - 1) * cs + cs / 2)
        elif nrow >= maze.rows:
            agent.position = (x, cs / 2)
        elif not maze.is_wall(ncol, nrow):
            agent.position = (nx, ny)
        # Flush against the wall, measured by the agent's radius.
        elif d is Direction.RIGHT:
            agent.position = (col * cs + cs - agent.radius, y)
        elif d is Direction.LEFT:
            agent.position = (col * cs + agent.radius, y)
        elif d is Direction.DOWN:
            agent.position = (x, row * cs + cs - agent.radius)
        else:
            agent.position = (x, row * cs + agent.radius)
