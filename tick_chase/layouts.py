"""Maze layouts and adversary rosters."""
from __future__ import annotations

from dataclasses import dataclass

from tick_chase.config import ChaseConfig
from tick_chase.maze import MazeGrid
from tick_chase.strategies import Ambush, Direct, Flank, Shy, TargetingStrategy
from tick_chase.types import Cell


@dataclass(frozen=True)
class MazeLayout:
    """A maze plus the cells the session spawns things on.

    ``rows`` uses the layout codes: 0 open, 1 wall, 2 standard
    collectible, 3 bonus collectible, 4 home-area marker.
    """

    rows: tuple[str, ...]
    agent_spawn: Cell
    home: Cell
    adversary_spawns: tuple[Cell, ...] = ()

    def build_maze(self, cell_size: int) -> MazeGrid:
        return MazeGrid.from_rows(self.rows, cell_size)


@dataclass(frozen=True)
class AdversarySpec:
    name: str
    spawn: Cell
    patrol_corner: Cell
    strategy: TargetingStrategy


REFERENCE_LAYOUT = MazeLayout(
    rows=(
        "1111111111111111111111111111",
        "1222222222222112222222222221",
        "1211112111112112111112111121",
        "1311112111112112111112111131",
        "1211112111112112111112111121",
        "1222222222222222222222222221",
        "1211112112111111112112111121",
        "1211112112111111112112111121",
        "1222222112222112222112222221",
        "1111112111110110111112111111",
        "0000012111110110111112100000",
        "0000012110000000000112100000",
        "0000012110111441110112100000",
        "1111112110100000010112111111",
        "0000002000100000010002000000",
        "1111112110100000010112111111",
        "0000012110111111110112100000",
        "0000012110000000000112100000",
        "0000012110111111110112100000",
        "1111112110111111110112111111",
        "1222222222222112222222222221",
        "1211112111112112111112111121",
        "1211112111112112111112111121",
        "1322112222222002222222112231",
        "1112112112111111112112112111",
        "1112112112111111112112112111",
        "1222222112222112222112222221",
        "1211111111112112111111111121",
        "1211111111112112111111111121",
        "1222222222222222222222222221",
        "1111111111111111111111111111",
    ),
    agent_spawn=(14, 23),
    home=(14, 14),
    adversary_spawns=((14, 11), (14, 14), (12, 14), (16, 14)),
)


def default_roster(
    layout: MazeLayout, maze: MazeGrid, config: ChaseConfig,
) -> list[AdversarySpec]:
    """The four reference adversaries, one per spawn cell in *layout*.

    Patrol corners sit two cells in from the borders. The flanker pairs
    with the first (direct) adversary.
    """
    cs = config.cell_size
    right, bottom = maze.cols - 3, maze.rows - 3
    candidates = [
        ("direct", (right, 2), Direct()),
        ("ambush", (2, 2), Ambush(lead=config.ambush_lead, cell_size=cs)),
        ("flank", (right, bottom), Flank(lead=config.flank_lead, partner=0, cell_size=cs)),
        ("shy", (2, bottom), Shy(
            retreat=maze.to_corner(2, bottom), radius=config.shy_radius, cell_size=cs,
        )),
    ]
    return [
        AdversarySpec(name=name, spawn=spawn, patrol_corner=corner, strategy=strategy)
        for spawn, (name, corner, strategy) in zip(layout.adversary_spawns, candidates)
    ]
