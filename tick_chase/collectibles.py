"""Collectible items placed on the maze."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tick_chase.maze import MazeGrid
from tick_chase.types import CellKind, Tier, Vec


@dataclass
class Collectible:
    position: Vec
    radius: float
    tier: Tier
    consumed: bool = False


class CollectibleSet:
    """All collectibles of a session, built once from the maze.

    Items are never removed, only flagged. Within a session consumption
    is one-way; ``reset`` is reserved for starting a fresh game.
    """

    def __init__(self, items: list[Collectible]) -> None:
        self._items = items

    @classmethod
    def from_maze(
        cls, maze: MazeGrid, standard_radius: float, bonus_radius: float,
    ) -> CollectibleSet:
        items: list[Collectible] = []
        for row in range(maze.rows):
            for col in range(maze.cols):
                kind = maze.cell_kind(col, row)
                if kind is CellKind.STANDARD:
                    items.append(Collectible(
                        maze.to_continuous(col, row), standard_radius, Tier.STANDARD,
                    ))
                elif kind is CellKind.BONUS:
                    items.append(Collectible(
                        maze.to_continuous(col, row), bonus_radius, Tier.BONUS,
                    ))
        return cls(items)

    def __iter__(self) -> Iterator[Collectible]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def of_tier(self, tier: Tier) -> list[Collectible]:
        return [item for item in self._items if item.tier is tier]

    def consume(self, item: Collectible) -> bool:
        """Flag *item* consumed. Returns False if it already was."""
        if item.consumed:
            return False
        item.consumed = True
        return True

    def remaining(self, tier: Tier | None = None) -> int:
        return sum(
            1 for item in self._items
            if not item.consumed and (tier is None or item.tier is tier)
        )

    def all_consumed(self) -> bool:
        return all(item.consumed for item in self._items)

    def reset(self) -> None:
        for item in self._items:
            item.consumed = False
