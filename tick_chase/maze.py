"""MazeGrid - static traversability lookup over a rectangular cell grid."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from tick_chase.types import Cell, CellKind, Vec

logger = logging.getLogger(__name__)


class MazeGrid:
    """Immutable grid of ``CellKind`` values addressed by ``(col, row)``.

    Lookups never raise: coordinates outside the grid read as WALL.
    Malformed input is rejected once, at construction.
    """

    def __init__(self, codes: Sequence[Sequence[int]], cell_size: int = 20) -> None:
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if not codes or not codes[0]:
            raise ValueError("maze must have at least one row and one column")
        width = len(codes[0])
        rows: list[tuple[CellKind, ...]] = []
        for r, row in enumerate(codes):
            if len(row) != width:
                raise ValueError(
                    f"row {r} has {len(row)} cells, expected {width}"
                )
            try:
                rows.append(tuple(CellKind(code) for code in row))
            except ValueError:
                raise ValueError(f"row {r} contains an unknown cell code") from None
        self._cells = tuple(rows)
        self._cols = width
        self._rows = len(rows)
        self._cell_size = cell_size
        self._open_cache: dict[int, tuple[Cell, ...]] = {}
        logger.debug(
            "Maze loaded: %dx%d, %d standard, %d bonus",
            self._cols,
            self._rows,
            len(self.cells_of(CellKind.STANDARD)),
            len(self.cells_of(CellKind.BONUS)),
        )

    @classmethod
    def from_rows(cls, rows: Iterable[str], cell_size: int = 20) -> MazeGrid:
        """Build from digit strings, one per row (``"1201"``)."""
        codes: list[list[int]] = []
        for line in rows:
            line = line.strip()
            if not line:
                continue
            if not line.isdigit():
                raise ValueError(f"maze row {line!r} must contain only digits")
            codes.append([int(ch) for ch in line])
        return cls(codes, cell_size)

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cell_size(self) -> int:
        return self._cell_size

    @property
    def pixel_width(self) -> int:
        return self._cols * self._cell_size

    @property
    def pixel_height(self) -> int:
        return self._rows * self._cell_size

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._cols and 0 <= row < self._rows

    def cell_kind(self, col: int, row: int) -> CellKind:
        if not self.in_bounds(col, row):
            return CellKind.WALL
        return self._cells[row][col]

    def is_wall(self, col: int, row: int) -> bool:
        return self.cell_kind(col, row) is CellKind.WALL

    def to_continuous(self, col: int, row: int) -> Vec:
        half = self._cell_size / 2
        return (col * self._cell_size + half, row * self._cell_size + half)

    def to_corner(self, col: int, row: int) -> Vec:
        """Top-left pixel of a cell. Steering targets are expressed this way."""
        return (col * self._cell_size, row * self._cell_size)

    def to_cell(self, pos: Vec) -> Cell:
        return (
            math.floor(pos[0] / self._cell_size),
            math.floor(pos[1] / self._cell_size),
        )

    def center_of(self, pos: Vec) -> Vec:
        """Centre of the cell containing *pos*."""
        return self.to_continuous(*self.to_cell(pos))

    def cells_of(self, kind: CellKind) -> list[Cell]:
        return [
            (c, r)
            for r, row in enumerate(self._cells)
            for c, cell in enumerate(row)
            if cell is kind
        ]

    def open_cells(self, margin: int = 0) -> tuple[Cell, ...]:
        """Non-wall cells at least *margin* cells away from every border."""
        cached = self._open_cache.get(margin)
        if cached is None:
            cached = tuple(
                (c, r)
                for r in range(margin, self._rows - margin)
                for c in range(margin, self._cols - margin)
                if self._cells[r][c] is not CellKind.WALL
            )
            self._open_cache[margin] = cached
        return cached
