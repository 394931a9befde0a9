"""A three-dimensional mining map: a grid of columns of layer values."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

_LAYERS = ".,:-+!?%#@"
_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class Position:
    """A cell on the map: x selects the row, y the column."""

    x: int
    y: int

    def is_valid(self, max_x: int, max_y: int) -> bool:
        """Return whether both coordinates lie in 0..max inclusive."""
        return 0 <= self.x <= max_x and 0 <= self.y <= max_y


class Sort(Enum):
    """How a column's layers are reordered."""

    RANDOM = 0
    ASCENDING = 1
    DESCENDING = 2


def layer_char(percent: float) -> str:
    """Return the glyph showing how full a column is; blank when nearly empty."""
    index = math.floor(percent * 10) - 1
    if index >= len(_LAYERS):
        index = len(_LAYERS) - 1
    if index < 0:
        return " "
    return _LAYERS[index]


class Map3D:
    """A size_x by size_y grid of columns; a column's last value is its top layer."""

    def __init__(
        self,
        size_x: int,
        size_y: int,
        size_z: int,
        rng: random.Random | None = None,
    ) -> None:
        if min(size_x, size_y, size_z) < 0:
            raise ValueError(f"map sizes must not be negative: {(size_x, size_y, size_z)}")
        self._rng = rng or random.Random()
        self.grid: list[list[list[int]]] = [
            [[self._rng.randint(1, 9) for _ in range(size_z)] for _ in range(size_y)]
            for _ in range(size_x)
        ]

    def _column(self, pos: Position) -> list[int]:
        if pos.x < 0 or pos.y < 0:
            raise IndexError(f"position ({pos.x}, {pos.y}) is outside the map")
        return self.grid[pos.x][pos.y]

    def _shuffle(self, values: list[int]) -> None:
        if len(values) <= 1:
            return
        last = len(values) - 1
        for i in range(len(values)):
            j = self._rng.randint(0, last)
            values[i], values[j] = values[j], values[i]

    def sort_position(self, pos: Position, sort: Sort) -> None:
        """Reorder the column at pos; positions beyond the bounds are ignored."""
        if not pos.is_valid(len(self.grid), len(self.grid[0])):
            return
        column = self._column(pos)
        if not column:
            return
        if sort is Sort.RANDOM:
            self._shuffle(column)
        elif sort is Sort.ASCENDING:
            column.sort()
        elif sort is Sort.DESCENDING:
            column.sort(reverse=True)

    def format_position(self, pos: Position) -> str:
        """Return the column at pos as a line of values, bottom layer first."""
        if not pos.is_valid(len(self.grid), len(self.grid[0])):
            return ""
        return "".join(f"{value} " for value in self._column(pos)) + "\n"

    def mine_position(self, pos: Position) -> int:
        """Remove the top layer at pos and return its value, or 0 if none is left."""
        column = self._column(pos)
        if not column:
            return 0
        return column.pop()

    def display(
        self,
        max_layers: int,
        p1: Position = Position(-1, -1),
        p2: Position = Position(-1, -1),
    ) -> str:
        """Return the map drawn as text, with the two players highlighted."""
        parts = ["World:\n"]
        for i, row in enumerate(self.grid):
            for j, column in enumerate(row):
                glyph = layer_char(len(column) / max_layers)
                if (i, j) == (p1.x, p1.y):
                    parts.append(f"{_GREEN}{glyph if glyph != ' ' else 'o'}{_RESET} ")
                elif (i, j) == (p2.x, p2.y):
                    parts.append(f"{_RED}{glyph if glyph != ' ' else 'o'}{_RESET} ")
                else:
                    parts.append(f"{glyph} ")
            parts.append("\n")
        return "".join(parts)

    def is_empty(self) -> bool:
        """Return whether every column has been mined out."""
        return not any(column for row in self.grid for column in row)