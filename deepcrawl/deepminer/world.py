"""The mining world: a grid of columns of layered point values."""

from __future__ import annotations

import math
import random

_LAYERS = ".,:-+!?%#@"
_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


def sort_vector(values: list[int], ascending: bool) -> None:
    """Sort values in place, ascending or descending."""
    values.sort(reverse=not ascending)


def layer_char(percent: float) -> str:
    """Return the glyph showing how full a column is."""
    index = math.floor(percent * 10) - 1
    if index >= len(_LAYERS):
        index = len(_LAYERS) - 1
    if index < 1:
        return " "
    return _LAYERS[index]


class World:
    """A grid of columns; the last element of a column is its top layer."""

    def __init__(self, max_points: int) -> None:
        self.max_points = 0
        self.x = 0
        self.y = 0
        self.z = 0
        self.grid: list[list[list[int]]] = []

    def generate_world(
        self, x: int, y: int, z: int, rng: random.Random | None = None
    ) -> None:
        """Fill an x-by-y grid of columns z deep with random values."""
        rng = rng or random.Random()
        self.x, self.y, self.z = x, y, z
        self.max_points = 0
        grid = []
        for _ in range(x):
            row = []
            for _ in range(y):
                column = []
                for _ in range(z):
                    if rng.randint(1, 100) <= 5:
                        column.append(rng.randint(-3, -1))
                    else:
                        value = rng.randint(1, 9)
                        column.append(value)
                        self.max_points += value
                row.append(column)
            grid.append(row)
        self.grid = grid

    def render(self, p1x: int = -1, p1y: int = -1, p2x: int = -1, p2y: int = -1) -> str:
        """Return the grid drawn as text, the two players highlighted."""
        parts = ["World:\n"]
        for i, row in enumerate(self.grid):
            for j, column in enumerate(row):
                glyph = layer_char(len(column) / self.z)
                if (i, j) == (p1x, p1y):
                    parts.append(f"{_GREEN}{glyph}{_RESET} ")
                elif (i, j) == (p2x, p2y):
                    parts.append(f"{_RED}{glyph}{_RESET} ")
                else:
                    parts.append(f"{glyph} ")
            parts.append("\n")
        return "".join(parts)