"""Mining robots that collect points from the world's columns."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from deepcrawl.deepminer.world import sort_vector


class BaseRobot(ABC):
    """A robot with a grid position and a running score."""

    def __init__(self) -> None:
        self.points = 0
        self.x = 0
        self.y = 0
        self.shuffles = 0

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def add_points(self, points: int) -> None:
        self.points += points

    def _column(self, world: list[list[list[int]]]) -> list[int]:
        if self.x < 0 or self.y < 0:
            raise IndexError(f"position ({self.x}, {self.y}) is outside the world")
        return world[self.x][self.y]

    @abstractmethod
    def mine(self, world: list[list[list[int]]]) -> int:
        """Take points from the column under the robot and return them."""


class MathBot(BaseRobot):
    """Sorts its column, then takes the smallest value."""

    def mine(self, world: list[list[list[int]]]) -> int:
        column = self._column(world)
        if not column:
            return 0
        sort_vector(column, False)
        points = column.pop()
        self.add_points(points)
        return points


class DoubleBot(BaseRobot):
    """Takes the top two layers of its column."""

    def mine(self, world: list[list[list[int]]]) -> int:
        column = self._column(world)
        if not column:
            return 0
        points = 0
        for _ in range(2):
            if not column:
                break
            points += column.pop()
        self.add_points(points)
        return points


class GamblerBot(BaseRobot):
    """Takes the top layer, either doubled or halved at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self._rng = rng or random.Random()

    def mine(self, world: list[list[list[int]]]) -> int:
        column = self._column(world)
        if not column:
            return 0
        top = column.pop()
        points = top * 2 if self._rng.randint(0, 1) else int(top / 2)
        self.add_points(points)
        return points