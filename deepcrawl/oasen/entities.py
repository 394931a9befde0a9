"""Board positions, things that move on the board, and the enemies among them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from deepcrawl.oasen.stats import MAX_FIELDSIZE


@dataclass(frozen=True)
class Position:
    """A tile on the board: x selects the row, y the column."""

    x: int
    y: int

    def distance_to(self, other: Position) -> tuple[int, int]:
        """Return (x, y) offsets of this position from other."""
        return self.x - other.x, self.y - other.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Entity:
    """Something with a position on the board and hit points."""

    def __init__(self, position: Position, max_hp: int) -> None:
        self.position = position
        self.current_hp = max_hp
        self.max_hp = max_hp

    def move(self, dx: int, dy: int) -> bool:
        """Step by (dx, dy); return False and stay put if that leaves the board."""
        x = self.position.x + dx
        y = self.position.y + dy
        if not (0 <= x < MAX_FIELDSIZE and 0 <= y < MAX_FIELDSIZE):
            return False
        self.position = Position(x, y)
        return True

    def take_damage(self, damage: int) -> None:
        """Lose hit points, never dropping below zero."""
        self.current_hp = max(self.current_hp - damage, 0)

    def heal(self, amount: int) -> None:
        """Regain hit points, never rising above the maximum."""
        self.current_hp = min(self.current_hp + amount, self.max_hp)


class Pattern(Enum):
    """How an enemy moves each turn."""

    RANDOM = 0
    CHASE = 1
    STATIONARY = 2


class Enemy(Entity):
    """A hostile entity that deals damage when the player meets it."""

    def __init__(
        self, pattern: Pattern, position: Position, hp: int, damage: int
    ) -> None:
        super().__init__(position, hp)
        self.pattern = pattern
        self.damage = damage

    def move_pattern(
        self, player_position: Position, rng: random.Random | None = None
    ) -> None:
        """Take one step according to the enemy's pattern."""
        if self.position == player_position:
            return

        if self.pattern is Pattern.CHASE:
            dx, dy = self.position.distance_to(player_position)
            if abs(dx) >= abs(dy):
                self.move(dx // abs(dx), 0)
            else:
                self.move(0, dy // abs(dy))
        elif self.pattern is Pattern.RANDOM:
            rng = rng or random.Random()
            while True:
                along_x = rng.randrange(2) == 1
                backwards = rng.randrange(2) == 1
                step = -1 if backwards else 1
                dx, dy = (step, 0) if along_x else (0, step)
                if self.move(dx, dy):
                    return