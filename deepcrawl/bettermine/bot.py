"""Mining bots that walk a 5x5 map, and the turn input that moves them."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import replace
from enum import Enum

from deepcrawl.bettermine.map import Map3D, Position

_LAST = 4
_KEYS = {"w": "UP", "a": "LEFT", "s": "DOWN", "d": "RIGHT", "f": "STILL"}


class Direction(Enum):
    """A step on the map."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    STILL = 4


class Bot(ABC):
    """A player piece with a position and a score."""

    def __init__(self, is_cpu: bool, position: Position) -> None:
        self.is_cpu = is_cpu
        self.position = position
        self.score = 0

    def step(self, direction: Direction) -> bool:
        """Move one cell; return False and stay put if it would leave the map."""
        x, y = self.position.x, self.position.y
        if direction is Direction.LEFT:
            y -= 1
        elif direction is Direction.RIGHT:
            y += 1
        elif direction is Direction.UP:
            x -= 1
        elif direction is Direction.DOWN:
            x += 1
        elif direction is not Direction.STILL:
            return False
        if not (0 <= x <= _LAST and 0 <= y <= _LAST):
            return False
        self.position = replace(self.position, x=x, y=y)
        return True

    @abstractmethod
    def mine(self, game_map: Map3D) -> int:
        """Mine at the bot's position and return the points gained."""


def handle_bot_input(
    bot: Bot | None,
    ask: Callable[[str], str] = input,
    out: Callable[[str], object] | None = None,
    rng: random.Random | None = None,
) -> Direction | None:
    """Move the bot for one turn: at random for the CPU, else from typed WASD/F.

    Returns the direction taken, or None when there is no bot.
    """
    if bot is None:
        return None
    out = out or sys.stdout.write

    if bot.is_cpu:
        rng = rng or random.Random()
        directions = list(Direction)
        while True:
            direction = rng.choice(directions)
            if bot.step(direction):
                return direction

    while True:
        text = ask("Enter direction (WASD to move, F to stay still): ").strip()
        if not text:
            continue
        key = text[0].lower()
        if key in _KEYS:
            direction = Direction[_KEYS[key]]
            break
        out("Invalid input. Try again.\n")

    if not bot.step(direction):
        out("Invalid move. Staying still.\n")
        bot.step(Direction.STILL)
        return Direction.STILL
    return direction