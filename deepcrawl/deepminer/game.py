"""A two-robot mining match between the player and the computer."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from deepcrawl.deepminer.robots import BaseRobot, DoubleBot, GamblerBot, MathBot
from deepcrawl.deepminer.world import World

Grid = list[list[list[int]]]

_ROBOT_NAMES = ("MathBot", "DoubleBot", "GamblerBot")
_MOVES = {"A": (-1, 0), "D": (1, 0), "W": (0, -1), "S": (0, 1), "F": (0, 0)}

_ROBOT_MENU = (
    "Choose your robot:\n"
    "1. MathBot\n"
    "2. DoubleBot\n"
    "3. GamblerBot\n"
    "Enter your choice (1-3): "
)
_CPU_MENU = (
    "\nUse CPU to play?\n"
    "1. Yes (CPU plays)\n"
    "2. No (You play)\n"
    "Enter your choice (1-2): "
)
_MOVEMENT_MENU = (
    "\nMove your character:\n"
    "A. Left\n"
    "D. Right\n"
    "W. Up\n"
    "S. Down\n"
    "F. Stay still\n"
    "Enter your choice (1-5): "
)


def is_valid_move(x: int, y: int, world: Grid) -> bool:
    """Return whether (x, y) lies inside the world."""
    width = len(world[0])
    height = len(world)
    return 0 <= x < width and 0 <= y < height


def move_cpu(
    x: int, y: int, world: Grid, rng: random.Random | None = None
) -> tuple[int, int]:
    """Pick a random valid step from (x, y) and return the new position."""
    rng = rng or random.Random()
    keys = list(_MOVES)
    while True:
        key = rng.choice(keys)
        if key == "F":
            return x, y
        dx, dy = _MOVES[key]
        if is_valid_move(x + dx, y + dy, world):
            return x + dx, y + dy


def _read_int(ask: Callable[[str], str], prompt: str) -> int | None:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


class GameManager:
    """Holds one robot of each kind and runs matches between them."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.total_collected_points = 0
        self.games_played = 0
        self.games_won = 0
        self.robots: list[BaseRobot] = [MathBot(), DoubleBot(), GamblerBot(self._rng)]

    def _ask_move(
        self, robot: BaseRobot, grid: Grid, ask: Callable[[str], str]
    ) -> tuple[int, int] | None:
        while True:
            choice = ""
            while choice not in _MOVES:
                choice = ask(_MOVEMENT_MENU).strip()[:1].upper()
            if choice == "F":
                return None
            dx, dy = _MOVES[choice]
            target = (robot.x + dx, robot.y + dy)
            if is_valid_move(*target, grid):
                return target

    def start_game(
        self,
        world: World,
        ask: Callable[[str], str] = input,
        out: Callable[[str], object] | None = None,
    ) -> tuple[BaseRobot, BaseRobot]:
        """Run a match; it ends when the player stays still or the world is mined out.

        Returns the player's robot and the computer's robot.
        """
        out = out or sys.stdout.write

        user_choice = None
        while user_choice not in (1, 2, 3):
            user_choice = _read_int(ask, _ROBOT_MENU)
        cpu_mode = None
        while cpu_mode not in (1, 2):
            cpu_mode = _read_int(ask, _CPU_MENU)

        cpu_choice = user_choice
        while cpu_choice == user_choice:
            cpu_choice = self._rng.randint(1, 3)

        out(
            f"\nYou chose {_ROBOT_NAMES[user_choice - 1]}, "
            f"the CPU will play as {_ROBOT_NAMES[cpu_choice - 1]}.\n"
        )

        p1 = self.robots[user_choice - 1]
        p2 = self.robots[cpu_choice - 1]
        p2.set_position(4, 4)

        world.generate_world(5, 5, 10, self._rng)
        out(world.render(p1.x, p1.y, p2.x, p2.y))
        grid = world.grid

        while True:
            if cpu_mode == 1:
                p1.set_position(*move_cpu(p1.x, p1.y, grid, self._rng))
            else:
                target = self._ask_move(p1, grid, ask)
                if target is None:
                    return p1, p2
                p1.set_position(*target)

            p2.set_position(*move_cpu(p2.x, p2.y, grid, self._rng))

            p1.mine(grid)
            p2.mine(grid)

            out(world.render())
            if not any(column for row in grid for column in row):
                return p1, p2


def main(argv: list[str] | None = None) -> int:
    """Play one match on the terminal."""
    world = World(100)
    manager = GameManager()
    try:
        manager.start_game(world)
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())