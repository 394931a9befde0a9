import random

import pytest

from deepcrawl.bettermine.bot import Bot, Direction, handle_bot_input
from deepcrawl.bettermine.map import Map3D, Position


class TopBot(Bot):
    def mine(self, game_map):
        points = game_map.mine_position(self.position)
        self.score += points
        return points


def scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_bot_starts_with_zero_score():
    bot = TopBot(True, Position(4, 4))
    assert bot.score == 0
    assert bot.is_cpu is True
    assert bot.position == Position(4, 4)


@pytest.mark.parametrize(
    "direction, ok, expected",
    [
        (Direction.LEFT, False, Position(0, 0)),
        (Direction.UP, False, Position(0, 0)),
        (Direction.RIGHT, True, Position(0, 1)),
        (Direction.DOWN, True, Position(1, 0)),
        (Direction.STILL, True, Position(0, 0)),
    ],
)
def test_step_from_corner(direction, ok, expected):
    bot = TopBot(False, Position(0, 0))
    assert bot.step(direction) is ok
    assert bot.position == expected


def test_step_blocked_at_far_corner():
    bot = TopBot(False, Position(4, 4))
    assert not bot.step(Direction.RIGHT)
    assert not bot.step(Direction.DOWN)
    assert bot.position == Position(4, 4)


def test_mine_adds_to_score():
    game_map = Map3D(5, 5, 3, random.Random(1))
    game_map.grid[0][0] = [2, 6]
    bot = TopBot(False, Position(0, 0))
    assert bot.mine(game_map) == 6
    assert bot.score == 6


def test_no_bot_returns_none():
    written = []
    assert handle_bot_input(None, ask=scripted(), out=written.append) is None
    assert written == []


def test_human_invalid_key_then_move():
    written = []
    bot = TopBot(False, Position(2, 2))
    result = handle_bot_input(bot, ask=scripted("x", "D"), out=written.append)
    assert result is Direction.RIGHT
    assert bot.position == Position(2, 3)
    assert written == ["Invalid input. Try again.\n"]


def test_human_move_off_map_stays_still():
    written = []
    bot = TopBot(False, Position(0, 0))
    result = handle_bot_input(bot, ask=scripted("a"), out=written.append)
    assert result is Direction.STILL
    assert bot.position == Position(0, 0)
    assert written == ["Invalid move. Staying still.\n"]


def test_cpu_moves_at_most_one_cell_and_stays_on_map():
    rng = random.Random(7)
    bot = TopBot(True, Position(0, 0))
    for _ in range(200):
        before = bot.position
        handle_bot_input(bot, ask=scripted(), rng=rng)
        after = bot.position
        assert abs(after.x - before.x) + abs(after.y - before.y) <= 1
        assert 0 <= after.x <= 4 and 0 <= after.y <= 4