from unittest import mock

import pytest

from deepcrawl.oasen.entities import Position
from deepcrawl.oasen.game import main, move_player, player_move_input, start_game
from deepcrawl.oasen.player import Player
from deepcrawl.oasen.stats import PLAYER_HP


class FixedRng:
    def __init__(self, value=0.99, index=0):
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def randrange(self, n):
        return min(self.index, n - 1)


def scripted(answers):
    queue = list(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        if "leveled up" in prompt:
            return "s"
        if not queue:
            raise EOFError
        return queue.pop(0)

    return ask, prompts


def make_player():
    return Player(PLAYER_HP, ask=lambda p: "s", out=lambda s: None, rng=FixedRng())


@pytest.mark.parametrize(
    "key, moved, position",
    [
        ("w", False, Position(0, 0)),
        ("a", False, Position(0, 0)),
        ("s", True, Position(1, 0)),
        ("d", True, Position(0, 1)),
        ("x", False, Position(0, 0)),
    ],
)
def test_move_player(key, moved, position):
    player = make_player()
    assert move_player(player, key) is moved
    assert player.position == position


def test_player_move_input_retries_until_valid():
    player = make_player()
    ask, prompts = scripted(["w", "q", "d"])
    assert player_move_input(player, ask, lambda s: None) == "d"
    assert player.position == Position(0, 1)
    assert prompts[0] == "Enter a direction (w,a,s,d): "
    assert prompts[1].startswith("Invalid input")
    assert len(prompts) == 3


def test_player_move_input_propagates_end_of_input():
    player = make_player()
    ask, _ = scripted([])
    with pytest.raises(EOFError):
        player_move_input(player, ask)
    assert player.position == Position(0, 0)


def test_start_game_plays_turns_until_input_ends():
    ask, prompts = scripted(["s"])
    out = []
    with pytest.raises(EOFError):
        start_game(ask, out.append, FixedRng())
    text = "".join(out)
    assert text.count("You found a relic! +1 exp!") == 2
    assert "----- Player -----" in text
    assert "----- Board -----" in text
    assert sum("direction" in p for p in prompts) == 2


def test_main_returns_one_when_input_ends(capsys):
    with mock.patch("builtins.input", side_effect=EOFError):
        assert main([]) == 1
    assert "You lost!" not in capsys.readouterr().out