"""The turn loop of the relic-hunting dungeon crawl."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from deepcrawl.oasen.board import Board
from deepcrawl.oasen.player import Player
from deepcrawl.oasen.stats import PLAYER_HP

_CLEAR_SCREEN = "\033[2J\033[H"


def move_player(player: Player, direction: str) -> bool:
    """Move the player by a w/a/s/d key; return whether a move was made."""
    moves = {
        "w": player.move_north,
        "a": player.move_west,
        "s": player.move_south,
        "d": player.move_east,
    }
    move = moves.get(direction)
    return move() if move is not None else False


def player_move_input(
    player: Player,
    ask: Callable[[str], str] | None = None,
    out: Callable[[str], object] | None = None,
) -> str:
    """Ask for directions until one moves the player, and return that key."""
    ask = ask or input
    prompt = "Enter a direction (w,a,s,d): "
    while True:
        text = ask(prompt).strip()
        if not text:
            continue
        key = text[0]
        if move_player(player, key):
            return key
        prompt = "Invalid input, please enter a direction (w,a,s,d): "


def start_game(
    ask: Callable[[str], str] | None = None,
    out: Callable[[str], object] | None = None,
    rng: random.Random | None = None,
) -> Player:
    """Play until the player dies, then show the final stats and return the player."""
    ask = ask or input
    out = out or sys.stdout.write
    rng = rng or random.Random()

    player = Player(PLAYER_HP, ask=ask, out=out, rng=rng)
    board = Board(player, ask=ask, out=out, rng=rng)

    while True:
        board.process_turn()

        out(board.render())
        out(board.render_stats())
        out(player.format_stats())

        if player.current_hp <= 0:
            if not player.use_potion():
                break
            out("You almost died, but your potion saved you!\n")
            player.heal(1)

        player_move_input(player, ask, out)
        board.move_enemies()
        out(_CLEAR_SCREEN)

    out(_CLEAR_SCREEN)
    out("You lost! Here are your final stats:\n")
    out(player.format_stats())
    return player


def main(argv: list[str] | None = None) -> int:
    """Play the crawl on the terminal."""
    try:
        start_game()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())