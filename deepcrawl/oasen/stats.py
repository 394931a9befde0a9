"""Game constants, player statistics and the fields that make up the board."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

MAX_FIELDSIZE = 5
PLAYER_HP = 5

PRINT_FIELD_SPACING = 4

EMPTY_FIELD_WEIGHT = 40
TRAP_FIELD_WEIGHT = 40
RELIC_FIELD_WEIGHT = 10
WELL_FIELD_WEIGHT = 10

RELIC_HURT_CHANCE = 1.0 / 6.0

PLAYER_SYMBOL = "@"
EMPTY_SYMBOL = "_"
RELIC_SYMBOL = "R"
TRAP_SYMBOL = "^"
WELL_SYMBOL = "+"
ENEMY_SYMBOL = "#"


class StatType(Enum):
    """The attributes a player can train.

    Intelligence reveals tiles, strength wins fights, luck improves wells.
    """

    NONE = 0
    INTELLIGENCE = 1
    STRENGTH = 2
    LUCK = 3


_STAT_NAMES = {
    StatType.INTELLIGENCE: "Intelligence",
    StatType.STRENGTH: "Strength",
    StatType.LUCK: "Luck",
}


@dataclass(frozen=True)
class Stat:
    """An attribute together with its level."""

    type: StatType = StatType.NONE
    value: int = 0

    def __str__(self) -> str:
        return _STAT_NAMES.get(self.type, "None")


class FieldType(Enum):
    """What lies on a board tile."""

    EMPTY = 0
    RELIC = 1
    TRAP = 2
    WELL = 3


_SYMBOLS = {
    FieldType.EMPTY: EMPTY_SYMBOL,
    FieldType.RELIC: RELIC_SYMBOL,
    FieldType.TRAP: TRAP_SYMBOL,
    FieldType.WELL: WELL_SYMBOL,
}

_TRAP_STATS = (StatType.INTELLIGENCE, StatType.LUCK, StatType.STRENGTH)


class Field:
    """One tile of the board: its kind, whether it is shown, and the stat it tests."""

    def __init__(
        self,
        type: FieldType = FieldType.EMPTY,
        level: int = 0,
        revealed: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self.type = type
        self.revealed = revealed
        self.stat = Stat()
        self.symbol = _SYMBOLS.get(type, "?")

        if type is FieldType.RELIC:
            self.revealed = True
        elif type is FieldType.TRAP:
            rng = rng or random.Random()
            self.stat = Stat(_TRAP_STATS[rng.randrange(3)], level)
        elif type is FieldType.WELL:
            self.stat = Stat(StatType.LUCK, level)

    def __repr__(self) -> str:
        return (
            f"Field(type={self.type.name}, stat={self.stat!r}, "
            f"revealed={self.revealed})"
        )