"""The player: movement, experience, stats and items."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from deepcrawl.oasen.entities import Entity, Position
from deepcrawl.oasen.stats import Stat, StatType

_LEVEL_KEYS = {
    "i": StatType.INTELLIGENCE,
    "s": StatType.STRENGTH,
    "l": StatType.LUCK,
}
_TRAINED = (StatType.INTELLIGENCE, StatType.STRENGTH, StatType.LUCK)


class Player(Entity):
    """The adventurer, starting in the top-left corner of the board."""

    def __init__(
        self,
        hp: int,
        ask: Callable[[str], str] = input,
        out: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(Position(0, 0), hp)
        self._ask = ask
        self._out = out or sys.stdout.write
        self._rng = rng or random.Random()
        self.relic_count = 0
        self.level = 0
        self.experience = 0
        self._stats = {stat_type: 0 for stat_type in _TRAINED}
        self.swords = 0
        self.potions = 0
        self.teleport_scrolls = 0

    def move_north(self) -> bool:
        return self.move(-1, 0)

    def move_south(self) -> bool:
        return self.move(1, 0)

    def move_east(self) -> bool:
        return self.move(0, 1)

    def move_west(self) -> bool:
        return self.move(0, -1)

    def format_stats(self) -> str:
        """Return the player's status block."""
        return (
            "----- Player -----\n"
            f"Level: {self.level}, Exp: {self.experience}/{self.required_exp()}\n"
            f"Relics: {self.relic_count}\n"
            f"Health: {self.current_hp}/{self.max_hp}\n"
            f"Intelligence: {self._stats[StatType.INTELLIGENCE]}, "
            f"Strength: {self._stats[StatType.STRENGTH]}, "
            f"Luck: {self._stats[StatType.LUCK]}\n"
            f"Potions: {self.potions}, "
            f"Teleport Scrolls: {self.teleport_scrolls}, "
            f"Swords: {self.swords}\n"
            "\n"
        )

    def gain_experience(self) -> None:
        """Add one experience point, levelling up when enough are gathered."""
        self.experience += 1
        if self.experience >= self.required_exp():
            self.experience = 0
            self._level_up()

    def _level_up(self) -> None:
        self.level += 1
        prompt = "You have leveled up! Choose a stat to increase (i, s, l): "
        while True:
            text = self._ask(prompt).strip()
            if not text:
                continue
            stat_type = _LEVEL_KEYS.get(text[0])
            if stat_type is not None:
                self._stats[stat_type] += 1
                return
            prompt = "Invalid input, please choose a stat to increase (i, s, l): "

    def gain_item(self) -> None:
        """Receive a random sword, potion or teleportation scroll."""
        roll = self._rng.randrange(3)
        if roll == 0:
            self._out(
                "You have gained a sword! Slay any enemy instantly, "
                "the next time you meet them!\n"
            )
            self.swords += 1
        elif roll == 1:
            self._out(
                "You have gained a potion! Any time you would die, "
                "use this item and gain 1 heart!\n"
            )
            self.potions += 1
        else:
            self._out(
                "You have gained a teleportation scroll! Should you fail an "
                "attribute check, destroy this and escape the trap anyways!\n"
            )
            self.teleport_scrolls += 1

    def collect_relic(self) -> None:
        self.relic_count += 1

    def stat(self, stat_type: StatType) -> Stat:
        """Return the named stat; an unknown type gives intelligence."""
        if stat_type not in self._stats:
            stat_type = StatType.INTELLIGENCE
        return Stat(stat_type, self._stats[stat_type])

    def reduce_stat(self, stat_type: StatType) -> None:
        """Lower the named stat by one; an unknown type is ignored."""
        if stat_type in self._stats:
            self._stats[stat_type] -= 1

    def use_sword(self) -> bool:
        if self.swords > 0:
            self.swords -= 1
            return True
        return False

    def use_scroll(self) -> bool:
        if self.teleport_scrolls > 0:
            self.teleport_scrolls -= 1
            return True
        return False

    def use_potion(self) -> bool:
        if self.potions > 0:
            self.potions -= 1
            return True
        return False

    def required_exp(self) -> int:
        """Return the experience needed for the next level."""
        return 1 if self.level == 0 else self.level