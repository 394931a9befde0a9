"""The dungeon board: its fields, its enemies, and what happens on each turn."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Callable

from deepcrawl.oasen.entities import Enemy, Pattern, Position
from deepcrawl.oasen.player import Player
from deepcrawl.oasen.stats import (
    EMPTY_FIELD_WEIGHT,
    ENEMY_SYMBOL,
    MAX_FIELDSIZE,
    PLAYER_SYMBOL,
    PRINT_FIELD_SPACING,
    RELIC_FIELD_WEIGHT,
    RELIC_HURT_CHANCE,
    TRAP_FIELD_WEIGHT,
    WELL_FIELD_WEIGHT,
    Field,
    FieldType,
    StatType,
)

_WEIGHTS = (
    (FieldType.EMPTY, EMPTY_FIELD_WEIGHT),
    (FieldType.TRAP, TRAP_FIELD_WEIGHT),
    (FieldType.RELIC, RELIC_FIELD_WEIGHT),
    (FieldType.WELL, WELL_FIELD_WEIGHT),
)
_MAX_ENEMY_WAVES = 3


class Board:
    """A square grid of fields with enemies roaming it, linked to one player."""

    def __init__(
        self,
        player: Player,
        ask: Callable[[str], str] | None = None,
        out: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.player = player
        self._ask = ask or input
        self._out = out or sys.stdout.write
        self._rng = rng or random.Random()
        self.level = 0
        self.relic_count = 0
        self.enemies: list[Enemy] = []
        self.fields: list[list[Field]] = [
            [Field() for _ in range(MAX_FIELDSIZE)] for _ in range(MAX_FIELDSIZE)
        ]
        self._generate_board()

    def _random_field_type(self) -> FieldType:
        roll = self._rng.randrange(sum(weight for _, weight in _WEIGHTS))
        for field_type, weight in _WEIGHTS:
            if roll < weight:
                return field_type
            roll -= weight
        return FieldType.EMPTY

    def _enemy_glyph(self, here: Position) -> str:
        glyphs = []
        for enemy in self.enemies:
            if enemy.position != here:
                continue
            if enemy.pattern is Pattern.STATIONARY:
                dx, dy = enemy.position.distance_to(self.player.position)
                if abs(dx) <= 1 and abs(dy) <= 1:
                    glyphs.append(ENEMY_SYMBOL)
            else:
                glyphs.append(ENEMY_SYMBOL)
                break
        return "".join(glyphs)

    def render(self) -> str:
        """Return the board drawn as text; unrevealed fields show as '*'."""
        gap = " " * PRINT_FIELD_SPACING
        parts = ["\n"]
        for i, row in enumerate(self.fields):
            cells = []
            for j, field in enumerate(row):
                here = Position(i, j)
                if self.player.position == here:
                    cells.append(PLAYER_SYMBOL)
                    continue
                glyph = self._enemy_glyph(here)
                if glyph:
                    cells.append(glyph)
                elif field.revealed:
                    cells.append(field.symbol)
                else:
                    cells.append("*")
            parts.append(gap + gap.join(cells))
            parts.append("\n" * (PRINT_FIELD_SPACING // 2))
        return "".join(parts)

    def render_stats(self) -> str:
        """Return the board's status block."""
        return (
            "----- Board -----\n"
            f"Level: {self.level}\n"
            f"Relics left: {self.relic_count}\n"
            f"Enemies left: {len(self.enemies)}\n"
            "\n"
        )

    def _well_lucky(self, luck: int) -> bool:
        return self._rng.random() < (luck + 10) / 100.0

    def _visit_field(self) -> None:
        pos = self.player.position
        field = self.fields[pos.x][pos.y]

        if field.type is FieldType.RELIC:
            self._out("You found a relic! +1 exp!\n")
            self.player.gain_experience()
            self.player.collect_relic()
            self.player.gain_item()
            self.fields[pos.x][pos.y] = Field(FieldType.EMPTY)
            self.relic_count -= 1
        elif field.type is FieldType.TRAP:
            self._spring_trap(field)
            self.fields[pos.x][pos.y] = Field(FieldType.EMPTY)
        elif field.type is FieldType.WELL:
            self._out("You found a well! Recover 1 hp!\n")
            self.player.heal(1)
            if self._well_lucky(self.player.stat(StatType.LUCK).value):
                roll = self._rng.randrange(3)
                self._out("LUCKY!\n")
                if roll == 0:
                    self._out("Recover 1 hp!")
                    self.player.heal(1)
                elif roll == 1:
                    self._out("Found 1 exp!\n")
                    self.player.gain_experience()
                else:
                    self.player.gain_item()
            self.fields[pos.x][pos.y] = Field(FieldType.EMPTY)

    def _fight_enemies(self) -> None:
        survivors = []
        for enemy in self.enemies:
            if enemy.position == self.player.position:
                self._out("Encountered enemy!")
                strength = self.player.stat(StatType.STRENGTH).value
                if self.player.use_sword():
                    self._out(" Used a sword to decimate the enemy! +2 exp\n")
                    self.player.gain_experience()
                    self.player.gain_experience()
                    enemy.take_damage(enemy.current_hp)
                else:
                    if strength > 0 and self._rng.random() < 30.0 / strength:
                        self._out(" Blocked enemy attack!\n")
                    else:
                        self._out(f" Recieved {enemy.damage} damage.\n")
                        self.player.take_damage(enemy.damage)
                    enemy.take_damage(1)
                    self._out("Enemy recieved 1 damage!\n")

            if enemy.current_hp == 0:
                self._out("Enemy died :( +1 xp\n")
                self.player.gain_experience()
            else:
                survivors.append(enemy)
        self.enemies = survivors

    def process_turn(self) -> None:
        """Resolve the player's field and any fights, then advance when relics run out."""
        self._visit_field()
        self._fight_enemies()

        if self.relic_count <= 0:
            self._out("Found all relics! Difficulty increases!")
            self.level += 1
            self.player.position = Position(0, 0)
            self._generate_board()

    def move_enemies(self) -> None:
        """Let every enemy take its step."""
        for enemy in self.enemies:
            enemy.move_pattern(self.player.position, self._rng)

    def _spring_trap(self, field: Field) -> None:
        trap = field.stat
        player_level = self.player.stat(trap.type).value
        name = str(trap)

        self._out(f"You stepped on a level {trap.value} {name} trap!\n")
        self._out(f"Your {name} is: {player_level}\n")

        multiplier = float(trap.value - player_level)
        if multiplier == 0:
            multiplier = 1.0
        elif multiplier < 0:
            multiplier = 1.0 / (1.0 + 0.4 * abs(multiplier))
        elif multiplier > 2:
            multiplier = math.sqrt(multiplier) + 0.5

        hurt_chance = RELIC_HURT_CHANCE * multiplier
        self._out(f"Hurt chance is: {hurt_chance * 100:.1f}%\n")

        prompt = f"Try your luck (1) or permanently loose 1 {name} (2) to escape? "
        while True:
            choice = self._ask(prompt).strip()[:1]
            if choice in ("1", "2"):
                break
            if choice:
                prompt = "Invalid input, try again: "

        if choice == "1":
            if self._rng.random() < hurt_chance:
                if self.player.use_scroll():
                    self._out("Used Teleportation Scroll and escaped!\n")
                else:
                    self._out("You got hurt!\n")
                    self.player.take_damage(1)
            else:
                self._out("You escaped!\n")
            return

        if self.player.stat(trap.type).value < 1:
            self._out(f"Not enough {name}! You hurt yourself in confusion!")
            self.player.take_damage(1)
            return
        self.player.reduce_stat(trap.type)
        self._out(f"You lost 1 {name}!\n")

    def _generate_board(self) -> None:
        self._generate_enemies()
        self.relic_count = 0

        for i in range(MAX_FIELDSIZE):
            for j in range(MAX_FIELDSIZE):
                field_type = self._random_field_type()
                if (i, j) == (0, 0) and field_type is FieldType.TRAP:
                    field_type = FieldType.EMPTY

                level = 0 if self.level == 0 else self._rng.randrange(self.level)
                field = Field(field_type, level, rng=self._rng)

                intelligence = self.player.stat(StatType.INTELLIGENCE).value
                if intelligence != 0 and self._rng.random() < intelligence / 100.0:
                    field.revealed = True
                self.fields[i][j] = field

                if field_type is FieldType.RELIC:
                    self.relic_count += 1

        if self.relic_count == 0:
            for row in self.fields:
                for j, field in enumerate(row):
                    if field.type is FieldType.EMPTY:
                        row[j] = Field(FieldType.RELIC, self.level, rng=self._rng)
                        self.relic_count += 1

    def _generate_enemies(self) -> None:
        for _ in range(min(self.level, _MAX_ENEMY_WAVES)):
            roll = self._rng.randrange(3)
            if roll == 1:
                x = self._rng.randrange(4) + 1
                y = self._rng.randrange(4) + 1
                self.enemies.append(Enemy(Pattern.STATIONARY, Position(x, y), 1, 2))
            elif roll == 2:
                self.enemies.append(Enemy(Pattern.RANDOM, Position(4, 4), 1, 1))
            else:
                x = self._rng.randrange(5)
                y = self._rng.randrange(5)
                if (x, y) == (0, 0):
                    x += 1
                self.enemies.append(Enemy(Pattern.RANDOM, Position(x, y), 2, 1))