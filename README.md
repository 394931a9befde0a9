# deepcrawl

A handful of small games and exercises that run in a terminal.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Games

### Oasen crawler

```
deepcrawl-oasen
```

A turn-based dungeon crawl on a 5×5 board, starting in the top-left corner.
Move with `w`, `a`, `s`, `d`. Collect every relic (`R`) on the board to
advance to the next level; from the first level on, enemies join the board,
up to three new ones per level. Unrevealed tiles are drawn as `*`; a higher
Intelligence makes more tiles start revealed. Along the way you will meet:

- traps (`^`) that test your Intelligence, Strength or Luck — try your luck,
  or give up a point of the stat to escape;
- wells (`+`) that restore one health point and, if you are lucky, another
  point of health, a point of experience or an item;
- enemies (`#`) that wander at random, or stand still and stay hidden until
  you are next to them.

Relics give experience and an item: a sword (defeats the next enemy you
meet), a potion (saves you once when your health reaches zero) or a
teleportation scroll (escapes a failed trap). Each level-up lets you raise a
stat with `i`, `s` or `l`. The game ends when your health reaches zero and no
potion is left, and your final stats are shown.

### Deep miner

```
deepcrawl-deepminer
```

Pick a robot and play it against a CPU robot of a different kind on a 5×5
world of ten-layer columns:

- MathBot sorts its column and takes the smallest value;
- DoubleBot takes the top two layers;
- GamblerBot takes the top layer, doubled or halved at random.

You may let the CPU move your robot too. Otherwise move with `A`, `D`, `W`,
`S`; choosing `F` (stay still) ends the match. The match also ends when every
column is mined out. The map shows how deep each column still is; on the first
drawing your robot is green and the opponent red. Scores are not printed —
`GameManager.start_game` returns both robots, whose `points` hold them.

## Exercises

```
deepcrawl-rectangle
```

Builds a rectangle from its top-right corner, width and height, and prints
its corners and area.

```
deepcrawl-heaparray
```

Shows that a copy of a `HeapArray` grows independently of the original.

## Using the modules

Anything that reads input or prints output takes `ask` and `out` callables,
and anything random takes an `rng` (a `random.Random`), so a game can be
scripted and reproduced:

```python
import random
from deepcrawl.geometry import Position, Rectangle

rect = Rectangle(Position(1.3, 2.01), 4.2, 3.4)
print(rect.area(), rect.bottom_left(), rect.top_right())

from deepcrawl.bettermine.map import Map3D, Position as Cell

world = Map3D(5, 5, 10, random.Random(1))
print(world.mine_position(Cell(0, 0)))
print(world.display(10, Cell(0, 0), Cell(4, 4)))
```

Modules:

- `deepcrawl.geometry` — `Position`, `Rectangle`.
- `deepcrawl.heaparray` — `HeapArray`.
- `deepcrawl.deepminer.world`, `.robots`, `.game` — the deep miner match.
- `deepcrawl.bettermine.map` — `Map3D`, `Position`, `Sort`, `layer_char`.
- `deepcrawl.bettermine.bot` — `Bot`, `Direction`, `handle_bot_input`.
- `deepcrawl.oasen.stats`, `.entities`, `.player`, `.board`, `.game` — the
  Oasen crawler.

## What is not included

`deepcrawl.bettermine` holds the map and the abstract `Bot` with its movement
and turn input, but no concrete bot kinds and no game loop or command: to play
a duel there, subclass `Bot` with your own `mine` method and drive the turns
yourself.