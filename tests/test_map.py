import random
from collections import Counter

import pytest

from deepcrawl.bettermine.map import Map3D, Position, Sort, layer_char


def make_map(x=5, y=5, z=10, seed=0):
    return Map3D(x, y, z, random.Random(seed))


def test_generated_values_and_shape():
    m = make_map(3, 4, 6)
    assert len(m.grid) == 3
    assert all(len(row) == 4 for row in m.grid)
    values = [v for row in m.grid for col in row for v in col]
    assert len(values) == 3 * 4 * 6
    assert all(1 <= v <= 9 for v in values)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Map3D(-1, 5, 5)


def test_position_is_valid():
    assert Position(0, 0).is_valid(5, 5)
    assert Position(5, 5).is_valid(5, 5)
    assert not Position(-1, 0).is_valid(5, 5)
    assert not Position(0, 6).is_valid(5, 5)


def test_mine_position_pops_top_layer():
    m = make_map()
    m.grid[1][2] = [4, 7, 2]
    assert m.mine_position(Position(1, 2)) == 2
    assert m.grid[1][2] == [4, 7]


def test_mine_empty_column_gives_zero():
    m = make_map()
    m.grid[0][0] = []
    assert m.mine_position(Position(0, 0)) == 0


def test_mine_negative_position_raises():
    with pytest.raises(IndexError):
        make_map().mine_position(Position(-1, 0))


def test_sort_ascending_puts_largest_on_top():
    m = make_map()
    col = list(m.grid[2][2])
    m.sort_position(Position(2, 2), Sort.ASCENDING)
    assert m.mine_position(Position(2, 2)) == max(col)
    assert m.grid[2][2] == sorted(m.grid[2][2])


def test_sort_descending_puts_smallest_on_top():
    m = make_map()
    col = list(m.grid[3][1])
    m.sort_position(Position(3, 1), Sort.DESCENDING)
    assert m.mine_position(Position(3, 1)) == min(col)


def test_sort_random_keeps_values():
    m = make_map()
    before = Counter(m.grid[0][4])
    m.sort_position(Position(0, 4), Sort.RANDOM)
    assert Counter(m.grid[0][4]) == before


def test_sort_out_of_bounds_is_ignored():
    m = make_map()
    snapshot = [[list(c) for c in row] for row in m.grid]
    m.sort_position(Position(-1, 2), Sort.ASCENDING)
    m.sort_position(Position(9, 2), Sort.ASCENDING)
    assert m.grid == snapshot


def test_sort_at_size_edge_raises():
    with pytest.raises(IndexError):
        make_map().sort_position(Position(5, 0), Sort.ASCENDING)


def test_format_position():
    m = make_map()
    m.grid[0][1] = [3, 1, 2]
    assert m.format_position(Position(0, 1)) == "3 1 2 \n"
    assert m.format_position(Position(-1, 1)) == ""


def test_is_empty_after_mining_everything():
    m = make_map(2, 2, 3)
    assert not m.is_empty()
    for x in range(2):
        for y in range(2):
            while m.grid[x][y]:
                m.mine_position(Position(x, y))
    assert m.is_empty()


def test_layer_char():
    assert layer_char(0.0) == " "
    assert layer_char(0.1) == "."
    assert layer_char(1.0) == "@"
    assert layer_char(2.0) == "@"


def test_display_full_map_and_players():
    m = make_map()
    m.grid[4][4] = []
    text = m.display(10, Position(0, 0), Position(4, 4))
    lines = text.split("\n")
    assert lines[0] == "World:"
    assert lines[1].startswith("\033[32m@\033[0m ")
    assert lines[5].endswith("\033[31mo\033[0m ")
    assert lines[3] == "@ " * 5


def test_display_without_players_has_no_colour():
    text = make_map(2, 2, 10).display(10)
    assert "\033[" not in text
    assert text.count("\n") == 3