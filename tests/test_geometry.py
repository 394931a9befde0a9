import pytest

from deepcrawl.geometry import Position, Rectangle, main


def test_position_str_uses_short_format():
    assert str(Position(1.5, 2.0)) == "(1.5, 2)"


def test_top_right_is_stored_position():
    pos = Position(3.0, 4.0)
    rect = Rectangle(pos, 1.0, 2.0)
    assert rect.top_right() == pos


@pytest.mark.parametrize(
    "x, y, width, height",
    [(1.3, 2.01, 4.2, 3.4), (0.0, 0.0, 1.0, 1.0), (-5.0, 7.5, 2.5, 0.5)],
)
def test_bottom_left_is_offset_by_size(x, y, width, height):
    rect = Rectangle(Position(x, y), width, height)
    bl = rect.bottom_left()
    tr = rect.top_right()
    assert tr.x - bl.x == pytest.approx(width)
    assert tr.y - bl.y == pytest.approx(height)


def test_area_of_unit_square():
    assert Rectangle(Position(0.0, 0.0), 1.0, 1.0).area() == 1.0


def test_area_scales_with_width():
    small = Rectangle(Position(0.0, 0.0), 2.0, 3.0)
    large = Rectangle(Position(0.0, 0.0), 4.0, 3.0)
    assert large.area() == pytest.approx(2 * small.area())


def test_main_prints_sample(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Top Right: (1.3, 2.01)"
    assert lines[2] == "Area: 14.28"
    assert lines[0].startswith("Bottom Left: (")