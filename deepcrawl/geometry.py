"""Points and axis-aligned rectangles anchored at their top-right corner."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass
class Rectangle:
    """A rectangle whose stored position is its top-right corner."""

    position: Position
    width: float
    height: float

    def area(self) -> float:
        """Return width times height."""
        return self.width * self.height

    def bottom_left(self) -> Position:
        """Return the corner opposite the stored position."""
        return Position(self.position.x - self.width, self.position.y - self.height)

    def top_right(self) -> Position:
        """Return the stored corner."""
        return self.position


def main(argv: list[str] | None = None) -> int:
    """Print the corners and area of a sample rectangle."""
    rect = Rectangle(Position(1.3, 2.01), 4.2, 3.4)
    out = sys.stdout
    out.write(f"Bottom Left: {rect.bottom_left()}\n")
    out.write(f"Top Right: {rect.top_right()}\n")
    out.write(f"Area: {rect.area():g}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())