"""A fixed-capacity integer array that grows when appended to."""

from __future__ import annotations

import sys


class HeapArray:
    """An array with a capacity and a count of appended elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._slots = [0] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def copy(self) -> HeapArray:
        """Return an independent array with the same capacity and elements."""
        other = HeapArray(self.capacity)
        other._slots[: self._size] = self._slots[: self._size]
        other._size = self._size
        return other

    def _check(self, position: int) -> None:
        if not 0 <= position < self.capacity:
            raise IndexError(f"position {position} outside capacity {self.capacity}")

    def set_element(self, position: int, value: int) -> None:
        """Store value at position; the position must lie within the capacity."""
        self._check(position)
        self._slots[position] = value

    def get_element(self, position: int) -> int:
        """Return the value stored at position."""
        self._check(position)
        return self._slots[position]

    def __len__(self) -> int:
        return self._size

    def add_last(self, value: int) -> None:
        """Append value, doubling the capacity when it is full."""
        if self._size >= self.capacity:
            new_capacity = max(self.capacity * 2, 1)
            self._slots.extend([0] * (new_capacity - self.capacity))
        self._slots[self._size] = value
        self._size += 1


def main(argv: list[str] | None = None) -> int:
    """Show that a copy grows independently of its original."""
    original = HeapArray(2)
    duplicate = original.copy()
    duplicate.add_last(1)
    sys.stdout.write(f"{len(original)}\n{len(duplicate)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())