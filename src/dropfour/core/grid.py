# src/dropfour/core/grid.py

from __future__ import annotations
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Grid(Generic[T]):
    """
    Dense fixed-size 2-D storage, addressed as (x, y) = (column, row).
    Cells live in one flat list, row-major.
    """

    __slots__ = ("width", "height", "_data")

    def __init__(self, width: int, height: int, default: T) -> None:
        self.width = width
        self.height = height
        self._data: List[T] = [default] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> T:
        return self._data[self._index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        self._data[self._index(x, y)] = value

    def copy(self) -> "Grid[T]":
        g: Grid[T] = Grid.__new__(Grid)
        g.width = self.width
        g.height = self.height
        g._data = self._data[:]
        return g

    def rows(self) -> List[List[T]]:
        w = self.width
        return [self._data[y * w:(y + 1) * w] for y in range(self.height)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, tuple(self._data)))
