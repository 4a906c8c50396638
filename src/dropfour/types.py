# src/dropfour/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Tuple

Position = Tuple[int, int]  # (column, row), row 0 is the top
Move = NewType("Move", int)  # column index


class Piece(Enum):
    RED = "Red"
    YELLOW = "Yellow"
    EMPTY = "Empty"

    def opponent(self) -> "Piece":
        if self is Piece.RED:
            return Piece.YELLOW
        if self is Piece.YELLOW:
            return Piece.RED
        return Piece.EMPTY

    def __str__(self) -> str:
        return self.value


COLORS = (Piece.RED, Piece.YELLOW)
