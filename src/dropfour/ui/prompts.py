from __future__ import annotations
from typing import Optional

from dropfour.core.board import Board
from dropfour.types import Move


def parse_move(raw: str, board: Board) -> Optional[Move]:
    """
    Turn a 1-based column typed by a human into a legal Move.
    None means the player asked to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= board.width:
        raise ValueError(f"Column must be between 1 and {board.width}.")
    if board.drop_zones[col] == 0:
        raise ValueError(f"Column {col + 1} is full.")
    return Move(col)
