from __future__ import annotations

import random
from typing import Iterable, Set

from dropfour.core.board import Board
from dropfour.core.threats import Threat
from dropfour.types import COLORS, Piece


def play(board: Board, cols: Iterable[int]) -> Board:
    for col in cols:
        assert board.drop(col) is not None, f"column {col} full"
    return board


def random_position(seed: int, plies: int, width: int = 7, height: int = 6) -> Board:
    """A reproducible mid-game board, stopping early if the game ends."""
    rng = random.Random(seed)
    board = Board(width=width, height=height)
    for _ in range(plies):
        if board.game_over():
            break
        board.drop(rng.choice(board.legal_columns()))
    return board


def brute_force_threats(board: Board) -> Set[Threat]:
    """Every gap completing four-in-a-row, found by scanning all windows."""
    found: Set[Threat] = set()
    steps = ((1, 0), (0, 1), (1, 1), (1, -1))
    for x in range(board.width):
        for y in range(board.height):
            for dx, dy in steps:
                cells = [(x + i * dx, y + i * dy) for i in range(4)]
                if not all(0 <= cx < board.width and 0 <= cy < board.height for cx, cy in cells):
                    continue
                pieces = [board.get(cx, cy) for cx, cy in cells]
                empties = [pos for pos, p in zip(cells, pieces) if p is Piece.EMPTY]
                if len(empties) != 1:
                    continue
                for color in COLORS:
                    if pieces.count(color) == 3:
                        found.add((empties[0], color))
    return found
