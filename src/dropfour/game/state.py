from __future__ import annotations
from dataclasses import dataclass

from dropfour.core.board import Board
from dropfour.types import Piece


@dataclass(slots=True)
class GameState:
    board: Board
    last_status: str = "Yellow starts."

    @property
    def current(self) -> Piece:
        return self.board.next_move
