from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from dropfour.game.state import GameState
from dropfour.types import Move
from dropfour.ui.prompts import parse_move


@dataclass(slots=True)
class HumanAgent:
    name: str = "Human"
    read: Callable[[str], str] = input

    def ask(self, state: GameState) -> Optional[Move]:
        """
        Read one line for the side to move. Raises ValueError on bad input,
        returns None if the player quits.
        """
        raw = self.read(f"{state.current} move: ")
        return parse_move(raw, state.board)

    def choose_move(self, state: GameState) -> Move:
        move = self.ask(state)
        if move is None:
            raise RuntimeError("Human player quit.")
        return move
