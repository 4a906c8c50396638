from __future__ import annotations
from dataclasses import dataclass, field
import random

from dropfour.game.state import GameState
from dropfour.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.legal_columns()
        if not moves:
            raise ValueError("No valid moves.")
        return Move(self.rng.choice(moves))
