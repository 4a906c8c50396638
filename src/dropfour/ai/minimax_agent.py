from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import random
import time

from loguru import logger

from dropfour.ai.search import SearchStats, best_moves, score_moves
from dropfour.config import SEARCH_DEPTH, USE_PRUNING
from dropfour.game.state import GameState
from dropfour.types import Move


def _fmt_score(s: float) -> str:
    if s == inf:
        return "+inf"
    if s == -inf:
        return "-inf"
    return str(int(s))


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    depth: int = SEARCH_DEPTH
    prune: bool = USE_PRUNING
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        if not board.legal_columns():
            raise ValueError("No valid moves.")

        stats = SearchStats()
        start = time.perf_counter()

        scored = score_moves(board, self.depth, prune=self.prune, stats=stats)
        tied = best_moves(scored, board.next_move)
        best_score, best_col, _ = self.rng.choice(tied)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": _fmt_score(best_score),
            "move_col": best_col + 1,
            "tied": len(tied),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "{} ({}) scores {} -> column {} [{} tied, {} nodes, {} cutoffs, {}ms]",
            self.name,
            board.next_move,
            {col: _fmt_score(s) for (s, col, _) in scored},
            best_col,
            len(tied),
            stats.nodes,
            stats.cutoffs,
            self.last_info["time_ms"],
        )
        return Move(best_col)
