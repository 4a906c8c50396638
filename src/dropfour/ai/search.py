from __future__ import annotations

from dataclasses import dataclass
from math import inf
import random
from typing import Iterable, List, Optional, Protocol, Tuple

from dropfour.core.board import Board
from dropfour.types import Piece


class Searchable(Protocol):
    """Anything minimax can walk: a two-player zero-sum position."""

    def score(self) -> float:
        ...

    def moves(self) -> Iterable["Searchable"]:
        ...

    def game_over(self) -> bool:
        ...


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def minimax(
    state: Searchable,
    depth: int,
    alpha: Optional[float] = None,
    beta: Optional[float] = None,
    maximizing: bool = True,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Depth-limited minimax. The leaf heuristic doubles as the terminal
    evaluator: decided games already score at the extremes.

    With `prune`, a layer stops visiting siblings once beta <= alpha. The
    returned value is the same as the exhaustive search.
    """
    alpha = -inf if alpha is None else alpha
    beta = inf if beta is None else beta

    if stats is not None:
        stats.nodes += 1

    if depth == 0 or state.game_over():
        return state.score()

    if maximizing:
        best: Optional[float] = None
        for child in state.moves():
            v = minimax(child, depth - 1, alpha, beta, False, prune=prune, stats=stats)
            best = v if best is None else max(best, v)
            alpha = max(alpha, v)
            if prune and beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return state.score() if best is None else best

    best = None
    for child in state.moves():
        v = minimax(child, depth - 1, alpha, beta, True, prune=prune, stats=stats)
        best = v if best is None else min(best, v)
        beta = min(beta, v)
        if prune and beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return state.score() if best is None else best


ScoredMove = Tuple[float, int, Board]


def score_moves(
    board: Board,
    depth: int,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> List[ScoredMove]:
    """
    Score every legal move of `board`. Each child is searched on its own full
    window so the scores are exact and ties are real ties.
    """
    out: List[ScoredMove] = []
    for col, child in board.successors():
        maximizing = child.next_move is Piece.RED
        s = minimax(child, depth, -inf, inf, maximizing, prune=prune, stats=stats)
        out.append((s, col, child))
    return out


def best_moves(scored: List[ScoredMove], to_play: Piece) -> List[ScoredMove]:
    if not scored:
        return []
    pick = max if to_play is Piece.RED else min
    target = pick(s for (s, _, _) in scored)
    return [m for m in scored if m[0] == target]


def choose_best(
    board: Board,
    depth: int,
    rng: Optional[random.Random] = None,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> Optional[ScoredMove]:
    """
    Best move for the side to move, ties broken uniformly at random.
    None when the board has no legal moves.
    """
    tied = best_moves(score_moves(board, depth, prune=prune, stats=stats), board.next_move)
    if not tied:
        return None
    return (rng or random).choice(tied)
