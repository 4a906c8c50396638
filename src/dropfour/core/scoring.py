from __future__ import annotations
from math import inf
from typing import TYPE_CHECKING

from dropfour.types import Piece

if TYPE_CHECKING:
    from dropfour.core.board import Board

WIN_SCORE = inf
LOSS_SCORE = -inf


def threat_weight(row: int, height: int) -> int:
    """
    Weight of an open threat by its row (0 = top).
    Bottom-row threats are directly playable, so one more ply of search already
    sees them; they count for nothing here.
    """
    if row == height - 1:
        return 0
    return 2 ** row


def evaluate(board: Board) -> float:
    """
    Red is the maximizer, Yellow the minimizer.
    A decided game saturates; otherwise sum the signed weights of open threats.
    """
    if board.winner is Piece.RED:
        return WIN_SCORE
    if board.winner is Piece.YELLOW:
        return LOSS_SCORE

    score = 0
    for (_, row), color in board.threats:
        w = threat_weight(row, board.height)
        if color is Piece.RED:
            score += w
        elif color is Piece.YELLOW:
            score -= w
    return score
