from math import inf, isfinite

import pytest

from dropfour.core.board import Board
from dropfour.core.scoring import LOSS_SCORE, WIN_SCORE, evaluate, threat_weight
from dropfour.types import Piece

from helpers import play, random_position


def test_empty_board_scores_zero():
    assert Board().score() == 0


def test_bottom_row_threat_is_worth_nothing():
    board = play(Board(), [0, 0, 1, 1, 2])
    assert board.threats == {((3, 5), Piece.YELLOW)}
    assert board.score() == 0


def test_threat_weight_grows_with_row_index():
    assert threat_weight(5, 6) == 0
    weights = [threat_weight(r, 6) for r in range(5)]
    assert weights == [1, 2, 4, 8, 16]


def test_signed_threat_sum():
    board = Board()
    board.threats = {
        ((0, 2), Piece.RED),
        ((1, 3), Piece.YELLOW),
        ((4, 0), Piece.RED),
        ((2, 5), Piece.RED),  # bottom row
    }
    assert evaluate(board) == 4 - 8 + 1 + 0


def test_vertical_yellow_threat_scores_negative():
    board = play(Board(), [0, 1, 0, 1, 0])
    # Yellow threatens (0, 2); Red has only two in column 1
    assert ((0, 2), Piece.YELLOW) in board.threats
    assert board.score() == -(2 ** 2)


def test_saturating_scores_follow_winner():
    yellow_win = play(Board(), [0, 0, 1, 1, 2, 6, 3])
    assert yellow_win.winner is Piece.YELLOW
    assert yellow_win.score() == LOSS_SCORE == -inf

    red_win = play(Board(), [6, 0, 6, 1, 5, 2, 5, 3])
    assert red_win.winner is Piece.RED
    assert red_win.score() == WIN_SCORE == inf


@pytest.mark.parametrize("seed", range(20))
def test_undecided_positions_score_finite(seed):
    board = random_position(seed, plies=16)
    if board.winner is None:
        assert isfinite(board.score())
    else:
        assert board.score() == (inf if board.winner is Piece.RED else -inf)
