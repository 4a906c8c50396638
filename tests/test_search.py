import random
from math import inf

import pytest

from dropfour.ai.search import SearchStats, best_moves, choose_best, minimax, score_moves
from dropfour.core.board import Board
from dropfour.types import Piece

from helpers import play, random_position


def red_to_move_with_win_at_3() -> Board:
    # Red holds (0,5) (1,5) (2,5); Yellow has stacked 5 and 6
    board = play(Board(), [6, 0, 6, 1, 5, 2, 5])
    assert board.next_move is Piece.RED
    assert ((3, 5), Piece.RED) in board.threats
    return board


def test_depth_zero_returns_leaf_score():
    board = play(Board(), [0, 1, 0, 1, 0])
    assert minimax(board, 0) == board.score()


def test_terminal_state_returns_score_at_any_depth():
    board = play(Board(), [0, 0, 1, 1, 2, 6, 3])
    assert minimax(board, 4, maximizing=False) == -inf


def test_no_children_falls_back_to_own_score():
    class Stuck:
        def score(self):
            return 7

        def moves(self):
            return iter(())

        def game_over(self):
            return False

    assert minimax(Stuck(), 3, maximizing=True) == 7
    assert minimax(Stuck(), 3, maximizing=False) == 7


def test_generic_over_any_searchable():
    class Node:
        def __init__(self, value, children=()):
            self.value = value
            self.children = children

        def score(self):
            return self.value

        def moves(self):
            return iter(self.children)

        def game_over(self):
            return not self.children

    tree = Node(0, [
        Node(0, [Node(3), Node(5)]),
        Node(0, [Node(6), Node(9)]),
        Node(0, [Node(1), Node(2)]),
    ])
    assert minimax(tree, 2, maximizing=True) == 6
    assert minimax(tree, 2, maximizing=False) == 2
    assert minimax(tree, 2, maximizing=True, prune=False) == 6


def test_pruning_cuts_siblings_in_textbook_tree():
    class Node:
        def __init__(self, value, children=()):
            self.value = value
            self.children = children

        def score(self):
            return self.value

        def moves(self):
            return iter(self.children)

        def game_over(self):
            return not self.children

    tree = Node(0, [
        Node(0, [Node(3), Node(5)]),
        Node(0, [Node(2), Node(9)]),  # 9 never needs a look
    ])
    pruned, full = SearchStats(), SearchStats()
    assert minimax(tree, 2, stats=pruned) == minimax(tree, 2, prune=False, stats=full) == 3
    assert pruned.cutoffs == 1
    assert pruned.nodes == full.nodes - 1


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("depth", [1, 2, 3])
def test_alpha_beta_matches_exhaustive_minimax(seed, depth):
    board = random_position(seed, plies=6 + seed % 10)
    maximizing = board.next_move is Piece.RED
    pruned, full = SearchStats(), SearchStats()

    a = minimax(board, depth, maximizing=maximizing, prune=True, stats=pruned)
    b = minimax(board, depth, maximizing=maximizing, prune=False, stats=full)

    assert a == b
    assert pruned.nodes <= full.nodes


@pytest.mark.parametrize("seed", range(6))
def test_alpha_beta_matches_exhaustive_on_small_board(seed):
    board = random_position(seed, plies=4, width=5, height=4)
    maximizing = board.next_move is Piece.RED
    assert minimax(board, 5, maximizing=maximizing) == minimax(
        board, 5, maximizing=maximizing, prune=False
    )


def test_score_moves_covers_every_legal_column():
    board = play(Board(width=4, height=2), [1, 1])
    scored = score_moves(board, 1)
    assert [col for _, col, _ in scored] == [0, 2, 3]


def test_red_takes_immediate_win():
    board = red_to_move_with_win_at_3()
    for depth in (0, 1, 2):
        choice = choose_best(board, depth, random.Random(0))
        assert choice is not None
        score, col, child = choice
        assert col == 3
        assert score == inf
        assert child.winner is Piece.RED


def test_yellow_takes_immediate_win():
    board = play(Board(), [0, 0, 1, 1, 2, 6])
    assert board.next_move is Piece.YELLOW
    tied = best_moves(score_moves(board, 2), Piece.YELLOW)
    assert [col for _, col, _ in tied] == [3]
    assert tied[0][0] == -inf


def test_yellow_blocks_red_win():
    board = play(Board(), [6, 0, 6, 1, 5, 2])
    assert board.next_move is Piece.YELLOW
    _, col, _ = choose_best(board, 1, random.Random(0))
    assert col == 3


def test_ties_are_broken_at_random():
    board = Board()
    tied = best_moves(score_moves(board, 0), board.next_move)
    assert len(tied) == 7

    picks = {choose_best(board, 0, random.Random(seed))[1] for seed in range(50)}
    assert len(picks) > 1
    assert picks <= set(range(7))


def test_choose_best_on_full_board_is_none():
    board = Board(width=3, height=3)
    play(board, [0, 0, 0, 1, 1, 1, 2, 2, 2])
    assert choose_best(board, 3) is None
    assert best_moves([], Piece.RED) == []


@pytest.mark.parametrize("maximizing", [True, False])
@pytest.mark.parametrize("prune", [True, False])
def test_none_bounds_mean_open_window(maximizing, prune):
    board = play(Board(), [0, 1, 0, 1, 0])
    assert minimax(board, 2, None, None, maximizing, prune=prune) == minimax(
        board, 2, maximizing=maximizing, prune=prune
    )
    assert minimax(board, 2, None, 3, maximizing) == minimax(board, 2, -inf, 3, maximizing)
