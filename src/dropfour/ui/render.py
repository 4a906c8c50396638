from __future__ import annotations
from typing import List, Optional

from dropfour.config import CLEAR_SCREEN, SHOW_THREATS, USE_COLOR
from dropfour.core.board import Board
from dropfour.types import Piece
from dropfour.ui.colors import BOLD, DIM, FG_CYAN, FG_GRAY, FG_MAGENTA, PIECE_COLORS, REVERSE, c

# Threat markers: R = Red threatens, Y = Yellow threatens, B = both
_THREAT_COLORS = {"R": PIECE_COLORS[Piece.RED], "Y": PIECE_COLORS[Piece.YELLOW], "B": FG_MAGENTA}


def _cell(board: Board, x: int, y: int, show_threats: bool, color: bool) -> str:
    glyph = board.glyph(x, y, show_threats)
    piece = board.get(x, y)

    if piece is not Piece.EMPTY:
        s = c(glyph, PIECE_COLORS[piece], color)
        if board.last_move == (x, y):
            s = c(glyph, PIECE_COLORS[piece] + REVERSE, color)
        return s
    if glyph == " ":
        return c("·", FG_GRAY, color)
    return c(glyph, DIM + _THREAT_COLORS[glyph], color)


def board_lines(board: Board, show_threats: bool = SHOW_THREATS, color: bool = USE_COLOR) -> List[str]:
    lines = [c("   " + " ".join(str(i + 1) for i in range(board.width)), DIM, color)]
    for y in range(board.height):
        parts = [_cell(board, x, y, show_threats, color) for x in range(board.width)]
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.width - 1), DIM, color))
    return lines


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(
    board: Board,
    status: str = "",
    show_threats: Optional[bool] = None,
    color: bool = USE_COLOR,
) -> None:
    if show_threats is None:
        show_threats = board.show_threats

    clear_screen()
    print(c("DROP FOUR", BOLD, color))
    print(c(status, FG_CYAN, color) if status else "")
    for line in board_lines(board, show_threats, color):
        print(line)
    print(c(f"   Enter 1-{board.width} to drop. Enter q to quit.", DIM, color))
