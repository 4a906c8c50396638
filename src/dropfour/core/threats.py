from __future__ import annotations
from typing import Iterator, List, Set, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.grid import Grid
from dropfour.types import COLORS, Piece, Position

Threat = Tuple[Position, Piece]

# ↘ diagonal, horizontal, ↗ diagonal, vertical
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 0), (-1, 1), (0, 1))

_REACH = CONNECT_N - 1


def line_through(grid: Grid[Piece], x: int, y: int, dx: int, dy: int) -> List[Position]:
    """
    The cells at offsets -3..3 from (x, y) along (dx, dy), clipped to the grid.
    """
    out: List[Position] = []
    for d in range(-_REACH, _REACH + 1):
        px, py = x + d * dx, y + d * dy
        if 0 <= px < grid.width and 0 <= py < grid.height:
            out.append((px, py))
    return out


def lines_through(grid: Grid[Piece], x: int, y: int) -> Iterator[List[Position]]:
    for dx, dy in DIRECTIONS:
        line = line_through(grid, x, y, dx, dy)
        if len(line) >= CONNECT_N:
            yield line


def scan_line(grid: Grid[Piece], line: List[Position]) -> Set[Threat]:
    """
    Slide a CONNECT_N window along the line keeping a running tally per piece.
    A window holding exactly one empty cell and three of one color makes that
    empty cell a threat for the color.
    """
    found: Set[Threat] = set()
    tally = {Piece.RED: 0, Piece.YELLOW: 0, Piece.EMPTY: 0}
    empties: List[Position] = []

    for i, pos in enumerate(line):
        piece = grid.get(*pos)
        tally[piece] += 1
        if piece is Piece.EMPTY:
            empties.append(pos)

        if i >= CONNECT_N:
            early = line[i - CONNECT_N]
            early_piece = grid.get(*early)
            tally[early_piece] -= 1
            if early_piece is Piece.EMPTY:
                empties.remove(early)

        if i >= CONNECT_N - 1 and tally[Piece.EMPTY] == 1:
            gap = empties[0]
            for color in COLORS:
                if tally[color] == CONNECT_N - 1:
                    found.add((gap, color))

    return found


def threats_through(grid: Grid[Piece], x: int, y: int) -> Set[Threat]:
    found: Set[Threat] = set()
    for line in lines_through(grid, x, y):
        found |= scan_line(grid, line)
    return found
