# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from dropfour.config import HEIGHT, WIDTH
from dropfour.core.grid import Grid
from dropfour.core.scoring import evaluate
from dropfour.core.threats import Threat, threats_through
from dropfour.types import Piece, Position

PIECE_GLYPHS = {Piece.RED: "0", Piece.YELLOW: "O"}
THREAT_GLYPHS = {
    (True, True): "B",
    (True, False): "R",
    (False, True): "Y",
    (False, False): " ",
}


@dataclass(slots=True, eq=False)
class Board:
    width: int = WIDTH
    height: int = HEIGHT
    grid: Grid[Piece] = field(default=None)  # type: ignore[assignment]
    drop_zones: List[int] = field(default_factory=list)
    threats: Set[Threat] = field(default_factory=set)
    winner: Optional[Piece] = None
    next_move: Piece = Piece.YELLOW
    show_threats: bool = False
    last_move: Optional[Position] = None

    def __post_init__(self) -> None:
        if self.grid is None:
            self.grid = Grid(self.width, self.height, Piece.EMPTY)
        if not self.drop_zones:
            self.drop_zones = [self.height] * self.width

    @classmethod
    def new_with_size(cls, width: int, height: int) -> "Board":
        return cls(width=width, height=height)

    @classmethod
    def new(cls) -> "Board":
        return cls()

    def copy(self) -> "Board":
        return Board(
            width=self.width,
            height=self.height,
            grid=self.grid.copy(),
            drop_zones=self.drop_zones[:],
            threats=set(self.threats),
            winner=self.winner,
            next_move=self.next_move,
            show_threats=self.show_threats,
            last_move=self.last_move,
        )

    def get(self, x: int, y: int) -> Piece:
        return self.grid.get(x, y)

    def set(self, x: int, y: int, piece: Piece) -> None:
        """
        Write a piece and keep the threat set current.
        Filling a cell that was already a threat for `piece` wins the game.
        """
        self.grid.set(x, y, piece)
        if self.winner is None and ((x, y), piece) in self.threats:
            self.winner = piece
        self.threats = {t for t in self.threats if t[0] != (x, y)}
        self.threats |= threats_through(self.grid, x, y)

    def drop(self, column: int) -> Optional[int]:
        if column < 0 or column >= self.width:
            raise IndexError(f"Column {column} out of range.")
        if self.drop_zones[column] == 0:
            return None

        self.drop_zones[column] -= 1
        row = self.drop_zones[column]
        self.set(column, row, self.next_move)
        self.next_move = self.next_move.opponent()
        self.last_move = (column, row)
        return row

    def is_full(self) -> bool:
        return all(z == 0 for z in self.drop_zones)

    def legal_columns(self) -> List[int]:
        return [c for c in range(self.width) if self.drop_zones[c] > 0]

    # --- search protocol ---

    def score(self) -> float:
        return evaluate(self)

    def game_over(self) -> bool:
        return self.winner is not None or self.is_full()

    def successors(self) -> Iterator[Tuple[int, "Board"]]:
        for c in range(self.width):
            if self.drop_zones[c] == 0:
                continue
            child = self.copy()
            child.drop(c)
            yield c, child

    def moves(self) -> Iterator["Board"]:
        for _, child in self.successors():
            yield child

    # --- presentation ---

    def is_threat(self, pos: Position, piece: Piece) -> bool:
        return (pos, piece) in self.threats

    def glyph(self, x: int, y: int, show_threats: Optional[bool] = None) -> str:
        piece = self.grid.get(x, y)
        if piece is not Piece.EMPTY:
            return PIECE_GLYPHS[piece]
        if show_threats is None:
            show_threats = self.show_threats
        if not show_threats:
            return " "
        pos = (x, y)
        return THREAT_GLYPHS[(self.is_threat(pos, Piece.RED), self.is_threat(pos, Piece.YELLOW))]

    def __str__(self) -> str:
        lines = []
        for y in range(self.height):
            cells = " ".join(self.glyph(x, y) for x in range(self.width))
            lines.append(f"| {cells} |")
        return "\n".join(lines) + "\n"

    # Threats, winner and last move are derived from the grid.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid and self.next_move == other.next_move

    def __hash__(self) -> int:
        return hash((self.grid, self.next_move))
