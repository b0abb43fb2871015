"""
Piece representation for the checkers board.
Every board cell holds a Piece value; an empty cell holds an EMPTY piece.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from .moves import Move, MoveCollection, MoveKind
from .types import Color, Coordinate

if TYPE_CHECKING:  # board imports piece to fill its cells
    from .board import Board

# Row/column deltas of the four diagonals
DIAGONALS: Tuple[Tuple[int, int], ...] = ((1, -1), (1, 1), (-1, -1), (-1, 1))


class PieceKind(Enum):
    EMPTY = "empty"
    REGULAR = "regular"
    KING = "king"


@dataclass(frozen=True, slots=True)
class Piece:
    """
    Immutable occupant of a board cell.

    ``selected`` and ``used`` are highlight flags for the UI: the piece picked
    by the current player, and the cells it may move to. Changing them, like
    moving the piece, means installing an updated copy on the board.
    """

    kind: PieceKind
    coordinate: Coordinate
    owner: Optional[Color] = None
    selected: bool = False
    used: bool = False

    def __post_init__(self) -> None:
        if (self.kind is PieceKind.EMPTY) != (self.owner is None):
            raise ValueError(f"{self.kind.value} piece with owner {self.owner}")

    # --- Constructors ---
    @classmethod
    def empty(cls, coordinate: Coordinate) -> Piece:
        return cls(PieceKind.EMPTY, coordinate)

    @classmethod
    def regular(cls, owner: Color, coordinate: Coordinate) -> Piece:
        return cls(PieceKind.REGULAR, coordinate, owner)

    @classmethod
    def king(cls, owner: Color, coordinate: Coordinate) -> Piece:
        return cls(PieceKind.KING, coordinate, owner)

    # --- Queries ---
    @property
    def is_empty(self) -> bool:
        return self.kind is PieceKind.EMPTY

    @property
    def is_king(self) -> bool:
        return self.kind is PieceKind.KING

    def belongs_to(self, color: Color) -> bool:
        return self.owner is color

    # --- Derived copies ---
    def move_to(self, coordinate: Coordinate) -> Piece:
        """Relocated copy with the highlight flags cleared."""
        return replace(self, coordinate=coordinate, selected=False, used=False)

    def vacated(self) -> Piece:
        """The empty cell left behind when this piece moves away or is captured."""
        return Piece.empty(self.coordinate)

    def promoted(self) -> Piece:
        if self.kind is not PieceKind.REGULAR:
            return self
        return replace(self, kind=PieceKind.KING)

    def with_flags(self, *, selected: bool = False, used: bool = False) -> Piece:
        return replace(self, selected=selected, used=used)

    # --- Move generation ---
    def directions(self) -> Tuple[Tuple[int, int], ...]:
        if self.kind is PieceKind.KING:
            return DIAGONALS
        if self.kind is PieceKind.REGULAR:
            forward = self.owner.forward
            return ((forward, -1), (forward, 1))
        return ()

    def possible_moves(self, board: Board) -> MoveCollection:
        """
        Candidate moves of this piece on the given board.

        A step into an adjacent empty cell is a simple move. A step onto an
        opponent piece followed by an empty landing cell directly behind it
        is a jump, and jumps are always flagged as mandatory.

        Args:
            board: Board the piece stands on

        Returns:
            MoveCollection: Simple and jump moves, in diagonal order
        """
        moves = MoveCollection()
        if self.is_empty:
            return moves

        if self.is_king:
            simple_kind, jump_kind = MoveKind.KING_SIMPLE, MoveKind.KING_JUMP
        else:
            simple_kind, jump_kind = MoveKind.SIMPLE, MoveKind.JUMP

        for d_row, d_column in self.directions():
            neighbour = board.get_piece(self.coordinate.offset(d_row, d_column))
            if neighbour is None:
                continue
            if neighbour.is_empty:
                moves.add(Move(simple_kind, self, neighbour))
                continue
            if neighbour.belongs_to(self.owner):
                continue

            landing = board.get_piece(self.coordinate.offset(2 * d_row, 2 * d_column))
            if landing is None or not landing.is_empty:
                continue
            if landing.coordinate == self.coordinate:
                continue
            moves.add(Move(jump_kind, self, landing, captured=neighbour.coordinate))

        return moves

    def symbol(self) -> str:
        """Short token used by the text renderer."""
        if self.is_empty:
            return "*" if self.used else "."
        char = "r" if self.owner is Color.RED else "w"
        if self.is_king:
            char = char.upper()
        return f"[{char}]" if self.selected else char

    def __str__(self) -> str:
        if self.is_empty:
            return f"Empty{self.coordinate}"
        return f"{self.owner.value}_{self.kind.value}{self.coordinate}"
