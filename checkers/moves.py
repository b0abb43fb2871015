"""
Moves and move collections.
A Move knows where a piece goes and how to apply itself to a Board; a
MoveCollection answers the questions the engine asks about a set of moves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Set

from loguru import logger

from .types import Coordinate

if TYPE_CHECKING:  # piece builds moves, moves only read pieces
    from .board import Board
    from .piece import Piece


class MoveKind(Enum):
    """Move shapes. The value is a fixed weight tag with no rule meaning."""

    SIMPLE = 1
    JUMP = 5
    KING_SIMPLE = 10
    KING_JUMP = 15

    @property
    def is_jump(self) -> bool:
        return self in (MoveKind.JUMP, MoveKind.KING_JUMP)

    @property
    def is_king_move(self) -> bool:
        return self in (MoveKind.KING_SIMPLE, MoveKind.KING_JUMP)


@dataclass(frozen=True, slots=True)
class Move:
    kind: MoveKind
    origin: Piece  # occupant of the source cell
    target: Piece  # empty cell at the destination
    captured: Optional[Coordinate] = None

    def __post_init__(self) -> None:
        if self.kind.is_jump != (self.captured is not None):
            raise ValueError(f"{self.kind.name} move with captured={self.captured}")

    @property
    def source(self) -> Coordinate:
        return self.origin.coordinate

    @property
    def destination(self) -> Coordinate:
        return self.target.coordinate

    @property
    def must_be_taken(self) -> bool:
        return self.kind.is_jump

    @property
    def weight(self) -> int:
        return self.kind.value

    def apply(self, board: Board) -> Piece:
        """
        Apply the move to the board and return the piece now at the destination.

        The origin cell becomes empty, a relocated copy of the piece is
        installed at the destination (promoted on a border row) and, for a
        jump, the captured cell is emptied.
        """
        landed = self.origin.move_to(self.destination)
        if board.is_at_border(self.destination):
            landed = landed.promoted()

        board.set_piece(self.origin.vacated())
        board.set_piece(landed)

        if self.captured is not None:
            victim = board.get_piece(self.captured)
            board.set_piece(victim.vacated())
            logger.debug(f"{self.origin.owner.value} captured {victim} with {self}")

        return landed

    def __str__(self) -> str:
        return f"{self.kind.name}({self.source} -> {self.destination})"


class MoveCollection:
    """Ordered set of moves for one piece or for every piece of a side."""

    def __init__(self, moves: Optional[Iterable[Move]] = None):
        self._moves: List[Move] = list(moves) if moves is not None else []

    def add(self, move: Move) -> None:
        self._moves.append(move)

    def extend(self, other: Iterable[Move]) -> None:
        self._moves.extend(other)

    def __add__(self, other: MoveCollection) -> MoveCollection:
        return MoveCollection([*self._moves, *other])

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def is_empty(self) -> bool:
        return not self._moves

    def has_an_attack_move(self) -> bool:
        return any(move.must_be_taken for move in self._moves)

    def attack_moves(self) -> MoveCollection:
        return MoveCollection(move for move in self._moves if move.must_be_taken)

    def find(self, source: Coordinate, destination: Coordinate) -> Optional[Move]:
        """First move from source to destination, if any."""
        for move in self._moves:
            if move.source == source and move.destination == destination:
                return move
        return None

    def destinations(self) -> Set[Coordinate]:
        return {move.destination for move in self._moves}

    def apply_formatting(self, board: Board) -> None:
        """Flag every destination cell as ``used`` so the UI can highlight it."""
        for move in self._moves:
            cell = board.get_piece(move.destination)
            board.set_piece(cell.with_flags(selected=cell.selected, used=True))

    def __repr__(self) -> str:
        return f"MoveCollection({[str(move) for move in self._moves]})"
