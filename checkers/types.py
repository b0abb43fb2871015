from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable

from .config import BOARD_SIZE


class Color(Enum):
    """The two sides of a game. RED starts on the low rows."""

    RED = "red"
    WHITE = "white"

    @property
    def forward(self) -> int:
        """Row delta of a forward step for a regular piece of this side."""
        return 1 if self is Color.RED else -1

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.RED else Color.RED


@dataclass(frozen=True, slots=True)
class Coordinate:
    row: int
    column: int

    def __post_init__(self) -> None:
        if not Coordinate.is_valid(self.row, self.column):
            raise ValueError(
                f"Coordinate ({self.row}, {self.column}) is outside the "
                f"{BOARD_SIZE}x{BOARD_SIZE} board"
            )

    @staticmethod
    def is_valid(row: int, column: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE

    def offset(self, d_row: int, d_column: int) -> Coordinate | None:
        """Shifted coordinate, or None when it would fall off the board."""
        row, column = self.row + d_row, self.column + d_column
        if not Coordinate.is_valid(row, column):
            return None
        return Coordinate(row, column)

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


class ResponseType(Enum):
    SUCCESS = "success"
    GAME_OVER = "game_over"
    INVALID_TURN = "invalid_turn"
    INVALID_SELECTION = "invalid_selection"
    HAVE_TO_ATTACK = "have_to_attack"
    MUST_COMPLETE_JUMPS = "must_complete_jumps"
    INVALID_MOVE = "invalid_move"


class TurnState(Enum):
    AWAITING_SELECTION = "awaiting_selection"
    PIECE_SELECTED = "piece_selected"
    CHAIN_CAPTURE = "chain_capture"  # piece selected and must keep jumping
    GAME_OVER = "game_over"


@dataclass(slots=True)
class Action:
    """A click from the outside world: select, deselect or move, by context."""

    player: Hashable
    location: Coordinate


@dataclass(slots=True)
class Response:
    success: bool
    type: ResponseType

    @classmethod
    def ok(cls) -> "Response":
        return cls(True, ResponseType.SUCCESS)

    @classmethod
    def reject(cls, response_type: ResponseType) -> "Response":
        return cls(False, response_type)
