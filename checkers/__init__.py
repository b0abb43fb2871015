"""
Checkers rules engine.
Board state, legal moves, mandatory captures, multi-jumps, promotion and
end-of-game detection for 8x8 draughts.
"""

from checkers.board import Board
from checkers.config import Config, config
from checkers.draw import DrawHandler
from checkers.game import Checkers
from checkers.moves import Move, MoveCollection, MoveKind
from checkers.piece import Piece, PieceKind
from checkers.player import Player
from checkers.types import (
    Action,
    Color,
    Coordinate,
    Response,
    ResponseType,
    TurnState,
)

__all__ = [
    "Checkers",
    "Board",
    "Piece",
    "PieceKind",
    "Move",
    "MoveKind",
    "MoveCollection",
    "Player",
    "DrawHandler",
    "Action",
    "Response",
    "ResponseType",
    "Color",
    "Coordinate",
    "TurnState",
    "Config",
    "config",
]
