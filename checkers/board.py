"""
Board representation for checkers.
Owns the grid of cells; rule logic lives in pieces, moves and the game.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from .config import BOARD_SIZE, ROWS_PER_SIDE
from .piece import Piece, PieceKind
from .types import Color, Coordinate

# Cell codes used by to_array; sign gives the side, magnitude the kind
_CELL_CODES = {PieceKind.EMPTY: 0, PieceKind.REGULAR: 1, PieceKind.KING: 2}


class Board:
    """
    Grid of ``BOARD_SIZE`` rows, each holding one Piece per column.

    Empty cells hold EMPTY pieces, so every coordinate on the board always
    maps to a piece whose own coordinate matches the cell.
    """

    def __init__(self):
        self.size = BOARD_SIZE
        self.rows: List[List[Piece]] = []
        self.clear()

    def clear(self) -> None:
        """Empty every cell."""
        self.rows = [
            [Piece.empty(Coordinate(row, column)) for column in range(self.size)]
            for row in range(self.size)
        ]

    @staticmethod
    def is_dark_square(row: int, column: int) -> bool:
        return (row + column) % 2 == 0

    def reset(self) -> None:
        """Standard starting position: RED on the low rows, WHITE on the high rows."""
        self.clear()
        for row in range(ROWS_PER_SIDE):
            self._fill_row(row, Color.RED)
            self._fill_row(self.size - 1 - row, Color.WHITE)

    def _fill_row(self, row: int, color: Color) -> None:
        for column in range(self.size):
            if self.is_dark_square(row, column):
                self.set_piece(Piece.regular(color, Coordinate(row, column)))

    # --- Lookup and mutation ---
    def get_piece(self, coordinate: Optional[Coordinate]) -> Optional[Piece]:
        """Occupant of a cell, or None when the coordinate is off the board."""
        if coordinate is None:
            return None
        return self.piece_at(coordinate.row, coordinate.column)

    def piece_at(self, row: int, column: int) -> Optional[Piece]:
        if not (0 <= row < self.size and 0 <= column < self.size):
            return None
        return self.rows[row][column]

    def set_piece(self, piece: Piece) -> None:
        """Install a piece in the cell named by its own coordinate."""
        coordinate = piece.coordinate
        self.rows[coordinate.row][coordinate.column] = piece

    def is_at_border(self, coordinate: Coordinate) -> bool:
        return coordinate.row == 0 or coordinate.row == self.size - 1

    def pieces(self, color: Optional[Color] = None) -> Iterator[Piece]:
        """Every cell in row-major order, or only the pieces of one side."""
        for row in self.rows:
            for piece in row:
                if color is None or piece.belongs_to(color):
                    yield piece

    def pieces_left(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))

    # --- Views ---
    def to_array(self) -> np.ndarray:
        """
        Board as a (size, size) int8 array.

        0 is an empty cell, 1 a regular piece and 2 a king; RED pieces are
        positive and WHITE pieces negative.
        """
        grid = np.zeros((self.size, self.size), dtype=np.int8)
        for piece in self.pieces():
            if piece.is_empty:
                continue
            sign = 1 if piece.owner is Color.RED else -1
            grid[piece.coordinate.row, piece.coordinate.column] = sign * _CELL_CODES[piece.kind]
        return grid

    def render(self) -> str:
        header = "    " + "".join(f"{column:^3}" for column in range(self.size))
        lines = [header]
        for index, row in enumerate(self.rows):
            lines.append(f"{index:>2}  " + "".join(f"{piece.symbol():^3}" for piece in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
