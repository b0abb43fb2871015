import unittest

import numpy as np

from checkers.board import Board
from checkers.piece import Piece, PieceKind
from checkers.types import Color, Coordinate


class TestCoordinate(unittest.TestCase):
    def test_equality_by_value(self):
        self.assertEqual(Coordinate(2, 3), Coordinate(2, 3))
        self.assertEqual(len({Coordinate(2, 3), Coordinate(2, 3)}), 1)

    def test_out_of_range_fails_fast(self):
        for row, column in [(-1, 0), (0, -1), (8, 0), (0, 8)]:
            with self.assertRaises(ValueError):
                Coordinate(row, column)

    def test_offset_off_board_is_none(self):
        self.assertIsNone(Coordinate(0, 0).offset(-1, -1))
        self.assertEqual(Coordinate(0, 0).offset(1, 1), Coordinate(1, 1))


class TestInitialLayout(unittest.TestCase):
    def setUp(self):
        self.board = Board()
        self.board.reset()

    def test_twelve_pieces_per_side(self):
        self.assertEqual(self.board.pieces_left(Color.RED), 12)
        self.assertEqual(self.board.pieces_left(Color.WHITE), 12)

    def test_sides_occupy_their_rows(self):
        for piece in self.board.pieces(Color.RED):
            self.assertIn(piece.coordinate.row, (0, 1, 2))
        for piece in self.board.pieces(Color.WHITE):
            self.assertIn(piece.coordinate.row, (5, 6, 7))
        for row in (3, 4):
            for column in range(8):
                self.assertTrue(self.board.piece_at(row, column).is_empty)

    def test_pieces_on_dark_squares_only(self):
        self.assertTrue(self.board.piece_at(0, 0).belongs_to(Color.RED))
        self.assertTrue(self.board.piece_at(1, 0).is_empty)
        self.assertTrue(self.board.piece_at(1, 1).belongs_to(Color.RED))
        self.assertTrue(self.board.piece_at(7, 1).belongs_to(Color.WHITE))
        self.assertTrue(self.board.piece_at(7, 0).is_empty)

    def test_cells_know_their_coordinate(self):
        for piece in self.board.pieces():
            cell = self.board.get_piece(piece.coordinate)
            self.assertIs(cell, piece)

    def test_out_of_range_lookup_is_none(self):
        self.assertIsNone(self.board.piece_at(8, 0))
        self.assertIsNone(self.board.piece_at(-1, 3))
        self.assertIsNone(self.board.get_piece(None))

    def test_array_snapshot(self):
        grid = self.board.to_array()
        self.assertEqual(grid.shape, (8, 8))
        self.assertEqual(grid.dtype, np.int8)
        self.assertEqual(int((grid > 0).sum()), 12)
        self.assertEqual(int((grid < 0).sum()), 12)
        self.assertEqual(grid[0, 0], 1)
        self.assertEqual(grid[7, 7], -1)

    def test_render_has_one_line_per_row(self):
        self.assertEqual(len(self.board.render().splitlines()), 9)


class TestPieceMoves(unittest.TestCase):
    def setUp(self):
        self.board = Board()

    def place(self, piece: Piece) -> Piece:
        self.board.set_piece(piece)
        return piece

    def test_empty_piece_has_no_moves(self):
        self.assertTrue(self.board.piece_at(3, 3).possible_moves(self.board).is_empty())

    def test_regular_moves_forward_only(self):
        red = self.place(Piece.regular(Color.RED, Coordinate(3, 3)))
        white = self.place(Piece.regular(Color.WHITE, Coordinate(5, 5)))
        self.assertEqual(
            red.possible_moves(self.board).destinations(),
            {Coordinate(4, 2), Coordinate(4, 4)},
        )
        self.assertEqual(
            white.possible_moves(self.board).destinations(),
            {Coordinate(4, 4), Coordinate(4, 6)},
        )

    def test_regular_on_far_row_is_stuck(self):
        red = self.place(Piece.regular(Color.RED, Coordinate(7, 1)))
        self.assertTrue(red.possible_moves(self.board).is_empty())

    def test_king_moves_in_all_directions(self):
        king = self.place(Piece.king(Color.RED, Coordinate(3, 3)))
        self.assertEqual(
            king.possible_moves(self.board).destinations(),
            {Coordinate(2, 2), Coordinate(2, 4), Coordinate(4, 2), Coordinate(4, 4)},
        )

    def test_jump_over_opponent(self):
        red = self.place(Piece.regular(Color.RED, Coordinate(2, 2)))
        self.place(Piece.regular(Color.WHITE, Coordinate(3, 3)))
        moves = red.possible_moves(self.board)
        self.assertTrue(moves.has_an_attack_move())
        jump = moves.find(Coordinate(2, 2), Coordinate(4, 4))
        self.assertIsNotNone(jump)
        self.assertTrue(jump.must_be_taken)
        self.assertEqual(jump.captured, Coordinate(3, 3))

    def test_no_jump_over_own_piece_or_into_occupied_cell(self):
        red = self.place(Piece.regular(Color.RED, Coordinate(2, 2)))
        self.place(Piece.regular(Color.RED, Coordinate(3, 3)))
        self.place(Piece.regular(Color.WHITE, Coordinate(3, 1)))
        self.place(Piece.regular(Color.WHITE, Coordinate(4, 0)))
        self.assertTrue(red.possible_moves(self.board).is_empty())

    def test_no_jump_off_the_board(self):
        red = self.place(Piece.regular(Color.RED, Coordinate(6, 6)))
        self.place(Piece.regular(Color.WHITE, Coordinate(7, 7)))
        moves = red.possible_moves(self.board)
        self.assertFalse(moves.has_an_attack_move())
        self.assertEqual(moves.destinations(), {Coordinate(7, 5)})

    def test_regular_does_not_capture_backward(self):
        red = self.place(Piece.regular(Color.RED, Coordinate(4, 4)))
        self.place(Piece.regular(Color.WHITE, Coordinate(3, 3)))
        self.assertFalse(red.possible_moves(self.board).has_an_attack_move())

    def test_king_captures_backward(self):
        king = self.place(Piece.king(Color.RED, Coordinate(4, 4)))
        self.place(Piece.regular(Color.WHITE, Coordinate(3, 3)))
        self.assertIsNotNone(king.possible_moves(self.board).find(Coordinate(4, 4), Coordinate(2, 2)))

    def test_promotion_only_upgrades_regular(self):
        piece = Piece.regular(Color.WHITE, Coordinate(1, 1))
        self.assertEqual(piece.promoted().kind, PieceKind.KING)
        self.assertIs(Piece.empty(Coordinate(1, 1)).promoted().kind, PieceKind.EMPTY)

    def test_owner_matches_kind(self):
        with self.assertRaises(ValueError):
            Piece(PieceKind.EMPTY, Coordinate(0, 0), Color.RED)
        with self.assertRaises(ValueError):
            Piece(PieceKind.KING, Coordinate(0, 0))


if __name__ == "__main__":
    unittest.main()
