from __future__ import annotations

import random
from typing import Dict, Hashable, Optional, Union

import numpy as np
from loguru import logger

from .board import Board
from .config import config
from .draw import DrawHandler
from .moves import Move, MoveCollection
from .piece import Piece
from .player import Player
from .types import Action, Color, Coordinate, Response, ResponseType, TurnState


class Checkers:
    """
    Checkers rules engine coordinating board, players and the turn protocol.

    Every click arrives as an Action. With nothing selected the click selects
    one of the player's pieces; with a piece selected it either deselects it
    (same square) or moves it. Captures are mandatory, and a piece that
    captured keeps the turn for as long as it can capture again.
    """

    def __init__(
        self,
        player1: Hashable,
        player2: Hashable,
        rng: Optional[random.Random] = None,
    ):
        if player1 == player2:
            raise ValueError("A game needs two distinct players")
        self._players: Dict[Hashable, Player] = {}
        self.player1 = self._register_player(player1, Color.RED)
        self.player2 = self._register_player(player2, Color.WHITE)

        self.board = Board()
        self.rng = rng if rng is not None else random.Random(config.SEED)
        self.draw_handler = DrawHandler(self)

        self.current_turn: Player = self.player1
        self.winner: Optional[Player] = None
        self.state = TurnState.AWAITING_SELECTION
        self._selected: Optional[Coordinate] = None

        self.reset_board()

    # --- Players ---
    def _register_player(self, identity: Hashable, color: Color) -> Player:
        return self._players.setdefault(identity, Player(identity, color))

    def get_player(self, identity: Hashable) -> Optional[Player]:
        return self._players.get(identity)

    def player_for(self, color: Color) -> Player:
        return self.player1 if self.player1.color is color else self.player2

    # --- State views ---
    @property
    def selected_piece(self) -> Optional[Coordinate]:
        return self._selected

    @property
    def must_take_moves(self) -> bool:
        return self.state is TurnState.CHAIN_CAPTURE

    @property
    def completed(self) -> bool:
        return self.state is TurnState.GAME_OVER

    # --- Board access ---
    def reset_board(self) -> None:
        self.board.reset()
        self._remove_selection()
        self.winner = None
        self.state = TurnState.AWAITING_SELECTION
        self.draw_handler.reset()
        self._reset_turn()
        logger.info(f"Board reset, {self.current_turn} moves first")

    def get_piece(self, coordinate: Optional[Coordinate]) -> Optional[Piece]:
        return self.board.get_piece(coordinate)

    def set_piece(self, piece: Piece) -> None:
        self.board.set_piece(piece)

    def is_at_border(self, coordinate: Coordinate) -> bool:
        return self.board.is_at_border(coordinate)

    def get_pieces_left(self, side: Union[Player, Color]) -> int:
        color = side.color if isinstance(side, Player) else side
        return self.board.pieces_left(color)

    def board_array(self) -> np.ndarray:
        return self.board.to_array()

    # --- Moves ---
    def get_all_moves(self, subject: Union[Player, Piece]) -> MoveCollection:
        """Candidate moves of a single piece, or of every piece a player owns."""
        if isinstance(subject, Piece):
            return subject.possible_moves(self.board)
        moves = MoveCollection()
        for piece in self.board.pieces(subject.color):
            moves.extend(piece.possible_moves(self.board))
        return moves

    def legal_destinations(self, coordinate: Coordinate) -> set[Coordinate]:
        """
        Squares the piece at ``coordinate`` may move to this turn.

        Takes the turn and the mandatory-capture rule into account: only the
        side to move has destinations, during a chain capture only the
        capturing piece does, and while its side has a capture available only
        the piece's jumps are listed.
        """
        if self.completed:
            return set()
        piece = self.get_piece(coordinate)
        if piece is None or piece.is_empty or piece.owner is not self.current_turn.color:
            return set()
        if self.state is TurnState.CHAIN_CAPTURE and coordinate != self._selected:
            return set()
        moves = self.get_all_moves(piece)
        if self.get_all_moves(self.player_for(piece.owner)).has_an_attack_move():
            moves = moves.attack_moves()
        return moves.destinations()

    # --- Action protocol ---
    def handle_action(self, action: Action) -> Response:
        if self.completed:
            return self._reject(action, ResponseType.GAME_OVER)
        player = self.get_player(action.player)
        # Only process actions for the current player
        if player is None or player != self.current_turn:
            return self._reject(action, ResponseType.INVALID_TURN)

        self.draw_handler.reset()

        if self.state is TurnState.AWAITING_SELECTION:
            return self._handle_selection(player, action)
        return self._handle_move(player, action)

    def _reject(self, action: Action, response_type: ResponseType) -> Response:
        logger.debug(
            f"Rejected action by {action.player} at {action.location}: {response_type.name}"
        )
        return Response.reject(response_type)

    def _handle_selection(self, player: Player, action: Action) -> Response:
        piece = self.get_piece(action.location)
        if piece is None or not piece.belongs_to(player.color):
            return self._reject(action, ResponseType.INVALID_SELECTION)

        # A capture anywhere forces the player to pick a piece that can capture
        if (
            self.get_all_moves(player).has_an_attack_move()
            and not self.get_all_moves(piece).has_an_attack_move()
        ):
            return self._reject(action, ResponseType.HAVE_TO_ATTACK)

        self._apply_selection(piece, TurnState.PIECE_SELECTED)
        logger.debug(f"{player} selected {piece}")
        return Response.ok()

    def _handle_move(self, player: Player, action: Action) -> Response:
        # Player wants to deselect
        if action.location == self._selected:
            if self.must_take_moves:
                return self._reject(action, ResponseType.MUST_COMPLETE_JUMPS)
            self._remove_selection()
            self.state = TurnState.AWAITING_SELECTION
            logger.debug(f"{player} deselected {action.location}")
            return Response.ok()

        moves = self.get_all_moves(player)
        selected_move = moves.find(self._selected, action.location)
        if selected_move is None:
            return self._reject(action, ResponseType.INVALID_MOVE)
        if moves.has_an_attack_move() and not selected_move.must_be_taken:
            return self._reject(action, ResponseType.HAVE_TO_ATTACK)

        landed = selected_move.apply(self.board)
        logger.debug(f"{player} played {selected_move}")
        self._handle_end_turn(selected_move, landed)
        return Response.ok()

    def _handle_end_turn(self, move: Move, landed: Piece) -> None:
        self._remove_selection()

        if move.must_be_taken and self.get_all_moves(landed).has_an_attack_move():
            self._apply_selection(landed, TurnState.CHAIN_CAPTURE)
            logger.debug(f"{landed} must keep jumping")
        else:
            self._process_turn()
            self.state = TurnState.AWAITING_SELECTION

        self.check_end_game()

    # --- Selection highlighting ---
    def _apply_selection(self, piece: Piece, state: TurnState) -> None:
        self._selected = piece.coordinate
        self.set_piece(piece.with_flags(selected=True))
        self.get_all_moves(piece).apply_formatting(self.board)
        self.state = state

    def _remove_selection(self) -> None:
        self._selected = None
        for piece in list(self.board.pieces()):
            if piece.selected or piece.used:
                self.set_piece(piece.with_flags())

    # --- Turns and game end ---
    def check_end_game(self) -> bool:
        """End the game if either side has no legal move left; RED is checked first."""
        for player in (self.player1, self.player2):
            if self.get_all_moves(player).is_empty():
                self.winner = self.player2 if player == self.player1 else self.player1
                self.end_game()
                logger.info(f"Game over: {player} has no moves, {self.winner} wins")
                return True
        return False

    def end_game(self) -> None:
        self.state = TurnState.GAME_OVER
        self._remove_selection()

    def _reset_turn(self) -> None:
        if self.rng.random() < 0.5:
            self.current_turn = self.player1
        else:
            self.current_turn = self.player2

    def _process_turn(self) -> None:
        # Hand the turn to the other side
        if self.current_turn == self.player1:
            self.current_turn = self.player2
        else:
            self.current_turn = self.player1
