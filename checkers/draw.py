"""
Draw-by-agreement bookkeeping.
A pending request is cleared by any accepted game action.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Hashable, Optional

from loguru import logger

from .player import Player

if TYPE_CHECKING:
    from .game import Checkers


@dataclass(slots=True)
class DrawHandler:
    game: "Checkers" = field(repr=False)
    requested_by: Optional[Player] = None

    @property
    def pending(self) -> bool:
        return self.requested_by is not None

    def reset(self) -> None:
        self.requested_by = None

    def request(self, identity: Hashable) -> bool:
        """Offer a draw. Returns False if the game is over or the identity is unknown."""
        player = self.game.get_player(identity)
        if player is None or self.game.completed:
            return False
        self.requested_by = player
        logger.info(f"{player} offered a draw")
        return True

    def accept(self, identity: Hashable) -> bool:
        """Accept the opponent's pending offer, ending the game without a winner."""
        player = self.game.get_player(identity)
        if player is None or self.game.completed:
            return False
        if self.requested_by is None or player == self.requested_by:
            return False
        logger.info(f"{player} accepted the draw offered by {self.requested_by}")
        self.reset()
        self.game.end_game()
        return True
