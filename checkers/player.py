from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from .types import Color


@dataclass(frozen=True, slots=True)
class Player:
    """Binds an external player identity to the side it plays for one game."""

    identity: Hashable
    color: Color

    def __str__(self) -> str:
        return f"Player({self.identity}, {self.color.value})"
