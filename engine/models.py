from enum import Enum
from dataclasses import dataclass
from typing import FrozenSet, Optional

class PlayerId(Enum):
    P1 = 1
    P2 = 2
    P3 = 3

    def next_in(self, count: int) -> "PlayerId":
        # 轮转：1 -> 2 -> ... -> count -> 1
        return PlayerId((self.value % count) + 1)

class Piece(Enum):
    EMPTY = 0
    P1 = 1
    P2 = 2
    P3 = 3

    @staticmethod
    def from_player(p: PlayerId) -> "Piece":
        return Piece(p.value)

    def to_player(self) -> Optional[PlayerId]:
        if self == Piece.EMPTY:
            return None
        return PlayerId(self.value)

class GameMode(Enum):
    TWO_PLAYER = 2
    THREE_PLAYER = 3

    @property
    def player_count(self) -> int:
        return self.value

    def players(self):
        return [PlayerId(i) for i in range(1, self.value + 1)]

@dataclass(frozen=True)
class Position:
    row: int
    col: int

@dataclass(frozen=True)
class Winner:
    player: PlayerId

@dataclass(frozen=True)
class Tie:
    players: FrozenSet[PlayerId]

class GameError(Exception):
    pass

class InvalidConfig(GameError, ValueError):
    """Bad board size or player count at game creation."""

class IllegalMove(GameError):
    """Occupied / out-of-bounds cell, or a placement that captures nothing."""
