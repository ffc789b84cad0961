from __future__ import annotations
from typing import Dict, Union
from .board import Board
from .models import GameMode, PlayerId, Tie, Winner

def count_tiles(board: Board, mode: GameMode) -> Dict[PlayerId, int]:
    """Disc count for every seat in the mode (seats with no discs count 0)."""
    present = board.players_present()
    return {p: present.get(p, 0) for p in mode.players()}

def determine_outcome(scores: Dict[PlayerId, int]) -> Union[Winner, Tie]:
    best = max(scores.values())
    winners = [p for p, n in scores.items() if n == best]
    if len(winners) > 1:
        return Tie(frozenset(winners))
    return Winner(winners[0])
