from __future__ import annotations
import logging
from typing import Dict, List, Optional, Set, Union
from .board import Board
from .models import (GameError, GameMode, IllegalMove, InvalidConfig, Piece,
                     PlayerId, Position, Tie, Winner)
from .rules import is_legal_move, legal_moves, resolve_captures
from .scoring import count_tiles, determine_outcome

logger = logging.getLogger(__name__)

class Game:
    """
    One game of 2- or 3-player Reversi.
    Owns the board, the seat to move, the score map and the cached legal
    moves for the seat to move. Player 1 opens. Turn passes round-robin,
    skipping seats with no legal move; the game ends when no seat can move
    or the board is full.
    """
    def __init__(self, size: int, mode: GameMode):
        self.mode = mode
        self.board = Board(size)
        self.board.seed(mode)
        self._init_state(PlayerId.P1)

    @classmethod
    def from_board(cls, board: Board, mode: GameMode, current: PlayerId = PlayerId.P1) -> "Game":
        """Build a game around an existing position (copied)."""
        seats = mode.players()
        stray = [p for p in board.players_present() if p not in seats]
        if stray:
            raise InvalidConfig(f"棋盘上出现非本模式玩家: {[p.value for p in stray]}")
        if current not in seats:
            raise InvalidConfig(f"当前玩家不在本模式中: {current.value}")
        game = cls.__new__(cls)
        game.mode = mode
        game.board = board.clone()
        game._init_state(current)
        return game

    def reset(self):
        size = self.board.size
        self.board = Board(size)
        self.board.seed(self.mode)
        self._init_state(PlayerId.P1)

    def _init_state(self, current: PlayerId):
        self.current = current
        self.active = True
        self.last_pos: Optional[Position] = None
        self._scores: Dict[PlayerId, int] = count_tiles(self.board, self.mode)
        self._valid: Set[Position] = legal_moves(self.board, self.mode, current)
        if self.board.is_full():
            self._end()

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def players(self) -> List[PlayerId]:
        return self.mode.players()

    def is_active(self) -> bool:
        return self.active

    def scores(self) -> Dict[PlayerId, int]:
        return dict(self._scores)

    def legal_moves(self) -> Set[Position]:
        return set(self._valid)

    def is_legal(self, row: int, col: int) -> bool:
        if not self.active:
            return False
        return is_legal_move(self.board, self.mode, row, col, self.current)

    def outcome(self) -> Union[Winner, Tie]:
        if self.active:
            raise GameError("对局尚未结束")
        return determine_outcome(self._scores)

    def step(self, row: int, col: int) -> List[Position]:
        """
        Play (row, col) for the current seat and return the flipped positions.
        Raises IllegalMove for a cell that captures nothing, GameError once the
        game is over.
        """
        if not self.active:
            raise GameError("对局已结束")
        if not self._valid:
            # 当前方无子可下：直接轮转，不改动棋盘
            stuck = self.current
            self._advance(stuck)
            raise IllegalMove(f"Player {stuck.value} 无合法着法")
        if not self.is_legal(row, col):
            raise IllegalMove(f"非法：({row},{col}) 不能翻转任一对方棋子")
        pos = Position(row, col)
        mover = self.current
        flips = resolve_captures(self.board, self.mode, row, col, mover)
        me = Piece.from_player(mover)
        # place and flip
        self.board.set(pos, me)
        for q in flips:
            self.board.set(q, me)
        self.last_pos = pos
        self._scores = count_tiles(self.board, self.mode)
        logger.debug("Player %d plays (%d,%d), flips %d", mover.value, row, col, len(flips))
        self._advance(mover.next_in(self.mode.player_count))
        if self.active and self.board.is_full():
            self._end()
        return flips

    def apply_move(self, row: int, col: int) -> "Game":
        if not self.active:
            return self
        try:
            self.step(row, col)
        except IllegalMove as e:
            logger.debug("Ignored move (%d,%d): %s", row, col, e)
        return self

    def _advance(self, start: PlayerId):
        """Hand the turn to the first seat from 'start' that can move, or end."""
        count = self.mode.player_count
        candidate = start
        for _ in range(count):
            moves = legal_moves(self.board, self.mode, candidate)
            if moves:
                self.current = candidate
                self._valid = moves
                return
            logger.info("Player %d has no legal move; turn skipped", candidate.value)
            candidate = candidate.next_in(count)
        self._end()

    def _end(self):
        self.active = False
        self._valid = set()
        logger.info("Game over: %s", {p.value: n for p, n in self._scores.items()})
