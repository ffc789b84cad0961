from __future__ import annotations
from typing import Dict, List
from .config import MIN_BOARD_SIZE, FOURTH_SEED_MIN_SIZE
from .models import GameMode, InvalidConfig, Piece, PlayerId, Position

class Board:
    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidConfig(f"棋盘大小必须为整数: {size!r}")
        if size < MIN_BOARD_SIZE or size % 2 != 0:
            raise InvalidConfig(f"棋盘大小需为不小于 {MIN_BOARD_SIZE} 的偶数: {size}")
        self.size = size
        self.grid: List[List[Piece]] = [[Piece.EMPTY for _ in range(size)] for _ in range(size)]

    def clone(self) -> "Board":
        b = Board(self.size)
        for r in range(self.size):
            for c in range(self.size):
                b.grid[r][c] = self.grid[r][c]
        return b

    def in_bounds(self, p: Position) -> bool:
        return 0 <= p.row < self.size and 0 <= p.col < self.size

    def get(self, p: Position) -> Piece:
        return self.grid[p.row][p.col]

    def set(self, p: Position, piece: Piece):
        self.grid[p.row][p.col] = piece

    def is_empty(self, p: Position) -> bool:
        return self.get(p) == Piece.EMPTY

    def empty_count(self) -> int:
        return sum(1 for row in self.grid for piece in row if piece == Piece.EMPTY)

    def is_full(self) -> bool:
        return self.empty_count() == 0

    def positions(self):
        for r in range(self.size):
            for c in range(self.size):
                yield Position(r, c)

    def seed(self, mode: GameMode):
        """Place the opening discs around the center for the given mode."""
        c = self.size // 2
        if mode == GameMode.TWO_PLAYER:
            self.set(Position(c - 1, c - 1), Piece.P2)
            self.set(Position(c - 1, c), Piece.P1)
            self.set(Position(c, c - 1), Piece.P1)
            self.set(Position(c, c), Piece.P2)
        else:
            # 三人局：三角布局，8 路及以上补第四子
            self.set(Position(c - 1, c - 1), Piece.P1)
            self.set(Position(c - 1, c), Piece.P2)
            self.set(Position(c, c - 1), Piece.P3)
            if self.size >= FOURTH_SEED_MIN_SIZE:
                self.set(Position(c, c), Piece.P1)

    def players_present(self) -> Dict[PlayerId, int]:
        counts: Dict[PlayerId, int] = {}
        for row in self.grid:
            for piece in row:
                owner = piece.to_player()
                if owner is not None:
                    counts[owner] = counts.get(owner, 0) + 1
        return counts

    def to_array(self):
        return [[self.grid[r][c].value for c in range(self.size)] for r in range(self.size)]

    @staticmethod
    def from_array(arr) -> "Board":
        size = len(arr)
        b = Board(size)
        for r in range(size):
            if len(arr[r]) != size:
                raise InvalidConfig("棋盘必须为正方形")
            for c in range(size):
                val = arr[r][c]
                if isinstance(val, bool):
                    raise InvalidConfig(f"非法格子取值 ({r},{c}): {val!r}")
                try:
                    b.grid[r][c] = Piece(val)
                except ValueError:
                    raise InvalidConfig(f"非法格子取值 ({r},{c}): {val!r}") from None
        return b
