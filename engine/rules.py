from __future__ import annotations
from typing import List, Optional, Set
from .board import Board
from .models import GameMode, Piece, PlayerId, Position

DIR8 = [(-1,-1), (-1,0), (-1,1),
        (0,-1),          (0,1),
        (1,-1),  (1,0),  (1,1)]

def captures_in_dir(board: Board, mode: GameMode, start: Position, dr: int, dc: int, player: PlayerId) -> List[Position]:
    """
    From 'start', step (dr,dc) collecting opponent discs. The run is kept only
    if it is closed by one of player's discs with no gap. In three-player mode
    the run must be a single opponent colour, fixed by its first disc.
    """
    size = board.size
    me = Piece.from_player(player)
    run_color: Optional[Piece] = None
    buf: List[Position] = []
    r, c = start.row + dr, start.col + dc
    while 0 <= r < size and 0 <= c < size:
        p = Position(r, c)
        piece = board.get(p)
        if piece == Piece.EMPTY:
            return []
        if piece == me:
            return buf
        if mode == GameMode.THREE_PLAYER:
            if run_color is None:
                run_color = piece
            elif piece != run_color:
                # 混色不可夹
                return []
        buf.append(p)
        r += dr
        c += dc
    # edge
    return []

def resolve_captures(board: Board, mode: GameMode, row: int, col: int, player: PlayerId) -> List[Position]:
    start = Position(row, col)
    flips: List[Position] = []
    for dr, dc in DIR8:
        flips.extend(captures_in_dir(board, mode, start, dr, dc, player))
    return flips

def is_legal_move(board: Board, mode: GameMode, row: int, col: int, player: PlayerId) -> bool:
    p = Position(row, col)
    if not board.in_bounds(p) or not board.is_empty(p):
        return False
    # must flip at least one direction
    for dr, dc in DIR8:
        if captures_in_dir(board, mode, p, dr, dc, player):
            return True
    return False

def legal_moves(board: Board, mode: GameMode, player: PlayerId) -> Set[Position]:
    res: Set[Position] = set()
    for p in board.positions():
        if is_legal_move(board, mode, p.row, p.col, player):
            res.add(p)
    return res
