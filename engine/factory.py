from __future__ import annotations
from typing import Union
from .game import Game
from .models import GameMode, InvalidConfig

def normalize_mode(mode: Union[GameMode, int, str]) -> GameMode:
    if isinstance(mode, GameMode):
        return mode
    if isinstance(mode, bool):
        raise InvalidConfig(f"未知玩家人数: {mode!r}")
    if isinstance(mode, int):
        if mode == 2:
            return GameMode.TWO_PLAYER
        if mode == 3:
            return GameMode.THREE_PLAYER
        raise InvalidConfig(f"玩家人数只能为 2 或 3: {mode}")
    if not isinstance(mode, str):
        raise InvalidConfig(f"未知玩家人数: {mode!r}")
    m = mode.strip().lower()
    if m in ("2", "two", "2p", "2 players", "二人", "双人"):
        return GameMode.TWO_PLAYER
    if m in ("3", "three", "3p", "3 players", "三人"):
        return GameMode.THREE_PLAYER
    raise InvalidConfig(f"未知玩家人数: {mode}")

def new_game(board_size: int, mode: Union[GameMode, int, str]) -> Game:
    return Game(board_size, normalize_mode(mode))
