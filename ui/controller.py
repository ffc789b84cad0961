from __future__ import annotations
import logging
from typing import Optional, Tuple

from engine.config import DEFAULT_BOARD_SIZE, DEFAULT_MODE, PLAYER_NAMES
from engine.factory import new_game
from engine.game import Game
from engine.models import GameError, IllegalMove, Tie
from .renderer import ImageRenderer

logger = logging.getLogger(__name__)

class UIController:
    def __init__(self):
        self.game: Optional[Game] = None
        self.renderer = ImageRenderer()
        self.size = DEFAULT_BOARD_SIZE
        self.mode = DEFAULT_MODE
        self.message = "Welcome to Reversi"
        self.theme = "green"

    def set_theme(self, theme: str):
        self.theme = theme
        self.renderer.set_theme(theme)

    # ---------- 新对局 ----------
    def new_game(self, size: int, mode) -> Tuple[object, Optional[str]]:
        try:
            game = new_game(int(size), mode)
        except ValueError as e:
            self.message = "Invalid setup"
            return self.get_image(), f"设置错误：{e}"
        self.game = game
        self.size = game.size
        self.mode = game.mode.player_count
        self.message = f"New game: {self.mode} players on {self.size}x{self.size}"
        logger.info("New game: %d players, %dx%d", self.mode, self.size, self.size)
        return self.get_image(), None

    def restart(self) -> Tuple[object, Optional[str]]:
        if not self.game:
            return self.new_game(self.size, self.mode)
        self.game.reset()
        self.message = f"Restarted: {self.mode} players on {self.size}x{self.size}"
        return self.get_image(), None

    def _turn_label(self) -> str:
        if not self.game:
            return ""
        if not self.game.is_active():
            return "Game over"
        return f"Turn: {PLAYER_NAMES[self.game.current.value]}"

    def score_text(self) -> str:
        if not self.game:
            return ""
        lines = []
        for p, n in self.game.scores().items():
            mark = " ◀" if self.game.is_active() and p == self.game.current else ""
            lines.append(f"- **{PLAYER_NAMES[p.value]}**: {n}{mark}")
        return "\n".join(lines)

    def get_image(self):
        if not self.game:
            return None
        text = f"{self.message} | {self._turn_label()}"
        return self.renderer.render(
            self.game.board, self.game.legal_moves(), self.game.last_pos, text,
            self.game.scores(), self.game.current if self.game.is_active() else None
        )

    def _ended_popup(self) -> Optional[str]:
        if not self.game or self.game.is_active():
            return None
        result = self.game.outcome()
        finals = ", ".join(f"P{p.value}: {n}" for p, n in self.game.scores().items())
        if isinstance(result, Tie):
            return f"It's a Tie! ({finals})"
        return f"{PLAYER_NAMES[result.player.value]} Wins! ({finals})"

    # ------- 交互 -------
    def click_canvas(self, evt) -> Tuple[object, Optional[str]]:
        if not self.game:
            return self.get_image(), "请先开始新对局"
        if not self.game.is_active():
            return self.get_image(), self._ended_popup()
        pos = self.renderer.coord_from_xy(evt.index[0], evt.index[1], self.game.board)
        if pos is None:
            self.message = "Please click inside the board"
            return self.get_image(), "请点击棋盘内的格子"
        mover = self.game.current
        try:
            flips = self.game.step(pos.row, pos.col)
        except IllegalMove:
            self.message = "Illegal move"
            return self.get_image(), "非法落子：该位置无法翻转对方棋子"
        except GameError as e:
            return self.get_image(), f"错误：{e}"
        self.message = f"P{mover.value} Move: {pos.row},{pos.col} (+{len(flips)})"
        img = self.get_image()
        if not self.game.is_active():
            return img, self._ended_popup()
        return img, None
