from __future__ import annotations
from PIL import Image, ImageDraw, ImageFont
from typing import Dict, Iterable, Optional
from engine.models import Piece, PlayerId, Position
from engine.board import Board

DISC_COLORS = {
    Piece.P1: ((20, 20, 20), (0, 0, 0)),
    Piece.P2: ((240, 240, 240), (60, 60, 60)),
    Piece.P3: ((200, 40, 40), (90, 10, 10)),
}

THEMES = {
    "green": {"bg": (20, 110, 60), "line": (10, 50, 25), "hint": (150, 220, 160)},
    "light": {"bg": (225, 230, 225), "line": (60, 60, 60), "hint": (90, 160, 90)},
}

def _load_font(size: int):
    try:
        return ImageFont.truetype("arial.ttf", size)
    except OSError:
        return ImageFont.load_default()

class ImageRenderer:
    def __init__(self, cell=48, margin=16, theme="green"):
        self.cell = cell
        self.margin = margin
        self.theme = theme

    def set_theme(self, theme: str):
        if theme in THEMES:
            self.theme = theme

    def render(self, board: Board, valid: Iterable[Position], last: Optional[Position], msg: str,
               scores: Dict[PlayerId, int], turn: Optional[PlayerId]):
        size = board.size
        cell = self.cell
        margin = self.margin
        colors = THEMES.get(self.theme, THEMES["green"])
        W = H = margin*2 + cell*size
        img = Image.new("RGB", (W, H+80), colors["bg"])
        draw = ImageDraw.Draw(img)

        # grid: size+1 lines each way, discs sit inside cells
        for i in range(size + 1):
            p = margin + i*cell
            draw.line((margin, p, margin + cell*size, p), fill=colors["line"], width=2)
            draw.line((p, margin, p, margin + cell*size), fill=colors["line"], width=2)

        radius = int(cell*0.4)
        for p in board.positions():
            piece = board.get(p)
            if piece == Piece.EMPTY:
                continue
            cx, cy = self._center(p)
            fill, outline = DISC_COLORS[piece]
            draw.ellipse((cx-radius, cy-radius, cx+radius, cy+radius), fill=fill, outline=outline, width=2)

        # valid-move hints for the side to move
        hint = int(cell*0.12)
        for p in valid:
            cx, cy = self._center(p)
            draw.ellipse((cx-hint, cy-hint, cx+hint, cy+hint), outline=colors["hint"], width=2)

        if last is not None:
            cx, cy = self._center(last)
            draw.rectangle((cx-5, cy-5, cx+5, cy+5), outline=(230, 180, 30), width=3)

        # footer text
        font = _load_font(16)
        score_line = "   ".join(f"P{p.value}: {n}" for p, n in scores.items())
        if turn is not None:
            score_line = f"{score_line}   Turn: P{turn.value}"
        draw.rectangle((0, H, W, H+80), fill=(250, 250, 250))
        draw.text((10, H+10), msg or "", fill=(30, 30, 30), font=font)
        draw.text((10, H+40), score_line, fill=(30, 30, 30), font=font)

        return img

    def _center(self, p: Position):
        half = self.cell // 2
        return self.margin + p.col*self.cell + half, self.margin + p.row*self.cell + half

    def coord_from_xy(self, x, y, board: Board) -> Optional[Position]:
        # x,y in pixel, map to the cell under the click
        if x < self.margin or y < self.margin:
            return None
        col = int((x - self.margin) // self.cell)
        row = int((y - self.margin) // self.cell)
        p = Position(row, col)
        if board.in_bounds(p):
            return p
        return None
