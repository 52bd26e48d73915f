from __future__ import annotations

import logging
import os
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from app.config import env_int
from models import Board
from logic.render import ERROR_SYMBOL, EMPTY_SYMBOL, MINE_SYMBOL, ROW_END, render_mine_count


logger = logging.getLogger(__name__)

TILE_PX = env_int("MINES_TILE_PX", default=32)
FONT_PATH = os.getenv("MINES_FONT_PATH", "")
THEME = os.getenv("MINES_THEME", "light")

Color = Tuple[int, int, int, int]

COLORS = {
    "light": {
        "bg": (255, 255, 255, 255),
        "grid": (200, 200, 200, 255),
        "label": (120, 120, 120, 255),
        "mine": (0, 0, 0, 255),
        "error": (220, 0, 0, 255),
    },
    "dark": {
        "bg": (0, 0, 0, 255),
        "grid": (80, 80, 80, 255),
        "label": (160, 160, 160, 255),
        "mine": (220, 220, 220, 255),
        "error": (255, 80, 80, 255),
    },
}

# classic minesweeper digit colours
DIGIT_COLORS = {
    "1": (0, 0, 255, 255),
    "2": (0, 128, 0, 255),
    "3": (255, 0, 0, 255),
    "4": (0, 0, 128, 255),
    "5": (128, 0, 0, 255),
    "6": (0, 128, 128, 255),
    "7": (0, 0, 0, 255),
    "8": (128, 128, 128, 255),
}


def _palette() -> dict:
    if THEME not in COLORS:
        logger.warning("Unknown theme %r, falling back to light", THEME)
        return COLORS["light"]
    return COLORS[THEME]


def _load_font(size: int):
    if FONT_PATH:
        try:
            return ImageFont.truetype(FONT_PATH, size)
        except OSError:
            logger.warning("Could not load font %s, using default", FONT_PATH)
    return ImageFont.load_default()


def _draw_centered(draw: ImageDraw.ImageDraw, center: Tuple[int, int], text: str, fill: Color, font) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) // 2 - left
    y = center[1] - (bottom - top) // 2 - top
    draw.text((x, y), text, fill=fill, font=font)


def render_board_image(board: Board, annotated: Optional[str] = None) -> BytesIO:
    """Render the annotated board into a PNG image.

    The grid is surrounded by a one-tile margin carrying 1-based column and
    row labels.  Mines are drawn as discs, counts as coloured digits and
    empty cells are left blank.  ``annotated`` is the output of
    :func:`render_mine_count` for ``board`` when the caller already has it.
    """
    if annotated is None:
        annotated = render_mine_count(board)
    lines = annotated.split(ROW_END)

    colors = _palette()
    margin = TILE_PX
    width = margin * 2 + board.width * TILE_PX
    height = margin * 2 + board.height * TILE_PX
    img = Image.new("RGBA", (width, height), colors["bg"])
    draw = ImageDraw.Draw(img)

    # grid
    for r in range(board.height + 1):
        y = margin + r * TILE_PX
        draw.line((margin, y, margin + board.width * TILE_PX, y), fill=colors["grid"])
    for c in range(board.width + 1):
        x = margin + c * TILE_PX
        draw.line((x, margin, x, margin + board.height * TILE_PX), fill=colors["grid"])

    font = _load_font(int(TILE_PX * 0.6))

    for r, c in board.coords():
        symbol = lines[r][c]
        if symbol == EMPTY_SYMBOL:
            continue
        x0 = margin + c * TILE_PX
        y0 = margin + r * TILE_PX
        cx = x0 + TILE_PX // 2
        cy = y0 + TILE_PX // 2
        if symbol == MINE_SYMBOL:
            radius = max(2, TILE_PX // 4)
            draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=colors["mine"])
        elif symbol == ERROR_SYMBOL:
            _draw_centered(draw, (cx, cy), symbol, colors["error"], font)
        else:
            _draw_centered(draw, (cx, cy), symbol, DIGIT_COLORS.get(symbol, colors["error"]), font)

    # axis labels
    for c in range(board.width):
        x = margin + c * TILE_PX + TILE_PX // 2
        _draw_centered(draw, (x, margin // 2), str(c + 1), colors["label"], font)
    for r in range(board.height):
        y = margin + r * TILE_PX + TILE_PX // 2
        _draw_centered(draw, (margin // 2, y), str(r + 1), colors["label"], font)

    buf = BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf
