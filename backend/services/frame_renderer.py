"""
Frame rendering service for the snake game.

Draws a GameState into a Pillow image so any presentation layer that wants
a bitmap (a window, a GIF exporter, a test) can show it:
- Grid of cells with thin borders
- Snake body and a darker head
- Food
- Start prompt, pause banner and game-over summary overlays
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import CELL_SIZE
from domain.game_state import GameState

logger = logging.getLogger(__name__)


class ColorScheme:
    """Colours of the browser client"""

    SNAKE_HEAD = "#16A34A"
    SNAKE_BODY = "#4ADE80"
    FOOD = "#EF4444"
    EMPTY = "#F3F4F6"
    GRID_LINE = "#E5E7EB"

    OVERLAY = (0, 0, 0, 128)
    PAUSE_BANNER = "#FEF9C3"
    PAUSE_TEXT = "#A16207"
    GAME_OVER_BANNER = "#FEE2E2"
    GAME_OVER_TEXT = "#DC2626"
    PROMPT_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class FrameRenderer:
    """Render snake game states to images"""

    def __init__(self, cell_size: int = CELL_SIZE):
        if cell_size < 3:
            raise ValueError(f"cell_size must be at least 3 pixels, got {cell_size}.")
        self.cell_size = cell_size
        self.font = ImageFont.load_default()

    def render(self, state: GameState, started: bool = True) -> Image.Image:
        size = state.grid_size * self.cell_size
        image = Image.new("RGB", (size, size), hex_to_rgb(ColorScheme.EMPTY))
        draw = ImageDraw.Draw(image)

        self._draw_grid(draw, state.grid_size)

        if not started:
            return self._draw_start_prompt(image)

        if state.food is not None:
            self._fill_cell(draw, state.food, ColorScheme.FOOD, ellipse=True)

        # Body first so the head is drawn on top
        for cell in list(state.snake.positions)[1:]:
            self._fill_cell(draw, cell, ColorScheme.SNAKE_BODY)
        self._fill_cell(draw, state.snake.head, ColorScheme.SNAKE_HEAD)

        if state.game_over:
            self._draw_banner(
                draw, size,
                [("Game Over!", ColorScheme.GAME_OVER_TEXT),
                 (f"Final Score: {state.score}", ColorScheme.GAME_OVER_TEXT)],
                ColorScheme.GAME_OVER_BANNER
            )
        elif state.is_paused:
            self._draw_banner(
                draw, size,
                [("Game Paused", ColorScheme.PAUSE_TEXT)],
                ColorScheme.PAUSE_BANNER
            )

        return image

    def save(self, state: GameState, path: str, started: bool = True) -> str:
        self.render(state, started=started).save(path)
        logger.info(f"Frame saved to {path}")
        return path

    def _fill_cell(self, draw: ImageDraw.ImageDraw, cell, color: str, ellipse: bool = False):
        x, y = cell
        left = x * self.cell_size + 1
        top = y * self.cell_size + 1
        box = [left, top, left + self.cell_size - 2, top + self.cell_size - 2]
        if ellipse:
            draw.ellipse(box, fill=hex_to_rgb(color))
        else:
            draw.rectangle(box, fill=hex_to_rgb(color))

    def _draw_grid(self, draw: ImageDraw.ImageDraw, grid_size: int):
        size = grid_size * self.cell_size
        line = hex_to_rgb(ColorScheme.GRID_LINE)
        for i in range(grid_size + 1):
            offset = i * self.cell_size
            draw.line([(offset, 0), (offset, size)], fill=line)
            draw.line([(0, offset), (size, offset)], fill=line)

    def _draw_start_prompt(self, image: Image.Image) -> Image.Image:
        overlay = Image.new("RGBA", image.size, ColorScheme.OVERLAY)
        composed = Image.alpha_composite(image.convert("RGBA"), overlay).convert("RGB")
        draw = ImageDraw.Draw(composed)
        self._draw_centered_text(
            draw, composed.size[0], composed.size[1] // 2,
            "Press Space to start", ColorScheme.PROMPT_TEXT
        )
        return composed

    def _draw_banner(self, draw: ImageDraw.ImageDraw, size: int, lines, background: str):
        line_height = self._text_size(draw, "Ag")[1] + 6
        banner_height = line_height * len(lines) + 20
        top = (size - banner_height) // 2
        draw.rectangle([0, top, size, top + banner_height], fill=hex_to_rgb(background))

        y = top + 10 + line_height // 2
        for text, color in lines:
            self._draw_centered_text(draw, size, y, text, color)
            y += line_height

    def _draw_centered_text(self, draw: ImageDraw.ImageDraw, width: int, center_y: int,
                            text: str, color: str):
        text_w, text_h = self._text_size(draw, text)
        draw.text(((width - text_w) // 2, center_y - text_h // 2), text,
                  fill=hex_to_rgb(color), font=self.font)

    def _text_size(self, draw: ImageDraw.ImageDraw, text: str) -> Tuple[int, int]:
        left, top, right, bottom = draw.textbbox((0, 0), text, font=self.font)
        return right - left, bottom - top


def render_frame(state: GameState, started: bool = True,
                 cell_size: Optional[int] = None) -> Image.Image:
    """Convenience wrapper around FrameRenderer.render"""
    renderer = FrameRenderer(cell_size=cell_size or CELL_SIZE)
    return renderer.render(state, started=started)
