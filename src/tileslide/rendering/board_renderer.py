from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

from tileslide.components.animation_pop import PopAnimation
from tileslide.components.animation_slide import SlideAnimation
from tileslide.constants import (
    BOARD_BACKGROUND, DARK_TEXT_COLOR, EMPTY_CELL_COLOR, LIGHT_TEXT_COLOR,
    SUPER_TILE_COLOR, TILE_COLORS,
)
from tileslide.ui.layout import cell_center

if TYPE_CHECKING:
    from tileslide.components.board import Board
    from tileslide.systems.render import RenderSystem

BoardPos = Tuple[int, int]


def tile_color(value: int) -> Tuple[int, int, int]:
    return TILE_COLORS.get(value, SUPER_TILE_COLOR)


def text_color(value: int) -> Tuple[int, int, int]:
    return DARK_TEXT_COLOR if value <= 4 else LIGHT_TEXT_COLOR


def font_size_for(value: int, tile_size: int) -> int:
    digits = len(str(value))
    scale = 0.45 if digits <= 2 else 0.35 if digits == 3 else 0.28
    return max(8, int(tile_size * scale))


class BoardRenderer:
    """Draws the grid, settled tiles and in-flight animations.

    Cells that are the destination of a running slide are drawn by the slide
    itself, so a merged value only appears once the tiles have landed.
    """
    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, board: Board, geometry, headless: bool) -> None:
        rs = self._rs
        tile_size, padding, board_left, board_bottom, board_size = geometry
        dimension = board.dimension

        slides = [slide for _, slide in rs.world.get_component(SlideAnimation)]
        pops: Dict[BoardPos, PopAnimation] = {pop.pos: pop for _, pop in rs.world.get_component(PopAnimation)}
        covered = {slide.dst for slide in slides}

        rs._last_tile_layout = {}
        if not headless:
            arcade.draw_lrbt_rectangle_filled(
                board_left, board_left + board_size,
                board_bottom, board_bottom + board_size,
                BOARD_BACKGROUND,
            )
        for (row, col) in board.coordinates():
            cx, cy = cell_center(row, col, dimension, geometry)
            rs._last_tile_layout[(row, col)] = (cx, cy)
            if not headless:
                self._draw_square(arcade, cx, cy, tile_size, EMPTY_CELL_COLOR)

        for (row, col), value in board.tiles():
            if (row, col) in covered:
                continue
            cx, cy = rs._last_tile_layout[(row, col)]
            size = tile_size
            pop = pops.get((row, col))
            if pop is not None:
                # Grow in, overshoot slightly, settle.
                p = pop.linear
                scale = 0.1 + 1.1 * (p / 0.7) if p < 0.7 else 1.2 - 0.2 * ((p - 0.7) / 0.3)
                size = tile_size * min(scale, 1.2)
            if not headless:
                self._draw_tile(arcade, cx, cy, size, value, tile_size)

        for slide in slides:
            sx, sy = rs._last_tile_layout[slide.src]
            dx, dy = rs._last_tile_layout[slide.dst]
            p = slide.linear
            x = sx + (dx - sx) * p
            y = sy + (dy - sy) * p
            if not headless:
                self._draw_tile(arcade, x, y, tile_size, slide.value, tile_size)

    @staticmethod
    def _draw_square(arcade, cx: float, cy: float, size: float, color) -> None:
        half = size / 2
        arcade.draw_lrbt_rectangle_filled(cx - half, cx + half, cy - half, cy + half, color)

    def _draw_tile(self, arcade, cx: float, cy: float, size: float, value: int, tile_size: int) -> None:
        self._draw_square(arcade, cx, cy, size, tile_color(value))
        arcade.draw_text(
            str(value), cx, cy, text_color(value), font_size_for(value, tile_size),
            anchor_x="center", anchor_y="center", bold=True,
        )
