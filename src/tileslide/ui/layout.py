from tileslide.constants import (
    BOARD_WIDTH, BOTTOM_MARGIN, THIN_PADDING_MIN_DIMENSION,
    TILE_PADDING_THICK, TILE_PADDING_THIN,
)

def compute_board_geometry(window_width: int, window_height: int, dimension: int):
    """Return (tile_size, padding, board_left, board_bottom, board_size).

    The board is a fixed-width square centred horizontally; larger boards
    use the thin gap so tiles keep a usable size.
    """
    padding = TILE_PADDING_THIN if dimension >= THIN_PADDING_MIN_DIMENSION else TILE_PADDING_THICK
    board_size = min(BOARD_WIDTH, window_width, window_height - BOTTOM_MARGIN)
    tile_size = (board_size - padding * (dimension + 1)) // dimension
    if tile_size < 8:
        tile_size = 8
    board_size = padding + dimension * (tile_size + padding)
    board_left = (window_width - board_size) / 2
    board_bottom = BOTTOM_MARGIN
    return tile_size, padding, board_left, board_bottom, board_size


def cell_center(row: int, col: int, dimension: int, geometry) -> tuple[float, float]:
    """Screen centre of a cell. Row 0 is the top row on screen."""
    tile_size, padding, board_left, board_bottom, _ = geometry
    x = board_left + padding + col * (tile_size + padding) + tile_size / 2
    screen_row = dimension - 1 - row
    y = board_bottom + padding + screen_row * (tile_size + padding) + tile_size / 2
    return x, y
