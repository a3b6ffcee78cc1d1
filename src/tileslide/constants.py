BOARD_DIMENSION = 4
WIN_THRESHOLD = 2048

# Smallest playable board and target; smaller requests are clamped up.
MIN_DIMENSION = 2
MIN_THRESHOLD = 8

# Seconds that must elapse after a board-changing move before the next queued move applies.
MOVE_QUEUE_DELAY = 0.3
# Commands beyond this many pending are rejected.
MAX_PENDING_MOVES = 100

STARTING_TILES = 2
STARTING_TILE_VALUE = 2
# Chance that a tile spawned after a move is a 4 instead of a 2.
FOUR_TILE_PROBABILITY = 0.1

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Tileslide"

BOARD_WIDTH = 400
# Gap between tiles; thinner on larger boards so tiles stay readable.
TILE_PADDING_THICK = 10
TILE_PADDING_THIN = 5
THIN_PADDING_MIN_DIMENSION = 6
BOTTOM_MARGIN = 30
SCORE_PANEL_HEIGHT = 60

# Tile animation timings (seconds).
SLIDE_DURATION = 0.1
POP_DURATION = 0.15

BOARD_BACKGROUND = (187, 173, 160)
EMPTY_CELL_COLOR = (205, 193, 180)
DARK_TEXT_COLOR = (119, 110, 101)
LIGHT_TEXT_COLOR = (249, 246, 242)

TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
# Used for any value above the largest entry in TILE_COLORS.
SUPER_TILE_COLOR = (60, 58, 50)
