from tileslide.events.bus import EventBus, EVENT_SCORE_CHANGED, EVENT_GAME_MODE_CHANGED
from tileslide.components.game_state import GameMode
from tileslide.constants import DARK_TEXT_COLOR, LIGHT_TEXT_COLOR, SCORE_PANEL_HEIGHT
from tileslide.rendering.board_renderer import BoardRenderer
from tileslide.systems.board_ops import get_board, get_game_state
from tileslide.ui.layout import compute_board_geometry
from esper import World


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_mode_changed)
        self.score = get_game_state(world).score
        self.banner: str | None = None
        self._last_tile_layout: dict[tuple[int, int], tuple[float, float]] = {}
        self._board_renderer = BoardRenderer(self)

    def on_score_changed(self, sender, **kwargs):
        self.score = kwargs.get('score', self.score)

    def on_mode_changed(self, sender, **kwargs):
        mode = kwargs.get('new_mode')
        if mode == GameMode.WON:
            self.banner = "You win!  C: keep going   R: restart"
        elif mode == GameMode.LOST:
            self.banner = "Game over  R: restart"
        else:
            self.banner = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: if no active Arcade window (unit tests), skip actual draw calls but still build layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        board = get_board(self.world)
        geometry = compute_board_geometry(self.window.width, self.window.height, board.dimension)
        self._board_renderer.render(arcade, board, geometry, headless=headless)
        if headless:
            return
        _, _, board_left, board_bottom, board_size = geometry
        top = board_bottom + board_size
        arcade.draw_text(
            f"Score: {self.score}", board_left, top + SCORE_PANEL_HEIGHT / 2,
            DARK_TEXT_COLOR, 20, anchor_y="center", bold=True,
        )
        if self.banner:
            center_y = board_bottom + board_size / 2
            arcade.draw_lrbt_rectangle_filled(
                board_left, board_left + board_size,
                center_y - 30, center_y + 30, (0, 0, 0, 160),
            )
            arcade.draw_text(
                self.banner, board_left + board_size / 2, center_y,
                LIGHT_TEXT_COLOR, 16, anchor_x="center", anchor_y="center",
            )

    def tile_center(self, row: int, col: int):
        """Screen position of a cell from the last processed frame."""
        return self._last_tile_layout.get((row, col))
