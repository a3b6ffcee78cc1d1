"""Session lifecycle: opening tiles, follow-up after each move, reset."""
from __future__ import annotations

import logging
import random
from typing import Any

from esper import World

from tileslide.components.cell import EMPTY
from tileslide.components.game_state import GameMode
from tileslide.constants import STARTING_TILE_VALUE, STARTING_TILES
from tileslide.events.bus import (
    EVENT_CONTINUE_REQUEST,
    EVENT_GAME_LOST,
    EVENT_GAME_RESET,
    EVENT_GAME_WON,
    EVENT_INSERT_RANDOM_REQUEST,
    EVENT_MOVE_APPLIED,
    EVENT_RESET_REQUEST,
    EventBus,
)
from tileslide.systems.board_ops import (
    find_winning_tile,
    get_board,
    get_game_state,
    has_lost,
    insert_random_tile,
    random_tile_value,
)
from tileslide.systems.move_scheduler import MoveSchedulerSystem
from tileslide.utils.game_state import set_game_mode, set_score

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Drives the session around the move pipeline.

    After every move that changed the board the system checks for a win,
    spawns the next tile and checks for a loss, in that order. A win stops
    tile spawning until the player asks to keep playing.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        scheduler: MoveSchedulerSystem,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.event_bus.subscribe(EVENT_MOVE_APPLIED, self._on_move_applied)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self._on_reset_request)
        self.event_bus.subscribe(EVENT_INSERT_RANDOM_REQUEST, self._on_insert_random_request)
        self.event_bus.subscribe(EVENT_CONTINUE_REQUEST, self._on_continue_request)

    def start(self) -> None:
        for _ in range(STARTING_TILES):
            self.insert_random(STARTING_TILE_VALUE)

    def reset(self) -> None:
        self.scheduler.reset()
        get_board(self.world).set_all(EMPTY)
        set_score(self.world, self.event_bus, 0)
        state = get_game_state(self.world)
        state.keep_playing = False
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.info("Game reset")
        self.event_bus.emit(EVENT_GAME_RESET)
        self.start()

    def insert_random(self, value: int):
        return insert_random_tile(self.world, self.event_bus, value, self._rng)

    def continue_playing(self) -> None:
        state = get_game_state(self.world)
        if state.mode is not GameMode.WON:
            return
        state.keep_playing = True
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def follow_up(self) -> None:
        state = get_game_state(self.world)
        if not state.keep_playing:
            winning = find_winning_tile(self.world)
            if winning is not None:
                row, col = winning
                value = get_board(self.world)[winning].value
                set_game_mode(self.world, self.event_bus, GameMode.WON)
                logger.info("Game won with %d at (%d, %d)", value, row, col)
                self.event_bus.emit(EVENT_GAME_WON, position=winning, value=value)
                return
        self.insert_random(random_tile_value(self._rng))
        if has_lost(self.world):
            set_game_mode(self.world, self.event_bus, GameMode.LOST)
            logger.info("Game lost with score %d", state.score)
            self.event_bus.emit(EVENT_GAME_LOST, score=state.score)

    def _on_move_applied(self, sender: Any, **payload: Any) -> None:
        if payload.get("changed"):
            self.follow_up()

    def _on_reset_request(self, sender: Any, **payload: Any) -> None:
        self.reset()

    def _on_insert_random_request(self, sender: Any, **payload: Any) -> None:
        value = payload.get("value", STARTING_TILE_VALUE)
        self.insert_random(int(value))

    def _on_continue_request(self, sender: Any, **payload: Any) -> None:
        self.continue_playing()
