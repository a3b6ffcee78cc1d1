from __future__ import annotations

from esper import World

from tileslide.components.cell import EMPTY, Tile
from tileslide.components.direction import Direction
from tileslide.events.bus import (
    EVENT_SCORE_CHANGED,
    EVENT_TILE_MOVED,
    EVENT_TILES_MERGED,
    EventBus,
)
from tileslide.systems.board_ops import get_board, get_game_state, line_coordinates
from tileslide.systems.line_transform import DoubleMove, SingleMove, transform


class MoveSystem:
    """Applies a slide to every line of the board and reports what happened.

    Each line is transformed independently; lines never share cells, so
    orders are written back to the board as soon as they are produced.
    Tile and score events are emitted synchronously during ``apply_move``.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def apply_move(self, direction: Direction) -> bool:
        board = get_board(self.world)
        changed = False
        for index in range(board.dimension):
            coords = line_coordinates(direction, board.dimension, index)
            orders = transform([board[c] for c in coords])
            if orders:
                changed = True
            for order in orders:
                match order:
                    case SingleMove(source, destination, value, was_merge):
                        board[coords[source]] = EMPTY
                        board[coords[destination]] = Tile(value)
                        if was_merge:
                            self._add_score(value)
                        self.event_bus.emit(
                            EVENT_TILE_MOVED,
                            source=coords[source],
                            destination=coords[destination],
                            value=value,
                            merge=was_merge,
                        )
                    case DoubleMove(first_source, second_source, destination, value):
                        board[coords[first_source]] = EMPTY
                        board[coords[second_source]] = EMPTY
                        board[coords[destination]] = Tile(value)
                        self._add_score(value)
                        self.event_bus.emit(
                            EVENT_TILES_MERGED,
                            first_source=coords[first_source],
                            second_source=coords[second_source],
                            destination=coords[destination],
                            value=value,
                        )
        return changed

    def _add_score(self, amount: int) -> None:
        state = get_game_state(self.world)
        state.score += amount
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score)
