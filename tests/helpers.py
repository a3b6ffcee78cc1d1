from __future__ import annotations

from typing import Sequence

from esper import World

from tileslide.components.cell import EMPTY, Tile
from tileslide.events.bus import EVENT_TICK, EventBus
from tileslide.systems.board_ops import get_board


def cells(values: Sequence[int]):
    """Build a line of cells from ints, 0 meaning an empty cell."""
    return [Tile(v) if v else EMPTY for v in values]


def set_board(world: World, rows: Sequence[Sequence[int]]) -> None:
    board = get_board(world)
    assert len(rows) == board.dimension
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            board[r, c] = Tile(value) if value else EMPTY


def board_values(world: World) -> list[list[int]]:
    board = get_board(world)
    out = [[0] * board.dimension for _ in range(board.dimension)]
    for (r, c), value in board.tiles():
        out[r][c] = value
    return out


def drive_ticks(bus: EventBus, count: int = 1, dt: float = 0.05) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


class RecordingObserver:
    """Collects observer callbacks in arrival order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def on_score_changed(self, new_score):
        self.calls.append(("score", new_score))

    def on_tile_moved(self, from_coord, to_coord, value):
        self.calls.append(("moved", from_coord, to_coord, value))

    def on_tiles_merged(self, from_a, from_b, to_coord, value):
        self.calls.append(("merged", from_a, from_b, to_coord, value))

    def on_tile_inserted(self, at_coord, value):
        self.calls.append(("inserted", at_coord, value))
