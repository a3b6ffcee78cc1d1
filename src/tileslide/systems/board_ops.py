from __future__ import annotations

import random
from typing import List, Optional, Tuple

from esper import World

from tileslide.components.board import Board
from tileslide.components.cell import Tile
from tileslide.components.direction import Direction
from tileslide.components.game_state import GameState
from tileslide.constants import FOUR_TILE_PROBABILITY
from tileslide.events.bus import EVENT_TILE_INSERTED, EventBus

Position = Tuple[int, int]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState component not found")


def line_coordinates(direction: Direction, dimension: int, index: int) -> List[Position]:
    """Board coordinates of one line, leading edge of ``direction`` first."""
    last = dimension - 1
    if direction is Direction.UP:
        return [(i, index) for i in range(dimension)]
    if direction is Direction.DOWN:
        return [(last - i, index) for i in range(dimension)]
    if direction is Direction.LEFT:
        return [(index, i) for i in range(dimension)]
    if direction is Direction.RIGHT:
        return [(index, last - i) for i in range(dimension)]
    raise ValueError(f"Unknown direction {direction!r}")


def empty_cells(world: World) -> List[Position]:
    return get_board(world).empty_cells()


def insert_tile(world: World, event_bus: EventBus, position: Position, value: int) -> bool:
    """Place a tile on an empty cell. Occupied cells are left alone."""
    board = get_board(world)
    if isinstance(board[position], Tile):
        return False
    board[position] = Tile(value)
    event_bus.emit(EVENT_TILE_INSERTED, position=position, value=value)
    return True


def insert_random_tile(
    world: World,
    event_bus: EventBus,
    value: int,
    rng: random.Random | None = None,
) -> Optional[Position]:
    """Insert ``value`` at a uniformly chosen empty cell; None if the board is full."""
    open_spots = empty_cells(world)
    if not open_spots:
        return None
    rng = rng or getattr(world, "random", None) or random.Random()
    position = rng.choice(open_spots)
    insert_tile(world, event_bus, position, value)
    return position


def random_tile_value(rng: random.Random) -> int:
    return 4 if rng.random() < FOUR_TILE_PROBABILITY else 2


def find_winning_tile(world: World) -> Optional[Position]:
    threshold = get_game_state(world).threshold
    for position, value in get_board(world).tiles():
        if value >= threshold:
            return position
    return None


def has_won(world: World) -> bool:
    return find_winning_tile(world) is not None


def has_lost(world: World) -> bool:
    """True when the board is full and no neighbouring pair can merge."""
    board = get_board(world)
    if board.empty_cells():
        return False
    last = board.dimension - 1
    for row, col in board.coordinates():
        cell = board[row, col]
        assert isinstance(cell, Tile), (
            f"board reported full but ({row}, {col}) is empty"
        )
        if col < last and board[row, col + 1] == cell:
            return False
        if row < last and board[row + 1, col] == cell:
            return False
    return True
