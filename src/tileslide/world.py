import random

from esper import World
from .events.bus import EventBus
from tileslide.components.board import Board
from tileslide.components.game_state import GameMode, GameState
from tileslide.components.move_queue import MoveQueue
from tileslide.constants import BOARD_DIMENSION, MIN_DIMENSION, MIN_THRESHOLD, WIN_THRESHOLD


def create_world(
    event_bus: EventBus,
    *,
    dimension: int = BOARD_DIMENSION,
    threshold: int = WIN_THRESHOLD,
    initial_mode: GameMode = GameMode.PLAYING,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Undersized boards and targets are clamped rather than rejected.
    dimension = max(int(dimension), MIN_DIMENSION)
    threshold = max(int(threshold), MIN_THRESHOLD)

    # Session-wide state and the board live on one entity.
    world.create_entity(
        GameState(dimension=dimension, threshold=threshold, mode=initial_mode),
        Board(dimension=dimension),
    )
    world.create_entity(MoveQueue())
    return world
