from __future__ import annotations

from esper import World

from tileslide.components.game_state import GameMode
from tileslide.events.bus import EVENT_GAME_MODE_CHANGED, EVENT_SCORE_CHANGED, EventBus
from tileslide.systems.board_ops import get_game_state


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> bool:
    """Update the session mode and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return False
    state.mode = mode
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
    return True


def set_score(world: World, event_bus: EventBus, score: int) -> None:
    state = get_game_state(world)
    if state.score == score:
        return
    state.score = score
    event_bus.emit(EVENT_SCORE_CHANGED, score=score)
