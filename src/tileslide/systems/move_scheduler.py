from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from esper import World

from tileslide.components.direction import Direction
from tileslide.components.game_state import GameMode
from tileslide.components.move_queue import MoveCommand, MoveQueue
from tileslide.constants import MAX_PENDING_MOVES, MOVE_QUEUE_DELAY
from tileslide.events.bus import (
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_DROPPED,
    EVENT_MOVE_REQUEST,
    EVENT_TICK,
    EventBus,
)
from tileslide.systems.board_ops import get_game_state
from tileslide.systems.move import MoveSystem

logger = logging.getLogger(__name__)


class MoveSchedulerSystem:
    """Serializes move commands so a changing move is followed by a pause.

    Commands drain in FIFO order. A move that changes the board starts a
    cooldown of ``delay`` seconds measured in tick time; a move that changes
    nothing lets the next command apply straight away. When the queue already
    holds ``max_pending`` commands new ones are rejected and their callbacks
    never fire.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        move_system: MoveSystem,
        *,
        delay: float = MOVE_QUEUE_DELAY,
        max_pending: int = MAX_PENDING_MOVES,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.move_system = move_system
        self.delay = max(0.0, float(delay))
        self.max_pending = max(1, int(max_pending))
        self._draining = False
        self.queue_entity = self._ensure_queue_entity()
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def _ensure_queue_entity(self) -> int:
        for ent, _ in self.world.get_component(MoveQueue):
            return ent
        return self.world.create_entity(MoveQueue())

    @property
    def queue(self) -> MoveQueue:
        return self.world.component_for_entity(self.queue_entity, MoveQueue)

    @property
    def pending_count(self) -> int:
        return len(self.queue.pending)

    def enqueue(
        self,
        direction: Direction,
        on_applied: Optional[Callable[[bool], None]] = None,
    ) -> bool:
        """Queue a move. Returns False if the command was rejected."""
        queue = self.queue
        if len(queue.pending) >= self.max_pending:
            logger.warning("Move queue full (%d pending); dropping %s", len(queue.pending), direction.name)
            self.event_bus.emit(EVENT_MOVE_DROPPED, direction=direction, reason="queue_full")
            return False
        queue.pending.append(MoveCommand(direction, on_applied))
        if not queue.cooling_down:
            self._drain()
        return True

    def reset(self) -> None:
        queue = self.queue
        discarded = len(queue.pending)
        queue.pending.clear()
        queue.cooldown_remaining = 0.0
        queue.generation += 1
        if discarded:
            logger.info("Discarded %d pending moves on reset", discarded)

    def on_move_request(self, sender: Any, **payload: Any) -> None:
        direction = payload.get("direction")
        if not isinstance(direction, Direction):
            return
        if get_game_state(self.world).mode is not GameMode.PLAYING:
            return
        self.enqueue(direction, payload.get("on_applied"))

    def on_tick(self, sender: Any, **payload: Any) -> None:
        queue = self.queue
        if not queue.cooling_down:
            return
        dt = payload.get("dt", 1 / 60)
        queue.cooldown_remaining -= float(dt)
        if queue.cooldown_remaining <= 0.0:
            queue.cooldown_remaining = 0.0
            self._drain()

    def _drain(self) -> None:
        if self._draining:
            return
        self._draining = True
        try:
            self._drain_pending()
        finally:
            self._draining = False

    def _drain_pending(self) -> None:
        queue = self.queue
        generation = queue.generation
        while queue.pending:
            command = queue.pending.popleft()
            changed = self.move_system.apply_move(command.direction)
            self.event_bus.emit(EVENT_MOVE_APPLIED, direction=command.direction, changed=changed)
            if command.on_applied is not None:
                command.on_applied(changed)
            if queue.generation != generation:
                # Reset from inside a handler: earlier commands are gone and
                # anything still pending was queued afterwards.
                generation = queue.generation
                continue
            if changed and self.delay > 0.0:
                queue.cooldown_remaining = self.delay
                return
