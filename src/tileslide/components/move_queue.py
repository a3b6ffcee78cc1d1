from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Optional

from tileslide.components.direction import Direction


@dataclass(slots=True)
class MoveCommand:
    direction: Direction
    on_applied: Optional[Callable[[bool], None]] = None


@dataclass(slots=True)
class MoveQueue:
    """Pending move commands plus the debounce timer state.

    cooldown_remaining > 0 means a board-changing move was applied recently
    and draining is suspended until enough tick time has elapsed.
    generation is bumped on reset so a drain in progress can tell that its
    commands were discarded.
    """
    pending: Deque[MoveCommand] = field(default_factory=deque)
    cooldown_remaining: float = 0.0
    generation: int = 0

    @property
    def cooling_down(self) -> bool:
        return self.cooldown_remaining > 0.0
