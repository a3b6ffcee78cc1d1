from __future__ import annotations

from typing import Any, Protocol, Tuple

from tileslide.events.bus import (
    EVENT_SCORE_CHANGED,
    EVENT_TILE_INSERTED,
    EVENT_TILE_MOVED,
    EVENT_TILES_MERGED,
    EventBus,
)

Coord = Tuple[int, int]


class GameObserver(Protocol):
    def on_score_changed(self, new_score: int) -> None: ...

    def on_tile_moved(self, from_coord: Coord, to_coord: Coord, value: int) -> None: ...

    def on_tiles_merged(self, from_a: Coord, from_b: Coord, to_coord: Coord, value: int) -> None: ...

    def on_tile_inserted(self, at_coord: Coord, value: int) -> None: ...


class ObserverBridgeSystem:
    """Forwards board and score events to a plain callback object."""

    def __init__(self, event_bus: EventBus, observer: GameObserver):
        self.event_bus = event_bus
        self.observer = observer
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self._on_score_changed)
        self.event_bus.subscribe(EVENT_TILE_MOVED, self._on_tile_moved)
        self.event_bus.subscribe(EVENT_TILES_MERGED, self._on_tiles_merged)
        self.event_bus.subscribe(EVENT_TILE_INSERTED, self._on_tile_inserted)

    def _on_score_changed(self, sender: Any, **payload: Any) -> None:
        self.observer.on_score_changed(payload["score"])

    def _on_tile_moved(self, sender: Any, **payload: Any) -> None:
        self.observer.on_tile_moved(payload["source"], payload["destination"], payload["value"])

    def _on_tiles_merged(self, sender: Any, **payload: Any) -> None:
        self.observer.on_tiles_merged(
            payload["first_source"],
            payload["second_source"],
            payload["destination"],
            payload["value"],
        )

    def _on_tile_inserted(self, sender: Any, **payload: Any) -> None:
        self.observer.on_tile_inserted(payload["position"], payload["value"])
