from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# INPUT & COMMANDS
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"                    # payload: direction=Direction
EVENT_RESET_REQUEST = "reset_request"                  # payload: None
EVENT_INSERT_RANDOM_REQUEST = "insert_random_request"  # payload: value=int
EVENT_CONTINUE_REQUEST = "continue_request"            # payload: None


# ============================================================================
# MOVE QUEUE
# ============================================================================
EVENT_MOVE_APPLIED = "move_applied"    # payload: direction=Direction, changed=bool
EVENT_MOVE_DROPPED = "move_dropped"    # payload: direction=Direction, reason=str


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_MOVED = "tile_moved"            # payload: source=(r,c), destination=(r,c), value=int, merge=bool
EVENT_TILES_MERGED = "tiles_merged"        # payload: first_source=(r,c), second_source=(r,c), destination=(r,c), value=int
EVENT_TILE_INSERTED = "tile_inserted"      # payload: position=(r,c), value=int


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int
EVENT_GAME_RESET = "game_reset"            # payload: None
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode, new_mode=GameMode
EVENT_GAME_WON = "game_won"                # payload: position=(r,c), value=int
EVENT_GAME_LOST = "game_lost"              # payload: score=int
