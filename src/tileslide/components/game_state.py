"""Game state resource describing score, win threshold and the active mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level game modes that gate player input."""
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameState:
    """Singleton component storing session-wide values."""
    dimension: int
    threshold: int
    score: int = 0
    mode: GameMode = GameMode.PLAYING
    # Set once the player chooses to keep going past the winning tile.
    keep_playing: bool = False
