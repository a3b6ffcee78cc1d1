from enum import Enum, auto


class Direction(Enum):
    """Slide direction; tiles travel toward the named edge."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
