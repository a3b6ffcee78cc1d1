from dataclasses import dataclass

@dataclass(slots=True)
class Duration:
    """Seconds an animation entity takes to run from 0 to 1."""
    value: float
