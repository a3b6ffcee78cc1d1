from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Empty:
    """A cell without a tile."""


@dataclass(frozen=True, slots=True)
class Tile:
    """A cell holding a numbered tile. Only positive values are valid."""
    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"Tile value must be positive, got {self.value}")


Cell = Union[Empty, Tile]

EMPTY = Empty()
