from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from tileslide.components.cell import EMPTY, Cell, Tile

Coord = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Square grid of cells addressed by (row, col).

    Storage is row-major. Every access is bounds-checked; an out-of-range
    coordinate is a programming error and trips an assertion.
    """
    dimension: int
    cells: List[Cell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.cells = [EMPTY] * (self.dimension * self.dimension)

    def _index(self, row: int, col: int) -> int:
        assert 0 <= row < self.dimension, f"row {row} out of range"
        assert 0 <= col < self.dimension, f"col {col} out of range"
        return row * self.dimension + col

    def __getitem__(self, coord: Coord) -> Cell:
        row, col = coord
        return self.cells[self._index(row, col)]

    def __setitem__(self, coord: Coord, cell: Cell) -> None:
        row, col = coord
        self.cells[self._index(row, col)] = cell

    def set_all(self, cell: Cell) -> None:
        for i in range(len(self.cells)):
            self.cells[i] = cell

    def coordinates(self) -> Iterator[Coord]:
        for row in range(self.dimension):
            for col in range(self.dimension):
                yield (row, col)

    def empty_cells(self) -> List[Coord]:
        return [coord for coord in self.coordinates() if not isinstance(self[coord], Tile)]

    def tiles(self) -> Iterator[Tuple[Coord, int]]:
        """Yield ((row, col), value) for every occupied cell in row-major order."""
        for coord in self.coordinates():
            cell = self[coord]
            if isinstance(cell, Tile):
                yield coord, cell.value

    def total(self) -> int:
        return sum(value for _, value in self.tiles())
