"""Turn one line of cells into the move orders for a single slide.

A line is ordered so index 0 is the edge the tiles slide toward. The work is
split into three passes:

* ``condense`` squeezes tiles toward index 0, remembering where each came from
  and whether it had to move at all.
* ``collapse`` merges equal neighbours, each tile at most once per slide.
* ``convert`` turns the surviving tokens into ``SingleMove``/``DoubleMove``
  orders whose destination is the token's slot in the output line.

Tiles that never move produce no order. Everything here is pure.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from tileslide.components.cell import Cell, Tile


@dataclass(frozen=True, slots=True)
class Unchanged:
    source: int
    value: int


@dataclass(frozen=True, slots=True)
class Relocated:
    source: int
    value: int


@dataclass(frozen=True, slots=True)
class MergedFromOne:
    # source is the incoming tile; the stationary partner is absorbed in place.
    source: int
    value: int


@dataclass(frozen=True, slots=True)
class MergedFromTwo:
    source: int
    second_source: int
    value: int


ActionToken = Union[Unchanged, Relocated, MergedFromOne, MergedFromTwo]


@dataclass(frozen=True, slots=True)
class SingleMove:
    source: int
    destination: int
    value: int
    was_merge: bool


@dataclass(frozen=True, slots=True)
class DoubleMove:
    first_source: int
    second_source: int
    destination: int
    value: int


MoveOrder = Union[SingleMove, DoubleMove]


def is_quiescent(input_position: int, output_position: int, source: int) -> bool:
    """True when a tile has not been displaced by condensing or collapsing."""
    return input_position == output_position and source == input_position


def condense(line: Sequence[Cell]) -> List[ActionToken]:
    tokens: List[ActionToken] = []
    for idx, cell in enumerate(line):
        if not isinstance(cell, Tile):
            continue
        if len(tokens) == idx:
            tokens.append(Unchanged(idx, cell.value))
        else:
            tokens.append(Relocated(idx, cell.value))
    return tokens


def collapse(tokens: Sequence[ActionToken]) -> List[ActionToken]:
    result: List[ActionToken] = []
    skip_next = False
    for idx, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue
        assert not isinstance(token, (MergedFromOne, MergedFromTwo)), (
            f"merge token {token!r} cannot be collapsed again"
        )
        following = tokens[idx + 1] if idx + 1 < len(tokens) else None
        quiescent = is_quiescent(idx, len(result), token.source)
        match token:
            case Unchanged(source, value) if following is not None and following.value == value and quiescent:
                # Stationary tile absorbs the incoming one; animate the mover.
                result.append(MergedFromOne(following.source, value + following.value))
                skip_next = True
            case Unchanged(source, value) | Relocated(source, value) if following is not None and following.value == value:
                result.append(MergedFromTwo(source, following.source, value + following.value))
                skip_next = True
            case Unchanged(source, value) if not quiescent:
                result.append(Relocated(source, value))
            case Unchanged() | Relocated():
                result.append(token)
    return result


def convert(tokens: Sequence[ActionToken]) -> List[MoveOrder]:
    orders: List[MoveOrder] = []
    for destination, token in enumerate(tokens):
        match token:
            case Relocated(source, value):
                orders.append(SingleMove(source, destination, value, was_merge=False))
            case MergedFromOne(source, value):
                orders.append(SingleMove(source, destination, value, was_merge=True))
            case MergedFromTwo(source, second_source, value):
                orders.append(DoubleMove(source, second_source, destination, value))
            case Unchanged():
                pass
    return orders


def transform(line: Sequence[Cell]) -> List[MoveOrder]:
    """Return the move orders needed to slide ``line`` toward index 0."""
    return convert(collapse(condense(line)))
