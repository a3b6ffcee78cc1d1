from tileslide.components.direction import Direction
from tileslide.events.bus import (
    EVENT_SCORE_CHANGED,
    EVENT_TILE_MOVED,
    EVENT_TILES_MERGED,
    EventBus,
)
from tileslide.systems.board_ops import get_board, get_game_state
from tileslide.systems.move import MoveSystem
from tileslide.world import create_world
from tests.helpers import board_values, set_board


def _setup(rows):
    bus = EventBus()
    world = create_world(bus, dimension=len(rows))
    set_board(world, rows)
    return bus, world, MoveSystem(world, bus)


def _record(bus):
    events = []
    bus.subscribe(EVENT_TILE_MOVED, lambda s, **k: events.append(('moved', k['source'], k['destination'], k['value'])))
    bus.subscribe(EVENT_TILES_MERGED, lambda s, **k: events.append(
        ('merged', k['first_source'], k['second_source'], k['destination'], k['value'])))
    bus.subscribe(EVENT_SCORE_CHANGED, lambda s, **k: events.append(('score', k['score'])))
    return events


def test_empty_board_move_reports_no_change():
    bus, world, moves = _setup([[0] * 4 for _ in range(4)])
    events = _record(bus)
    for direction in Direction:
        assert moves.apply_move(direction) is False
    assert events == []
    assert get_game_state(world).score == 0


def test_move_left_merges_and_scores():
    bus, world, moves = _setup([
        [2, 0, 2, 4],
        [2, 2, 2, 2],
        [0, 0, 0, 0],
        [4, 8, 16, 32],
    ])
    assert moves.apply_move(Direction.LEFT) is True
    assert board_values(world) == [
        [4, 4, 0, 0],
        [4, 4, 0, 0],
        [0, 0, 0, 0],
        [4, 8, 16, 32],
    ]
    assert get_game_state(world).score == 4 + 4 + 4


def test_move_right_mirrors_left():
    bus, world, moves = _setup([
        [2, 0, 2, 4],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    assert moves.apply_move(Direction.RIGHT)
    assert board_values(world)[0] == [0, 0, 4, 4]
    assert get_game_state(world).score == 4


def test_move_up_slides_toward_top_row():
    bus, world, moves = _setup([
        [0, 2, 0, 0],
        [0, 2, 0, 0],
        [4, 0, 0, 0],
        [4, 8, 0, 0],
    ])
    assert moves.apply_move(Direction.UP)
    assert board_values(world) == [
        [8, 4, 0, 0],
        [0, 8, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]


def test_move_down_slides_toward_bottom_row():
    bus, world, moves = _setup([
        [2, 0, 0, 0],
        [0, 0, 0, 0],
        [2, 0, 0, 0],
        [8, 0, 0, 0],
    ])
    assert moves.apply_move(Direction.DOWN)
    assert board_values(world) == [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [4, 0, 0, 0],
        [8, 0, 0, 0],
    ]


def test_events_carry_board_coordinates():
    bus, world, moves = _setup([
        [0, 0, 0, 0],
        [2, 2, 2, 2],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    events = _record(bus)
    moves.apply_move(Direction.RIGHT)
    assert events == [
        ('score', 4),
        ('moved', (1, 2), (1, 3), 4),
        ('score', 8),
        ('merged', (1, 1), (1, 0), (1, 2), 4),
    ]


def test_settled_board_is_not_changed():
    rows = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]
    bus, world, moves = _setup(rows)
    events = _record(bus)
    for direction in Direction:
        assert moves.apply_move(direction) is False
    assert board_values(world) == rows
    assert events == []


def test_board_sum_is_preserved_and_score_never_drops():
    bus, world, moves = _setup([
        [2, 2, 4, 8],
        [2, 0, 4, 4],
        [16, 16, 2, 0],
        [2, 0, 0, 2],
    ])
    total = get_board(world).total()
    last_score = 0
    for direction in (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN):
        moves.apply_move(direction)
        assert get_board(world).total() == total
        score = get_game_state(world).score
        assert score >= last_score
        last_score = score
