from tileslide.components.direction import Direction
from tileslide.components.game_state import GameMode
from tileslide.events.bus import (
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_DROPPED,
    EVENT_MOVE_REQUEST,
    EventBus,
)
from tileslide.systems.board_ops import get_game_state
from tileslide.systems.move import MoveSystem
from tileslide.systems.move_scheduler import MoveSchedulerSystem
from tileslide.world import create_world
from tests.helpers import board_values, drive_ticks, set_board


def _setup(rows, **kwargs):
    bus = EventBus()
    world = create_world(bus, dimension=len(rows))
    set_board(world, rows)
    moves = MoveSystem(world, bus)
    scheduler = MoveSchedulerSystem(world, bus, moves, **kwargs)
    return bus, world, scheduler


def test_first_move_applies_immediately():
    bus, world, scheduler = _setup([[0, 2], [0, 0]], delay=0.3)
    results = []
    assert scheduler.enqueue(Direction.LEFT, results.append)
    assert results == [True]
    assert board_values(world) == [[2, 0], [0, 0]]


def test_changing_move_then_noops_drain_after_delay_in_fifo_order():
    bus, world, scheduler = _setup([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], delay=0.3)
    results = []
    scheduler.enqueue(Direction.LEFT, lambda changed: results.append(('left', changed)))
    scheduler.enqueue(Direction.LEFT, lambda changed: results.append(('left-again', changed)))
    scheduler.enqueue(Direction.UP, lambda changed: results.append(('up', changed)))
    assert results == [('left', True)]
    assert scheduler.pending_count == 2

    drive_ticks(bus, count=4, dt=0.05)  # still inside the delay
    assert results == [('left', True)]

    drive_ticks(bus, count=1, dt=0.15)
    assert results == [('left', True), ('left-again', False), ('up', False)]
    assert scheduler.pending_count == 0
    assert not scheduler.queue.cooling_down


def test_second_changing_move_waits_for_delay():
    bus, world, scheduler = _setup([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], delay=0.3)
    results = []
    scheduler.enqueue(Direction.LEFT, results.append)
    scheduler.enqueue(Direction.RIGHT, results.append)
    assert results == [True]
    assert board_values(world)[0] == [2, 0, 0, 0]

    drive_ticks(bus, count=1, dt=0.31)
    assert results == [True, True]
    assert board_values(world)[0] == [0, 0, 0, 2]
    # The second changing move restarts the cooldown.
    assert scheduler.queue.cooling_down


def test_enqueue_during_cooldown_waits_even_when_queue_was_empty():
    bus, world, scheduler = _setup([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], delay=0.3)
    results = []
    scheduler.enqueue(Direction.LEFT, results.append)
    drive_ticks(bus, count=2, dt=0.1)
    scheduler.enqueue(Direction.RIGHT, results.append)
    assert results == [True]
    drive_ticks(bus, count=1, dt=0.15)
    assert results == [True, True]


def test_noop_move_does_not_start_cooldown():
    bus, world, scheduler = _setup([[2, 0], [0, 0]], delay=0.3)
    results = []
    scheduler.enqueue(Direction.LEFT, results.append)
    scheduler.enqueue(Direction.RIGHT, results.append)
    assert results == [False, True]


def test_overflow_rejects_newest_without_callback():
    bus, world, scheduler = _setup([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
                                   delay=0.3, max_pending=2)
    dropped = []
    bus.subscribe(EVENT_MOVE_DROPPED, lambda s, **k: dropped.append((k['direction'], k['reason'])))
    results = []
    assert scheduler.enqueue(Direction.LEFT, lambda c: results.append(('a', c)))
    assert scheduler.enqueue(Direction.RIGHT, lambda c: results.append(('b', c)))
    assert scheduler.enqueue(Direction.LEFT, lambda c: results.append(('c', c)))
    assert not scheduler.enqueue(Direction.UP, lambda c: results.append(('d', c)))
    assert dropped == [(Direction.UP, 'queue_full')]

    drive_ticks(bus, count=10, dt=0.1)
    assert [name for name, _ in results] == ['a', 'b', 'c']


def test_reset_discards_pending_callbacks_and_cancels_timer():
    bus, world, scheduler = _setup([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], delay=0.3)
    results = []
    scheduler.enqueue(Direction.LEFT, lambda c: results.append(('first', c)))
    scheduler.enqueue(Direction.RIGHT, lambda c: results.append(('discarded', c)))
    scheduler.reset()
    assert scheduler.pending_count == 0
    assert not scheduler.queue.cooling_down
    drive_ticks(bus, count=10, dt=0.1)
    assert results == [('first', True)]


def test_reset_inside_callback_stops_discarded_commands():
    bus, world, scheduler = _setup([[2, 0], [0, 0]], delay=0.3)
    results = []

    def reset_after(changed):
        results.append(('reset', changed))
        scheduler.reset()

    scheduler.enqueue(Direction.RIGHT, lambda c: results.append(('first', c)))
    scheduler.enqueue(Direction.LEFT, reset_after)
    scheduler.enqueue(Direction.DOWN, lambda c: results.append(('discarded', c)))
    drive_ticks(bus, count=10, dt=0.1)
    assert results == [('first', True), ('reset', True)]
    assert scheduler.pending_count == 0
    assert not scheduler.queue.cooling_down


def test_move_applied_event_and_move_request_routing():
    bus, world, scheduler = _setup([[0, 2], [0, 0]], delay=0.3)
    applied = []
    bus.subscribe(EVENT_MOVE_APPLIED, lambda s, **k: applied.append((k['direction'], k['changed'])))
    bus.emit(EVENT_MOVE_REQUEST, direction=Direction.LEFT)
    assert applied == [(Direction.LEFT, True)]


def test_move_request_ignored_when_game_is_over():
    bus, world, scheduler = _setup([[0, 2], [0, 0]], delay=0.3)
    get_game_state(world).mode = GameMode.LOST
    bus.emit(EVENT_MOVE_REQUEST, direction=Direction.LEFT)
    assert board_values(world) == [[0, 2], [0, 0]]
    assert scheduler.pending_count == 0


def test_zero_delay_drains_everything_at_once():
    bus, world, scheduler = _setup([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], delay=0.0)
    results = []
    scheduler.enqueue(Direction.LEFT, results.append)
    scheduler.enqueue(Direction.RIGHT, results.append)
    assert results == [True, True]
