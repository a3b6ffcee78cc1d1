"""Entry point for the Tileslide sliding-tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, key
from tileslide.world import create_world
from tileslide.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from tileslide.components.direction import Direction
from tileslide.events.bus import (
    EventBus, EVENT_TICK, EVENT_MOVE_REQUEST, EVENT_RESET_REQUEST, EVENT_CONTINUE_REQUEST,
)
from tileslide.systems.animation import AnimationSystem
from tileslide.systems.game_flow import GameFlowSystem
from tileslide.systems.move import MoveSystem
from tileslide.systems.move_scheduler import MoveSchedulerSystem
from tileslide.systems.render import RenderSystem

KEY_DIRECTIONS = {
    key.UP: Direction.UP,
    key.W: Direction.UP,
    key.DOWN: Direction.DOWN,
    key.S: Direction.DOWN,
    key.LEFT: Direction.LEFT,
    key.A: Direction.LEFT,
    key.RIGHT: Direction.RIGHT,
    key.D: Direction.RIGHT,
}

class TileslideWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.move_system = MoveSystem(self.world, self.event_bus)
        self.move_scheduler = MoveSchedulerSystem(self.world, self.event_bus, self.move_system)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus, self.move_scheduler)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color((250, 248, 239))
        self.game_flow_system.start()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
        elif symbol == key.R:
            self.event_bus.emit(EVENT_RESET_REQUEST)
        elif symbol == key.C:
            self.event_bus.emit(EVENT_CONTINUE_REQUEST)

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = TileslideWindow()
    run()

if __name__ == "__main__":
    main()
