from tileslide.events.bus import (EVENT_TICK, EventBus, EVENT_ANIMATION_COMPLETE, EVENT_GAME_RESET,
                                  EVENT_TILE_MOVED, EVENT_TILES_MERGED, EVENT_TILE_INSERTED)
from tileslide.components.animation_slide import SlideAnimation
from tileslide.components.animation_pop import PopAnimation
from tileslide.components.duration import Duration
from tileslide.animation_factory import AnimationFactory
from esper import World


class AnimationSystem:
    """Drives timing of tile animations; each animation is its own entity.

    Slides come from tile_moved/tiles_merged, pops from tile_inserted and from
    merges once their slide lands. Board state is already final when these
    start; the animations only affect where tiles are drawn.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_TILE_MOVED, self.on_tile_moved)
        event_bus.subscribe(EVENT_TILES_MERGED, self.on_tiles_merged)
        event_bus.subscribe(EVENT_TILE_INSERTED, self.on_tile_inserted)
        event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)

    def on_tile_moved(self, sender, **kwargs):
        src = kwargs.get('source'); dst = kwargs.get('destination')
        if src is None or dst is None:
            return
        # A one-tile merge moves onto an occupied cell; the value doubled there.
        merge = kwargs.get('merge', False)
        value = kwargs.get('value', 0)
        self.factory.create_slide(src, dst, value // 2 if merge else value, merge=merge)

    def on_tiles_merged(self, sender, **kwargs):
        dst = kwargs.get('destination')
        value = kwargs.get('value', 0)
        for key in ('first_source', 'second_source'):
            src = kwargs.get(key)
            if src is not None and src != dst:
                self.factory.create_slide(src, dst, value // 2, merge=True)

    def on_tile_inserted(self, sender, **kwargs):
        pos = kwargs.get('position')
        if pos is None:
            return
        self.factory.create_pop(pos, kwargs.get('value', 0))

    def on_game_reset(self, sender, **kwargs):
        for comp_type in (SlideAnimation, PopAnimation):
            for ent, _ in list(self.world.get_component(comp_type)):
                self.world.delete_entity(ent, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        slides = list(self.world.get_component(SlideAnimation))
        if slides:
            for ent, slide in slides:
                d = self.world.component_for_entity(ent, Duration)
                slide.linear = min(1.0, slide.linear + dt / d.value)
            if all(slide.linear >= 1.0 for _, slide in slides):
                items = [{'from': slide.src, 'to': slide.dst} for _, slide in slides]
                landed = {slide.dst: slide.value * 2 for _, slide in slides if slide.merge}
                for ent, _ in slides:
                    self.world.delete_entity(ent, immediate=True)
                for pos, value in landed.items():
                    self.factory.create_pop(pos, value)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='slide', items=items)
        pops = list(self.world.get_component(PopAnimation))
        if pops:
            for ent, pop in pops:
                d = self.world.component_for_entity(ent, Duration)
                pop.linear = min(1.0, pop.linear + dt / d.value)
            if all(pop.linear >= 1.0 for _, pop in pops):
                positions = [pop.pos for _, pop in pops]
                for ent, _ in pops:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='pop', items=positions)
