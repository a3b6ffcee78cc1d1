from esper import World
from tileslide.components.animation_pop import PopAnimation
from tileslide.components.animation_slide import SlideAnimation
from tileslide.components.duration import Duration
from tileslide.constants import POP_DURATION, SLIDE_DURATION
from typing import Tuple

class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_slide(self, src: Tuple[int,int], dst: Tuple[int,int], value: int,
                     merge: bool = False, duration: float = SLIDE_DURATION) -> int:
        return self.world.create_entity(
            SlideAnimation(src=src, dst=dst, value=value, merge=merge),
            Duration(duration),
        )

    def create_pop(self, pos: Tuple[int,int], value: int, duration: float = POP_DURATION) -> int:
        return self.world.create_entity(PopAnimation(pos=pos, value=value), Duration(duration))
