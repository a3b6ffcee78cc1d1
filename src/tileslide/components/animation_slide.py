from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SlideAnimation:
    src: Tuple[int,int]
    dst: Tuple[int,int]
    value: int
    merge: bool = False  # destination pops once the slide lands
    linear: float = 0.0  # 0..1
