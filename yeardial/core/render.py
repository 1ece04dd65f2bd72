from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Tuple

from .geometry import AngleMapper

__all__ = ["DialLayout", "DialFrame", "render_frame"]


@dataclass(frozen=True, slots=True)
class DialLayout:
    """Fixed pixel geometry of the dial; never changes after construction."""
    width:       int = 140
    height:      int = 140
    radius:      float = 50.0   # knob track
    knob_radius: float = 6.0
    tick_step:   int = 5

    BEZEL_FILL:   ClassVar[tuple] = (245, 245, 255, 255)   # #f5f5ff
    BEZEL_STROKE: ClassVar[tuple] = (204, 204, 204, 255)   # #ccc
    TICK_COLOR:   ClassVar[tuple] = (170, 170, 170, 255)   # #aaa
    KNOB_COLOR:   ClassVar[tuple] = (68, 68, 68, 255)      # #444
    TEXT_COLOR:   ClassVar[tuple] = (20, 20, 20, 255)
    TEXT_SIZE:    ClassVar[int] = 16

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def bezel_radius(self) -> float:
        return self.radius + 10

    @property
    def tick_span(self) -> Tuple[float, float]:
        return self.radius + 4, self.radius + 10


@dataclass(frozen=True, slots=True)
class DialFrame:
    value: int
    knob:  Tuple[float, float]     # local frame, origin at the dial centre
    text:  str


def render_frame(mapper: AngleMapper, value: int, layout: DialLayout = DialLayout()) -> DialFrame:
    """What the knob and the value text must show for `value`."""
    return DialFrame(value=value,
                     knob=mapper.point_at(value, layout.radius),
                     text=str(value))
