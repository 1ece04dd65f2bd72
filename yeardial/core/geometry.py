# yeardial/core/geometry.py

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar, List, Tuple

__all__ = ["AngleMapper", "MIN_ANGLE", "MAX_ANGLE"]

# 270° of travel; the 90° gap is at the bottom (screen y points down)
MIN_ANGLE = -0.75 * math.pi
MAX_ANGLE =  0.75 * math.pi

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class AngleMapper:
    """
    Linear map between the integer range [lo, hi] and the dial arc
    [MIN_ANGLE, MAX_ANGLE]. Angles are radians in the dial's local frame,
    origin at the centre.
    """
    lo: int
    hi: int

    min_angle: ClassVar[float] = MIN_ANGLE
    max_angle: ClassVar[float] = MAX_ANGLE

    def __post_init__(self):
        if self.lo >= self.hi:
            raise ValueError(f"Need lo < hi, got [{self.lo}, {self.hi}]")

    def value_to_angle(self, v: float) -> float:
        t = (v - self.lo) / (self.hi - self.lo)
        # a*(1-t) + b*t hits both ends exactly
        return self.min_angle * (1 - t) + self.max_angle * t

    def angle_to_value(self, angle: float) -> int:
        """Clamp onto the arc, then inverse-interpolate and round half up."""
        a = max(self.min_angle, min(self.max_angle, angle))
        t = (a - self.min_angle) / (self.max_angle - self.min_angle)
        raw = self.lo + t * (self.hi - self.lo)
        return max(self.lo, min(self.hi, math.floor(raw + 0.5)))

    def pointer_to_value(self, x: float, y: float) -> int:
        # atan2(0, 0) == 0 → centre of the arc
        return self.angle_to_value(math.atan2(y, x))

    # helpers
    def point_at(self, v: float, radius: float) -> Point:
        a = self.value_to_angle(v)
        return radius * math.cos(a), radius * math.sin(a)

    def tick_values(self, step: int = 5) -> List[int]:
        return list(range(self.lo, self.hi + 1, step))

    def tick_segment(self, v: float, inner: float, outer: float) -> Tuple[Point, Point]:
        return self.point_at(v, inner), self.point_at(v, outer)
