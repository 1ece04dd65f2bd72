# yeardial/core/interaction.py

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .geometry import AngleMapper

__all__ = ["DragState", "PointerKind", "PointerEvent", "PointerCapture", "PointerTracker"]


class DragState(enum.Enum):
    IDLE     = "idle"
    DRAGGING = "dragging"


class PointerKind(enum.Enum):
    DOWN = "pointerdown"
    MOVE = "pointermove"
    UP   = "pointerup"


@dataclass(frozen=True, slots=True)
class PointerEvent:
    kind: PointerKind
    x:    float = 0.0      # local frame, origin at the dial centre
    y:    float = 0.0

    @classmethod
    def down(cls, x: float, y: float) -> "PointerEvent":
        return cls(PointerKind.DOWN, x, y)

    @classmethod
    def move(cls, x: float, y: float) -> "PointerEvent":
        return cls(PointerKind.MOVE, x, y)

    @classmethod
    def up(cls) -> "PointerEvent":
        return cls(PointerKind.UP)


class PointerCapture(Protocol):
    def acquire(self, tracker: "PointerTracker") -> Callable[[], None]:
        """Start routing move/up samples to `tracker`; return the release."""
        ...


class PointerTracker:
    """
    IDLE --down--> DRAGGING --move--> DRAGGING --up--> IDLE

    Down and every move commit a value; up only releases the capture.
    """

    def __init__(self,
                 mapper:  AngleMapper,
                 commit:  Callable[[int], None],
                 capture: PointerCapture):
        self.mapper  = mapper
        self._commit = commit
        self._capture = capture
        self._release: Optional[Callable[[], None]] = None
        self.state = DragState.IDLE

    @property
    def dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def handle(self, event: PointerEvent) -> DragState:
        if event.kind is PointerKind.DOWN:
            self._end()                         # stale capture from a lost up
            self._commit(self.mapper.pointer_to_value(event.x, event.y))
            self._release = self._capture.acquire(self)
            self.state = DragState.DRAGGING
        elif event.kind is PointerKind.MOVE:
            if self.dragging:
                self._commit(self.mapper.pointer_to_value(event.x, event.y))
        elif event.kind is PointerKind.UP:
            self._end()
        return self.state

    def cancel(self) -> None:
        """Drop an in-flight drag without committing anything."""
        self._end()

    def _end(self) -> None:
        release, self._release = self._release, None
        self.state = DragState.IDLE
        if release is not None:
            release()
