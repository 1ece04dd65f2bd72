from __future__ import annotations
from typing import Any, Callable, List, Optional, Protocol

from .geometry    import AngleMapper
from .interaction import PointerCapture, PointerEvent, PointerTracker
from .render      import DialFrame, DialLayout, render_frame
from .settings    import DialSettings

__all__ = ["DialController", "DialView", "Listener"]

Listener = Callable[[Any, int, Any], None]      # (sender, value, user_data)


class DialView(Protocol):
    def apply(self, frame: DialFrame) -> None: ...
    def publish(self, value: int) -> None: ...


class DialController:
    """
    Owns the current value. Every commit updates the value, publishes it,
    redraws, and only then notifies listeners, in registration order.
    """

    def __init__(self,
                 settings: DialSettings,
                 view:     DialView,
                 capture:  PointerCapture,
                 *,
                 sender:   Any = None,
                 layout:   DialLayout = DialLayout()):
        self.settings = settings
        self.layout   = layout
        self.mapper   = AngleMapper(settings.min, settings.max)
        self.sender   = sender
        self._view    = view
        self._value   = settings.value
        self._listeners: List[tuple] = []
        self.tracker  = PointerTracker(self.mapper, self._commit, capture)
        self._refresh()

    @property
    def value(self) -> int:
        return self._value

    @property
    def frame(self) -> DialFrame:
        return render_frame(self.mapper, self._value, self.layout)

    def set_value(self, v: int) -> int:
        """Programmatic update: clamped, redrawn, published, not notified."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"value must be int, got {type(v).__name__}")
        self._value = max(self.settings.min, min(self.settings.max, v))
        self._refresh()
        return self._value

    def add_listener(self, fn: Listener, user_data: Any = None) -> None:
        self._listeners.append((fn, user_data))

    def remove_listener(self, fn: Listener) -> None:
        self._listeners = [(f, u) for f, u in self._listeners if f is not fn]

    def handle(self, event: PointerEvent) -> None:
        self.tracker.handle(event)

    # internals
    def _refresh(self) -> None:
        self._view.publish(self._value)
        self._view.apply(self.frame)

    def _commit(self, v: int) -> None:
        self._value = v
        self._refresh()
        for fn, user_data in list(self._listeners):
            fn(self.sender, v, user_data)
