from __future__ import annotations
from typing import Any, Callable, Optional
import dearpygui.dearpygui as dpg

from yeardial.core.dial          import DialController, Listener
from yeardial.core.geometry      import AngleMapper
from yeardial.core.interaction   import PointerEvent, PointerTracker
from yeardial.core.render        import DialFrame, DialLayout
from yeardial.core.settings      import DialSettings
from yeardial.utils.dial_drawing import create_dial, update_dial


class _DrawlistView:
    """Pushes frames onto the drawlist and mirrors the value into `source`."""

    def __init__(self, drawlist: str, source: str, layout: DialLayout):
        self.drawlist = drawlist
        self.source   = source
        self.layout   = layout

    def apply(self, frame: DialFrame) -> None:
        update_dial(self.drawlist, frame, self.layout)

    def publish(self, value: int) -> None:
        if dpg.does_item_exist(self.source):
            dpg.set_value(self.source, value)


class _ViewportCapture:
    """
    Mouse move/release handlers on a global handler registry, so a drag keeps
    going after the pointer leaves the drawlist. One registry per drag.
    """

    def __init__(self, dial: "YearDial"):
        self.dial = dial
        self.registry: Optional[int] = None

    def sample(self, tracker: PointerTracker):
        """
        Feed one move sample. The release handler only exists once the
        queued click callback has run, so a release in between is caught
        here from the live button state.
        """
        if dpg.is_mouse_button_down(dpg.mvMouseButton_Left):
            return tracker.handle(PointerEvent.move(*self.dial.local_mouse_pos()))
        return tracker.handle(PointerEvent.up())

    def acquire(self, tracker: PointerTracker) -> Callable[[], None]:
        with dpg.handler_registry() as reg:
            dpg.add_mouse_move_handler(callback=lambda s, a, u: self.sample(tracker))
            dpg.add_mouse_release_handler(
                button=dpg.mvMouseButton_Left,
                callback=lambda s, a, u: tracker.handle(PointerEvent.up()))
        self.registry = reg

        def release():
            if dpg.does_item_exist(reg):
                dpg.delete_item(reg)
            if self.registry == reg:
                self.registry = None
        return release


class YearDial:
    """
    Radial integer picker. `tag` is the root group; `value` is the current
    integer; listeners get (tag, value, user_data) once per committed update.
    """

    def __init__(self,
                 settings:  DialSettings | None = None,
                 *,
                 parent:    str | int = 0,
                 tag:       str | None = None,
                 callback:  Listener | None = None,
                 user_data: Any = None,
                 layout:    DialLayout = DialLayout(),
                 **overrides):
        settings = (settings or DialSettings()).with_overrides(**overrides)
        self.tag      = tag or f"year_dial_{dpg.generate_uuid()}"
        self.drawlist = f"{self.tag}_dial"
        self.source   = f"{self.tag}_value"
        self.layout   = layout

        # hidden mirror of the value, readable with dpg.get_value(dial.source)
        with dpg.value_registry(tag=f"{self.tag}_values"):
            dpg.add_int_value(tag=self.source, default_value=settings.value)

        with dpg.group(tag=self.tag, parent=parent):
            dpg.add_text(settings.label, tag=f"{self.tag}_label")
            create_dial(self.drawlist, AngleMapper(settings.min, settings.max), layout)

        self.capture = _ViewportCapture(self)
        self.ctrl = DialController(settings,
                                   _DrawlistView(self.drawlist, self.source, layout),
                                   self.capture,
                                   sender=self.tag,
                                   layout=layout)
        if callback is not None:
            self.ctrl.add_listener(callback, user_data)

        with dpg.item_handler_registry(tag=f"{self.tag}_handlers"):
            dpg.add_item_clicked_handler(button=dpg.mvMouseButton_Left,
                                         callback=self._on_pointer_down)
        dpg.bind_item_handler_registry(self.drawlist, f"{self.tag}_handlers")

    # public surface
    @property
    def value(self) -> int:
        return self.ctrl.value

    @property
    def settings(self) -> DialSettings:
        return self.ctrl.settings

    def set_value(self, v: int) -> int:
        return self.ctrl.set_value(v)

    def add_listener(self, fn: Listener, user_data: Any = None) -> None:
        self.ctrl.add_listener(fn, user_data)

    def remove_listener(self, fn: Listener) -> None:
        self.ctrl.remove_listener(fn)

    def local_mouse_pos(self):
        """Mouse position relative to the dial centre."""
        mx, my = dpg.get_mouse_pos(local=False)
        x0, y0 = dpg.get_item_rect_min(self.drawlist)
        cx, cy = self.layout.center
        return mx - x0 - cx, my - y0 - cy

    def delete(self) -> None:
        self.ctrl.tracker.cancel()
        for item in (self.tag, f"{self.tag}_handlers", f"{self.tag}_values"):
            if dpg.does_item_exist(item):
                dpg.delete_item(item)

    # callbacks
    def _on_pointer_down(self, sender, app_data, user_data):
        self.ctrl.handle(PointerEvent.down(*self.local_mouse_pos()))
