import dearpygui.dearpygui as dpg

from yeardial.core.settings      import DialSettings
from yeardial.core.logging_utils import log
from yeardial.ui.year_dial       import YearDial


class MainWindow:
    """Small host window: one dial plus a readout that follows it."""

    def __init__(self, settings: DialSettings | None = None):
        self.settings = settings or DialSettings.load()
        self.changes  = 0

        # ── Main Window ─────────────────────────────────────────
        with dpg.window(label="Year Dial", tag="main_window", width=320, height=260):
            with dpg.group(horizontal=True):
                self.dial = YearDial(self.settings, callback=self._on_input)

                # ---- RIGHT PANEL ----
                with dpg.group():
                    dpg.add_text("Selected", bullet=True)
                    self.readout = dpg.add_text(str(self.dial.value))
                    self.counter = dpg.add_text("0 updates")
                    dpg.add_button(label="Reset", width=100, callback=self._on_reset)

        dpg.set_primary_window("main_window", True)

    def _on_input(self, sender, value, user_data):
        self.changes += 1
        dpg.set_value(self.readout, str(value))
        dpg.set_value(self.counter, f"{self.changes} updates")

    def _on_reset(self):
        v = self.dial.set_value(self.settings.value)
        dpg.set_value(self.readout, str(v))
        log(f"[DIAL] Reset → {v}")
