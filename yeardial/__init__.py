from yeardial.core.settings import DialSettings
from yeardial.core.geometry import AngleMapper, MIN_ANGLE, MAX_ANGLE

__all__ = ["DialSettings", "AngleMapper", "MIN_ANGLE", "MAX_ANGLE", "YearDial"]


def __getattr__(name):
    # YearDial pulls in dearpygui; core stays importable without it
    if name == "YearDial":
        from yeardial.ui.year_dial import YearDial
        return YearDial
    raise AttributeError(f"module 'yeardial' has no attribute {name!r}")
