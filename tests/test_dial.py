import math

import pytest

from yeardial.core.dial import DialController
from yeardial.core.interaction import DragState, PointerEvent
from yeardial.core.settings import DialSettings


def _at(dial, v, r=50.0):
    return dial.mapper.point_at(v, r)


def test_initial_state(dial, view):
    assert dial.value == 2015
    assert dial.tracker.state is DragState.IDLE
    assert view.published == [2015]
    assert view.frames[-1].knob == pytest.approx(_at(dial, 2015))
    assert view.frames[-1].text == "2015"


def test_pointer_down_at_max_fires_once(dial, view):
    seen = []
    dial.add_listener(lambda sender, value, user_data: seen.append((sender, value, user_data)), "ud")
    dial.handle(PointerEvent.down(*_at(dial, 2024)))
    assert dial.value == 2024
    assert seen == [("dial", 2024, "ud")]
    assert view.frames[-1].text == "2024"


def test_pointer_down_in_gap_clamps_to_min(dial):
    seen = []
    dial.add_listener(lambda s, v, u: seen.append(v))
    dial.handle(PointerEvent.down(math.cos(-math.pi), math.sin(-math.pi)))
    assert dial.value == 2000
    assert seen == [2000]


def test_drag_emits_one_notification_per_event(dial, capture):
    seen = []
    dial.add_listener(lambda s, v, u: seen.append(v))
    targets = [2003, 2010, 2018, 2021]
    dial.handle(PointerEvent.down(*_at(dial, targets[0])))
    for v in targets[1:]:
        dial.handle(PointerEvent.move(*_at(dial, v, r=500)))
    dial.handle(PointerEvent.up())
    assert seen == targets
    assert dial.value == 2021
    assert capture.live == 0


def test_repeated_value_still_notifies(dial):
    seen = []
    dial.add_listener(lambda s, v, u: seen.append(v))
    dial.handle(PointerEvent.down(*_at(dial, 2010)))
    dial.handle(PointerEvent.move(*_at(dial, 2010)))
    assert seen == [2010, 2010]


def test_value_is_updated_before_listeners_run(dial, view):
    observed = []
    dial.add_listener(lambda s, v, u: observed.append((dial.value, view.published[-1], view.frames[-1].value)))
    dial.handle(PointerEvent.down(*_at(dial, 2001)))
    assert observed == [(2001, 2001, 2001)]


def test_listeners_run_in_registration_order(dial):
    order = []
    dial.add_listener(lambda s, v, u: order.append("a"))
    dial.add_listener(lambda s, v, u: order.append("b"))
    dial.handle(PointerEvent.down(1, 0))
    assert order == ["a", "b"]


def test_remove_listener(dial):
    seen = []
    fn = lambda s, v, u: seen.append(v)
    dial.add_listener(fn)
    dial.remove_listener(fn)
    dial.handle(PointerEvent.down(1, 0))
    assert seen == []


def test_set_value_clamps_and_does_not_notify(dial, view):
    seen = []
    dial.add_listener(lambda s, v, u: seen.append(v))
    assert dial.set_value(1990) == 2000
    assert dial.set_value(2019) == 2019
    assert dial.value == 2019
    assert view.published[-1] == 2019
    assert view.frames[-1].text == "2019"
    assert seen == []


def test_render_does_not_depend_on_history(view, capture):
    a = DialController(DialSettings(value=2005), view, capture)
    first = a.frame
    a.handle(PointerEvent.down(1, 0))
    a.set_value(2005)
    assert a.frame == first


def test_listener_errors_propagate(dial):
    def boom(s, v, u):
        raise RuntimeError("host bug")
    dial.add_listener(boom)
    with pytest.raises(RuntimeError):
        dial.handle(PointerEvent.down(1, 0))
    assert dial.value == 2012


def test_instances_do_not_share_state(view, capture):
    a = DialController(DialSettings(), view, capture)
    b = DialController(DialSettings(), view, capture)
    a.handle(PointerEvent.down(-1, -1))
    assert b.value == 2015


@pytest.mark.parametrize("bad", [2019.9, "2019", True, None])
def test_set_value_rejects_non_int(dial, view, bad):
    frames = len(view.frames)
    with pytest.raises(TypeError):
        dial.set_value(bad)
    assert dial.value == 2015
    assert len(view.frames) == frames
