from __future__ import annotations

import pytest

from yeardial.core.dial import DialController
from yeardial.core.settings import DialSettings


class RecordingView:
    def __init__(self):
        self.frames = []
        self.published = []

    def apply(self, frame):
        self.frames.append(frame)

    def publish(self, value):
        self.published.append(value)


class CountingCapture:
    def __init__(self):
        self.acquired = 0
        self.released = 0

    @property
    def live(self) -> int:
        return self.acquired - self.released

    def acquire(self, tracker):
        self.acquired += 1
        done = []

        def release():
            assert not done, "capture released twice"
            done.append(True)
            self.released += 1
        return release


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def capture() -> CountingCapture:
    return CountingCapture()


@pytest.fixture
def dial(view, capture) -> DialController:
    return DialController(DialSettings(), view, capture, sender="dial")
