import io
from contextlib import contextmanager

import pytest


class FakeTime:
    """Manually advanced time source paired with a sleep that advances it."""

    def __init__(self, start=100.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeTerminal:
    """Enough of ``blessed.Terminal`` for the renderer, the input reader and ``run``."""

    clear = "<clear>"
    home = "<home>"
    hide_cursor = "<hide>"

    def __init__(self, width=80, height=24, keys=(), stream=None, keyboard=True):
        self._keyboard_fd = 0 if keyboard else None
        self.width = width
        self.height = height
        self.stream = stream if stream is not None else io.StringIO()
        self._keys = list(keys)
        self.entered = []
        self.exited = []

    def move_xy(self, x, y):
        return f"<move {x},{y}>"

    def inkey(self, timeout=None):
        if self._keys:
            return self._keys.pop(0)
        return ""

    @contextmanager
    def _mode(self, name):
        self.entered.append(name)
        try:
            yield
        finally:
            self.exited.append(name)

    def fullscreen(self):
        return self._mode("fullscreen")

    def raw(self):
        return self._mode("raw")

    def hidden_cursor(self):
        return self._mode("hidden_cursor")


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def fake_term():
    return FakeTerminal()
