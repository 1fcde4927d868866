"""Shared fixtures for task clock tests."""

import io

import pytest
from rich.console import Console


class FakeClock:
    """Monotonic clock stand-in that advances `step` seconds per reading."""

    def __init__(self, start=0.0, step=0.0):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


class ScriptedListener:
    """Listener factory that pre-loads the event queue instead of reading keys."""

    def __init__(self, events=()):
        self.script = list(events)
        self.entered = 0
        self.exited = 0

    def __call__(self, events):
        self.queue = events
        return self

    def __enter__(self):
        self.entered += 1
        for event in self.script:
            self.queue.put(event)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1
        return False


@pytest.fixture
def captured_console():
    """Rich console writing into a buffer."""
    return Console(file=io.StringIO(), width=200, highlight=False)


def console_text(con):
    return con.file.getvalue()
