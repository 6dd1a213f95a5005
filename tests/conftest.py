"""Shared test doubles for the splash view tests."""

import pytest

from splashview import SplashHost, SplashListener, create_default_config
from splashview.renderer import Surface


class RecordingSurface(Surface):
    """Surface that records draw calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def fill(self, color):
        self.calls.append(('fill', color))

    def draw_circle(self, center, radius, color):
        self.calls.append(('circle', center, radius, color))

    def draw_ring(self, center, radius, stroke_width, color):
        self.calls.append(('ring', center, radius, stroke_width, color))

    def clear(self):
        self.calls = []

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


class RecordingListener(SplashListener):
    """Listener that records every notification, optionally into a shared event log."""

    def __init__(self, events=None):
        self.events = events if events is not None else []
        self.starts = 0
        self.ends = 0
        self.fractions = []

    def on_start(self):
        self.starts += 1
        self.events.append('start')

    def on_update(self, fraction):
        self.fractions.append(fraction)
        self.events.append('update')

    def on_end(self):
        self.ends += 1
        self.events.append('end')


class RecordingHost(SplashHost):
    """Host container that records removals."""

    def __init__(self, events=None):
        self.events = events if events is not None else []
        self.removed = []

    def remove_view(self, view):
        self.removed.append(view)
        self.events.append('remove')


@pytest.fixture
def fast_config():
    # exact binary fractions so phase ends line up with 0.125s ticks
    return create_default_config(
        rotation_duration=1.0,
        merge_duration=0.5,
        singular_duration=0.25,
        expand_duration=0.5,
    )


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def events():
    return []


@pytest.fixture
def listener(events):
    return RecordingListener(events)


@pytest.fixture
def host(events):
    return RecordingHost(events)
