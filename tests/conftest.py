"""
Pytest configuration and fixtures for archwizard tests.
"""

from collections import deque

import pytest

from archwizard.events import Char, Key
from archwizard.i18n import init as i18n_init


@pytest.fixture(autouse=True)
def english():
    i18n_init("en")


class FakeScreen:
    """Stands in for TerminalScreen: records frames, replays events."""

    def __init__(self, events):
        self.events = deque(events)
        self.frames = []
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc_info):
        self.exited = True

    def draw(self, renderable):
        self.frames.append(renderable)

    def read_event(self):
        if not self.events:
            raise AssertionError("session asked for more input than was scripted")
        return self.events.popleft()


def type_text(text):
    return [Char(c) for c in text]


def full_run_events():
    """Answer all twelve questions: three texts, nine default choices."""
    events = []
    events += type_text("archbox") + [Key.CONFIRM]
    events += type_text("alice") + [Key.CONFIRM]
    events += [Key.CONFIRM]                                   # empty password
    events += [Key.MOVE_DOWN, Key.MOVE_DOWN, Key.CONFIRM]     # Europe/London
    events += [Key.CONFIRM]                                   # en_US.UTF-8
    events += type_text("DE") + [Key.CONFIRM]                 # de
    events += [Key.MOVE_DOWN, Key.CONFIRM]                    # ext4
    events += [Key.CONFIRM]                                   # pacman
    events += type_text("gr") + [Key.CONFIRM]                 # grub
    events += [Key.THEME_CYCLE, Key.MOVE_DOWN, Key.CONFIRM]   # kde
    events += [Key.CONFIRM]                                   # US
    events += [Key.MOVE_DOWN, Key.CONFIRM]                    # No
    return events


@pytest.fixture
def fake_screen_factory():
    """Return a factory building a FakeScreen for the given events."""
    created = []

    def factory(events):
        def make():
            screen = FakeScreen(events)
            created.append(screen)
            return screen
        return make

    factory.created = created
    return factory
