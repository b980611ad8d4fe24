"""Shared fixtures for WorkWatch tests."""

import pytest

from workwatch.app import WorkWatchApp
from workwatch.notifications import Notifier


class RecordingNotifier(Notifier):
    """Notifier double that remembers every call."""

    def __init__(self):
        self.calls = []

    def clock_in(self, username):
        self.calls.append(('clock_in', username))

    def clock_out(self, username, elapsed, logs):
        self.calls.append(('clock_out', username, elapsed, logs))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(notifier):
    return WorkWatchApp('Ada', notifier)
