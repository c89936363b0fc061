"""Pytest fixtures for tests."""

from collections import deque

import pytest

from launchgrid.devices import IncomingEvent, LAUNCHPAD_MK2, LAUNCHPAD_MK2_SIDE


class FakeTransport:
    """In-memory transport: queued incoming events, recorded LED commands."""

    def __init__(self, events=()):
        self.incoming = deque(events)
        self.sent = []
        self.receive_attempts = 0

    def push(self, status, key, velocity):
        self.incoming.append(IncomingEvent(status=status, key=key, velocity=velocity))

    def try_receive(self):
        self.receive_attempts += 1
        if self.incoming:
            return self.incoming.popleft()
        return None

    def send(self, command):
        self.sent.append(command)
        return True

    def send_all(self, commands):
        return sum(1 for command in commands if self.send(command))


class FakeRunner:
    """CommandRunner test double returning canned output per subcommand."""

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        # Key on everything after the program name and its global flags
        for key, value in self.outputs.items():
            if tuple(args[-len(key):]) == key:
                return value
        return ""


class FakeClock:
    """Manually advanced monotonic clock; sleeping advances it."""

    def __init__(self, start=100.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mk2_profile():
    return LAUNCHPAD_MK2


@pytest.fixture
def side_profile():
    return LAUNCHPAD_MK2_SIDE


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner
