"""Shared fixtures: a scripted location capability and a session wired to it."""
from datetime import datetime, timedelta, timezone

import pytest

from fieldlog.context import InlineContext
from fieldlog.models.location import AuthorizationStatus, LocationFix
from fieldlog.services.location.provider import LocationProvider
from fieldlog.services.session.log import SessionLog

T0 = datetime(2025, 12, 13, 8, 30, 0, tzinfo=timezone.utc)


class FakeCapability:
    """Test double for the platform location service.

    Records what the provider asked for; tests fire the three notifications
    by hand.
    """

    def __init__(self, status=AuthorizationStatus.NOT_DETERMINED):
        self.status = status
        self.delegate = None
        self.permission_requests = 0
        self.start_calls = 0

    def bind(self, delegate):
        self.delegate = delegate

    def authorization_status(self):
        return self.status

    def request_permission(self):
        self.permission_requests += 1

    def start_updates(self):
        self.start_calls += 1

    # notifications
    def change_authorization(self, status):
        self.status = status
        self.delegate.authorization_changed(status)

    def deliver(self, *fixes):
        self.delegate.fixes_delivered(list(fixes))

    def fail(self, message):
        self.delegate.updates_failed(message)


class StepClock:
    def __init__(self, start=T0, step=timedelta(seconds=10)):
        self.now = start
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


def make_fix(lat=25.03, lon=121.56, acc=5.0):
    return LocationFix(latitude=lat, longitude=lon, horizontal_accuracy=acc, timestamp=T0)


@pytest.fixture
def capability():
    return FakeCapability()


@pytest.fixture
def provider(capability):
    return LocationProvider(capability, InlineContext())


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def session_log(provider, clock):
    return SessionLog(provider, clock=clock)


@pytest.fixture
def located_log(capability, session_log):
    """A session whose provider already has a fix."""
    capability.deliver(make_fix())
    return session_log
