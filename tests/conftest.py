"""
Test configuration and fixtures for the consulting site.

No database is involved: every page is rendered from static content, so
tests use the Django test client without the ``db`` fixture.
"""

import pytest

from analytics.tracking import AnalyticsSink, get_sink, set_sink
from consultants.data import Consultant


class RecordingSink(AnalyticsSink):
    """Keeps every event it receives, for assertions."""

    def __init__(self):
        self.events = []

    def send(self, event_name, params):
        self.events.append((event_name, params))

    def names(self):
        return [name for name, _ in self.events]


@pytest.fixture(autouse=True)
def no_submit_delay(settings):
    """Contact submissions complete immediately in tests."""
    settings.CONTACT_SUBMIT_DELAY = 0


@pytest.fixture
def recording_sink():
    """Install a recording analytics sink for the duration of a test."""
    previous = get_sink()
    sink = RecordingSink()
    set_sink(sink)
    yield sink
    set_sink(previous)


def make_consultant(consultant_id, specialties, **overrides):
    fields = {
        'id': consultant_id,
        'name': f"Consultant {consultant_id.upper()}",
        'title': "Consultant",
        'short_bio': f"Short bio for {consultant_id}.",
        'full_bio': f"First paragraph for {consultant_id}.\n\nSecond paragraph.",
        'image': f"/images/consultants/{consultant_id}.jpg",
        'specialties': tuple(specialties),
    }
    fields.update(overrides)
    return Consultant(**fields)


@pytest.fixture
def roster():
    """The A/B/C scenario: A tagged x and y, B tagged y, C tagged z."""
    return (
        make_consultant('a', ['x', 'y']),
        make_consultant('b', ['y']),
        make_consultant('c', ['z']),
    )


@pytest.fixture(name='make_consultant')
def make_consultant_fixture():
    return make_consultant
