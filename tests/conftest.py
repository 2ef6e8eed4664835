"""
Shared fixtures for scheduling core tests
"""
from datetime import date

import pytest

from models import Participant, SchedulingContext, SchedulingSettings

# Mid-January: New York is on EST (UTC-5), London on GMT (UTC+0)
REFERENCE_DATE = date(2025, 1, 15)


def make_participant(name, timezone='UTC', start='09:00', end='17:00', **extra):
    return Participant(name=name, timezone=timezone, start=start, end=end, **extra)


def make_context(participants, reference_date=REFERENCE_DATE, **settings):
    return SchedulingContext(
        participants=participants,
        settings=SchedulingSettings(**settings),
        reference_date=reference_date,
    )


@pytest.fixture
def reference_date():
    return REFERENCE_DATE


@pytest.fixture
def alice():
    return make_participant('Alice', 'America/New_York', '09:00', '17:00', priority='required', color='#14b8a6')


@pytest.fixture
def bob():
    return make_participant('Bob', 'Europe/London', '08:30', '16:30', priority='required', color='#06b6d4')


@pytest.fixture
def transatlantic(alice, bob):
    return [alice, bob]
