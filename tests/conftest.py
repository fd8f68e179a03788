"""
Shared fixtures for dialogue engine tests.

Provides a fixed clock and seeded random generators so replies are
deterministic where the tests need them to be.
"""

from datetime import datetime

import numpy as np
import pytest

from confidant.conversation.context import DialogueContext
from confidant.conversation.engine import DialogueEngine
from confidant.conversation.patterns import PatternTable
from confidant.conversation.selector import ResponseSelector


class FixedClock:
    """Clock returning a settable time."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set_hour(self, hour: int) -> None:
        self.now = self.now.replace(hour=hour)


@pytest.fixture
def clock():
    """Clock fixed at 09:00."""
    return FixedClock(datetime(2024, 5, 14, 9, 0, 0))


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def context():
    """Fresh dialogue context."""
    return DialogueContext()


@pytest.fixture
def pattern_table(clock):
    """Pattern table using the fixed clock."""
    return PatternTable(clock=clock)


@pytest.fixture
def selector(rng):
    """Response selector with a seeded generator."""
    return ResponseSelector(rng=rng)


@pytest.fixture
def engine(clock, rng):
    """Engine with fixed clock and seeded generator."""
    return DialogueEngine(clock=clock, rng=rng)
