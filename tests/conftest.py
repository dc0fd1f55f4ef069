"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone

import pytest

from timebar.time_calculations import TimeSnapshot


@pytest.fixture
def mid_june():
    """Thursday 2023-06-15 12:30:45.500 UTC."""
    return datetime(2023, 6, 15, 12, 30, 45, 500000, tzinfo=timezone.utc)


@pytest.fixture
def mid_june_snapshot(mid_june):
    return TimeSnapshot.from_instant(mid_june)
