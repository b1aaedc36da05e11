"""Shared test fixtures for MindGuard backend tests."""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from mindguard.engagement.models import StreakRecord


@pytest.fixture
def sample_user_id():
    return "firebase-uid-abc123"


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now):
    clock = MagicMock()
    clock.now = MagicMock(return_value=fixed_now)
    clock.today = MagicMock(return_value=fixed_now.date())
    return clock


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. find_one, insert_one, update_one and
    # count_documents stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


def _make_cursor(docs):
    """Create a mock Motor cursor (sync chaining, async to_list)."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=docs)
    return cursor


@pytest.fixture
def make_cursor():
    return _make_cursor


@pytest.fixture
def stale_record():
    """A user who last checked in long before the fixed clock's day."""
    return StreakRecord(
        current_streak=12,
        longest_streak=12,
        reward_points=170,
        last_check_in_date=date(2026, 3, 1),
    )
