"""Unit tests for check-in pipeline functions."""

import asyncio
import pytest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from mindguard.engagement.models import StreakRecord
from mindguard.engagement.services.streak_store import InMemoryStreakStore
from mindguard.errors import ClockSkewError, InvalidInputError, PersistenceConflictError
from mindguard.pipelines.checkin import (
    record_check_in_with_retry,
    submit_checkin_pipeline,
    get_streak_pipeline,
    get_history_pipeline,
)


class YieldingStreakStore(InMemoryStreakStore):
    """In-memory store that suspends after each read, letting callers interleave."""

    async def load(self, user_id):
        record = await super().load(user_id)
        await asyncio.sleep(0)
        return record


@pytest.fixture
def report_service():
    service = MagicMock()
    service.save_report = AsyncMock(return_value={})
    return service


# ─────────────────────────────────────────────────────────────────
# record_check_in_with_retry
# ─────────────────────────────────────────────────────────────────


class TestRecordCheckInWithRetry:
    @pytest.mark.asyncio
    async def test_retries_after_conflict(self, sample_user_id, stale_record):
        store = MagicMock()
        store.load = AsyncMock(return_value=stale_record)
        store.save = AsyncMock(side_effect=[PersistenceConflictError(sample_user_id), None])

        record, points = await record_check_in_with_retry(
            store, sample_user_id, date(2026, 3, 14), max_attempts=3
        )

        assert store.load.await_count == 2
        assert record.current_streak == 1
        assert points == 10

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, sample_user_id, stale_record):
        store = MagicMock()
        store.load = AsyncMock(return_value=stale_record)
        store.save = AsyncMock(side_effect=PersistenceConflictError(sample_user_id))

        with pytest.raises(PersistenceConflictError):
            await record_check_in_with_retry(
                store, sample_user_id, date(2026, 3, 14), max_attempts=3
            )

        assert store.save.await_count == 3

    @pytest.mark.asyncio
    async def test_clock_skew_is_not_retried(self, sample_user_id, stale_record):
        store = MagicMock()
        store.load = AsyncMock(return_value=stale_record)
        store.save = AsyncMock()

        with pytest.raises(ClockSkewError):
            await record_check_in_with_retry(
                store, sample_user_id, date(2026, 2, 1), max_attempts=3
            )

        assert store.load.await_count == 1
        store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_same_day_check_ins_award_once(self, sample_user_id):
        store = YieldingStreakStore()
        day = date(2026, 3, 14)
        await store.save(sample_user_id, StreakRecord(6, 6, 60, day - timedelta(days=1)), None)

        results = await asyncio.gather(
            record_check_in_with_retry(store, sample_user_id, day),
            record_check_in_with_retry(store, sample_user_id, day),
        )

        # Both read the day-6 record; the loser retries and sees today's write
        assert sorted(points for _, points in results) == [0, 60]
        stored = await store.load(sample_user_id)
        assert stored.current_streak == 7
        assert stored.reward_points == 120

    @pytest.mark.asyncio
    async def test_concurrent_first_check_ins_create_once(self, sample_user_id):
        store = YieldingStreakStore()
        day = date(2026, 3, 14)

        results = await asyncio.gather(
            record_check_in_with_retry(store, sample_user_id, day),
            record_check_in_with_retry(store, sample_user_id, day),
        )

        assert sorted(points for _, points in results) == [0, 10]
        assert (await store.load(sample_user_id)).reward_points == 10


# ─────────────────────────────────────────────────────────────────
# submit_checkin_pipeline
# ─────────────────────────────────────────────────────────────────


class TestSubmitCheckinPipeline:
    @pytest.mark.asyncio
    async def test_first_check_in(self, report_service, fixed_clock, sample_user_id):
        store = InMemoryStreakStore()

        result = await submit_checkin_pipeline(
            report_service=report_service,
            streak_store=store,
            clock=fixed_clock,
            user_id=sample_user_id,
            sleep_hours=4,
            workload=9,
            mood=2,
        )

        assert result["report"]["level"] == "high"
        assert result["report"]["seekHelp"] is True
        assert result["pointsEarned"] == 10
        assert result["alreadyCheckedIn"] is False
        assert result["streak"]["currentStreak"] == 1
        assert result["streak"]["lastCheckInDate"] == "2026-03-14"
        assert result["streak"]["hasCheckedInToday"] is True
        report_service.save_report.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_second_submission_same_day(self, report_service, fixed_clock, sample_user_id):
        store = InMemoryStreakStore()
        kwargs = dict(
            report_service=report_service,
            streak_store=store,
            clock=fixed_clock,
            user_id=sample_user_id,
            sleep_hours=8,
            workload=3,
            mood=8,
        )

        await submit_checkin_pipeline(**kwargs)
        result = await submit_checkin_pipeline(**kwargs)

        assert result["pointsEarned"] == 0
        assert result["alreadyCheckedIn"] is True
        assert result["streak"]["rewardPoints"] == 10
        # Every submission is still kept in the history
        assert report_service.save_report.await_count == 2

    @pytest.mark.asyncio
    async def test_invalid_input_stores_nothing(self, report_service, fixed_clock, sample_user_id):
        store = MagicMock()
        store.load = AsyncMock()
        store.save = AsyncMock()

        with pytest.raises(InvalidInputError):
            await submit_checkin_pipeline(
                report_service=report_service,
                streak_store=store,
                clock=fixed_clock,
                user_id=sample_user_id,
                sleep_hours=7,
                workload=12,
                mood=5,
            )

        report_service.save_report.assert_not_awaited()
        store.load.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_day_comes_from_clock_zone(self, report_service, sample_user_id):
        # 23:30 in New York is already the next day in UTC
        local_now = datetime(2026, 3, 14, 23, 30, tzinfo=timezone(timedelta(hours=-4)))
        clock = MagicMock()
        clock.now = MagicMock(return_value=local_now)
        store = InMemoryStreakStore()

        result = await submit_checkin_pipeline(
            report_service=report_service,
            streak_store=store,
            clock=clock,
            user_id=sample_user_id,
            sleep_hours=7,
            workload=5,
            mood=8,
        )

        assert result["streak"]["lastCheckInDate"] == "2026-03-14"


# ─────────────────────────────────────────────────────────────────
# Read-only pipelines
# ─────────────────────────────────────────────────────────────────


class TestGetStreakPipeline:
    @pytest.mark.asyncio
    async def test_no_record(self, fixed_clock, sample_user_id):
        result = await get_streak_pipeline(InMemoryStreakStore(), fixed_clock, sample_user_id)

        assert result["currentStreak"] == 0
        assert result["rewardPoints"] == 0
        assert result["lastCheckInDate"] is None
        assert result["hasCheckedInToday"] is False

    @pytest.mark.asyncio
    async def test_stale_record_is_inactive(self, fixed_clock, sample_user_id, stale_record):
        store = InMemoryStreakStore()
        await store.save(sample_user_id, stale_record, None)

        result = await get_streak_pipeline(store, fixed_clock, sample_user_id)

        # Stored streak is reported as-is; it resets on the next check-in
        assert result["currentStreak"] == 12
        assert result["isActive"] is False
        assert result["hasCheckedInToday"] is False

    @pytest.mark.asyncio
    async def test_yesterday_is_still_active(self, fixed_clock, sample_user_id):
        store = InMemoryStreakStore()
        await store.save(sample_user_id, StreakRecord(3, 3, 30, date(2026, 3, 13)), None)

        result = await get_streak_pipeline(store, fixed_clock, sample_user_id)

        assert result["isActive"] is True


class TestGetHistoryPipeline:
    @pytest.mark.asyncio
    async def test_formats_documents(self, sample_user_id, fixed_now):
        doc_id = ObjectId()
        service = MagicMock()
        service.get_history = AsyncMock(return_value=[{
            "_id": doc_id,
            "userId": sample_user_id,
            "date": "2026-03-14",
            "level": "medium",
            "label": "Medium Stress",
            "score": 6,
            "inputs": {"sleepHours": 5.5, "workload": 6, "mood": 5},
            "createdAt": fixed_now,
        }])
        service.get_total_count = AsyncMock(return_value=1)

        result = await get_history_pipeline(service, sample_user_id, limit=10, offset=0)

        assert result["total"] == 1
        assert result["reports"][0]["id"] == str(doc_id)
        assert "userId" not in result["reports"][0]
