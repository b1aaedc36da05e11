"""
Check-in pipeline functions.

Stateless orchestration of classification, report history and streak updates.
"""

import logging
from datetime import date, timedelta
from typing import Dict, Any, Tuple

from mindguard.clock import SystemClock
from mindguard.engagement.models import StreakRecord
from mindguard.engagement.services.streak_store import StreakStore
from mindguard.engagement.services.streak_tracker import record_check_in
from mindguard.errors import PersistenceConflictError
from mindguard.stress.services.classifier import classify
from mindguard.stress.services.report_service import StressReportService
from mindguard.stress.services.stress_analytics import StressAnalytics

logger = logging.getLogger(__name__)


async def record_check_in_with_retry(
    streak_store: StreakStore,
    user_id: str,
    today: date,
    max_attempts: int = 3,
) -> Tuple[StreakRecord, int]:
    """
    Run the streak read-modify-write cycle, retrying on write conflicts.

    A retried cycle re-reads the record, so a concurrent check-in that
    already counted today turns this call into a same-day no-op.

    Raises:
        PersistenceConflictError: Still conflicting after ``max_attempts``
        ClockSkewError: Stored day is after ``today`` (not retried)
    """
    attempt = 1
    while True:
        try:
            return await record_check_in(
                user_id, today, streak_store.load, streak_store.save
            )
        except PersistenceConflictError:
            if attempt >= max_attempts:
                logger.error(
                    f"Streak update for user {user_id} failed after {attempt} attempts"
                )
                raise
            logger.warning(
                f"Streak update conflict for user {user_id}, retrying ({attempt}/{max_attempts})"
            )
            attempt += 1


async def submit_checkin_pipeline(
    report_service: StressReportService,
    streak_store: StreakStore,
    clock: SystemClock,
    user_id: str,
    sleep_hours: Any,
    workload: Any,
    mood: Any,
    max_attempts: int = 3,
) -> Dict[str, Any]:
    """
    Orchestrates the check-in submission flow.

    Args:
        report_service: For report persistence
        streak_store: For the user's streak record
        clock: Source of the report timestamp and check-in day
        user_id: Current user's ID
        sleep_hours: Hours slept
        workload: Workload rating 1-10
        mood: Mood rating 1-10
        max_attempts: Streak update attempts on write conflicts

    Returns:
        Response dict with report, streak, pointsEarned, alreadyCheckedIn
    """
    now = clock.now()

    # Raises InvalidInputError before anything is stored
    report = classify(sleep_hours, workload, mood, now)

    await report_service.save_report(user_id, report, sleep_hours, workload, mood)

    record, points = await record_check_in_with_retry(
        streak_store, user_id, now.date(), max_attempts
    )

    if points == 0:
        logger.info(f"User {user_id} already checked in on {now.date()}, no points awarded")

    return {
        "report": report.to_dict(),
        "streak": _format_streak(record, now.date()),
        "pointsEarned": points,
        "alreadyCheckedIn": points == 0,
    }


async def get_streak_pipeline(
    streak_store: StreakStore,
    clock: SystemClock,
    user_id: str,
) -> Dict[str, Any]:
    """
    Read the user's streak without changing it.

    Returns:
        Streak dict; zeros and no date when the user never checked in
    """
    record = await streak_store.load(user_id)

    if record is None:
        return {
            "currentStreak": 0,
            "longestStreak": 0,
            "rewardPoints": 0,
            "lastCheckInDate": None,
            "hasCheckedInToday": False,
            "isActive": False,
        }

    return _format_streak(record, clock.today())


async def get_history_pipeline(
    report_service: StressReportService,
    user_id: str,
    limit: int = 30,
    offset: int = 0,
) -> Dict[str, Any]:
    """
    Get report history with pagination.

    Returns:
        dict with reports list, total, limit and offset
    """
    reports = await report_service.get_history(user_id=user_id, limit=limit, offset=offset)
    total = await report_service.get_total_count(user_id)

    return {
        "reports": [_format_report_document(r) for r in reports],
        "total": total,
        "limit": limit,
        "offset": offset,
    }


async def get_trend_pipeline(
    analytics: StressAnalytics,
    clock: SystemClock,
    user_id: str,
    days: int = 30,
) -> Dict[str, Any]:
    """Get the stress score series for the trend chart."""
    points = await analytics.get_trend(user_id, clock.today(), days)
    return {"days": days, "points": points}


async def get_daily_summary_pipeline(
    analytics: StressAnalytics,
    clock: SystemClock,
    user_id: str,
    days: int = 30,
) -> Dict[str, Any]:
    """Get per-day stress counts and tips for the period."""
    return await analytics.get_daily_summary(user_id, clock.today(), days)


def _format_streak(record: StreakRecord, today: date) -> Dict[str, Any]:
    """Format a streak record for API response."""
    return {
        **record.to_document(),
        "hasCheckedInToday": record.last_check_in_date == today,
        # Still extendable by checking in today
        "isActive": record.last_check_in_date >= today - timedelta(days=1),
    }


def _format_report_document(report: Dict[str, Any]) -> Dict[str, Any]:
    """Format a stored report document for API response."""
    return {
        "id": str(report["_id"]),
        "date": report["date"],
        "level": report["level"],
        "label": report["label"],
        "score": report["score"],
        "inputs": report.get("inputs"),
        "createdAt": report["createdAt"],
    }
