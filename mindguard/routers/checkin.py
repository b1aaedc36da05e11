"""
FastAPI router for check-in endpoints.

Provides check-in submission, report history, streak status and
stress analytics for a user.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from common.utils import success_response, paginated_response
from mindguard.clock import SystemClock
from mindguard.config import settings
from mindguard.dependencies import (
    get_clock,
    get_streak_store,
    get_report_service,
    get_stress_analytics,
)
from mindguard.engagement.services.streak_store import StreakStore
from mindguard.stress.services.report_service import StressReportService
from mindguard.stress.services.stress_analytics import StressAnalytics
from mindguard.schemas.checkin import (
    CheckInRequest,
    SubmitCheckInData,
    StreakData,
    ReportHistoryItem,
    TrendData,
    DailySummaryData,
)
from mindguard.pipelines import checkin as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{user_id}", tags=["checkin"])


@router.post("/checkins")
async def submit_checkin(
    user_id: str,
    body: CheckInRequest,
    report_service: Annotated[StressReportService, Depends(get_report_service)],
    streak_store: Annotated[StreakStore, Depends(get_streak_store)],
    clock: Annotated[SystemClock, Depends(get_clock)],
):
    """
    Submit a daily check-in.

    Classifies the input, stores the report and updates the streak.
    Repeated submissions on the same day are classified and stored but
    earn no points.
    """
    result = await pipelines.submit_checkin_pipeline(
        report_service=report_service,
        streak_store=streak_store,
        clock=clock,
        user_id=user_id,
        sleep_hours=body.sleepHours,
        workload=body.workload,
        mood=body.mood,
        max_attempts=settings.STREAK_MAX_ATTEMPTS,
    )

    data = SubmitCheckInData(**result)
    return success_response(data.model_dump(mode="json"))


@router.get("/checkins")
async def get_history(
    user_id: str,
    report_service: Annotated[StressReportService, Depends(get_report_service)],
    limit: int = Query(30, ge=1, le=settings.MAX_HISTORY_LIMIT),
    offset: int = Query(0, ge=0),
):
    """Get stress report history, newest first."""
    result = await pipelines.get_history_pipeline(
        report_service=report_service,
        user_id=user_id,
        limit=limit,
        offset=offset,
    )

    items = [ReportHistoryItem(**r).model_dump(mode="json") for r in result["reports"]]
    return paginated_response(
        items,
        total=result["total"],
        limit=result["limit"],
        offset=result["offset"],
    )


@router.get("/streak")
async def get_streak(
    user_id: str,
    streak_store: Annotated[StreakStore, Depends(get_streak_store)],
    clock: Annotated[SystemClock, Depends(get_clock)],
):
    """Get current streak and reward points without checking in."""
    result = await pipelines.get_streak_pipeline(
        streak_store=streak_store,
        clock=clock,
        user_id=user_id,
    )

    return success_response(StreakData(**result).model_dump(mode="json"))


@router.get("/stress/trend")
async def get_trend(
    user_id: str,
    analytics: Annotated[StressAnalytics, Depends(get_stress_analytics)],
    clock: Annotated[SystemClock, Depends(get_clock)],
    days: int = Query(settings.TREND_LOOKBACK_DAYS, ge=1, le=365),
):
    """Get stress scores over time for the trend chart."""
    result = await pipelines.get_trend_pipeline(
        analytics=analytics,
        clock=clock,
        user_id=user_id,
        days=days,
    )

    return success_response(TrendData(**result).model_dump(mode="json"))


@router.get("/stress/daily")
async def get_daily_summary(
    user_id: str,
    analytics: Annotated[StressAnalytics, Depends(get_stress_analytics)],
    clock: Annotated[SystemClock, Depends(get_clock)],
    days: int = Query(settings.TREND_LOOKBACK_DAYS, ge=1, le=365),
):
    """Get per-day stress counts with tips for the period's average level."""
    result = await pipelines.get_daily_summary_pipeline(
        analytics=analytics,
        clock=clock,
        user_id=user_id,
        days=days,
    )

    return success_response(DailySummaryData(**result).model_dump(mode="json"))
