"""
Pydantic models for check-in request/response validation.

Range checks are done by the classifier so every out-of-range value
produces the same INVALID_INPUT error. The request model only parses,
strictly, so booleans and numeric strings are not coerced to numbers.
"""

from datetime import datetime
from typing import Optional, List, Dict
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class CheckInRequest(BaseModel):
    """POST /api/users/{user_id}/checkins"""
    sleepHours: Optional[float] = Field(None, strict=True, description="Hours slept, >= 0")
    workload: Optional[float] = Field(None, strict=True, description="1-10 scale")
    mood: Optional[float] = Field(None, strict=True, description="1-10 scale")


# =============================================================================
# Response Schemas (used inside success_response data)
# =============================================================================

class StressReportData(BaseModel):
    level: str
    label: str
    score: int
    advice: str
    seekHelp: bool
    createdAt: datetime


class StreakData(BaseModel):
    """Response data for GET /api/users/{user_id}/streak"""
    currentStreak: int
    longestStreak: int
    rewardPoints: int
    lastCheckInDate: Optional[str] = None
    hasCheckedInToday: bool
    isActive: bool


class SubmitCheckInData(BaseModel):
    """Response data for POST /api/users/{user_id}/checkins"""
    report: StressReportData
    streak: StreakData
    pointsEarned: int
    alreadyCheckedIn: bool


class ReportHistoryItem(BaseModel):
    id: str
    date: str
    level: str
    label: str
    score: int
    inputs: Optional[Dict[str, float]] = None
    createdAt: datetime


class TrendPoint(BaseModel):
    time: datetime
    value: int


class TrendData(BaseModel):
    """Response data for GET /api/users/{user_id}/stress/trend"""
    days: int
    points: List[TrendPoint]


class DailyStressEntry(BaseModel):
    date: str
    count: int
    averageScore: float


class DailySummaryData(BaseModel):
    """Response data for GET /api/users/{user_id}/stress/daily"""
    dataPoints: int
    days: List[DailyStressEntry]
    averageScore: Optional[float] = None
    level: Optional[str] = None
    label: Optional[str] = None
    tips: List[str]
