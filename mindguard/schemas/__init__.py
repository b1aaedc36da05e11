"""
API request/response schemas.
"""

from mindguard.schemas.checkin import (
    CheckInRequest,
    StressReportData,
    StreakData,
    SubmitCheckInData,
    ReportHistoryItem,
    TrendData,
    DailySummaryData,
)
from mindguard.schemas.chat import ChatRequest, ChatData

__all__ = [
    "CheckInRequest",
    "StressReportData",
    "StreakData",
    "SubmitCheckInData",
    "ReportHistoryItem",
    "TrendData",
    "DailySummaryData",
    "ChatRequest",
    "ChatData",
]
