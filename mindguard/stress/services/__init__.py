"""Stress assessment services."""

from mindguard.stress.services.input_validator import CheckInInputValidator
from mindguard.stress.services.classifier import classify, classify_level
from mindguard.stress.services.report_service import StressReportService
from mindguard.stress.services.stress_analytics import StressAnalytics

__all__ = [
    "CheckInInputValidator",
    "classify",
    "classify_level",
    "StressReportService",
    "StressAnalytics",
]
