"""
Stress Assessment

Classifies a day's sleep, workload and mood into a stress level with
fixed advice, and keeps the per-user report history for charts.
"""

from mindguard.stress.models import StressLevel, StressReport
from mindguard.stress.services.classifier import classify
from mindguard.stress.services.report_service import StressReportService
from mindguard.stress.services.stress_analytics import StressAnalytics

__all__ = [
    "StressLevel",
    "StressReport",
    "classify",
    "StressReportService",
    "StressAnalytics",
]
