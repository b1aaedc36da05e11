"""
Stress analytics service.

Formats report history for the trend chart and the per-day summary with tips.
"""

from collections import OrderedDict
from datetime import date
from typing import List, Dict, Any

from mindguard.stress.services.report_service import StressReportService


class StressAnalytics:
    """
    Analytics and data formatting for stress reports.
    """

    LOW_THRESHOLD = 3
    MODERATE_THRESHOLD = 6

    TIPS: Dict[str, Dict[str, Any]] = {
        "low": {
            "label": "Low Stress",
            "tips": [
                "Your stress level is well managed",
                "Maintain healthy sleep habits",
                "Continue regular exercise",
            ],
        },
        "moderate": {
            "label": "Moderate Stress",
            "tips": [
                "Take short breaks during work",
                "Practice breathing exercises",
                "Limit caffeine intake",
            ],
        },
        "high": {
            "label": "High Stress",
            "tips": [
                "Try meditation or yoga daily",
                "Reduce screen time",
                "Talk to a mental health professional",
            ],
        },
    }

    def __init__(self, report_service: StressReportService):
        """
        Initialize StressAnalytics.

        Args:
            report_service: For fetching report history
        """
        self._report_service = report_service

    async def get_trend(self, user_id: str, today: date, days: int = 30) -> List[Dict[str, Any]]:
        """
        Get the score series for the stress trend chart.

        Returns:
            list of {"time": datetime, "value": score}, oldest first
        """
        reports = await self._report_service.get_reports_for_period(user_id, today, days)
        return [{"time": r["createdAt"], "value": r["score"]} for r in reports]

    async def get_daily_summary(self, user_id: str, today: date, days: int = 30) -> Dict[str, Any]:
        """
        Group reports by day and pick tips from the overall average.

        Returns:
            dict with keys:
                - dataPoints: int (reports in period)
                - days: list of {date, count, averageScore}
                - averageScore: float or None (mean of daily averages)
                - level: str or None ("low", "moderate", "high")
                - label: str or None
                - tips: list[str]
        """
        reports = await self._report_service.get_reports_for_period(user_id, today, days)

        if not reports:
            return {
                "dataPoints": 0,
                "days": [],
                "averageScore": None,
                "level": None,
                "label": None,
                "tips": [],
            }

        by_day: "OrderedDict[str, List[int]]" = OrderedDict()
        for report in reports:
            by_day.setdefault(report["date"], []).append(report["score"])

        daily = [
            {
                "date": day,
                "count": len(scores),
                "averageScore": round(sum(scores) / len(scores), 2),
            }
            for day, scores in by_day.items()
        ]

        average = round(sum(d["averageScore"] for d in daily) / len(daily), 2)
        level = self._level_for_average(average)

        return {
            "dataPoints": len(reports),
            "days": daily,
            "averageScore": average,
            "level": level,
            "label": self.TIPS[level]["label"],
            "tips": list(self.TIPS[level]["tips"]),
        }

    def _level_for_average(self, average: float) -> str:
        if average <= self.LOW_THRESHOLD:
            return "low"
        if average <= self.MODERATE_THRESHOLD:
            return "moderate"
        return "high"
