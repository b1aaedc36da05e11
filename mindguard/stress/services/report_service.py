"""
Stress report storage service.

Append-only history of classified check-ins, one document per submission.
"""

import logging
from datetime import date, timedelta
from typing import List, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from mindguard.stress.models import StressReport

logger = logging.getLogger(__name__)


class StressReportService:
    """
    Handles stress report storage and retrieval.
    Pure CRUD - reports are never updated or deleted here.
    """

    COLLECTION = "stressReports"
    MAX_LIMIT = 90

    def __init__(self, db: AsyncIOMotorDatabase, max_limit: int = MAX_LIMIT):
        """
        Initialize StressReportService.

        Args:
            db: MongoDB database connection
            max_limit: Upper bound for a single history page
        """
        self._reports_collection = db[self.COLLECTION]
        self._max_limit = max_limit

    async def save_report(
        self,
        user_id: str,
        report: StressReport,
        sleep_hours: float,
        workload: float,
        mood: float,
    ) -> Dict[str, Any]:
        """
        Append a report to the user's history.

        The report day is taken from ``report.created_at`` so it matches
        the day the streak update is recorded against.

        Returns:
            The stored document including its ``_id``
        """
        document = {
            "userId": user_id,
            "date": report.created_at.date().isoformat(),
            "level": report.level.value,
            "label": report.label,
            "score": report.score,
            "inputs": {
                "sleepHours": sleep_hours,
                "workload": workload,
                "mood": mood,
            },
            "createdAt": report.created_at,
        }

        result = await self._reports_collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(f"Stress report saved for user {user_id}: {report.level.value}")
        return document

    async def get_history(
        self,
        user_id: str,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Get a page of reports, newest first.

        Args:
            user_id: User identifier
            limit: Max records to return (capped at max_limit)
            offset: Number of records to skip
        """
        limit = min(limit, self._max_limit)

        cursor = self._reports_collection.find({"userId": user_id})
        cursor = cursor.sort("createdAt", -1)
        cursor = cursor.skip(offset)
        cursor = cursor.limit(limit)

        return await cursor.to_list(length=limit)

    async def get_total_count(self, user_id: str) -> int:
        """Get total number of reports for a user."""
        return await self._reports_collection.count_documents({"userId": user_id})

    async def get_reports_for_period(
        self,
        user_id: str,
        today: date,
        days: int,
    ) -> List[Dict[str, Any]]:
        """
        Get all reports from the last ``days`` calendar days, oldest first.

        ``today`` counts as one of the days.
        """
        start_date = (today - timedelta(days=days - 1)).isoformat()

        cursor = self._reports_collection.find({
            "userId": user_id,
            "date": {"$gte": start_date, "$lte": today.isoformat()},
        })
        cursor = cursor.sort("createdAt", 1)

        return await cursor.to_list(length=None)
