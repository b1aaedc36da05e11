"""
Streak record stores.

Both stores implement the conditional write the streak tracker relies on:
a first record is created only if none exists, and an update succeeds
only while the stored ``lastCheckInDate`` still equals the one that was
read. Losing either race raises PersistenceConflictError.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from mindguard.engagement.models import StreakRecord
from mindguard.errors import PersistenceConflictError

logger = logging.getLogger(__name__)


class StreakStore(ABC):
    """Per-user keyed storage for StreakRecord."""

    @abstractmethod
    async def load(self, user_id: str) -> Optional[StreakRecord]:
        """Return the user's record, or None if they never checked in."""
        pass

    @abstractmethod
    async def save(
        self,
        user_id: str,
        record: StreakRecord,
        expected: Optional[StreakRecord],
    ) -> None:
        """
        Write ``record`` if the stored state still matches ``expected``.

        Args:
            user_id: Record key
            record: New state
            expected: State that was loaded; None means "must not exist yet"

        Raises:
            PersistenceConflictError: Stored state differs from ``expected``
        """
        pass


class MongoStreakStore(StreakStore):
    """
    Streak records in the ``userStreaks`` collection, keyed by user id.
    """

    COLLECTION = "userStreaks"

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize MongoStreakStore.

        Args:
            db: MongoDB database connection
        """
        self._streaks_collection = db[self.COLLECTION]

    async def load(self, user_id: str) -> Optional[StreakRecord]:
        doc = await self._streaks_collection.find_one({"_id": user_id})
        if doc is None:
            return None
        return StreakRecord.from_document(doc)

    async def save(
        self,
        user_id: str,
        record: StreakRecord,
        expected: Optional[StreakRecord],
    ) -> None:
        now = datetime.now(timezone.utc)
        fields = {**record.to_document(), "updatedAt": now}

        if expected is None:
            try:
                await self._streaks_collection.insert_one(
                    {"_id": user_id, **fields, "createdAt": now}
                )
            except DuplicateKeyError:
                logger.warning(f"Streak record for user {user_id} created concurrently")
                raise PersistenceConflictError(user_id)
        else:
            result = await self._streaks_collection.update_one(
                {
                    "_id": user_id,
                    "lastCheckInDate": expected.last_check_in_date.isoformat(),
                },
                {"$set": fields},
            )
            if result.matched_count == 0:
                logger.warning(f"Streak record for user {user_id} changed since it was read")
                raise PersistenceConflictError(user_id)

        logger.info(
            f"Streak saved for user {user_id}: streak={record.current_streak} "
            f"points={record.reward_points} day={record.last_check_in_date}"
        )


class InMemoryStreakStore(StreakStore):
    """
    Process-local store with the same compare-and-set semantics.

    Suitable for tests and single-process development runs.
    """

    def __init__(self):
        self._records: Dict[str, StreakRecord] = {}
        self._lock = asyncio.Lock()

    async def load(self, user_id: str) -> Optional[StreakRecord]:
        return self._records.get(user_id)

    async def save(
        self,
        user_id: str,
        record: StreakRecord,
        expected: Optional[StreakRecord],
    ) -> None:
        async with self._lock:
            current = self._records.get(user_id)

            if expected is None:
                if current is not None:
                    raise PersistenceConflictError(user_id)
            elif current is None or current.last_check_in_date != expected.last_check_in_date:
                raise PersistenceConflictError(user_id)

            self._records[user_id] = record
