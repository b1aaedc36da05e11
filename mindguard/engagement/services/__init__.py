"""Engagement tracking services."""

from mindguard.engagement.services.streak_tracker import (
    BASE_POINTS,
    MILESTONE_BONUSES,
    advance_streak,
    points_for_streak,
    record_check_in,
)
from mindguard.engagement.services.streak_store import (
    StreakStore,
    MongoStreakStore,
    InMemoryStreakStore,
)

__all__ = [
    "BASE_POINTS",
    "MILESTONE_BONUSES",
    "advance_streak",
    "points_for_streak",
    "record_check_in",
    "StreakStore",
    "MongoStreakStore",
    "InMemoryStreakStore",
]
