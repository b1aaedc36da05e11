"""
Engagement Tracking

Day-granular check-in streaks with reward points and milestone bonuses.
At most one streak update per user per calendar day.
"""

from mindguard.engagement.models import StreakRecord
from mindguard.engagement.services.streak_tracker import advance_streak, record_check_in
from mindguard.engagement.services.streak_store import (
    StreakStore,
    MongoStreakStore,
    InMemoryStreakStore,
)

__all__ = [
    "StreakRecord",
    "advance_streak",
    "record_check_in",
    "StreakStore",
    "MongoStreakStore",
    "InMemoryStreakStore",
]
