"""
Type definitions for engagement tracking.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Any


@dataclass(frozen=True)
class StreakRecord:
    """
    Per-user streak and reward state.

    ``last_check_in_date`` has day resolution; there is no time of day.
    """
    current_streak: int
    longest_streak: int
    reward_points: int
    last_check_in_date: date

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the stored/API shape (date as YYYY-MM-DD)."""
        return {
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "rewardPoints": self.reward_points,
            "lastCheckInDate": self.last_check_in_date.isoformat(),
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "StreakRecord":
        # Older documents were written without rewardPoints
        return cls(
            current_streak=doc["currentStreak"],
            longest_streak=doc["longestStreak"],
            reward_points=doc.get("rewardPoints", 0),
            last_check_in_date=date.fromisoformat(doc["lastCheckInDate"]),
        )
