"""
Type definitions for stress assessment.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Any


class StressLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class StressReport:
    """Outcome of classifying one check-in."""
    level: StressLevel
    label: str
    score: int  # 3, 6 or 9
    advice: str
    created_at: datetime

    @property
    def seek_help(self) -> bool:
        """High stress is surfaced with a prompt to seek professional help."""
        return self.level is StressLevel.HIGH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level.value,
            "label": self.label,
            "score": self.score,
            "advice": self.advice,
            "seekHelp": self.seek_help,
            "createdAt": self.created_at,
        }
