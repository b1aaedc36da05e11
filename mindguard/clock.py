"""
Wall clock used to stamp reports and decide the check-in day.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo


class SystemClock:
    """Reads the system time in a fixed time zone."""

    def __init__(self, timezone_name: str = "UTC"):
        self._tz = ZoneInfo(timezone_name)

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def today(self) -> date:
        """Calendar day of ``now()`` in the configured zone."""
        return self.now().date()
