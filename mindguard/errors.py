"""
Domain errors for stress assessment and streak tracking.

Each error extends an HTTP-aware exception from ``common.utils`` so that
routers can let them propagate and the API renders a consistent error
envelope. None of them is fatal to the process.
"""

from datetime import date
from typing import Optional

from common.utils.exceptions import ConflictException, ValidationException


class InvalidInputError(ValidationException):
    """
    Check-in input is missing, non-numeric or outside its range.

    The caller should re-prompt the user. Never retried automatically.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
            details={"field": field} if field else None,
        )
        self.field = field


class ClockSkewError(ConflictException):
    """
    The stored last check-in date is after the supplied ``today``.

    Raised instead of rewinding the streak. The record is left untouched.
    """

    def __init__(self, last_check_in_date: date, today: date):
        super().__init__(
            message=(
                f"Check-in date {today.isoformat()} is before the last "
                f"recorded check-in {last_check_in_date.isoformat()}"
            ),
            code="CLOCK_SKEW",
            details={
                "lastCheckInDate": last_check_in_date.isoformat(),
                "today": today.isoformat(),
            },
        )
        self.last_check_in_date = last_check_in_date
        self.today = today


class PersistenceConflictError(ConflictException):
    """
    A conditional streak write found the stored record changed since it was read.

    The whole read-modify-write cycle should be retried a bounded number of times.
    """

    def __init__(self, user_id: str):
        super().__init__(
            message=f"Streak record for user {user_id} was modified concurrently",
            code="PERSISTENCE_CONFLICT",
        )
        self.user_id = user_id
