"""
Daily streak and reward state machine.

``advance_streak`` is the pure transition over the gap between ``today``
and the stored last check-in day:

    no record   -> new record, streak 1, 10 points
    same day    -> unchanged, 0 points
    +1 day      -> streak + 1, 10 points plus milestone bonus
    > +1 day    -> streak reset to 1, 10 points
    before last -> ClockSkewError

``record_check_in`` runs one read-modify-write cycle against injected
store accessors. Neither function logs or touches I/O directly.
"""

from datetime import date, datetime, timedelta
from typing import Awaitable, Callable, Dict, Optional, Tuple

from mindguard.engagement.models import StreakRecord
from mindguard.errors import ClockSkewError


BASE_POINTS = 10

# Bonus keyed by the streak value reached on this check-in
MILESTONE_BONUSES: Dict[int, int] = {
    7: 50,
    30: 200,
}

LoadRecord = Callable[[str], Awaitable[Optional[StreakRecord]]]
SaveRecord = Callable[[str, StreakRecord, Optional[StreakRecord]], Awaitable[None]]


def points_for_streak(streak: int) -> int:
    """Points earned by a check-in that brings the streak to ``streak``."""
    return BASE_POINTS + MILESTONE_BONUSES.get(streak, 0)


def advance_streak(
    today: date,
    existing: Optional[StreakRecord],
) -> Tuple[StreakRecord, int]:
    """
    Compute the record after a check-in on ``today``.

    Args:
        today: Calendar day of the check-in
        existing: Stored record, or None for a first check-in

    Returns:
        (record, points_earned). For a repeat on the same day the
        ``existing`` object itself is returned with 0 points.

    Raises:
        ClockSkewError: ``today`` is before the stored last check-in day
        TypeError: ``today`` carries a time of day
    """
    # datetime is a date subclass; comparing the two raises late and obscurely
    if isinstance(today, datetime) or not isinstance(today, date):
        raise TypeError("today must be a datetime.date without a time component")

    if existing is None:
        return StreakRecord(
            current_streak=1,
            longest_streak=1,
            reward_points=BASE_POINTS,
            last_check_in_date=today,
        ), BASE_POINTS

    last = existing.last_check_in_date

    if today < last:
        raise ClockSkewError(last, today)

    if today == last:
        return existing, 0

    if today - last == timedelta(days=1):
        streak = existing.current_streak + 1
        points = points_for_streak(streak)
    else:
        streak = 1
        points = BASE_POINTS

    return StreakRecord(
        current_streak=streak,
        longest_streak=max(existing.longest_streak, streak),
        reward_points=existing.reward_points + points,
        last_check_in_date=today,
    ), points


async def record_check_in(
    user_id: str,
    today: date,
    load_record: LoadRecord,
    save_record: SaveRecord,
) -> Tuple[StreakRecord, int]:
    """
    Load, advance and conditionally save a user's streak record.

    ``save_record`` receives the record that was loaded as its expected
    current state and must raise PersistenceConflictError if the store no
    longer holds it. A same-day repeat does not write.

    Returns:
        (record, points_earned)
    """
    existing = await load_record(user_id)
    record, points = advance_streak(today, existing)

    if record is not existing:
        await save_record(user_id, record, existing)

    return record, points
