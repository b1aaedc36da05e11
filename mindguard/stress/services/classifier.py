"""
Rule-based stress classifier.

Maps one day's sleep hours, workload and mood to a stress level with a
fixed score, label and coping advice. Pure: no state, no I/O, no logging.
"""

from datetime import datetime
from typing import Dict

from mindguard.stress.models import StressLevel, StressReport
from mindguard.stress.services.input_validator import CheckInInputValidator


SCORES: Dict[StressLevel, int] = {
    StressLevel.LOW: 3,
    StressLevel.MEDIUM: 6,
    StressLevel.HIGH: 9,
}

LABELS: Dict[StressLevel, str] = {
    StressLevel.LOW: "Low Stress",
    StressLevel.MEDIUM: "Medium Stress",
    StressLevel.HIGH: "High Stress",
}

ADVICE: Dict[StressLevel, str] = {
    StressLevel.LOW: (
        "You're doing well.\n"
        "• Maintain healthy routines\n"
        "• Stay consistent\n"
        "• Keep tracking daily"
    ),
    StressLevel.MEDIUM: (
        "Moderate stress.\n"
        "• Improve your sleep routine\n"
        "• Take regular breaks\n"
        "• Try light exercise or meditation\n"
        "• Consider a counselor if it persists"
    ),
    StressLevel.HIGH: (
        "High stress detected.\n"
        "• Reduce workload immediately\n"
        "• Avoid isolation\n"
        "• Practice guided breathing\n"
        "• Talk to someone you trust\n"
        "If this continues, consult a psychologist, psychiatrist or primary care doctor."
    ),
}


def classify_level(sleep_hours: float, workload: float, mood: float) -> StressLevel:
    """
    Apply the classification rules to already validated values.

    Rules are checked in order and the first match wins, so a day that
    satisfies the high-stress conjunction is never downgraded to medium.
    """
    if sleep_hours < 5 and workload > 7 and mood < 4:
        return StressLevel.HIGH
    if sleep_hours < 6 or workload > 6:
        return StressLevel.MEDIUM
    return StressLevel.LOW


def classify(sleep_hours: float, workload: float, mood: float, now: datetime) -> StressReport:
    """
    Validate a check-in and classify it.

    Args:
        sleep_hours: Hours slept, >= 0
        workload: Self-rated workload, 1-10
        mood: Self-rated mood, 1-10
        now: Timestamp recorded on the report

    Returns:
        StressReport with level, label, score and advice

    Raises:
        InvalidInputError: Any value missing, non-numeric or out of range
    """
    CheckInInputValidator.validate({
        "sleepHours": sleep_hours,
        "workload": workload,
        "mood": mood,
    })

    level = classify_level(sleep_hours, workload, mood)

    return StressReport(
        level=level,
        label=LABELS[level],
        score=SCORES[level],
        advice=ADVICE[level],
        created_at=now,
    )
