"""Unit tests for the rule-based stress classifier."""

import math
import pytest

from mindguard.errors import InvalidInputError
from mindguard.stress.models import StressLevel
from mindguard.stress.services.classifier import classify, classify_level, ADVICE, LABELS


# ─────────────────────────────────────────────────────────────────
# Classification rules
# ─────────────────────────────────────────────────────────────────


class TestClassify:
    def test_high_stress(self, fixed_now):
        report = classify(4.9, 8, 3, fixed_now)

        assert report.level is StressLevel.HIGH
        assert report.score == 9
        assert report.seek_help is True

    def test_sleep_boundary_excludes_high(self, fixed_now):
        report = classify(5, 8, 3, fixed_now)

        assert report.level is StressLevel.MEDIUM
        assert report.score == 6

    def test_low_stress(self, fixed_now):
        report = classify(7, 5, 8, fixed_now)

        assert report.level is StressLevel.LOW
        assert report.score == 3
        assert report.seek_help is False

    @pytest.mark.parametrize("sleep,workload,mood", [
        (5.5, 2, 9),   # short sleep alone
        (8, 7, 9),     # workload above 6 alone
        (4, 8, 4),     # mood 4 misses the high rule
        (4, 7, 1),     # workload 7 misses the high rule
    ])
    def test_medium_stress(self, fixed_now, sleep, workload, mood):
        assert classify(sleep, workload, mood, fixed_now).level is StressLevel.MEDIUM

    def test_high_rule_takes_priority_over_medium(self):
        # Satisfies both the high and the medium predicates
        assert classify_level(0, 10, 1) is StressLevel.HIGH

    def test_six_hours_and_workload_six_is_low(self):
        assert classify_level(6, 6, 1) is StressLevel.LOW

    def test_label_and_advice_come_from_lookup(self, fixed_now):
        report = classify(4, 9, 2, fixed_now)

        assert report.label == LABELS[StressLevel.HIGH]
        assert report.advice == ADVICE[StressLevel.HIGH]

    def test_timestamp_is_the_supplied_now(self, fixed_now):
        assert classify(7, 5, 8, fixed_now).created_at == fixed_now

    def test_repeated_calls_are_identical(self, fixed_now):
        assert classify(5.5, 7, 4, fixed_now) == classify(5.5, 7, 4, fixed_now)

    def test_to_dict_shape(self, fixed_now):
        data = classify(7, 5, 8, fixed_now).to_dict()

        assert data == {
            "level": "low",
            "label": "Low Stress",
            "score": 3,
            "advice": ADVICE[StressLevel.LOW],
            "seekHelp": False,
            "createdAt": fixed_now,
        }


# ─────────────────────────────────────────────────────────────────
# Input validation
# ─────────────────────────────────────────────────────────────────


class TestClassifyValidation:
    @pytest.mark.parametrize("sleep,workload,mood,field", [
        (None, 5, 5, "sleepHours"),
        (7, None, 5, "workload"),
        (7, 5, None, "mood"),
    ])
    def test_missing_value(self, fixed_now, sleep, workload, mood, field):
        with pytest.raises(InvalidInputError) as exc_info:
            classify(sleep, workload, mood, fixed_now)

        assert exc_info.value.field == field
        assert exc_info.value.status_code == 422
        assert exc_info.value.code == "INVALID_INPUT"

    @pytest.mark.parametrize("value", ["7", True, [7], math.nan, math.inf])
    def test_non_numeric_sleep(self, fixed_now, value):
        with pytest.raises(InvalidInputError) as exc_info:
            classify(value, 5, 5, fixed_now)

        assert exc_info.value.field == "sleepHours"

    def test_negative_sleep(self, fixed_now):
        with pytest.raises(InvalidInputError, match="at least 0"):
            classify(-0.5, 5, 5, fixed_now)

    @pytest.mark.parametrize("workload", [0, 0.99, 10.01, 11])
    def test_workload_out_of_range(self, fixed_now, workload):
        with pytest.raises(InvalidInputError) as exc_info:
            classify(7, workload, 5, fixed_now)

        assert exc_info.value.field == "workload"

    @pytest.mark.parametrize("mood", [0, -3, 10.5])
    def test_mood_out_of_range(self, fixed_now, mood):
        with pytest.raises(InvalidInputError) as exc_info:
            classify(7, 5, mood, fixed_now)

        assert exc_info.value.field == "mood"

    def test_range_edges_are_valid(self, fixed_now):
        assert classify(0, 1, 1, fixed_now).level is StressLevel.MEDIUM
        assert classify(24, 10, 10, fixed_now).level is StressLevel.MEDIUM
