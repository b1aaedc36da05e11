"""
Check-in input validation.

Validates sleep, workload and mood values before classification.
"""

import math
from typing import Any, Dict, Optional, Tuple

from mindguard.errors import InvalidInputError


class CheckInInputValidator:
    """
    Validates raw check-in values against their allowed ranges.
    """

    # (min, max) inclusive; None means unbounded
    INPUT_RANGES: Dict[str, Tuple[float, Optional[float]]] = {
        "sleepHours": (0, None),
        "workload": (1, 10),
        "mood": (1, 10),
    }

    REQUIRED_INPUTS = ["sleepHours", "workload", "mood"]

    @classmethod
    def validate(cls, inputs: Dict[str, Any]) -> None:
        """
        Validate all inputs are present, numeric and within range.

        Args:
            inputs: dict with sleepHours, workload and mood

        Raises:
            InvalidInputError: On the first offending field
        """
        for name in cls.REQUIRED_INPUTS:
            value = inputs.get(name)

            if value is None:
                raise InvalidInputError(f"Missing required field: {name}", field=name)

            # bool is an int subclass but never a meaningful reading
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"Field '{name}' must be a number", field=name)

            if not math.isfinite(value):
                raise InvalidInputError(f"Field '{name}' must be a finite number", field=name)

            min_val, max_val = cls.INPUT_RANGES[name]
            if max_val is None:
                if value < min_val:
                    raise InvalidInputError(
                        f"Field '{name}' must be at least {min_val}", field=name
                    )
            elif value < min_val or value > max_val:
                raise InvalidInputError(
                    f"Field '{name}' must be between {min_val} and {max_val}", field=name
                )
