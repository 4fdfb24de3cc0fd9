# File: utils/math_utils.py
"""Math and calculation utilities for QuestKeeper.

Functions:
    - round_points: Consistent rounding to configured precision
    - round_reward: Round a reward to the nearest whole number
    - calculate_percentage: Progress percentage calculations
    - clamp: Bound a value to a range
"""

from __future__ import annotations

import math

# Default float precision for rounding
DATA_FLOAT_PRECISION = 2


def round_points(value: float, precision: int = DATA_FLOAT_PRECISION) -> float:
    """Round a value to the configured precision.

    Prevents float arithmetic drift (e.g., 27.499999999999996 → 27.5).

    Examples:
        round_points(10.456) → 10.46
        round_points(10.0) → 10.0
    """
    return round(value, precision)


def round_reward(value: float) -> int:
    """Round a reward to the nearest integer, halves away from zero.

    Python's ``round`` uses banker's rounding; rewards follow the usual
    "0.5 rounds up" convention instead.

    Examples:
        round_reward(12.5) → 13
        round_reward(-2.5) → -3
        round_reward(11.99) → 12
    """
    # Drift guard: 1.15 * 10 == 11.499999999999998
    value = round_points(value, 6)
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def calculate_percentage(
    current: float,
    target: float,
    precision: int = DATA_FLOAT_PRECISION,
) -> float:
    """Calculate progress percentage with proper rounding.

    Returns:
        Percentage (0-100+) with proper rounding, or 0.0 if target is 0

    Examples:
        calculate_percentage(50, 100) → 50.0
        calculate_percentage(1, 3) → 33.33
        calculate_percentage(5, 0) → 0.0
    """
    if target <= 0:
        return 0.0
    return round_points((current / target) * 100, precision)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
    """
    return max(min_val, min(value, max_val))
