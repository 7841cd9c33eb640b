"""
Module: grading.rounding

Purpose:
    Grade rounding shared by all calculators. Persisted grades were
    produced with "multiply, add a half, floor" rounding on binary
    floats, so the same arithmetic is used here to reproduce stored values
    exactly (1.005 -> 1.0 at two decimals, 2.45 -> 2.5 at one decimal).
"""

from __future__ import annotations

import math
from typing import Optional


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round half towards positive infinity at the given number of decimals.

    Non-finite values are returned unchanged.

    Example:
        >>> round_half_up(5.45, 1)
        5.5
        >>> round_half_up(-2.5)
        -2.0
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def round_grade(grade: Optional[float], decimals: int = 1) -> Optional[float]:
    """Round a calculated grade for display/storage, passing None through."""
    if grade is None:
        return None
    return round_half_up(grade, decimals)
