"""
Module: grading.thresholds

Purpose:
    Finds the minimum score that reaches a target grade by binary search
    over the CvTE calculator. Used for pass/fail percentage reporting
    (whole points) and for locating exact grade boundaries on charts
    (fractional points).

Key Functions:
    - points_for_grade(): Minimum points for a target grade
    - pass_percentage(): Percentage of max points needed to pass

Note:
    Correctness relies on cvte_grade being non-decreasing in the score
    for a fixed norm. Should that ever fail for some N-term/mode, the
    search still terminates and returns an approximate answer.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from grade_toolkit.config import DEFAULT_CONFIG, GradingConfig
from grade_toolkit.core.models.norms import CalculationMode, Norm
from .cvte import cvte_grade
from .rounding import round_half_up

logger = logging.getLogger(__name__)


def _reaches(points: float, target: float, max_points: float, n_term: float,
             mode: CalculationMode) -> bool:
    grade = cvte_grade(points, max_points, n_term, mode)
    return grade is not None and grade >= target


def points_for_grade(
    target: float,
    max_points: float,
    n_term: float,
    mode: CalculationMode | str = CalculationMode.LEGACY,
    precision: float = 1.0,
) -> Optional[float]:
    """
    Find the minimum points in [0, max_points] whose grade is >= target.

    Args:
        target: Grade to reach, e.g. 5.5 (pass) or 6.0
        max_points: Maximum points of the norm
        n_term: N-term of the norm
        mode: Calculation mode
        precision: >= 1 searches whole points; < 1 bisects until the
            interval is narrower than this (e.g. 0.1)

    Returns:
        The minimum points found; max_points if no score reaches the
        target; None if the norm itself is invalid.

    Raises:
        ValueError: If precision <= 0 or mode is unknown

    Example:
        >>> points_for_grade(5.5, 50, 1.0, "official")
        25.0
    """
    if not precision > 0:
        raise ValueError(f"precision must be positive: {precision}")
    mode = CalculationMode.coerce(mode)
    if not math.isfinite(max_points) or max_points <= 0 or not math.isfinite(n_term):
        return None

    if precision >= 1:
        low, high = 0, int(math.floor(max_points))
        result = max_points
        while low <= high:
            mid = (low + high) // 2
            if _reaches(mid, target, max_points, n_term, mode):
                result = mid
                high = mid - 1
            else:
                low = mid + 1
        return float(result)

    if _reaches(0.0, target, max_points, n_term, mode):
        return 0.0
    low, high = 0.0, float(max_points)
    while high - low > precision:
        mid = (low + high) / 2
        if _reaches(mid, target, max_points, n_term, mode):
            high = mid
        else:
            low = mid
    logger.debug(
        f"Boundary for grade {target} (max={max_points}, n={n_term}, {mode.value}): {high:.4f}"
    )
    return high


def pass_percentage(norm: Norm, config: GradingConfig = DEFAULT_CONFIG) -> int:
    """
    Percentage of max points needed for a sufficient grade.

    Uses whole-point search and half-up rounding of the percentage.

    Example:
        >>> pass_percentage(Norm(50, 1.0, CalculationMode.OFFICIAL))
        50
    """
    points = points_for_grade(
        config.pass_threshold, norm.max_points, norm.n_term, norm.mode
    )
    return int(round_half_up(points / norm.max_points * 100))
