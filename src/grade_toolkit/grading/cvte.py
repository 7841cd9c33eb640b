"""
Module: grading.cvte

Purpose:
    Converts a raw score into a grade on the fixed 1-10 scale using one of
    the three CvTE calculation modes.

Key Functions:
    - cvte_grade(): Points -> grade, None on insufficient input
    - norm_grade(): Same, taking a Norm

Modes (f = points / max_points, N = n_term):
    legacy:   (10 - N) * f + N
    official: 9 * f + N
    main:     9 * f + N

    official and main share their arithmetic; they differ only in how the
    N-term is chosen when the norm is set up.

    Every mode is clamped to [1, 10]. A score of 0 is exactly 1.0 and a
    full score exactly 10.0, whatever the N-term. Results are not rounded.

Used By:
    - grading.thresholds
    - grading.curves
    - grading.controller
"""

from __future__ import annotations

import math
from typing import Optional

from grade_toolkit.core.models.norms import CalculationMode, Norm

MIN_GRADE = 1.0
MAX_GRADE = 10.0


def cvte_grade(
    points_earned: Optional[float],
    max_points: float,
    n_term: float,
    mode: CalculationMode | str = CalculationMode.LEGACY,
) -> Optional[float]:
    """
    Calculate a CvTE grade.

    Scores outside [0, max_points] are clamped first, so a negative score
    grades as 0 points and an over-max score as a full score.

    Args:
        points_earned: Points the student earned (None = not scored)
        max_points: Maximum points of the norm
        n_term: The norm's N-term
        mode: Calculation mode or its stored string value

    Returns:
        Grade in [1, 10], or None when the score is missing or non-finite,
        the N-term is non-finite, or max_points <= 0.

    Raises:
        ValueError: If mode is not a known calculation mode

    Example:
        >>> cvte_grade(25, 50, 1.0, "official")
        5.5
    """
    mode = CalculationMode.coerce(mode)
    if points_earned is None or not math.isfinite(points_earned):
        return None
    if not math.isfinite(max_points) or max_points <= 0:
        return None
    if not math.isfinite(n_term):
        return None

    points = min(max(points_earned, 0.0), max_points)
    if points <= 0:
        return MIN_GRADE
    if points >= max_points:
        return MAX_GRADE

    fraction = points / max_points
    if mode is CalculationMode.LEGACY:
        grade = (10.0 - n_term) * fraction + n_term
    else:
        grade = 9.0 * fraction + n_term

    return min(max(grade, MIN_GRADE), MAX_GRADE)


def norm_grade(points_earned: Optional[float], norm: Norm) -> Optional[float]:
    """Calculate a CvTE grade with the parameters of a Norm."""
    return cvte_grade(points_earned, norm.max_points, norm.n_term, norm.mode)
