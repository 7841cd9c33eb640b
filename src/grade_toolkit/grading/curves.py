"""
Module: grading.curves

Purpose:
    Grade-curve series for charting how the grade develops over the
    score range for several N-terms, plus the pass percentage per N-term
    and the fractional score boundary of a reference grade.

Key Functions:
    - grade_curve(): Sampled (points, percentage, grade per N) series
    - pass_percentages(): Pass percentage per N-term
    - reference_boundary(): Points needed for a grade at 0.1-point precision

Dependencies:
    - numpy: Sample positions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from grade_toolkit.config import DEFAULT_CONFIG, GradingConfig
from grade_toolkit.core.models.norms import CalculationMode, Norm
from .cvte import MAX_GRADE, MIN_GRADE, cvte_grade
from .rounding import round_half_up
from .thresholds import pass_percentage, points_for_grade

DEFAULT_N_TERMS = (0.0, 1.0, 2.0)
BOUNDARY_PRECISION = 0.1


@dataclass(frozen=True)
class CurvePoint:
    """
    One sample of a grade curve.

    Attributes:
        points: Score sampled
        percentage: Score as a rounded percentage of max points
        grades: N-term -> grade at this score
    """

    points: int
    percentage: int
    grades: Dict[float, float]


def _sample_points(max_points: int, samples: int) -> List[int]:
    step = max(1, max_points // samples)
    positions = np.arange(0, max_points + 1, step, dtype=int).tolist()
    if positions[-1] != max_points:
        positions.append(max_points)
    return positions


def grade_curve(
    max_points: int,
    n_terms: Sequence[float] = DEFAULT_N_TERMS,
    mode: CalculationMode | str = CalculationMode.LEGACY,
    config: GradingConfig = DEFAULT_CONFIG,
) -> List[CurvePoint]:
    """
    Sample grades over [0, max_points] for each N-term.

    Roughly ``config.curve_samples`` samples are taken; the full score is
    always the last sample.

    Raises:
        ValueError: If max_points is not positive
    """
    if max_points <= 0:
        raise ValueError(f"max_points must be positive: {max_points}")

    curve: List[CurvePoint] = []
    for points in _sample_points(int(max_points), config.curve_samples):
        grades: Dict[float, float] = {}
        for n_term in n_terms:
            grade = cvte_grade(points, max_points, n_term, mode)
            if grade is None:
                grade = MAX_GRADE if points >= max_points else MIN_GRADE
            grades[n_term] = grade
        percentage = int(round_half_up(points / max_points * 100))
        curve.append(CurvePoint(points, percentage, grades))
    return curve


def pass_percentages(
    max_points: int,
    n_terms: Sequence[float] = DEFAULT_N_TERMS,
    mode: CalculationMode | str = CalculationMode.LEGACY,
    config: GradingConfig = DEFAULT_CONFIG,
) -> List[Tuple[float, int]]:
    """Pass percentage for each N-term, in the given order."""
    return [
        (n_term, pass_percentage(Norm(max_points, n_term, mode), config))
        for n_term in n_terms
    ]


def reference_boundary(norm: Norm, grade: float = 6.0) -> float:
    """Points needed for ``grade`` under ``norm``, to 0.1 points."""
    return points_for_grade(
        grade, norm.max_points, norm.n_term, norm.mode, precision=BOUNDARY_PRECISION
    )
