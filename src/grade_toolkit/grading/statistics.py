"""
Module: grading.statistics

Purpose:
    Summary statistics over the final grades of one test: average,
    extremes and how many students are above or under the pass threshold.

Key Functions:
    - summarize_grades(): Final grades -> GradeStatistics

Dependencies:
    - numpy: Aggregates over the grade array
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from grade_toolkit.config import DEFAULT_CONFIG, GradingConfig
from .rounding import round_half_up


@dataclass(frozen=True)
class GradeStatistics:
    """
    Statistics for one test.

    Attributes:
        average: Mean final grade, rounded to one decimal
        highest: Highest final grade
        lowest: Lowest final grade
        under_threshold: Count of grades below the pass threshold
        above_threshold: Count of grades at or above the pass threshold
        total_graded: Number of graded students
    """

    average: float = 0.0
    highest: float = 0.0
    lowest: float = 0.0
    under_threshold: int = 0
    above_threshold: int = 0
    total_graded: int = 0

    def to_record(self) -> dict:
        """camelCase storage/UI shape."""
        return {
            "average": self.average,
            "highest": self.highest,
            "lowest": self.lowest,
            "underThreshold": self.under_threshold,
            "aboveThreshold": self.above_threshold,
            "totalGraded": self.total_graded,
        }


def summarize_grades(
    final_grades: Iterable[Optional[float]],
    config: GradingConfig = DEFAULT_CONFIG,
) -> GradeStatistics:
    """
    Summarize final grades.

    Ungraded students (None) are ignored. No grades at all gives a
    statistics object of zeros.

    Example:
        >>> summarize_grades([5.0, 6.0, None, 7.5]).above_threshold
        2
    """
    values = [float(g) for g in final_grades if g is not None]
    if not values:
        return GradeStatistics()

    grades = np.asarray(values)
    passing = int(np.count_nonzero(grades >= config.pass_threshold))
    return GradeStatistics(
        # Left-to-right sum, as the stored averages were computed
        average=round_half_up(sum(values) / len(values), config.display_decimals),
        highest=float(grades.max()),
        lowest=float(grades.min()),
        under_threshold=int(grades.size) - passing,
        above_threshold=passing,
        total_graded=int(grades.size),
    )
