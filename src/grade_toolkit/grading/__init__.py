"""
Module: grading

Purpose:
    The grade computation engine. Every function here is pure and
    synchronous: it reads its arguments, allocates only local data and
    signals insufficient input by returning None instead of raising.

Key Functions:
    - cvte_grade(): Points -> 1-10 grade under a CvTE mode
    - composite_grade(): Element scores (+ custom formula) -> grade
    - resolve_norm(): Level-specific or default norm for a student
    - points_for_grade(): Minimum points for a target grade
    - compute_grade(): Per-student entry point returning a GradeResult
"""

from .rounding import round_grade, round_half_up
from .cvte import MAX_GRADE, MIN_GRADE, cvte_grade, norm_grade
from .composite import composite_grade, formula_grade, weighted_average_grade
from .levels import (
    LEVEL_OVERRIDE_OPTIONS,
    NormResolution,
    NormSource,
    describe_norm_resolution,
    detect_student_level,
    extract_short_level,
    resolve_norm,
)
from .thresholds import pass_percentage, points_for_grade
from .results import GradeResult
from .statistics import GradeStatistics, summarize_grades
from .curves import CurvePoint, grade_curve, pass_percentages, reference_boundary
from .controller import (
    GradeEntry,
    compute_composite_result,
    compute_cvte_result,
    compute_grade,
    recalculate_grades,
)

__all__ = [
    # Rounding
    "round_grade",
    "round_half_up",
    # Calculators
    "MAX_GRADE",
    "MIN_GRADE",
    "cvte_grade",
    "norm_grade",
    "composite_grade",
    "formula_grade",
    "weighted_average_grade",
    # Norms
    "LEVEL_OVERRIDE_OPTIONS",
    "NormResolution",
    "NormSource",
    "describe_norm_resolution",
    "detect_student_level",
    "extract_short_level",
    "resolve_norm",
    # Thresholds & reporting
    "pass_percentage",
    "points_for_grade",
    "GradeStatistics",
    "summarize_grades",
    "CurvePoint",
    "grade_curve",
    "pass_percentages",
    "reference_boundary",
    # Results & controller
    "GradeResult",
    "GradeEntry",
    "compute_composite_result",
    "compute_cvte_result",
    "compute_grade",
    "recalculate_grades",
]
