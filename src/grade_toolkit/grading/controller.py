"""
Module: grading.controller

Purpose:
    Entry points the surrounding application calls per student: resolve
    the norm, run the right calculator for the test type and wrap the
    outcome in a GradeResult. Also recalculates every stored grade of a
    test after the test's scoring settings were edited.

Key Functions:
    - compute_cvte_result(): CvTE test, one student
    - compute_composite_result(): Composite test, one student
    - compute_grade(): Dispatch on test type
    - recalculate_grades(): All entries of one test

Key Classes:
    - GradeEntry: Raw input for one student on one test

Used By:
    - Storage/IPC layer (external) when saving or re-saving grades
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from grade_toolkit.config import DEFAULT_CONFIG, GradingConfig
from grade_toolkit.core.models.assessments import Test, TestType
from grade_toolkit.core.models.elements import ElementScore
from .composite import composite_grade
from .cvte import norm_grade
from .levels import describe_norm_resolution
from .results import GradeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeEntry:
    """
    What was entered for one student on one test.

    Attributes:
        student_id: Student identifier
        points_earned: Points for a CvTE test (None = not scored)
        element_scores: Scores for a composite test
        manual_override: Teacher-entered final grade, if any
    """

    student_id: int
    points_earned: Optional[float] = None
    element_scores: Tuple[ElementScore, ...] = ()
    manual_override: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "element_scores", tuple(self.element_scores))


def compute_cvte_result(
    test: Test,
    points_earned: Optional[float],
    student_level: Optional[str] = None,
    manual_override: Optional[float] = None,
    config: GradingConfig = DEFAULT_CONFIG,
) -> GradeResult:
    """
    Grade one student on a CvTE test.

    The norm is resolved for the student's level first; a level without
    its own norm falls back to the test's default norm.
    """
    resolution = describe_norm_resolution(test, student_level)
    if resolution.needs_attention:
        logger.debug(
            f"Test {test.id!r}: level {resolution.level!r} -> {resolution.source.value}, "
            f"using default norm"
        )
    calculated = norm_grade(points_earned, resolution.norm)
    return GradeResult.create(calculated, manual_override, config.display_decimals)


def compute_composite_result(
    test: Test,
    scores: Iterable[ElementScore],
    manual_override: Optional[float] = None,
    config: GradingConfig = DEFAULT_CONFIG,
) -> GradeResult:
    """Grade one student on a composite test."""
    calculated = composite_grade(
        test.elements,
        list(scores),
        test.custom_formula,
        config.composite_decimals,
    )
    return GradeResult.create(calculated, manual_override, config.display_decimals)


def compute_grade(
    test: Test,
    entry: GradeEntry,
    student_level: Optional[str] = None,
    config: GradingConfig = DEFAULT_CONFIG,
) -> GradeResult:
    """
    Grade one entry according to the test type.

    Example:
        >>> compute_grade(test, GradeEntry(1, points_earned=25)).final_grade
        5.5
    """
    if test.test_type is TestType.CVTE:
        return compute_cvte_result(
            test, entry.points_earned, student_level, entry.manual_override, config
        )
    return compute_composite_result(
        test, entry.element_scores, entry.manual_override, config
    )


def recalculate_grades(
    test: Test,
    entries: Iterable[GradeEntry],
    levels: Optional[Mapping[int, Optional[str]]] = None,
    config: GradingConfig = DEFAULT_CONFIG,
) -> Dict[int, GradeResult]:
    """
    Recompute every entry of a test, e.g. after its N-term was edited.

    Manual overrides are kept and stay the final grade.

    Args:
        test: The (edited) test
        entries: Stored entries for the test
        levels: Student id -> level code, for level norms
        config: Grading configuration

    Returns:
        Student id -> new GradeResult
    """
    levels = levels or {}
    results: Dict[int, GradeResult] = {}
    ungraded: List[int] = []
    for entry in entries:
        result = compute_grade(test, entry, levels.get(entry.student_id), config)
        if result.final_grade is None:
            ungraded.append(entry.student_id)
        results[entry.student_id] = result

    if ungraded:
        logger.debug(f"Test {test.id!r}: {len(ungraded)} entries without a grade after recalculation")
    return results
