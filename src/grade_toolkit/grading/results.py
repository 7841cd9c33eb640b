"""
Module: grading.results

Purpose:
    Provides the GradeResult dataclass: a calculated grade together with
    the final grade shown and stored for a student, honouring a manual
    override.

Key Classes:
    - GradeResult: calculated grade, manual override and final grade

Invariants:
    - final_grade == manual_override when an override exists
    - otherwise final_grade == calculated_grade rounded to one decimal
    - with_calculated() never changes final_grade while an override exists;
      only clear_override() re-derives it from the calculated grade
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .rounding import round_grade


@dataclass(frozen=True, slots=True)
class GradeResult:
    """
    Calculated and final grade for one student on one test.

    Use GradeResult.create() rather than the constructor so the final
    grade is always derived consistently.

    Attributes:
        calculated_grade: Unrounded calculator output (None = no grade)
        final_grade: Override, or rounded calculated grade
        manual_override: Teacher-entered grade, if any
        display_decimals: Rounding precision of final_grade

    Example:
        >>> result = GradeResult.create(6.84)
        >>> result.final_grade
        6.8
        >>> result.with_override(7.0).with_calculated(5.1).final_grade
        7.0
    """

    calculated_grade: Optional[float]
    final_grade: Optional[float]
    manual_override: Optional[float] = None
    display_decimals: int = 1

    @classmethod
    def create(
        cls,
        calculated_grade: Optional[float],
        manual_override: Optional[float] = None,
        display_decimals: int = 1,
    ) -> GradeResult:
        """Build a result, deriving final_grade from override or calculation."""
        if manual_override is not None:
            final = manual_override
        else:
            final = round_grade(calculated_grade, display_decimals)
        return cls(calculated_grade, final, manual_override, display_decimals)

    @property
    def is_overridden(self) -> bool:
        return self.manual_override is not None

    def with_calculated(self, calculated_grade: Optional[float]) -> GradeResult:
        """Replace the calculated grade; final grade follows only without override."""
        if self.is_overridden:
            return replace(self, calculated_grade=calculated_grade)
        return GradeResult.create(calculated_grade, None, self.display_decimals)

    def with_override(self, manual_override: float) -> GradeResult:
        """Set a manual override, which becomes the final grade."""
        return GradeResult.create(self.calculated_grade, manual_override, self.display_decimals)

    def clear_override(self) -> GradeResult:
        """Drop the override and re-derive the final grade."""
        return GradeResult.create(self.calculated_grade, None, self.display_decimals)

    def to_record(self) -> dict:
        """Storage shape of the grade fields."""
        record = {
            "calculatedGrade": self.calculated_grade,
            "finalGrade": self.final_grade,
        }
        if self.manual_override is not None:
            record["manualOverride"] = self.manual_override
        return record
