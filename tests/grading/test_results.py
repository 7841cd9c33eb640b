"""
Unit Tests for GradeResult (calculated grade, override, final grade)
"""

import pytest

from grade_toolkit.grading.results import GradeResult


class TestGradeResultCreate:

    def test_create_when_no_override_then_final_is_rounded_calculated(self):
        result = GradeResult.create(6.84)
        assert result.calculated_grade == 6.84
        assert result.final_grade == 6.8
        assert not result.is_overridden

    def test_create_when_override_then_final_is_override(self):
        result = GradeResult.create(6.84, manual_override=7.5)
        assert result.final_grade == 7.5
        assert result.is_overridden

    def test_create_when_no_grade_then_final_none(self):
        assert GradeResult.create(None).final_grade is None

    def test_create_when_two_decimals_then_respected(self):
        assert GradeResult.create(6.846, display_decimals=2).final_grade == pytest.approx(6.85)


class TestGradeResultOverride:
    """Override lifecycle."""

    def test_with_calculated_when_overridden_then_final_kept(self):
        result = GradeResult.create(6.0).with_override(7.0).with_calculated(5.1)
        assert result.calculated_grade == 5.1
        assert result.final_grade == 7.0

    def test_with_calculated_when_not_overridden_then_final_follows(self):
        result = GradeResult.create(6.0).with_calculated(5.14)
        assert result.final_grade == 5.1

    def test_clear_override_when_overridden_then_final_from_calculated(self):
        result = GradeResult.create(6.0).with_override(7.0).with_calculated(5.14)
        cleared = result.clear_override()
        assert cleared.manual_override is None
        assert cleared.final_grade == 5.1

    def test_override_when_result_frozen_then_original_untouched(self):
        original = GradeResult.create(6.0)
        original.with_override(9.0)
        assert original.final_grade == 6.0
        with pytest.raises(AttributeError):
            original.final_grade = 1.0  # type: ignore[misc]


class TestGradeResultRecord:

    def test_to_record_when_no_override_then_two_fields(self):
        assert GradeResult.create(5.56).to_record() == {
            "calculatedGrade": 5.56,
            "finalGrade": 5.6,
        }

    def test_to_record_when_override_then_included(self):
        record = GradeResult.create(5.56, manual_override=6.0).to_record()
        assert record["manualOverride"] == 6.0
        assert record["finalGrade"] == 6.0
