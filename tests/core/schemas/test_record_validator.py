"""
Unit Tests for Test Record Validation
"""

import math

import pytest

from grade_toolkit.core.schemas import ValidationError, to_number, validate_test_record


class TestToNumber:

    @pytest.mark.parametrize("value, expected", [
        (5, 5.0),
        (2.5, 2.5),
        ("7", 7.0),
        (" 6,5 ", 6.5),
        ("1.25", 1.25),
    ])
    def test_to_number_when_numeric_then_float(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "  ", "abc", True, math.nan, "inf", [1]])
    def test_to_number_when_unusable_then_none(self, value):
        assert to_number(value) is None


class TestValidateTestRecord:

    def test_validate_when_minimal_cvte_then_passes(self):
        validate_test_record({"id": "t1", "name": "Toets"})

    def test_validate_when_full_composite_then_passes(self):
        validate_test_record({
            "id": "t2",
            "testType": "composite",
            "elements": [{"id": "a", "name": "A", "maxPoints": "10", "weight": 2}],
            "customFormula": "A / 2",
            "levelNormerings": {"havo": {"maxPoints": 40, "nTerm": "0,5"}},
        })

    def test_validate_when_unknown_test_type_then_raises(self):
        with pytest.raises(ValidationError, match="unknown test type"):
            validate_test_record({"id": "t", "testType": "essay"})

    def test_validate_when_max_points_fractional_then_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_test_record({"id": "t", "maxPoints": 12.5})
        assert exc_info.value.path == "maxPoints"

    def test_validate_when_negative_n_term_then_raises(self):
        with pytest.raises(ValidationError, match="must be non-negative"):
            validate_test_record({"id": "t", "nTerm": -1})

    def test_validate_when_unknown_mode_then_raises(self):
        with pytest.raises(ValidationError, match="unknown mode"):
            validate_test_record({"id": "t", "cvteCalculationMode": "strict"})

    def test_validate_when_several_problems_then_all_listed(self):
        record = {
            "id": "t",
            "maxPoints": 0,
            "elements": [{"id": "", "name": "A", "weight": 0}],
            "levelNormerings": {"havo": {"nTerm": "x"}},
        }
        with pytest.raises(ValidationError) as exc_info:
            validate_test_record(record)
        errors = exc_info.value.errors
        assert len(errors) == 4
        assert any(e.startswith("elements[0].id") for e in errors)
        assert any(e.startswith("elements[0].weight") for e in errors)
        assert any(e.startswith("levelNormerings['havo'].nTerm") for e in errors)

    def test_validate_when_formula_not_string_then_raises(self):
        with pytest.raises(ValidationError, match="customFormula"):
            validate_test_record({"id": "t", "customFormula": 42})

    def test_validate_when_not_a_dict_then_raises(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_test_record(["t"])
