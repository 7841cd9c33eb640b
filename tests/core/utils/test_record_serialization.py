"""
Unit Tests for Record Serialization
"""

import pytest

from grade_toolkit.config import GradingConfig
from grade_toolkit.core.models import CalculationMode, ElementScore, Norm, TestType
from grade_toolkit.core.schemas import ValidationError
from grade_toolkit.core.utils import (
    dump_test,
    element_scores_from_records,
    element_scores_to_records,
    load_test,
    norm_from_record,
    normalize_class_groups,
)


class TestNormFromRecord:

    def test_norm_from_record_when_fields_missing_then_defaults(self):
        assert norm_from_record({}) == Norm(10, 1.0, CalculationMode.LEGACY)

    def test_norm_from_record_when_config_defaults_then_used(self):
        config = GradingConfig(default_max_points=40, default_mode=CalculationMode.OFFICIAL)
        assert norm_from_record({"nTerm": 1.5}, config) == Norm(40, 1.5, CalculationMode.OFFICIAL)

    def test_norm_from_record_when_strings_then_parsed(self):
        norm = norm_from_record({"maxPoints": "50", "nTerm": "1,2", "cvteCalculationMode": "Main"})
        assert norm == Norm(50, 1.2, CalculationMode.MAIN)


class TestLoadTest:

    def test_load_test_when_cvte_with_levels_then_model(self):
        test = load_test({
            "id": "t1",
            "name": "H3",
            "maxPoints": 50,
            "nTerm": 1.0,
            "cvteCalculationMode": "official",
            "levelNormerings": {"havo": {"maxPoints": 40, "nTerm": 0.5,
                                         "cvteCalculationMode": "official"}},
        })
        assert test.test_type is TestType.CVTE
        assert test.default_norm == Norm(50, 1.0, CalculationMode.OFFICIAL)
        assert test.level_normerings["HAVO"] == Norm(40, 0.5, CalculationMode.OFFICIAL)

    def test_load_test_when_elements_unordered_then_sorted_by_order(self):
        test = load_test({
            "id": "t2",
            "testType": "composite",
            "elements": [
                {"id": "b", "name": "B", "maxPoints": 20, "order": 1},
                {"id": "a", "name": "A", "maxPoints": 10, "order": 0},
            ],
            "customFormula": "  ",
        })
        assert [e.id for e in test.elements] == ["a", "b"]
        assert test.elements[0].weight == 1.0
        assert test.custom_formula is None

    def test_load_test_when_duplicate_element_names_then_validation_error(self):
        record = {
            "id": "t3",
            "testType": "composite",
            "elements": [{"id": "a", "name": "Effort"}, {"id": "b", "name": "effort"}],
        }
        with pytest.raises(ValidationError, match="Duplicate element name"):
            load_test(record)

    def test_load_test_when_malformed_then_validation_error(self):
        with pytest.raises(ValidationError):
            load_test({"id": "t4", "maxPoints": -3})


class TestDumpTest:

    def test_dump_test_when_cvte_then_norm_fields(self, cvte_test):
        record = dump_test(cvte_test)
        assert record["testType"] == "cvte"
        assert record["maxPoints"] == 50
        assert record["cvteCalculationMode"] == "official"
        assert "elements" not in record
        assert record["levelNormerings"]["HAVO"]["nTerm"] == 0.5

    def test_dump_test_when_composite_then_reloads_equal(self, composite_test):
        record = dump_test(composite_test)
        assert record["customFormula"] == ""
        assert load_test(record) == composite_test


class TestElementScores:

    def test_scores_from_records_when_blank_then_skipped(self):
        scores = element_scores_from_records([
            {"elementId": "a", "pointsEarned": "7,5"},
            {"elementId": "b", "pointsEarned": ""},
            {"elementId": "c", "pointsEarned": None},
        ])
        assert scores == [ElementScore("a", 7.5)]

    def test_scores_from_records_when_none_then_empty(self):
        assert element_scores_from_records(None) == []

    def test_scores_to_records_when_called_then_stored_shape(self):
        assert element_scores_to_records([ElementScore("a", 3)]) == [
            {"elementId": "a", "pointsEarned": 3}
        ]


class TestNormalizeClassGroups:

    @pytest.mark.parametrize("record, expected", [
        ({"classGroups": ["3B", " 3A ", "3B"], "className": "X"}, ["3B", "3A"]),
        ({"classNames": ["4H"], "className": "X"}, ["4H"]),
        ({"className": " 2C "}, ["2C"]),
        ({"classGroups": [], "className": "5V"}, ["5V"]),
        ({}, []),
    ])
    def test_normalize_class_groups_when_legacy_fields_then_precedence(self, record, expected):
        assert normalize_class_groups(record) == expected
