"""
Unit Tests for Grade Statistics
"""

from grade_toolkit.config import GradingConfig
from grade_toolkit.grading.statistics import GradeStatistics, summarize_grades


class TestSummarizeGrades:

    def test_summarize_when_mixed_then_counts_and_extremes(self):
        stats = summarize_grades([5.0, 6.0, None, 7.5])
        assert stats.average == 6.2
        assert stats.highest == 7.5
        assert stats.lowest == 5.0
        assert stats.above_threshold == 2
        assert stats.under_threshold == 1
        assert stats.total_graded == 3

    def test_summarize_when_exactly_threshold_then_counted_as_pass(self):
        stats = summarize_grades([5.5, 5.4])
        assert stats.above_threshold == 1
        assert stats.under_threshold == 1

    def test_summarize_when_no_grades_then_zeros(self):
        assert summarize_grades([None, None]) == GradeStatistics()
        assert summarize_grades([]).total_graded == 0

    def test_summarize_when_custom_threshold_then_used(self):
        stats = summarize_grades([5.5, 6.0], GradingConfig(pass_threshold=6.0))
        assert stats.above_threshold == 1

    def test_summarize_when_generator_then_consumed_once(self):
        stats = summarize_grades(g for g in (4.0, 8.0))
        assert stats.average == 6.0
        assert stats.total_graded == 2


class TestStatisticsRecord:

    def test_to_record_when_called_then_camel_case(self):
        record = summarize_grades([6.0]).to_record()
        assert record == {
            "average": 6.0,
            "highest": 6.0,
            "lowest": 6.0,
            "underThreshold": 0,
            "aboveThreshold": 1,
            "totalGraded": 1,
        }
