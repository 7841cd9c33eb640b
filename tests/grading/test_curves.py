"""
Unit Tests for Grade Curves and Pass Percentages
"""

import pytest

from grade_toolkit.config import GradingConfig
from grade_toolkit.core.models import CalculationMode, Norm
from grade_toolkit.grading.curves import (
    DEFAULT_N_TERMS,
    grade_curve,
    pass_percentages,
    reference_boundary,
)


class TestGradeCurve:

    def test_grade_curve_when_small_max_then_every_point_sampled(self):
        curve = grade_curve(50)
        assert len(curve) == 51
        assert [p.points for p in curve[:3]] == [0, 1, 2]

    def test_grade_curve_when_step_misses_max_then_max_appended(self):
        curve = grade_curve(301)
        assert curve[-1].points == 301
        assert curve[-2].points == 300
        assert curve[1].points == 3

    def test_grade_curve_when_sampled_then_endpoints_fixed(self):
        curve = grade_curve(40, mode="official")
        assert set(curve[0].grades) == set(DEFAULT_N_TERMS)
        assert all(g == 1.0 for g in curve[0].grades.values())
        assert all(g == 10.0 for g in curve[-1].grades.values())
        assert curve[0].percentage == 0
        assert curve[-1].percentage == 100

    def test_grade_curve_when_fewer_samples_configured_then_coarser(self):
        curve = grade_curve(100, config=GradingConfig(curve_samples=10))
        assert [p.points for p in curve] == list(range(0, 101, 10))

    def test_grade_curve_when_max_not_positive_then_raises(self):
        with pytest.raises(ValueError, match="max_points must be positive"):
            grade_curve(0)


class TestPassPercentages:

    def test_pass_percentages_when_higher_n_then_lower_percentage(self):
        result = pass_percentages(40, mode=CalculationMode.LEGACY)
        assert [n for n, _ in result] == [0.0, 1.0, 2.0]
        percentages = [pct for _, pct in result]
        assert percentages == sorted(percentages, reverse=True)
        assert dict(result)[1.0] == 50


class TestReferenceBoundary:

    def test_reference_boundary_when_n_is_one_then_near_exact_boundary(self):
        """Grade 6 over 50 points at N=1 needs 27.78 points."""
        boundary = reference_boundary(Norm(50, 1.0, CalculationMode.OFFICIAL))
        assert boundary == pytest.approx(250 / 9, abs=0.1)
