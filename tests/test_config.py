"""
Unit Tests for GradingConfig
"""

import pytest

from grade_toolkit.config import DEFAULT_CONFIG, GradingConfig
from grade_toolkit.core.models import CalculationMode


class TestGradingConfig:

    def test_defaults_when_created_then_dutch_scale(self):
        assert DEFAULT_CONFIG.pass_threshold == 5.5
        assert DEFAULT_CONFIG.display_decimals == 1
        assert DEFAULT_CONFIG.composite_decimals == 2
        assert DEFAULT_CONFIG.default_mode is CalculationMode.LEGACY

    def test_is_passing_when_at_threshold_then_true(self):
        assert DEFAULT_CONFIG.is_passing(5.5)
        assert not DEFAULT_CONFIG.is_passing(5.49)

    @pytest.mark.parametrize("kwargs, message", [
        ({"pass_threshold": 11}, "pass_threshold"),
        ({"display_decimals": -1}, "display_decimals"),
        ({"composite_decimals": -1}, "composite_decimals"),
        ({"default_n_term": -0.5}, "default_n_term"),
        ({"default_max_points": 0}, "default_max_points"),
        ({"curve_samples": 0}, "curve_samples"),
    ])
    def test_config_when_invalid_then_raises(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            GradingConfig(**kwargs)

    def test_config_when_frozen_then_cannot_change(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.pass_threshold = 6.0  # type: ignore[misc]
