"""
Module: config

Purpose:
    Central grading configuration. Collects the pass threshold, rounding
    precisions and the defaults applied to incomplete test records in one
    immutable, validated dataclass.

Key Classes:
    - GradingConfig: Thresholds and defaults for grade computation

Used By:
    - core.utils.serialization: Record defaults
    - grading.results: Display rounding
    - grading.statistics: Pass threshold
    - grading.thresholds: Pass percentage target
    - grading.curves: Sample density
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from grade_toolkit.core.models.norms import CalculationMode


@dataclass(frozen=True)
class GradingConfig:
    """
    Configuration for grade computation (immutable).

    Attributes:
        pass_threshold: Lowest final grade counted as sufficient
        display_decimals: Decimals of a final (displayed/stored) grade
        composite_decimals: Decimals of a calculated composite grade
        default_n_term: N-term used when a record has none
        default_max_points: Max points used when a record has none
        default_mode: Calculation mode used when a record has none
        curve_samples: Approximate number of samples in a grade curve

    Invariants:
        - 1 <= pass_threshold <= 10
        - decimals >= 0
        - default_max_points > 0
        - curve_samples > 0

    Example:
        >>> config = GradingConfig(pass_threshold=6.0)
        >>> config.is_passing(5.9)
        False
    """

    pass_threshold: float = 5.5
    display_decimals: int = 1
    composite_decimals: int = 2

    # Record defaults
    default_n_term: float = 1.0
    default_max_points: int = 10
    default_mode: CalculationMode = CalculationMode.LEGACY

    curve_samples: int = 100

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not (1 <= self.pass_threshold <= 10):
            raise ValueError(f"pass_threshold must be within [1, 10]: {self.pass_threshold}")
        if self.display_decimals < 0:
            raise ValueError(f"display_decimals must be non-negative: {self.display_decimals}")
        if self.composite_decimals < 0:
            raise ValueError(f"composite_decimals must be non-negative: {self.composite_decimals}")
        if not math.isfinite(self.default_n_term) or self.default_n_term < 0:
            raise ValueError(f"default_n_term must be a non-negative number: {self.default_n_term}")
        if self.default_max_points <= 0:
            raise ValueError(f"default_max_points must be positive: {self.default_max_points}")
        if self.curve_samples <= 0:
            raise ValueError(f"curve_samples must be positive: {self.curve_samples}")

    def is_passing(self, grade: float) -> bool:
        """Check whether a final grade meets the pass threshold."""
        return grade >= self.pass_threshold


DEFAULT_CONFIG = GradingConfig()
