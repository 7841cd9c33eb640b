"""
Module: core.models.norms

Purpose:
    Provides the Norm dataclass - the scoring parameters (max points,
    N-term and calculation mode) that map raw points to a 1-10 grade.

Key Classes:
    - CalculationMode: The three CvTE calculation modes
    - Norm: Immutable scoring parameters for one scale

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.assessments.Test
    - grading.cvte
    - grading.levels
    - grading.thresholds
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class CalculationMode(str, Enum):
    """
    How a CvTE norm turns a score fraction into a grade.

    Values are the strings stored in test records, so a mode compares
    equal to its persisted form.

    Attributes:
        LEGACY: (10 - N) * fraction + N, one straight line from N to 10
        OFFICIAL: 9 * fraction + N, N-term taken from the official norm table
        MAIN: 9 * fraction + N, same arithmetic as OFFICIAL

    Example:
        >>> CalculationMode("official") is CalculationMode.OFFICIAL
        True
    """

    LEGACY = "legacy"
    OFFICIAL = "official"
    MAIN = "main"

    @classmethod
    def coerce(cls, value: CalculationMode | str) -> CalculationMode:
        """
        Accept a mode or its stored string value.

        Raises:
            ValueError: If the string is not a known mode
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True, slots=True)
class Norm:
    """
    Scoring parameters for one grade scale.

    Attributes:
        max_points: Maximum attainable points (positive integer)
        n_term: The CvTE N-term, typically in [0, 2]
        mode: Calculation mode applied by the CvTE calculator

    Invariants:
        - max_points > 0
        - n_term is finite and >= 0

    Example:
        >>> norm = Norm(max_points=50, n_term=1.0, mode=CalculationMode.OFFICIAL)
        >>> norm.max_points
        50
    """

    max_points: int
    n_term: float
    mode: CalculationMode = CalculationMode.LEGACY

    def __post_init__(self) -> None:
        """Validate and coerce on construction."""
        if (
            isinstance(self.max_points, bool)
            or not isinstance(self.max_points, (int, float))
            or not math.isfinite(self.max_points)
            or self.max_points != int(self.max_points)
        ):
            raise ValueError(f"max_points must be an integer: {self.max_points}")
        if self.max_points <= 0:
            raise ValueError(f"max_points must be positive: {self.max_points}")
        if not math.isfinite(self.n_term) or self.n_term < 0:
            raise ValueError(f"n_term must be a non-negative number: {self.n_term}")
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "max_points", int(self.max_points))
        object.__setattr__(self, "n_term", float(self.n_term))
        object.__setattr__(self, "mode", CalculationMode.coerce(self.mode))

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Norm({self.max_points}, n={self.n_term:g}, {self.mode.value!r})"
