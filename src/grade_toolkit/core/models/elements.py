"""
Module: core.models.elements

Purpose:
    Composite test building blocks: named, weighted, maximum-scored
    elements (rubric line items) and the points a student earned on them.

Key Classes:
    - Element: One scored item of a composite test
    - ElementScore: Points earned on one element

Used By:
    - core.models.assessments.Test
    - grading.composite
    - formula.substitution
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Element:
    """
    A named, weighted element of a composite test.

    The name doubles as the token used in custom formulas, e.g.
    ``"(Creativity + Effort) / 2"``.

    Attributes:
        id: Identifier referenced by ElementScore.element_id
        name: Display name and formula token
        max_points: Maximum points for this element
        weight: Contribution to the default weighted average
        order: Display position only

    Invariants:
        - name is not blank
        - max_points > 0
        - weight > 0
    """

    id: str
    name: str
    max_points: int
    weight: float = 1.0
    order: int = 0

    def __post_init__(self) -> None:
        """Validate element on construction."""
        if not self.name or not self.name.strip():
            raise ValueError(f"Element name cannot be blank (id={self.id!r})")
        if self.max_points <= 0:
            raise ValueError(f"Element max_points must be positive: {self.max_points}")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise ValueError(f"Element weight must be positive: {self.weight}")

    @property
    def token(self) -> str:
        """Formula lookup key: trimmed, lower-cased name."""
        return self.name.strip().lower()

    def is_over_max(self, score: ElementScore) -> bool:
        """Flag scores above max_points. These are accepted, not rejected."""
        return score.points_earned > self.max_points


@dataclass(frozen=True, slots=True)
class ElementScore:
    """
    Points a student earned on one element.

    Attributes:
        element_id: Element.id this score belongs to
        points_earned: Earned points (may exceed the element maximum)
    """

    element_id: str
    points_earned: float

    def __repr__(self) -> str:
        return f"ElementScore({self.element_id!r}, {self.points_earned:g})"
