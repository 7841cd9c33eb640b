"""
Module: grading.composite

Purpose:
    Resolves the scores on a composite test's elements into one grade,
    either by the default weighted average or by a custom formula written
    over element names.

Key Functions:
    - composite_grade(): Elements + scores (+ formula) -> grade or None
    - formula_grade(): Custom formula path only
    - weighted_average_grade(): Default rule only

Dependencies:
    - grade_toolkit.formula: Name substitution and evaluation

Used By:
    - grading.controller

Note:
    Composite grades are NOT clamped to [1, 10], unlike CvTE grades. A
    formula such as "A + B" can legitimately yield 14. Stored grades rely
    on this, so it is kept as is.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from grade_toolkit.core.models.elements import Element, ElementScore
from grade_toolkit.formula.parser import evaluate
from grade_toolkit.formula.substitution import (
    build_context,
    is_numeric_expression,
    substitute_names,
)
from .rounding import round_half_up

logger = logging.getLogger(__name__)

COMPOSITE_DECIMALS = 2


def formula_grade(
    elements: Sequence[Element],
    scores: Sequence[ElementScore],
    custom_formula: str,
    decimals: int = COMPOSITE_DECIMALS,
) -> Optional[float]:
    """
    Evaluate a custom formula over element names.

    Unscored elements count as 0 points.

    Args:
        elements: Test elements (names are the formula tokens)
        scores: Student scores
        custom_formula: Formula text, e.g. "(Creativity + Effort) / 2"
        decimals: Rounding precision of the result

    Returns:
        The rounded result, or None if names remain unresolved, foreign
        characters are present, the expression does not parse, or the
        result is not finite (e.g. division by zero).
    """
    context = build_context(elements, scores)
    expression = substitute_names(custom_formula, elements, context)

    if not is_numeric_expression(expression):
        logger.warning(f"Invalid formula: contains forbidden characters: {expression!r}")
        return None

    result = evaluate(expression)
    if result is None:
        logger.warning(f"Formula did not evaluate to a number: {expression!r}")
        return None
    if not math.isfinite(result):
        logger.warning(f"Formula produced a non-finite result ({result}): {expression!r}")
        return None

    return round_half_up(result, decimals)


def weighted_average_grade(
    elements: Sequence[Element],
    scores: Sequence[ElementScore],
    decimals: int = COMPOSITE_DECIMALS,
) -> Optional[float]:
    """
    Weighted average of element grades normalized to 0-10.

    Only elements with a score take part. Each contributes
    ``points / max_points * 10`` times its weight.

    Returns:
        The rounded average, or None if no scored element carries weight.
    """
    earned = {score.element_id: score.points_earned for score in scores}

    weighted_sum = 0.0
    total_weight = 0.0
    for element in elements:
        if element.id not in earned:
            continue
        normalized = (
            earned[element.id] / element.max_points * 10
            if element.max_points > 0 else 0.0
        )
        weighted_sum += normalized * element.weight
        total_weight += element.weight

    if total_weight == 0:
        return None

    average = weighted_sum / total_weight
    if not math.isfinite(average):
        return None
    return round_half_up(average, decimals)


def composite_grade(
    elements: Sequence[Element],
    scores: Sequence[ElementScore],
    custom_formula: Optional[str] = None,
    decimals: int = COMPOSITE_DECIMALS,
) -> Optional[float]:
    """
    Calculate the grade of a composite test.

    Args:
        elements: Test elements
        scores: Student scores (empty = not graded)
        custom_formula: Optional formula; blank means the default rule
        decimals: Rounding precision of the result

    Returns:
        Grade rounded to two decimals, or None when there are no scores or
        the grade cannot be computed.

    Example:
        >>> a = Element("a", "A", max_points=10)
        >>> b = Element("b", "B", max_points=10)
        >>> composite_grade([a, b], [ElementScore("a", 8), ElementScore("b", 6)], "(A + B) / 2")
        7.0
    """
    if not scores:
        return None
    if custom_formula and custom_formula.strip():
        return formula_grade(elements, scores, custom_formula, decimals)
    return weighted_average_grade(elements, scores, decimals)
