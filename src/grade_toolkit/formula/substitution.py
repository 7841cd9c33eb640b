"""
Module: formula.substitution

Purpose:
    Turns a custom grading formula written over element names, such as
    ``"(Netheid + Originaliteit) / 2"``, into a purely numeric expression
    that formula.parser can evaluate.

Key Functions:
    - build_context(): Element token -> earned points
    - substitute_names(): Replace whole-word names with their values
    - is_numeric_expression(): Allowed-character check after substitution

Dependencies:
    - numpy: Positional rendering of fractional scores

Used By:
    - grading.composite: Custom formula path

Design Notes:
    Names are replaced longest first and only where they are not touching
    another word character, so "Effort" never matches inside
    "Effort_bonus" and "Effort bonus" is replaced before "Effort".
    Names that are a prefix of a longer name separated by a space remain
    ambiguous if the longer name is absent from the element list.
"""

from __future__ import annotations

import math
import re
from typing import Dict, Iterable, Sequence

import numpy as np

from grade_toolkit.core.models.elements import Element, ElementScore

ALLOWED_EXPRESSION = re.compile(r"[\d\s+\-*/().]+", re.ASCII)


def build_context(
    elements: Sequence[Element],
    scores: Iterable[ElementScore],
) -> Dict[str, float]:
    """
    Map each element token to the points earned on it.

    Unscored elements map to 0.

    Args:
        elements: Test elements
        scores: Student scores, matched on element id

    Returns:
        Dict keyed by Element.token
    """
    earned = {score.element_id: score.points_earned for score in scores}
    return {element.token: earned.get(element.id, 0.0) for element in elements}


def format_number(value: float) -> str:
    """Render a value for textual substitution ("8", "7.5", "0.00001", "-2")."""
    value = float(value)
    # inf/nan render as words, so the expression fails the character check
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    # Positional only: exponent notation would fail the character check
    return np.format_float_positional(value, trim="-")


def substitute_names(
    formula: str,
    elements: Sequence[Element],
    context: Dict[str, float],
) -> str:
    """
    Replace every whole-word, case-insensitive element name with its value.

    Decimal commas are converted to dots afterwards so formulas such as
    ``"A * 0,5"`` are accepted.

    Args:
        formula: Formula text over element names
        elements: Elements whose names may appear
        context: Values from build_context()

    Returns:
        The substituted expression text (not yet validated)

    Example:
        >>> substitute_names("(A + B) / 2", elements, {"a": 8, "b": 6})
        '(8 + 6) / 2'
    """
    text = formula.strip()
    names = sorted(
        (element.name.strip() for element in elements if element.name.strip()),
        key=len,
        reverse=True,
    )
    for name in names:
        value = format_number(context.get(name.lower(), 0.0))
        pattern = re.compile(rf"(?<!\w){re.escape(name)}(?!\w)", re.IGNORECASE)
        text = pattern.sub(lambda _match: value, text)
    return text.replace(",", ".")


def is_numeric_expression(text: str) -> bool:
    """True if only digits, whitespace, operators, dots and parentheses remain."""
    return ALLOWED_EXPRESSION.fullmatch(text) is not None
