"""
Module: formula

Purpose:
    Custom grading formulas. Element names are substituted textually and
    the remaining arithmetic is evaluated by a small recursive-descent
    parser. The grammar is deliberately minimal (no variables, functions
    or exponentiation) so that formulas entered by teachers stay auditable.

Key Functions:
    - evaluate(): Evaluate a numeric expression, None on failure
    - substitute_names(): Replace element names with earned points
"""

from .parser import FormulaParser, FormulaSyntaxError, evaluate
from .substitution import (
    build_context,
    format_number,
    is_numeric_expression,
    substitute_names,
)

__all__ = [
    "FormulaParser",
    "FormulaSyntaxError",
    "evaluate",
    "build_context",
    "format_number",
    "is_numeric_expression",
    "substitute_names",
]
