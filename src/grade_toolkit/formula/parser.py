"""
Module: formula.parser

Purpose:
    Recursive-descent parser and evaluator for the minimal arithmetic
    grammar accepted in custom grading formulas. Names are substituted
    before this stage (see formula.substitution); this module only sees
    numbers, operators and parentheses.

Key Functions:
    - evaluate(): Evaluate an expression, None on any syntax error

Key Classes:
    - FormulaParser: Single-use parser over one expression string
    - FormulaSyntaxError: Raised internally on malformed input

Grammar (lowest to highest precedence):
    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := ('+' | '-') factor | '(' expression ')' | number
    number     := digits ('.' digits)?

Used By:
    - grading.composite: Custom formula path
"""

from __future__ import annotations

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)


class FormulaSyntaxError(Exception):
    """Malformed formula expression."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.position = position


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 gives a signed infinity, 0/0 gives NaN."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class FormulaParser:
    """
    Parser over a single expression string.

    Whitespace is skipped between tokens. Parsing stops at the first
    character that cannot continue the expression; callers check
    ``at_end()`` to reject trailing input.

    Example:
        >>> FormulaParser("(2 + 3) * 4").parse_expression()
        20.0
    """

    def __init__(self, text: str):
        self.text = text
        self.index = 0

    # ─────────────────────────────────────────────────────────────────────────
    # Grammar rules
    # ─────────────────────────────────────────────────────────────────────────

    def parse_expression(self) -> float:
        value = self.parse_term()
        while True:
            self._skip_whitespace()
            char = self._peek()
            if char not in ("+", "-"):
                return value
            self.index += 1
            right = self.parse_term()
            value = value + right if char == "+" else value - right

    def parse_term(self) -> float:
        value = self.parse_factor()
        while True:
            self._skip_whitespace()
            char = self._peek()
            if char not in ("*", "/"):
                return value
            self.index += 1
            right = self.parse_factor()
            value = value * right if char == "*" else _divide(value, right)

    def parse_factor(self) -> float:
        self._skip_whitespace()
        char = self._peek()

        if char in ("+", "-"):
            self.index += 1
            value = self.parse_factor()
            return -value if char == "-" else value

        if char == "(":
            self.index += 1
            value = self.parse_expression()
            self._skip_whitespace()
            if self._peek() != ")":
                raise FormulaSyntaxError("Missing closing parenthesis", self.index)
            self.index += 1
            return value

        return self.parse_number()

    def parse_number(self) -> float:
        self._skip_whitespace()
        start = self.index
        has_decimal = False

        while not self.at_end():
            char = self._peek()
            if "0" <= char <= "9":
                self.index += 1
            elif char == "." and not has_decimal:
                has_decimal = True
                self.index += 1
            else:
                break

        token = self.text[start:self.index]
        if not token:
            raise FormulaSyntaxError("Expected number", start)
        if token == ".":
            raise FormulaSyntaxError("Invalid number '.'", start)
        return float(token)

    # ─────────────────────────────────────────────────────────────────────────
    # Cursor helpers
    # ─────────────────────────────────────────────────────────────────────────

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def _peek(self) -> str:
        return "" if self.at_end() else self.text[self.index]

    def _skip_whitespace(self) -> None:
        while not self.at_end() and self.text[self.index].isspace():
            self.index += 1


def evaluate(expression: str) -> Optional[float]:
    """
    Evaluate an arithmetic expression.

    Division by zero is not an error: the infinite or NaN result is
    returned and the caller decides whether to accept it.

    Args:
        expression: Text using numbers, + - * /, unary signs and parentheses

    Returns:
        The value, or None if the expression is empty, malformed, contains
        foreign characters or has unconsumed trailing input.

    Example:
        >>> evaluate("(2+3)*4")
        20.0
        >>> evaluate("1+") is None
        True
    """
    parser = FormulaParser(expression)
    try:
        value = parser.parse_expression()
        parser._skip_whitespace()
        if not parser.at_end():
            raise FormulaSyntaxError(
                f"Unexpected {parser._peek()!r}", parser.index
            )
    except FormulaSyntaxError as exc:
        logger.debug(f"Formula {expression!r} rejected: {exc}")
        return None
    except RecursionError:
        logger.debug(f"Formula {expression!r} rejected: nested too deeply")
        return None
    return value
