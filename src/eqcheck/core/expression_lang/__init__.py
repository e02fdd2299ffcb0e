"""
eqcheck arithmetic expression language.

Tokenizer, parser and evaluator for equations such as "(1 + 1) * 5 = 10".

Usage:
    from eqcheck.core.expression_lang import evaluate, parse_equation

    equation = parse_equation("2^3^2 = 512")
    left, right = evaluate(equation.left), evaluate(equation.right)
    # left == right == 512.0
"""

from eqcheck.core.expression_lang.evaluator import evaluate, values_match
from eqcheck.core.expression_lang.parser import (
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_LIMIT,
    parse_equation,
    parse_expression,
)
from eqcheck.core.expression_lang.tokenizer import tokenize

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "evaluate",
    "parse_equation",
    "parse_expression",
    "tokenize",
    "values_match",
]
