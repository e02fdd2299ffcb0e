"""
eqcheck Internal Representation (IR).

Frozen pydantic models for parsed arithmetic expressions and equations.
"""

from .expressions import (
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    Associativity,
    BinaryExpr,
    Equation,
    Expr,
    Negate,
    Number,
    Operator,
)

__all__ = [
    "DEFAULT_ABS_TOL",
    "DEFAULT_REL_TOL",
    "Associativity",
    "BinaryExpr",
    "Equation",
    "Expr",
    "Negate",
    "Number",
    "Operator",
]
