"""
Expression types for eqcheck IR.

This module defines the arithmetic expression AST produced by the parser
and consumed by the evaluator.

Supports:
- Numeric literals: 10, 2.5
- Unary minus: -5, --5, -(1 + 2)
- Binary operators: +, -, *, / (left-associative) and ^ (right-associative)
- Equations: two expressions joined by =
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-9

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Associativity(StrEnum):
    """Which side an operator groups towards in a chain of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


class Operator(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def precedence(self) -> int:
        """Binding strength; higher binds tighter."""
        return _PRECEDENCE[self]

    @property
    def associativity(self) -> Associativity:
        if self == Operator.POW:
            return Associativity.RIGHT
        return Associativity.LEFT


_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.POW: 3,
}


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal, stored as an IEEE-754 double."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _format_number(self.value)


class Negate(BaseModel):
    """Unary minus: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Negate | BinaryExpr

# Rebuild models for recursive forward references
Negate.model_rebuild()
BinaryExpr.model_rebuild()


class Equation(BaseModel):
    """
    Two expressions joined by '='.

    Examples:
        - Equation.parse("1 + 1 = 2").is_correct() → True
        - Equation.parse("2^3^2 = 64").is_correct() → False
    """

    left: Expr = Field(description="Expression left of '='")
    right: Expr = Field(description="Expression right of '='")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, source: str, *, max_depth: int | None = None) -> Equation:
        """Parse an equation string; see parse_equation."""
        from eqcheck.core.expression_lang.parser import parse_equation

        if max_depth is None:
            return parse_equation(source)
        return parse_equation(source, max_depth=max_depth)

    def evaluate(self) -> tuple[float, float]:
        """Values of the left and right sides."""
        from eqcheck.core.expression_lang.evaluator import evaluate

        return evaluate(self.left), evaluate(self.right)

    def is_correct(
        self,
        *,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL,
    ) -> bool:
        """True when both sides evaluate to the same value within tolerance."""
        from eqcheck.core.expression_lang.evaluator import values_match

        left, right = self.evaluate()
        return values_match(left, right, rel_tol=rel_tol, abs_tol=abs_tol)

    def __str__(self) -> str:
        return f"{_render(self.left)} = {_render(self.right)}"


def _format_number(value: float) -> str:
    """Render in positional notation, integral values without a trailing '.0'."""
    if not math.isfinite(value):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _render(expr: Expr) -> str:
    """Render a tree in post-order with an explicit stack."""
    parts: list[str] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]
    while pending:
        node, reduced = pending.pop()

        if isinstance(node, Number):
            parts.append(_format_number(node.value))
        elif not reduced:
            pending.append((node, True))
            if isinstance(node, BinaryExpr):
                pending.append((node.right, False))
                pending.append((node.left, False))
            else:
                pending.append((node.operand, False))
        elif isinstance(node, BinaryExpr):
            right = _wrap(parts.pop(), node.right, node.op, right_side=True)
            left = _wrap(parts.pop(), node.left, node.op, right_side=False)
            parts.append(f"{left} {node.op.value} {right}")
        else:
            operand = parts.pop()
            if isinstance(node.operand, BinaryExpr):
                operand = f"({operand})"
            parts.append(f"-{operand}")

    return parts.pop()


def _wrap(text: str, child: Expr, parent: Operator, *, right_side: bool) -> str:
    """Parenthesize a rendered child of a binary node only when needed."""
    if not isinstance(child, BinaryExpr):
        return text
    if child.op.precedence < parent.precedence:
        return f"({text})"
    if child.op.precedence == parent.precedence:
        # Same precedence on the non-grouping side must keep its parentheses
        groups_right = parent.associativity == Associativity.RIGHT
        if right_side != groups_right:
            return f"({text})"
    return text
