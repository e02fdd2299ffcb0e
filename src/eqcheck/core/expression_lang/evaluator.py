"""
Expression evaluator for eqcheck arithmetic expressions.

Evaluates expression AST nodes to floats. Pure evaluation: no I/O, no side
effects, no exceptions for well-formed trees. Division by zero and powers
outside the real domain follow IEEE-754 and produce inf or nan, where plain
Python arithmetic would raise or return a complex number.
"""

from __future__ import annotations

import math

from eqcheck.core.ir.expressions import (
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    BinaryExpr,
    Expr,
    Negate,
    Number,
    Operator,
)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree to a float.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value; may be inf or nan.
    """
    return _interpret(expr)


def values_match(
    left: float,
    right: float,
    *,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> bool:
    """Tolerance equality: true when the values differ by at most the larger
    of abs_tol and rel_tol scaled by the larger magnitude. nan never matches.
    """
    return math.isclose(left, right, rel_tol=rel_tol, abs_tol=abs_tol)


def _interpret(expr: Expr) -> float:
    """Reduce a tree in post-order with an explicit stack.

    Long operator chains build trees far taller than the interpreter's
    recursion limit, so the walk never recurses.
    """
    values: list[float] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]
    while pending:
        node, reduced = pending.pop()

        if isinstance(node, Number):
            values.append(node.value)
        elif isinstance(node, Negate):
            if reduced:
                values.append(-values.pop())
            else:
                pending.append((node, True))
                pending.append((node.operand, False))
        elif isinstance(node, BinaryExpr):
            if reduced:
                right = values.pop()
                left = values.pop()
                values.append(_interpret_binary(node.op, left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _interpret_binary(op: Operator, left: float, right: float) -> float:
    """Apply a binary operator to evaluated operands."""
    if op == Operator.ADD:
        return left + right
    if op == Operator.SUB:
        return left - right
    if op == Operator.MUL:
        return left * right
    if op == Operator.DIV:
        return _divide(left, right)
    if op == Operator.POW:
        return _power(left, right)

    raise TypeError(f"Unknown binary op: {op}")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _power(base: float, exponent: float) -> float:
    """Real-valued power with C pow() results where math.pow raises."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power is a pole; anything else left is a
        # negative base with a non-integer exponent
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1
