"""
Recursive descent parser for eqcheck arithmetic expressions.

Grammar (precedence low to high):
    equation    → expr "=" expr EOF
    expr        → term (("+"|"-") term)*
    term        → power (("*"|"/") power)*
    power       → unary ("^" unary)*          right-associative
    unary       → "-" unary | primary
    primary     → NUMBER | "(" expr ")"

Whitespace between tokens is dropped by the tokenizer. A leading '-' on a
literal is always a Negate node, never folded into the Number.

Nesting is bounded by max_depth: the parentheses and unary minus signs open
at any point of the input may add up to at most max_depth. Operator chains
such as 1 + 1 + ... + 1 do not nest and are unbounded. Each parenthesis
level recurses through the grammar rules, so max_depth itself may not
exceed MAX_DEPTH_LIMIT.
"""

from __future__ import annotations

import logging

from eqcheck.core.errors import (
    InvalidNumericLiteralError,
    MismatchedParenthesisError,
    NestingTooDeepError,
    ParseError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from eqcheck.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from eqcheck.core.ir.expressions import (
    BinaryExpr,
    Equation,
    Expr,
    Negate,
    Number,
    Operator,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100
MAX_DEPTH_LIMIT = 128

_ADDITIVE: dict[TokenKind, Operator] = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUB,
}
_MULTIPLICATIVE: dict[TokenKind, Operator] = {
    TokenKind.STAR: Operator.MUL,
    TokenKind.SLASH: Operator.DIV,
}


class _Parser:
    """Recursive descent parser for expressions and equations."""

    def __init__(self, source: str, tokens: list[Token], max_depth: int) -> None:
        self.source = source
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self.depth = 0
        self.paren_depth = 0
        self.previous: Token | None = None

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        self.previous = tok
        return tok

    # -- Grammar rules --

    def parse_equation(self) -> Equation:
        """expr '=' expr EOF"""
        left = self.parse_expr()

        tok = self.current
        if tok.kind != TokenKind.EQUALS:
            if tok.kind == TokenKind.RPAREN:
                raise self._error(
                    MismatchedParenthesisError,
                    "Unmatched closing parenthesis",
                    tok,
                    "'=' or operator",
                )
            raise self._unexpected(tok, "'=' or operator")
        self.advance()

        right = self.parse_expr()

        tok = self.current
        if tok.kind == TokenKind.RPAREN:
            raise self._error(
                MismatchedParenthesisError,
                "Unmatched closing parenthesis",
                tok,
                "end of input",
            )
        if tok.kind != TokenKind.EOF:
            raise self._error(
                TrailingInputError,
                f"Unexpected trailing input: {self.source[tok.pos:]!r}",
                tok,
                "end of input",
            )

        return Equation(left=left, right=right)

    def parse_expr(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in _ADDITIVE:
            op = _ADDITIVE[self.advance().kind]
            left = BinaryExpr(op=op, left=left, right=self.parse_term())
        return left

    def parse_term(self) -> Expr:
        """power (('*' | '/') power)*"""
        left = self.parse_power()
        while self.current.kind in _MULTIPLICATIVE:
            op = _MULTIPLICATIVE[self.advance().kind]
            left = BinaryExpr(op=op, left=left, right=self.parse_power())
        return left

    def parse_power(self) -> Expr:
        """unary ('^' unary)*, grouped from the right"""
        operands = [self.parse_unary()]
        while self.current.kind == TokenKind.CARET:
            self.advance()
            operands.append(self.parse_unary())

        result = operands.pop()
        while operands:
            result = BinaryExpr(op=Operator.POW, left=operands.pop(), right=result)
        return result

    def parse_unary(self) -> Expr:
        """'-' unary | primary"""
        count = 0
        while self.current.kind == TokenKind.MINUS:
            self._enter(self.advance())
            count += 1

        expr = self.parse_primary()
        self.depth -= count
        for _ in range(count):
            expr = Negate(operand=expr)
        return expr

    def parse_primary(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Number(value=float(tok.value))

        if tok.kind == TokenKind.LPAREN:
            self._enter(self.advance())
            self.paren_depth += 1
            inner = self.parse_expr()
            if self.current.kind != TokenKind.RPAREN:
                raise self._unclosed(tok)
            self.advance()
            self.paren_depth -= 1
            self.depth -= 1
            return inner

        expected = self._operand_expected()
        if tok.kind == TokenKind.RPAREN and self.paren_depth == 0:
            raise self._error(
                MismatchedParenthesisError,
                "Unmatched closing parenthesis",
                tok,
                expected,
            )
        raise self._unexpected(tok, expected)

    # -- Helpers --

    def _enter(self, tok: Token) -> None:
        """Open one nesting level at tok, a '(' or a unary '-'."""
        self.depth += 1
        if self.depth > self.max_depth:
            raise self._error(
                NestingTooDeepError,
                f"Expression nests deeper than {self.max_depth} levels",
                tok,
                f"at most {self.max_depth} levels of nesting",
            )

    def _operand_expected(self) -> str:
        if self.previous is None:
            return "operand"
        return f"operand after {self.previous.value!r}"

    def _unclosed(self, open_tok: Token) -> ParseError:
        tok = self.current
        expected = f"closing parenthesis for '(' at offset {open_tok.pos}"
        if tok.kind in (TokenKind.EOF, TokenKind.EQUALS):
            return self._error(
                MismatchedParenthesisError,
                f"Expected {expected}, found {tok.describe()}",
                tok,
                expected,
            )
        return self._unexpected(tok, expected)

    def _unexpected(self, tok: Token, expected: str) -> ParseError:
        """Build the error for a token that does not fit the grammar here."""
        if tok.kind == TokenKind.EOF:
            return self._error(
                UnexpectedEndOfInputError,
                f"Unexpected end of input, expected {expected}",
                tok,
                expected,
            )
        if tok.kind == TokenKind.INVALID_NUMBER:
            return self._error(
                InvalidNumericLiteralError,
                f"Invalid numeric literal: {tok.value!r}",
                tok,
                "number such as 12 or 1.5",
            )
        return self._error(
            UnexpectedCharacterError,
            f"Expected {expected}, found {tok.describe()}",
            tok,
            expected,
        )

    def _error(
        self, cls: type[ParseError], message: str, tok: Token, expected: str
    ) -> ParseError:
        return cls(message, offset=tok.pos, expected=expected, source=self.source)


def check_max_depth(max_depth: int) -> None:
    """Raise ValueError unless 1 <= max_depth <= MAX_DEPTH_LIMIT."""
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")


def _new_parser(source: str, max_depth: int) -> _Parser:
    check_max_depth(max_depth)
    return _Parser(source, tokenize(source), max_depth)


def parse_expression(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> tuple[Expr, str]:
    """Parse the longest expression at the start of a string.

    Args:
        source: Text beginning with an expression (e.g., "1 + 2 = 3")
        max_depth: Bound on nested parentheses and unary minus signs

    Returns:
        The parsed expression and the unconsumed remainder, starting at the
        first token the grammar could not take ("= 3" above).

    Raises:
        ParseError: If no expression starts the string, or an operand
            position inside it is empty or malformed.
        ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT.
    """
    parser = _new_parser(source, max_depth)
    expr = parser.parse_expr()
    return expr, source[parser.current.pos :]


def parse_equation(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Equation:
    """Parse an equation string into an Equation.

    Args:
        source: Equation string (e.g., "1.5 + 2.5 = 4.0")
        max_depth: Bound on nested parentheses and unary minus signs

    Returns:
        Parsed equation. The whole input is consumed; surrounding
        whitespace is ignored.

    Raises:
        ParseError: If the equation is invalid.
        ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT.
    """
    parser = _new_parser(source, max_depth)
    equation = parser.parse_equation()
    logger.debug(f"Parsed equation {source!r} as {equation}")
    return equation
