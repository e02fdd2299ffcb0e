"""
Error types for eqcheck parsing and configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Optional


class EqcheckError(Exception):
    """Base exception for all eqcheck errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseErrorKind(StrEnum):
    """The ways an equation string can fail to parse."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    MISMATCHED_PARENTHESIS = "mismatched_parenthesis"
    INVALID_NUMERIC_LITERAL = "invalid_numeric_literal"
    TRAILING_INPUT = "trailing_input"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(EqcheckError):
    """
    Raised when an expression or equation cannot be parsed.

    Attributes:
        offset: Character offset into the source where parsing failed
        expected: Human-readable description of what the parser wanted there
        source: The full input that was being parsed
    """

    kind: ClassVar[ParseErrorKind]

    def __init__(self, message: str, *, offset: int, expected: str, source: str = ""):
        self.offset = offset
        self.expected = expected
        self.source = source
        context = ErrorContext(source=source, offset=offset) if source else None
        super().__init__(message, context)


class UnexpectedCharacterError(ParseError):
    """A character or token that cannot appear at this position."""

    kind = ParseErrorKind.UNEXPECTED_CHARACTER


class UnexpectedEndOfInputError(ParseError):
    """The input ended while an operand or '=' was still required."""

    kind = ParseErrorKind.UNEXPECTED_END_OF_INPUT


class MismatchedParenthesisError(ParseError):
    """An opening parenthesis was never closed, or a closing one never opened."""

    kind = ParseErrorKind.MISMATCHED_PARENTHESIS


class InvalidNumericLiteralError(ParseError):
    """
    A run of digits and dots that is not a number.

    Examples: ".", "1.", ".5", "1.2.3"
    """

    kind = ParseErrorKind.INVALID_NUMERIC_LITERAL


class TrailingInputError(ParseError):
    """Characters remain after a complete equation."""

    kind = ParseErrorKind.TRAILING_INPUT


class NestingTooDeepError(ParseError):
    """Nested parentheses and unary minus signs exceed the configured bound."""

    kind = ParseErrorKind.NESTING_TOO_DEEP


class ConfigError(EqcheckError):
    """
    Raised when an eqcheck.toml file is malformed.

    Examples:
    - Invalid TOML syntax
    - Tolerances that are negative or not numbers
    - A non-positive max_depth
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside an in-memory source string.

    Attributes:
        source: The text being parsed
        offset: 0-indexed character offset of the error
    """

    source: str
    offset: int

    @property
    def line(self) -> int:
        """1-indexed line containing the offset."""
        return self.source.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        """1-indexed column of the offset within its line."""
        line_start = self.source.rfind("\n", 0, self.offset) + 1
        return self.offset - line_start + 1

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Location like "1:7" followed by the offending line and a caret
        """
        return f"{self.line}:{self.column}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the offending line with a line number and error marker."""
        line_start = self.source.rfind("\n", 0, self.offset) + 1
        line_end = self.source.find("\n", self.offset)
        if line_end == -1:
            line_end = len(self.source)

        prefix = f"{self.line:4d} | "
        text = self.source[line_start:line_end]
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{text}\n{marker}"
