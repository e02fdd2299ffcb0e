"""Core eqcheck functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .config import EqcheckConfig, find_config, load_config
from .errors import (
    ConfigError,
    EqcheckError,
    ErrorContext,
    InvalidNumericLiteralError,
    MismatchedParenthesisError,
    NestingTooDeepError,
    ParseError,
    ParseErrorKind,
    TrailingInputError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from .expression_lang import evaluate, parse_equation, parse_expression

__all__ = [
    "ir",
    "EqcheckConfig",
    "find_config",
    "load_config",
    "EqcheckError",
    "ConfigError",
    "ErrorContext",
    "ParseError",
    "ParseErrorKind",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "MismatchedParenthesisError",
    "InvalidNumericLiteralError",
    "TrailingInputError",
    "NestingTooDeepError",
    "evaluate",
    "parse_equation",
    "parse_expression",
]
