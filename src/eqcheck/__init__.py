"""
eqcheck - parse arithmetic equations and check whether they hold.

    >>> from eqcheck import parse_equation
    >>> parse_equation("(1 + 1) * 5 = 10").is_correct()
    True
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import ConfigError, EqcheckError, ParseError, ParseErrorKind
from .core.expression_lang import evaluate, parse_equation, parse_expression
from .core.ir import Equation

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Equation",
    "evaluate",
    "parse_equation",
    "parse_expression",
    "EqcheckError",
    "ParseError",
    "ParseErrorKind",
    "ConfigError",
]
