"""
Tokenizer for eqcheck arithmetic expressions.

Converts an equation string into a sequence of typed tokens. Tokenizing
never fails: characters that cannot start a token become UNKNOWN tokens and
malformed numbers become INVALID_NUMBER tokens, so the parser decides
whether they matter (a prefix parse may stop before reaching them).
"""

from __future__ import annotations

import re
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()
    EQUALS = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Lexical problems, reported by the parser if reached
    INVALID_NUMBER = auto()
    UNKNOWN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    def describe(self) -> str:
        """Short description for error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return repr(self.value)


WHITESPACE = " \t\r\n"

# Any run of ASCII digits and dots; validated against _NUMBER_RE afterwards
_NUMBER_LIKE_RE = re.compile(r"[0-9.]+")
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "=": TokenKind.EQUALS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an equation string into a list of tokens ending with EOF."""
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Skip whitespace
        if c in WHITESPACE:
            i += 1
            continue

        # Numbers
        if c in "0123456789.":
            m = _NUMBER_LIKE_RE.match(source, i)
            assert m is not None
            text = m.group(0)
            kind = TokenKind.NUMBER if _NUMBER_RE.fullmatch(text) else TokenKind.INVALID_NUMBER
            tokens.append(Token(kind, text, i))
            i = m.end()
            continue

        kind = _SINGLE_CHAR.get(c, TokenKind.UNKNOWN)
        tokens.append(Token(kind, c, i))
        i += 1

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens
