"""
calclex Lexer Package

Incremental lexer for simple arithmetic expressions: numbers, the binary
operators + - * / and spaces.

Key Features:
- One character per feed, at most one token per feed
- Whitespace preserved as one token per space
- Stable error classification with codes and diagnostics
- Optional strict number grammar and exact-decimal numbers
"""

from .tokens import Token, TokenType, OperatorKind, WHITESPACE, strip_whitespace
from .config import LexerConfig, Grammar, NumericType
from .errors import (
    LexingError, IncorrectNumber, IncorrectExpression,
    NumberLexingError, ExpressionLexingError, Diagnostic
)
from .lexer import Lexer, LexerState, new_lexer, iter_tokens, tokenize

__all__ = [
    "Lexer",
    "LexerState",
    "new_lexer",
    "iter_tokens",
    "tokenize",
    "Token",
    "TokenType",
    "OperatorKind",
    "WHITESPACE",
    "strip_whitespace",
    "LexerConfig",
    "Grammar",
    "NumericType",
    "LexingError",
    "IncorrectNumber",
    "IncorrectExpression",
    "NumberLexingError",
    "ExpressionLexingError",
    "Diagnostic",
]
