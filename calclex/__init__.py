"""
calclex - arithmetic expression lexer

Front-end stage for a calculator or expression evaluator: turns a string
such as "16.24 + 0.5 * 2" into Number, Operator and Whitespace tokens, or
reports a classified lexical error. No parsing or evaluation happens here.

Architecture:
    calclex/
    ├── lexer/           # Tokens, errors, configuration and the state machine
    └── cli.py           # calclex console script

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Lexer,
    LexerState,
    new_lexer,
    iter_tokens,
    tokenize,
    Token,
    TokenType,
    OperatorKind,
    WHITESPACE,
    strip_whitespace,
    LexerConfig,
    Grammar,
    NumericType,
    LexingError,
    IncorrectNumber,
    IncorrectExpression,
    NumberLexingError,
    ExpressionLexingError,
)

__all__ = [
    # Core
    "Lexer",
    "LexerState",
    "new_lexer",
    "iter_tokens",
    "tokenize",

    # Tokens
    "Token",
    "TokenType",
    "OperatorKind",
    "WHITESPACE",
    "strip_whitespace",

    # Configuration
    "LexerConfig",
    "Grammar",
    "NumericType",

    # Errors
    "LexingError",
    "IncorrectNumber",
    "IncorrectExpression",
    "NumberLexingError",
    "ExpressionLexingError",

    # Version info
    "__version__",
    "__license__",
]
