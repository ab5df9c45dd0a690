"""
Token definitions for the calclex lexer.

Three kinds of token come out of the lexer:
- Numbers (a float, or a Decimal when the lexer is configured for exact decimals)
- Operators (+, -, *, /)
- Whitespace markers, one per consumed space

Tokens carry no source location; their order in the output is the only
structural information kept.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List


class OperatorKind(Enum):
    """The four binary arithmetic operators."""

    ADD = auto()          # +
    SUBTRACT = auto()     # -
    MULTIPLY = auto()     # *
    DIVIDE = auto()       # /

    @property
    def symbol(self) -> str:
        """Source character for this operator."""
        return OPERATOR_SYMBOLS[self]


class TokenType(Enum):
    """Enumeration of all token types."""

    NUMBER = auto()
    OPERATOR = auto()
    WHITESPACE = auto()


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of an arithmetic expression.

    `value` depends on the type: the parsed number for NUMBER, an
    OperatorKind for OPERATOR and None for WHITESPACE.
    """
    type: TokenType
    value: Any = None

    @classmethod
    def number(cls, value: Any) -> "Token":
        return cls(TokenType.NUMBER, value)

    @classmethod
    def operator(cls, kind: OperatorKind) -> "Token":
        return cls(TokenType.OPERATOR, kind)

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"Number({self.value})"
        if self.type == TokenType.OPERATOR:
            return f"Operator({self.value.name})"
        return "Whitespace"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_whitespace(self) -> bool:
        return self.type == TokenType.WHITESPACE


# Emitted once per consumed space; spaces are never collapsed
WHITESPACE = Token(TokenType.WHITESPACE)


# Lookup tables used by the lexer for operator recognition
OPERATORS: Dict[str, OperatorKind] = {
    "+": OperatorKind.ADD,
    "-": OperatorKind.SUBTRACT,
    "*": OperatorKind.MULTIPLY,
    "/": OperatorKind.DIVIDE,
}

OPERATOR_SYMBOLS: Dict[OperatorKind, str] = {kind: symbol for symbol, kind in OPERATORS.items()}

DIGITS = frozenset("0123456789")
SPACE = " "
POINT = "."


def strip_whitespace(tokens: Iterable[Token]) -> List[Token]:
    """Return only the logical tokens (numbers and operators)."""
    return [token for token in tokens if not token.is_whitespace]
