"""
Construction-time configuration for the lexer.

The grammar profile and the numeric payload type are the only knobs; both
leave the token-emission policy untouched.
"""

from decimal import Decimal
from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable, Dict


class Grammar(Enum):
    """
    Number grammar accepted by the lexer.

    STRICT only tightens where a number may start and what may precede its
    point. A second point inside the decimals ("0.5.1") is still reported as
    UNEXPECTED_CHARACTER('.'), not NON_ZERO_INTEGER_BEFORE_POINT.
    """

    CANONICAL = "canonical"   # any digit run, optionally with one point
    STRICT = "strict"         # non-zero-led integers, or 0.<digits>


class NumericType(Enum):
    """Payload type of Number tokens."""

    FLOAT = "float"
    DECIMAL = "decimal"


NUMERIC_PARSERS: Dict[NumericType, Callable[[str], Any]] = {
    NumericType.FLOAT: float,
    NumericType.DECIMAL: Decimal,
}


@dataclass(frozen=True)
class LexerConfig:
    """Configuration for a Lexer; the defaults give the canonical behaviour."""
    grammar: Grammar = Grammar.CANONICAL
    numeric: NumericType = NumericType.FLOAT

    def __post_init__(self):
        # Accept the enum values as plain strings too ("strict", "decimal")
        try:
            object.__setattr__(self, "grammar", Grammar(self.grammar))
            object.__setattr__(self, "numeric", NumericType(self.numeric))
        except ValueError as e:
            raise ValueError(f"Invalid lexer configuration: {e}") from e

    @property
    def is_strict(self) -> bool:
        return self.grammar == Grammar.STRICT

    def parse_number(self, literal: str) -> Any:
        """Convert a buffered number literal to the configured payload type."""
        return NUMERIC_PARSERS[self.numeric](literal)


DEFAULT_CONFIG = LexerConfig()
