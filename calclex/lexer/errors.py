"""
Error handling for the calclex lexer.

Lexing errors fall into two families: malformed numbers (IncorrectNumber)
and characters or end of input arriving where the expression grammar does
not allow them (IncorrectExpression). Every error carries a stable kind and
code so callers can map it to their own diagnostics.
"""

from enum import Enum, auto
from typing import Optional
from dataclasses import dataclass


class NumberLexingError(Enum):
    """Errors inside a number literal."""

    EXPECTED_DIGIT_AFTER_POINT = auto()
    # Strict grammar only
    EXPECTED_POINT_AFTER_ZERO = auto()
    NON_ZERO_INTEGER_BEFORE_POINT = auto()
    MISSING_INTEGER_BEFORE_POINT = auto()


class ExpressionLexingError(Enum):
    """Errors in the sequence of numbers, operators and spaces."""

    UNEXPECTED_CHARACTER = auto()
    UNEXPECTED_EOI = auto()


# Stable error codes for categorization
ERROR_CODES = {
    NumberLexingError.EXPECTED_DIGIT_AFTER_POINT: "L101",
    NumberLexingError.EXPECTED_POINT_AFTER_ZERO: "L102",
    NumberLexingError.NON_ZERO_INTEGER_BEFORE_POINT: "L103",
    NumberLexingError.MISSING_INTEGER_BEFORE_POINT: "L104",
    ExpressionLexingError.UNEXPECTED_CHARACTER: "L201",
    ExpressionLexingError.UNEXPECTED_EOI: "L202",
}

_HELP_TEXT = {
    NumberLexingError.EXPECTED_DIGIT_AFTER_POINT: "A decimal point must be followed by at least one digit.",
    NumberLexingError.EXPECTED_POINT_AFTER_ZERO: "A number starting with 0 must continue with a decimal point, as in 0.5.",
    NumberLexingError.NON_ZERO_INTEGER_BEFORE_POINT: "Only 0 may appear before the decimal point, as in 0.25.",
    NumberLexingError.MISSING_INTEGER_BEFORE_POINT: "Write a 0 before the decimal point, as in 0.5.",
    ExpressionLexingError.UNEXPECTED_CHARACTER: "Expressions may only contain digits, '.', spaces and + - * /.",
    ExpressionLexingError.UNEXPECTED_EOI: "The expression must end with a number.",
}


@dataclass
class Diagnostic:
    """User-facing report for a lexing error."""
    message: str
    code: str
    position: Optional[int] = None
    help_text: Optional[str] = None
    severity: str = "error"

    def __str__(self) -> str:
        result = f"{self.severity.upper()}[{self.code}]: {self.message}\n"
        if self.position is not None:
            result += f"  --> column {self.position + 1}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result

    def to_dict(self) -> dict:
        return {
            "severity": self.severity,
            "code": self.code,
            "message": self.message,
            "position": self.position,
            "help": self.help_text,
        }


class LexingError(Exception):
    """
    Exception raised when the lexer rejects its input.

    Two errors are equal when they have the same family, kind and offending
    character; `position` is diagnostic metadata filled in by the tokenize
    driver and does not take part in comparisons.
    """

    def __init__(self, kind: Enum, character: Optional[str] = None, position: Optional[int] = None):
        self.kind = kind
        self.character = character
        self.position = position
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return ERROR_CODES[self.kind]

    @property
    def message(self) -> str:
        if self.kind == ExpressionLexingError.UNEXPECTED_CHARACTER:
            return f"Unexpected character: {self.character!r}"
        if self.kind == ExpressionLexingError.UNEXPECTED_EOI:
            return "Unexpected end of input"
        return self.kind.name.replace("_", " ").capitalize()

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            message=self.message,
            code=self.code,
            position=self.position,
            help_text=_HELP_TEXT.get(self.kind),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, LexingError):
            return NotImplemented
        return (type(self) is type(other)
                and self.kind == other.kind
                and self.character == other.character)

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.character))

    def _constructor_args(self) -> tuple:
        return (self.kind, self.character, self.position)

    def __reduce__(self):
        # copy and pickle rebuild from constructor arguments, not from self.args
        return type(self), self._constructor_args()

    def __repr__(self) -> str:
        if self.character is not None:
            return f"{type(self).__name__}({self.kind.name}, {self.character!r})"
        return f"{type(self).__name__}({self.kind.name})"

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.message} at position {self.position}"
        return self.message


class IncorrectNumber(LexingError):
    """A number literal is malformed."""

    def __init__(self, kind: NumberLexingError, position: Optional[int] = None):
        super().__init__(kind, None, position)

    def _constructor_args(self) -> tuple:
        return (self.kind, self.position)


class IncorrectExpression(LexingError):
    """A character or end of input is not valid where it appears."""

    def __init__(self, kind: ExpressionLexingError, character: Optional[str] = None,
                 position: Optional[int] = None):
        super().__init__(kind, character, position)


# Helper functions for creating common errors
def expected_digit_after_point() -> IncorrectNumber:
    return IncorrectNumber(NumberLexingError.EXPECTED_DIGIT_AFTER_POINT)


def strict_number_error(kind: NumberLexingError) -> IncorrectNumber:
    """Create one of the errors only the strict grammar reports."""
    if kind == NumberLexingError.EXPECTED_DIGIT_AFTER_POINT:
        raise ValueError(f"{kind.name} is not specific to the strict grammar")
    return IncorrectNumber(kind)


def unexpected_character(char: str) -> IncorrectExpression:
    return IncorrectExpression(ExpressionLexingError.UNEXPECTED_CHARACTER, char)


def unexpected_eoi() -> IncorrectExpression:
    return IncorrectExpression(ExpressionLexingError.UNEXPECTED_EOI)
