"""
calclex Lexer - incremental tokenizer for arithmetic expressions

The lexer is a small state machine fed one character at a time (and then
None for end of input). Each feed returns at most one token. Numbers are
emitted when the character that ends them arrives; an operator is held for
one feed and surfaces on the call after the operator character.
"""

import logging
from enum import Enum, auto
from typing import Callable, Dict, Iterator, List, Optional

from .tokens import Token, OperatorKind, WHITESPACE, OPERATORS, DIGITS, SPACE, POINT
from .config import LexerConfig, DEFAULT_CONFIG
from .errors import (
    LexingError, NumberLexingError, expected_digit_after_point,
    strict_number_error, unexpected_character, unexpected_eoi
)

logger = logging.getLogger(__name__)


class LexerState(Enum):
    """States of the lexing automaton."""

    INITIAL = auto()                      # very first state, a number must start
    NUMBER_ZERO_INTEGER = auto()          # strict grammar: a leading 0 was read
    NUMBER_INTEGERS = auto()              # digits before an optional point
    NUMBER_POINT = auto()                 # point just read, a digit must follow
    NUMBER_DECIMALS = auto()              # digits after the point
    WHITESPACE_BEFORE_OPERATOR = auto()   # spaces after a number
    OPERATOR = auto()                     # operator read but not yet emitted
    WHITESPACE_AFTER_OPERATOR = auto()    # spaces after an operator
    END = auto()
    ERROR = auto()


TERMINAL_STATES = frozenset({LexerState.END, LexerState.ERROR})


class Lexer:
    """
    Arithmetic expression lexer.

    A Lexer performs exactly one tokenization pass: feed it every character
    of the input followed by None. Once it reaches END or ERROR it ignores
    further input.
    """

    def __init__(self, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer.

        Args:
            config: Grammar profile and numeric type; canonical floats if omitted
        """
        if config is not None and not isinstance(config, LexerConfig):
            raise TypeError(f"Lexer() expects a LexerConfig or None, got {type(config).__name__}")
        self._config = config if config is not None else DEFAULT_CONFIG
        self._buffer: List[str] = []
        self._state = LexerState.INITIAL
        self._held_operator: Optional[OperatorKind] = None

        self._handlers: Dict[LexerState, Callable[[Optional[str]], Optional[Token]]] = {
            LexerState.INITIAL: self._feed_initial,
            LexerState.NUMBER_ZERO_INTEGER: self._feed_number_zero_integer,
            LexerState.NUMBER_INTEGERS: self._feed_number_integers,
            LexerState.NUMBER_POINT: self._feed_number_point,
            LexerState.NUMBER_DECIMALS: self._feed_number_decimals,
            LexerState.WHITESPACE_BEFORE_OPERATOR: self._feed_whitespace_before_operator,
            LexerState.OPERATOR: self._feed_operator,
            LexerState.WHITESPACE_AFTER_OPERATOR: self._feed_whitespace_after_operator,
        }

    @property
    def state(self) -> LexerState:
        return self._state

    @property
    def config(self) -> LexerConfig:
        return self._config

    def is_ended(self) -> bool:
        """True once end of input was processed successfully."""
        return self._state == LexerState.END

    def is_failed(self) -> bool:
        return self._state == LexerState.ERROR

    def feed(self, char: Optional[str]) -> Optional[Token]:
        """
        Feed one character, or None for end of input.

        Returns:
            The token completed by this feed, or None

        Raises:
            LexingError: If the character is not valid in the current state.
                The lexer is in the ERROR state when this propagates.
        """
        if char is not None:
            if not isinstance(char, str):
                raise TypeError(f"feed() expects a str or None, got {type(char).__name__}")
            if len(char) != 1:
                raise ValueError(f"feed() expects a single character, got {char!r}")

        if self._state in TERMINAL_STATES:
            return None

        try:
            token = self._handlers[self._state](char)
        except LexingError as e:
            self._state = LexerState.ERROR
            logger.debug("Lexing failed: %r", e)
            raise

        if self._state == LexerState.END:
            logger.debug("Lexer reached end of input")
        return token

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _drain_buffer_to_number(self) -> Token:
        """Convert all buffered characters to a Number token and clear the buffer."""
        literal = "".join(self._buffer)
        self._buffer.clear()
        return Token.number(self._config.parse_number(literal))

    def _start_number(self, char: str):
        self._buffer.append(char)
        if char == "0" and self._config.is_strict:
            self._state = LexerState.NUMBER_ZERO_INTEGER
        else:
            self._state = LexerState.NUMBER_INTEGERS

    def _release_operator(self) -> Token:
        token = Token.operator(self._held_operator)
        self._held_operator = None
        return token

    def _end_number(self, char: Optional[str]) -> Token:
        """Complete the buffered number on end of input, a space or an operator."""
        if char is None:
            self._state = LexerState.END
        elif char == SPACE:
            self._state = LexerState.WHITESPACE_BEFORE_OPERATOR
        elif char in OPERATORS:
            self._held_operator = OPERATORS[char]
            self._state = LexerState.OPERATOR
        else:
            raise unexpected_character(char)
        return self._drain_buffer_to_number()

    def _reject_number_start(self, char: str):
        """Raise the error for a character that cannot start a number."""
        if char == POINT and self._config.is_strict:
            raise strict_number_error(NumberLexingError.MISSING_INTEGER_BEFORE_POINT)
        raise unexpected_character(char)

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _feed_initial(self, char: Optional[str]) -> Optional[Token]:
        if char is None:
            raise unexpected_eoi()
        if char in DIGITS:
            self._start_number(char)
            return None
        self._reject_number_start(char)

    def _feed_number_zero_integer(self, char: Optional[str]) -> Optional[Token]:
        if char is not None and char in DIGITS:
            raise strict_number_error(NumberLexingError.EXPECTED_POINT_AFTER_ZERO)
        if char == POINT:
            self._buffer.append(char)
            self._state = LexerState.NUMBER_POINT
            return None
        return self._end_number(char)

    def _feed_number_integers(self, char: Optional[str]) -> Optional[Token]:
        if char is not None and char in DIGITS:
            self._buffer.append(char)
            return None
        if char == POINT:
            if self._config.is_strict:
                raise strict_number_error(NumberLexingError.NON_ZERO_INTEGER_BEFORE_POINT)
            self._buffer.append(char)
            self._state = LexerState.NUMBER_POINT
            return None
        return self._end_number(char)

    def _feed_number_point(self, char: Optional[str]) -> Optional[Token]:
        if char is None or char not in DIGITS:
            raise expected_digit_after_point()
        self._buffer.append(char)
        self._state = LexerState.NUMBER_DECIMALS
        return None

    def _feed_number_decimals(self, char: Optional[str]) -> Optional[Token]:
        if char is not None and char in DIGITS:
            self._buffer.append(char)
            return None
        if char == POINT:
            raise unexpected_character(char)
        return self._end_number(char)

    def _feed_whitespace_before_operator(self, char: Optional[str]) -> Optional[Token]:
        if char is None:
            self._state = LexerState.END
        elif char in OPERATORS:
            self._held_operator = OPERATORS[char]
            self._state = LexerState.OPERATOR
        elif char != SPACE:
            # Digits land here too: a second number needs an operator first
            raise unexpected_character(char)
        return WHITESPACE

    def _feed_operator(self, char: Optional[str]) -> Optional[Token]:
        if char is None:
            raise unexpected_eoi()
        if char == SPACE:
            self._state = LexerState.WHITESPACE_AFTER_OPERATOR
            return self._release_operator()
        if char in DIGITS:
            token = self._release_operator()
            self._start_number(char)
            return token
        self._reject_number_start(char)

    def _feed_whitespace_after_operator(self, char: Optional[str]) -> Optional[Token]:
        if char is None:
            raise unexpected_eoi()
        if char == SPACE:
            return WHITESPACE
        if char in DIGITS:
            self._start_number(char)
            return WHITESPACE
        self._reject_number_start(char)


def new_lexer(config: Optional[LexerConfig] = None) -> Lexer:
    """Create a fresh lexer for one tokenization pass."""
    return Lexer(config)


def _feed_at(lexer: Lexer, char: Optional[str], position: int) -> Optional[Token]:
    try:
        return lexer.feed(char)
    except LexingError as e:
        e.position = position
        raise


def iter_tokens(text: str, config: Optional[LexerConfig] = None) -> Iterator[Token]:
    """
    Tokenize lazily, yielding each token as soon as the lexer emits it.

    The first LexingError is raised after the tokens preceding it have been
    yielded; its `position` is the index of the offending character, or
    len(text) when the input ended too early.
    """
    lexer = Lexer(config)

    for position, char in enumerate(text):
        token = _feed_at(lexer, char, position)
        if token is not None:
            yield token

    token = _feed_at(lexer, None, len(text))
    if token is not None:
        yield token

    assert lexer.is_ended(), f"lexer finished in state {lexer.state.name}"


def tokenize(text: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Tokenize an entire expression.

    Returns:
        All tokens in emission order

    Raises:
        LexingError: The first error found; no partial token list is returned
    """
    return list(iter_tokens(text, config))
