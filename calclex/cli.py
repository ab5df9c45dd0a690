#!/usr/bin/env python3
"""
calclex command line tool

Usage:
    calclex [options] [EXPRESSION ...]

Each expression is tokenized and its tokens printed one per line. With no
expression arguments, every line of standard input is tokenized instead.

Options:
    --strict         Use the strict number grammar (0.5 allowed, 00.5 and .5 rejected)
    --decimal        Store numbers as exact decimals instead of floats
    --no-whitespace  Leave Whitespace tokens out of the output
    --json           Output results in JSON format
    -v, --verbose    Enable debug logging
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from calclex import __version__
from calclex.lexer import (
    LexerConfig, Grammar, NumericType, LexingError, Token, tokenize, strip_whitespace
)

logger = logging.getLogger(__name__)


def token_to_json(token: Token) -> Dict[str, Any]:
    if token.is_operator:
        value = token.value.symbol
    elif isinstance(token.value, Decimal):
        value = str(token.value)
    else:
        value = token.value
    return {"type": token.type.name, "value": value}


def run_expression(expression: str, config: LexerConfig, args: argparse.Namespace) -> bool:
    """Tokenize one expression and print the outcome. Returns True on success."""
    try:
        tokens = tokenize(expression, config)
    except LexingError as e:
        logger.debug("Rejected %r: %r", expression, e)
        if args.json:
            print(json.dumps({"input": expression, "error": e.diagnostic.to_dict()}))
        else:
            print(f"{expression!r}", file=sys.stderr)
            print(e.diagnostic, end="", file=sys.stderr)
        return False

    if args.no_whitespace:
        tokens = strip_whitespace(tokens)

    if args.json:
        print(json.dumps({"input": expression, "tokens": [token_to_json(t) for t in tokens]}))
    else:
        for token in tokens:
            print(token)
    return True


def _read_expressions(args: argparse.Namespace) -> Iterable[str]:
    if args.expressions:
        return args.expressions
    return (line.rstrip("\r\n") for line in sys.stdin)


def setup_logging(verbose: bool) -> None:
    """Attach one stderr handler to the package logger."""
    package_logger = logging.getLogger("calclex")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        package_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calclex",
        description="Tokenize simple arithmetic expressions",
    )
    parser.add_argument("expressions", nargs="*", metavar="EXPRESSION",
                        help="Expressions to tokenize (default: read lines from stdin)")
    parser.add_argument("--strict", action="store_true", help="Use the strict number grammar")
    parser.add_argument("--decimal", action="store_true", help="Store numbers as exact decimals")
    parser.add_argument("--no-whitespace", action="store_true", help="Omit Whitespace tokens")
    parser.add_argument("--json", action="store_true", help="Output results in JSON format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    config = LexerConfig(
        grammar=Grammar.STRICT if args.strict else Grammar.CANONICAL,
        numeric=NumericType.DECIMAL if args.decimal else NumericType.FLOAT,
    )

    success = True
    for expression in _read_expressions(args):
        success = run_expression(expression, config, args) and success
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
