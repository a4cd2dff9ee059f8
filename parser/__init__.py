# parser/__init__.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Textual front-end for authoring propositional formulas

"""Propositional formula parsing.

This front-end turns formula text such as ``NOT (a OR b) AND c`` into formula
trees. It sits outside the rewrite and solver core and only talks to it
through the construction API, so it can be replaced by any other builder.

Identifiers receive variable ids in order of first appearance, starting at 0
unless an existing symbol table is supplied.

Core Functions:
    parse: Converts a formula string into a formula tree
    parse_with_symbols: Also returns the identifier table used

Example:
    >>> from parser import parse_with_symbols
    >>> formula, symbols = parse_with_symbols("a AND NOT b")
    >>> symbols
    {'a': 0, 'b': 1}
"""

from typing import Dict, Optional, Tuple

from formula import Expr
from utils.logger import get_logger
from .exceptions import ParseError
from .grammar import _FormulaParser


def parse(source: str, symbols: Optional[Dict[str, int]] = None) -> Expr:
    """Parse a formula string into a formula tree.

    Uses a fresh parser instance for each invocation.

    Args:
        source: Formula text
        symbols: Identifier table to resolve names against; new identifiers
            are added to it in place

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula syntax is malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser(symbols)
    result = parser.parse(source)

    logger.debug(f"Formula parsed successfully into {type(result).__name__}")
    return result


def parse_with_symbols(
    source: str, symbols: Optional[Dict[str, int]] = None
) -> Tuple[Expr, Dict[str, int]]:
    """Parse a formula string and return it with its identifier table.

    Args:
        source: Formula text
        symbols: Initial identifier table; it is copied, not modified

    Returns:
        Tuple of the parsed formula and the name to id mapping

    Raises:
        ParseError: Formula syntax is malformed
    """
    table = dict(symbols) if symbols else {}
    return parse(source, table), table


__all__ = ["parse", "parse_with_symbols", "ParseError"]
