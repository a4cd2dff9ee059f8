# parser/grammar.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

The parser builds formulas exclusively through the construction API, mapping
each distinct identifier to a variable id in order of first appearance.

Operator Precedence (lowest to highest):
- OR: left-associative
- AND: left-associative
- NOT: right-associative
"""

from typing import Dict, Optional

from sly import Parser
from formula import Expr, variable, and_, or_, not_
from utils.logger import get_logger
from .lexer import FormulaLexer
from .exceptions import ParseError


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
        symbols: Identifier name to variable id, extended while parsing
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    def __init__(self, symbols: Optional[Dict[str, int]] = None):
        self.symbols: Dict[str, int] = symbols if symbols is not None else {}
        self._next_id = max(self.symbols.values(), default=-1) + 1

    def _ident(self, name: str) -> int:
        if name not in self.symbols:
            self.symbols[name] = self._next_id
            self._next_id += 1
        return self.symbols[name]

    @_("expr")
    def start(self, p) -> Expr:
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        return not_(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        return and_(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        return or_(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        return p.expr

    @_("ID")
    def expr(self, p) -> Expr:
        return variable(self._ident(p.ID))

    def parse(self, text: str) -> Expr:
        """Parse formula text into a formula tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If formula is empty or contains syntax errors
        """
        logger = get_logger()

        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
