# parser/lexer.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

Connectives can be written as keywords, ASCII operators or the symbols used
by the diagnostic rendering, so rendered formulas can be read back in.

Supported Tokens:
- NOT: ``NOT``, ``!``, ``¬``
- AND: ``AND``, ``&``, ``∧``
- OR: ``OR``, ``|``, ``∨``
- Parentheses and identifiers; whitespace is ignored
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"!|¬"
    AND = r"&|∧"
    OR = r"\||∨"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Identifier pattern: starts with letter/underscore, followed by alphanumerics/underscores
    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    # Keyword mapping: connectives spelled as reserved words
    ID["NOT"] = "NOT"
    ID["AND"] = "AND"
    ID["OR"] = "OR"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
