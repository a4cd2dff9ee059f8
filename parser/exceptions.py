# parser/exceptions.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Custom exceptions for formula parsing


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Covers both illegal characters found by the lexer and token sequences the
    grammar rejects.
    """

    pass
