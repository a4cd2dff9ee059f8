# formula/__init__.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Propositional formula representation and construction API

"""Immutable propositional formulas.

Formulas are trees of Variable, Not, And and Or nodes with structural
equality. Subtrees may be shared freely between parents since no node is ever
modified after construction.

Example:
    >>> from formula import variable, and_, not_
    >>> a, b = variable(0), variable(1)
    >>> str(and_(a, not_(b)))
    '(var0 ∧ ¬var1)'
"""

from .ast_nodes import Expr, Variable, Not, And, Or, Visitor, render, same_structure
from .builders import variable, and_, or_, not_, evaluate, variables

__all__ = [
    "Expr",
    "Variable",
    "Not",
    "And",
    "Or",
    "Visitor",
    "render",
    "same_structure",
    "variable",
    "and_",
    "or_",
    "not_",
    "evaluate",
    "variables",
]
