# sat/__init__.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Clause extraction and DPLL satisfiability checking

"""Satisfiability checking for propositional formulas.

Pipeline: formula → ``to_cnf`` → ``clauses_from_cnf`` → ``DPLLSolver``.

Example:
    >>> from formula import variable
    >>> from sat import is_satisfiable
    >>> v = variable(0)
    >>> is_satisfiable(v & ~v)
    False
"""

from .clauses import Polarity, Literal, Clause, clauses_from_cnf, format_clauses
from .dpll import DPLLSolver, SolverStats, is_satisfiable
from .exceptions import SolverError, MalformedCNFError, SolverBudgetExceeded

__all__ = [
    "Polarity",
    "Literal",
    "Clause",
    "clauses_from_cnf",
    "format_clauses",
    "DPLLSolver",
    "SolverStats",
    "is_satisfiable",
    "SolverError",
    "MalformedCNFError",
    "SolverBudgetExceeded",
]
