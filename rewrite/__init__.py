# rewrite/__init__.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Generic term rewriting and normal form conversion

"""Term rewriting over propositional formulas.

Core Components:
    RewriteRule: pattern ⊢ replacement pair applied at the root of a formula
    RewriteRuleset: ordered rules with recursive and fixpoint application
    to_cnf / to_dnf: normal form conversions built from those pieces

Example:
    >>> from formula import variable
    >>> from rewrite import to_cnf
    >>> a, b, c = variable(0), variable(1), variable(2)
    >>> str(to_cnf(a | (b & c)))
    '((var0 ∨ var1) ∧ (var0 ∨ var2))'
"""

from .exceptions import RewriteError, NoMatch, UnboundPatternVariable, FixpointNotReached
from .rule import RewriteRule
from .ruleset import RewriteRuleset
from .normal_forms import CNF_RULESET, DNF_RULESET, to_cnf, to_dnf, is_cnf, is_dnf

__all__ = [
    "RewriteError",
    "NoMatch",
    "UnboundPatternVariable",
    "FixpointNotReached",
    "RewriteRule",
    "RewriteRuleset",
    "CNF_RULESET",
    "DNF_RULESET",
    "to_cnf",
    "to_dnf",
    "is_cnf",
    "is_dnf",
]
