# formula/builders.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Construction API and semantic helpers for propositional formulas

"""Construction functions and truth-value helpers.

The construction functions are total: they perform no validation and never
raise. ``and``, ``or`` and ``not`` are Python keywords, hence the trailing
underscores.
"""

from __future__ import annotations
from typing import FrozenSet, Mapping, Set
from . import ast_nodes as ast


def variable(ident: int) -> ast.Variable:
    """Build a variable node for identifier ``ident``."""
    return ast.Variable(ident)


def and_(left: ast.Expr, right: ast.Expr) -> ast.And:
    """Build the conjunction of two formulas."""
    return ast.And(left, right)


def or_(left: ast.Expr, right: ast.Expr) -> ast.Or:
    """Build the disjunction of two formulas."""
    return ast.Or(left, right)


def not_(operand: ast.Expr) -> ast.Not:
    """Build the negation of a formula."""
    return ast.Not(operand)


class _Evaluator(ast.Visitor):
    def __init__(self, assignment: Mapping[int, bool]):
        self._assignment = assignment

    def visit_variable(self, n: ast.Variable) -> bool:
        return bool(self._assignment[n.ident])

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return n.left.accept(self) and n.right.accept(self)

    def visit_or(self, n: ast.Or) -> bool:
        return n.left.accept(self) or n.right.accept(self)


def evaluate(expr: ast.Expr, assignment: Mapping[int, bool]) -> bool:
    """Compute the truth value of a formula under a variable assignment.

    Args:
        expr: Formula to evaluate
        assignment: Truth value for every variable identifier in ``expr``

    Returns:
        Truth value of the formula

    Raises:
        KeyError: A variable of the formula has no assigned value
    """
    return expr.accept(_Evaluator(assignment))


class _VariableCollector(ast.Visitor):
    def __init__(self):
        self.found: Set[int] = set()

    def visit_variable(self, n: ast.Variable):
        self.found.add(n.ident)

    def visit_not(self, n: ast.Not):
        n.operand.accept(self)

    def visit_and(self, n: ast.And):
        n.left.accept(self)
        n.right.accept(self)

    def visit_or(self, n: ast.Or):
        n.left.accept(self)
        n.right.accept(self)


def variables(expr: ast.Expr) -> FrozenSet[int]:
    """Return the identifiers of all variables occurring in a formula."""
    collector = _VariableCollector()
    expr.accept(collector)
    return frozenset(collector.found)
