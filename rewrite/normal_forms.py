# rewrite/normal_forms.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# CNF and DNF conversion rulesets built on the generic rewrite engine

"""Conjunctive and Disjunctive Normal Form conversion.

Both conversions push negations down to the variables with double negation
elimination and De Morgan's laws, then distribute one connective over the
other until a fixpoint is reached:

- CNF: ``∨`` is distributed over ``∧``, giving a conjunction of clauses
- DNF: ``∧`` is distributed over ``∨``, giving a disjunction of terms

Distributivity is given in both orientations so that a conjunction on either
side of a disjunction (or the reverse for DNF) is rewritten. The classic
four-rule lists carry only the left-hand orientation, which leaves formulas
such as ``(a ∧ b) ∨ c`` untouched and unusable as clauses; the right-hand
rules ``DISTRIBUTE_OR_RIGHT`` and ``DISTRIBUTE_AND_RIGHT`` are the one
addition to those lists.

Each rule strictly decreases either the depth of negations or the number of
distribution opportunities, so both conversions terminate.
"""

from __future__ import annotations

from formula import ast_nodes as ast
from .rule import RewriteRule
from .ruleset import RewriteRuleset

# Pattern variables
x, y, z = ast.Variable(0), ast.Variable(1), ast.Variable(2)

DOUBLE_NEGATION = RewriteRule(
    name="double negation elimination",
    pattern=~~x,
    replacement=x,
)

DE_MORGAN_DISJUNCTION = RewriteRule(
    name="de morgan's theorem for disjunction",
    pattern=~(x | y),
    replacement=~x & ~y,
)

DE_MORGAN_CONJUNCTION = RewriteRule(
    name="de morgan's theorem for conjunction",
    pattern=~(x & y),
    replacement=~x | ~y,
)

DISTRIBUTE_OR_LEFT = RewriteRule(
    name="left-distributive property of disjunction over conjunction",
    pattern=x | (y & z),
    replacement=(x | y) & (x | z),
)

DISTRIBUTE_OR_RIGHT = RewriteRule(
    name="right-distributive property of disjunction over conjunction",
    pattern=(x & y) | z,
    replacement=(x | z) & (y | z),
)

DISTRIBUTE_AND_LEFT = RewriteRule(
    name="left-distributive property of conjunction over disjunction",
    pattern=x & (y | z),
    replacement=(x & y) | (x & z),
)

DISTRIBUTE_AND_RIGHT = RewriteRule(
    name="right-distributive property of conjunction over disjunction",
    pattern=(x | y) & z,
    replacement=(x & z) | (y & z),
)

CNF_RULESET = RewriteRuleset(
    name="CNF conversion",
    rules=(
        DOUBLE_NEGATION,
        DE_MORGAN_DISJUNCTION,
        DE_MORGAN_CONJUNCTION,
        DISTRIBUTE_OR_LEFT,
        DISTRIBUTE_OR_RIGHT,
    ),
)

DNF_RULESET = RewriteRuleset(
    name="DNF conversion",
    rules=(
        DOUBLE_NEGATION,
        DE_MORGAN_DISJUNCTION,
        DE_MORGAN_CONJUNCTION,
        DISTRIBUTE_AND_LEFT,
        DISTRIBUTE_AND_RIGHT,
    ),
)


def to_cnf(expr: ast.Expr) -> ast.Expr:
    """Convert a formula to Conjunctive Normal Form.

    Args:
        expr: Any formula

    Returns:
        Equivalent conjunction of disjunctions of (possibly negated) variables
    """
    return CNF_RULESET.rewrite_to_fixpoint(expr)


def to_dnf(expr: ast.Expr) -> ast.Expr:
    """Convert a formula to Disjunctive Normal Form.

    Args:
        expr: Any formula

    Returns:
        Equivalent disjunction of conjunctions of (possibly negated) variables
    """
    return DNF_RULESET.rewrite_to_fixpoint(expr)


def _is_literal(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Variable) or (
        isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Variable)
    )


def _is_flat(expr: ast.Expr, connective: type) -> bool:
    """Whether ``expr`` is a chain of ``connective`` nodes over literals."""
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, connective):
            stack.extend((node.left, node.right))
        elif not _is_literal(node):
            return False
    return True


def _is_normal(expr: ast.Expr, outer: type, inner: type) -> bool:
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, outer):
            stack.extend((node.left, node.right))
        elif not _is_flat(node, inner):
            return False
    return True


def is_cnf(expr: ast.Expr) -> bool:
    """Whether ``expr`` is a conjunction of disjunctions of literals."""
    return _is_normal(expr, ast.And, ast.Or)


def is_dnf(expr: ast.Expr) -> bool:
    """Whether ``expr`` is a disjunction of conjunctions of literals."""
    return _is_normal(expr, ast.Or, ast.And)
