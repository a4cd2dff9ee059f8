# formula/ast_nodes.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional-logic formulas. Nodes never change after
construction, so a subtree can be shared by any number of parents and every
transformation produces new nodes while the old ones stay valid.

Node Types:
    Variable: Propositional variable identified by a non-negative integer
    Not, And, Or: Standard Boolean connectives

Equality and hashing are structural: two separately built trees with the same
shape and the same variable identifiers compare equal.

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol, Union


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all propositional formula nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support. The ``&``, ``|`` and ``~`` operators build new And, Or and Not
    nodes respectively and never touch their operands.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the diagnostic rendering of the node.

        Variables print as ``var<id>``, negation as a ``¬`` prefix and binary
        connectives as parenthesized ``∧``/``∨`` infix.
        """
        return render(self)

    def __and__(self, other: Expr) -> And:
        return And(self, other)

    def __or__(self, other: Expr) -> Or:
        return Or(self, other)

    def __invert__(self) -> Not:
        return Not(self)


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable.

    Inside a rewrite-rule pattern the same node type acts as a pattern
    variable that binds to an arbitrary subformula.

    Attributes:
        ident: Non-negative identifier, unique per distinct variable
    """

    ident: int

    def accept(self, v: Visitor):
        return v.visit_variable(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)


def render(expr: Expr, names: Optional[Mapping[int, str]] = None) -> str:
    """Render a formula using caller-supplied variable names.

    Identifiers without an entry in ``names`` fall back to ``var<id>``. The
    tree is walked with an explicit stack, so arbitrarily deep formulas render
    without hitting the interpreter's recursion limit.

    Args:
        expr: Formula to render
        names: Mapping from variable identifier to display name

    Returns:
        Infix text with ``¬``, ``∧`` and ``∨``
    """
    names = names or {}
    parts: List[str] = []
    # Pending nodes and literal text, popped in output order
    stack: List[Union[Expr, str]] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Variable):
            parts.append(names.get(item.ident, f"var{item.ident}"))
        elif isinstance(item, Not):
            parts.append("¬")
            stack.append(item.operand)
        else:
            symbol = " ∧ " if isinstance(item, And) else " ∨ "
            parts.append("(")
            stack.extend((")", item.right, symbol, item.left))
    return "".join(parts)


def same_structure(left: Expr, right: Expr) -> bool:
    """Compare two formulas structurally without recursing.

    Agrees with ``==`` on formula nodes but is safe on trees nested deeper
    than the recursion limit. Shared subtrees are skipped by identity.
    """
    stack = [(left, right)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Variable):
            if a.ident != b.ident:
                return False
        elif isinstance(a, Not):
            stack.append((a.operand, b.operand))
        else:
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
    return True
