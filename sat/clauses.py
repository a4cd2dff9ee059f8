# sat/clauses.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Literals, clauses and clause extraction from CNF formulas

"""Clause representation for the DPLL solver.

A clause is a set of literals read as their disjunction; a list of clauses is
read as their conjunction. Clauses keep their literals in insertion order, so
"the first literal of a clause" is well defined and solving is deterministic.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List

from formula import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import MalformedCNFError


class Polarity(Enum):
    """Sign of a literal."""
    POSITIVE = "+"
    NEGATIVE = "-"

    def flip(self) -> Polarity:
        if self is Polarity.POSITIVE:
            return Polarity.NEGATIVE
        return Polarity.POSITIVE


@dataclass(frozen=True)
class Literal:
    """
    A variable or its negation.

    Attributes:
        ident: Variable identifier.
        polarity: POSITIVE for the variable, NEGATIVE for its negation.
    """
    ident: int
    polarity: Polarity = Polarity.POSITIVE

    def negate(self) -> Literal:
        return Literal(self.ident, self.polarity.flip())

    def __str__(self) -> str:
        if self.polarity is Polarity.POSITIVE:
            return f"var{self.ident}"
        return f"¬var{self.ident}"


class Clause:
    """Disjunction of literals, unique per (variable, polarity)."""

    __slots__ = ("_literals",)

    def __init__(self, literals: Iterable[Literal] = ()):
        self._literals: Dict[Literal, None] = dict.fromkeys(literals)

    @classmethod
    def unit(cls, literal: Literal) -> Clause:
        return cls((literal,))

    def is_unit(self) -> bool:
        return len(self._literals) == 1

    def is_empty(self) -> bool:
        return not self._literals

    def first(self) -> Literal:
        """Return the earliest inserted literal.

        Raises:
            IndexError: The clause is empty
        """
        for literal in self._literals:
            return literal
        raise IndexError("empty clause has no literals")

    def add(self, literal: Literal) -> None:
        self._literals[literal] = None

    def discard(self, literal: Literal) -> None:
        self._literals.pop(literal, None)

    def copy(self) -> Clause:
        return Clause(self._literals)

    def __contains__(self, literal: object) -> bool:
        return literal in self._literals

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)

    def __len__(self) -> int:
        return len(self._literals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return self._literals.keys() == other._literals.keys()

    __hash__ = None

    def __str__(self) -> str:
        return "{" + ", ".join(str(literal) for literal in self._literals) + "}"

    def __repr__(self) -> str:
        return f"Clause([{', '.join(repr(literal) for literal in self._literals)}])"


def format_clauses(clauses: Iterable[Clause]) -> str:
    return "{" + ", ".join(str(clause) for clause in clauses) + "}"


def clauses_from_cnf(expr: ast.Expr) -> List[Clause]:
    """Flatten a CNF formula into its clauses.

    The top-level chain of And nodes is split into conjuncts, left to right;
    each conjunct's chain of Or nodes becomes one clause.

    Args:
        expr: Formula in Conjunctive Normal Form

    Returns:
        Clauses in left-to-right order of the conjuncts

    Raises:
        MalformedCNFError: ``expr`` is not in CNF
    """
    clauses = []
    pending = [expr]
    while pending:
        node = pending.pop()
        if isinstance(node, ast.And):
            pending.append(node.right)
            pending.append(node.left)
        else:
            clauses.append(_clause_from_disjunction(node))

    logger = get_logger()
    if logger.is_debug():
        logger.clauses_extracted(len(clauses), format_clauses(clauses))
    return clauses


def _clause_from_disjunction(expr: ast.Expr) -> Clause:
    clause = Clause()
    pending = [expr]
    while pending:
        node = pending.pop()
        if isinstance(node, ast.Or):
            pending.append(node.right)
            pending.append(node.left)
        elif isinstance(node, ast.Variable):
            clause.add(Literal(node.ident, Polarity.POSITIVE))
        elif isinstance(node, ast.Not) and isinstance(node.operand, ast.Variable):
            clause.add(Literal(node.operand.ident, Polarity.NEGATIVE))
        else:
            raise MalformedCNFError(
                f"Expected a literal inside a clause, found {type(node).__name__}: {node}"
            )
    return clause
