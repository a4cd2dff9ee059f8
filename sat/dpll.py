# sat/dpll.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Davis-Putnam-Logemann-Loveland satisfiability solver

"""DPLL decision procedure over clause sets.

Each call to ``DPLLSolver.decide`` simplifies its clause set and, when the
answer is still open, branches on a literal L: first with the unit clause
``{¬L}`` added, then with ``{L}``. Both branches work on their own copies of
the clauses, so nothing one branch removes is visible to the other.

Simplification steps, in order:
    1. Unit propagation until no unit clause is left
    2. Pure-literal elimination
    3. Termination: no clauses means satisfiable, an empty clause means not

There is no clause learning, so the worst case is exponential in the number of
variables.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

from formula import ast_nodes as ast
from rewrite import to_cnf
from utils.config import get_settings
from utils.logger import get_logger
from .clauses import Clause, Literal, clauses_from_cnf, format_clauses
from .exceptions import SolverBudgetExceeded


@dataclass
class SolverStats:
    """
    Counters shared by all branches of a single solve.

    Attributes:
        calls: Invocations of decide, including the root.
        decisions: Branching points reached.
        propagations: Unit literals propagated.
        pure_literals: Pure literals eliminated.
    """
    calls: int = 0
    decisions: int = 0
    propagations: int = 0
    pure_literals: int = 0


class DPLLSolver:
    """DPLL search state: a clause set that this solver alone may modify.

    Attributes:
        clauses: Remaining clauses, read as a conjunction
        stats: Counters shared with every branch spawned from this solver
        depth: Branching depth of this state, 0 for the root
    """

    def __init__(
        self,
        clauses: Iterable[Clause],
        max_decisions: Optional[int] = None,
        stats: Optional[SolverStats] = None,
        depth: int = 0,
    ):
        """Initialize solver over private copies of ``clauses``.

        Args:
            clauses: Clause set to decide
            max_decisions: Branching budget; defaults to the configured
                ``max_decisions`` (unbounded when that is None)
            stats: Counters to update, fresh when omitted
            depth: Branching depth, used for log indentation
        """
        self.clauses: List[Clause] = [clause.copy() for clause in clauses]
        if max_decisions is None:
            max_decisions = get_settings().max_decisions
        self.max_decisions = max_decisions
        self.stats = stats if stats is not None else SolverStats()
        self.depth = depth

    @classmethod
    def from_formula(cls, expr: ast.Expr, max_decisions: Optional[int] = None) -> DPLLSolver:
        """Build a solver from the CNF clauses of an arbitrary formula."""
        return cls(clauses_from_cnf(to_cnf(expr)), max_decisions=max_decisions)

    def __str__(self) -> str:
        return format_clauses(self.clauses)

    def _find_unit(self) -> Optional[Literal]:
        for clause in self.clauses:
            if clause.is_unit():
                return clause.first()
        return None

    def _propagate(self, unit: Literal) -> None:
        # Clauses containing the unit are satisfied; its negation is false
        self.clauses = [clause for clause in self.clauses if unit not in clause]
        falsified = unit.negate()
        for clause in self.clauses:
            clause.discard(falsified)

    def unit_propagation(self) -> None:
        """Propagate unit clauses until none remain."""
        unit = self._find_unit()
        while unit is not None:
            self._propagate(unit)
            self.stats.propagations += 1
            unit = self._find_unit()

    def pure_literal_elimination(self) -> None:
        """Drop every clause that contains a pure literal."""
        present = {literal for clause in self.clauses for literal in clause}
        pure = {literal for literal in present if literal.negate() not in present}
        if not pure:
            return

        self.stats.pure_literals += len(pure)
        self.clauses = [
            clause
            for clause in self.clauses
            if not any(literal in pure for literal in clause)
        ]

    def choose_literal(self) -> Literal:
        """Pick the first literal of the first remaining clause."""
        return self.clauses[0].first()

    def with_unit_clause(self, unit: Literal) -> DPLLSolver:
        """Return an independent copy of this state with ``{unit}`` added."""
        branch = DPLLSolver(
            self.clauses,
            max_decisions=self.max_decisions,
            stats=self.stats,
            depth=self.depth + 1,
        )
        branch.clauses.append(Clause.unit(unit))
        return branch

    def decide(self) -> bool:
        """Decide whether the clause set is satisfiable.

        Returns:
            True if some assignment satisfies every clause

        Raises:
            SolverBudgetExceeded: More branching decisions than ``max_decisions``
        """
        logger = get_logger()
        self.stats.calls += 1

        self.unit_propagation()
        self.pure_literal_elimination()

        if not self.clauses:
            return True
        if any(clause.is_empty() for clause in self.clauses):
            logger.conflict(self.depth)
            return False

        self.stats.decisions += 1
        if self.max_decisions is not None and self.stats.decisions > self.max_decisions:
            raise SolverBudgetExceeded(self.max_decisions)

        literal = self.choose_literal()
        if logger.is_debug():
            logger.branch(self.depth, str(literal))

        return (
            self.with_unit_clause(literal.negate()).decide()
            or self.with_unit_clause(literal).decide()
        )


def is_satisfiable(expr: ast.Expr) -> bool:
    """Decide satisfiability of an arbitrary formula.

    Converts the formula to CNF, extracts its clauses and runs DPLL on them.

    Args:
        expr: Formula to decide

    Returns:
        True if some assignment of its variables makes the formula true
    """
    logger = get_logger()
    if logger.is_debug():
        logger.debug(f"Deciding satisfiability of {expr}")

    solver = DPLLSolver.from_formula(expr)
    result = solver.decide()

    logger.debug(
        f"DPLL finished: calls={solver.stats.calls}, decisions={solver.stats.decisions}"
    )
    return result
