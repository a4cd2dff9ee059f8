# tests/sat_tests/test_dpll_solver.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Test suite for the DPLL simplification steps and search

"""Test suite for DPLLSolver.

Exercises unit propagation, pure-literal elimination, the termination checks,
branch isolation and the decision budget on hand-built clause sets.
"""

import pytest
from formula import variable, and_, or_, not_
from sat import (
    Polarity,
    Literal,
    Clause,
    DPLLSolver,
    SolverBudgetExceeded,
)
from utils.config import configure
from utils.logger import get_logger


def lit(ident: int, positive: bool = True) -> Literal:
    return Literal(ident, Polarity.POSITIVE if positive else Polarity.NEGATIVE)


class TestUnitPropagation:
    """Test cases for unit propagation."""

    def setup_method(self):
        self.logger = get_logger()

    def test_unit_satisfies_and_shrinks_clauses(self):
        """Test that a unit removes satisfied clauses and its negation."""
        solver = DPLLSolver(
            [
                Clause([lit(0)]),
                Clause([lit(0), lit(1)]),
                Clause([lit(0, False), lit(2)]),
            ]
        )
        solver.unit_propagation()
        # {x0} and {x0, x1} satisfied; {¬x0, x2} shrinks to unit {x2}, then satisfied
        assert solver.clauses == []
        assert solver.stats.propagations == 2

    def test_propagation_runs_to_fixpoint(self):
        solver = DPLLSolver(
            [
                Clause([lit(0)]),
                Clause([lit(0, False), lit(1)]),
                Clause([lit(1, False), lit(2)]),
                Clause([lit(2, False), lit(3), lit(4)]),
            ]
        )
        solver.unit_propagation()
        assert solver.clauses == [Clause([lit(3), lit(4)])]

    def test_conflicting_units_leave_empty_clause(self):
        solver = DPLLSolver([Clause([lit(0)]), Clause([lit(0, False)])])
        solver.unit_propagation()
        assert solver.clauses == [Clause()]


class TestPureLiteralElimination:
    """Test cases for pure-literal elimination."""

    def test_pure_literal_clauses_removed(self):
        """Test that clauses containing a pure literal are dropped."""
        solver = DPLLSolver(
            [
                Clause([lit(0), lit(1)]),
                Clause([lit(1, False), lit(2, False)]),
                Clause([lit(1), lit(2)]),
            ]
        )
        solver.pure_literal_elimination()
        # x0 is pure; x1 and x2 appear with both polarities
        assert solver.clauses == [
            Clause([lit(1, False), lit(2, False)]),
            Clause([lit(1), lit(2)]),
        ]
        assert solver.stats.pure_literals == 1

    def test_no_pure_literals_is_noop(self):
        clauses = [Clause([lit(0), lit(1)]), Clause([lit(0, False), lit(1, False)])]
        solver = DPLLSolver(clauses)
        solver.pure_literal_elimination()
        assert solver.clauses == clauses

    def test_empty_clause_survives(self):
        solver = DPLLSolver([Clause(), Clause([lit(0)])])
        solver.pure_literal_elimination()
        assert solver.clauses == [Clause()]


class TestDecide:
    """Test cases for the full decision procedure."""

    def test_zero_clauses_is_satisfiable(self):
        """Test that an empty clause set is satisfiable."""
        assert DPLLSolver([]).decide() is True

    def test_empty_clause_is_unsatisfiable(self):
        """Test that a clause set containing an empty clause is not."""
        assert DPLLSolver([Clause()]).decide() is False
        assert DPLLSolver([Clause([lit(0), lit(1)]), Clause()]).decide() is False

    def test_unsat_core_behind_pure_literal(self):
        """Test that dropping a pure clause still leaves the core to refute."""
        solver = DPLLSolver(
            [
                Clause([lit(0), lit(1)]),
                Clause([lit(0, False), lit(1, False)]),
                Clause([lit(0), lit(1, False)]),
                Clause([lit(0, False), lit(1)]),
                Clause([lit(2), lit(0)]),
            ]
        )
        assert solver.decide() is False

    def test_all_four_sign_combinations_unsat(self):
        clauses = [
            Clause([lit(0), lit(1)]),
            Clause([lit(0), lit(1, False)]),
            Clause([lit(0, False), lit(1)]),
            Clause([lit(0, False), lit(1, False)]),
        ]
        solver = DPLLSolver(clauses)
        assert solver.decide() is False
        assert solver.stats.decisions >= 1

    def test_xor_chain_satisfiable(self):
        # (x0 ⊕ x1) as CNF: (x0 ∨ x1) ∧ (¬x0 ∨ ¬x1)
        clauses = [
            Clause([lit(0), lit(1)]),
            Clause([lit(0, False), lit(1, False)]),
        ]
        assert DPLLSolver(clauses).decide() is True

    def test_caller_clauses_are_not_modified(self):
        """Test that the solver works on copies of the input clauses."""
        clauses = [Clause([lit(0)]), Clause([lit(0, False), lit(1)])]
        DPLLSolver(clauses).decide()
        assert clauses == [Clause([lit(0)]), Clause([lit(0, False), lit(1)])]

    def test_branches_are_isolated(self):
        """Test that a branch's simplification does not leak into its parent."""
        solver = DPLLSolver([Clause([lit(0), lit(1)]), Clause([lit(0, False), lit(1)])])
        branch = solver.with_unit_clause(lit(0))
        branch.unit_propagation()
        assert solver.clauses == [
            Clause([lit(0), lit(1)]),
            Clause([lit(0, False), lit(1)]),
        ]
        assert branch.depth == 1
        assert branch.stats is solver.stats

    def test_branch_literal_is_first_of_first_clause(self):
        solver = DPLLSolver([Clause([lit(3), lit(1)]), Clause([lit(3, False), lit(1, False)])])
        assert solver.choose_literal() == lit(3)

    def test_from_formula(self):
        a, b = variable(0), variable(1)
        solver = DPLLSolver.from_formula(and_(or_(a, b), not_(a)))
        assert solver.clauses == [Clause([lit(0), lit(1)]), Clause([lit(0, False)])]
        assert solver.decide() is True


class TestDecisionBudget:
    """Test cases for the optional branching budget."""

    HARD_CLAUSES = [
        Clause([lit(0), lit(1)]),
        Clause([lit(0), lit(1, False)]),
        Clause([lit(0, False), lit(1)]),
        Clause([lit(0, False), lit(1, False)]),
    ]

    def test_budget_exceeded_raises(self):
        with pytest.raises(SolverBudgetExceeded) as exc_info:
            DPLLSolver(self.HARD_CLAUSES, max_decisions=0).decide()
        assert exc_info.value.max_decisions == 0

    def test_budget_from_settings(self):
        configure(max_decisions=0)
        with pytest.raises(SolverBudgetExceeded):
            DPLLSolver(self.HARD_CLAUSES).decide()

    def test_unbounded_by_default(self):
        solver = DPLLSolver(self.HARD_CLAUSES)
        assert solver.max_decisions is None
        assert solver.decide() is False
