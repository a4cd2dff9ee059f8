# sat/exceptions.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Custom exceptions for clause extraction and DPLL solving

"""Domain-specific exceptions for clause extraction and solving."""


class SolverError(RuntimeError):
    """Base class for errors raised by clause extraction and the solver."""

    pass


class MalformedCNFError(SolverError):
    """Raised when clause extraction meets a formula that is not in CNF.

    This is an internal invariant violation: the CNF conversion did not reach
    normal form. It must not be caught and papered over.
    """

    pass


class SolverBudgetExceeded(SolverError):
    """Raised when a solve needs more branching decisions than allowed."""

    def __init__(self, max_decisions: int):
        super().__init__(f"DPLL exceeded the budget of {max_decisions} decisions")
        self.max_decisions = max_decisions
