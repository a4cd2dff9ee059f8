# tests/conftest.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Propel test suite.

The configuration handles:
- Python path setup for module imports
- Resetting process-wide settings between tests
- Brute-force truth-table helpers used as an oracle
- A seeded random formula generator
"""

import itertools
import random
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from formula import Expr, variable, and_, or_, not_, evaluate, variables  # noqa: E402
from utils.config import reset_settings  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages can be imported.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import rewrite
        import sat
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against the default settings."""
    reset_settings()
    yield
    reset_settings()


def _assignments(idents):
    idents = sorted(idents)
    for values in itertools.product((False, True), repeat=len(idents)):
        yield dict(zip(idents, values))


@pytest.fixture
def truth_table():
    """Return a function computing a formula's truth table over given variables.

    Returns:
        Callable[[Expr, Iterable[int]], tuple]: Truth values in a fixed
        assignment order
    """

    def _table(expr: Expr, idents) -> tuple:
        return tuple(evaluate(expr, assignment) for assignment in _assignments(idents))

    return _table


@pytest.fixture
def brute_force_sat():
    """Return a function deciding satisfiability by enumerating assignments."""

    def _sat(expr: Expr) -> bool:
        return any(evaluate(expr, assignment) for assignment in _assignments(variables(expr)))

    return _sat


@pytest.fixture
def random_formula():
    """Return a seeded generator of random formulas.

    Returns:
        Callable[[int, int, int], Expr]: ``(seed, n_vars, depth) -> formula``
    """

    def _generate(seed: int, n_vars: int, depth: int) -> Expr:
        rng = random.Random(seed)

        def build(level: int) -> Expr:
            if level == 0 or rng.random() < 0.2:
                return variable(rng.randrange(n_vars))
            choice = rng.random()
            if choice < 0.25:
                return not_(build(level - 1))
            if choice < 0.625:
                return and_(build(level - 1), build(level - 1))
            return or_(build(level - 1), build(level - 1))

        return build(depth)

    return _generate


@pytest.fixture
def scenario_formula():
    """¬¬(((¬(c ∨ d) ∧ (a ∨ ¬¬b)) ∧ ¬a) ∧ ¬b) with a, b, c, d = 0, 1, 2, 3."""
    a, b, c, d = variable(0), variable(1), variable(2), variable(3)
    inner = and_(not_(or_(c, d)), or_(a, not_(not_(b))))
    return not_(not_(and_(and_(inner, not_(a)), not_(b))))
