# tests/rewrite_tests/test_normal_forms.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Test suite for CNF and DNF conversion

"""Test suite for normal form conversion.

Verifies concrete conversions, the CNF/DNF structural requirements,
idempotence, and semantic preservation by truth-table comparison.
"""

import pytest
from formula import And, Or, Not, Variable, variable, and_, or_, not_, variables
from rewrite import to_cnf, to_dnf, is_cnf, is_dnf
from utils.logger import get_logger

a, b, c, d = variable(0), variable(1), variable(2), variable(3)

# Fixed formulas used across the structural and semantic checks
FORMULAS = [
    a,
    not_(a),
    not_(not_(a)),
    and_(a, b),
    or_(a, b),
    not_(and_(a, b)),
    not_(or_(a, b)),
    or_(a, and_(b, c)),
    or_(and_(a, b), c),
    and_(a, or_(b, c)),
    and_(or_(a, b), c),
    or_(and_(a, b), and_(c, d)),
    and_(or_(a, b), or_(c, d)),
    not_(and_(or_(a, not_(b)), not_(or_(c, d)))),
    not_(not_(and_(and_(and_(not_(or_(c, d)), or_(a, not_(not_(b)))), not_(a)), not_(b)))),
    or_(not_(or_(a, and_(b, not_(c)))), and_(d, not_(and_(a, b)))),
]


def _no_and_below_or(expr, inside_or=False):
    """CNF shape: no And under an Or, and Not only wraps variables."""
    if isinstance(expr, And):
        if inside_or:
            return False
        return _no_and_below_or(expr.left) and _no_and_below_or(expr.right)
    if isinstance(expr, Or):
        return _no_and_below_or(expr.left, True) and _no_and_below_or(expr.right, True)
    if isinstance(expr, Not):
        return isinstance(expr.operand, Variable)
    return True


class TestConcreteConversions:
    """Test cases with hand-computed normal forms."""

    def setup_method(self):
        self.logger = get_logger()

    CNF_CASES = [
        (not_(not_(a)), a),
        (not_(or_(a, b)), and_(not_(a), not_(b))),
        (not_(and_(a, b)), or_(not_(a), not_(b))),
        (or_(a, and_(b, c)), and_(or_(a, b), or_(a, c))),
        (or_(and_(a, b), c), and_(or_(a, c), or_(b, c))),
        (
            or_(and_(a, b), and_(c, d)),
            and_(and_(or_(a, c), or_(b, c)), and_(or_(a, d), or_(b, d))),
        ),
        (and_(or_(a, b), not_(c)), and_(or_(a, b), not_(c))),
    ]

    @pytest.mark.parametrize("expr, expected", CNF_CASES)
    def test_to_cnf(self, expr, expected):
        """Test CNF conversion of small formulas."""
        result = to_cnf(expr)
        self.logger.debug(f"CNF of {expr}: {result}")
        assert result == expected

    DNF_CASES = [
        (not_(not_(not_(a))), not_(a)),
        (and_(a, or_(b, c)), or_(and_(a, b), and_(a, c))),
        (and_(or_(a, b), c), or_(and_(a, c), and_(b, c))),
        (not_(or_(a, b)), and_(not_(a), not_(b))),
        (or_(and_(a, b), not_(c)), or_(and_(a, b), not_(c))),
    ]

    @pytest.mark.parametrize("expr, expected", DNF_CASES)
    def test_to_dnf(self, expr, expected):
        """Test DNF conversion of small formulas."""
        assert to_dnf(expr) == expected

    def test_scenario_formula_cnf(self, scenario_formula):
        """Test CNF of ¬¬(((¬(c∨d) ∧ (a∨¬¬b)) ∧ ¬a) ∧ ¬b)."""
        expected = and_(
            and_(and_(and_(not_(c), not_(d)), or_(a, b)), not_(a)),
            not_(b),
        )
        assert to_cnf(scenario_formula) == expected

    def test_conversion_does_not_mutate_input(self):
        source = not_(or_(a, and_(b, not_(c))))
        snapshot = not_(or_(a, and_(b, not_(c))))
        to_cnf(source)
        to_dnf(source)
        assert source == snapshot


class TestNormalFormProperties:
    """Property checks over fixed and random formulas."""

    @pytest.mark.parametrize("expr", FORMULAS)
    def test_cnf_shape(self, expr):
        """Test that every Not wraps a variable and Or never contains And."""
        result = to_cnf(expr)
        assert is_cnf(result), f"Not CNF: {result}"
        assert _no_and_below_or(result)

    @pytest.mark.parametrize("expr", FORMULAS)
    def test_dnf_shape(self, expr):
        assert is_dnf(to_dnf(expr)), f"Not DNF: {to_dnf(expr)}"

    @pytest.mark.parametrize("expr", FORMULAS)
    def test_idempotence(self, expr):
        """Test to_cnf(to_cnf(f)) == to_cnf(f) and likewise for DNF."""
        cnf = to_cnf(expr)
        dnf = to_dnf(expr)
        assert to_cnf(cnf) == cnf
        assert to_dnf(dnf) == dnf

    @pytest.mark.parametrize("expr", FORMULAS)
    def test_semantic_preservation(self, expr, truth_table):
        """Test that f, CNF(f) and DNF(f) have the same truth table."""
        idents = variables(expr)
        expected = truth_table(expr, idents)
        assert truth_table(to_cnf(expr), idents) == expected
        assert truth_table(to_dnf(expr), idents) == expected

    @pytest.mark.parametrize("seed", range(25))
    def test_random_formulas(self, seed, random_formula, truth_table):
        """Test shape, idempotence and equivalence on random formulas."""
        expr = random_formula(seed, n_vars=6, depth=4)
        idents = variables(expr)
        cnf = to_cnf(expr)
        dnf = to_dnf(expr)

        assert is_cnf(cnf)
        assert is_dnf(dnf)
        assert to_cnf(cnf) == cnf
        assert to_dnf(dnf) == dnf

        expected = truth_table(expr, idents)
        assert truth_table(cnf, idents) == expected
        assert truth_table(dnf, idents) == expected


class TestShapePredicates:
    """Test cases for is_cnf and is_dnf."""

    @pytest.mark.parametrize(
        "expr, cnf, dnf",
        [
            (a, True, True),
            (not_(a), True, True),
            (not_(not_(a)), False, False),
            (and_(a, or_(b, not_(c))), True, False),
            (or_(a, and_(b, c)), False, True),
            (and_(a, b), True, True),
            (or_(a, b), True, True),
            (not_(and_(a, b)), False, False),
        ],
    )
    def test_predicates(self, expr, cnf, dnf):
        assert is_cnf(expr) is cnf
        assert is_dnf(expr) is dnf
