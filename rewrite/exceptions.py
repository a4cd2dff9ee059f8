# rewrite/exceptions.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Custom exceptions for pattern matching and term rewriting

"""Domain-specific exceptions for the rewrite engine.

A failed match is expected and frequent; it is signalled internally with
``NoMatch`` and turned into a no-op by ``RewriteRule.apply``. The remaining
exceptions indicate a badly written rule or a ruleset that does not terminate.
"""


class RewriteError(RuntimeError):
    """Base class for errors raised by the rewrite engine."""

    pass


class NoMatch(RewriteError):
    """Raised while matching when the pattern does not fit the target.

    Never escapes ``RewriteRule.apply``.
    """

    pass


class UnboundPatternVariable(RewriteError):
    """Raised when a replacement uses a pattern variable the pattern never binds."""

    def __init__(self, rule_name: str, ident: int):
        super().__init__(
            f"Rule '{rule_name}' uses pattern variable {ident} "
            f"which its pattern does not bind"
        )
        self.rule_name = rule_name
        self.ident = ident


class FixpointNotReached(RewriteError):
    """Raised when a ruleset keeps changing a formula past the iteration bound."""

    def __init__(self, ruleset_name: str, iterations: int):
        super().__init__(
            f"Ruleset '{ruleset_name}' did not reach a fixpoint "
            f"within {iterations} iterations"
        )
        self.ruleset_name = ruleset_name
        self.iterations = iterations
