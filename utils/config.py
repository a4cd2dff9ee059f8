# utils/config.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Process-wide settings for the rewriter and the solver

"""Runtime settings shared by the rewrite engine and the DPLL solver.

Settings are immutable; ``configure`` swaps in a new instance built from the
current one, so callers that captured the old settings are unaffected.
"""

from dataclasses import dataclass, replace
from typing import Optional

# Upper bound on recursive rewrite passes before giving up on a fixpoint
DEFAULT_MAX_REWRITE_ITERATIONS = 10_000


@dataclass(frozen=True)
class Settings:
    """
    Tunables for normalization and solving.

    Attributes:
        max_rewrite_iterations: Passes allowed before FixpointNotReached.
        max_decisions: Branching decisions allowed per solve, None for no limit.
    """
    max_rewrite_iterations: int = DEFAULT_MAX_REWRITE_ITERATIONS
    max_decisions: Optional[int] = None


DEFAULT_SETTINGS = Settings()

_settings: Settings = DEFAULT_SETTINGS


def get_settings() -> Settings:
    """Return the active process-wide settings."""
    return _settings


def configure(**overrides) -> Settings:
    """Replace selected settings and return the new active settings.

    Raises:
        ValueError: If a bound is not positive
    """
    global _settings
    candidate = replace(_settings, **overrides)
    if candidate.max_rewrite_iterations < 1:
        raise ValueError("max_rewrite_iterations must be positive")
    if candidate.max_decisions is not None and candidate.max_decisions < 0:
        raise ValueError("max_decisions must be non-negative")
    _settings = candidate
    return _settings


def reset_settings() -> Settings:
    """Restore the defaults."""
    global _settings
    _settings = DEFAULT_SETTINGS
    return _settings
