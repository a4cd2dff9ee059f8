# utils/__init__.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Utility module exports

from .logger import (
    LogLevel,
    get_logger,
    set_log_level,
    configure_logging,
)
from .config import (
    Settings,
    DEFAULT_SETTINGS,
    get_settings,
    configure,
    reset_settings,
)

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "Settings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "configure",
    "reset_settings",
]
