# utils/logger.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Logging utility for rewriting and solving with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for rewriting and solving."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PropelLogger:
    """Centralized logger for the rewriter, the clause extractor and the solver."""

    def __init__(self, name: str = "propel", level: LogLevel = LogLevel.INFO):
        """Initialize the Propel logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PropelFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        """Whether debug output is currently enabled."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for rewriting and solving events
    def rule_applied(self, rule_name: str, before: str, after: str):
        """Log a successful root-level rule application."""
        self.debug(f"    ✏️  {rule_name}: {before} ⊢ {after}")

    def fixpoint_reached(self, ruleset_name: str, iterations: int):
        """Log fixpoint termination of a ruleset."""
        self.debug(f"  🔁 {ruleset_name}: fixpoint after {iterations} pass(es)")

    def clauses_extracted(self, count: int, clauses: str):
        """Log the clause set handed to the solver."""
        self.debug(f"  📋 {count} clause(s) extracted: {clauses}")

    def branch(self, depth: int, literal: str):
        """Log a DPLL branching decision."""
        self.debug(f"{'  ' * depth}🔀 branch on {literal}")

    def conflict(self, depth: int):
        """Log an empty clause found during DPLL."""
        self.debug(f"{'  ' * depth}💥 conflict")

    def result(self, satisfiable: bool):
        """Log final satisfiability result."""
        self.info(f"satisfiable: {'true' if satisfiable else 'false'}")


class PropelFormatter(logging.Formatter):
    """Custom formatter with clean output for INFO and above."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PropelLogger] = None


def get_logger(name: str = "propel") -> PropelLogger:
    """Get or create the global Propel logger instance.

    Args:
        name: Logger name (default: "propel")

    Returns:
        PropelLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PropelLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
