#!/usr/bin/env python3
# run_solver.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Command-line interface printing normal forms and satisfiability of a formula

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from formula import render
from parser import parse_with_symbols
from parser.exceptions import ParseError
from rewrite import to_cnf, to_dnf
from rewrite.exceptions import RewriteError
from sat import DPLLSolver, clauses_from_cnf
from sat.exceptions import SolverError
from utils.config import configure
from utils.logger import configure_logging, get_logger


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propel propositional normal forms and DPLL satisfiability",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py -f "NOT NOT (a OR b) AND NOT a"
  python run_solver.py -i formula.txt --cnf-only
  python run_solver.py -f "a & !a" --debug

Formula syntax:
  identifiers, NOT/!/¬, AND/&/∧, OR/|/∨ and parentheses
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--formula", help="Formula text")
    source.add_argument("-i", "--input", type=Path, help="Path to a formula file")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also report clause and search statistics (the log level is not changed)",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--cnf-only", action="store_true", help="Only print the CNF")
    output.add_argument("--dnf-only", action="store_true", help="Only print the DNF")

    parser.add_argument(
        "--max-iterations",
        type=int,
        help="Upper bound on rewrite passes per conversion",
    )

    parser.add_argument(
        "--max-decisions",
        type=int,
        help="Upper bound on DPLL branching decisions",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Report lines are logged at INFO, so -v only adds the statistics line
    configure_logging(verbose=True, debug=args.debug)
    logger = get_logger()

    try:
        overrides = {}
        if args.max_iterations is not None:
            overrides["max_rewrite_iterations"] = args.max_iterations
        if args.max_decisions is not None:
            overrides["max_decisions"] = args.max_decisions
        if overrides:
            configure(**overrides)

        text = args.formula if args.formula is not None else read_formula_file(args.input)
        formula, symbols = parse_with_symbols(text)
        names = {ident: name for name, ident in symbols.items()}

        if args.cnf_only:
            logger.info(render(to_cnf(formula), names))
            return 0

        if args.dnf_only:
            logger.info(render(to_dnf(formula), names))
            return 0

        cnf = to_cnf(formula)
        logger.info(f"formula:     {render(formula, names)}")
        logger.info(f"dnf:         {render(to_dnf(formula), names)}")
        logger.info(f"cnf:         {render(cnf, names)}")

        solver = DPLLSolver(clauses_from_cnf(cnf))
        clause_count = len(solver.clauses)
        logger.result(solver.decide())

        if args.verbose:
            stats = solver.stats
            logger.info(
                f"clauses: {clause_count}, calls: {stats.calls}, "
                f"decisions: {stats.decisions}, propagations: {stats.propagations}, "
                f"pure literals: {stats.pure_literals}"
            )
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except (RewriteError, SolverError) as e:
        logger.error(f"Solving failed: {e}")
        return 5


if __name__ == "__main__":
    sys.exit(main())
