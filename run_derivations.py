#!/usr/bin/env python3
# run_derivations.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Command-line interface for batch derivation searches

import sys
import argparse
from pathlib import Path
from typing import Iterable, Optional

from derivation import (
    DEFAULT_CATALOG,
    DEFAULT_MAX_DEPTH,
    LineResult,
    find_derivations_for_lines,
    format_result,
)
from rewrite import CATALOGS, get_catalog
from utils.formula_reader import read_formulas, FormulaFileError
from utils.logger import configure_logging, get_logger


def configure_logging_for_search(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the derivation search.

    Args:
        verbose: Enable INFO level logging (derivations are shown at INFO)
        debug: Enable DEBUG level logging (overrides verbose)
    """
    configure_logging(verbose=verbose, debug=debug)


def open_input(path: Optional[Path]) -> Iterable[str]:
    """Formula lines from a file, or from standard input when no file is given."""
    if path is None:
        return sys.stdin
    return read_formulas(str(path))


def report_derivation(result: LineResult, max_depth: int) -> None:
    """Log the steps of the derivation found for one line."""
    logger = get_logger()

    if result.derivation is None:
        logger.no_derivation(result.text, max_depth)
        return

    logger.derivation_found(result.text, len(result.derivation))
    for step in result.derivation.steps:
        logger.rule_applied(step.rule_name, str(step.path), str(step.after))


def render_line(result: LineResult, base_filename: str) -> None:
    """Render the derivation (or, without one, the formula tree) of a line."""
    from formula import parse
    from utils.tree_visualizer import derivation_to_dot, expression_to_dot, render_dot

    if result.derivation is not None:
        dot = derivation_to_dot(result.derivation)
    else:
        dot = expression_to_dot(parse(result.text))
    render_dot(dot, f"{base_filename}_{result.line_number}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Equiv: shortest derivations of T with the laws of propositional logic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_derivations.py formulas.txt
  python run_derivations.py formulas.txt -c extended -d 5
  echo "a&b|-(a&b)" | python run_derivations.py --explain -v
  python run_derivations.py formulas.txt --memo --explain --dot proof

Formula file format:
  One formula per line, e.g.:

  formulas.txt:
    a&b|-(a&b)
    (a|T)&-F

Output:
  One line per formula: the minimal number of rewrites to T,
  -1 if there is none within the depth, or "error" if the line
  does not parse.
        """,
    )

    parser.add_argument(
        "formulas",
        nargs="?",
        type=Path,
        default=None,
        help="Path to formula file (default: standard input)",
    )

    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Depth budget of the search (default: {DEFAULT_MAX_DEPTH})",
    )

    parser.add_argument(
        "-c",
        "--catalog",
        choices=sorted(CATALOGS),
        default=DEFAULT_CATALOG,
        help=f"Rule catalog to use (default: {DEFAULT_CATALOG})",
    )

    parser.add_argument(
        "--memo",
        action="store_true",
        help="Cache results per formula and remaining depth",
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Also find one shortest derivation per formula (shown with -v)",
    )

    parser.add_argument(
        "--dot",
        type=str,
        default=None,
        metavar="BASENAME",
        help="Render each derivation (or formula tree) with Graphviz",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for batch derivation searches.

    Returns:
        Exit code (0 for success, 2 if a line did not parse, 3 if the input
        cannot be read, 4 on interruption)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.depth < 0:
        parser.error("--depth must not be negative")

    configure_logging_for_search(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        catalog = get_catalog(args.catalog)
        lines = open_input(args.formulas)

        total = failed = 0
        for result in find_derivations_for_lines(
            lines,
            max_depth=args.depth,
            catalog=catalog,
            memoize=args.memo,
            with_derivations=args.explain,
        ):
            print(format_result(result), flush=True)
            total += 1

            if not result.ok:
                failed += 1
                continue

            if args.explain:
                report_derivation(result, args.depth)
            if args.dot:
                render_line(result, args.dot)

        logger.batch_finished(total, failed)
        return 2 if failed else 0

    except FormulaFileError as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Search interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
