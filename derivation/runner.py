# derivation/runner.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Line-oriented batch driver for derivation searches

"""Batch processing of formulas, one per line.

Each non-blank line is parsed and searched independently; the result of a
line is the minimal number of rewrites to ``T`` (or -1). A line that cannot
be parsed is reported and never searched.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from formula import parse, ParseError
from rewrite.catalog import Catalog, BASIC_CATALOG
from utils.logger import get_logger
from .explain import Derivation, explain
from .search import DerivationSearch, NO_DERIVATION, DEFAULT_MAX_DEPTH

ERROR_MARKER = "error"


@dataclass(frozen=True)
class LineResult:
    """Outcome for one input line.

    Attributes:
        line_number: One-based line number in the input
        text: The formula text as read, without the line break
        steps: Minimal number of rewrites, NO_DERIVATION, or None if the
            line could not be parsed
        error: Parse error message for unparseable lines
        derivation: One shortest derivation, when explanations were asked for
    """

    line_number: int
    text: str
    steps: Optional[int]
    error: Optional[str] = None
    derivation: Optional[Derivation] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def find_derivations_for_lines(
    lines: Iterable[str],
    max_depth: int = DEFAULT_MAX_DEPTH,
    catalog: Catalog = BASIC_CATALOG,
    memoize: bool = False,
    with_derivations: bool = False,
) -> Iterator[LineResult]:
    """Search every formula line of the input.

    Args:
        lines: Input lines, with or without trailing line breaks
        max_depth: Depth budget of every search
        catalog: Rules to use
        memoize: Use the memoized search
        with_derivations: Also reconstruct one shortest derivation per line

    Yields:
        LineResult for every non-blank line, in input order
    """
    logger = get_logger()
    searcher = DerivationSearch(catalog, memoize)

    for line_number, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")
        if not text.strip():
            continue

        try:
            expr = parse(text)
        except ParseError as e:
            logger.parse_failed(line_number, text, str(e))
            yield LineResult(line_number, text, None, error=str(e))
            continue

        if with_derivations:
            derivation = explain(expr, max_depth, catalog)
            steps = NO_DERIVATION if derivation is None else len(derivation)
            yield LineResult(line_number, text, steps, derivation=derivation)
        else:
            yield LineResult(line_number, text, searcher.run(expr, max_depth))


def format_result(result: LineResult) -> str:
    """Render the output line for one result."""
    if not result.ok:
        return ERROR_MARKER
    return str(result.steps)
