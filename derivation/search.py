# derivation/search.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Bounded exhaustive search for the shortest derivation to T

"""Bounded depth-first search for the shortest derivation of T.

Given a formula, a depth budget and a rule catalog, the search tries every
rule at every position where it applies, rewrites, and recurses on the
result with one less unit of budget. The answer is the smallest number of
rewrites that turns the formula into ``T``, or ``NO_DERIVATION``.

The recursion, for a formula ``e`` and budget ``d``:

- ``d == 0``: fail;
- ``e`` is ``T``: 0 steps;
- otherwise: 1 + the minimum over all (rule, position) rewrites ``e'`` of
  the result for ``e'`` with budget ``d - 1``, or fail if none succeeds.

Since the budget is checked before the formula, a derivation of ``k``
rewrites is found only with a budget of at least ``k + 1``.

By default the search is exhaustive: identical formulas reached along
different rewrite chains are searched again every time. With
``memoize=True`` results are cached per (formula, remaining budget) for the
duration of one run; structural equality makes this give the same answers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from formula import ast_nodes as ast
from formula.printer import to_text
from rewrite.catalog import Catalog, BASIC_CATALOG
from utils.logger import get_logger

NO_DERIVATION = -1

DEFAULT_MAX_DEPTH = 6


@dataclass
class SearchStats:
    """Counters collected during one search run.

    Attributes:
        states: Number of (formula, budget) pairs visited
        rewrites: Number of rewritten formulas built
        cache_hits: Number of states answered from the memo cache
    """

    states: int = 0
    rewrites: int = 0
    cache_hits: int = 0


class DerivationSearch:
    """Shortest-derivation search over one rule catalog.

    Attributes:
        catalog: Rules to try, in order
        memoize: Whether to cache results per (formula, budget)
        stats: Counters of the most recent run
    """

    def __init__(self, catalog: Catalog = BASIC_CATALOG, memoize: bool = False):
        self.catalog = catalog
        self.memoize = memoize
        self.stats = SearchStats()
        self._memo: Dict[Tuple[ast.Expr, int], int] = {}

    def run(self, root: ast.Expr, depth_budget: int = DEFAULT_MAX_DEPTH) -> int:
        """Search for the shortest derivation of T from ``root``.

        Args:
            root: Formula to derive T from
            depth_budget: Maximum recursion depth of the search

        Returns:
            Minimal number of rewrites, or NO_DERIVATION

        Raises:
            ValueError: If the budget is negative
        """
        if depth_budget < 0:
            raise ValueError(f"Depth budget must not be negative, got {depth_budget}")

        logger = get_logger()
        formula = to_text(root)
        logger.search_started(formula, depth_budget, self.catalog.name, self.memoize)

        self.stats = SearchStats()
        self._memo.clear()

        steps = self.steps_from(root, depth_budget)

        logger.search_finished(formula, steps, self.stats.states, self.stats.rewrites)
        return steps

    def steps_from(self, expr: ast.Expr, budget: int) -> int:
        """Result of the recursion for ``expr`` with ``budget`` left.

        Unlike ``run`` this keeps the counters and the memo cache of the
        current run, so it can be used to walk along a found derivation.
        """
        self.stats.states += 1

        if budget == 0:
            return NO_DERIVATION

        if isinstance(expr, ast.TrueConst):
            return 0

        # Every rewrite would be searched with budget 0
        if budget == 1:
            return NO_DERIVATION

        if self.memoize:
            cached = self._memo.get((expr, budget))
            if cached is not None:
                self.stats.cache_hits += 1
                return cached

        best = NO_DERIVATION
        for rule in self.catalog:
            for path in rule.matches(expr):
                candidate = rule.apply(expr, path)
                self.stats.rewrites += 1

                result = self.steps_from(candidate, budget - 1)
                if result != NO_DERIVATION and (best == NO_DERIVATION or result < best):
                    best = result

        steps = NO_DERIVATION if best == NO_DERIVATION else best + 1

        if self.memoize:
            self._memo[(expr, budget)] = steps
        return steps


def search(
    root: ast.Expr,
    depth_budget: int = DEFAULT_MAX_DEPTH,
    catalog: Catalog = BASIC_CATALOG,
    memoize: bool = False,
) -> int:
    """Minimal number of rewrites turning ``root`` into T.

    Args:
        root: Formula to derive T from
        depth_budget: Maximum recursion depth of the search
        catalog: Rules to use
        memoize: Cache results per (formula, budget) during the search

    Returns:
        Minimal number of rewrites, or NO_DERIVATION (-1) when no
        derivation exists within the budget

    Example:
        >>> search(parse("a&b|-(a&b)"), 6, BASIC_CATALOG)
        1
    """
    return DerivationSearch(catalog, memoize).run(root, depth_budget)
