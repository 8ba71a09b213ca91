# derivation/explain.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Reconstruction of one shortest derivation

"""Reconstruction of a shortest derivation, step by step.

The search itself only reports how many rewrites are needed. To show which
laws were used, ``explain`` walks from the formula towards ``T``: at each
point it takes the first (rule, position) pair, in catalog and search
order, whose result is one step closer to ``T`` according to a memoized
search.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from formula import ast_nodes as ast
from formula.printer import to_text
from rewrite.catalog import Catalog, BASIC_CATALOG
from rewrite.path import Path
from utils.logger import get_logger
from .search import DerivationSearch, NO_DERIVATION, DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class DerivationStep:
    """One rewrite of a derivation.

    Attributes:
        rule_name: Display name of the rule used
        path: Position the rule was applied at
        before: Formula before the rewrite
        after: Formula after the rewrite
    """

    rule_name: str
    path: Path
    before: ast.Expr
    after: ast.Expr

    def __str__(self) -> str:
        return f"{self.rule_name} at [{self.path}] → {to_text(self.after)}"


@dataclass
class Derivation:
    """A chain of rewrites from a formula to T.

    Attributes:
        start: The formula the derivation starts from
        steps: Rewrites in the order they are applied
    """

    start: ast.Expr
    steps: List[DerivationStep] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def result(self) -> ast.Expr:
        return self.steps[-1].after if self.steps else self.start

    def formulas(self) -> List[ast.Expr]:
        """The start formula followed by the result of every step."""
        return [self.start] + [step.after for step in self.steps]

    def __str__(self) -> str:
        lines = [to_text(self.start)]
        lines.extend(f"  {step}" for step in self.steps)
        return "\n".join(lines)


def explain(
    root: ast.Expr,
    depth_budget: int = DEFAULT_MAX_DEPTH,
    catalog: Catalog = BASIC_CATALOG,
) -> Optional[Derivation]:
    """Find one shortest derivation of T from ``root``.

    Args:
        root: Formula to derive T from
        depth_budget: Maximum recursion depth of the search
        catalog: Rules to use

    Returns:
        A derivation whose length equals ``search(root, depth_budget,
        catalog)``, or None if there is none within the budget
    """
    logger = get_logger()
    oracle = DerivationSearch(catalog, memoize=True)

    remaining = oracle.run(root, depth_budget)
    if remaining == NO_DERIVATION:
        logger.debug(f"No derivation of T from {to_text(root)} within depth {depth_budget}")
        return None

    derivation = Derivation(root)
    # A derivation of k rewrites is found with budget k + 1
    current, budget = root, remaining + 1

    while remaining > 0:
        step = _next_step(oracle, current, budget, remaining)
        derivation.steps.append(step)
        if logger.is_debug():
            logger.debug(f"    step {len(derivation)}: {step}")
        current, budget, remaining = step.after, budget - 1, remaining - 1

    return derivation


def _next_step(
    oracle: DerivationSearch, expr: ast.Expr, budget: int, remaining: int
) -> DerivationStep:
    for rule in oracle.catalog:
        for path in rule.matches(expr):
            candidate = rule.apply(expr, path)
            if oracle.steps_from(candidate, budget - 1) == remaining - 1:
                return DerivationStep(rule.name, path, expr, candidate)

    # The oracle promised a rewrite that gets one step closer
    raise RuntimeError(f"No rewrite of {to_text(expr)} reaches T in {remaining - 1} step(s)")
