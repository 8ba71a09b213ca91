# rewrite/path.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Gorn addresses of subexpressions and ordered subexpression search

"""Addressing of subexpressions and ordered search for law occurrences.

A path is the walk from the root of an expression down to one of its nodes,
written as a sequence of directives (cf. Gorn address): ``LEFT`` follows the
first child (the left operand, or the operand of a negation), ``RIGHT``
follows the second child, and ``STOP`` marks the addressed node. The path of
the root itself is just ``(STOP,)``.

"No path" is a separate value, ``NO_PATH``. Passed to ``find_next`` it means
"start from the beginning"; returned from it, it means "nothing further".

Nodes are visited in pre-order, left before right, so repeatedly asking for
the next match after the previous one walks every match exactly once:

    >>> tree = parse("a|b|c")
    >>> [str(p) for p in enumerate_matches(tree, lambda e: isinstance(e, Or))]
    ['0', '1 0']
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from formula import ast_nodes as ast

Predicate = Callable[[ast.Expr], bool]


class Step(Enum):
    """One directive of a path."""

    STOP = 0
    LEFT = 1
    RIGHT = 2


@dataclass(frozen=True)
class Path:
    """Address of one node inside an expression tree.

    Attributes:
        steps: Directives from the root, always ending with ``Step.STOP``
    """

    steps: Tuple[Step, ...]

    def __post_init__(self):
        if not self.steps or self.steps[-1] is not Step.STOP:
            raise ValueError("A path must end with Step.STOP")
        if Step.STOP in self.steps[:-1]:
            raise ValueError("Step.STOP may only appear at the end of a path")

    @classmethod
    def root(cls) -> Path:
        """Path addressing the root node itself."""
        return cls((Step.STOP,))

    @classmethod
    def of(cls, *directions: Step) -> Path:
        """Build a path from its LEFT/RIGHT directives, adding the STOP."""
        return cls(tuple(directions) + (Step.STOP,))

    @property
    def head(self) -> Step:
        return self.steps[0]

    def rest(self) -> Path:
        """The path below the first directive.

        Raises:
            ValueError: If this path already addresses the root
        """
        if self.head is Step.STOP:
            raise ValueError("The root path has no rest")
        return Path(self.steps[1:])

    def prefixed(self, step: Step) -> Path:
        """The same address seen from one level further up."""
        return Path((step,) + self.steps)

    def __str__(self) -> str:
        return " ".join(str(step.value) for step in self.steps)


NO_PATH: Optional[Path] = None


def find_next(
    root: ast.Expr, predicate: Predicate, after: Optional[Path] = NO_PATH
) -> Optional[Path]:
    """Find the next subexpression satisfying a predicate.

    Searches in pre-order, left before right, for the first node that
    satisfies ``predicate`` and comes strictly after ``after``.

    Args:
        root: Expression to search
        predicate: Shape test applied to candidate nodes
        after: Position of the previous match, or NO_PATH to start fresh

    Returns:
        Path of the next match, or NO_PATH when there is none
    """
    return _search(root, predicate, after)


def _search(
    expr: ast.Expr, predicate: Predicate, after: Optional[Path]
) -> Optional[Path]:
    # The node itself only counts on a fresh start
    if after is None and predicate(expr):
        return Path.root()

    head = None if after is None else after.head

    if head is not Step.RIGHT:
        if isinstance(expr, (ast.Or, ast.And)):
            first = expr.left
        elif isinstance(expr, ast.Not):
            first = expr.operand
        else:
            return None
        found = _search(first, predicate, after.rest() if head is Step.LEFT else None)
        if found is not None:
            return found.prefixed(Step.LEFT)

    if isinstance(expr, (ast.Or, ast.And)):
        found = _search(
            expr.right, predicate, after.rest() if head is Step.RIGHT else None
        )
        if found is not None:
            return found.prefixed(Step.RIGHT)

    return None


def enumerate_matches(root: ast.Expr, predicate: Predicate) -> Iterator[Path]:
    """Yield every position where ``predicate`` holds, in search order.

    Each position is obtained by resuming the search right after the
    previous one, starting from NO_PATH.
    """
    path = find_next(root, predicate, NO_PATH)
    while path is not None:
        yield path
        path = find_next(root, predicate, path)


def subexpression_at(root: ast.Expr, path: Path) -> Optional[ast.Expr]:
    """Return the node addressed by ``path``, or None if it does not exist."""
    node = root
    for step in path.steps:
        if step is Step.STOP:
            return node
        if step is Step.LEFT and isinstance(node, (ast.Or, ast.And)):
            node = node.left
        elif step is Step.LEFT and isinstance(node, ast.Not):
            node = node.operand
        elif step is Step.RIGHT and isinstance(node, (ast.Or, ast.And)):
            node = node.right
        else:
            return None
    return node
