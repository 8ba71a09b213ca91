# rewrite/apply.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Rewriting an expression at an addressed subexpression

"""Application of a tree transform at one addressed node.

The rewritten tree is built from the root down along the path: every node
on the path is rebuilt around the rewritten child, and every sibling that
the path does not enter is deep-copied. The result shares no node with the
input tree.
"""

from typing import Optional

from formula import ast_nodes as ast
from formula.ast_nodes import copy_expr
from .laws import Transform
from .path import Path, Step


def apply_at(root: ast.Expr, path: Path, transform: Transform) -> Optional[ast.Expr]:
    """Replace the node at ``path`` by ``transform(node)``.

    Args:
        root: Expression to rewrite
        path: Address of the node to transform
        transform: Rewrite producing the replacement node

    Returns:
        The rewritten expression, or None if the path asks for a child
        that the node at that point does not have
    """
    return _apply(root, path.steps, 0, transform)


def _apply(expr: ast.Expr, steps, index: int, transform: Transform) -> Optional[ast.Expr]:
    step = steps[index]

    if step is Step.STOP:
        return transform(expr)

    if step is Step.LEFT:
        if isinstance(expr, ast.Not):
            inner = _apply(expr.operand, steps, index + 1, transform)
            return None if inner is None else ast.Not(inner)
        if not isinstance(expr, (ast.Or, ast.And)):
            return None
        left = _apply(expr.left, steps, index + 1, transform)
        if left is None:
            return None
        return type(expr)(left, copy_expr(expr.right))

    if not isinstance(expr, (ast.Or, ast.And)):
        return None
    right = _apply(expr.right, steps, index + 1, transform)
    if right is None:
        return None
    return type(expr)(copy_expr(expr.left), right)
