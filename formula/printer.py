# formula/printer.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Precedence-aware rendering of expression trees as formula text

"""Render expression trees back into the formula surface syntax.

The printer emits the smallest amount of brackets the grammar needs:

- a disjunction that is a direct operand of a conjunction is bracketed,
  since ``&`` binds tighter than ``|``;
- a disjunction or conjunction under a negation is bracketed, since ``-``
  binds tightest;
- a right operand that uses the same connective as its parent is bracketed,
  since both connectives parse left-associatively (``a|(b|c)`` must not
  come out as ``a|b|c``).

Everything else is printed without brackets, which makes
``parse(to_text(e)) == e`` hold for every tree.
"""

from . import ast_nodes as ast


class _Printer(ast.Visitor):
    """Visitor producing formula text for one node and its subtree.

    Attributes:
        _in_conj: Whether the node being printed is a direct operand of a
            conjunction
    """

    def __init__(self, in_conj: bool = False):
        self._in_conj = in_conj

    def visit_or(self, n: ast.Or) -> str:
        right = _render(n.right, False)
        if isinstance(n.right, ast.Or):
            right = f"({right})"
        text = f"{_render(n.left, False)}|{right}"
        return f"({text})" if self._in_conj else text

    def visit_and(self, n: ast.And) -> str:
        right = _render(n.right, True)
        if isinstance(n.right, ast.And):
            right = f"({right})"
        return f"{_render(n.left, True)}&{right}"

    def visit_not(self, n: ast.Not) -> str:
        if ast.is_binary(n.operand):
            return f"-({_render(n.operand, False)})"
        return f"-{_render(n.operand, False)}"

    def visit_true(self, n: ast.TrueConst) -> str:
        return "T"

    def visit_false(self, n: ast.FalseConst) -> str:
        return "F"

    def visit_var(self, n: ast.Var) -> str:
        return n.name


_PRINTERS = {False: _Printer(False), True: _Printer(True)}


def _render(expr: ast.Expr, in_conj: bool) -> str:
    return expr.accept(_PRINTERS[in_conj])


def to_text(expr: ast.Expr) -> str:
    """Render an expression as formula text.

    Args:
        expr: Expression to print

    Returns:
        Formula text that parses back into an equal expression

    Example:
        >>> to_text(And(Or(Var("a"), Var("b")), Not(Var("c"))))
        '(a|b)&-c'
    """
    return _render(expr, False)
