# rewrite/laws.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Shape predicates and rewrites for the laws of propositional logic

"""The laws of propositional logic as shape tests and tree rewrites.

Every law is an equivalence ``lhs = rhs``. For each side there is a
predicate that recognizes a node of that shape, looking at most two levels
down and comparing designated subtrees for structural equality. The forward
transform turns a matching lhs node into the rhs; the backward transform, if
the law has one, goes the other way.

Laws that cannot be used backwards (e.g. ``A|-A = T``: from ``T`` alone there
is no telling what ``A`` was) have no backward transform.

Transforms always return freshly built trees: every subtree they reuse from
the matched node is copied with ``copy_expr``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from formula import ast_nodes as ast
from formula.ast_nodes import copy_expr, equal_expr
from .path import Predicate

Transform = Callable[[ast.Expr], ast.Expr]


@dataclass(frozen=True)
class Law:
    """One law of propositional logic.

    Attributes:
        name: Display name, e.g. "associativity disj"
        lhs: Predicate recognizing the left-hand side shape
        rhs: Predicate recognizing the right-hand side shape, if it has one
        forward: Rewrite from lhs to rhs
        backward: Rewrite from rhs to lhs, for laws usable in both directions
    """

    name: str
    lhs: Predicate
    rhs: Optional[Predicate]
    forward: Transform
    backward: Optional[Transform] = None

    @property
    def reversible(self) -> bool:
        return self.backward is not None and self.rhs is not None


def _any(expr: ast.Expr) -> bool:
    return True


def _is_true(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.TrueConst)


def _is_false(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.FalseConst)


# A|B = B|A and A&B = B&A

def _is_disj(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Or)


def _is_conj(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.And)


def _swap_disj(expr: ast.Or) -> ast.Expr:
    return ast.Or(copy_expr(expr.right), copy_expr(expr.left))


def _swap_conj(expr: ast.And) -> ast.Expr:
    return ast.And(copy_expr(expr.right), copy_expr(expr.left))


# (A|B)|C = A|(B|C)

def _is_assoc_disj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Or) and isinstance(expr.left, ast.Or)


def _is_assoc_disj_rhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Or) and isinstance(expr.right, ast.Or)


def _assoc_disj_forward(expr: ast.Or) -> ast.Expr:
    return ast.Or(
        copy_expr(expr.left.left),
        ast.Or(copy_expr(expr.left.right), copy_expr(expr.right)),
    )


def _assoc_disj_backward(expr: ast.Or) -> ast.Expr:
    return ast.Or(
        ast.Or(copy_expr(expr.left), copy_expr(expr.right.left)),
        copy_expr(expr.right.right),
    )


# (A&B)&C = A&(B&C)

def _is_assoc_conj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.And) and isinstance(expr.left, ast.And)


def _is_assoc_conj_rhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.And) and isinstance(expr.right, ast.And)


def _assoc_conj_forward(expr: ast.And) -> ast.Expr:
    return ast.And(
        copy_expr(expr.left.left),
        ast.And(copy_expr(expr.left.right), copy_expr(expr.right)),
    )


def _assoc_conj_backward(expr: ast.And) -> ast.Expr:
    return ast.And(
        ast.And(copy_expr(expr.left), copy_expr(expr.right.left)),
        copy_expr(expr.right.right),
    )


# A|(B&C) = (A|B)&(A|C)

def _is_distr_disj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Or) and isinstance(expr.right, ast.And)


def _is_distr_disj_rhs(expr: ast.Expr) -> bool:
    return (
        isinstance(expr, ast.And)
        and isinstance(expr.left, ast.Or)
        and isinstance(expr.right, ast.Or)
        and equal_expr(expr.left.left, expr.right.left)
    )


def _distr_disj_forward(expr: ast.Or) -> ast.Expr:
    return ast.And(
        ast.Or(copy_expr(expr.left), copy_expr(expr.right.left)),
        ast.Or(copy_expr(expr.left), copy_expr(expr.right.right)),
    )


def _distr_disj_backward(expr: ast.And) -> ast.Expr:
    return ast.Or(
        copy_expr(expr.left.left),
        ast.And(copy_expr(expr.left.right), copy_expr(expr.right.right)),
    )


# A&(B|C) = (A&B)|(A&C)

def _is_distr_conj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.And) and isinstance(expr.right, ast.Or)


def _is_distr_conj_rhs(expr: ast.Expr) -> bool:
    return (
        isinstance(expr, ast.Or)
        and isinstance(expr.left, ast.And)
        and isinstance(expr.right, ast.And)
        and equal_expr(expr.left.left, expr.right.left)
    )


def _distr_conj_forward(expr: ast.And) -> ast.Expr:
    return ast.Or(
        ast.And(copy_expr(expr.left), copy_expr(expr.right.left)),
        ast.And(copy_expr(expr.left), copy_expr(expr.right.right)),
    )


def _distr_conj_backward(expr: ast.Or) -> ast.Expr:
    return ast.And(
        copy_expr(expr.left.left),
        ast.Or(copy_expr(expr.left.right), copy_expr(expr.right.right)),
    )


# A|(A&B) = A and A&(A|B) = A

def _is_abs_disj_lhs(expr: ast.Expr) -> bool:
    return (
        isinstance(expr, ast.Or)
        and isinstance(expr.right, ast.And)
        and equal_expr(expr.left, expr.right.left)
    )


def _is_abs_conj_lhs(expr: ast.Expr) -> bool:
    return (
        isinstance(expr, ast.And)
        and isinstance(expr.right, ast.Or)
        and equal_expr(expr.left, expr.right.left)
    )


def _keep_left(expr: ast.Expr) -> ast.Expr:
    return copy_expr(expr.left)


# A|-A = T and A&-A = F

def _is_compl_disj_lhs(expr: ast.Expr) -> bool:
    return (
        isinstance(expr, ast.Or)
        and isinstance(expr.right, ast.Not)
        and equal_expr(expr.left, expr.right.operand)
    )


def _is_compl_conj_lhs(expr: ast.Expr) -> bool:
    return (
        isinstance(expr, ast.And)
        and isinstance(expr.right, ast.Not)
        and equal_expr(expr.left, expr.right.operand)
    )


def _to_true(expr: ast.Expr) -> ast.Expr:
    return ast.TrueConst()


def _to_false(expr: ast.Expr) -> ast.Expr:
    return ast.FalseConst()


# A|T = T and A&F = F

def _is_domi_disj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Or) and isinstance(expr.right, ast.TrueConst)


def _is_domi_conj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.And) and isinstance(expr.right, ast.FalseConst)


# --A = A

def _is_double_neg(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Not)


def _double_neg_forward(expr: ast.Not) -> ast.Expr:
    return copy_expr(expr.operand.operand)


def _double_neg_backward(expr: ast.Expr) -> ast.Expr:
    return ast.Not(ast.Not(copy_expr(expr)))


# -F = T

def _is_neg_false(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Not) and isinstance(expr.operand, ast.FalseConst)


def _neg_false_backward(expr: ast.Expr) -> ast.Expr:
    return ast.Not(ast.FalseConst())


# -(A|B) = -A&-B and -(A&B) = -A|-B

def _is_morgan_disj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Or)


def _is_morgan_conj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.Not) and isinstance(expr.operand, ast.And)


def _morgan_disj_forward(expr: ast.Not) -> ast.Expr:
    inner = expr.operand
    return ast.And(ast.Not(copy_expr(inner.left)), ast.Not(copy_expr(inner.right)))


def _morgan_conj_forward(expr: ast.Not) -> ast.Expr:
    inner = expr.operand
    return ast.Or(ast.Not(copy_expr(inner.left)), ast.Not(copy_expr(inner.right)))


# A&A = A

def _is_idemp_conj_lhs(expr: ast.Expr) -> bool:
    return isinstance(expr, ast.And) and equal_expr(expr.left, expr.right)


COMMUTATIVITY_DISJ = Law("commutative disj", _is_disj, _is_disj, _swap_disj, _swap_disj)
COMMUTATIVITY_CONJ = Law("commutative conj", _is_conj, _is_conj, _swap_conj, _swap_conj)

ASSOCIATIVITY_DISJ = Law(
    "associativity disj",
    _is_assoc_disj_lhs,
    _is_assoc_disj_rhs,
    _assoc_disj_forward,
    _assoc_disj_backward,
)
ASSOCIATIVITY_CONJ = Law(
    "associativity conj",
    _is_assoc_conj_lhs,
    _is_assoc_conj_rhs,
    _assoc_conj_forward,
    _assoc_conj_backward,
)

DISTRIBUTIVITY_DISJ = Law(
    "distributivity disj",
    _is_distr_disj_lhs,
    _is_distr_disj_rhs,
    _distr_disj_forward,
    _distr_disj_backward,
)
DISTRIBUTIVITY_CONJ = Law(
    "distributivity conj",
    _is_distr_conj_lhs,
    _is_distr_conj_rhs,
    _distr_conj_forward,
    _distr_conj_backward,
)

ABSORPTION_DISJ = Law("absorption disj", _is_abs_disj_lhs, _any, _keep_left)
ABSORPTION_CONJ = Law("absorption conj", _is_abs_conj_lhs, _any, _keep_left)

COMPLEMENTATION_DISJ = Law("complementation disj", _is_compl_disj_lhs, _is_true, _to_true)
COMPLEMENTATION_CONJ = Law("complementation conj", _is_compl_conj_lhs, _is_false, _to_false)

DOMINATION_DISJ = Law("domination disj", _is_domi_disj_lhs, _is_true, _to_true)
DOMINATION_CONJ = Law("domination conj", _is_domi_conj_lhs, _is_false, _to_false)

DOUBLE_NEGATION = Law(
    "double negation", _is_double_neg, _any, _double_neg_forward, _double_neg_backward
)

NEGATION_OF_FALSE = Law(
    "negation of constant -F", _is_neg_false, _is_true, _to_true, _neg_false_backward
)

DE_MORGAN_DISJ = Law("de morgan disj", _is_morgan_disj_lhs, None, _morgan_disj_forward)
DE_MORGAN_CONJ = Law("de morgan conj", _is_morgan_conj_lhs, None, _morgan_conj_forward)

IDEMPOTENCE_CONJ = Law("idempotence conj", _is_idemp_conj_lhs, None, _keep_left)

ALL_LAWS = (
    COMMUTATIVITY_DISJ,
    COMMUTATIVITY_CONJ,
    ASSOCIATIVITY_DISJ,
    ASSOCIATIVITY_CONJ,
    DISTRIBUTIVITY_DISJ,
    DISTRIBUTIVITY_CONJ,
    ABSORPTION_DISJ,
    ABSORPTION_CONJ,
    COMPLEMENTATION_DISJ,
    COMPLEMENTATION_CONJ,
    DOMINATION_DISJ,
    DOMINATION_CONJ,
    DOUBLE_NEGATION,
    NEGATION_OF_FALSE,
    DE_MORGAN_DISJ,
    DE_MORGAN_CONJ,
    IDEMPOTENCE_CONJ,
)
