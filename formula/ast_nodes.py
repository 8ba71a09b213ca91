# formula/ast_nodes.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Expression tree classes for propositional formula representation

"""Expression tree classes for representing propositional formulas.

This module defines immutable and hashable node classes used to build tree
representations of propositional formulas. The tree is a closed sum over six
variants: two binary connectives, negation, the two constants and variables.

Node Types:
    Or, And: Binary disjunction and conjunction
    Not: Negation of a single operand
    TrueConst, FalseConst: The constants T and F
    Var: Propositional variable named by one lowercase letter

Equality is structural: two trees are equal when they have the same shape,
the same connectives and the same variable names at the same places. It is
not semantic, so ``a|b`` and ``b|a`` are different trees.

All nodes support the visitor design pattern for traversal and copying.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol


class Visitor(Protocol):
    """Interface for expression visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each of the six
    node variants.
    """

    def visit_or(self, n: Or): ...

    def visit_and(self, n: And): ...

    def visit_not(self, n: Not): ...

    def visit_true(self, n: TrueConst): ...

    def visit_false(self, n: FalseConst): ...

    def visit_var(self, n: Var): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Provides the foundation for immutable expression trees with visitor
    pattern support. The string form of every node is its formula text as
    produced by the printer, so ``str(parse(s))`` reads like ``s``.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        # The printer module is built on these node classes, so it can only
        # be imported once this module has finished loading
        from .printer import to_text

        return to_text(self)


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Disjunction of two expressions.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Conjunction of two expressions.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Negation of a single expression.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class TrueConst(Expr):
    """The constant T. The target of every derivation."""

    def accept(self, v: Visitor):
        return v.visit_true(self)


@dataclass(frozen=True, slots=True)
class FalseConst(Expr):
    """The constant F."""

    def accept(self, v: Visitor):
        return v.visit_false(self)


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Propositional variable.

    Attributes:
        name: A single lowercase letter

    Raises:
        ValueError: If the name is not one of ``a`` .. ``z``
    """

    name: str

    def __post_init__(self):
        if len(self.name) != 1 or not ("a" <= self.name <= "z"):
            raise ValueError(f"Variable name must be one lowercase letter, got {self.name!r}")

    def accept(self, v: Visitor):
        return v.visit_var(self)


class _Copier:
    """Visitor that rebuilds every node of a tree."""

    def visit_or(self, n: Or) -> Or:
        return Or(n.left.accept(self), n.right.accept(self))

    def visit_and(self, n: And) -> And:
        return And(n.left.accept(self), n.right.accept(self))

    def visit_not(self, n: Not) -> Not:
        return Not(n.operand.accept(self))

    def visit_true(self, n: TrueConst) -> TrueConst:
        return TrueConst()

    def visit_false(self, n: FalseConst) -> FalseConst:
        return FalseConst()

    def visit_var(self, n: Var) -> Var:
        return Var(n.name)


_COPIER = _Copier()


def copy_expr(expr: Expr) -> Expr:
    """Make a deep copy of an expression.

    The copy is structurally equal to the original and shares no node
    object with it.

    Args:
        expr: Expression to copy

    Returns:
        Freshly built expression tree
    """
    return expr.accept(_COPIER)


def equal_expr(expr1: Expr, expr2: Expr) -> bool:
    """Structural equality of two expressions.

    Same variant, pairwise equal children and, for variables, the same name.
    The generated dataclass ``__eq__`` already compares exactly that.
    """
    return expr1 == expr2


def is_binary(expr: Expr) -> bool:
    """Whether the node is a disjunction or a conjunction."""
    return isinstance(expr, (Or, And))
