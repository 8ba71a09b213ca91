# rewrite/catalog.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Ordered rule catalogs used by the derivation search

"""Rules and the three rule catalogs.

A rule is one usable direction of a law: the shape to search for, the
rewrite to apply at a match, and a display name such as
``"associativity disj (backward)"``. A catalog is an ordered, immutable
sequence of rules; the search tries them in catalog order.

Catalogs:
    BASIC_CATALOG: commutativity, associativity, distributivity,
        absorption and complementation
    EXTENDED_CATALOG: basic laws plus domination, double negation and
        negation of constants in both directions, and idempotence
    CNF_CATALOG: basic laws plus the rules that push negations inward
        (double negation, De Morgan) and fold constants
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from formula import ast_nodes as ast
from . import laws
from .apply import apply_at
from .laws import Law, Transform
from .path import Path, Predicate, find_next, enumerate_matches


@dataclass(frozen=True)
class Rule:
    """One direction of a law, ready for search and rewriting.

    Attributes:
        name: Display name of the rule
        pattern: Shape predicate locating places the rule applies to
        transform: Rewrite of a node matching the pattern
    """

    name: str
    pattern: Predicate
    transform: Transform

    @classmethod
    def forward(cls, law: Law) -> Rule:
        return cls(f"{law.name} (forward)", law.lhs, law.forward)

    @classmethod
    def backward(cls, law: Law) -> Rule:
        """Rule rewriting the right-hand side of ``law`` back to its left.

        Raises:
            ValueError: If the law has no backward direction
        """
        if not law.reversible:
            raise ValueError(f"Law '{law.name}' cannot be used backwards")
        return cls(f"{law.name} (backward)", law.rhs, law.backward)

    def search(self, expr: ast.Expr, after: Optional[Path] = None) -> Optional[Path]:
        """Next position after ``after`` where this rule applies."""
        return find_next(expr, self.pattern, after)

    def matches(self, expr: ast.Expr) -> Iterator[Path]:
        """All positions where this rule applies, in search order."""
        return enumerate_matches(expr, self.pattern)

    def apply(self, expr: ast.Expr, path: Path) -> ast.Expr:
        """Rewrite ``expr`` at ``path``.

        Raises:
            ValueError: If ``path`` does not address a node of ``expr``
        """
        result = apply_at(expr, path, self.transform)
        if result is None:
            raise ValueError(f"Path [{path}] does not address a node of {expr}")
        return result

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Catalog:
    """Named, ordered collection of rules.

    Attributes:
        name: Catalog name as used on the command line
        rules: Rules in the order the search tries them
    """

    name: str
    rules: Tuple[Rule, ...]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def rule(self, name: str) -> Rule:
        """Look up a rule by its display name.

        Raises:
            KeyError: If no rule of this catalog has that name
        """
        for rule in self.rules:
            if rule.name == name:
                return rule
        raise KeyError(f"No rule named '{name}' in catalog '{self.name}'")


# Commutativity is its own inverse, so only the forward rule is listed
_BASIC_RULES = (
    Rule.forward(laws.COMMUTATIVITY_DISJ),
    Rule.forward(laws.COMMUTATIVITY_CONJ),
    Rule.forward(laws.ASSOCIATIVITY_DISJ),
    Rule.backward(laws.ASSOCIATIVITY_DISJ),
    Rule.forward(laws.ASSOCIATIVITY_CONJ),
    Rule.backward(laws.ASSOCIATIVITY_CONJ),
    Rule.forward(laws.DISTRIBUTIVITY_DISJ),
    Rule.backward(laws.DISTRIBUTIVITY_DISJ),
    Rule.forward(laws.DISTRIBUTIVITY_CONJ),
    Rule.backward(laws.DISTRIBUTIVITY_CONJ),
    Rule.forward(laws.ABSORPTION_DISJ),
    Rule.forward(laws.ABSORPTION_CONJ),
    Rule.forward(laws.COMPLEMENTATION_DISJ),
    Rule.forward(laws.COMPLEMENTATION_CONJ),
)

BASIC_CATALOG = Catalog("basic", _BASIC_RULES)

EXTENDED_CATALOG = Catalog(
    "extended",
    _BASIC_RULES
    + (
        Rule.forward(laws.DOMINATION_CONJ),
        Rule.forward(laws.DOMINATION_DISJ),
        Rule.forward(laws.DOUBLE_NEGATION),
        Rule.backward(laws.DOUBLE_NEGATION),
        Rule.forward(laws.NEGATION_OF_FALSE),
        Rule.backward(laws.NEGATION_OF_FALSE),
        Rule.forward(laws.IDEMPOTENCE_CONJ),
    ),
)

CNF_CATALOG = Catalog(
    "cnf",
    _BASIC_RULES
    + (
        Rule.forward(laws.DOUBLE_NEGATION),
        Rule.forward(laws.DE_MORGAN_CONJ),
        Rule.forward(laws.DE_MORGAN_DISJ),
        Rule.forward(laws.DOMINATION_CONJ),
        Rule.forward(laws.DOMINATION_DISJ),
        Rule.forward(laws.NEGATION_OF_FALSE),
        Rule.forward(laws.IDEMPOTENCE_CONJ),
    ),
)

CATALOGS: Dict[str, Catalog] = {
    catalog.name: catalog for catalog in (BASIC_CATALOG, EXTENDED_CATALOG, CNF_CATALOG)
}


def get_catalog(name: str) -> Catalog:
    """Return the catalog registered under ``name``.

    Raises:
        KeyError: If there is no such catalog
    """
    try:
        return CATALOGS[name]
    except KeyError:
        raise KeyError(
            f"Unknown catalog '{name}' (choose from {', '.join(CATALOGS)})"
        ) from None
