# rewrite/__init__.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Subexpression addressing, law catalog and rewrite application

"""Rewriting of propositional formulas with the laws of logic.

This package finds the places inside a formula where a law applies and
performs the rewrite at one such place.

Core Components:
    Path, Step, NO_PATH: Gorn addresses of subexpressions
    find_next: Ordered search for the next node of a given shape
    apply_at: Rewrite a formula at an addressed node
    Law: A law as a pair of shape predicates plus its transforms
    Rule, Catalog: Searchable law directions, grouped in ordered catalogs

Example:
    >>> from formula import parse
    >>> from rewrite import BASIC_CATALOG
    >>> rule = BASIC_CATALOG.rule("complementation disj (forward)")
    >>> tree = parse("a&b|-(a&b)")
    >>> str(rule.apply(tree, rule.search(tree)))
    'T'
"""

from .path import Path, Step, NO_PATH, find_next, enumerate_matches, subexpression_at
from .laws import Law, ALL_LAWS
from .apply import apply_at
from .catalog import (
    Rule,
    Catalog,
    BASIC_CATALOG,
    EXTENDED_CATALOG,
    CNF_CATALOG,
    CATALOGS,
    get_catalog,
)

__all__ = [
    "Path",
    "Step",
    "NO_PATH",
    "find_next",
    "enumerate_matches",
    "subexpression_at",
    "Law",
    "ALL_LAWS",
    "apply_at",
    "Rule",
    "Catalog",
    "BASIC_CATALOG",
    "EXTENDED_CATALOG",
    "CNF_CATALOG",
    "CATALOGS",
    "get_catalog",
]
