# derivation/__init__.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Bounded derivation search public API

"""Bounded search for the shortest derivation of T.

This package answers one question about a formula: what is the smallest
number of law applications that rewrites it into the constant ``T``, using
a given rule catalog and staying within a depth budget?

Primary Components:
    search: Minimal step count, or NO_DERIVATION (-1)
    DerivationSearch: The search with its run statistics
    explain: One shortest derivation, step by step
    find_derivations_for_lines: Line-oriented batch driver

Example:
    >>> from formula import parse
    >>> from rewrite import BASIC_CATALOG
    >>> from derivation import search
    >>> search(parse("a&b|-(a&b)"), 6, BASIC_CATALOG)
    1
    >>> search(parse("a|b|c"), 6, BASIC_CATALOG)
    -1
"""

from .search import (
    DerivationSearch,
    SearchStats,
    search,
    NO_DERIVATION,
    DEFAULT_MAX_DEPTH,
)
from .explain import Derivation, DerivationStep, explain
from .runner import LineResult, find_derivations_for_lines, format_result

DEFAULT_CATALOG = "basic"

__all__ = [
    "DerivationSearch",
    "SearchStats",
    "search",
    "NO_DERIVATION",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_CATALOG",
    "Derivation",
    "DerivationStep",
    "explain",
    "LineResult",
    "find_derivations_for_lines",
    "format_result",
]

__version__ = "1.0.0"
__description__ = "Bounded shortest-derivation search for propositional formulas"
