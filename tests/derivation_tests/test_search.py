# tests/derivation_tests/test_search.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Test suite for the bounded shortest-derivation search

"""Test suite for the bounded shortest-derivation search.

Worked examples for each catalog, the budget boundary, agreement between
the exhaustive and the memoized search, and minimality against an
independent breadth-first enumeration of rewrites.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from formula import parse, equal_expr
from formula.ast_nodes import Or, And, Not, TrueConst, FalseConst, Var
from rewrite import BASIC_CATALOG, CNF_CATALOG, EXTENDED_CATALOG
from derivation import DerivationSearch, NO_DERIVATION, search
from utils.logger import get_logger


# ── Generators ──────────────────────────────────────────────────────────────

variables = st.sampled_from("ab").map(Var)


@st.composite
def expressions(draw, max_depth=3):
    if max_depth == 0:
        return draw(st.one_of(variables, st.just(TrueConst()), st.just(FalseConst())))
    choice = draw(st.integers(min_value=0, max_value=4))
    if choice == 0:
        return draw(variables)
    elif choice == 1:
        return Not(draw(expressions(max_depth=max_depth - 1)))
    node = Or if choice in (2, 3) else And
    return node(
        draw(expressions(max_depth=max_depth - 1)),
        draw(expressions(max_depth=max_depth - 1)),
    )


def _breadth_first_steps(expr, max_steps, catalog):
    """Fewest rewrites to T found by expanding every formula level by level."""
    level = {expr}
    for steps in range(max_steps + 1):
        if TrueConst() in level:
            return steps
        level = {
            rule.apply(node, path)
            for node in level
            for rule in catalog
            for path in rule.matches(node)
        }
    return NO_DERIVATION


# ── Unit tests ───────────────────────────────────────────────────────────────


class TestWorkedExamples:

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_complementation_in_one_step(self, complementation_formula):
        expr = parse(complementation_formula)
        assert search(expr, 6, BASIC_CATALOG) == 1

    def test_complementation_in_one_step_memoized(self, complementation_formula):
        expr = parse(complementation_formula)
        assert search(expr, 6, BASIC_CATALOG, memoize=True) == 1

    def test_complementation_exhaustive_small_budget(self, complementation_formula):
        expr = parse(complementation_formula)
        assert search(expr, 2, BASIC_CATALOG) == 1

    def test_no_derivation_for_plain_disjunction(self, stuck_formula):
        assert search(parse(stuck_formula), 6, BASIC_CATALOG) == NO_DERIVATION

    SEARCH_CASES = [
        # (formula, depth, catalog, expected)
        ("T", 1, BASIC_CATALOG, 0),
        ("T", 0, BASIC_CATALOG, NO_DERIVATION),
        ("a|-a", 1, BASIC_CATALOG, NO_DERIVATION),
        ("a|-a", 2, BASIC_CATALOG, 1),
        ("-a|a", 2, BASIC_CATALOG, NO_DERIVATION),
        ("-a|a", 3, BASIC_CATALOG, 2),
        ("F", 4, BASIC_CATALOG, NO_DERIVATION),
        ("-F", 3, BASIC_CATALOG, NO_DERIVATION),
        ("a|T", 3, BASIC_CATALOG, NO_DERIVATION),
        ("c|(a|-a)", 2, BASIC_CATALOG, NO_DERIVATION),
        ("-F", 2, EXTENDED_CATALOG, 1),
        ("a|T", 2, EXTENDED_CATALOG, 1),
        ("a|-a", 2, EXTENDED_CATALOG, 1),
        ("-(a&-a)", 2, CNF_CATALOG, NO_DERIVATION),
        ("-(a&-a)", 3, CNF_CATALOG, 2),
        ("-F", 2, CNF_CATALOG, 1),
    ]

    @pytest.mark.parametrize("formula, depth, catalog, expected", SEARCH_CASES)
    def test_search_result(self, formula, depth, catalog, expected):
        """Test the minimal step count for one formula."""
        self.logger.debug(f"Searching {formula} with depth {depth} in {catalog.name}")
        assert search(parse(formula), depth, catalog) == expected

    def test_negative_budget_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            search(parse("a"), -1)

    def test_input_is_not_modified(self):
        expr = parse("-a|a")
        search(expr, 3, BASIC_CATALOG)
        assert equal_expr(expr, parse("-a|a"))


class TestSearchStatistics:

    def test_counters_reset_per_run(self):
        searcher = DerivationSearch(BASIC_CATALOG)

        searcher.run(parse("a|-a"), 2)
        first = searcher.stats.states
        searcher.run(parse("a|-a"), 2)

        assert first > 0
        assert searcher.stats.states == first

    def test_memoized_search_reuses_results(self, stuck_formula):
        searcher = DerivationSearch(BASIC_CATALOG, memoize=True)

        assert searcher.run(parse(stuck_formula), 5) == NO_DERIVATION
        assert searcher.stats.cache_hits > 0

    def test_memoization_visits_fewer_states(self, stuck_formula):
        plain = DerivationSearch(BASIC_CATALOG)
        cached = DerivationSearch(BASIC_CATALOG, memoize=True)

        plain.run(parse(stuck_formula), 5)
        cached.run(parse(stuck_formula), 5)

        assert cached.stats.rewrites < plain.stats.rewrites


# ── Property-based tests ─────────────────────────────────────────────────────


class TestSearchProperties:

    @settings(max_examples=40, deadline=None)
    @given(expressions(), st.sampled_from([BASIC_CATALOG, CNF_CATALOG]))
    def test_memoized_search_agrees_with_exhaustive(self, expr, catalog):
        assert search(expr, 3, catalog, memoize=True) == search(expr, 3, catalog)

    @settings(max_examples=40, deadline=None)
    @given(expressions())
    def test_result_is_global_minimum(self, expr):
        """search(e, d) equals the fewest rewrites of length <= d - 1."""
        expected = _breadth_first_steps(expr, 2, BASIC_CATALOG)
        assert search(expr, 3, BASIC_CATALOG) == expected

    @settings(max_examples=30, deadline=None)
    @given(expressions(max_depth=2))
    def test_larger_budget_never_worse(self, expr):
        shallow = search(expr, 2, CNF_CATALOG)
        deeper = search(expr, 3, CNF_CATALOG)
        if shallow != NO_DERIVATION:
            assert deeper == shallow
