# tests/rewrite_tests/test_catalogs.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Test suite for rules and rule catalogs

"""Test suite for rules and the three rule catalogs."""

import pytest

from rewrite import (
    BASIC_CATALOG,
    CATALOGS,
    CNF_CATALOG,
    EXTENDED_CATALOG,
    Rule,
    get_catalog,
)
from rewrite import laws

BASIC_NAMES = (
    "commutative disj (forward)",
    "commutative conj (forward)",
    "associativity disj (forward)",
    "associativity disj (backward)",
    "associativity conj (forward)",
    "associativity conj (backward)",
    "distributivity disj (forward)",
    "distributivity disj (backward)",
    "distributivity conj (forward)",
    "distributivity conj (backward)",
    "absorption disj (forward)",
    "absorption conj (forward)",
    "complementation disj (forward)",
    "complementation conj (forward)",
)


class TestCatalogContents:

    def test_basic_catalog_order(self):
        assert BASIC_CATALOG.names == BASIC_NAMES
        assert len(BASIC_CATALOG) == 14

    def test_extended_catalog_order(self):
        assert len(EXTENDED_CATALOG) == 21
        assert EXTENDED_CATALOG.names[:14] == BASIC_NAMES
        assert EXTENDED_CATALOG.names[14:] == (
            "domination conj (forward)",
            "domination disj (forward)",
            "double negation (forward)",
            "double negation (backward)",
            "negation of constant -F (forward)",
            "negation of constant -F (backward)",
            "idempotence conj (forward)",
        )

    def test_cnf_catalog_order(self):
        assert len(CNF_CATALOG) == 21
        assert CNF_CATALOG.names[:14] == BASIC_NAMES
        assert CNF_CATALOG.names[14:] == (
            "double negation (forward)",
            "de morgan conj (forward)",
            "de morgan disj (forward)",
            "domination conj (forward)",
            "domination disj (forward)",
            "negation of constant -F (forward)",
            "idempotence conj (forward)",
        )

    def test_catalogs_are_immutable_sequences(self):
        assert isinstance(BASIC_CATALOG.rules, tuple)
        assert [rule.name for rule in BASIC_CATALOG] == list(BASIC_NAMES)
        assert BASIC_CATALOG[0].name == BASIC_NAMES[0]

    def test_rule_names_are_unique(self):
        for catalog in CATALOGS.values():
            assert len(set(catalog.names)) == len(catalog)


class TestCatalogLookup:

    @pytest.mark.parametrize("name", ["basic", "extended", "cnf"])
    def test_get_catalog(self, name):
        assert get_catalog(name).name == name
        assert get_catalog(name) is CATALOGS[name]

    def test_unknown_catalog(self):
        with pytest.raises(KeyError, match="Unknown catalog"):
            get_catalog("dnf")

    def test_rule_lookup(self):
        rule = BASIC_CATALOG.rule("absorption disj (forward)")
        assert rule.pattern is laws.ABSORPTION_DISJ.lhs
        assert str(rule) == "absorption disj (forward)"

    def test_unknown_rule(self):
        with pytest.raises(KeyError):
            BASIC_CATALOG.rule("double negation (forward)")


class TestRuleConstruction:

    def test_backward_rule_uses_right_hand_side(self):
        rule = Rule.backward(laws.ASSOCIATIVITY_CONJ)
        assert rule.name == "associativity conj (backward)"
        assert rule.pattern is laws.ASSOCIATIVITY_CONJ.rhs
        assert rule.transform is laws.ASSOCIATIVITY_CONJ.backward

    @pytest.mark.parametrize(
        "law",
        [laws.COMPLEMENTATION_DISJ, laws.ABSORPTION_CONJ, laws.DE_MORGAN_DISJ],
        ids=lambda law: law.name,
    )
    def test_one_directional_law_has_no_backward_rule(self, law):
        with pytest.raises(ValueError, match="cannot be used backwards"):
            Rule.backward(law)
