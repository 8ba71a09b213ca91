# tests/rewrite_tests/test_laws.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Test suite for law shape predicates and transforms

"""Test suite for the laws of propositional logic.

Covers which shapes each law recognizes, what its transforms produce, and
that every law usable in both directions undoes its own forward rewrite.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from formula import parse, to_text, equal_expr
from formula.ast_nodes import Or, And, Not, TrueConst, FalseConst, Var
from rewrite import ALL_LAWS, apply_at, enumerate_matches, subexpression_at
from rewrite import laws


# ── Generators ──────────────────────────────────────────────────────────────

variables = st.sampled_from("ab").map(Var)


@st.composite
def expressions(draw, max_depth=4):
    if max_depth == 0:
        return draw(st.one_of(variables, st.just(TrueConst()), st.just(FalseConst())))
    choice = draw(st.integers(min_value=0, max_value=5))
    if choice == 0:
        return draw(variables)
    elif choice == 1:
        return draw(st.sampled_from([TrueConst(), FalseConst()]))
    elif choice == 2:
        return Not(draw(expressions(max_depth=max_depth - 1)))
    node = Or if choice == 3 else And
    return node(
        draw(expressions(max_depth=max_depth - 1)),
        draw(expressions(max_depth=max_depth - 1)),
    )


REVERSIBLE_LAWS = [law for law in ALL_LAWS if law.reversible]


# ── Unit tests ───────────────────────────────────────────────────────────────


class TestLawShapes:

    LHS_CASES = [
        (laws.COMMUTATIVITY_DISJ, "a|b", True),
        (laws.COMMUTATIVITY_DISJ, "a&b", False),
        (laws.ASSOCIATIVITY_DISJ, "a|b|c", True),
        (laws.ASSOCIATIVITY_DISJ, "a|(b|c)", False),
        (laws.ASSOCIATIVITY_CONJ, "a&b&c", True),
        (laws.DISTRIBUTIVITY_DISJ, "a|b&c", True),
        (laws.DISTRIBUTIVITY_DISJ, "a&b|c", False),
        (laws.DISTRIBUTIVITY_CONJ, "a&(b|c)", True),
        (laws.ABSORPTION_DISJ, "a|a&b", True),
        (laws.ABSORPTION_CONJ, "a&(a|b)", True),
        (laws.ABSORPTION_CONJ, "a&(b|a)", False),
        (laws.COMPLEMENTATION_DISJ, "a|-a", True),
        (laws.COMPLEMENTATION_DISJ, "-a|a", False),
        (laws.COMPLEMENTATION_CONJ, "a&b&-(a&b)", True),
        (laws.DOMINATION_DISJ, "a|T", True),
        (laws.DOMINATION_DISJ, "T|a", False),
        (laws.DOMINATION_CONJ, "a&F", True),
        (laws.DOUBLE_NEGATION, "--a", True),
        (laws.DOUBLE_NEGATION, "-a", False),
        (laws.NEGATION_OF_FALSE, "-F", True),
        (laws.NEGATION_OF_FALSE, "-T", False),
        (laws.DE_MORGAN_DISJ, "-(a|b)", True),
        (laws.DE_MORGAN_CONJ, "-(a&b)", True),
        (laws.DE_MORGAN_CONJ, "-a&-b", False),
        (laws.IDEMPOTENCE_CONJ, "a&a", True),
        (laws.IDEMPOTENCE_CONJ, "a&b", False),
    ]

    @pytest.mark.parametrize("law, formula, expected", LHS_CASES)
    def test_left_hand_side_recognition(self, law, formula, expected):
        assert law.lhs(parse(formula)) is expected

    RHS_CASES = [
        (laws.ASSOCIATIVITY_DISJ, "a|(b|c)", True),
        (laws.ASSOCIATIVITY_DISJ, "a|b|c", False),
        (laws.DISTRIBUTIVITY_DISJ, "(a|b)&(a|c)", True),
        (laws.DISTRIBUTIVITY_DISJ, "(a|b)&(c|a)", False),
        (laws.DISTRIBUTIVITY_CONJ, "a&b|a&c", True),
        (laws.DISTRIBUTIVITY_CONJ, "a&b|c", False),
        (laws.COMPLEMENTATION_DISJ, "T", True),
        (laws.COMPLEMENTATION_CONJ, "F", True),
        (laws.NEGATION_OF_FALSE, "T", True),
        (laws.DOUBLE_NEGATION, "a", True),
    ]

    @pytest.mark.parametrize("law, formula, expected", RHS_CASES)
    def test_right_hand_side_recognition(self, law, formula, expected):
        assert law.rhs(parse(formula)) is expected

    FORWARD_CASES = [
        (laws.COMMUTATIVITY_DISJ, "a|b&c", "b&c|a"),
        (laws.COMMUTATIVITY_CONJ, "a&(b|c)", "(b|c)&a"),
        (laws.ASSOCIATIVITY_DISJ, "a|b|c", "a|(b|c)"),
        (laws.ASSOCIATIVITY_CONJ, "a&b&c", "a&(b&c)"),
        (laws.DISTRIBUTIVITY_DISJ, "a|b&c", "(a|b)&(a|c)"),
        (laws.DISTRIBUTIVITY_CONJ, "a&(b|c)", "a&b|a&c"),
        (laws.ABSORPTION_DISJ, "a|a&b", "a"),
        (laws.ABSORPTION_CONJ, "-a&(-a|b)", "-a"),
        (laws.COMPLEMENTATION_DISJ, "a&b|-(a&b)", "T"),
        (laws.COMPLEMENTATION_CONJ, "a&-a", "F"),
        (laws.DOMINATION_DISJ, "a|T", "T"),
        (laws.DOMINATION_CONJ, "a&F", "F"),
        (laws.DOUBLE_NEGATION, "--(a|b)", "a|b"),
        (laws.NEGATION_OF_FALSE, "-F", "T"),
        (laws.DE_MORGAN_DISJ, "-(a|b)", "-a&-b"),
        (laws.DE_MORGAN_CONJ, "-(a&-b)", "-a|--b"),
        (laws.IDEMPOTENCE_CONJ, "(a|b)&(a|b)", "a|b"),
    ]

    @pytest.mark.parametrize("law, formula, expected", FORWARD_CASES)
    def test_forward_transform(self, law, formula, expected):
        assert to_text(law.forward(parse(formula))) == expected

    BACKWARD_CASES = [
        (laws.ASSOCIATIVITY_DISJ, "a|(b|c)", "a|b|c"),
        (laws.ASSOCIATIVITY_CONJ, "a&(b&c)", "a&b&c"),
        (laws.DISTRIBUTIVITY_DISJ, "(a|b)&(a|c)", "a|b&c"),
        (laws.DISTRIBUTIVITY_CONJ, "a&b|a&c", "a&(b|c)"),
        (laws.DOUBLE_NEGATION, "a&b", "--(a&b)"),
        (laws.NEGATION_OF_FALSE, "T", "-F"),
    ]

    @pytest.mark.parametrize("law, formula, expected", BACKWARD_CASES)
    def test_backward_transform(self, law, formula, expected):
        assert to_text(law.backward(parse(formula))) == expected

    def test_one_directional_laws(self):
        one_way = {law.name for law in ALL_LAWS if not law.reversible}
        assert one_way == {
            "absorption disj",
            "absorption conj",
            "complementation disj",
            "complementation conj",
            "domination disj",
            "domination conj",
            "de morgan disj",
            "de morgan conj",
            "idempotence conj",
        }

    def test_transforms_do_not_share_nodes(self):
        original = parse("a|b&c")
        result = laws.DISTRIBUTIVITY_DISJ.forward(original)
        assert result.left.left is not original.left
        assert result.right.left is not original.left
        assert result.left.left is not result.right.left


# ── Property-based tests ─────────────────────────────────────────────────────


class TestRewriteSoundness:

    @pytest.mark.parametrize("law", REVERSIBLE_LAWS, ids=lambda law: law.name)
    @given(expr=expressions())
    def test_backward_undoes_forward(self, law, expr):
        """Forward then backward at the same position gives back the original."""
        for path in enumerate_matches(expr, law.lhs):
            rewritten = apply_at(expr, path, law.forward)
            restored = apply_at(rewritten, path, law.backward)
            assert equal_expr(restored, expr)

    @pytest.mark.parametrize(
        "law", [law for law in ALL_LAWS if law.rhs is not None], ids=lambda law: law.name
    )
    @given(expr=expressions())
    def test_forward_result_has_right_hand_shape(self, law, expr):
        for path in enumerate_matches(expr, law.lhs):
            assert law.rhs(law.forward(subexpression_at(expr, path)))
