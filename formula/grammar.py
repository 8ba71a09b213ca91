# formula/grammar.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Formula grammar implementation using the SLY parser generator.

This module defines the grammar rules that build expression trees from the
token stream produced by the lexer.

Operator Precedence (lowest to highest):
- OR ('|'): left-associative
- AND ('&'): left-associative
- NOT ('-'): prefix, binds tightest
"""

from sly import Parser

from .lexer import FormulaLexer
from .ast_nodes import Expr, Or, And, Not, TrueConst, FalseConst, Var
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("atom")
    def expr(self, p) -> Expr:
        return p.atom

    @_("VAR")
    def atom(self, p) -> Expr:
        """Single-letter propositional variable."""
        return Var(p.VAR)

    @_("TRUE")
    def atom(self, p) -> Expr:
        return TrueConst()

    @_("FALSE")
    def atom(self, p) -> Expr:
        return FalseConst()

    def parse(self, text: str) -> Expr:
        """Parse formula text into an expression tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        if text == "":
            raise ParseError("Input formula is empty.")

        self._text_length = len(text)

        try:
            result = super().parse(FormulaLexer().tokenize(text))

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called by SLY when a token does not fit any grammar rule. Covers
        doubled operators, a stray ')' and input left over after a complete
        formula, as well as a formula that ends too early (e.g. a missing
        closing parenthesis).

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raises with character and position
        """
        if token:
            raise ParseError(
                f"Unexpected '{token.value}' at position {token.index}", token.index
            )

        raise ParseError(
            f"Unexpected end of formula at position {self._text_length}",
            self._text_length,
        )
