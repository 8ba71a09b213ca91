# formula/__init__.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Expression model, parsing and printing of propositional formulas

"""Propositional formula model, parser and printer.

This package provides the immutable expression tree that the rewrite engine
works on, together with the text surface used to read and show formulas.

Core Functions:
    parse: Converts formula strings into expression trees
    to_text: Renders expression trees back into formula strings
    copy_expr: Deep copy of an expression tree
    equal_expr: Structural equality of two expression trees

Surface Syntax:
    - Single lowercase letters are variables, ``T`` and ``F`` are constants
    - ``-`` negation (binds tightest), ``&`` conjunction, ``|`` disjunction
    - Both binary operators are left-associative
    - Parentheses for grouping

Example:
    >>> from formula import parse, to_text
    >>> to_text(parse("(a|b)&-(c&d)"))
    '(a|b)&-(c&d)'
"""

from .ast_nodes import (
    Expr,
    Or,
    And,
    Not,
    TrueConst,
    FalseConst,
    Var,
    copy_expr,
    equal_expr,
)
from .exceptions import ParseError
from .grammar import _FormulaParser
from .printer import to_text
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse a formula string into an expression tree.

    Uses a fresh parser instance for each invocation so that no state is
    carried over from earlier inputs.

    Args:
        source: Formula string to parse

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula text is empty or malformed

    Example:
        >>> parse("a|b|c")
        Or(left=Or(left=Var(name='a'), right=Var(name='b')), right=Var(name='c'))
    """
    logger = get_logger()
    parser = _FormulaParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "Expr",
    "Or",
    "And",
    "Not",
    "TrueConst",
    "FalseConst",
    "Var",
    "copy_expr",
    "equal_expr",
    "parse",
    "to_text",
    "ParseError",
]
