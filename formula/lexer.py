# formula/lexer.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Lexical analyzer for formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module splits formula text into tokens for the parser. The surface
syntax is deliberately small: single-letter variables, two constants, three
connectives and parentheses.

Supported Tokens:
- Operators: -, &, |, (, )
- Constants: T, F
- Variables: one lowercase letter each

Whitespace is not part of the syntax and is reported like any other
unexpected character.
"""

from sly import Lexer

from .exceptions import ParseError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for formula tokenization.

    Attributes:
        tokens: Set of valid token types
    """

    tokens = {
        "VAR",
        "TRUE",
        "FALSE",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    NOT = r"-"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    TRUE = r"T"
    FALSE = r"F"

    # Each letter is its own variable, so "ab" is two tokens
    VAR = r"[a-z]"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ParseError(
            f"Unexpected '{illegal_char}' at position {error_pos}", error_pos
        )
