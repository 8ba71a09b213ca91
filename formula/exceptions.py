# formula/exceptions.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while turning formula text into
expression trees. Every failure carries the offending character (or the end
of input) and its position so that the batch driver can report it on the
line it came from.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input text does not conform to the formula grammar:
    an unexpected character, a missing closing parenthesis, or input left
    over after a complete formula.

    Attributes:
        position: Zero-based index of the offending character, or None when
            the error is not tied to one position (e.g. empty input)
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position
