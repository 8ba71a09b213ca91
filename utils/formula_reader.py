# utils/formula_reader.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Reader for plain-text files with one formula per line

from pathlib import Path
from typing import Iterator

from utils.logger import get_logger


class FormulaFileError(Exception):
    """Exception raised when a formula file cannot be read."""

    pass


def read_formulas(filepath: str) -> Iterator[str]:
    """Read formula lines from a text file.

    Lines are yielded as they are in the file (line breaks removed);
    blank lines are kept so that line numbers stay meaningful to callers.

    Expected format:
        a&b|-(a&b)
        (a|b)&-c

    Args:
        filepath: Path to the formula file

    Yields:
        str: One line of the file at a time

    Raises:
        FormulaFileError: If the file does not exist or cannot be decoded
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FormulaFileError(f"Formula file not found: {filepath}")

    logger.debug(f"Reading formula file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            for line in file:
                yield line.rstrip("\r\n")

    except OSError as e:
        raise FormulaFileError(f"Cannot open formula file: {filepath}: {e}") from e
    except UnicodeDecodeError as e:
        raise FormulaFileError(f"Formula file is not valid UTF-8: {filepath}: {e}") from e
