# tests/conftest.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Equiv test suite.

This module provides pytest configuration and fixtures shared by the
formula, rewrite and derivation tests. It ensures proper module path setup
and creates the project logger once per session, so that its handler is
bound to the session's output stream rather than to one test's capture.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import rewrite
        import derivation
        from utils.logger import get_logger
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    get_logger()

    yield


@pytest.fixture
def complementation_formula():
    """Formula that complementation turns into T in one step.

    Returns:
        str: ``X|-X`` with ``X = a&b``
    """
    return "a&b|-(a&b)"


@pytest.fixture
def stuck_formula():
    """Formula that no basic law reduces towards a constant.

    Returns:
        str: A chain of disjunctions of distinct variables
    """
    return "a|b|c"


@pytest.fixture
def formula_file(tmp_path):
    """Write a small formula file and return its path.

    Returns:
        Path: File with one formula per line, including a blank line
    """
    path = tmp_path / "formulas.txt"
    path.write_text("a&b|-(a&b)\n\na|b|c\n-a|a\n", encoding="utf-8")
    return path
