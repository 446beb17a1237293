# tests/conftest.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the cnfold test suite.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
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
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import sat
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def complex_formula():
    """Provide a formula exercising every connective.

    Returns:
        Expression ¬((p ⇒ q) ∧ (r ⇔ s))
    """
    from sat import var, neg, conj, implies, equivalent

    return neg(
        conj(implies(var("p"), var("q")), equivalent(var("r"), var("s")))
    )
