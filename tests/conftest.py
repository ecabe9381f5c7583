import pytest
import os
import sys

# Add project root to path to ensure imports work correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import after setting up the path
from conditional import Conditional


@pytest.fixture
def present():
    """A Conditional holding the string "string"."""
    return Conditional.of("string")


@pytest.fixture
def absent():
    """An empty Conditional."""
    return Conditional.empty()


@pytest.fixture
def explode():
    """A callable that fails the test if it is ever invoked."""
    def _explode(*args, **kwargs):
        pytest.fail(f"callable must not be invoked (got args={args!r})")
    return _explode

