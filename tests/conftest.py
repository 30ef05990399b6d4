"""
Pytest configuration and shared fixtures for ees tests.
"""

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ees import make_error, make_wrapped_error  # noqa: E402


# =============================================================================
# Error Fixtures
# =============================================================================


@pytest.fixture
def io_error() -> OSError:
    """A depth-1 platform error."""
    return PermissionError("oh no")


@pytest.fixture
def make_chain() -> Callable[..., BaseException]:
    """Factory building a chain of the given depth, outermost first.

    ``make_chain("a", "b", "c")`` gives ``a`` caused by ``b`` caused by ``c``.
    """

    def _make_chain(*messages: str) -> BaseException:
        *outer, innermost = messages
        error: BaseException = make_error(innermost)
        for message in reversed(outer):
            error = make_wrapped_error(error, message)
        return error

    return _make_chain


# =============================================================================
# Output Fixtures
# =============================================================================


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream for report output."""
    return io.StringIO()


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
