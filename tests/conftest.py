"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from application.services.github_service_factory import reset_github_service  # noqa: E402


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _reset_shared_service():
    """Each test starts without the process-wide service and caches."""
    reset_github_service()
    yield
    reset_github_service()
