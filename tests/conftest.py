"""Pytest configuration and shared fixtures for video wall tests."""

from __future__ import annotations

import pytest
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from videowall.application.commands import CalculateWallCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def calculate_command() -> "CalculateWallCommand":
    """Create a CalculateWallCommand with default resolver and search."""
    from videowall.application import CalculateWallCommand

    return CalculateWallCommand()
