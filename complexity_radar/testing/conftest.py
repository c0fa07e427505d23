"""
Pytest plugin for complexity-radar testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["complexity_radar.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from complexity_radar.testing.fixtures import (
    async_mock_provider,
    fixed_now,
    mock_provider,
    mock_provider_with_history,
    sample_commit,
    sample_history,
    sample_ranking,
)

__all__ = [
    "mock_provider",
    "async_mock_provider",
    "fixed_now",
    "sample_commit",
    "sample_history",
    "sample_ranking",
    "mock_provider_with_history",
]
