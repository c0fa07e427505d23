"""Shared fixtures for the complexity-radar test suite."""

from complexity_radar.testing.fixtures import (  # noqa: F401
    async_mock_provider,
    fixed_now,
    mock_provider,
    mock_provider_with_history,
    sample_commit,
    sample_history,
    sample_ranking,
)
