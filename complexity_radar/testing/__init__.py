"""complexity-radar testing utilities.

Provides mock commit providers and fixtures for testing code that ranks
changed files.
"""

from complexity_radar.testing.fixtures import (
    create_mock_commit,
    create_mock_detail,
    create_mock_diff_entry,
)
from complexity_radar.testing.mock import (
    AsyncMockCommitProvider,
    MockCall,
    MockCommitProvider,
    MockResponse,
)

__all__ = [
    # Mock providers
    "MockCommitProvider",
    "AsyncMockCommitProvider",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_commit",
    "create_mock_detail",
    "create_mock_diff_entry",
]
