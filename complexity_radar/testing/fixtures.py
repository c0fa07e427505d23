"""
Pytest fixtures for complexity-radar testing.

Provides common fixtures and factory helpers for code that consumes commit
providers or change-frequency rankings.
"""

from datetime import datetime, timezone
from typing import Generator

import pytest

from complexity_radar.testing.mock import AsyncMockCommitProvider, MockCommitProvider
from complexity_radar.types.commits import CommitDetail, CommitSummary, DiffEntry
from complexity_radar.types.files import FileChangeFrequency, FileIdentity


# ============================================================================
# Factory Helpers
# ============================================================================


def create_mock_commit(
    sha: str = "0000000000000000000000000000000000000000",
    message: str = "Mock commit",
    committed_at: datetime | None = None,
    owner: str = "mock-owner",
    repo: str = "mock-repo",
) -> CommitSummary:
    """Create a CommitSummary with sensible defaults."""
    return CommitSummary(
        sha=sha,
        url=f"https://api.github.com/repos/{owner}/{repo}/commits/{sha}",
        message=message,
        committed_at=committed_at,
    )


def create_mock_diff_entry(
    filename: str,
    sha: str = "0000000000000000000000000000000000000000",
    status: str = "modified",
    raw_url: str | None = None,
) -> DiffEntry:
    """Create a DiffEntry whose raw_url points at ``filename`` in commit ``sha``."""
    return DiffEntry(
        filename=filename,
        raw_url=raw_url if raw_url is not None else f"https://github.com/mock-owner/mock-repo/raw/{sha}/{filename}",
        status=status,
        additions=1,
        deletions=0,
        changes=1,
    )


def create_mock_detail(sha: str, filenames: list[str] | None) -> CommitDetail:
    """Create a CommitDetail touching ``filenames`` (None for an unexpanded diff)."""
    if filenames is None:
        return CommitDetail(sha=sha, files=None)
    return CommitDetail(
        sha=sha,
        files=[create_mock_diff_entry(name, sha=sha) for name in filenames],
    )


# ============================================================================
# Mock Provider Fixtures
# ============================================================================


@pytest.fixture
def mock_provider() -> Generator[MockCommitProvider, None, None]:
    """
    Provide a MockCommitProvider for testing.

    Example:
        ```python
        def test_my_feature(mock_provider):
            mock_provider.configure_commits([create_mock_detail("c1", ["a.py"])])
            result = my_function(mock_provider)
            assert mock_provider.was_called("list_commits_since")
        ```
    """
    provider = MockCommitProvider()
    yield provider
    provider.reset()


@pytest.fixture
def async_mock_provider() -> Generator[AsyncMockCommitProvider, None, None]:
    """Provide an AsyncMockCommitProvider for testing."""
    provider = AsyncMockCommitProvider()
    yield provider
    provider.reset()


@pytest.fixture
def fixed_now() -> datetime:
    """Provide a fixed instant to use as the end of the analysis window."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_commit() -> CommitSummary:
    """Provide a sample CommitSummary object."""
    return create_mock_commit(
        sha="6dcb09b5b57875f334f61aebed695e2e4193db5e",
        message="Fix all the bugs",
        committed_at=datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_history() -> list[CommitDetail]:
    """
    Provide five commits: README.md in three, a.py in two, b.json in one.
    """
    return [
        create_mock_detail("c1", ["README.md", "a.py"]),
        create_mock_detail("c2", ["README.md"]),
        create_mock_detail("c3", ["README.md"]),
        create_mock_detail("c4", ["a.py"]),
        create_mock_detail("c5", ["b.json"]),
    ]


@pytest.fixture
def sample_ranking() -> list[FileChangeFrequency]:
    """Provide a sample ranking."""
    return [
        FileChangeFrequency(file=FileIdentity("README.md"), change_count=15),
        FileChangeFrequency(file=FileIdentity("generate-programs.py"), change_count=7),
        FileChangeFrequency(file=FileIdentity("LICENSE"), change_count=1),
    ]


@pytest.fixture
def mock_provider_with_history(
    mock_provider: MockCommitProvider,
    sample_history: list[CommitDetail],
) -> MockCommitProvider:
    """Provide a MockCommitProvider pre-configured with ``sample_history``."""
    mock_provider.configure_commits(sample_history)
    return mock_provider
