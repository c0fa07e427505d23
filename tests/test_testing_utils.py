"""
Tests for complexity-radar testing utilities.

Verifies that the mock providers and fixtures work correctly.
"""

import asyncio
from datetime import datetime, timezone

import pytest

from complexity_radar.exceptions import NotFoundError
from complexity_radar.testing import (
    AsyncMockCommitProvider,
    MockCommitProvider,
    create_mock_commit,
    create_mock_detail,
    create_mock_diff_entry,
)
from complexity_radar.types.commits import CommitDetail, CommitSummary

SINCE = datetime(2023, 6, 1, tzinfo=timezone.utc)


class TestMockCommitProvider:
    """Tests for MockCommitProvider."""

    def test_default_responses(self) -> None:
        mock = MockCommitProvider()

        assert mock.list_commits_since("o", "r", SINCE) == []
        detail = mock.get_commit_detail(create_mock_commit(sha="unknown"))
        assert detail == CommitDetail(sha="unknown", files=[])

    def test_configured_commits(self) -> None:
        mock = MockCommitProvider()
        mock.configure_commits([
            create_mock_detail("c1", ["a.py"]),
            create_mock_detail("c2", None),
        ])

        commits = mock.list_commits_since("o", "r", SINCE)

        assert [c.sha for c in commits] == ["c1", "c2"]
        assert mock.get_commit_detail(commits[0]).files[0].filename == "a.py"
        assert mock.get_commit_detail(commits[1]).files is None

    def test_listing_filters_by_window(self) -> None:
        mock = MockCommitProvider()
        mock._listing.data = [
            create_mock_commit(sha="old", committed_at=datetime(2020, 1, 1, tzinfo=timezone.utc)),
            create_mock_commit(sha="new", committed_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
        ]

        assert [c.sha for c in mock.list_commits_since("o", "r", SINCE)] == ["new"]

    def test_configured_errors(self) -> None:
        mock = MockCommitProvider()
        mock.configure_commits([create_mock_detail("c1", ["a.py"])])
        mock.configure_detail("c1", error=NotFoundError("NOT_FOUND", "No commit found"))

        commit = mock.list_commits_since("o", "r", SINCE)[0]
        with pytest.raises(NotFoundError) as exc_info:
            mock.get_commit_detail(commit)

        assert exc_info.value.code == "NOT_FOUND"

    def test_call_tracking(self) -> None:
        mock = MockCommitProvider()
        mock.configure_commits([create_mock_detail("c1", ["a.py"])])

        for commit in mock.list_commits_since("o", "r", SINCE):
            mock.get_commit_detail(commit)
        mock.get_commit_detail(create_mock_commit(sha="c9"))

        assert mock.was_called("list_commits_since")
        assert mock.call_count("get_commit_detail") == 2
        assert len(mock.get_calls()) == 3
        assert mock.get_calls("list_commits_since")[0].args == ("o", "r", SINCE)

    def test_reset(self) -> None:
        mock = MockCommitProvider()
        mock.configure_commits([create_mock_detail("c1", ["a.py"])])
        mock.list_commits_since("o", "r", SINCE)

        mock.reset()

        assert not mock.was_called("list_commits_since")
        assert mock.list_commits_since("o", "r", SINCE) == []


class TestAsyncMockCommitProvider:
    """Tests for AsyncMockCommitProvider."""

    def test_same_configuration_api(self) -> None:
        mock = AsyncMockCommitProvider()
        mock.configure_commits([create_mock_detail("c1", ["a.py", "b.py"])])

        async def run() -> CommitDetail:
            commits = await mock.list_commits_since("o", "r", SINCE)
            return await mock.get_commit_detail(commits[0])

        detail = asyncio.run(run())

        assert [entry.filename for entry in detail.files] == ["a.py", "b.py"]
        assert mock.call_count("get_commit_detail") == 1


class TestHelpers:
    """Tests for factory helpers."""

    def test_create_mock_commit(self) -> None:
        commit = create_mock_commit(sha="abc", owner="octo", repo="radar")

        assert isinstance(commit, CommitSummary)
        assert commit.url == "https://api.github.com/repos/octo/radar/commits/abc"

    def test_create_mock_diff_entry(self) -> None:
        entry = create_mock_diff_entry("src/main.py", sha="abc")

        assert entry.filename == "src/main.py"
        assert entry.raw_url.endswith("/raw/abc/src/main.py")

    def test_fixtures(
        self,
        mock_provider_with_history: MockCommitProvider,
        sample_commit: CommitSummary,
        fixed_now: datetime,
    ) -> None:
        assert len(mock_provider_with_history.list_commits_since("o", "r", fixed_now)) == 5
        assert sample_commit.message == "Fix all the bugs"
        assert fixed_now.tzinfo is timezone.utc
