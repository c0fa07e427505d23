"""
Commit providers.

A provider lists a repository's commits inside a time window and resolves each
listed commit to its diff entries. The forge resource clients implement these
interfaces; tests substitute the mocks from ``complexity_radar.testing``.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from complexity_radar.types.commits import CommitDetail, CommitSummary


class CommitProvider(ABC):
    """Abstract base class for blocking commit sources."""

    @abstractmethod
    def list_commits_since(
        self, owner: str, repo: str, since: datetime
    ) -> list[CommitSummary]:
        """Return every commit of ``owner/repo`` at or after ``since``."""
        pass

    @abstractmethod
    def get_commit_detail(self, commit: CommitSummary) -> CommitDetail:
        """Resolve a listed commit to its diff entries."""
        pass


class AsyncCommitProvider(ABC):
    """Abstract base class for asyncio commit sources."""

    @abstractmethod
    async def list_commits_since(
        self, owner: str, repo: str, since: datetime
    ) -> list[CommitSummary]:
        """Return every commit of ``owner/repo`` at or after ``since``."""
        pass

    @abstractmethod
    async def get_commit_detail(self, commit: CommitSummary) -> CommitDetail:
        """Resolve a listed commit to its diff entries."""
        pass
