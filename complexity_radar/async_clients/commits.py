"""Async commits resource client."""

from datetime import datetime
from typing import TYPE_CHECKING

from complexity_radar.clients.commits import (
    PER_PAGE,
    format_since,
    parse_commit_detail,
    parse_commit_summary,
)
from complexity_radar.provider import AsyncCommitProvider
from complexity_radar.types.commits import CommitDetail, CommitSummary

if TYPE_CHECKING:
    from complexity_radar.async_transport import AsyncHTTPTransport


class AsyncCommitsClient(AsyncCommitProvider):
    """Async client for commit-related operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async commits client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list_commits_since(
        self, owner: str, repo: str, since: datetime
    ) -> list[CommitSummary]:
        """
        List every commit of a repository at or after ``since``.

        Returns:
            Commit summaries, newest first, across all pages
        """
        return [
            parse_commit_summary(item)
            async for item in self.transport.paginate(
                f"/repos/{owner}/{repo}/commits",
                params={"since": format_since(since), "per_page": PER_PAGE},
            )
        ]

    async def get_commit_detail(self, commit: CommitSummary) -> CommitDetail:
        """
        Fetch a commit's diff entries.

        Returns:
            CommitDetail with the commit's changed files
        """
        data = await self.transport.request("GET", commit.url)
        return parse_commit_detail(data)
