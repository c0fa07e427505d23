"""Commits resource client."""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from complexity_radar.exceptions import ValidationError
from complexity_radar.provider import CommitProvider
from complexity_radar.types.commits import CommitDetail, CommitSummary, DiffEntry

if TYPE_CHECKING:
    from complexity_radar.transport import HTTPTransport

PER_PAGE = 100


def format_since(since: datetime) -> str:
    """Format a window start as the ISO-8601 UTC timestamp the API expects."""
    return since.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_commit_summary(data: dict[str, Any]) -> CommitSummary:
    """Parse one item of the commit listing."""
    try:
        commit = data.get("commit") or {}
        committer = commit.get("committer") or commit.get("author") or {}
        return CommitSummary(
            sha=data["sha"],
            url=data["url"],
            message=commit.get("message", ""),
            committed_at=_parse_timestamp(committer.get("date")),
        )
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise ValidationError("MALFORMED_RESPONSE", f"Invalid commit summary: {e!r}") from e


def parse_diff_entry(data: dict[str, Any]) -> DiffEntry:
    """Parse one entry of a commit's ``files`` array."""
    filename = data["filename"]
    if not isinstance(filename, str):
        raise ValidationError(
            "MALFORMED_RESPONSE", f"Invalid diff entry filename: {filename!r}"
        )
    return DiffEntry(
        filename=filename,
        raw_url=data.get("raw_url") or "",
        status=data.get("status", "modified"),
        additions=data.get("additions", 0),
        deletions=data.get("deletions", 0),
        changes=data.get("changes", 0),
        previous_filename=data.get("previous_filename"),
    )


def parse_commit_detail(data: dict[str, Any]) -> CommitDetail:
    """Parse a single-commit response; ``files`` stays None when absent."""
    try:
        files = data.get("files")
        return CommitDetail(
            sha=data["sha"],
            files=None if files is None else [parse_diff_entry(f) for f in files],
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ValidationError("MALFORMED_RESPONSE", f"Invalid commit detail: {e!r}") from e


class CommitsClient(CommitProvider):
    """Client for commit-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the commits client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_commits_since(
        self, owner: str, repo: str, since: datetime
    ) -> list[CommitSummary]:
        """
        List every commit of a repository at or after ``since``.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            since: Start of the time window

        Returns:
            Commit summaries, newest first, across all pages

        Raises:
            NotFoundError: If the repository does not exist
            AuthenticationError: If the token is rejected
            RateLimitedError: If the rate limit is exhausted
        """
        items = self.transport.paginate(
            f"/repos/{owner}/{repo}/commits",
            params={"since": format_since(since), "per_page": PER_PAGE},
        )
        return [parse_commit_summary(item) for item in items]

    def get_commit_detail(self, commit: CommitSummary) -> CommitDetail:
        """
        Fetch a commit's diff entries.

        Args:
            commit: A summary returned by ``list_commits_since``

        Returns:
            CommitDetail with the commit's changed files

        Raises:
            ProviderUnavailableError: If the fetch fails or the payload is malformed
        """
        data = self.transport.request("GET", commit.url)
        return parse_commit_detail(data)
