"""
Change-frequency aggregation.

Counts, for every file of a repository, how many commits inside the trailing
analysis window touched it, and ranks the files by that count.
"""

import asyncio
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone

from complexity_radar.exceptions import ProviderUnavailableError
from complexity_radar.logging import get_logger, log_commit_skipped
from complexity_radar.provider import AsyncCommitProvider, CommitProvider
from complexity_radar.types.commits import CommitDetail, CommitSummary
from complexity_radar.types.files import FileChangeFrequency, FileIdentity, RankedResult

ANALYSIS_WINDOW = timedelta(days=365)
DEFAULT_MAX_CONCURRENCY = 8

_logger = get_logger("radar")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChangeAggregate:
    """
    Per-file commit counts, keyed by file name.

    The first identity seen for a name is kept; later entries for the same
    name only bump its count.
    """

    def __init__(self) -> None:
        self._files: dict[str, FileIdentity] = {}
        self._counts: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._counts)

    def add(self, file: FileIdentity) -> None:
        """Count one commit touching ``file``."""
        if file.name not in self._files:
            self._files[file.name] = file
            self._counts[file.name] = 0
        self._counts[file.name] += 1

    def add_commit(self, detail: CommitDetail) -> None:
        """Fold a commit's diff entries; each file counts once per commit."""
        if detail.files is None:
            return

        seen: set[str] = set()
        for entry in detail.files:
            if entry.filename in seen:
                continue
            seen.add(entry.filename)
            self.add(FileIdentity(name=entry.filename, source_url=entry.raw_url))

    def count(self, name: str) -> int:
        return self._counts.get(name, 0)

    def top(self, limit: int) -> RankedResult:
        """
        Return the ``limit`` most changed files.

        Sorted by change count descending, ties broken by name ascending.
        """
        ranked = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        return [
            FileChangeFrequency(file=self._files[name], change_count=count)
            for name, count in ranked[:limit]
        ]


def rank_changed_files(details: Iterable[CommitDetail], limit: int) -> RankedResult:
    """Aggregate already-fetched commit details and rank the files."""
    _check_limit(limit)
    aggregate = ChangeAggregate()
    for detail in details:
        aggregate.add_commit(detail)
    return aggregate.top(limit)


def _check_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")


class ChangeFrequencyAggregator:
    """
    Ranks a repository's files by how many commits touched them.

    Example:
        ```python
        from complexity_radar import RadarClient

        with RadarClient(token="...") as client:
            aggregator = ChangeFrequencyAggregator(client.commits)
            for row in aggregator.get_top_changed_files(5, "octocat", "hello-world"):
                print(row.name, row.change_count)
        ```
    """

    def __init__(
        self,
        provider: CommitProvider,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            provider: Source of commit summaries and details
            clock: Returns the current instant; the window ends here
        """
        self.provider = provider
        self.clock = clock

    def get_top_changed_files(self, limit: int, owner: str, repo: str) -> RankedResult:
        """
        Rank the files changed in the last year by number of commits.

        Args:
            limit: Maximum number of files to return
            owner: Repository owner
            repo: Repository name

        Returns:
            At most ``limit`` files, most frequently changed first

        Raises:
            ValueError: If limit is not a positive integer
            ProviderUnavailableError: If the commit listing fails
        """
        _check_limit(limit)
        since = self.clock() - ANALYSIS_WINDOW
        commits = self.provider.list_commits_since(owner, repo, since)
        _logger.info(f"Aggregating {len(commits)} commits of {owner}/{repo}")

        aggregate = ChangeAggregate()
        for commit in commits:
            try:
                detail = self.provider.get_commit_detail(commit)
            except ProviderUnavailableError as e:
                log_commit_skipped(commit.sha, e)
                continue
            aggregate.add_commit(detail)

        return aggregate.top(limit)


class AsyncChangeFrequencyAggregator:
    """
    Async variant of ChangeFrequencyAggregator.

    Commit details are fetched concurrently, at most ``max_concurrency`` at a
    time, and folded in listing order once every fetch has finished.
    """

    def __init__(
        self,
        provider: AsyncCommitProvider,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the async aggregator.

        Args:
            provider: Source of commit summaries and details
            max_concurrency: Maximum number of detail fetches in flight
            clock: Returns the current instant; the window ends here
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")
        self.provider = provider
        self.max_concurrency = max_concurrency
        self.clock = clock

    async def get_top_changed_files(
        self, limit: int, owner: str, repo: str
    ) -> RankedResult:
        """
        Rank the files changed in the last year by number of commits.

        Raises:
            ValueError: If limit is not a positive integer
            ProviderUnavailableError: If the commit listing fails
        """
        _check_limit(limit)
        since = self.clock() - ANALYSIS_WINDOW
        commits = await self.provider.list_commits_since(owner, repo, since)
        _logger.info(f"Aggregating {len(commits)} commits of {owner}/{repo}")

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def fetch(commit: CommitSummary) -> CommitDetail | None:
            async with semaphore:
                try:
                    return await self.provider.get_commit_detail(commit)
                except ProviderUnavailableError as e:
                    log_commit_skipped(commit.sha, e)
                    return None

        details = await asyncio.gather(*(fetch(commit) for commit in commits))
        return rank_changed_files(
            (detail for detail in details if detail is not None), limit
        )
