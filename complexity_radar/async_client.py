"""
complexity-radar async client.

Provides the async interface for ranking a repository's most changed files.
"""

import os
from typing import Any

from complexity_radar.async_clients import AsyncCommitsClient
from complexity_radar.async_transport import AsyncHTTPTransport
from complexity_radar.exceptions import ConfigurationError
from complexity_radar.radar import DEFAULT_MAX_CONCURRENCY, AsyncChangeFrequencyAggregator
from complexity_radar.transport import RetryConfig
from complexity_radar.types.files import RankedResult


class AsyncRadarClient:
    """
    Async client for ranking frequently changed files.

    Commit details are fetched concurrently, up to ``max_concurrency`` at a time.

    Example:
        ```python
        import asyncio
        from complexity_radar import AsyncRadarClient

        async def main():
            async with AsyncRadarClient(token="ghp_...") as client:
                top_files = await client.get_top_changed_files(5, "octocat", "hello-world")

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        """
        Initialize the async client.

        Args:
            token: API token (None for anonymous, heavily rate-limited access)
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            max_concurrency: Maximum number of commit detail fetches in flight
        """
        self.base_url = base_url
        self.timeout = timeout
        self.max_concurrency = max_concurrency

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.commits = AsyncCommitsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> "AsyncRadarClient":
        """
        Create an async client from environment variables.

        Environment variables:
            GITHUB_TOKEN: API token (required)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If GITHUB_TOKEN is not set
        """
        token = os.environ.get("GITHUB_TOKEN")
        base_url = os.environ.get("GITHUB_API_URL", cls.DEFAULT_BASE_URL)

        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable not set")

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            max_concurrency=max_concurrency,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def get_top_changed_files(
        self, limit: int, owner: str, repo: str
    ) -> RankedResult:
        """
        Rank the repository's files changed in the last year.

        See ``AsyncChangeFrequencyAggregator.get_top_changed_files``.
        """
        aggregator = AsyncChangeFrequencyAggregator(
            self.commits, max_concurrency=self.max_concurrency
        )
        return await aggregator.get_top_changed_files(limit, owner, repo)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncRadarClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
