"""
complexity-radar main client.

Provides the primary interface for ranking a repository's most changed files.
"""

import os
from typing import Any

from complexity_radar.clients import CommitsClient
from complexity_radar.exceptions import ConfigurationError
from complexity_radar.radar import ChangeFrequencyAggregator
from complexity_radar.transport import HTTPTransport, RetryConfig
from complexity_radar.types.files import RankedResult


class RadarClient:
    """
    Main client for ranking frequently changed files.

    Example:
        ```python
        from complexity_radar import RadarClient

        # Create client with explicit configuration
        client = RadarClient(token="ghp_...")

        # Or create from environment variables
        client = RadarClient.from_env()

        top_files = client.get_top_changed_files(5, "octocat", "hello-world")
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
    ) -> None:
        """
        Initialize the client.

        Args:
            token: API token (None for anonymous, heavily rate-limited access)
            base_url: Base URL for API requests, e.g. a GitHub Enterprise
                      "https://github.example.com/api/v3" (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.commits = CommitsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "RadarClient":
        """
        Create a client from environment variables.

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
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def get_top_changed_files(self, limit: int, owner: str, repo: str) -> RankedResult:
        """
        Rank the repository's files changed in the last year.

        See ``ChangeFrequencyAggregator.get_top_changed_files``.
        """
        return ChangeFrequencyAggregator(self.commits).get_top_changed_files(
            limit, owner, repo
        )

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "RadarClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
