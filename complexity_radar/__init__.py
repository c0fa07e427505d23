"""complexity-radar - rank a repository's most frequently changed files."""

from complexity_radar.async_client import AsyncRadarClient
from complexity_radar.client import RadarClient
from complexity_radar.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    ProviderUnavailableError,
    RadarError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from complexity_radar.logging import configure_logging, get_logger
from complexity_radar.provider import AsyncCommitProvider, CommitProvider
from complexity_radar.radar import (
    ANALYSIS_WINDOW,
    AsyncChangeFrequencyAggregator,
    ChangeAggregate,
    ChangeFrequencyAggregator,
    rank_changed_files,
)
from complexity_radar.transport import HTTPTransport, RetryConfig
from complexity_radar.types import (
    CommitDetail,
    CommitSummary,
    DiffEntry,
    FileChangeFrequency,
    FileIdentity,
    RankedResult,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "RadarClient",
    "AsyncRadarClient",
    # Aggregation
    "ANALYSIS_WINDOW",
    "ChangeAggregate",
    "ChangeFrequencyAggregator",
    "AsyncChangeFrequencyAggregator",
    "rank_changed_files",
    # Providers
    "CommitProvider",
    "AsyncCommitProvider",
    # Types
    "CommitSummary",
    "CommitDetail",
    "DiffEntry",
    "FileIdentity",
    "FileChangeFrequency",
    "RankedResult",
    # Exceptions
    "RadarError",
    "ConfigurationError",
    "ProviderUnavailableError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
