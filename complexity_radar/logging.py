"""
complexity-radar logging utilities.

Provides configurable logging for HTTP requests/responses and aggregation runs.
Ensures no sensitive data (API tokens, authorization headers) is logged.
"""

import logging
import re
from typing import Any

# Create package-specific loggers
_radar_root_logger = logging.getLogger("complexity_radar")
_http_logger = logging.getLogger("complexity_radar.http")
_radar_logger = logging.getLogger("complexity_radar.radar")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_\-.]{8,}"), r"\1 [TOKEN_REDACTED]"),
    # GitHub token formats (classic and fine-grained)
    (re.compile(r"\bgh[pousr]_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

# Number of characters of a token shown at each end
_TOKEN_PREVIEW_LENGTH = 4


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    radar_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure complexity-radar logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        radar_level: Log level for aggregation runs (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from complexity_radar.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Configure main logger, replacing any handler from an earlier call
    _radar_root_logger.setLevel(level)
    for existing in list(_radar_root_logger.handlers):
        _radar_root_logger.removeHandler(existing)
    _radar_root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _radar_logger.setLevel(radar_level if radar_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a complexity-radar logger.

    Args:
        name: Logger name suffix (e.g., "http", "radar"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _radar_root_logger
    return logging.getLogger(f"complexity_radar.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces API tokens and authorization values with redacted placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def truncate_token(token: str) -> str:
    """
    Truncate a token for safe logging.

    Shows only the first and last few characters of a token.

    Args:
        token: Full token string

    Returns:
        Truncated token like "ghp_...wxyz"
    """
    if len(token) <= _TOKEN_PREVIEW_LENGTH * 4:
        return "[TOKEN_REDACTED]"

    return f"{token[:_TOKEN_PREVIEW_LENGTH]}...{token[-_TOKEN_PREVIEW_LENGTH:]}"


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, token, secret, password)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = {"authorization", "token", "secret", "password", "api_key"}

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_transport_created(base_url: str, token: str | None) -> None:
    """
    Log the target of a new transport at DEBUG level.

    Only a truncated preview of the token is written.

    Args:
        base_url: API base URL
        token: API token, if any
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    credential = truncate_token(token) if token else "no token"
    _http_logger.debug(f"Transport for {base_url} using {credential}")


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if params:
        safe_params = safe_log_dict(params)
        log_parts.append(f"params={safe_params}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    rate_limit_remaining: str | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        elapsed_ms: Request duration in milliseconds (optional)
        rate_limit_remaining: Value of the X-RateLimit-Remaining header (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if rate_limit_remaining is not None:
        log_parts.append(f"rate_limit_remaining={rate_limit_remaining}")

    _http_logger.debug(" | ".join(log_parts))


def log_commit_skipped(sha: str, error: Exception) -> None:
    """
    Log a commit dropped from aggregation at DEBUG level.

    Args:
        sha: Commit SHA
        error: The failure that caused the commit to be skipped
    """
    if not _radar_logger.isEnabledFor(logging.DEBUG):
        return

    _radar_logger.debug(
        f"Skipping commit {sha[:12]}: {mask_sensitive_data(str(error))}"
    )


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "truncate_token",
    "safe_log_dict",
    "log_transport_created",
    "log_http_request",
    "log_http_response",
    "log_commit_skipped",
]
