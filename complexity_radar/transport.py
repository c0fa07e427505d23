"""
HTTP Transport for complexity-radar.

Handles HTTP communication with the forge API, with automatic retry logic,
pagination and error handling.
"""

import random
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx

from complexity_radar.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ProviderUnavailableError,
    RateLimitedError,
    RadarError,
    ServerError,
    ValidationError,
)
from complexity_radar.logging import (
    log_http_request,
    log_http_response,
    log_transport_created,
)

API_VERSION = "2022-11-28"
USER_AGENT = "complexity-radar/0.1.0"

_STATUS_CODES = {
    401: "BAD_CREDENTIALS",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    422: "UNPROCESSABLE_ENTITY",
    429: "RATE_LIMITED",
}


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503, 504])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


def build_headers(token: str | None) -> dict[str, str]:
    """Build the default request headers for the forge API."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def next_page_url(response: httpx.Response) -> str | None:
    """Return the URL of the next page from the Link header, if any."""
    return response.links.get("next", {}).get("url")


def decode_json(response: httpx.Response, url: str) -> Any:
    """
    Decode a successful response body.

    Raises:
        ValidationError: If the body is not JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise ValidationError(
            "MALFORMED_RESPONSE",
            f"Response from {url} is not JSON: {e}",
            response.headers.get("X-GitHub-Request-Id"),
        ) from e


def decode_page(response: httpx.Response, url: str) -> list[Any]:
    """
    Decode one page of a list endpoint.

    Raises:
        ValidationError: If the body is not a JSON array
    """
    data = decode_json(response, url)
    if not isinstance(data, list):
        raise ValidationError(
            "MALFORMED_RESPONSE",
            f"Expected a list page from {url}, got {type(data).__name__}",
            response.headers.get("X-GitHub-Request-Id"),
        )
    return data


def parse_error_response(response: httpx.Response) -> ProviderUnavailableError:
    """
    Parse an error response into a typed exception.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate ProviderUnavailableError subclass
    """
    try:
        data = response.json()
    except Exception:
        data = {}
    if not isinstance(data, dict):
        data = {}

    status_code = response.status_code
    code = _STATUS_CODES.get(status_code, f"HTTP_{status_code}")
    message = data.get("message") or f"HTTP {status_code}"
    request_id = response.headers.get("X-GitHub-Request-Id")

    rate_limit_exhausted = response.headers.get("X-RateLimit-Remaining") == "0"

    if status_code == 401:
        return AuthenticationError(code, message, request_id)
    elif status_code == 429 or (status_code == 403 and rate_limit_exhausted):
        return RateLimitedError(
            "RATE_LIMITED", message, _retry_after_seconds(response), request_id
        )
    elif status_code == 403:
        return AuthorizationError(code, message, request_id)
    elif status_code == 404:
        return NotFoundError(code, message, request_id)
    elif status_code >= 500:
        return ServerError(code, message, request_id)
    else:
        return ValidationError(code, message, request_id)


def _retry_after_seconds(response: httpx.Response) -> int:
    """Seconds until the rate limit lifts, from Retry-After or X-RateLimit-Reset."""
    retry_after_str = response.headers.get("Retry-After")
    if retry_after_str is not None:
        try:
            return int(retry_after_str)
        except ValueError:
            return 60

    reset_str = response.headers.get("X-RateLimit-Reset")
    if reset_str is not None:
        try:
            return max(int(reset_str) - int(time.time()), 0)
        except ValueError:
            return 60

    return 60


class HTTPTransport:
    """
    HTTP transport layer with token authentication and retry logic.

    Handles:
    - Bearer token authentication
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Link header pagination
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: API token sent as a Bearer credential (optional for public repos)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=build_headers(token),
            follow_redirects=True,
        )
        log_transport_created(self.base_url, token)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a request with automatic retry.

        Args:
            method: HTTP method
            path: API path relative to the base URL, or an absolute URL
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            ProviderUnavailableError: On API errors
        """
        response = self._send(method, path, params)
        return decode_json(response, path)

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Iterator[Any]:
        """
        Iterate over the items of a paginated list endpoint.

        Follows ``rel="next"`` links until the last page.

        Args:
            path: API path of the first page
            params: Query parameters for the first page (later pages carry
                their own in the link URL)

        Yields:
            Items of every page, in order

        Raises:
            ProviderUnavailableError: On API errors
        """
        url: str | None = path
        page_params = params
        while url is not None:
            response = self._send("GET", url, page_params)
            yield from decode_page(response, url)
            url = next_page_url(response)
            page_params = None

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
    ) -> httpx.Response:
        def make_request() -> httpx.Response:
            log_http_request(method, path, params=params)
            started = time.monotonic()
            response = self._client.request(method, path, params=params)
            log_http_response(
                response.status_code,
                path,
                elapsed_ms=(time.monotonic() - started) * 1000,
                rate_limit_remaining=response.headers.get("X-RateLimit-Remaining"),
            )
            return response

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            Successful HTTP response

        Raises:
            ProviderUnavailableError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    return response

                # Parse error response
                error = parse_error_response(response)

                # Check if we should retry
                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                # Calculate backoff time
                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        if last_error:
            if isinstance(last_error, RadarError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        # Apply jitter (±jitter%)
        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)
