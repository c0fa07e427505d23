"""
Async HTTP Transport for complexity-radar.

Handles async HTTP communication with the forge API, with automatic retry
logic, pagination and error handling using httpx async client.
"""

import asyncio
import random
import time
from collections.abc import AsyncIterator, Callable, Coroutine
from typing import Any

import httpx

from complexity_radar.exceptions import RadarError, ServerError
from complexity_radar.logging import (
    log_http_request,
    log_http_response,
    log_transport_created,
)
from complexity_radar.transport import (
    RetryConfig,
    build_headers,
    decode_json,
    decode_page,
    next_page_url,
    parse_error_response,
)


class AsyncHTTPTransport:
    """
    Async HTTP transport layer with token authentication and retry logic.

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
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: API token sent as a Bearer credential (optional for public repos)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=build_headers(token),
            follow_redirects=True,
        )
        log_transport_created(self.base_url, token)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
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
        response = await self._send(method, path, params)
        return decode_json(response, path)

    async def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> AsyncIterator[Any]:
        """
        Iterate over the items of a paginated list endpoint.

        Args:
            path: API path of the first page
            params: Query parameters for the first page

        Yields:
            Items of every page, in order

        Raises:
            ProviderUnavailableError: On API errors
        """
        url: str | None = path
        page_params = params
        while url is not None:
            response = await self._send("GET", url, page_params)
            for item in decode_page(response, url):
                yield item
            url = next_page_url(response)
            page_params = None

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None,
    ) -> httpx.Response:
        async def make_request() -> httpx.Response:
            log_http_request(method, path, params=params)
            started = time.monotonic()
            response = await self._client.request(method, path, params=params)
            log_http_response(
                response.status_code,
                path,
                elapsed_ms=(time.monotonic() - started) * 1000,
                rate_limit_remaining=response.headers.get("X-RateLimit-Remaining"),
            )
            return response

        return await self._execute_with_retry(make_request)

    async def _execute_with_retry(
        self, request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]]
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Async function that makes the HTTP request

        Returns:
            Successful HTTP response

        Raises:
            ProviderUnavailableError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = await request_fn()

                if response.status_code < 400:
                    return response

                error = parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                await asyncio.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                await asyncio.sleep(wait_time)

        if last_error:
            if isinstance(last_error, RadarError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """Determine if a request should be retried."""
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
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)
