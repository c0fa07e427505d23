"""complexity-radar exception classes."""



class RadarError(Exception):
    """Base exception for all complexity-radar errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RadarError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ProviderUnavailableError(RadarError):
    """Raised when the forge cannot serve a request."""

    pass


class AuthenticationError(ProviderUnavailableError):
    """Raised when the token is missing, expired or rejected."""

    pass


class AuthorizationError(ProviderUnavailableError):
    """Raised when access to the repository is denied."""

    pass


class NotFoundError(ProviderUnavailableError):
    """Raised when a repository or commit is not found."""

    pass


class RateLimitedError(ProviderUnavailableError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(ProviderUnavailableError):
    """Raised on rejected requests and malformed responses."""

    pass


class ServerError(ProviderUnavailableError):
    """Raised on server errors (5xx) and network failures."""

    pass
