"""teamsync exception classes."""

from typing import Any


class GitHubError(Exception):
    """Base exception for all teamsync errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(GitHubError):
    """Raised when client configuration is invalid or missing."""

    pass


class TransportError(GitHubError):
    """Raised when a request never produced a response (DNS, TLS, timeout...)."""

    pass


class APIError(GitHubError):
    """
    Raised when GitHub answers with a status the operation does not accept.

    Carries the original status and body so callers can diagnose the failure
    without re-issuing the request.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        body: Any = None,
        method: str | None = None,
        url: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        self.request_id = request_id
        target = f" ({method} {url})" if method and url else ""
        super().__init__(f"[{status_code}] {message}{target}")
        self.message = message


class AuthenticationError(APIError):
    """Raised when the token is rejected (401)."""

    pass


class AuthorizationError(APIError):
    """Raised when the token lacks access to the resource (403)."""

    pass


class NotFoundError(APIError):
    """Raised on 404 from operations where absence is not an expected outcome."""

    pass


class ConflictError(APIError):
    """Raised on conflicts (409)."""

    pass


class ValidationError(APIError):
    """Raised on validation failures (422) and other client errors."""

    pass


class RateLimitedError(APIError):
    """Raised when rate limited (429)."""

    def __init__(
        self,
        status_code: int,
        message: str,
        retry_after: int,
        body: Any = None,
        method: str | None = None,
        url: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(status_code, message, body, method, url, request_id)
        self.retry_after = retry_after


class ServerError(APIError):
    """Raised on server errors (5xx)."""

    pass


class GraphQLError(GitHubError):
    """Raised when a GraphQL response reports errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(f"graphql error: {message}")
        self.message = message
        self.errors = errors or []


class ProtocolError(GitHubError):
    """Raised when a response does not have the shape the client expects."""

    pass


class DryRunViolation(BaseException):
    """
    A mutating REST request reached the transport while dry-run is active.

    This is a bug in the calling code, not a runtime condition: dry-run must
    guarantee zero side effects on GitHub. Like ``SystemExit`` it derives from
    ``BaseException`` so ``except Exception`` blocks do not swallow it.
    """

    def __init__(self, method: str, url: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"Called a non-safe request in dry run mode: {method} {url}")
