"""
HTTP Transport for teamsync.

Builds authenticated requests, enforces the dry-run guard, follows REST
pagination links and maps error responses to typed exceptions.
"""

import time
from collections.abc import Callable, Iterator
from typing import Any

import httpx

from teamsync.config import ClientConfig
from teamsync.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DryRunViolation,
    NotFoundError,
    ProtocolError,
    RateLimitedError,
    ServerError,
    TransportError,
    ValidationError,
)
from teamsync.logging import log_http_request, log_http_response

SAFE_METHODS = frozenset({"GET", "HEAD"})


def graphql_url(base_url: str) -> str:
    """
    GraphQL endpoint belonging to a REST API origin.

    api.github.com serves it at ``/graphql``; Enterprise Server serves REST
    under ``/api/v3`` and GraphQL at ``/api/graphql``.
    """
    base = base_url.rstrip("/")
    if base.endswith("/api/v3"):
        base = base[: -len("/v3")]
    return f"{base}/graphql"


def _payload(body: Any) -> Any:
    """Turn a request dataclass (or plain JSON value) into a JSON body."""
    if body is None:
        return None
    to_dict = getattr(body, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return body


class HTTPTransport:
    """
    HTTP transport layer shared by every resource client.

    Handles:
    - Authorization and User-Agent headers on every request
    - Relative path resolution against the API origin
    - The dry-run guard for mutating REST requests
    - Link header pagination
    - Error response parsing into typed exceptions

    No retries are performed: a failed call surfaces immediately.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            config: Client configuration (token, dry-run flag, origin, timeout)
            client: Pre-built httpx client to send requests with (optional).
                When given, the caller keeps ownership and must close it.
        """
        self.config = config
        self.base_url = config.base_url.rstrip("/") + "/"
        self.graphql_url = graphql_url(config.base_url)
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=config.timeout,
            follow_redirects=True,
        )

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def resolve_url(self, path: str) -> str:
        """Return ``path`` untouched if absolute, else join it onto the API origin."""
        if path.startswith(("https://", "http://")):
            return path
        return self.base_url + path.lstrip("/")

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> httpx.Request:
        """
        Build an authenticated request.

        Args:
            method: HTTP method
            path: Absolute URL or path relative to the API origin
            body: Request dataclass or JSON-serializable value (optional)

        Returns:
            The prepared request

        Raises:
            DryRunViolation: If dry-run is active and a mutating request is
                aimed at anything but the GraphQL endpoint itself, which only
                carries read queries here.
        """
        method = method.upper()
        url = self.resolve_url(path)

        if self.config.dry_run and method not in SAFE_METHODS and url != self.graphql_url:
            raise DryRunViolation(method, url)

        headers = {
            "Authorization": f"token {self.config.token}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/vnd.github+json",
        }
        return self._client.build_request(
            method, url, headers=headers, json=_payload(body)
        )

    def dispatch(self, request: httpx.Request, body: Any = None) -> httpx.Response:
        """
        Send a prepared request and return the raw response, whatever its status.

        Raises:
            TransportError: If no response was received
        """
        log_http_request(request.method, str(request.url), dict(request.headers), _payload(body))

        start = time.monotonic()
        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e
        elapsed_ms = (time.monotonic() - start) * 1000

        next_url = response.links.get("next", {}).get("url")
        log_http_response(response.status_code, str(request.url), elapsed_ms, next_url)
        return response

    def send_raw(self, method: str, path: str, body: Any = None) -> httpx.Response:
        """Build and dispatch a request, returning the response whatever its status."""
        return self.dispatch(self.build_request(method, path, body), body)

    def send(self, method: str, path: str, body: Any = None) -> httpx.Response:
        """
        Make a request that must succeed.

        Args:
            method: HTTP method
            path: Absolute URL or path relative to the API origin
            body: Request body (optional)

        Returns:
            The successful (2xx) response

        Raises:
            APIError: On any non-2xx status
        """
        response = self.send_raw(method, path, body)
        if not response.is_success:
            raise self.error_for_response(response)
        return response

    def send_option(self, method: str, path: str) -> Any | None:
        """
        Make a body-less request where 404 means "does not exist".

        Returns:
            Decoded JSON on 200, None on 404

        Raises:
            APIError: On any other status
        """
        response = self.send_raw(method, path)
        if response.status_code == 200:
            return self.decode(response)
        if response.status_code == 404:
            return None
        raise self.error_for_response(response)

    def request_json(self, method: str, path: str, body: Any = None) -> Any:
        """Make a request that must succeed and decode its JSON body."""
        return self.decode(self.send(method, path, body))

    def iter_pages(self, method: str, path: str) -> Iterator[httpx.Response]:
        """
        Yield every page of a paginated REST listing.

        Each page is requested exactly once; the next page is taken from the
        ``rel="next"`` entry of the Link header and used as a full URL.
        """
        next_url: str | None = path
        while next_url is not None:
            response = self.send(method, next_url)
            next_url = self.next_link(response)
            yield response

    def paginate(
        self,
        method: str,
        path: str,
        accumulate: Callable[[httpx.Response], None],
    ) -> None:
        """Feed every page of a paginated REST listing to ``accumulate``, in order."""
        for response in self.iter_pages(method, path):
            accumulate(response)

    @staticmethod
    def next_link(response: httpx.Response) -> str | None:
        """
        Extract the ``rel="next"`` URL from a response's Link header.

        Raises:
            ProtocolError: If a Link header is present but holds no relation
        """
        header = response.headers.get("link")
        if header is None:
            return None

        links = [link for link in response.links.values() if link.get("rel")]
        if not links:
            raise ProtocolError(f"Unparsable Link header: {header!r}")

        for link in links:
            if "next" in link["rel"].split():
                return link["url"]
        return None

    @staticmethod
    def decode(response: httpx.Response) -> Any:
        """Decode a JSON response body."""
        try:
            return response.json()
        except ValueError as e:
            raise ProtocolError(
                f"Invalid JSON in response from {response.request.url}: {e}"
            ) from e

    def error_for_response(self, response: httpx.Response) -> APIError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate APIError subclass
        """
        try:
            data: Any = response.json()
        except ValueError:
            data = response.text

        message = data.get("message") if isinstance(data, dict) else None
        if not message:
            message = f"HTTP {response.status_code}"

        status_code = response.status_code
        details: dict[str, Any] = {
            "body": data,
            "method": response.request.method,
            "url": str(response.request.url),
            "request_id": response.headers.get("X-GitHub-Request-Id"),
        }

        if status_code == 401:
            return AuthenticationError(status_code, message, **details)
        elif status_code == 403:
            return AuthorizationError(status_code, message, **details)
        elif status_code == 404:
            return NotFoundError(status_code, message, **details)
        elif status_code == 409:
            return ConflictError(status_code, message, **details)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(status_code, message, retry_after, **details)
        elif status_code >= 500:
            return ServerError(status_code, message, **details)
        elif status_code >= 400:
            return ValidationError(status_code, message, **details)
        else:
            return APIError(status_code, message, **details)
