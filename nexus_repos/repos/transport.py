"""HTTP transport used by the repository client.

The client only depends on the :class:`Transport` protocol so tests and
callers can supply their own. :class:`HttpxTransport` is the default
implementation backed by ``httpx``.
"""

from typing import Any, Dict, Optional, Protocol, Tuple

import httpx

from ..common.config import NexusConfig

DEFAULT_USER_AGENT = "nexus-repos/0.1.0"


class TransportResponse(Protocol):
    """Minimal view of an HTTP response."""

    @property
    def status_code(self) -> int: ...

    @property
    def content(self) -> bytes: ...


class Transport(Protocol):
    """Protocol for sending requests to a Nexus instance.

    Paths are relative to the server's base URL. Network failures are
    raised as exceptions; HTTP error statuses are returned, not raised.
    """

    def get(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> TransportResponse: ...

    def post(self, path: str, body: bytes) -> TransportResponse: ...

    def put(self, path: str, body: bytes) -> TransportResponse: ...

    def delete(self, path: str) -> TransportResponse: ...


class HttpxTransport:
    """Transport built on a persistent ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 30.0,
        verify: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize transport.

        Args:
            base_url: Nexus server URL, e.g. https://nexus.example.com/
            username: Basic auth user (auth is disabled when None)
            password: Basic auth password
            timeout: Request timeout in seconds
            verify: Verify TLS certificates
            user_agent: User-Agent header value
            client: Pre-built client, mainly for tests
        """
        self.base_url = base_url.rstrip("/") + "/"

        auth: Optional[Tuple[str, str]] = None
        if username is not None:
            auth = (username, password or "")

        if client is None:
            client = httpx.Client(
                base_url=self.base_url,
                auth=auth,
                timeout=timeout,
                verify=verify,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                    "User-Agent": user_agent,
                },
            )
        self._client = client

    @classmethod
    def from_config(cls, config: NexusConfig) -> "HttpxTransport":
        """Create a transport from the ``nexus`` configuration section."""
        return cls(
            base_url=config.url,
            username=config.username,
            password=config.password,
            timeout=config.timeout,
            verify=config.verify_ssl,
        )

    def get(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        return self._client.get(path, params=params)

    def post(self, path: str, body: bytes) -> httpx.Response:
        return self._client.post(path, content=body)

    def put(self, path: str, body: bytes) -> httpx.Response:
        return self._client.put(path, content=body)

    def delete(self, path: str) -> httpx.Response:
        return self._client.delete(path)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
