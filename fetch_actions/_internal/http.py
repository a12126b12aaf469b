"""Transport contract and the default httpx-backed transport."""

import os
from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, TypedDict

import httpx

from fetch_actions._internal.debug import log_debug
from fetch_actions._internal.redaction import redact_url
from fetch_actions._version import __version__

DEFAULT_TIMEOUT_MS = 30000


class TransportOptions(TypedDict, total=False):
    """Options handed to a transport alongside the target URL."""

    method: str
    headers: Mapping[str, str] | None
    body: str


class TransportResponse(Protocol):
    """Response returned by a transport."""

    @property
    def status(self) -> int: ...

    async def json(self) -> Any: ...

    async def text(self) -> str: ...


class Transport(Protocol):
    """Async callable performing one HTTP request."""

    def __call__(
        self, target: str, options: TransportOptions
    ) -> Awaitable[TransportResponse]: ...


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT_MS / 1000,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"fetch-actions/{__version__}"},
    )


class HttpxResponse:
    """Adapts an already-read httpx.Response to the TransportResponse contract."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    async def json(self) -> Any:
        return self._response.json()

    async def text(self) -> str:
        return self._response.text


class HttpxTransport:
    """Default transport for request pipelines.

    Without an injected client, each call opens a short-lived httpx.AsyncClient,
    sends the request and reads the whole body before the client is closed.
    An injected client is reused across calls and never closed by the
    transport; its own timeout and base URL apply. Transport-level errors
    (httpx.ConnectError, httpx.TimeoutException, ...) are raised to the caller.

    Use `HttpxTransport.from_env()` to create a transport from environment variables.
    """

    def __init__(
        self,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout_ms: Request timeout in milliseconds.
            base_url: Optional base URL used to resolve relative targets.
            client: Optional long-lived client owned by the caller.
        """
        self._timeout_ms = timeout_ms
        self._base_url = base_url
        self._client = client

    @classmethod
    def from_env(cls) -> "HttpxTransport":
        """Create a transport from environment variables.

        Optional environment variables:
            FETCH_ACTIONS_BASE_URL: Base URL for relative targets.
            FETCH_ACTIONS_TIMEOUT_MS: Request timeout in milliseconds.

        Returns:
            A configured HttpxTransport.

        Raises:
            ValueError: If FETCH_ACTIONS_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("FETCH_ACTIONS_BASE_URL")
        timeout_ms = int(os.environ.get("FETCH_ACTIONS_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(timeout_ms=timeout_ms, base_url=base_url)

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    @property
    def base_url(self) -> str | None:
        return self._base_url

    async def __call__(self, target: str, options: TransportOptions) -> HttpxResponse:
        method = options.get("method", "GET")
        safe_target = redact_url(target)
        log_debug(f"{method} {safe_target}")

        if self._client is not None:
            response = await self._send(self._client, method, target, options)
        else:
            async with create_http_client(
                timeout=self._timeout_ms / 1000, base_url=self._base_url
            ) as client:
                response = await self._send(client, method, target, options)

        log_debug(f"{method} {safe_target} -> {response.status_code}")
        return HttpxResponse(response)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        target: str,
        options: TransportOptions,
    ) -> httpx.Response:
        return await client.request(
            method,
            target,
            headers=options.get("headers"),
            content=options.get("body"),
        )


def get_default_transport() -> HttpxTransport:
    """Get the transport used when a request declares none.

    Returns:
        An HttpxTransport configured from environment variables.
    """
    return HttpxTransport.from_env()
