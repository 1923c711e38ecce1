"""HTTP transport that fetches raw search response bodies."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import httpx

from .config import DEFAULT_HEADERS, DEFAULT_TIMEOUT
from .errors import TransportError

logger = logging.getLogger("scryfall_search")


class Transport(Protocol):
    """Anything that can GET a URI and return the body as text."""

    def get(self, uri: str) -> str: ...


def _error_details(resp: httpx.Response) -> str | None:
    """Pull the ``details`` message out of an API error object, if any."""
    try:
        body = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if isinstance(body, dict) and body.get("object") == "error":
        return body.get("details")
    return None


class HttpTransport:
    """Fetches response bodies over HTTP with ``httpx``.

    Non-2xx responses and network failures are raised as
    :class:`~scryfall_search.errors.TransportError`.  No retries are made.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a transport.

        Args:
            timeout: HTTP request timeout in seconds (default 30).
            headers: Extra headers merged over the defaults.
            transport: Optional ``httpx`` transport, e.g.
                ``httpx.MockTransport`` in tests.
        """
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers=self.headers,
                transport=self._transport,
            )
        return self._client

    def get(self, uri: str) -> str:
        """GET *uri* and return the response body as text.

        Raises:
            TransportError: On a network failure, an invalid URI, or a
                non-2xx status.
        """
        logger.info("GET %s", uri)
        try:
            resp = self.client.get(uri)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to {uri} failed: {e}", uri=uri) from e

        if resp.is_error:
            details = _error_details(resp)
            logger.warning("HTTP %d from %s", resp.status_code, uri)
            message = f"HTTP {resp.status_code} from {uri}"
            if details:
                message = f"{message}: {details}"
            raise TransportError(message, uri=uri, status_code=resp.status_code)
        return resp.text

    def close(self) -> None:
        """Close the HTTP client, if open."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
