"""ScryfallClient main entry point."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from .config import DEFAULT_TIMEOUT, SEARCH_URL
from .models.page import ResultPage
from .pagination import fetch_all, fetch_page, search_uri
from .transport import HttpTransport, Transport


class ScryfallClient:
    """Search client for the Scryfall card API.

    Walks every result page of a search and returns them merged into a
    single :class:`~scryfall_search.models.page.ResultPage`.

    Usage::

        client = ScryfallClient()

        results = client.search("t:goblin+c:r")
        print(results.render())
        print(f"{results.sum_prices():.2f} EUR")

        first = client.search_page("t:goblin")

        client.close()
    """

    def __init__(
        self,
        *,
        base_url: str = SEARCH_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Search endpoint prefix the query is appended to.
            timeout: HTTP request timeout in seconds. Ignored when a
                *transport* is supplied.
            transport: Object with a ``get(uri) -> str`` method. Defaults to
                an :class:`~scryfall_search.transport.HttpTransport` owned
                (and closed) by this client.
            sleep: Pause function used between page requests.
        """
        self.base_url = base_url
        self._owns_transport = transport is None
        self._transport = (
            transport if transport is not None else HttpTransport(timeout=timeout)
        )
        self._sleep = sleep

    @property
    def transport(self) -> Transport:
        return self._transport

    def search(self, query: str) -> ResultPage:
        """Fetch all pages for *query*, merged in order.

        Args:
            query: Scryfall search syntax, already URL-safe
                (e.g. ``"t:goblin+c:r"``).

        Returns:
            The merged result page.

        Raises:
            TransportError: If any page request fails.
            DecodeError: If any page cannot be decoded.
        """
        return fetch_all(
            self._transport, query, base_url=self.base_url, sleep=self._sleep
        )

    def search_page(self, query: str) -> ResultPage:
        """Fetch only the first page for *query*.

        The returned page keeps its ``next_page`` link.
        """
        return fetch_page(self._transport, search_uri(query, self.base_url))

    def close(self) -> None:
        """Close the HTTP transport if this client created it.

        Called automatically when using the client as a context manager.
        """
        if self._owns_transport and isinstance(self._transport, HttpTransport):
            self._transport.close()

    def __enter__(self) -> ScryfallClient:
        """Enter context manager.

        Example::

            with ScryfallClient() as client:
                results = client.search("lightning+bolt")
        """
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close the transport."""
        self.close()

    def __repr__(self) -> str:
        return f"ScryfallClient(base_url={self.base_url!r})"
