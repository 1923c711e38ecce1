"""Async wrapper for ScryfallClient.

Runs searches in a thread pool executor, making the client safe to use
from async frameworks (FastAPI, aiohttp, etc.) without blocking the event
loop.  The inter-page delay sleeps in the worker thread, so the loop keeps
serving other tasks while a search is paced.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from .client import ScryfallClient
from .models.page import ResultPage

T = TypeVar("T")


class AsyncScryfallClient:
    """Async wrapper around :class:`ScryfallClient`.

    Usage::

        async with AsyncScryfallClient() as client:
            results = await client.search("t:goblin")
            first = await client.run(client.inner.search_page, "t:elf")
    """

    def __init__(
        self,
        *,
        max_workers: int = 4,
        **kwargs: Any,
    ) -> None:
        """Initialize the async client.

        Args:
            max_workers: Thread pool size for concurrent searches.
            **kwargs: Forwarded to :class:`ScryfallClient` (base_url, timeout, etc.).
        """
        self._client = ScryfallClient(**kwargs)
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    @property
    def inner(self) -> ScryfallClient:
        """Access the underlying sync client."""
        return self._client

    async def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run any sync client method asynchronously.

        Example::

            page = await client.run(client.inner.search_page, "t:goblin")
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, lambda: fn(*args, **kwargs))

    async def search(self, query: str) -> ResultPage:
        """Fetch and merge all pages for *query* without blocking the loop.

        Raises:
            TransportError: If any page request fails.
            DecodeError: If any page cannot be decoded.
        """
        return await self.run(self._client.search, query)

    async def close(self) -> None:
        """Wait for running searches, then close the executor and the client.

        The executor is drained off the event loop so in-flight searches
        finish before their HTTP client is closed.
        """
        await asyncio.to_thread(self._executor.shutdown, wait=True)
        self._client.close()

    async def __aenter__(self) -> AsyncScryfallClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager and close all resources."""
        await self.close()
