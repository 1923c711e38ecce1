"""Sequential fetching and merging of paginated search results."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .config import PAGE_DELAY_SECONDS, SEARCH_URL
from .models.page import ResultPage
from .transport import Transport

logger = logging.getLogger("scryfall_search")


def search_uri(query: str, base_url: str = SEARCH_URL) -> str:
    """Build the first page URI for *query*.

    The query is appended verbatim; escaping is the caller's job.
    """
    return base_url + query


def fetch_page(transport: Transport, uri: str) -> ResultPage:
    """Fetch and decode a single page.

    Raises:
        TransportError: If the request fails.
        DecodeError: If the body is not a valid result page.
    """
    page = ResultPage.from_json(transport.get(uri))
    logger.debug(
        "Decoded %d cards from %s (next page: %s)",
        len(page.cards),
        uri,
        page.next_page or "none",
    )
    return page


def fetch_all(
    transport: Transport,
    query: str,
    *,
    base_url: str = SEARCH_URL,
    sleep: Callable[[float], None] = time.sleep,
) -> ResultPage:
    """Fetch every page of a search and merge them into one page.

    Pages are requested one after another, pausing
    ``PAGE_DELAY_SECONDS`` before each follow-up request.  Any failure
    aborts the whole search; pages merged so far are dropped.

    Args:
        transport: Fetches raw response bodies.
        query: Search query, appended to *base_url* without escaping.
        base_url: Search endpoint prefix.
        sleep: Called with the delay before each follow-up request.

    Returns:
        The merged page. ``total_cards`` is the first page's declared
        total and ``next_page`` is None.

    Raises:
        TransportError: If any page request fails.
        DecodeError: If any page body cannot be decoded.
    """
    logger.info("Searching for %r", query)
    results = fetch_page(transport, search_uri(query, base_url))
    pages = 1
    while results.next_page is not None:
        sleep(PAGE_DELAY_SECONDS)
        results.merge(fetch_page(transport, results.next_page))
        pages += 1
    logger.info(
        "Fetched %d cards over %d page(s) for %r", len(results.cards), pages, query
    )
    return results
