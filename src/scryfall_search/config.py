"""API endpoints, request headers, and client defaults.

This module defines the Scryfall endpoints and the fixed pacing used
when walking paginated search results.
"""

from __future__ import annotations

#: Base URL for the Scryfall REST API.
API_BASE = "https://api.scryfall.com"

#: Card search endpoint; the query term is appended verbatim.
SEARCH_URL = f"{API_BASE}/cards/search?q="

#: Pause between successive page requests (Scryfall asks for 50-100 ms).
PAGE_DELAY_SECONDS = 0.1

#: Default HTTP timeout in seconds for a single page request.
DEFAULT_TIMEOUT = 30.0

#: Identifies this client to the API, which rejects anonymous agents.
USER_AGENT = "scryfall-search/0.1.0"

#: Headers sent with every request.
DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}

#: Layout tags whose text lives on the individual faces.
MULTI_FACE_LAYOUTS = frozenset({"transform", "adventure", "modal_dfc"})
