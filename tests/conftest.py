"""Shared fixtures: sample card payloads and an in-memory transport."""

from __future__ import annotations

import json

import pytest

from scryfall_search import ResultPage, ScryfallClient
from scryfall_search.config import SEARCH_URL
from scryfall_search.errors import TransportError

BOLT = {
    "object": "card",
    "name": "Bolt",
    "layout": "normal",
    "type_line": "Instant",
    "mana_cost": "{R}",
    "oracle_text": "Deal 3 damage.",
    "prices": {"usd": "0.15", "eur": "0.12", "tix": None},
}

GOBLIN_GUIDE = {
    "object": "card",
    "name": "Goblin Guide",
    "layout": "normal",
    "type_line": "Creature — Goblin Scout",
    "mana_cost": "{R}",
    "oracle_text": "Haste",
    "power": "2",
    "toughness": "2",
    "prices": {"eur": 2.5},
}

DELVER = {
    "object": "card",
    "name": "Delver of Secrets // Insectile Aberration",
    "layout": "transform",
    "type_line": "Creature — Human Wizard // Creature — Human Insect",
    "prices": {"eur": None},
    "card_faces": [
        {
            "name": "Delver of Secrets",
            "type_line": "Creature — Human Wizard",
            "mana_cost": "{U}",
            "oracle_text": "Transform it.",
            "power": "1",
            "toughness": "1",
        },
        {
            "name": "Insectile Aberration",
            "type_line": "Creature — Human Insect",
            "oracle_text": "Flying",
            "power": "3",
            "toughness": "2",
        },
    ],
}

SAMPLE_CARDS = [BOLT, GOBLIN_GUIDE, DELVER]

PAGE_2_URI = "https://api.scryfall.com/cards/search?page=2&q=t%3Agoblin"


def page_body(cards, *, total=None, next_page=None) -> str:
    """Serialize a search response page the way the API does."""
    body = {
        "object": "list",
        "data": cards,
        "has_more": next_page is not None,
    }
    if total is not None:
        body["total_cards"] = total
    if next_page is not None:
        body["next_page"] = next_page
    return json.dumps(body)


class FakeTransport:
    """Serves canned bodies by URI and records every request.

    A value that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses: dict[str, str | Exception]) -> None:
        self.responses = responses
        self.requests: list[str] = []

    def get(self, uri: str) -> str:
        self.requests.append(uri)
        try:
            response = self.responses[uri]
        except KeyError:
            raise TransportError(f"HTTP 404 from {uri}", uri=uri, status_code=404)
        if isinstance(response, Exception):
            raise response
        return response


class SleepRecorder:
    """Stand-in for ``time.sleep`` that records delays instead of waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def two_page_transport():
    """Three cards split over two pages; page 2 reports its own total."""
    return FakeTransport(
        {
            SEARCH_URL + "t:goblin": page_body(
                [BOLT, GOBLIN_GUIDE], total=3, next_page=PAGE_2_URI
            ),
            PAGE_2_URI: page_body([DELVER], total=1),
        }
    )


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def client(two_page_transport, sleeper):
    with ScryfallClient(transport=two_page_transport, sleep=sleeper) as c:
        yield c


@pytest.fixture
def sample_page():
    return ResultPage.from_json(page_body(SAMPLE_CARDS, total=3))
