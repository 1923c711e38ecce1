"""scryfall-search — paginated Scryfall card search with text rendering."""

from .async_client import AsyncScryfallClient
from .client import ScryfallClient
from .errors import DecodeError, InvariantViolation, ScryfallError, TransportError
from .models.cards import Card, CardFace, CardPrices, Layout
from .models.page import ResultPage

__all__ = [
    "AsyncScryfallClient",
    "Card",
    "CardFace",
    "CardPrices",
    "DecodeError",
    "InvariantViolation",
    "Layout",
    "ResultPage",
    "ScryfallClient",
    "ScryfallError",
    "TransportError",
]
__version__ = "0.1.0"
