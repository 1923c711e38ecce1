"""Search result page model and page merging."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..errors import DecodeError
from .cards import Card
from .decoding import TolerantInt


class ResultPage(BaseModel):
    """One page of search results, or several pages merged together.

    ``total_cards`` is the grand total the API reports for the whole
    query.  It is taken from the first page and never recomputed when
    later pages are merged in.

    Example::

        page = ResultPage.from_json(body)
        while page.next_page:
            page.merge(ResultPage.from_json(fetch(page.next_page)))
        print(page.render())
    """

    model_config = {"populate_by_name": True}

    total_cards: TolerantInt = None
    cards: list[Card] = Field(alias="data")
    has_more: bool = False
    next_page: str | None = None

    @classmethod
    def from_json(cls, text: str | bytes) -> ResultPage:
        """Decode a response body into a page.

        Args:
            text: Raw JSON response body.

        Returns:
            The decoded page.

        Raises:
            DecodeError: If the body is not valid JSON, a required field is
                missing, a numeric string does not parse, or a multi-face
                card has no faces.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise DecodeError(f"Could not decode search results: {e}") from e

    def merge(self, later: ResultPage) -> None:
        """Append a later page's cards and take over its continuation link.

        ``total_cards`` is left as declared by the first page.
        """
        self.cards.extend(later.cards)
        self.next_page = later.next_page
        self.has_more = later.has_more

    def sum_prices(self) -> float:
        """Sum of EUR prices over all cards, counting missing prices as 0."""
        return sum((card.price_eur() for card in self.cards), 0.0)

    def names(self) -> list[str]:
        return [card.name for card in self.cards]

    def render(self) -> str:
        """Render the declared total followed by every card.

        Cards are separated from the header and from each other by a
        blank line.
        """
        header = f"{self.total_cards or 0} cards"
        return "\n\n".join([header] + [card.render() for card in self.cards])

    def to_dataframe(self) -> Any:
        """Tabulate the cards as a Polars DataFrame.

        Returns:
            A ``polars.DataFrame`` with one row per card and the columns
            ``name``, ``layout``, ``type_line``, ``mana_cost``, ``price_eur``.

        Raises:
            ImportError: If ``polars`` is not installed.
        """
        try:
            import polars as pl
        except ImportError as err:
            raise ImportError(
                "polars is required for DataFrame output. "
                "Install with: pip install scryfall-search[polars]"
            ) from err
        return pl.DataFrame(
            {
                "name": [c.name for c in self.cards],
                "layout": [c.layout for c in self.cards],
                "type_line": [c.type_line for c in self.cards],
                "mana_cost": [c.mana_cost for c in self.cards],
                "price_eur": [c.price_eur() for c in self.cards],
            },
            schema={
                "name": pl.Utf8,
                "layout": pl.Utf8,
                "type_line": pl.Utf8,
                "mana_cost": pl.Utf8,
                "price_eur": pl.Float64,
            },
        )

    def __str__(self) -> str:
        return self.render()
