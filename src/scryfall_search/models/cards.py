"""Card and card face models with text rendering."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from ..config import MULTI_FACE_LAYOUTS
from ..errors import InvariantViolation
from .decoding import TolerantFloat


class Layout(str, Enum):
    """Structural classification of a card, derived from its ``layout`` tag.

    Tags outside the known set map to :attr:`OTHER` and render like a
    single-faced card.
    """

    NORMAL = "normal"
    TRANSFORM = "transform"
    ADVENTURE = "adventure"
    MODAL_DFC = "modal_dfc"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> Layout:
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER

    @property
    def is_multi_face(self) -> bool:
        return self.value in MULTI_FACE_LAYOUTS


def _stats_line(power: str | None, toughness: str | None) -> list[str]:
    # Both halves or nothing
    if power is not None and toughness is not None:
        return [f"{power}/{toughness}"]
    return []


class CardPrices(BaseModel):
    """Market prices attached to a card. Only EUR is consumed."""

    model_config = {"frozen": True}

    eur: TolerantFloat = None


class CardFace(BaseModel):
    """One printable side of a multi-faced card."""

    model_config = {"frozen": True}

    name: str
    type_line: str
    oracle_text: str = ""
    mana_cost: str = ""
    power: str | None = None
    toughness: str | None = None

    def render(self) -> str:
        """Render the face as name, type line, mana cost, oracle text and stats.

        The ``power/toughness`` line is emitted only when both are present.
        """
        lines = [self.name, self.type_line, self.mana_cost, self.oracle_text]
        lines += _stats_line(self.power, self.toughness)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


class Card(BaseModel):
    """A single card from a search result page.

    Cards whose layout is ``transform``, ``adventure`` or ``modal_dfc``
    carry their rules text on ``card_faces``; validation rejects such a
    card when the face list is missing or empty.

    Example::

        card = Card.model_validate(payload)
        print(card.render())
        total = card.price_eur()
    """

    model_config = {"frozen": True}

    name: str
    type_line: str
    layout: str
    mana_cost: str = ""
    oracle_text: str = ""
    power: str | None = None
    toughness: str | None = None
    prices: CardPrices = Field(default_factory=CardPrices)
    card_faces: list[CardFace] | None = None

    @model_validator(mode="after")
    def check_faces(self) -> Card:
        if self.is_multi_face and not self.card_faces:
            raise InvariantViolation(
                f"Card {self.name!r} has layout {self.layout!r} but no card faces"
            )
        return self

    @property
    def kind(self) -> Layout:
        """The closed layout classification for this card."""
        return Layout.from_tag(self.layout)

    @property
    def is_multi_face(self) -> bool:
        return self.kind.is_multi_face

    def price_eur(self) -> float:
        """EUR price, or ``0.0`` when the card has none."""
        if self.prices.eur is None:
            return 0.0
        return self.prices.eur

    def render(self) -> str:
        """Render the card as text.

        Multi-faced cards render their name followed by each face, faces
        separated by a blank line.  Every other layout renders the name,
        type line, mana cost, oracle text and (when both are present) the
        ``power/toughness`` line.

        Raises:
            InvariantViolation: If a multi-face card has no faces. Only
                reachable for cards built with ``model_construct``.
        """
        if self.is_multi_face:
            if not self.card_faces:
                raise InvariantViolation(
                    f"Cannot render {self.name!r}: layout {self.layout!r} "
                    "requires card faces"
                )
            body = "\n\n".join(face.render() for face in self.card_faces)
            return f"{self.name}\n{body}"

        lines = [self.name, self.type_line, self.mana_cost, self.oracle_text]
        lines += _stats_line(self.power, self.toughness)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
