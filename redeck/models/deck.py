from dataclasses import dataclass, field, replace
from enum import Enum

from redeck.models.card import Card


class DeckFormat(str, Enum):
    """Supported deck construction formats."""

    TYPE_1 = "Type 1"
    TYPE_2 = "Type 2"
    PARAGON = "Paragon"

    @classmethod
    def parse(cls, text: str | None) -> "DeckFormat":
        """
        Parse free-text format names.

        Unspecified or unrecognized formats default to Type 1.
        "Multi" is the older name for Type 2.
        """
        fmt = (text or "").strip().lower()
        if "paragon" in fmt:
            return cls.PARAGON
        if "type 2" in fmt or "multi" in fmt:
            return cls.TYPE_2
        return cls.TYPE_1


@dataclass(frozen=True, slots=True)
class DeckCard:
    """A card in a deck with its quantity and zone."""

    card: Card
    quantity: int
    is_reserve: bool = False

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"DeckCard quantity must be at least 1, got {self.quantity}")


@dataclass
class DeckStats:
    """Composition summary of a deck."""

    main_deck_count: int
    reserve_count: int
    unique_cards: int
    cards_by_type: dict[str, int] = field(default_factory=dict)
    cards_by_brigade: dict[str, int] = field(default_factory=dict)


@dataclass
class Deck:
    """
    A constructed deck.

    INVARIANT: at most one DeckCard per (card identity, is_reserve).
    Use add_card/remove_card/set_quantity rather than appending to
    `cards` directly so quantities fold into a single entry.

    Attributes:
        name: User-facing deck name
        format: Construction format (defaults to Type 1)
        paragon: Paragon character name (Paragon format only)
        cards: Main deck and reserve entries
    """

    name: str = "Untitled Deck"
    format: DeckFormat = DeckFormat.TYPE_1
    paragon: str | None = None
    cards: list[DeckCard] = field(default_factory=list)

    @property
    def main_deck(self) -> list[DeckCard]:
        return [dc for dc in self.cards if not dc.is_reserve]

    @property
    def reserve(self) -> list[DeckCard]:
        return [dc for dc in self.cards if dc.is_reserve]

    def _index_of(self, card: Card, is_reserve: bool) -> int | None:
        for i, dc in enumerate(self.cards):
            if dc.card.identity == card.identity and dc.is_reserve == is_reserve:
                return i
        return None

    def get_quantity(self, card: Card, is_reserve: bool = False) -> int:
        """Quantity of a printing in the given zone (0 if absent)."""
        index = self._index_of(card, is_reserve)
        return 0 if index is None else self.cards[index].quantity

    def add_card(self, card: Card, quantity: int = 1, is_reserve: bool = False) -> None:
        """Add copies of a card, folding into an existing entry."""
        if quantity < 1:
            raise ValueError(f"Cannot add {quantity} copies of {card.name!r}")

        index = self._index_of(card, is_reserve)
        if index is None:
            self.cards.append(DeckCard(card=card, quantity=quantity, is_reserve=is_reserve))
        else:
            existing = self.cards[index]
            self.cards[index] = replace(existing, quantity=existing.quantity + quantity)

    def remove_card(self, card: Card, quantity: int = 1, is_reserve: bool = False) -> None:
        """Remove copies of a card. The entry is dropped when it reaches zero."""
        index = self._index_of(card, is_reserve)
        if index is None:
            return
        self.set_quantity(card, self.cards[index].quantity - quantity, is_reserve)

    def set_quantity(self, card: Card, quantity: int, is_reserve: bool = False) -> None:
        """Set the quantity of a card in a zone. Zero or less removes it."""
        index = self._index_of(card, is_reserve)

        if quantity <= 0:
            if index is not None:
                del self.cards[index]
            return

        if index is None:
            self.cards.append(DeckCard(card=card, quantity=quantity, is_reserve=is_reserve))
        else:
            self.cards[index] = replace(self.cards[index], quantity=quantity)

    def stats(self) -> DeckStats:
        """Count cards by zone, type and brigade."""
        cards_by_type: dict[str, int] = {}
        cards_by_brigade: dict[str, int] = {}

        for dc in self.cards:
            card_type = dc.card.type or "Unknown"
            cards_by_type[card_type] = cards_by_type.get(card_type, 0) + dc.quantity

            for brigade in dc.card.brigades:
                cards_by_brigade[brigade] = cards_by_brigade.get(brigade, 0) + dc.quantity

        return DeckStats(
            main_deck_count=sum(dc.quantity for dc in self.main_deck),
            reserve_count=sum(dc.quantity for dc in self.reserve),
            unique_cards=len({dc.card.identity for dc in self.cards}),
            cards_by_type=cards_by_type,
            cards_by_brigade=cards_by_brigade,
        )
