from redeck.models.card import Alignment, Card
from redeck.models.deck import Deck, DeckCard, DeckFormat, DeckStats
from redeck.models.paragon import (
    PARAGON_DECK_TOTAL,
    PARAGONS,
    ParagonQuota,
    get_paragon,
    get_paragon_names,
)
from redeck.models.validation import (
    DeckValidation,
    IssueCategory,
    IssueType,
    ParagonBrigadeStats,
    ValidationIssue,
    ValidationStats,
)

__all__ = [
    "Alignment",
    "Card",
    "Deck",
    "DeckCard",
    "DeckFormat",
    "DeckStats",
    "DeckValidation",
    "IssueCategory",
    "IssueType",
    "PARAGONS",
    "PARAGON_DECK_TOTAL",
    "ParagonBrigadeStats",
    "ParagonQuota",
    "ValidationIssue",
    "ValidationStats",
    "get_paragon",
    "get_paragon_names",
]
