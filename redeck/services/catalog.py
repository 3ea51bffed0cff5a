"""
Card catalog service.

Loads the Lackey catalog, normalizes every card once, and holds the
result as an immutable snapshot for the rest of the process.

INVARIANT: a loaded CardCatalog is never mutated. Reloading replaces the
snapshot as a whole.
"""

import logging
from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path

import httpx

from redeck.config import settings
from redeck.models.card import Card
from redeck.parsers.catalog import normalize_card_name, parse_catalog
from redeck.services.brigades import join_brigades, normalize_card_brigade
from redeck.services.references import classify_reference

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when fetching the catalog fails."""

    pass


class CatalogNotLoadedError(Exception):
    """Raised when the catalog snapshot is requested before it is loaded."""

    def __init__(self) -> None:
        super().__init__("Card catalog has not been loaded")


def build_card(raw: Card) -> Card:
    """
    Enrich a parsed catalog row.

    Resolves the brigade field and tags the testament. The input card is
    left untouched.
    """
    testament = classify_reference(raw.reference)
    return replace(
        raw,
        brigade=join_brigades(normalize_card_brigade(raw)),
        testament=testament.testament,
        is_gospel=testament.is_gospel,
    )


class CardCatalog:
    """
    Immutable, normalized card catalog.

    Cards are kept in catalog order so name-only lookups resolve
    deterministically to the first printing.
    """

    __slots__ = ("_cards", "_by_name")

    def __init__(self, cards: list[Card] | tuple[Card, ...]) -> None:
        self._cards: tuple[Card, ...] = tuple(cards)
        by_name: dict[str, list[Card]] = {}
        for card in self._cards:
            by_name.setdefault(normalize_card_name(card.name), []).append(card)
        self._by_name = {name: tuple(cards) for name, cards in by_name.items()}

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def find_by_name(self, name: str) -> tuple[Card, ...]:
        """All printings of a card, in catalog order."""
        return self._by_name.get(normalize_card_name(name.strip()), ())

    def find(self, name: str, set_name: str | None = None) -> Card | None:
        """
        Find one printing of a card.

        With set_name, matches the printing's set code first and then its
        official set. Without a set (or when no printing matches it), the
        first printing in catalog order is returned.
        """
        printings = self.find_by_name(name)
        if not printings:
            return None

        if set_name:
            for card in printings:
                if card.set == set_name:
                    return card
            for card in printings:
                if card.official_set == set_name:
                    return card

        return printings[0]


def load_catalog(text: str) -> CardCatalog:
    """
    Parse and normalize catalog text.

    A row whose brigade cannot be resolved keeps its raw brigade (logged
    as a warning) rather than aborting the load.
    """
    raw_cards = parse_catalog(text)
    catalog = CardCatalog([build_card(card) for card in raw_cards])
    logger.info("Loaded card catalog with %d cards", len(catalog))
    return catalog


def load_catalog_file(path: Path) -> CardCatalog:
    """
    Load the catalog from a local carddata.txt.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Card catalog not found at {path}. "
            "Run `python -m redeck.jobs.download_catalog` first."
        )

    return load_catalog(path.read_text(encoding="utf-8"))


async def fetch_catalog_text(url: str | None = None) -> str:
    """
    Download raw catalog text.

    Args:
        url: Catalog URL. Defaults to settings.catalog_url

    Raises:
        FetchError: If the request fails
    """
    url = url or settings.catalog_url

    try:
        async with httpx.AsyncClient(timeout=settings.catalog_timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Failed to fetch card catalog: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise FetchError(f"Failed to fetch card catalog: {e}") from e


# =============================================================================
# PROCESS-WIDE SNAPSHOT
# =============================================================================

_catalog: CardCatalog | None = None


def set_catalog(catalog: CardCatalog | None) -> None:
    """Replace the process-wide catalog snapshot."""
    global _catalog
    _catalog = catalog


def get_catalog() -> CardCatalog:
    """
    Get the loaded catalog snapshot.

    Raises:
        CatalogNotLoadedError: If no catalog has been loaded
    """
    if _catalog is None:
        raise CatalogNotLoadedError()
    return _catalog


def is_catalog_loaded() -> bool:
    return _catalog is not None


async def refresh_catalog(url: str | None = None) -> CardCatalog:
    """Fetch, normalize and install a fresh catalog snapshot."""
    text = await fetch_catalog_text(url)
    catalog = load_catalog(text)
    set_catalog(catalog)
    return catalog
