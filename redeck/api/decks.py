"""
Deck API endpoints.

Validates decks and converts between deck entries and Lackey deck text.
Card names are resolved against the loaded catalog snapshot.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from redeck.models.deck import Deck, DeckFormat
from redeck.models.validation import DeckValidation
from redeck.parsers.deck_text import generate_deck_text, parse_deck_text
from redeck.services.catalog import CardCatalog, CatalogNotLoadedError, get_catalog
from redeck.services.deck_validator import validate_deck, validation_summary

router = APIRouter(prefix="/decks", tags=["decks"])


class DeckEntry(BaseModel):
    """One card line of a deck."""

    name: str
    set: str | None = None
    quantity: int = Field(default=1, ge=1)
    is_reserve: bool = False


class DeckRequest(BaseModel):
    """A deck submitted by card name."""

    name: str = "Untitled Deck"
    format: str | None = None
    paragon: str | None = None
    cards: list[DeckEntry] = Field(default_factory=list)


class ValidationResponse(BaseModel):
    """Validation result with a one-line summary."""

    summary: str
    validation: DeckValidation


class ImportRequest(BaseModel):
    """Lackey deck text to import."""

    text: str
    name: str = "Imported Deck"
    format: str | None = None
    paragon: str | None = None


class ImportResponse(BaseModel):
    """Parsed deck entries plus any import problems."""

    deck: DeckRequest | None = None
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    validation: DeckValidation | None = None


class ExportResponse(BaseModel):
    """Deck rendered as Lackey deck text."""

    text: str


def get_loaded_catalog() -> CardCatalog:
    """Dependency returning the catalog snapshot, or 503 if not loaded."""
    try:
        return get_catalog()
    except CatalogNotLoadedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        ) from e


def build_deck(request: DeckRequest, catalog: CardCatalog) -> Deck:
    """
    Resolve a deck request against the catalog.

    Raises:
        HTTPException: 422 listing every card that could not be found
    """
    deck = Deck(
        name=request.name,
        format=DeckFormat.parse(request.format),
        paragon=request.paragon,
    )
    missing: list[str] = []

    for entry in request.cards:
        card = catalog.find(entry.name, entry.set)
        if card is None:
            missing.append(entry.name)
            continue
        deck.add_card(card, entry.quantity, is_reserve=entry.is_reserve)

    if missing:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[f"Card not found: {name}" for name in missing],
        )

    return deck


def deck_to_request(deck: Deck) -> DeckRequest:
    return DeckRequest(
        name=deck.name,
        format=deck.format.value,
        paragon=deck.paragon,
        cards=[
            DeckEntry(
                name=dc.card.name,
                set=dc.card.set or None,
                quantity=dc.quantity,
                is_reserve=dc.is_reserve,
            )
            for dc in deck.cards
        ],
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate(
    request: DeckRequest,
    catalog: Annotated[CardCatalog, Depends(get_loaded_catalog)],
) -> ValidationResponse:
    """
    Validate a deck against the construction rules of its format.

    Rule violations are reported in the body; the request itself succeeds.
    """
    result = validate_deck(build_deck(request, catalog))
    return ValidationResponse(summary=validation_summary(result), validation=result)


@router.post("/import", response_model=ImportResponse)
async def import_deck(
    request: ImportRequest,
    catalog: Annotated[CardCatalog, Depends(get_loaded_catalog)],
) -> ImportResponse:
    """
    Import Lackey deck text.

    Lines that cannot be matched are reported as errors; the cards that
    did match are returned and validated.
    """
    result = parse_deck_text(
        request.text,
        catalog,
        name=request.name,
        format=DeckFormat.parse(request.format),
        paragon=request.paragon,
    )

    if result.deck is None:
        return ImportResponse(warnings=result.warnings, errors=result.errors)

    return ImportResponse(
        deck=deck_to_request(result.deck),
        warnings=result.warnings,
        errors=result.errors,
        validation=validate_deck(result.deck),
    )


@router.post("/export", response_model=ExportResponse)
async def export_deck(
    request: DeckRequest,
    catalog: Annotated[CardCatalog, Depends(get_loaded_catalog)],
    include_sets: bool = False,
) -> ExportResponse:
    """Render a deck as Lackey deck text."""
    deck = build_deck(request, catalog)
    return ExportResponse(text=generate_deck_text(deck, include_sets=include_sets))
