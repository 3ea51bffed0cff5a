"""
Card lookup endpoints.

Returns every printing of a card from the loaded catalog with the
derived search tags (rarity bucket, testament, Gospel, Nativity).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from redeck.api.decks import get_loaded_catalog
from redeck.models.card import Card
from redeck.parsers.catalog import categorize_rarity, sanitize_img_file
from redeck.services.catalog import CardCatalog
from redeck.services.references import is_nativity_reference, split_references

router = APIRouter(prefix="/cards", tags=["cards"])


class CardResponse(BaseModel):
    """One printing of a card."""

    name: str
    set: str
    official_set: str
    image: str
    type: str
    brigades: list[str]
    alignment: str
    strength: str
    toughness: str
    special_ability: str
    rarity: str
    rarity_group: str
    reference: str
    testament: str
    is_gospel: bool
    is_nativity: bool
    legality: str


def card_to_response(card: Card) -> CardResponse:
    return CardResponse(
        name=card.name,
        set=card.set,
        official_set=card.official_set,
        image=sanitize_img_file(card.img_file),
        type=card.type,
        brigades=card.brigades,
        alignment=card.alignment,
        strength=card.strength,
        toughness=card.toughness,
        special_ability=card.special_ability,
        rarity=card.rarity,
        rarity_group=categorize_rarity(card.rarity, card.official_set),
        reference=card.reference,
        testament=card.testament,
        is_gospel=card.is_gospel,
        is_nativity=any(is_nativity_reference(r) for r in split_references(card.reference)),
        legality=card.legality,
    )


@router.get("/{name}", response_model=list[CardResponse])
async def get_card_printings(
    name: str,
    catalog: Annotated[CardCatalog, Depends(get_loaded_catalog)],
) -> list[CardResponse]:
    """
    Get all printings of a card by exact name.

    Curly apostrophes match straight ones. Returns 404 if no printing
    exists.
    """
    printings = catalog.find_by_name(name)
    if not printings:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card '{name}' not found",
        )
    return [card_to_response(card) for card in printings]
