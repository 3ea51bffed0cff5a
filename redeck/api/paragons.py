"""
Paragon endpoints.

Exposes the static Paragon quota table.
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from redeck.models.paragon import PARAGONS, ParagonQuota, get_paragon

router = APIRouter(prefix="/paragons", tags=["paragons"])


class ParagonResponse(BaseModel):
    """Quota requirements for one Paragon."""

    name: str
    title: str
    reference: str
    good_brigade: str
    evil_brigade: str
    primary_good: int
    other_good: int
    neutral: int
    primary_evil: int
    other_evil: int


def _to_response(quota: ParagonQuota) -> ParagonResponse:
    return ParagonResponse(
        name=quota.name,
        title=quota.title,
        reference=quota.reference,
        good_brigade=quota.good_brigade,
        evil_brigade=quota.evil_brigade,
        primary_good=quota.primary_good,
        other_good=quota.other_good,
        neutral=quota.neutral,
        primary_evil=quota.primary_evil,
        other_evil=quota.other_evil,
    )


@router.get("", response_model=list[ParagonResponse])
async def list_paragons() -> list[ParagonResponse]:
    """All Paragons in table order."""
    return [_to_response(p) for p in PARAGONS]


@router.get("/{name}", response_model=ParagonResponse)
async def get_paragon_by_name(name: str) -> ParagonResponse:
    """
    Get one Paragon by name (case-insensitive).

    Returns 404 if the Paragon is unknown.
    """
    quota = get_paragon(name)
    if quota is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Paragon '{name}' not found",
        )
    return _to_response(quota)
