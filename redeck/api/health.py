"""
Health check endpoints.

Provides a liveness probe and a readiness probe that reports whether the
card catalog has been loaded.
"""

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from redeck.services.catalog import get_catalog, is_catalog_loaded

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    catalog: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check the catalog.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(response: Response) -> HealthResponse:
    """
    Readiness probe.

    Returns 503 until the card catalog is loaded.
    """
    if not is_catalog_loaded():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", catalog="not loaded")

    return HealthResponse(status="ready", catalog=f"{len(get_catalog())} cards")
