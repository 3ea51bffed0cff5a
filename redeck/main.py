import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from redeck.api import cards_router, decks_router, health_router, paragons_router
from redeck.config import settings
from redeck.services.catalog import (
    FetchError,
    load_catalog_file,
    refresh_catalog,
    set_catalog,
)

logger = logging.getLogger(__name__)


async def init_catalog() -> None:
    """Load the catalog from the configured file, or fetch it."""
    if settings.catalog_path:
        set_catalog(load_catalog_file(Path(settings.catalog_path)))
        return

    try:
        await refresh_catalog()
    except FetchError as e:
        # Service stays up; /ready reports not ready until a catalog loads
        logger.error("Card catalog unavailable at startup: %s", e)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_catalog()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("redeck"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(decks_router)
app.include_router(health_router)
app.include_router(paragons_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
