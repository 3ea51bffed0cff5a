from redeck.api.cards import router as cards_router
from redeck.api.decks import router as decks_router
from redeck.api.health import router as health_router
from redeck.api.paragons import router as paragons_router

__all__ = [
    "cards_router",
    "decks_router",
    "health_router",
    "paragons_router",
]
