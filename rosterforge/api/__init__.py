from rosterforge.api.characters import router as characters_router
from rosterforge.api.combos import router as combos_router
from rosterforge.api.decks import router as decks_router
from rosterforge.api.health import router as health_router

__all__ = [
    "characters_router",
    "combos_router",
    "decks_router",
    "health_router",
]
