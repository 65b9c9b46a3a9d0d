from rosterforge.models.character import Character, Position, Rarity
from rosterforge.models.combo import (
    ALL_STATS_LABEL,
    AllStatsEffect,
    Combo,
    ComboEffect,
    DisplayEffect,
    StatEffect,
    format_effect,
    resolve_effects,
)
from rosterforge.models.deck import Deck
from rosterforge.models.failure import (
    CatalogNotLoadedError,
    DeckFullError,
    DeckNotFoundError,
    DuplicateMemberError,
    FailureKind,
    KnownError,
    UnknownCharacterError,
    UnknownCharacterReferenceFault,
)
from rosterforge.models.stats import StatKey, StatVector, category_bonuses, category_totals

__all__ = [
    "ALL_STATS_LABEL",
    "AllStatsEffect",
    "CatalogNotLoadedError",
    "Character",
    "Combo",
    "ComboEffect",
    "Deck",
    "DeckFullError",
    "DeckNotFoundError",
    "DisplayEffect",
    "DuplicateMemberError",
    "FailureKind",
    "KnownError",
    "Position",
    "Rarity",
    "StatEffect",
    "StatKey",
    "StatVector",
    "UnknownCharacterError",
    "UnknownCharacterReferenceFault",
    "category_bonuses",
    "category_totals",
    "format_effect",
    "resolve_effects",
]
