"""
RosterForge services.

The deck engine: membership, combo matching, and stat aggregation.
"""

from rosterforge.services.combo_matcher import active_combos, is_combo_active
from rosterforge.services.deck_session import DeckSession, PersistenceGateway
from rosterforge.services.deck_state import DeckState
from rosterforge.services.stat_aggregator import (
    DeckSummary,
    aggregate,
    apply_combo,
    index_characters,
    summarize_deck,
)

__all__ = [
    "DeckSession",
    "DeckState",
    "DeckSummary",
    "PersistenceGateway",
    "active_combos",
    "aggregate",
    "apply_combo",
    "index_characters",
    "is_combo_active",
    "summarize_deck",
]
