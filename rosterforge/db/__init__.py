from rosterforge.db.database import get_session, init_db
from rosterforge.db.gateway import SqlPersistenceGateway
from rosterforge.db.operations import (
    character_to_model,
    combo_to_model,
    create_character,
    create_combo,
    create_deck,
    deck_to_model,
    delete_character,
    delete_deck,
    get_all_characters,
    get_all_combos,
    get_all_decks,
    get_character,
    get_combo,
    get_deck,
    update_character,
    update_deck,
)

__all__ = [
    "SqlPersistenceGateway",
    "character_to_model",
    "combo_to_model",
    "create_character",
    "create_combo",
    "create_deck",
    "deck_to_model",
    "delete_character",
    "delete_deck",
    "get_all_characters",
    "get_all_combos",
    "get_all_decks",
    "get_character",
    "get_combo",
    "get_deck",
    "get_session",
    "init_db",
    "update_character",
    "update_deck",
]
