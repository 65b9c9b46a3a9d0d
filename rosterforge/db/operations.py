"""
Database CRUD operations.

Provides async functions for creating, reading, updating, and deleting
characters, decks, and combos, plus converters to the domain models.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rosterforge.models.character import Character, Position, Rarity
from rosterforge.models.combo import Combo
from rosterforge.models.db import CharacterDB, ComboDB, DeckDB
from rosterforge.models.deck import Deck
from rosterforge.models.stats import StatVector

# Columns a character update may touch
CHARACTER_FIELDS = frozenset(
    {"name", "position", "rarity", "level", "awakening", "rating", "stats", "owned"}
)

# --- Character Operations ---


async def get_all_characters(session: AsyncSession) -> list[CharacterDB]:
    """Get every character, in catalog (id) order."""
    result = await session.execute(select(CharacterDB).order_by(CharacterDB.id))
    return list(result.scalars().all())


async def get_character(session: AsyncSession, character_id: int) -> CharacterDB | None:
    """Get a character by id. Returns None if not found."""
    return await session.get(CharacterDB, character_id)


async def create_character(
    session: AsyncSession,
    name: str,
    position: Position,
    rarity: Rarity = Rarity.N,
    stats: StatVector | None = None,
    level: int = 1,
    awakening: int = 0,
    rating: int = 3,
    owned: bool = True,
) -> CharacterDB:
    """Create a new character and assign its id."""
    character = CharacterDB(
        name=name,
        position=position.value,
        rarity=rarity.value,
        stats=(stats or StatVector.zero()).to_blocks(),
        level=level,
        awakening=awakening,
        rating=rating,
        owned=owned,
    )
    session.add(character)
    await session.flush()
    return character


async def update_character(
    session: AsyncSession, character_id: int, changes: dict[str, Any]
) -> CharacterDB | None:
    """
    Apply a partial update to a character.

    Enum values are stored by value; a StatVector is stored in block shape.
    Returns None if the character does not exist.
    """
    unknown = set(changes) - CHARACTER_FIELDS
    if unknown:
        msg = f"Cannot update character fields: {sorted(unknown)}"
        raise ValueError(msg)

    character = await get_character(session, character_id)
    if character is None:
        return None

    for column, value in changes.items():
        if isinstance(value, Position | Rarity):
            value = value.value
        elif isinstance(value, StatVector):
            value = value.to_blocks()
        setattr(character, column, value)

    await session.flush()
    return character


async def delete_character(session: AsyncSession, character_id: int) -> bool:
    """
    Delete a character.

    Returns True if deleted, False if not found. Decks that reference the
    character keep the stale id.
    """
    character = await get_character(session, character_id)
    if character is None:
        return False

    await session.delete(character)
    return True


def character_to_model(db_character: CharacterDB) -> Character:
    """Convert a database character to a domain model."""
    return Character(
        id=db_character.id,
        name=db_character.name,
        position=Position(db_character.position),
        rarity=Rarity(db_character.rarity),
        stats=StatVector.from_blocks(db_character.stats or {}),
        level=db_character.level,
        awakening=db_character.awakening,
        rating=db_character.rating,
        owned=db_character.owned,
    )


# --- Deck Operations ---


async def get_all_decks(session: AsyncSession) -> list[DeckDB]:
    """Get every saved deck, oldest first."""
    result = await session.execute(select(DeckDB).order_by(DeckDB.id))
    return list(result.scalars().all())


async def get_deck(session: AsyncSession, deck_id: int) -> DeckDB | None:
    """Get a deck by id. Returns None if not found."""
    return await session.get(DeckDB, deck_id)


async def create_deck(session: AsyncSession, name: str, member_ids: Sequence[int]) -> DeckDB:
    """Create a new deck and assign its id."""
    deck = DeckDB(name=name, characters=list(member_ids))
    session.add(deck)
    await session.flush()
    return deck


async def update_deck(
    session: AsyncSession,
    deck_id: int,
    name: str | None = None,
    member_ids: Sequence[int] | None = None,
) -> DeckDB | None:
    """
    Update a deck's name and/or membership in place.

    Fields left as None are unchanged. Returns None if not found.
    """
    deck = await get_deck(session, deck_id)
    if deck is None:
        return None

    if name is not None:
        deck.name = name
    if member_ids is not None:
        # Reassign rather than mutate so the JSON column is marked dirty
        deck.characters = list(member_ids)

    await session.flush()
    return deck


async def delete_deck(session: AsyncSession, deck_id: int) -> bool:
    """
    Delete a deck.

    Returns True if deleted, False if not found.
    """
    deck = await get_deck(session, deck_id)
    if deck is None:
        return False

    await session.delete(deck)
    return True


def deck_to_model(db_deck: DeckDB) -> Deck:
    """Convert a database deck to a domain model."""
    return Deck(id=db_deck.id, name=db_deck.name, member_ids=tuple(db_deck.characters or ()))


# --- Combo Operations ---


async def get_all_combos(session: AsyncSession) -> list[ComboDB]:
    """Get every combo, in catalog (id) order."""
    result = await session.execute(select(ComboDB).order_by(ComboDB.id))
    return list(result.scalars().all())


async def get_combo(session: AsyncSession, combo_id: int) -> ComboDB | None:
    """Get a combo by id. Returns None if not found."""
    return await session.get(ComboDB, combo_id)


async def create_combo(
    session: AsyncSession,
    name: str,
    description: str,
    required_member_ids: Sequence[int],
    effects: dict[str, Any],
) -> ComboDB:
    """Create a new combo and assign its id."""
    combo = ComboDB(
        name=name,
        description=description,
        required_characters=list(required_member_ids),
        effects=dict(effects),
    )
    session.add(combo)
    await session.flush()
    return combo


def combo_to_model(db_combo: ComboDB) -> Combo:
    """Convert a database combo to a domain model, resolving its effects."""
    return Combo.from_raw(
        id=db_combo.id,
        name=db_combo.name,
        description=db_combo.description,
        required_member_ids=list(db_combo.required_characters or ()),
        raw_effects=db_combo.effects or {},
    )
