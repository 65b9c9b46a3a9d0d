"""
SQL implementation of the deck session's persistence gateway.

Wraps the CRUD operations and hands back domain records, so the deck
engine never sees ORM objects.
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from rosterforge.db.operations import (
    character_to_model,
    combo_to_model,
    create_deck,
    deck_to_model,
    get_all_characters,
    get_all_combos,
    get_all_decks,
    update_deck,
)
from rosterforge.models.character import Character
from rosterforge.models.combo import Combo
from rosterforge.models.deck import Deck


class SqlPersistenceGateway:
    """Persistence gateway backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_characters(self) -> list[Character]:
        return [character_to_model(c) for c in await get_all_characters(self.session)]

    async def fetch_combos(self) -> list[Combo]:
        return [combo_to_model(c) for c in await get_all_combos(self.session)]

    async def fetch_decks(self) -> list[Deck]:
        return [deck_to_model(d) for d in await get_all_decks(self.session)]

    async def create_deck(self, name: str, member_ids: Sequence[int]) -> Deck:
        return deck_to_model(await create_deck(self.session, name, member_ids))

    async def update_deck(
        self,
        deck_id: int,
        *,
        name: str | None = None,
        member_ids: Sequence[int] | None = None,
    ) -> Deck | None:
        db_deck = await update_deck(self.session, deck_id, name=name, member_ids=member_ids)
        if db_deck is None:
            return None
        return deck_to_model(db_deck)
