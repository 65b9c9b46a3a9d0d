"""
Deck editing session.

Connects the pure deck engine to persistence. A session loads the
character and combo catalogs once, edits one working deck in memory, and
writes it back on commit (create on first save, update in place after).

Everything below this layer is synchronous and side-effect free; this is
the only layer that performs I/O or logs.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from rosterforge.config import MAX_DECK_SIZE
from rosterforge.models.character import Character
from rosterforge.models.combo import Combo
from rosterforge.models.deck import Deck
from rosterforge.models.failure import (
    CatalogNotLoadedError,
    DeckNotFoundError,
    KnownError,
)
from rosterforge.services.combo_matcher import active_combos
from rosterforge.services.deck_state import DeckState
from rosterforge.services.stat_aggregator import DeckSummary, summarize_deck

logger = logging.getLogger(__name__)


class PersistenceGateway(Protocol):
    """Storage operations a deck session depends on."""

    async def fetch_characters(self) -> list[Character]: ...

    async def fetch_combos(self) -> list[Combo]: ...

    async def fetch_decks(self) -> list[Deck]: ...

    async def create_deck(self, name: str, member_ids: Sequence[int]) -> Deck: ...

    async def update_deck(
        self,
        deck_id: int,
        *,
        name: str | None = None,
        member_ids: Sequence[int] | None = None,
    ) -> Deck | None: ...


class DeckSession:
    """
    One user's deck-building session.

    Usage:
        session = DeckSession(gateway)
        await session.load_catalogs()
        session.add_member(1)
        saved = await session.commit()
    """

    def __init__(self, gateway: PersistenceGateway, capacity: int = MAX_DECK_SIZE):
        self.gateway = gateway
        self.capacity = capacity
        self.characters: dict[int, Character] | None = None
        self.combos: list[Combo] | None = None
        self.deck = DeckState(capacity=capacity)

    @property
    def catalogs_loaded(self) -> bool:
        return self.characters is not None and self.combos is not None

    def _require_catalogs(self) -> tuple[dict[int, Character], list[Combo]]:
        if self.characters is None or self.combos is None:
            raise CatalogNotLoadedError()
        return self.characters, self.combos

    async def load_catalogs(self) -> None:
        """Fetch the character and combo catalogs."""
        characters = await self.gateway.fetch_characters()
        combos = await self.gateway.fetch_combos()

        self.characters = {character.id: character for character in characters}
        self.combos = list(combos)
        self.deck.known_ids = frozenset(self.characters)

        logger.info("Loaded %d characters and %d combos", len(characters), len(combos))

    # --- Membership ---

    def add_member(self, character_id: int) -> None:
        """Add a character to the working deck. Rejections are logged and re-raised."""
        self._require_catalogs()
        try:
            self.deck.add_member(character_id)
        except KnownError as e:
            logger.warning("Rejected adding character %d: %s", character_id, e.message)
            raise

    def remove_member(self, character_id: int) -> None:
        self.deck.remove_member(character_id)

    def clear(self) -> None:
        self.deck.clear()

    def rename(self, name: str) -> None:
        """Rename the working deck. The new name is written on the next commit."""
        self.deck.rename(name)

    # --- Persistence ---

    async def saved_decks(self) -> list[Deck]:
        """Decks available to load."""
        return await self.gateway.fetch_decks()

    async def load_deck(self, deck_id: int) -> Deck:
        """
        Replace the working deck with a saved one.

        Raises:
            DeckNotFoundError: No saved deck has this id
        """
        for deck in await self.gateway.fetch_decks():
            if deck.id == deck_id:
                self.deck.replace_with(deck)
                logger.info("Loaded deck %d (%s)", deck_id, deck.name)
                return deck

        raise DeckNotFoundError(deck_id)

    async def resume(self) -> Deck | None:
        """
        Make the first saved deck the working deck.

        Returns the deck, or None when nothing has been saved yet and the
        working deck stays a fresh unsaved one.
        """
        decks = await self.gateway.fetch_decks()
        if not decks:
            return None

        first = decks[0]
        self.deck.replace_with(first)
        logger.info("Resumed deck %d (%s)", first.id, first.name)
        return first

    async def commit(self) -> Deck:
        """
        Save the working deck.

        Creates the deck on first save, then updates the same record.

        Raises:
            DeckNotFoundError: The saved deck no longer exists
        """
        snapshot = self.deck.snapshot()

        if snapshot.id is None:
            saved = await self.gateway.create_deck(snapshot.name, snapshot.member_ids)
            self.deck.mark_saved(saved)
            logger.info("Created deck %d with %d members", saved.id, len(saved))
            return saved

        updated = await self.gateway.update_deck(
            snapshot.id, name=snapshot.name, member_ids=snapshot.member_ids
        )
        if updated is None:
            logger.error("Deck %d disappeared before update", snapshot.id)
            raise DeckNotFoundError(snapshot.id)

        logger.info("Updated deck %d with %d members", snapshot.id, len(updated))
        return updated

    # --- Derived views ---

    def active_combos(self) -> list[Combo]:
        _, combos = self._require_catalogs()
        return active_combos(self.deck.member_ids, combos)

    def summary(self) -> DeckSummary:
        """Aggregate stats and active combos for the working deck."""
        characters, combos = self._require_catalogs()
        return summarize_deck(self.deck.member_ids, characters, combos, capacity=self.capacity)
