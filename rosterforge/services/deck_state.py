"""
Working deck state.

Owns the membership of the deck currently being edited, along with its
identity and name.

INVARIANTS:
- Membership never exceeds the deck capacity.
- Membership never contains the same character twice.
- When a catalog of known ids is supplied, only known characters are added.

Every rejected mutation raises and leaves membership unchanged.
"""

from collections.abc import Iterable

from rosterforge.config import DEFAULT_DECK_NAME, MAX_DECK_SIZE
from rosterforge.models.deck import Deck
from rosterforge.models.failure import (
    DeckFullError,
    DuplicateMemberError,
    UnknownCharacterError,
)


class DeckState:
    """
    The in-memory deck being edited.

    A deck starts unsaved (deck_id is None). mark_saved() records the
    identity assigned on first commit; membership changes never alter
    whether a deck is saved.
    """

    def __init__(
        self,
        deck: Deck | None = None,
        known_ids: Iterable[int] | None = None,
        capacity: int = MAX_DECK_SIZE,
    ):
        self.capacity = capacity
        self.known_ids: frozenset[int] | None = (
            frozenset(known_ids) if known_ids is not None else None
        )
        self.deck_id: int | None = None
        self.name: str = DEFAULT_DECK_NAME
        self._member_ids: list[int] = []
        if deck is not None:
            self.replace_with(deck)

    @property
    def member_ids(self) -> tuple[int, ...]:
        """Members in slot order."""
        return tuple(self._member_ids)

    @property
    def is_saved(self) -> bool:
        return self.deck_id is not None

    def __len__(self) -> int:
        return len(self._member_ids)

    def __contains__(self, character_id: object) -> bool:
        return character_id in self._member_ids

    def is_full(self) -> bool:
        return len(self._member_ids) >= self.capacity

    def is_empty(self) -> bool:
        return not self._member_ids

    def add_member(self, character_id: int) -> None:
        """
        Append a character to the next free slot.

        Raises:
            DeckFullError: Every slot is already filled
            DuplicateMemberError: The character is already a member
            UnknownCharacterError: The character is not in the known catalog
        """
        if self.is_full():
            raise DeckFullError(character_id, self.capacity)
        if character_id in self._member_ids:
            raise DuplicateMemberError(character_id)
        if self.known_ids is not None and character_id not in self.known_ids:
            raise UnknownCharacterError(character_id)

        self._member_ids.append(character_id)

    def remove_member(self, character_id: int) -> None:
        """Remove a character. Removing a non-member is a no-op."""
        if character_id in self._member_ids:
            self._member_ids.remove(character_id)

    def clear(self) -> None:
        """Empty every slot. Identity and name are kept."""
        self._member_ids.clear()

    def replace_with(self, deck: Deck) -> None:
        """
        Replace the working deck with a persisted record.

        Stored membership is taken as-is (in order, first occurrence of any
        repeated id kept). Known-id and capacity checks are add-time rules and
        are not applied retroactively.
        """
        self.deck_id = deck.id
        self.name = deck.name
        self._member_ids = list(dict.fromkeys(deck.member_ids))

    def mark_saved(self, deck: Deck) -> None:
        """Record the identity assigned by a successful commit."""
        self.deck_id = deck.id
        self.name = deck.name

    def rename(self, name: str) -> None:
        self.name = name

    def snapshot(self) -> Deck:
        """The working deck as an immutable record."""
        return Deck(id=self.deck_id, name=self.name, member_ids=self.member_ids)
