"""
Tests for the working deck.

INVARIANTS:
- Membership never exceeds capacity
- Membership never holds the same character twice
- Rejected adds leave membership unchanged
"""

import pytest

from rosterforge.config import MAX_DECK_SIZE
from rosterforge.models.deck import Deck
from rosterforge.models.failure import (
    DeckFullError,
    DuplicateMemberError,
    FailureKind,
    UnknownCharacterError,
)
from rosterforge.services.deck_state import DeckState


class TestAddMember:
    def test_appends_in_insertion_order(self) -> None:
        deck = DeckState()
        deck.add_member(3)
        deck.add_member(1)
        deck.add_member(2)

        assert deck.member_ids == (3, 1, 2)

    def test_seventh_add_raises_deck_full(self) -> None:
        """The 7th distinct add raises DeckFullError and changes nothing."""
        deck = DeckState()
        for character_id in range(1, MAX_DECK_SIZE + 1):
            deck.add_member(character_id)

        with pytest.raises(DeckFullError) as exc_info:
            deck.add_member(7)

        assert exc_info.value.kind == FailureKind.DECK_FULL
        assert exc_info.value.capacity == MAX_DECK_SIZE
        assert deck.member_ids == (1, 2, 3, 4, 5, 6)

    def test_duplicate_raises_and_never_duplicates(self) -> None:
        deck = DeckState()
        deck.add_member(1)

        with pytest.raises(DuplicateMemberError) as exc_info:
            deck.add_member(1)

        assert exc_info.value.character_id == 1
        assert deck.member_ids == (1,)

    def test_full_checked_before_duplicate(self) -> None:
        deck = DeckState(capacity=2)
        deck.add_member(1)
        deck.add_member(2)

        with pytest.raises(DeckFullError):
            deck.add_member(1)

    def test_unknown_character_rejected_when_catalog_known(self) -> None:
        deck = DeckState(known_ids=[1, 2])

        with pytest.raises(UnknownCharacterError):
            deck.add_member(99)

        assert deck.is_empty()

    def test_any_id_accepted_without_catalog(self) -> None:
        deck = DeckState()
        deck.add_member(99)
        assert 99 in deck

    def test_capacity_never_exceeded_over_many_adds(self) -> None:
        deck = DeckState()
        for character_id in [1, 2, 2, 3, 4, 5, 6, 7, 8, 1]:
            try:
                deck.add_member(character_id)
            except (DeckFullError, DuplicateMemberError):
                pass
            assert len(deck) <= MAX_DECK_SIZE
            assert len(set(deck.member_ids)) == len(deck.member_ids)


class TestRemoveAndClear:
    def test_remove_member(self) -> None:
        deck = DeckState(Deck(member_ids=(1, 2, 3)))
        deck.remove_member(2)
        assert deck.member_ids == (1, 3)

    def test_remove_non_member_is_noop(self) -> None:
        deck = DeckState(Deck(member_ids=(1, 2)))
        before = deck.member_ids

        deck.remove_member(42)

        assert deck.member_ids == before

    def test_clear(self) -> None:
        deck = DeckState(Deck(id=5, name="Saved", member_ids=(1, 2)))
        deck.clear()

        assert deck.is_empty()
        assert deck.deck_id == 5
        assert deck.name == "Saved"

    def test_remove_frees_a_slot(self) -> None:
        deck = DeckState(Deck(member_ids=(1, 2, 3, 4, 5, 6)))
        assert deck.is_full()

        deck.remove_member(6)
        deck.add_member(7)

        assert deck.member_ids == (1, 2, 3, 4, 5, 7)


class TestSavedState:
    def test_new_deck_is_unsaved(self) -> None:
        deck = DeckState()
        assert deck.is_saved is False
        assert deck.snapshot() == Deck(id=None, name="マイデッキ", member_ids=())

    def test_mutations_keep_saved_state(self) -> None:
        deck = DeckState()
        deck.add_member(1)
        deck.clear()
        assert deck.is_saved is False

        deck.mark_saved(Deck(id=10, name="マイデッキ", member_ids=()))
        deck.add_member(2)
        deck.remove_member(2)
        assert deck.is_saved is True
        assert deck.deck_id == 10

    def test_replace_with_loads_record(self) -> None:
        deck = DeckState()
        deck.add_member(9)

        deck.replace_with(Deck(id=3, name="Pitchers", member_ids=(4, 5)))

        assert deck.deck_id == 3
        assert deck.name == "Pitchers"
        assert deck.member_ids == (4, 5)

    def test_replace_with_drops_repeated_ids(self) -> None:
        deck = DeckState()
        deck.replace_with(Deck(id=3, member_ids=(4, 5, 4)))
        assert deck.member_ids == (4, 5)

    def test_predicates(self) -> None:
        deck = DeckState(capacity=1)
        assert deck.is_empty() is True
        assert deck.is_full() is False

        deck.add_member(1)

        assert deck.is_empty() is False
        assert deck.is_full() is True
