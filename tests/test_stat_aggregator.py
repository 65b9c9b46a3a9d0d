import pytest

from rosterforge.models.character import Character
from rosterforge.models.combo import Combo
from rosterforge.models.failure import FailureKind, UnknownCharacterReferenceFault
from rosterforge.models.stats import StatVector
from rosterforge.services.deck_state import DeckState
from rosterforge.services.stat_aggregator import aggregate, summarize_deck


def combo_with(effects: dict, required: list[int] | None = None, combo_id: int = 9) -> Combo:
    return Combo.from_raw(
        id=combo_id,
        name="Test Combo",
        description="",
        required_member_ids=required or [],
        raw_effects=effects,
    )


class TestAggregate:
    def test_sum_of_two_characters(self, characters: list[Character]) -> None:
        """Without combos, the aggregate is the key-wise sum."""
        totals = aggregate([1, 2], characters, [])

        assert totals == StatVector(velocity=3, control=2, contact=3, speed=3, arm=2)

    def test_all_stats_combo_adds_to_every_key(
        self, characters: list[Character], success_combo: Combo
    ) -> None:
        totals = aggregate([1, 2], characters, [success_combo])

        assert totals.as_dict() == {
            "velocity": 4,
            "control": 3,
            "stamina": 1,
            "breaking": 1,
            "contact": 4,
            "power": 1,
            "speed": 4,
            "arm": 3,
            "fielding": 1,
        }

    def test_display_effect_ignored(self, characters: list[Character]) -> None:
        combo = combo_with({"recoveryPercent": 5})

        assert aggregate([1, 2], characters, [combo]) == aggregate([1, 2], characters, [])

    def test_stat_effect_adds_to_one_key(self, characters: list[Character]) -> None:
        combo = combo_with({"power": 2})

        totals = aggregate([1], characters, [combo])

        assert totals == StatVector(velocity=3, control=2, power=2)

    def test_combos_stack_without_cap(self, characters: list[Character]) -> None:
        combos = [combo_with({"speed": 5}, combo_id=1), combo_with({"speed": 5}, combo_id=2)]

        assert aggregate([2], characters, combos).speed == 13

    def test_negative_effect_not_special_cased(self, characters: list[Character]) -> None:
        combo = combo_with({"全ステータス": -1})

        totals = aggregate([1], characters, [combo])

        assert totals.velocity == 2
        assert totals.power == -1

    def test_accepts_catalog_mapping(self, characters: list[Character]) -> None:
        by_id = {c.id: c for c in characters}
        assert aggregate([1, 2], by_id, []) == aggregate([1, 2], characters, [])

    def test_member_order_irrelevant(self, characters: list[Character]) -> None:
        assert aggregate([3, 1, 2], characters, []) == aggregate([1, 2, 3], characters, [])

    def test_unknown_reference_raises(self, characters: list[Character]) -> None:
        """A member missing from the catalog is a fault, never a zero contribution."""
        with pytest.raises(UnknownCharacterReferenceFault) as exc_info:
            aggregate([1, 99], characters, [])

        assert exc_info.value.character_ids == [99]
        assert exc_info.value.kind == FailureKind.INVARIANT_VIOLATION

    def test_cleared_deck_aggregates_to_zero(
        self, characters: list[Character], success_combo: Combo
    ) -> None:
        deck = DeckState()
        deck.add_member(1)
        deck.add_member(2)
        deck.clear()

        totals = aggregate(deck.member_ids, characters, [])

        assert totals == StatVector.zero()
        assert aggregate(deck.member_ids, [], []) == StatVector.zero()


class TestSummarizeDeck:
    def test_summary_with_active_combo(
        self, characters: list[Character], success_combo: Combo
    ) -> None:
        summary = summarize_deck([1, 2, 3], characters, [success_combo])

        assert summary.member_count == 3
        assert summary.capacity == 6
        assert summary.active_combos == [success_combo]
        assert summary.totals.fielding == 4
        assert summary.categories["pitching"] == summary.totals.pitching_total

    def test_summary_without_combo(
        self, characters: list[Character], success_combo: Combo
    ) -> None:
        summary = summarize_deck([1, 3], characters, [success_combo])

        assert summary.active_combos == []
        assert summary.totals == StatVector(velocity=3, control=2, arm=2, fielding=3)
