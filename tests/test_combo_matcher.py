import pytest

from rosterforge.models.combo import Combo
from rosterforge.services.combo_matcher import active_combos, is_combo_active


def make_combo(combo_id: int, required: list[int]) -> Combo:
    return Combo.from_raw(
        id=combo_id,
        name=f"Combo {combo_id}",
        description="",
        required_member_ids=required,
        raw_effects={"speed": 1},
    )


class TestActiveCombos:
    @pytest.mark.parametrize(
        ("members", "expected"),
        [
            ([1, 2], True),
            ([2, 1], True),
            ([1, 2, 3], True),
            ([3, 2, 1], True),
            ([1, 3], False),
            ([2], False),
            ([], False),
        ],
    )
    def test_pair_requirement(self, members: list[int], expected: bool) -> None:
        combo = make_combo(1, [1, 2])
        assert (combo in active_combos(members, [combo])) is expected

    def test_catalog_order_preserved(self) -> None:
        combos = [make_combo(3, [2]), make_combo(1, [1]), make_combo(2, [1, 2])]

        result = active_combos([1, 2], combos)

        assert [c.id for c in result] == [3, 1, 2]

    def test_only_satisfied_combos_returned(self) -> None:
        combos = [make_combo(1, [1, 2]), make_combo(2, [3, 4])]
        assert [c.id for c in active_combos([1, 2, 3], combos)] == [1]

    def test_empty_catalog(self) -> None:
        assert active_combos([1, 2], []) == []

    def test_duplicate_requirements_collapse(self) -> None:
        combo = make_combo(1, [1, 1])
        assert active_combos([1], [combo]) == [combo]

    def test_empty_requirement_is_always_active(self) -> None:
        combo = make_combo(1, [])
        assert active_combos([], [combo]) == [combo]

    def test_pure(self) -> None:
        combos = [make_combo(1, [1])]
        members = [1]

        first = active_combos(members, combos)
        second = active_combos(members, combos)

        assert first == second
        assert members == [1]


class TestHelpers:
    def test_is_combo_active(self) -> None:
        combo = make_combo(1, [1, 2])
        assert is_combo_active(combo, [1, 2]) is True
        assert is_combo_active(combo, [1]) is False
