"""
Deck stat aggregation.

Folds every member's stats and every active combo's effects into one
StatVector:

1. Start from the zero vector
2. Add each member's stats
3. Apply each active combo's effects in order:
   - StatEffect adds to its key
   - AllStatsEffect adds to every key
   - DisplayEffect is skipped
4. Return the total, unrounded and unclamped

Combo effects stack without any cap. A cap, if wanted, belongs downstream.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from rosterforge.config import MAX_DECK_SIZE
from rosterforge.models.character import Character
from rosterforge.models.combo import AllStatsEffect, Combo, StatEffect
from rosterforge.models.failure import UnknownCharacterReferenceFault
from rosterforge.models.stats import StatVector, add, category_bonuses, category_totals
from rosterforge.services.combo_matcher import active_combos

CharacterCatalog = Mapping[int, Character] | Iterable[Character]


def index_characters(characters: CharacterCatalog) -> Mapping[int, Character]:
    """Index a character catalog by id."""
    if isinstance(characters, Mapping):
        return characters
    return {character.id: character for character in characters}


def apply_combo(total: StatVector, combo: Combo) -> StatVector:
    """Fold one combo's numeric effects into a running total."""
    for effect in combo.effects:
        if isinstance(effect, AllStatsEffect):
            total = total.add_to_all(effect.value)
        elif isinstance(effect, StatEffect):
            total = total.add_to(effect.key, effect.value)
    return total


def aggregate(
    member_ids: Iterable[int],
    characters: CharacterCatalog,
    active: Sequence[Combo],
) -> StatVector:
    """
    Compute a deck's aggregate stats.

    Args:
        member_ids: Deck membership
        characters: Character catalog, by id or as a sequence
        active: Active combos, in application order

    Returns:
        The aggregate StatVector

    Raises:
        UnknownCharacterReferenceFault: A member is missing from the catalog
    """
    catalog = index_characters(characters)
    member_ids = list(member_ids)

    missing = [character_id for character_id in member_ids if character_id not in catalog]
    if missing:
        raise UnknownCharacterReferenceFault(missing)

    total = StatVector.zero()
    for character_id in member_ids:
        total = add(total, catalog[character_id].stats)

    for combo in active:
        total = apply_combo(total, combo)

    return total


@dataclass(frozen=True)
class DeckSummary:
    """Everything the deck stats panel shows, derived from membership."""

    member_ids: tuple[int, ...]
    capacity: int
    active_combos: list[Combo] = field(default_factory=list)
    totals: StatVector = field(default_factory=StatVector.zero)

    @property
    def member_count(self) -> int:
        return len(self.member_ids)

    @property
    def categories(self) -> dict[str, int]:
        return category_totals(self.totals)

    @property
    def category_bonuses(self) -> dict[str, int]:
        return category_bonuses(self.totals)


def summarize_deck(
    member_ids: Iterable[int],
    characters: CharacterCatalog,
    combos: Sequence[Combo],
    capacity: int = MAX_DECK_SIZE,
) -> DeckSummary:
    """Match combos and aggregate stats for a deck in one pass."""
    members = tuple(member_ids)
    active = active_combos(members, combos)
    return DeckSummary(
        member_ids=members,
        capacity=capacity,
        active_combos=active,
        totals=aggregate(members, characters, active),
    )
