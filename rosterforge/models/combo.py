"""
Combo definitions and their resolved effects.

A combo activates when every one of its required characters is in the deck.
Its effects are stored as a flat {label: value} mapping, where a label is
either a stat key, the all-stats sentinel, or a free-form display label
such as a recovery percentage.

The raw mapping is resolved ONCE into tagged effects when the catalog is
loaded. Aggregation dispatches on the effect type and never compares
label strings.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from rosterforge.models.stats import STAT_KEY_VALUES, StatKey

# Labels meaning "apply to every stat key"
ALL_STATS_LABEL = "全ステータス"
ALL_STATS_KEYS: frozenset[str] = frozenset({ALL_STATS_LABEL, "all_stats"})

# Display labels whose value is a percentage
PERCENT_LABELS: frozenset[str] = frozenset({"疲労回復", "recoveryPercent"})


@dataclass(frozen=True, slots=True)
class StatEffect:
    """Adds a value to one stat key."""

    key: StatKey
    value: int | float


@dataclass(frozen=True, slots=True)
class AllStatsEffect:
    """Adds a value to every stat key."""

    value: int | float


@dataclass(frozen=True, slots=True)
class DisplayEffect:
    """An informational effect that never touches the stat totals."""

    label: str
    value: Any


ComboEffect = StatEffect | AllStatsEffect | DisplayEffect


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def resolve_effect(label: str, value: Any) -> ComboEffect:
    """
    Classify a single raw effect entry.

    Non-numeric values and unrecognised labels become DisplayEffect.
    They are valid data, not errors.
    """
    if _is_number(value):
        if label in ALL_STATS_KEYS:
            return AllStatsEffect(value=value)
        if label in STAT_KEY_VALUES:
            return StatEffect(key=StatKey(label), value=value)
    return DisplayEffect(label=label, value=value)


def resolve_effects(raw: Mapping[str, Any]) -> tuple[ComboEffect, ...]:
    """Resolve a raw effect mapping, preserving its order."""
    return tuple(resolve_effect(label, value) for label, value in raw.items())


def _signed(value: Any) -> str:
    if _is_number(value):
        return f"{value:+}"
    return f"+{value}"


def format_effect(effect: ComboEffect) -> str:
    """Human-readable effect pill, e.g. "全ステータス+1", "speed-2" or "疲労回復+5%"."""
    if isinstance(effect, AllStatsEffect):
        return f"{ALL_STATS_LABEL}{_signed(effect.value)}"
    if isinstance(effect, StatEffect):
        return f"{effect.key.value}{_signed(effect.value)}"
    suffix = "%" if effect.label in PERCENT_LABELS else ""
    return f"{effect.label}{_signed(effect.value)}{suffix}"


@dataclass(frozen=True, slots=True)
class Combo:
    """
    A named bonus unlocked by a set of characters.

    Attributes:
        id: Catalog identifier
        name: Display name
        description: What the combo represents
        required_member_ids: Characters that must all be in the deck
        effects: Resolved effects, in definition order
        raw_effects: The stored {label: value} mapping
    """

    id: int
    name: str
    description: str = ""
    required_member_ids: frozenset[int] = field(default_factory=frozenset)
    effects: tuple[ComboEffect, ...] = ()
    raw_effects: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_raw(
        cls,
        id: int,  # noqa: A002
        name: str,
        description: str,
        required_member_ids: list[int] | frozenset[int] | tuple[int, ...],
        raw_effects: Mapping[str, Any],
    ) -> "Combo":
        """Build a combo from its stored shape, resolving effects."""
        return cls(
            id=id,
            name=name,
            description=description,
            required_member_ids=frozenset(required_member_ids),
            effects=resolve_effects(raw_effects),
            raw_effects=dict(raw_effects),
        )

    def effect_labels(self) -> list[str]:
        """Formatted effects for display."""
        return [format_effect(effect) for effect in self.effects]
