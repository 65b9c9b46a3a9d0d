"""
Stat model for deck aggregation.

A StatVector is the nine-key ability profile every character contributes
to its deck. Pitching stats (velocity, control, stamina, breaking) and
batting stats (contact, power, speed, arm, fielding) are stored as two
nested blocks but aggregated as one flat vector.

INVARIANT: Every key is always present. Missing keys default to 0.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class StatKey(str, Enum):
    """The closed set of stat keys."""

    # Pitching block
    VELOCITY = "velocity"
    CONTROL = "control"
    STAMINA = "stamina"
    BREAKING = "breaking"

    # Batting block
    CONTACT = "contact"
    POWER = "power"
    SPEED = "speed"
    ARM = "arm"
    FIELDING = "fielding"


PITCHING_KEYS: tuple[StatKey, ...] = (
    StatKey.VELOCITY,
    StatKey.CONTROL,
    StatKey.STAMINA,
    StatKey.BREAKING,
)

BATTING_KEYS: tuple[StatKey, ...] = (
    StatKey.CONTACT,
    StatKey.POWER,
    StatKey.SPEED,
    StatKey.ARM,
    StatKey.FIELDING,
)

STAT_KEY_VALUES: frozenset[str] = frozenset(key.value for key in StatKey)


@dataclass(frozen=True, slots=True)
class StatVector:
    """
    An immutable nine-key stat profile.

    Addition is key-wise. StatVector.zero() is the identity element.
    Values are not clamped: a negative combo effect produces a negative total.
    """

    velocity: int = 0
    control: int = 0
    stamina: int = 0
    breaking: int = 0
    contact: int = 0
    power: int = 0
    speed: int = 0
    arm: int = 0
    fielding: int = 0

    @classmethod
    def zero(cls) -> "StatVector":
        """The all-zero vector."""
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "StatVector":
        """
        Build a vector from a flat {stat_key: value} mapping.

        Keys outside the stat schema are ignored.
        """
        return cls(**{key: values[key] for key in STAT_KEY_VALUES if key in values})

    @classmethod
    def from_blocks(cls, blocks: Mapping[str, Any]) -> "StatVector":
        """Build a vector from the nested {"pitching": {...}, "batting": {...}} shape."""
        flat: dict[str, int] = {}
        flat.update(blocks.get("pitching") or {})
        flat.update(blocks.get("batting") or {})
        return cls.from_mapping(flat)

    def get(self, key: StatKey | str) -> int:
        """Value for a stat key."""
        name = key.value if isinstance(key, StatKey) else key
        if name not in STAT_KEY_VALUES:
            raise KeyError(name)
        value: int = getattr(self, name)
        return value

    def as_dict(self) -> dict[str, int]:
        """Flat {stat_key: value} mapping in schema order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_blocks(self) -> dict[str, dict[str, int]]:
        """Nested storage shape, the inverse of from_blocks."""
        return {
            "pitching": {key.value: self.get(key) for key in PITCHING_KEYS},
            "batting": {key.value: self.get(key) for key in BATTING_KEYS},
        }

    def add_to_all(self, value: int | float) -> "StatVector":
        """Add the same value to every key."""
        return StatVector(**{f.name: getattr(self, f.name) + value for f in fields(self)})

    def add_to(self, key: StatKey, value: int | float) -> "StatVector":
        """Add a value to a single key."""
        values: dict[str, int | float] = dict(self.as_dict())
        values[key.value] += value
        return StatVector(**values)

    def __add__(self, other: object) -> "StatVector":
        if not isinstance(other, StatVector):
            return NotImplemented
        return add(self, other)

    # Category subtotals (display projections, no invariants of their own)

    @property
    def pitching_total(self) -> int:
        return self.velocity + self.control + self.stamina + self.breaking

    @property
    def batting_total(self) -> int:
        return self.contact + self.power + self.speed

    @property
    def fielding_total(self) -> int:
        return self.arm + self.fielding

    @property
    def running_total(self) -> int:
        return self.speed


def add(a: StatVector, b: StatVector) -> StatVector:
    """Key-wise sum of two vectors."""
    return StatVector(**{f.name: getattr(a, f.name) + getattr(b, f.name) for f in fields(a)})


def category_totals(stats: StatVector) -> dict[str, int]:
    """Category subtotals shown alongside the aggregate."""
    return {
        "pitching": stats.pitching_total,
        "batting": stats.batting_total,
        "fielding": stats.fielding_total,
        "running": stats.running_total,
    }


def category_bonuses(stats: StatVector) -> dict[str, int]:
    """Half of each positive category subtotal, rounded down. Zero otherwise."""
    return {
        category: int(total // 2) if total > 0 else 0
        for category, total in category_totals(stats).items()
    }
