"""
Sample catalog for demo mode.

Five characters, one combo, and one deck: enough to exercise every path
through the deck engine (stat folding, the all-stats combo effect, and a
display-only recovery effect) without any admin data entry.

Character ids are assigned by the database in insertion order, so the
combo and deck below refer to characters by their position in
SAMPLE_CHARACTERS (1-based).
"""

from dataclasses import dataclass, field
from typing import Any

from rosterforge.models.character import Position, Rarity
from rosterforge.models.combo import ALL_STATS_LABEL
from rosterforge.models.stats import StatVector


@dataclass(frozen=True)
class SampleCharacter:
    name: str
    position: Position
    rarity: Rarity
    level: int
    awakening: int
    rating: int
    stats: StatVector


@dataclass(frozen=True)
class SampleCombo:
    name: str
    description: str
    required: tuple[int, ...]
    effects: dict[str, Any] = field(default_factory=dict)


SAMPLE_CHARACTERS: tuple[SampleCharacter, ...] = (
    SampleCharacter(
        name="猪狩 守",
        position=Position.PITCHER,
        rarity=Rarity.SR,
        level=5,
        awakening=3,
        rating=3,
        stats=StatVector(velocity=3, control=2, stamina=2),
    ),
    SampleCharacter(
        name="友沢 亮",
        position=Position.OUTFIELD,
        rarity=Rarity.R,
        level=4,
        awakening=2,
        rating=4,
        stats=StatVector(contact=3, speed=3, arm=2),
    ),
    SampleCharacter(
        name="猪狩 進",
        position=Position.PITCHER,
        rarity=Rarity.PSR,
        level=5,
        awakening=4,
        rating=5,
        stats=StatVector(velocity=4, control=4, breaking=3),
    ),
    SampleCharacter(
        name="佐藤 寿也",
        position=Position.INFIELD,
        rarity=Rarity.N,
        level=3,
        awakening=1,
        rating=2,
        stats=StatVector(contact=1, power=3, fielding=2),
    ),
    SampleCharacter(
        name="六道 聖",
        position=Position.CATCHER,
        rarity=Rarity.PR,
        level=4,
        awakening=2,
        rating=3,
        stats=StatVector(arm=2, fielding=3),
    ),
)

SAMPLE_COMBOS: tuple[SampleCombo, ...] = (
    SampleCombo(
        name="サクセスコンボ",
        description="猪狩守と友沢亮の組み合わせにより発動",
        required=(1, 2),
        effects={ALL_STATS_LABEL: 1, "疲労回復": 5},
    ),
)

SAMPLE_DECK_NAME = "マイデッキ"
SAMPLE_DECK_MEMBERS: tuple[int, ...] = (1, 2)
