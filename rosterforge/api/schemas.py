"""
Request and response models shared by the API routers.

Stats travel in the nested {"pitching": {...}, "batting": {...}} shape used
for storage; the deck engine works on the flat StatVector.
"""

from typing import Any

from pydantic import BaseModel, Field

from rosterforge.models.character import Character, Position, Rarity
from rosterforge.models.combo import Combo
from rosterforge.models.stats import StatVector


class PitchingStats(BaseModel):
    """Pitching block of a stat profile."""

    velocity: int = Field(default=0, ge=0)
    control: int = Field(default=0, ge=0)
    stamina: int = Field(default=0, ge=0)
    breaking: int = Field(default=0, ge=0)


class BattingStats(BaseModel):
    """Batting block of a stat profile."""

    contact: int = Field(default=0, ge=0)
    power: int = Field(default=0, ge=0)
    speed: int = Field(default=0, ge=0)
    arm: int = Field(default=0, ge=0)
    fielding: int = Field(default=0, ge=0)


class StatsPayload(BaseModel):
    """A character's stats as sent and received over the API."""

    pitching: PitchingStats = Field(default_factory=PitchingStats)
    batting: BattingStats = Field(default_factory=BattingStats)

    def to_vector(self) -> StatVector:
        return StatVector.from_blocks(self.model_dump())

    @classmethod
    def from_vector(cls, stats: StatVector) -> "StatsPayload":
        return cls.model_validate(stats.to_blocks())


class CharacterResponse(BaseModel):
    """Response model for a single character."""

    id: int
    name: str
    position: Position
    rarity: Rarity
    level: int
    awakening: int
    rating: int
    stats: StatsPayload
    owned: bool

    @classmethod
    def from_model(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            position=character.position,
            rarity=character.rarity,
            level=character.level,
            awakening=character.awakening,
            rating=character.rating,
            stats=StatsPayload.from_vector(character.stats),
            owned=character.owned,
        )


class ComboResponse(BaseModel):
    """Response model for a single combo."""

    id: int
    name: str
    description: str
    required_member_ids: list[int]
    effects: dict[str, Any] = Field(default_factory=dict)
    effect_labels: list[str] = Field(
        default_factory=list,
        description="Formatted effects for display, e.g. '疲労回復+5%'",
    )

    @classmethod
    def from_model(cls, combo: Combo) -> "ComboResponse":
        return cls(
            id=combo.id,
            name=combo.name,
            description=combo.description,
            required_member_ids=sorted(combo.required_member_ids),
            effects=combo.raw_effects,
            effect_labels=combo.effect_labels(),
        )
