from dataclasses import dataclass, field
from enum import Enum

from rosterforge.models.stats import StatVector


class Position(str, Enum):
    """Fielding position of a character."""

    PITCHER = "投手"
    CATCHER = "捕手"
    INFIELD = "内野"
    OUTFIELD = "外野"


class Rarity(str, Enum):
    """Card rarity, lowest to highest."""

    N = "N"
    PN = "PN"
    R = "R"
    PR = "PR"
    SR = "SR"
    PSR = "PSR"


@dataclass(frozen=True, slots=True)
class Character:
    """
    A collectible character that can fill a deck slot.

    Attributes:
        id: Unique catalog identifier
        name: Display name
        position: Fielding position
        rarity: Card rarity
        stats: Stat contribution to any deck the character joins
        level: Character level (1 and up)
        awakening: Awakening tier (0 = not awakened)
        rating: Star rating shown in the collection view
        owned: Whether the player owns this character
    """

    id: int
    name: str
    position: Position
    rarity: Rarity = Rarity.N
    stats: StatVector = field(default_factory=StatVector.zero)
    level: int = 1
    awakening: int = 0
    rating: int = 3
    owned: bool = True
