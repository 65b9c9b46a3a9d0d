from dataclasses import dataclass

from rosterforge.config import DEFAULT_DECK_NAME


@dataclass(frozen=True, slots=True)
class Deck:
    """
    A deck record as stored by the persistence layer.

    Attributes:
        id: Persistent identifier, or None for a deck that was never saved
        name: Deck name
        member_ids: Character ids in slot order
    """

    id: int | None = None
    name: str = DEFAULT_DECK_NAME
    member_ids: tuple[int, ...] = ()

    @property
    def is_saved(self) -> bool:
        """True once the deck has a persistent identity."""
        return self.id is not None

    def __len__(self) -> int:
        return len(self.member_ids)
