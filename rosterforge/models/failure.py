"""
Failure classification for deck operations.

Every error the deck engine raises is a KnownError: the system knows
exactly what went wrong, carries a user-appropriate message, and maps to
an HTTP status code at the API boundary.

The engine raises these synchronously to its caller. It never logs,
retries, or substitutes a default value.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Membership constraint violations
    DECK_FULL = "deck_full"
    DUPLICATE_MEMBER = "duplicate_member"

    # Resource failures
    NOT_FOUND = "not_found"

    # Usage errors
    INVALID_STATE = "invalid_state"

    # Internal errors
    INVARIANT_VIOLATION = "invariant_violation"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)


class DeckFullError(KnownError):
    """
    Raised when adding to a deck that already has every slot filled.

    Recoverable: the deck is left unchanged.
    """

    def __init__(self, character_id: int, capacity: int):
        self.character_id = character_id
        self.capacity = capacity
        super().__init__(
            kind=FailureKind.DECK_FULL,
            message=f"The deck is full. A deck holds at most {capacity} characters.",
            suggestion="Remove a character before adding another.",
            status_code=400,
        )


class DuplicateMemberError(KnownError):
    """
    Raised when adding a character that is already in the deck.

    Recoverable: the deck is left unchanged and never holds the id twice.
    """

    def __init__(self, character_id: int):
        self.character_id = character_id
        super().__init__(
            kind=FailureKind.DUPLICATE_MEMBER,
            message=f"Character {character_id} is already in the deck.",
            status_code=400,
        )


class UnknownCharacterError(KnownError):
    """Raised when adding a character id that is not in the loaded catalog."""

    def __init__(self, character_id: int):
        self.character_id = character_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Character {character_id} was not found.",
            status_code=404,
        )


class UnknownCharacterReferenceFault(KnownError):
    """
    Raised by aggregation when a deck references a character missing from
    the catalog.

    The deck and catalog are out of sync. The aggregate for this call is
    invalid; treating the member as a zero contribution would produce a
    silently wrong total.
    """

    def __init__(self, character_ids: list[int]):
        self.character_ids = character_ids
        ids = ", ".join(str(character_id) for character_id in character_ids)
        super().__init__(
            kind=FailureKind.INVARIANT_VIOLATION,
            message=f"Deck references characters missing from the catalog: {ids}.",
            suggestion="Reload the character catalog or remove the missing characters.",
            status_code=409,
        )


class DeckNotFoundError(KnownError):
    """Raised when loading or updating a deck id that does not exist."""

    def __init__(self, deck_id: int):
        self.deck_id = deck_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Deck {deck_id} was not found.",
            status_code=404,
        )


class CatalogNotLoadedError(KnownError):
    """Raised when a deck session is used before its catalogs are loaded."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.INVALID_STATE,
            message="Character and combo catalogs have not been loaded.",
            suggestion="Call load_catalogs() first.",
            status_code=409,
        )
