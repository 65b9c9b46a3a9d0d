"""
Deck API endpoints.

CRUD for saved decks, plus the stats views that run the deck engine:
one for a saved deck and one for an unsaved member list.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from rosterforge.api.schemas import ComboResponse
from rosterforge.config import DEFAULT_DECK_NAME
from rosterforge.db import (
    SqlPersistenceGateway,
    create_deck,
    deck_to_model,
    delete_deck,
    get_all_decks,
    get_deck,
    update_deck,
)
from rosterforge.db.database import get_session
from rosterforge.models.deck import Deck
from rosterforge.services.deck_state import DeckState
from rosterforge.services.stat_aggregator import DeckSummary, summarize_deck

router = APIRouter(prefix="/decks", tags=["decks"])


class DeckResponse(BaseModel):
    """Response model for a single deck."""

    id: int
    name: str
    member_ids: list[int] = Field(default_factory=list)

    @classmethod
    def from_model(cls, deck: Deck) -> "DeckResponse":
        return cls(id=deck.id or 0, name=deck.name, member_ids=list(deck.member_ids))


class DeckCreateRequest(BaseModel):
    """Request model for saving a new deck."""

    name: str = Field(default=DEFAULT_DECK_NAME, min_length=1)
    member_ids: list[int] = Field(default_factory=list)


class DeckUpdateRequest(BaseModel):
    """Request model for updating a deck. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1)
    member_ids: list[int] | None = None


class DeckPreviewRequest(BaseModel):
    """Request model for computing stats of an unsaved deck."""

    member_ids: list[int] = Field(default_factory=list)


class DeckStatsResponse(BaseModel):
    """Aggregate stats and active combos for a deck."""

    member_ids: list[int]
    member_count: int
    capacity: int
    totals: dict[str, int | float]
    categories: dict[str, int | float] = Field(
        default_factory=dict,
        description="Subtotals: pitching, batting, fielding, running",
    )
    category_bonuses: dict[str, int] = Field(
        default_factory=dict,
        description="Bonus shown beside each subtotal: half of a positive subtotal, rounded down",
    )
    active_combos: list[ComboResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: DeckSummary) -> "DeckStatsResponse":
        return cls(
            member_ids=list(summary.member_ids),
            member_count=summary.member_count,
            capacity=summary.capacity,
            totals=summary.totals.as_dict(),
            categories=summary.categories,
            category_bonuses=summary.category_bonuses,
            active_combos=[ComboResponse.from_model(c) for c in summary.active_combos],
        )


def validate_members(member_ids: list[int]) -> tuple[int, ...]:
    """
    Check a member list against deck capacity and uniqueness.

    Raises DeckFullError or DuplicateMemberError (mapped to 400).
    """
    deck = DeckState()
    for character_id in member_ids:
        deck.add_member(character_id)
    return deck.member_ids


def _not_found(deck_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Deck {deck_id} not found",
    )


async def _summarize(session: AsyncSession, member_ids: tuple[int, ...]) -> DeckStatsResponse:
    gateway = SqlPersistenceGateway(session)
    characters = await gateway.fetch_characters()
    combos = await gateway.fetch_combos()
    return DeckStatsResponse.from_summary(summarize_deck(member_ids, characters, combos))


@router.get("", response_model=list[DeckResponse])
async def list_decks(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[DeckResponse]:
    """Get all saved decks, oldest first."""
    db_decks = await get_all_decks(session)
    return [DeckResponse.from_model(deck_to_model(d)) for d in db_decks]


@router.post("/preview", response_model=DeckStatsResponse)
async def preview_deck_stats(
    request: DeckPreviewRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckStatsResponse:
    """
    Compute stats for a deck that has not been saved.

    Returns 409 if a member is not in the character catalog.
    """
    return await _summarize(session, validate_members(request.member_ids))


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck_by_id(
    deck_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckResponse:
    """Get a single deck. Returns 404 if not found."""
    db_deck = await get_deck(session, deck_id)
    if db_deck is None:
        raise _not_found(deck_id)

    return DeckResponse.from_model(deck_to_model(db_deck))


@router.get("/{deck_id}/stats", response_model=DeckStatsResponse)
async def get_deck_stats(
    deck_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckStatsResponse:
    """
    Compute aggregate stats for a saved deck.

    Returns 404 if the deck does not exist, 409 if it references a
    character that is no longer in the catalog.
    """
    db_deck = await get_deck(session, deck_id)
    if db_deck is None:
        raise _not_found(deck_id)

    return await _summarize(session, deck_to_model(db_deck).member_ids)


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
async def create_new_deck(
    request: DeckCreateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckResponse:
    """
    Save a new deck.

    Returns 400 if the member list is over capacity or repeats a character.
    """
    member_ids = validate_members(request.member_ids)
    db_deck = await create_deck(session, request.name, member_ids)
    return DeckResponse.from_model(deck_to_model(db_deck))


@router.patch("/{deck_id}", response_model=DeckResponse)
async def update_existing_deck(
    deck_id: int,
    request: DeckUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckResponse:
    """Update a deck's name and/or members in place."""
    member_ids = None
    if request.member_ids is not None:
        member_ids = validate_members(request.member_ids)

    db_deck = await update_deck(session, deck_id, name=request.name, member_ids=member_ids)
    if db_deck is None:
        raise _not_found(deck_id)

    return DeckResponse.from_model(deck_to_model(db_deck))


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_deck(
    deck_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Delete a saved deck."""
    deleted = await delete_deck(session, deck_id)
    if not deleted:
        raise _not_found(deck_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
