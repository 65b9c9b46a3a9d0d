"""
Character API endpoints.

CRUD for the character catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from rosterforge.api.schemas import CharacterResponse, StatsPayload
from rosterforge.db import (
    character_to_model,
    create_character,
    delete_character,
    get_all_characters,
    get_character,
    update_character,
)
from rosterforge.db.database import get_session
from rosterforge.models.character import Position, Rarity

router = APIRouter(prefix="/characters", tags=["characters"])


class CharacterCreateRequest(BaseModel):
    """Request model for creating a character."""

    name: str = Field(..., min_length=1, examples=["猪狩 守"])
    position: Position
    rarity: Rarity = Rarity.N
    level: int = Field(default=1, ge=1)
    awakening: int = Field(default=0, ge=0)
    rating: int = Field(default=3, ge=0)
    stats: StatsPayload = Field(default_factory=StatsPayload)
    owned: bool = True


class CharacterUpdateRequest(BaseModel):
    """Request model for a partial character update. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1)
    position: Position | None = None
    rarity: Rarity | None = None
    level: int | None = Field(default=None, ge=1)
    awakening: int | None = Field(default=None, ge=0)
    rating: int | None = Field(default=None, ge=0)
    stats: StatsPayload | None = None
    owned: bool | None = None


def _not_found(character_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Character {character_id} not found",
    )


@router.get("", response_model=list[CharacterResponse])
async def list_characters(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[CharacterResponse]:
    """Get the full character catalog in id order."""
    db_characters = await get_all_characters(session)
    return [CharacterResponse.from_model(character_to_model(c)) for c in db_characters]


@router.get("/{character_id}", response_model=CharacterResponse)
async def get_character_by_id(
    character_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CharacterResponse:
    """Get a single character. Returns 404 if not found."""
    db_character = await get_character(session, character_id)
    if db_character is None:
        raise _not_found(character_id)

    return CharacterResponse.from_model(character_to_model(db_character))


@router.post("", response_model=CharacterResponse, status_code=status.HTTP_201_CREATED)
async def create_new_character(
    request: CharacterCreateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CharacterResponse:
    """Add a character to the catalog."""
    db_character = await create_character(
        session,
        name=request.name,
        position=request.position,
        rarity=request.rarity,
        stats=request.stats.to_vector(),
        level=request.level,
        awakening=request.awakening,
        rating=request.rating,
        owned=request.owned,
    )
    return CharacterResponse.from_model(character_to_model(db_character))


@router.patch("/{character_id}", response_model=CharacterResponse)
async def update_existing_character(
    character_id: int,
    request: CharacterUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CharacterResponse:
    """
    Update some fields of a character.

    Stats are replaced as a whole when provided.
    """
    changes = {
        name: getattr(request, name)
        for name in request.model_fields_set
        if getattr(request, name) is not None
    }
    if request.stats is not None:
        changes["stats"] = request.stats.to_vector()

    db_character = await update_character(session, character_id, changes)
    if db_character is None:
        raise _not_found(character_id)

    return CharacterResponse.from_model(character_to_model(db_character))


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_character(
    character_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """
    Delete a character.

    Saved decks that include the character keep the stale id; their stats
    endpoint reports the mismatch until the deck is updated.
    """
    deleted = await delete_character(session, character_id)
    if not deleted:
        raise _not_found(character_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
