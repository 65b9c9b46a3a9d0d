"""
Combo API endpoints.

Combos are catalog data: they can be listed, fetched, and created.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from rosterforge.api.schemas import ComboResponse
from rosterforge.db import combo_to_model, create_combo, get_all_combos, get_combo
from rosterforge.db.database import get_session

router = APIRouter(prefix="/combos", tags=["combos"])


class ComboCreateRequest(BaseModel):
    """Request model for creating a combo."""

    name: str = Field(..., min_length=1)
    description: str = ""
    required_member_ids: list[int] = Field(..., min_length=1)
    effects: dict[str, Any] = Field(
        default_factory=dict,
        description="Effect labels to values. Stat keys and '全ステータス' are "
        "aggregated; any other label is display-only.",
        examples=[{"全ステータス": 1, "疲労回復": 5}],
    )


@router.get("", response_model=list[ComboResponse])
async def list_combos(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[ComboResponse]:
    """Get the full combo catalog in id order."""
    db_combos = await get_all_combos(session)
    return [ComboResponse.from_model(combo_to_model(c)) for c in db_combos]


@router.get("/{combo_id}", response_model=ComboResponse)
async def get_combo_by_id(
    combo_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ComboResponse:
    """Get a single combo. Returns 404 if not found."""
    db_combo = await get_combo(session, combo_id)
    if db_combo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Combo {combo_id} not found",
        )

    return ComboResponse.from_model(combo_to_model(db_combo))


@router.post("", response_model=ComboResponse, status_code=status.HTTP_201_CREATED)
async def create_new_combo(
    request: ComboCreateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ComboResponse:
    """Add a combo to the catalog."""
    db_combo = await create_combo(
        session,
        name=request.name,
        description=request.description,
        required_member_ids=list(dict.fromkeys(request.required_member_ids)),
        effects=request.effects,
    )
    return ComboResponse.from_model(combo_to_model(db_combo))
