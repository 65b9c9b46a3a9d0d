"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CharacterDB(Base):
    """
    A collectible character.

    Stats are stored in their nested {"pitching": {...}, "batting": {...}} shape.
    """

    __tablename__ = "characters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    position: Mapped[str] = mapped_column(String(20))
    rarity: Mapped[str] = mapped_column(String(10), default="N")
    level: Mapped[int] = mapped_column(Integer, default=1)
    awakening: Mapped[int] = mapped_column(Integer, default=0)
    rating: Mapped[int] = mapped_column(Integer, default=3)
    stats: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    owned: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<CharacterDB(id={self.id}, name={self.name})>"


class DeckDB(Base):
    """
    A saved deck.

    Member ids are stored as an ordered JSON list. They are not foreign keys:
    deleting a character leaves stale references that aggregation reports.
    """

    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    characters: Mapped[list[int]] = mapped_column(JSON, default=list)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<DeckDB(id={self.id}, name={self.name})>"


class ComboDB(Base):
    """A combo bonus unlocked by a set of characters."""

    __tablename__ = "combos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    required_characters: Mapped[list[int]] = mapped_column(JSON, default=list)

    # Effect labels to values, e.g. {"全ステータス": 1, "疲労回復": 5}
    effects: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)

    def __repr__(self) -> str:
        return f"<ComboDB(id={self.id}, name={self.name})>"
