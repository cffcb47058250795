"""
Base model for all database tables with async relationship support.

This module provides the BaseModel class that all SQLModel table models
should inherit from. It includes SQLAlchemy's AsyncAttrs mixin to enable
proper handling of lazy-loaded relationships in async contexts, plus the
identity and timestamp columns shared by every catalog table.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import Field, SQLModel


def generate_id() -> str:
    """Opaque record identifier (32 hex chars)."""
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Combines SQLModel with SQLAlchemy's AsyncAttrs mixin so lazy-loaded
    relationships can be accessed via ``awaitable_attrs`` without raising
    MissingGreenlet in async contexts.

    Usage:
        Preferred approach (eager loading):
            stmt = select(Book).options(selectinload(Book.author))

        Alternative approach (lazy loading when needed):
            author = await session.get(Author, author_id)
            books = await author.awaitable_attrs.books
    """

    id: str = Field(
        default_factory=generate_id, primary_key=True, max_length=32
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utcnow},
        nullable=False,
    )
