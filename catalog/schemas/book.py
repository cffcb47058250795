from datetime import datetime

from pydantic import Field

from catalog.schemas.author import AuthorSummary
from catalog.schemas.base import CamelModel


class BookInput(CamelModel):
    """Payload for creating or fully replacing a book."""

    title: str = Field(..., min_length=1, description="Book title")
    description: str | None = None
    isbn: str | None = None
    published_year: int | None = Field(default=None, description="Year of publication")
    genre: str | None = None
    pages: int | None = Field(default=None, ge=1, description="Page count")
    author_id: str = Field(..., min_length=1, description="Owning author ID")


class BookRead(CamelModel):
    id: str
    title: str
    description: str | None = None
    isbn: str | None = None
    published_year: int | None = None
    genre: str | None = None
    pages: int | None = None
    author_id: str
    created_at: datetime
    updated_at: datetime


class BookWithAuthor(BookRead):
    """Book row with its owning author's summary."""

    author: AuthorSummary
