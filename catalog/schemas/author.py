from datetime import datetime

from pydantic import Field

from catalog.schemas.base import CamelModel


class AuthorInput(CamelModel):
    """Payload for creating or fully replacing an author."""

    name: str = Field(..., min_length=1, description="Author name")
    email: str = Field(
        ..., pattern=r"^[^@\s]+@[^@\s]+$", description="Unique contact address"
    )
    bio: str | None = Field(default=None, description="Biography")
    nationality: str | None = Field(default=None, description="Nationality")
    birth_year: int | None = Field(
        default=None, ge=0, description="Year of birth"
    )


class AuthorRead(CamelModel):
    id: str
    name: str
    email: str
    bio: str | None = None
    nationality: str | None = None
    birth_year: int | None = None
    created_at: datetime
    updated_at: datetime


class AuthorWithCount(AuthorRead):
    """Author row with the number of books it owns."""

    book_count: int = 0


class AuthorSummary(CamelModel):
    """Author fields embedded into book search results."""

    id: str
    name: str
    email: str
    nationality: str | None = None
