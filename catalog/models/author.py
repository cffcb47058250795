from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from catalog.models.base import BaseModel

if TYPE_CHECKING:
    from catalog.models.book import Book


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Opaque primary key
        name: Name of the author
        email: Contact address, unique across authors
        bio: Optional biography
        nationality: Optional nationality
        birth_year: Optional year of birth
        books: Books owned by this author
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    name: str = Field(index=True)
    email: str = Field(unique=True, index=True)
    bio: str | None = None
    nationality: str | None = None
    birth_year: int | None = None

    books: list["Book"] = Relationship(back_populates="author")
