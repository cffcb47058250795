from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from catalog.models.base import BaseModel

if TYPE_CHECKING:
    from catalog.models.author import Author


class Book(BaseModel, table=True):
    """
    SQLModel representing a catalog book.

    A book always belongs to exactly one author; the foreign key is
    restrictive, so an author cannot be deleted while owning books.

    Attributes:
        id: Opaque primary key
        title: Book title
        description: Optional free-text description
        isbn: Optional ISBN
        published_year: Optional year of publication
        genre: Optional genre label (matched exactly by search)
        pages: Optional page count
        author_id: Owning author
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    title: str = Field(index=True)
    description: str | None = None
    isbn: str | None = None
    published_year: int | None = None
    genre: str | None = Field(default=None, index=True)
    pages: int | None = None
    author_id: str = Field(
        foreign_key="author.id", index=True, ondelete="RESTRICT"
    )

    author: "Author" = Relationship(back_populates="books")
