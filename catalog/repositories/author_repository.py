"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.list_with_book_counts()
        existing = await repo.get_by_email("ursula@example.com")
    ```
"""

from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Author-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)

    async def get_by_email(self, email: str) -> Author | None:
        """
        Get author by exact email match.

        Args:
            email: Email address to look up.

        Returns:
            Author if found, None otherwise.
        """
        stmt = select(Author).where(Author.email == email)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_with_book_counts(self) -> list[tuple[Author, int]]:
        """
        Get all authors, newest first, each paired with its book count.

        Returns:
            List of (author, number of books) tuples.
        """
        stmt = (
            select(Author, func.count(col(Book.id)))
            .outerjoin(Book, col(Book.author_id) == col(Author.id))
            .group_by(col(Author.id))
            .order_by(col(Author.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return [(author, book_count) for author, book_count in result.all()]

    async def get_with_book_count(
        self, author_id: str
    ) -> tuple[Author, int] | None:
        """
        Get one author paired with its book count.

        Returns:
            (author, number of books) or None if the author does not exist.
        """
        stmt = (
            select(Author, func.count(col(Book.id)))
            .outerjoin(Book, col(Book.author_id) == col(Author.id))
            .where(col(Author.id) == author_id)
            .group_by(col(Author.id))
        )
        result = await self.session.exec(stmt)
        row = result.first()
        if row is None:
            return None
        author, book_count = row
        return author, book_count
