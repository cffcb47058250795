"""
Repository for Book entity.

Wraps the book search query builder and offset pagination, and provides
the per-author listing used by the author books and statistics endpoints.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models.book import Book
from catalog.repositories.base import BaseRepository
from catalog.schemas.filters import BookSearchParams
from catalog.schemas.response import PaginationMeta
from catalog.storage.pagination import (
    OffsetPaginationStrategy,
    build_book_count_query,
    build_book_search_query,
)


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        """
        Initialize Book repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Book)

    async def search(
        self, params: BookSearchParams
    ) -> tuple[list[Book], PaginationMeta]:
        """
        Search books with filters, sorting and offset pagination.

        Each returned book has its ``author`` relationship loaded.

        Args:
            params: Validated search parameters.

        Returns:
            Tuple of (books on the requested page, pagination metadata).

        Raises:
            SQLAlchemyError: If database query fails.
        """
        strategy = OffsetPaginationStrategy(self.session, page=params.page)
        try:
            return await strategy.paginate(
                build_book_search_query(params),
                build_book_count_query(params),
                params.limit,
            )
        except SQLAlchemyError as e:
            logger.error(f"Error searching books: {e}")
            raise

    async def get_by_author(
        self, author_id: str, *, newest_first: bool = False
    ) -> list[Book]:
        """
        Get all books of an author ordered by published year.

        Args:
            author_id: Owning author ID.
            newest_first: Order by published year descending instead of
                ascending.

        Returns:
            List of the author's books.
        """
        year = col(Book.published_year)
        stmt = (
            select(Book)
            .where(col(Book.author_id) == author_id)
            .order_by(
                year.desc() if newest_first else year.asc(),
                col(Book.id).asc(),
            )
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_with_author(self, book_id: str) -> Book | None:
        """Get a book with its author relationship loaded."""
        stmt = (
            select(Book)
            .where(col(Book.id) == book_id)
            .options(selectinload(Book.author))  # type: ignore[arg-type]
        )
        result = await self.session.exec(stmt)
        return result.first()
