"""
Commands for Book business operations.

Example:
    ```python
    params = parse_search_params(search="dune", genre="Sci-Fi")
    page = await SearchBooksCommand(book_repo).execute(params)
    print(page.pagination.total_pages)
    ```
"""

from pydantic import Field

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.protocols import Repository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.book import BookInput, BookWithAuthor
from catalog.schemas.filters import BookSearchParams
from catalog.schemas.response import PaginatedResponseModel


class UpdateBookInput(BookInput):
    """Input model for a full book update."""

    id: str = Field(..., description="Book ID to update")


async def _ensure_author_exists(
    author_repository: Repository[Author], author_id: str
) -> None:
    if not await author_repository.get_by_id(author_id):
        raise NotFoundError(f"Author with ID {author_id} not found")


class SearchBooksCommand(
    BaseCommand[BookSearchParams, PaginatedResponseModel[BookWithAuthor]]
):
    """
    Command to search books with filtering, sorting and pagination.

    Returns one page of books, each embedding its author's id, name,
    email and nationality, plus pagination metadata.
    """

    def __init__(self, repository: BookRepository):
        """
        Initialize command with repository.

        Args:
            repository: Book repository for data access.
        """
        self.repository = repository

    async def execute(
        self, input_data: BookSearchParams
    ) -> PaginatedResponseModel[BookWithAuthor]:
        """
        Execute the search.

        Args:
            input_data: Validated search parameters.

        Returns:
            Paginated response with ``data`` and ``pagination``.
        """
        books, meta = await self.repository.search(input_data)
        logger.debug(
            f"Book search matched {meta.total} books",
            extra={"filters": input_data.to_dict()},
        )
        return PaginatedResponseModel[BookWithAuthor](
            data=[BookWithAuthor.model_validate(book) for book in books],
            pagination=meta,
        )


class GetBookCommand(BaseCommand[str, Book]):
    """Command to get a single book with its author loaded."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def execute(self, book_id: str) -> Book:
        """
        Raises:
            NotFoundError: If book not found.
        """
        book = await self.repository.get_with_author(book_id)
        if not book:
            raise NotFoundError(f"Book with ID {book_id} not found")
        return book


class CreateBookCommand(BaseCommand[BookInput, Book]):
    """
    Command to create a book.

    A book cannot exist without its author, so the author is checked
    first.
    """

    def __init__(
        self,
        repository: Repository[Book],
        author_repository: Repository[Author],
    ):
        """
        Initialize command with repositories.

        Args:
            repository: Book repository for data access.
            author_repository: Author repository for the owner check.
        """
        self.repository = repository
        self.author_repository = author_repository

    async def execute(self, input_data: BookInput) -> Book:
        """
        Execute command to create book.

        Raises:
            NotFoundError: If the referenced author does not exist.
        """
        await _ensure_author_exists(self.author_repository, input_data.author_id)

        book = Book(**input_data.model_dump())
        created = await self.repository.create(book)
        logger.info(f"Created book {created.id} for author {created.author_id}")
        return created


class UpdateBookCommand(BaseCommand[UpdateBookInput, Book]):
    """Command to fully replace an existing book's fields."""

    def __init__(
        self,
        repository: Repository[Book],
        author_repository: Repository[Author],
    ):
        self.repository = repository
        self.author_repository = author_repository

    async def execute(self, input_data: UpdateBookInput) -> Book:
        """
        Execute command to update book.

        Raises:
            NotFoundError: If the book or the referenced author does not
                exist.
        """
        book = await self.repository.get_by_id(input_data.id)
        if not book:
            raise NotFoundError(f"Book with ID {input_data.id} not found")

        if input_data.author_id != book.author_id:
            await _ensure_author_exists(
                self.author_repository, input_data.author_id
            )

        for key, value in input_data.model_dump(exclude={"id"}).items():
            setattr(book, key, value)
        return await self.repository.update(book)


class DeleteBookCommand(BaseCommand[str, None]):
    """Command to delete a book."""

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, book_id: str) -> None:
        """
        Raises:
            NotFoundError: If book not found.
        """
        book = await self.repository.get_by_id(book_id)
        if not book:
            raise NotFoundError(f"Book with ID {book_id} not found")

        await self.repository.delete(book)
        logger.info(f"Deleted book {book_id}")
