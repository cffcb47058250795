"""
Commands for Author business operations.

Example:
    ```python
    from catalog.commands.author_commands import GetAuthorStatsCommand

    @router.get("/authors/{author_id}/stats")
    async def get_author_stats(
        author_id: str, author_repo: AuthorRepoDep, book_repo: BookRepoDep
    ) -> AuthorStats:
        command = GetAuthorStatsCommand(author_repo, book_repo)
        return await command.execute(author_id)
    ```
"""

from pydantic import Field

from catalog.commands.base import BaseCommand
from catalog.exceptions import ConflictError, NotFoundError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.protocols import Repository
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.author import AuthorInput, AuthorWithCount
from catalog.schemas.stats import AuthorStats
from catalog.utils.author_stats import compute_author_stats


# ============================================================================
# Input/Output Models
# ============================================================================


class UpdateAuthorInput(AuthorInput):
    """Input model for a full author update."""

    id: str = Field(..., description="Author ID to update")


def _with_count(author: Author, book_count: int) -> AuthorWithCount:
    return AuthorWithCount.model_validate(
        {**author.model_dump(), "book_count": book_count}
    )


async def get_author_or_404(
    repository: Repository[Author], author_id: str
) -> Author:
    """
    Fetch an author or raise NotFoundError.

    Raises:
        NotFoundError: If no author has the given ID.
    """
    author = await repository.get_by_id(author_id)
    if not author:
        raise NotFoundError(f"Author with ID {author_id} not found")
    return author


# ============================================================================
# Commands
# ============================================================================


class ListAuthorsCommand(BaseCommand[None, list[AuthorWithCount]]):
    """Command to list all authors, newest first, with their book counts."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[AuthorWithCount]:
        rows = await self.repository.list_with_book_counts()
        return [_with_count(author, count) for author, count in rows]


class GetAuthorCommand(BaseCommand[str, AuthorWithCount]):
    """Command to get a single author with its book count."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: str) -> AuthorWithCount:
        """
        Raises:
            NotFoundError: If author not found.
        """
        row = await self.repository.get_with_book_count(author_id)
        if row is None:
            raise NotFoundError(f"Author with ID {author_id} not found")
        return _with_count(*row)


class CreateAuthorCommand(BaseCommand[AuthorInput, Author]):
    """
    Command to create a new author.

    Validates that no other author uses the same email.
    """

    def __init__(self, repository: AuthorRepository):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: AuthorInput) -> Author:
        """
        Execute command to create author.

        Args:
            input_data: Author data to create.

        Returns:
            Created author with generated ID.

        Raises:
            ConflictError: If an author with the same email already exists.
        """
        existing = await self.repository.get_by_email(input_data.email)
        if existing:
            raise ConflictError(
                f"Author with email '{input_data.email}' already exists"
            )

        author = Author(**input_data.model_dump())
        created = await self.repository.create(author)
        logger.info(f"Created author {created.id}")
        return created


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, Author]):
    """
    Command to fully replace an existing author's fields.

    Validates that the author exists and the new email doesn't conflict.
    """

    def __init__(self, repository: AuthorRepository):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> Author:
        """
        Execute command to update author.

        Args:
            input_data: Author ID and new data.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If author not found.
            ConflictError: If email belongs to another author.
        """
        author = await get_author_or_404(self.repository, input_data.id)

        existing = await self.repository.get_by_email(input_data.email)
        if existing and existing.id != input_data.id:
            raise ConflictError(
                f"Author with email '{input_data.email}' already exists"
            )

        for key, value in input_data.model_dump(exclude={"id"}).items():
            setattr(author, key, value)
        return await self.repository.update(author)


class DeleteAuthorCommand(BaseCommand[str, None]):
    """
    Command to delete an author.

    Deleting an author who still owns books is refused; the books must be
    deleted or moved to another author first.
    """

    def __init__(
        self,
        repository: Repository[Author],
        book_repository: Repository[Book],
    ):
        """
        Initialize command with repositories.

        Args:
            repository: Author repository (any Repository[Author]).
            book_repository: Book repository used to count owned books.
        """
        self.repository = repository
        self.book_repository = book_repository

    async def execute(self, author_id: str) -> None:
        """
        Execute command to delete author.

        Raises:
            NotFoundError: If author not found.
            ConflictError: If the author still owns books.
        """
        author = await get_author_or_404(self.repository, author_id)

        book_count = await self.book_repository.count(author_id=author_id)
        if book_count:
            raise ConflictError(
                f"Author with ID {author_id} still owns {book_count} book(s)"
            )

        await self.repository.delete(author)
        logger.info(f"Deleted author {author_id}")


class GetAuthorBooksCommand(BaseCommand[str, list[Book]]):
    """Command to list an author's books, newest publication first."""

    def __init__(
        self,
        repository: Repository[Author],
        book_repository: BookRepository,
    ):
        self.repository = repository
        self.book_repository = book_repository

    async def execute(self, author_id: str) -> list[Book]:
        """
        Raises:
            NotFoundError: If author not found.
        """
        await get_author_or_404(self.repository, author_id)
        return await self.book_repository.get_by_author(
            author_id, newest_first=True
        )


class GetAuthorStatsCommand(BaseCommand[str, AuthorStats]):
    """
    Command to compute statistics over all of an author's books.

    Books are fetched ordered by published year ascending and handed to
    compute_author_stats().
    """

    def __init__(
        self,
        repository: Repository[Author],
        book_repository: BookRepository,
    ):
        """
        Initialize command with repositories.

        Args:
            repository: Author repository used for the existence check.
            book_repository: Book repository providing the author's books.
        """
        self.repository = repository
        self.book_repository = book_repository

    async def execute(self, author_id: str) -> AuthorStats:
        """
        Execute command to compute author statistics.

        Args:
            author_id: Author to summarise.

        Returns:
            AuthorStats; an author without books gets zeroed statistics.

        Raises:
            NotFoundError: If author not found.
        """
        author = await get_author_or_404(self.repository, author_id)
        books = await self.book_repository.get_by_author(author_id)
        return compute_author_stats(author, books)
