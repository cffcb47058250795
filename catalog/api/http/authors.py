"""
Author endpoints using Repository + Command + Dependency Injection.

Route handlers stay thin: they build a command with injected
repositories, execute it and convert the result to a response schema.
Application exceptions raised by commands are rendered by the exception
handlers registered in catalog.utils.error_handler.
"""

from fastapi import APIRouter, Response, status

from catalog.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorBooksCommand,
    GetAuthorCommand,
    GetAuthorStatsCommand,
    ListAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from catalog.dependencies import AuthorRepoDep, BookRepoDep
from catalog.schemas.author import AuthorInput, AuthorRead, AuthorWithCount
from catalog.schemas.book import BookRead
from catalog.schemas.errors import HTTPErrorResponse
from catalog.schemas.stats import AuthorStats

router = APIRouter(prefix="/authors", tags=["authors"])

NOT_FOUND_RESPONSE = {404: {"model": HTTPErrorResponse}}


@router.get(
    "",
    response_model=list[AuthorWithCount],
    summary="List authors",
    description="All authors, newest first, with their book counts",
)
async def list_authors(repo: AuthorRepoDep) -> list[AuthorWithCount]:
    return await ListAuthorsCommand(repo).execute()


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    responses={409: {"model": HTTPErrorResponse}},
)
async def create_author(
    author_data: AuthorInput,
    repo: AuthorRepoDep,
) -> AuthorRead:
    """
    Create a new author.

    Args:
        author_data: Author data to create.
        repo: Author repository (injected via dependency).

    Returns:
        Created author with generated ID.

    Example:
        POST /authors
        {
            "name": "Ursula K. Le Guin",
            "email": "ursula@example.com",
            "birthYear": 1929
        }
    """
    author = await CreateAuthorCommand(repo).execute(author_data)
    return AuthorRead.model_validate(author)


@router.get(
    "/{author_id}",
    response_model=AuthorWithCount,
    summary="Get an author",
    responses=NOT_FOUND_RESPONSE,
)
async def get_author(author_id: str, repo: AuthorRepoDep) -> AuthorWithCount:
    return await GetAuthorCommand(repo).execute(author_id)


@router.put(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Update an author",
    responses={**NOT_FOUND_RESPONSE, 409: {"model": HTTPErrorResponse}},
)
async def update_author(
    author_id: str,
    author_data: AuthorInput,
    repo: AuthorRepoDep,
) -> AuthorRead:
    """
    Replace every field of an existing author.

    Example:
        PUT /authors/6f1c...
        {
            "name": "Ursula Le Guin",
            "email": "ursula@example.com"
        }
    """
    input_data = UpdateAuthorInput(id=author_id, **author_data.model_dump())
    author = await UpdateAuthorCommand(repo).execute(input_data)
    return AuthorRead.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an author",
    responses={**NOT_FOUND_RESPONSE, 409: {"model": HTTPErrorResponse}},
)
async def delete_author(
    author_id: str,
    repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> None:
    """
    Delete an author.

    Authors who still own books cannot be deleted (409).
    """
    await DeleteAuthorCommand(repo, book_repo).execute(author_id)


@router.get(
    "/{author_id}/books",
    response_model=list[BookRead],
    summary="List an author's books",
    description="Books of one author sorted by published year, newest first",
    responses=NOT_FOUND_RESPONSE,
)
async def get_author_books(
    author_id: str,
    repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> list[BookRead]:
    books = await GetAuthorBooksCommand(repo, book_repo).execute(author_id)
    return [BookRead.model_validate(book) for book in books]


@router.get(
    "/{author_id}/stats",
    response_model=AuthorStats,
    summary="Get author statistics",
    responses=NOT_FOUND_RESPONSE,
)
async def get_author_stats(
    author_id: str,
    repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> AuthorStats:
    """
    Compute statistics over all books of an author.

    Returns total books, first and latest book by published year, average
    page count, distinct genres and the longest and shortest book.

    Example:
        GET /authors/6f1c.../stats
    """
    return await GetAuthorStatsCommand(repo, book_repo).execute(author_id)
