"""
Book endpoints: search with filtering, sorting and pagination, plus CRUD.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from catalog.commands.book_commands import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookCommand,
    SearchBooksCommand,
    UpdateBookCommand,
    UpdateBookInput,
)
from catalog.constants import DEFAULT_SORT_FIELD, DEFAULT_SORT_ORDER
from catalog.dependencies import AuthorRepoDep, BookRepoDep
from catalog.schemas.book import BookInput, BookRead, BookWithAuthor
from catalog.schemas.errors import HTTPErrorResponse
from catalog.schemas.response import PaginatedResponseModel
from catalog.storage.pagination import parse_search_params

router = APIRouter(prefix="/books", tags=["books"])

NOT_FOUND_RESPONSE = {404: {"model": HTTPErrorResponse}}

_query_int_adapter = TypeAdapter(int)


def query_int(name: str, value: str | None) -> int | None:
    """
    Parse an optional integer query parameter.

    An empty value (``?page=``) counts as unset. Non-numeric values raise
    RequestValidationError like any other malformed query parameter.
    """
    if not value:
        return None
    try:
        return _query_int_adapter.validate_python(value)
    except PydanticValidationError as ex:
        raise RequestValidationError(
            [{**error, "loc": ("query", name)} for error in ex.errors()]
        ) from ex


@router.get(
    "/search",
    response_model=PaginatedResponseModel[BookWithAuthor],
    summary="Search books",
    responses={400: {"model": HTTPErrorResponse}},
)
async def search_books(
    repo: BookRepoDep,
    search: str | None = None,
    genre: str | None = None,
    author_name: Annotated[str | None, Query(alias="authorName")] = None,
    page: str | None = None,
    limit: str | None = None,
    sort_by: Annotated[str, Query(alias="sortBy")] = DEFAULT_SORT_FIELD,
    order: str = DEFAULT_SORT_ORDER,
) -> PaginatedResponseModel[BookWithAuthor]:
    """
    Search books with optional filters.

    Args:
        repo: Book repository (injected via dependency).
        search: Case-insensitive substring of the title.
        genre: Exact genre.
        author_name: Case-insensitive substring of the author's name.
        page: 1-based page number (default 1).
        limit: Page size (default DEFAULT_PAGE_SIZE, capped at 50).

    Empty values (``?page=&sortBy=``) fall back to the defaults.
        sort_by: title, publishedYear or createdAt.
        order: asc or desc.

    Returns:
        ``{"data": [...], "pagination": {...}}``

    Example:
        GET /books/search?search=dune&genre=Sci-Fi&page=1&limit=10
        GET /books/search?authorName=herbert&sortBy=publishedYear&order=asc
    """
    params = parse_search_params(
        search=search,
        genre=genre,
        author_name=author_name,
        page=query_int("page", page),
        limit=query_int("limit", limit),
        sort_by=sort_by,
        order=order,
    )
    return await SearchBooksCommand(repo).execute(params)


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses=NOT_FOUND_RESPONSE,
)
async def create_book(
    book_data: BookInput,
    repo: BookRepoDep,
    author_repo: AuthorRepoDep,
) -> BookRead:
    """
    Create a new book for an existing author.

    Example:
        POST /books
        {
            "title": "The Dispossessed",
            "publishedYear": 1974,
            "genre": "Sci-Fi",
            "pages": 387,
            "authorId": "6f1c..."
        }
    """
    book = await CreateBookCommand(repo, author_repo).execute(book_data)
    return BookRead.model_validate(book)


@router.get(
    "/{book_id}",
    response_model=BookWithAuthor,
    summary="Get a book",
    responses=NOT_FOUND_RESPONSE,
)
async def get_book(book_id: str, repo: BookRepoDep) -> BookWithAuthor:
    book = await GetBookCommand(repo).execute(book_id)
    return BookWithAuthor.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookRead,
    summary="Update a book",
    responses=NOT_FOUND_RESPONSE,
)
async def update_book(
    book_id: str,
    book_data: BookInput,
    repo: BookRepoDep,
    author_repo: AuthorRepoDep,
) -> BookRead:
    input_data = UpdateBookInput(id=book_id, **book_data.model_dump())
    book = await UpdateBookCommand(repo, author_repo).execute(input_data)
    return BookRead.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a book",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_book(book_id: str, repo: BookRepoDep) -> None:
    await DeleteBookCommand(repo).execute(book_id)
