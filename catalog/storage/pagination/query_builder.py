"""
Query building for book search.

Translates validated search parameters into SQLAlchemy Select statements
over Book joined with Author. The data query and the count query share
the same filter clauses so that pagination metadata always matches the
returned page.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Select
from sqlalchemy.orm import selectinload
from sqlmodel import col, func, select

from catalog.constants import BOOK_SORT_FIELDS
from catalog.exceptions import ValidationError
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.schemas.filters import BookSearchParams

LIKE_ESCAPE_CHAR = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards (``%``, ``_``) so the term is matched literally."""
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )


def contains_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


def parse_search_params(**raw: Any) -> BookSearchParams:
    """
    Validate raw search parameters.

    Args:
        **raw: search, genre, author_name, page, limit, sort_by, order.
            Parameters passed as None or as an empty string fall back
            to their defaults.

    Returns:
        Validated BookSearchParams.

    Raises:
        ValidationError: On the first invalid parameter (page < 1,
            limit < 1, unknown sort field or sort order).
    """
    try:
        return BookSearchParams(
            **{
                key: value
                for key, value in raw.items()
                if value not in (None, "")
            }
        )
    except PydanticValidationError as ex:
        error = ex.errors()[0]
        cause = error.get("ctx", {}).get("error")
        raise ValidationError(str(cause) if cause else error["msg"]) from ex


def apply_book_filters(query: Select, params: BookSearchParams) -> Select:
    """
    Apply search filters to a Book query.

    - search: title ILIKE %term%
    - genre: exact equality
    - author_name: joins Author and matches name ILIKE %term%

    Args:
        query: Select over Book (or an aggregate over Book columns).
        params: Validated search parameters.

    Returns:
        The query with WHERE clauses (and the Author join) applied.
    """
    if params.search:
        query = query.where(
            col(Book.title).ilike(
                contains_pattern(params.search), escape=LIKE_ESCAPE_CHAR
            )
        )

    if params.genre:
        query = query.where(col(Book.genre) == params.genre)

    if params.author_name:
        query = query.join(Author, col(Book.author_id) == col(Author.id)).where(
            col(Author.name).ilike(
                contains_pattern(params.author_name), escape=LIKE_ESCAPE_CHAR
            )
        )

    return query


def build_book_search_query(params: BookSearchParams) -> Select:
    """
    Build the data query for a book search.

    Filters are applied, the owning author is eager loaded (prevents N+1
    queries) and rows are ordered by the requested field with the book id
    as a tie-breaker so pages are stable. Paging (OFFSET/LIMIT) is left
    to the pagination strategy.

    Args:
        params: Validated search parameters.

    Returns:
        Select over Book ready for pagination.
    """
    query = apply_book_filters(select(Book), params)
    query = query.options(selectinload(Book.author))  # type: ignore[arg-type]

    sort_column = col(getattr(Book, BOOK_SORT_FIELDS[params.sort_by]))
    if params.order == "asc":
        query = query.order_by(sort_column.asc(), col(Book.id).asc())
    else:
        query = query.order_by(sort_column.desc(), col(Book.id).asc())

    return query


def build_book_count_query(params: BookSearchParams) -> Select:
    """Build the COUNT query matching build_book_search_query filters."""
    return apply_book_filters(select(func.count(col(Book.id))), params)
