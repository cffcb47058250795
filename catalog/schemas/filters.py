"""
Type-safe filter schemas for book search queries.

Validates raw search parameters before any SQL is built so that invalid
paging, sort field or sort order values are rejected up front.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from catalog.constants import (
    BOOK_SORT_FIELDS,
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_ORDER,
    MAX_PAGE_SIZE,
    SORT_ORDERS,
)
from catalog.settings import app_settings


class BaseFilter(BaseModel):  # type: ignore[misc]
    """
    Base class for all filter schemas.

    Provides common utilities for converting filters to dictionaries
    and excluding None values.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert filter schema to dictionary, excluding None values.

        Returns:
            Dictionary of non-None filter values.

        Example:
            >>> BookSearchParams(genre="Sci-Fi").to_dict()["genre"]
            'Sci-Fi'
        """
        return {k: v for k, v in self.model_dump().items() if v is not None}

    model_config = {
        "extra": "forbid",  # Reject unexpected fields
    }


class BookSearchParams(BaseFilter):
    """
    Validated book search request.

    Text filters are optional and combined with AND. Empty strings are
    treated as "no filter". ``limit`` above MAX_PAGE_SIZE is capped, not
    rejected.

    Example:
        >>> params = BookSearchParams(search="dune", page=2, limit=100)
        >>> params.limit, params.offset
        (50, 50)
    """

    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of the book title",
    )
    genre: str | None = Field(
        default=None,
        description="Exact genre match",
    )
    author_name: str | None = Field(
        default=None,
        description="Case-insensitive substring of the author's name",
    )
    page: int = Field(default=1, description="1-based page number")
    limit: int = Field(
        default_factory=lambda: app_settings.DEFAULT_PAGE_SIZE,
        description=f"Page size, capped at {MAX_PAGE_SIZE}",
    )
    sort_by: str = Field(
        default=DEFAULT_SORT_FIELD,
        description="One of: " + ", ".join(BOOK_SORT_FIELDS),
    )
    order: str = Field(default=DEFAULT_SORT_ORDER, description="asc or desc")

    @field_validator("search", "genre", "author_name", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator("page")
    @classmethod
    def _check_page(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Page number must be greater than 0")
        return value

    @field_validator("limit")
    @classmethod
    def _check_limit(cls, value: int) -> int:
        value = min(value, MAX_PAGE_SIZE)
        if value < 1:
            raise ValueError("Limit must be greater than 0")
        return value

    @field_validator("sort_by")
    @classmethod
    def _check_sort_by(cls, value: str) -> str:
        if value not in BOOK_SORT_FIELDS:
            raise ValueError(
                f"Invalid sort field '{value}', expected one of: "
                + ", ".join(BOOK_SORT_FIELDS)
            )
        return value

    @field_validator("order")
    @classmethod
    def _check_order(cls, value: str) -> str:
        if value not in SORT_ORDERS:
            raise ValueError("Order must be 'asc' or 'desc'")
        return value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
