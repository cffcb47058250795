"""
Book search query building and offset pagination.

Example:
    ```python
    from catalog.storage.pagination import (
        OffsetPaginationStrategy,
        build_book_count_query,
        build_book_search_query,
        parse_search_params,
    )

    params = parse_search_params(search="dune", page=2)
    strategy = OffsetPaginationStrategy(session, page=params.page)
    books, meta = await strategy.paginate(
        build_book_search_query(params),
        build_book_count_query(params),
        params.limit,
    )
    ```
"""

from catalog.storage.pagination.offset import OffsetPaginationStrategy
from catalog.storage.pagination.query_builder import (
    apply_book_filters,
    build_book_count_query,
    build_book_search_query,
    parse_search_params,
)

__all__ = [
    "OffsetPaginationStrategy",
    "apply_book_filters",
    "build_book_count_query",
    "build_book_search_query",
    "parse_search_params",
]
