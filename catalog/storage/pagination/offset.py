"""
Offset-based pagination strategy (traditional page numbers).

Implements offset/limit pagination using page numbers, which is what the
book search UI navigates with ("Page 1, 2, 3...").
"""

import math
from typing import Any

from sqlalchemy import Select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.schemas.response import PaginationMeta


class OffsetPaginationStrategy:
    """
    Traditional offset-based pagination (page 1, 2, 3...).

    Runs the count query first, then fetches one page of rows with
    ``OFFSET (page-1)*page_size LIMIT page_size``.

    Example:
        ```python
        async with async_session() as session:
            strategy = OffsetPaginationStrategy(session, page=2)
            items, meta = await strategy.paginate(query, count_query, 20)

            print(f"Page {meta.page} of {meta.total_pages}")
        ```
    """

    def __init__(self, session: AsyncSession, page: int = 1):
        """
        Initialize offset pagination strategy.

        Args:
            session: SQLModel async session for database queries.
            page: Page number (1-indexed). Defaults to 1.
        """
        self.session = session
        self.page = page

    async def paginate(
        self,
        query: Select[Any],
        count_query: Select[Any],
        page_size: int,
    ) -> tuple[list[Any], PaginationMeta]:
        """
        Execute offset-based pagination on the query.

        Args:
            query: Select with filters, ordering and eager loading already
                applied.
            count_query: COUNT select with the same filters as ``query``.
            page_size: Number of items per page.

        Returns:
            Tuple of (items, metadata) where metadata includes:
            - page, limit: echo of the request
            - total: number of matching rows
            - total_pages: ceil(total / limit)
            - has_next: page < total_pages
            - has_prev: page > 1

        Raises:
            SQLAlchemyError: If database query fails.
        """
        total_result = await self.session.exec(count_query)
        total = total_result.one()

        offset = (self.page - 1) * page_size
        results = await self.session.exec(
            query.offset(offset).limit(page_size)
        )
        items = list(results.all())

        total_pages = math.ceil(total / page_size)

        meta = PaginationMeta(
            page=self.page,
            limit=page_size,
            total=total,
            total_pages=total_pages,
            has_next=self.page < total_pages,
            has_prev=self.page > 1,
        )

        return items, meta
