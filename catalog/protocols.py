"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, so commands
can be exercised with any repository implementation, including mocks.

Example:
    ```python
    from catalog.protocols import Repository
    from catalog.models.book import Book


    async def remove(repo: Repository[Book], book_id: str) -> None:
        book = await repo.get_by_id(book_id)
        if book:
            await repo.delete(book)
    ```
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for repository pattern.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def get_by_id(self, id: str) -> T | None:
        """Get entity by primary key ID."""
        ...

    async def count(self, **filters: Any) -> int:
        """Count entities matching the provided filters."""
        ...

    async def create(self, entity: T) -> T:
        """Create new entity in database."""
        ...

    async def update(self, entity: T) -> T:
        """Update existing entity in database."""
        ...

    async def delete(self, entity: T) -> None:
        """Delete entity from database."""
        ...
