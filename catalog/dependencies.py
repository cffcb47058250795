"""
Dependency injection configuration for FastAPI.

This module provides dependency injection setup for database sessions and
repositories. Tests override these with ``app.dependency_overrides``.

Example:
    ```python
    from catalog.dependencies import AuthorRepoDep

    @router.get("/authors")
    async def list_authors(repo: AuthorRepoDep) -> list[AuthorWithCount]:
        return await ListAuthorsCommand(repo).execute()
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get author repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        AuthorRepository instance with session.
    """
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    """
    Get book repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        BookRepository instance with session.
    """
    return BookRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]
