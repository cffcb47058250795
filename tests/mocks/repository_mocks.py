"""
Mock factory functions for repository testing.

Provides pre-configured repository mocks with common method stubs.
"""

from unittest.mock import AsyncMock

from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository


def create_mock_author_repository():
    """
    Creates a mock AuthorRepository with common methods.

    Returns:
        AsyncMock: Mocked AuthorRepository instance
    """
    repo_mock = AsyncMock(spec=AuthorRepository)
    repo_mock.get_by_id = AsyncMock(return_value=None)
    repo_mock.get_by_email = AsyncMock(return_value=None)
    repo_mock.get_with_book_count = AsyncMock(return_value=None)
    repo_mock.list_with_book_counts = AsyncMock(return_value=[])
    repo_mock.count = AsyncMock(return_value=0)
    repo_mock.create = AsyncMock(side_effect=lambda entity: entity)
    repo_mock.update = AsyncMock(side_effect=lambda entity: entity)
    repo_mock.delete = AsyncMock()
    return repo_mock


def create_mock_book_repository():
    """
    Creates a mock BookRepository with common methods.

    Returns:
        AsyncMock: Mocked BookRepository instance
    """
    repo_mock = AsyncMock(spec=BookRepository)
    repo_mock.get_by_id = AsyncMock(return_value=None)
    repo_mock.get_with_author = AsyncMock(return_value=None)
    repo_mock.get_by_author = AsyncMock(return_value=[])
    repo_mock.search = AsyncMock()
    repo_mock.count = AsyncMock(return_value=0)
    repo_mock.create = AsyncMock(side_effect=lambda entity: entity)
    repo_mock.update = AsyncMock(side_effect=lambda entity: entity)
    repo_mock.delete = AsyncMock()
    return repo_mock
