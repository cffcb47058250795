"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for catalog records and mocked
database sessions.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Database credentials are required, set them before importing catalog modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")

from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from tests.mocks.factories import make_author  # noqa: E402


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def author():
    """
    Provides an Author instance for testing.

    Returns:
        Author: Frank Herbert, id "a1"
    """
    return make_author()
