"""
Tests for AuthorRepository.

These tests verify that the repository correctly interacts with the
database session and provides the expected operations using mocks.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from catalog.models.author import Author
from catalog.repositories.author_repository import AuthorRepository
from tests.mocks.factories import exec_result, make_author


class TestAuthorRepositoryCreate:
    """Tests for repository create operations."""

    @pytest.mark.asyncio
    async def test_create_author(self, mock_session):
        """Test creating an author."""
        repo = AuthorRepository(mock_session)
        author = Author(name="Ursula K. Le Guin", email="ursula@example.com")

        created = await repo.create(author)

        assert created == author
        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_create_rolls_back_on_error(self, mock_session):
        """Test rollback when flushing fails."""
        repo = AuthorRepository(mock_session)
        mock_session.flush.side_effect = SQLAlchemyError("flush failed")

        with pytest.raises(SQLAlchemyError):
            await repo.create(make_author())

        mock_session.rollback.assert_called_once()

    def test_generated_id(self):
        """Test new authors get a 32 character hex id."""
        author = Author(name="New", email="new@example.com")

        assert len(author.id) == 32
        int(author.id, 16)


class TestAuthorRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_session):
        """Test getting author by ID when exists."""
        repo = AuthorRepository(mock_session)
        expected_author = make_author()
        mock_session.get.return_value = expected_author

        found = await repo.get_by_id("a1")

        assert found == expected_author
        mock_session.get.assert_called_once_with(Author, "a1")

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_session):
        """Test getting author by ID when not exists."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = None

        assert await repo.get_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_get_by_email(self, mock_session):
        """Test looking up an author by email."""
        repo = AuthorRepository(mock_session)
        expected_author = make_author()
        mock_session.exec.return_value = exec_result(first=expected_author)

        found = await repo.get_by_email("frank@example.com")

        assert found == expected_author
        mock_session.exec.assert_called_once()

    @pytest.mark.asyncio
    async def test_list_with_book_counts(self, mock_session):
        """Test listing authors paired with book counts."""
        repo = AuthorRepository(mock_session)
        first = make_author("a1")
        second = make_author("a2", name="Ursula", email="u@example.com")
        mock_session.exec.return_value = exec_result(
            all=[(first, 3), (second, 0)]
        )

        rows = await repo.list_with_book_counts()

        assert rows == [(first, 3), (second, 0)]

    @pytest.mark.asyncio
    async def test_get_with_book_count_not_found(self, mock_session):
        """Test None when the author does not exist."""
        repo = AuthorRepository(mock_session)
        mock_session.exec.return_value = exec_result(first=None)

        assert await repo.get_with_book_count("missing") is None

    @pytest.mark.asyncio
    async def test_get_with_book_count(self, mock_session):
        """Test one author paired with its book count."""
        repo = AuthorRepository(mock_session)
        author = make_author()
        mock_session.exec.return_value = exec_result(first=(author, 2))

        assert await repo.get_with_book_count("a1") == (author, 2)

    @pytest.mark.asyncio
    async def test_count(self, mock_session):
        """Test counting authors."""
        repo = AuthorRepository(mock_session)
        mock_session.exec.return_value = exec_result(one=7)

        assert await repo.count() == 7


class TestAuthorRepositoryDelete:
    """Tests for repository delete operations."""

    @pytest.mark.asyncio
    async def test_delete_author(self, mock_session):
        """Test deleting an author."""
        repo = AuthorRepository(mock_session)
        author = make_author()

        await repo.delete(author)

        mock_session.delete.assert_called_once_with(author)
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_rolls_back_on_error(self, mock_session):
        """Test rollback when the delete fails."""
        repo = AuthorRepository(mock_session)
        mock_session.flush.side_effect = SQLAlchemyError("restricted")

        with pytest.raises(SQLAlchemyError):
            await repo.delete(make_author())

        mock_session.rollback.assert_called_once()


def test_repositories_satisfy_protocol(mock_session):
    """Test concrete repositories match the Repository protocol."""
    from catalog.protocols import Repository
    from catalog.repositories.book_repository import BookRepository

    assert isinstance(AuthorRepository(mock_session), Repository)
    assert isinstance(BookRepository(mock_session), Repository)
