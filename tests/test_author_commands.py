"""
Tests for Author commands.

These tests verify that commands correctly encapsulate business logic
and can be tested independently of the HTTP handlers.
"""

import pytest

from catalog.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorBooksCommand,
    GetAuthorCommand,
    GetAuthorStatsCommand,
    ListAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from catalog.exceptions import ConflictError, NotFoundError
from catalog.schemas.author import AuthorInput
from tests.mocks.factories import make_author, make_book
from tests.mocks.repository_mocks import (
    create_mock_author_repository,
    create_mock_book_repository,
)


class TestListAuthorsCommand:
    """Tests for ListAuthorsCommand."""

    @pytest.mark.asyncio
    async def test_list_authors_with_counts(self):
        """Test every author is returned with its book count."""
        repo = create_mock_author_repository()
        repo.list_with_book_counts.return_value = [
            (make_author("a2", name="Newer", email="n@example.com"), 0),
            (make_author("a1"), 3),
        ]

        result = await ListAuthorsCommand(repo).execute()

        assert [a.id for a in result] == ["a2", "a1"]
        assert [a.book_count for a in result] == [0, 3]
        assert result[1].name == "Frank Herbert"


class TestGetAuthorCommand:
    """Tests for GetAuthorCommand."""

    @pytest.mark.asyncio
    async def test_get_author(self):
        """Test getting an existing author."""
        repo = create_mock_author_repository()
        repo.get_with_book_count.return_value = (make_author(), 2)

        result = await GetAuthorCommand(repo).execute("a1")

        assert result.id == "a1"
        assert result.book_count == 2

    @pytest.mark.asyncio
    async def test_get_author_not_found(self):
        """Test NotFoundError for an unknown author."""
        repo = create_mock_author_repository()

        with pytest.raises(NotFoundError, match="missing"):
            await GetAuthorCommand(repo).execute("missing")


class TestCreateAuthorCommand:
    """Tests for CreateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_create_author(self):
        """Test creating an author with a new email."""
        repo = create_mock_author_repository()
        input_data = AuthorInput(
            name="Ursula K. Le Guin", email="ursula@example.com", birthYear=1929
        )

        result = await CreateAuthorCommand(repo).execute(input_data)

        assert result.name == "Ursula K. Le Guin"
        assert result.birth_year == 1929
        repo.get_by_email.assert_called_once_with("ursula@example.com")
        repo.create.assert_called_once()

    @pytest.mark.asyncio
    async def test_create_duplicate_email(self):
        """Test ConflictError when the email is already used."""
        repo = create_mock_author_repository()
        repo.get_by_email.return_value = make_author()
        input_data = AuthorInput(name="Someone", email="frank@example.com")

        with pytest.raises(ConflictError):
            await CreateAuthorCommand(repo).execute(input_data)

        repo.create.assert_not_called()


class TestUpdateAuthorCommand:
    """Tests for UpdateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_update_author(self):
        """Test replacing an author's fields."""
        repo = create_mock_author_repository()
        author = make_author()
        repo.get_by_id.return_value = author
        repo.get_by_email.return_value = author
        input_data = UpdateAuthorInput(
            id="a1", name="Frank P. Herbert", email="frank@example.com"
        )

        result = await UpdateAuthorCommand(repo).execute(input_data)

        assert result.name == "Frank P. Herbert"
        assert result.nationality is None
        repo.update.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_update_author_not_found(self):
        """Test NotFoundError for an unknown author."""
        repo = create_mock_author_repository()
        input_data = UpdateAuthorInput(
            id="missing", name="X", email="x@example.com"
        )

        with pytest.raises(NotFoundError):
            await UpdateAuthorCommand(repo).execute(input_data)

        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_email_taken_by_other_author(self):
        """Test ConflictError when another author owns the email."""
        repo = create_mock_author_repository()
        repo.get_by_id.return_value = make_author("a1")
        repo.get_by_email.return_value = make_author(
            "a2", email="taken@example.com"
        )
        input_data = UpdateAuthorInput(
            id="a1", name="Frank", email="taken@example.com"
        )

        with pytest.raises(ConflictError):
            await UpdateAuthorCommand(repo).execute(input_data)


class TestDeleteAuthorCommand:
    """Tests for DeleteAuthorCommand."""

    @pytest.mark.asyncio
    async def test_delete_author_without_books(self):
        """Test deleting an author who owns no books."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()
        author = make_author()
        repo.get_by_id.return_value = author

        await DeleteAuthorCommand(repo, book_repo).execute("a1")

        book_repo.count.assert_called_once_with(author_id="a1")
        repo.delete.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_delete_author_with_books(self):
        """Test ConflictError when the author still owns books."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()
        repo.get_by_id.return_value = make_author()
        book_repo.count.return_value = 2

        with pytest.raises(ConflictError, match="2 book"):
            await DeleteAuthorCommand(repo, book_repo).execute("a1")

        repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_author_not_found(self):
        """Test NotFoundError for an unknown author."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()

        with pytest.raises(NotFoundError):
            await DeleteAuthorCommand(repo, book_repo).execute("missing")


class TestGetAuthorBooksCommand:
    """Tests for GetAuthorBooksCommand."""

    @pytest.mark.asyncio
    async def test_books_newest_first(self):
        """Test books are requested newest first."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()
        repo.get_by_id.return_value = make_author()
        books = [make_book("Newer", year=1969), make_book("Older", year=1965)]
        book_repo.get_by_author.return_value = books

        result = await GetAuthorBooksCommand(repo, book_repo).execute("a1")

        assert result == books
        book_repo.get_by_author.assert_called_once_with(
            "a1", newest_first=True
        )

    @pytest.mark.asyncio
    async def test_author_not_found(self):
        """Test NotFoundError before books are queried."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()

        with pytest.raises(NotFoundError):
            await GetAuthorBooksCommand(repo, book_repo).execute("missing")

        book_repo.get_by_author.assert_not_called()


class TestGetAuthorStatsCommand:
    """Tests for GetAuthorStatsCommand."""

    @pytest.mark.asyncio
    async def test_stats(self):
        """Test statistics are computed over the author's books."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()
        repo.get_by_id.return_value = make_author()
        book_repo.get_by_author.return_value = [
            make_book("Dune", year=1965, pages=412, genre="Sci-Fi"),
            make_book("Dune Messiah", year=1969, pages=256, genre="Sci-Fi"),
        ]

        stats = await GetAuthorStatsCommand(repo, book_repo).execute("a1")

        assert stats.author_name == "Frank Herbert"
        assert stats.total_books == 2
        assert stats.first_book.title == "Dune"
        assert stats.latest_book.title == "Dune Messiah"
        assert stats.average_pages == 334
        assert stats.genres == ["Sci-Fi"]
        book_repo.get_by_author.assert_called_once_with("a1")

    @pytest.mark.asyncio
    async def test_stats_author_without_books(self):
        """Test zero statistics are not an error."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()
        repo.get_by_id.return_value = make_author()

        stats = await GetAuthorStatsCommand(repo, book_repo).execute("a1")

        assert stats.total_books == 0
        assert stats.longest_book is None

    @pytest.mark.asyncio
    async def test_stats_author_not_found(self):
        """Test NotFoundError for an unknown author."""
        repo = create_mock_author_repository()
        book_repo = create_mock_book_repository()

        with pytest.raises(NotFoundError):
            await GetAuthorStatsCommand(repo, book_repo).execute("missing")
