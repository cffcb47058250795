from catalog.schemas.base import CamelModel


class BookYear(CamelModel):
    title: str
    year: int


class BookPages(CamelModel):
    title: str
    pages: int


class AuthorStats(CamelModel):
    """
    Derived statistics over all books of one author.

    Extrema fields are None when no book carries the relevant value
    (year or page count); ``average_pages`` is 0 in that case.
    """

    author_id: str
    author_name: str
    total_books: int = 0
    first_book: BookYear | None = None
    latest_book: BookYear | None = None
    average_pages: int = 0
    genres: list[str] = []
    longest_book: BookPages | None = None
    shortest_book: BookPages | None = None
