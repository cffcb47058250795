"""
Per-author statistics aggregation.

Pure functions over already-loaded Book rows, so the aggregation can be
tested without a database. Books without a published year are ignored
for first/latest book, books without a page count are ignored for the
page-based figures.
"""

import math
from collections.abc import Sequence

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.schemas.stats import AuthorStats, BookPages, BookYear


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def average_pages(books: Sequence[Book]) -> int:
    """
    Average page count over books with a known page count.

    The divisor is the number of books with pages, not the total number
    of books. Returns 0 when no book has a page count.
    """
    pages = [book.pages for book in books if book.pages is not None]
    if not pages:
        return 0
    return round_half_up(sum(pages) / len(pages))


def longest_book(books: Sequence[Book]) -> Book | None:
    """Book with the most pages; the earliest one wins ties."""
    longest = None
    for book in books:
        if book.pages is None:
            continue
        if longest is None or book.pages > longest.pages:
            longest = book
    return longest


def shortest_book(books: Sequence[Book]) -> Book | None:
    """Book with the fewest pages; the earliest one wins ties."""
    shortest = None
    for book in books:
        if book.pages is None:
            continue
        if shortest is None or book.pages < shortest.pages:
            shortest = book
    return shortest


def distinct_genres(books: Sequence[Book]) -> list[str]:
    return list(
        dict.fromkeys(book.genre for book in books if book.genre is not None)
    )


def compute_author_stats(author: Author, books: Sequence[Book]) -> AuthorStats:
    """
    Compute summary statistics for one author.

    Args:
        author: The author the books belong to.
        books: All books of the author, in any order.

    Returns:
        AuthorStats. An author without books yields zero counts, an
        empty genre list and None for every extremum.

    Example:
        >>> stats = compute_author_stats(author, books)
        >>> stats.first_book.year, stats.latest_book.year
        (1999, 2010)
    """
    # sorted() is stable, books sharing a year keep their given order
    dated = sorted(
        (book for book in books if book.published_year is not None),
        key=lambda book: book.published_year,
    )
    longest = longest_book(books)
    shortest = shortest_book(books)

    return AuthorStats(
        author_id=author.id,
        author_name=author.name,
        total_books=len(books),
        first_book=(
            BookYear(title=dated[0].title, year=dated[0].published_year)
            if dated
            else None
        ),
        latest_book=(
            BookYear(title=dated[-1].title, year=dated[-1].published_year)
            if dated
            else None
        ),
        average_pages=average_pages(books),
        genres=distinct_genres(books),
        longest_book=(
            BookPages(title=longest.title, pages=longest.pages)
            if longest
            else None
        ),
        shortest_book=(
            BookPages(title=shortest.title, pages=shortest.pages)
            if shortest
            else None
        ),
    )
