"""
Book Resolver

Maps the book slugs used in this site's URLs back to upstream book ids.
"""

from typing import Iterable, Optional

from bible_browser.schemas import Book


def book_slug(name: str) -> str:
    """Lowercase a display name and strip every space ("1 John" -> "1john")."""
    return name.lower().replace(" ", "")


def resolve_book_id(books: Iterable[Book], slug: str) -> Optional[str]:
    """
    Find the upstream id of the book whose slug equals `slug`.

    Linear scan in list order; when several books share a slug the first one
    wins. Returns None when nothing matches.
    """
    for book in books:
        if book_slug(book.name) == slug:
            return book.id
    return None
