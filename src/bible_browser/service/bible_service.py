"""
Bible Service

Builds the book, chapter and verse pages. Each page fetches the book list
fresh from the upstream API; nothing is cached between requests.
"""

from bible_browser.client.bible_api_client import BibleAPIClient
from bible_browser.service.book_resolver import resolve_book_id
from bible_browser.service.page_renderer import (
    render_books_page,
    render_chapters_page,
    render_verses_page,
)
from bible_browser.utils.logger import get_logger

logger = get_logger(__name__)


class BookNotFoundError(Exception):
    """No book matches the requested slug."""


def resolve_book(client: BibleAPIClient, slug: str) -> str:
    """Fetch the book list and return the upstream id for `slug`."""
    book_info = client.get_book_info()
    book_id = resolve_book_id(book_info.books, slug)
    if not book_id:
        logger.info(
            f"No book matches slug '{slug}'",
            extra={"event": "book_not_found", "book": slug},
        )
        raise BookNotFoundError(f"book '{slug}' not found")
    return book_id


def books_page(client: BibleAPIClient, host: str, title: str) -> str:
    book_info = client.get_book_info()
    return render_books_page(book_info.books, host, title)


def chapters_page(client: BibleAPIClient, slug: str, current_path: str) -> str:
    book_id = resolve_book(client, slug)
    chapter_info = client.get_chapter_info(book_id)
    if not chapter_info.chapters:
        raise BookNotFoundError(f"book '{book_id}' has no chapters")
    return render_chapters_page(chapter_info.chapters, current_path)


def verses_page(client: BibleAPIClient, slug: str, chapter: str) -> str:
    book_id = resolve_book(client, slug)
    verse_info = client.get_verse_info(book_id, chapter)
    return render_verses_page(verse_info.verses, chapter)
