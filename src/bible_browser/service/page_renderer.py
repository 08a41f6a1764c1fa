"""
Page Renderer

Wraps lists of books, chapters and verses into bare HTML documents.
Every interpolated value is HTML-escaped; upstream text is not trusted.
"""

from html import escape
from typing import Callable, Iterable, TypeVar

from bible_browser.schemas import Book, Chapter, Verse
from bible_browser.service.book_resolver import book_slug

T = TypeVar("T")

PAGE_START = """<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
</head>
<body>
"""

PAGE_END = """
</body>
</html>
"""


def render_page(title: str, items: Iterable[T], render_line: Callable[[T], str]) -> str:
    """
    Render one line per item between the fixed page skeleton.

    `render_line` must return markup that is already escaped; each line is
    terminated with <br> by the line renderer itself.
    """
    body = "\n".join(render_line(item) for item in items)
    return PAGE_START.format(title=escape(title)) + body + PAGE_END


def book_line(book: Book, host: str) -> str:
    href = f"{host}/{book_slug(book.name)}"
    return f'<a href="{escape(href)}">{escape(book.name)}</a> <br>'


def chapter_line(chapter: Chapter, current_path: str) -> str:
    href = f"{current_path}/{chapter.chapter}"
    return f'<a href="{escape(href)}">{chapter.chapter}</a> <br>'


def verse_line(verse: Verse) -> str:
    return f"{verse.verse} : {escape(verse.text)}<br>"


def render_books_page(books: Iterable[Book], host: str, title: str = "ASV Bible") -> str:
    return render_page(title, books, lambda book: book_line(book, host))


def render_chapters_page(chapters: list[Chapter], current_path: str) -> str:
    """Title is the display name of the book the chapters belong to."""
    title = chapters[0].book if chapters else ""
    return render_page(
        title, chapters, lambda chapter: chapter_line(chapter, current_path)
    )


def render_verses_page(verses: Iterable[Verse], chapter: str) -> str:
    """Title is the chapter segment exactly as the client sent it."""
    return render_page(chapter, verses, verse_line)
