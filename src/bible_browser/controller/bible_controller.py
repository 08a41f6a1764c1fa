"""
Bible Controller

HTML pages for browsing books, chapters and verses.
Any upstream or lookup failure becomes a plain 404.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from bible_browser.client.bible_api_client import (
    BibleAPIClient,
    BibleAPIError,
    get_bible_client,
)
from bible_browser.config import Settings, get_settings
from bible_browser.service import bible_service
from bible_browser.service.bible_service import BookNotFoundError
from bible_browser.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["Bible"], default_response_class=HTMLResponse)

NOT_FOUND = "404 page not found"
NOT_IMPLEMENTED = "501 passage lookup not implemented"


def _not_found(request: Request, error: Exception) -> HTTPException:
    logger.error(
        f"{request.url.path}: {error}",
        extra={"event": "page_not_found", "url": request.url.path},
    )
    return HTTPException(status_code=404, detail=NOT_FOUND)


@router.get("/", summary="List all books")
def get_books(
    request: Request,
    client: BibleAPIClient = Depends(get_bible_client),
    settings: Settings = Depends(get_settings),
):
    host = str(request.base_url).rstrip("/")
    try:
        return bible_service.books_page(client, host, settings.site_title)
    except BibleAPIError as e:
        raise _not_found(request, e)


@router.get("/{book}", summary="List the chapters of a book")
def get_chapters(
    book: str,
    request: Request,
    client: BibleAPIClient = Depends(get_bible_client),
):
    """
    - **book**: book slug, the display name lowercased with spaces removed
      (e.g. "1john")
    """
    try:
        return bible_service.chapters_page(client, book, request.url.path)
    except (BibleAPIError, BookNotFoundError) as e:
        raise _not_found(request, e)


@router.get("/{book}/{chapter}", summary="List the verses of a chapter")
def get_verses(
    book: str,
    chapter: str,
    request: Request,
    client: BibleAPIClient = Depends(get_bible_client),
):
    try:
        return bible_service.verses_page(client, book, chapter)
    except (BibleAPIError, BookNotFoundError) as e:
        raise _not_found(request, e)


@router.get("/{book}/{chapter}/{verses}", summary="Verse range (not implemented)")
def get_passage(book: str, chapter: str, verses: str):
    logger.info(
        f"Passage lookup requested for {book} {chapter}:{verses}",
        extra={"event": "passage_not_implemented", "book": book, "chapter": chapter},
    )
    raise HTTPException(status_code=501, detail=NOT_IMPLEMENTED)
