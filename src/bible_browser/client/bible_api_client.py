"""
Bible API Client

Blocking HTTP client for the bible-api.com data endpoints.
Every fetch either returns a 200 response or raises a BibleAPIError.
"""

import threading
import time
from typing import Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import ValidationError

from bible_browser.config import Settings, get_settings
from bible_browser.schemas import BookInfo, ChapterInfo, VerseInfo
from bible_browser.utils.logger import get_logger

logger = get_logger(__name__)

EnvelopeT = TypeVar("EnvelopeT", BookInfo, ChapterInfo, VerseInfo)


class BibleAPIError(Exception):
    """Base error for any failed upstream call."""


class UpstreamRequestError(BibleAPIError):
    """Transport failure or a non-200 response."""


class UpstreamDecodeError(BibleAPIError):
    """Body was not a valid envelope of the expected shape."""


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class BibleAPIClient:
    def __init__(
        self,
        base_url: str,
        books_translation: str = "web",
        chapters_translation: str = "web",
        verses_translation: str = "asv",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.books_translation = books_translation
        self.chapters_translation = chapters_translation
        self.verses_translation = verses_translation
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "BibleAPIClient":
        return cls(
            base_url=settings.bible_api_base_url,
            books_translation=settings.books_translation,
            chapters_translation=settings.chapters_translation,
            verses_translation=settings.verses_translation,
            timeout=settings.upstream_timeout,
        )

    def fetch(self, url: str) -> requests.Response:
        """
        GET a URL from the upstream API.

        Returns the response only when the status is exactly 200; the caller
        owns it and must close it. Anything else raises UpstreamRequestError.
        """
        start = time.perf_counter()
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(
                f"Upstream request failed: {e}",
                extra={"event": "upstream_transport_error", "url": url},
            )
            raise UpstreamRequestError(str(e)) from e

        duration_ms = int((time.perf_counter() - start) * 1000)
        if response.status_code != 200:
            response.close()
            logger.warning(
                "Upstream rejected request",
                extra={
                    "event": "upstream_rejected",
                    "url": url,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            raise UpstreamRequestError("invalid request")

        logger.debug(
            "Upstream request OK",
            extra={
                "event": "upstream_request",
                "url": url,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

    def decode(self, response: requests.Response, model: Type[EnvelopeT]) -> EnvelopeT:
        """Decode a response body into one of the envelope models."""
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                f"Could not decode {model.__name__}: {e}",
                extra={"event": "upstream_decode_error", "url": response.url},
            )
            raise UpstreamDecodeError(f"invalid {model.__name__} payload") from e

    def _get(self, url: str, model: Type[EnvelopeT]) -> EnvelopeT:
        response = self.fetch(url)
        try:
            return self.decode(response, model)
        finally:
            response.close()

    def get_book_info(self) -> BookInfo:
        url = f"{self.base_url}/data/{_segment(self.books_translation)}"
        return self._get(url, BookInfo)

    def get_chapter_info(self, book_id: str) -> ChapterInfo:
        if not book_id:
            raise UpstreamRequestError("empty book id")
        url = (
            f"{self.base_url}/data/{_segment(self.chapters_translation)}"
            f"/{_segment(book_id)}"
        )
        return self._get(url, ChapterInfo)

    def get_verse_info(self, book_id: str, chapter: str) -> VerseInfo:
        if not book_id or not chapter:
            raise UpstreamRequestError("empty book id or chapter")
        url = (
            f"{self.base_url}/data/{_segment(self.verses_translation)}"
            f"/{_segment(book_id)}/{_segment(chapter)}"
        )
        return self._get(url, VerseInfo)

    def close(self) -> None:
        self.session.close()


_client: BibleAPIClient | None = None
_client_lock = threading.Lock()


def get_bible_client() -> BibleAPIClient:
    """Get or create the shared upstream client (lazy singleton)."""
    global _client
    with _client_lock:
        if _client is None:
            _client = BibleAPIClient.from_settings(get_settings())
            logger.info(
                f"Bible API client created (base_url={_client.base_url})",
                extra={"event": "client_created"},
            )
        return _client


def close_bible_client() -> None:
    """Close the shared client's HTTP session (call on shutdown)."""
    global _client
    with _client_lock:
        if _client is None:
            return
        _client.close()
        _client = None
    logger.info("Bible API client closed", extra={"event": "client_closed"})
