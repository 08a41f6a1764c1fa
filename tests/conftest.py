"""Shared fixtures: canned upstream envelopes and a fake upstream client."""

import pytest
from fastapi.testclient import TestClient

from bible_browser.client.bible_api_client import UpstreamRequestError, get_bible_client
from bible_browser.schemas import BookInfo, ChapterInfo, VerseInfo

TRANSLATION = {
    "identifier": "web",
    "name": "World English Bible",
    "language": "English",
    "langauge_code": "eng",
    "license": "Public Domain",
}


def book_info_payload(*books):
    return {
        "translation": dict(TRANSLATION),
        "books": [
            {"id": book_id, "name": name, "url": f"https://bible-api.com/data/web/{book_id}"}
            for book_id, name in books
        ],
    }


def chapter_info_payload(book_id, book_name, count):
    return {
        "translation": dict(TRANSLATION),
        "chapters": [
            {
                "book_id": book_id,
                "book": book_name,
                "chapter": n,
                "url": f"https://bible-api.com/data/web/{book_id}/{n}",
            }
            for n in range(1, count + 1)
        ],
    }


def verse_info_payload(book_id, book_name, chapter, texts):
    return {
        "translation": dict(TRANSLATION, identifier="asv"),
        "verses": [
            {
                "book_id": book_id,
                "book_name": book_name,
                "chapter": chapter,
                "verse": n,
                "text": text,
            }
            for n, text in enumerate(texts, start=1)
        ],
    }


class FakeBibleClient:
    """Stands in for BibleAPIClient and records every upstream call."""

    def __init__(self, books=None, chapters=None, verses=None, fail=None):
        self.books = books or book_info_payload(
            ("GEN", "Genesis"), ("EXO", "Exodus"), ("1JN", "1 John")
        )
        self.chapters = chapters or chapter_info_payload("GEN", "Genesis", 3)
        self.verses = verses or verse_info_payload(
            "GEN", "Genesis", 1, ["In the beginning..."]
        )
        self.fail = fail or set()
        self.calls = []

    def _check(self, name):
        if name in self.fail:
            raise UpstreamRequestError("invalid request")

    def get_book_info(self):
        self.calls.append(("books",))
        self._check("books")
        return BookInfo.model_validate(self.books)

    def get_chapter_info(self, book_id):
        self.calls.append(("chapters", book_id))
        self._check("chapters")
        return ChapterInfo.model_validate(self.chapters)

    def get_verse_info(self, book_id, chapter):
        self.calls.append(("verses", book_id, chapter))
        self._check("verses")
        return VerseInfo.model_validate(self.verses)


@pytest.fixture
def fake_client():
    return FakeBibleClient()


@pytest.fixture
def http(fake_client):
    from bible_browser.main import app

    app.dependency_overrides[get_bible_client] = lambda: fake_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
