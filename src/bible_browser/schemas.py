"""
Upstream Schemas: envelopes returned by the Bible content API.

Decoded with Pydantic. Unknown upstream fields are ignored, and metadata the
pages never read defaults to empty when upstream leaves it out.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class UpstreamModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Translation(UpstreamModel):
    identifier: str = ""
    name: str = ""
    language: str = ""
    # The API spells this field "langauge_code" on the wire.
    language_code: str = Field("", alias="langauge_code")
    license: str = ""


class Book(UpstreamModel):
    id: str
    name: str
    url: str = ""


class Chapter(UpstreamModel):
    book_id: str = ""
    book: str
    chapter: int = Field(..., ge=1, strict=True)
    url: str = ""


class Verse(UpstreamModel):
    book_id: str = ""
    book_name: str = ""
    chapter: int = Field(..., ge=1, strict=True)
    verse: int = Field(..., ge=1, strict=True)
    text: str


class BookInfo(UpstreamModel):
    """Response of GET /data/{translation}."""

    translation: Translation = Translation()
    books: List[Book]


class ChapterInfo(UpstreamModel):
    """Response of GET /data/{translation}/{book_id}."""

    translation: Translation = Translation()
    chapters: List[Chapter]


class VerseInfo(UpstreamModel):
    """Response of GET /data/{translation}/{book_id}/{chapter}."""

    translation: Translation = Translation()
    verses: List[Verse]
