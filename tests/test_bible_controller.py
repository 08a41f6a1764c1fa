"""HTTP-level tests for the book, chapter, verse and passage pages."""

from fastapi.testclient import TestClient

from bible_browser import main
from bible_browser.client.bible_api_client import get_bible_client
from conftest import FakeBibleClient, book_info_payload, verse_info_payload


def _lines(html, marker="<br>"):
    return [line for line in html.splitlines() if line.endswith(marker)]


def test_books_page_links_every_book(http, fake_client):
    response = http.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>ASV Bible</title>" in response.text
    assert _lines(response.text) == [
        '<a href="http://testserver/genesis">Genesis</a> <br>',
        '<a href="http://testserver/exodus">Exodus</a> <br>',
        '<a href="http://testserver/1john">1 John</a> <br>',
    ]
    assert fake_client.calls == [("books",)]


def test_chapters_are_fetched_by_upstream_id(http, fake_client):
    response = http.get("/genesis")

    assert response.status_code == 200
    assert fake_client.calls == [("books",), ("chapters", "GEN")]
    assert "<title>Genesis</title>" in response.text
    assert _lines(response.text) == [
        '<a href="/genesis/1">1</a> <br>',
        '<a href="/genesis/2">2</a> <br>',
        '<a href="/genesis/3">3</a> <br>',
    ]


def test_verses_page(http, fake_client):
    response = http.get("/genesis/1")

    assert response.status_code == 200
    assert fake_client.calls == [("books",), ("verses", "GEN", "1")]
    assert "<title>1</title>" in response.text
    assert _lines(response.text) == ["1 : In the beginning...<br>"]


def test_verses_page_title_is_raw_chapter_segment(http, fake_client):
    response = http.get("/1john/01")

    assert response.status_code == 200
    assert fake_client.calls[-1] == ("verses", "1JN", "01")
    assert "<title>01</title>" in response.text


def test_unknown_book_short_circuits(http, fake_client):
    response = http.get("/nonexistentbook")

    assert response.status_code == 404
    assert response.text == "404 page not found"
    assert fake_client.calls == [("books",)]


def test_unknown_book_on_verses_page(http, fake_client):
    response = http.get("/nonexistentbook/3")

    assert response.status_code == 404
    assert fake_client.calls == [("books",)]


def test_upstream_failure_is_not_found():
    failing = FakeBibleClient(fail={"books"})
    main.app.dependency_overrides[get_bible_client] = lambda: failing
    try:
        with TestClient(main.app) as client:
            for path in ("/", "/genesis", "/genesis/1"):
                response = client.get(path)
                assert response.status_code == 404
                assert response.text == "404 page not found"
                assert "<html>" not in response.text
    finally:
        main.app.dependency_overrides.clear()


def test_chapter_fetch_failure_is_not_found(http, fake_client):
    fake_client.fail = {"chapters"}

    response = http.get("/exodus")

    assert response.status_code == 404
    assert fake_client.calls == [("books",), ("chapters", "EXO")]


def test_empty_chapter_list_is_not_found(http, fake_client):
    fake_client.chapters = {"translation": fake_client.chapters["translation"], "chapters": []}

    response = http.get("/genesis")

    assert response.status_code == 404


def test_upstream_text_is_escaped(http, fake_client):
    fake_client.books = book_info_payload(
        ("GEN", "Genesis"), ("XSS", "<script>alert(1)</script>")
    )
    fake_client.verses = verse_info_payload("GEN", "Genesis", 1, ['a <b>"bold"</b> claim'])

    books = http.get("/")
    verses = http.get("/genesis/1")

    assert "<script>" not in books.text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in books.text
    assert _lines(verses.text) == ["1 : a &lt;b&gt;&quot;bold&quot;&lt;/b&gt; claim<br>"]


def test_repeated_requests_render_identically(http):
    first = http.get("/genesis")
    second = http.get("/genesis")

    assert first.status_code == 200
    assert first.content == second.content


def test_passage_is_not_implemented(http, fake_client):
    response = http.get("/genesis/1/1-3")

    assert response.status_code == 501
    assert fake_client.calls == []


def test_health_is_not_a_book(http, fake_client):
    response = http.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert fake_client.calls == []
