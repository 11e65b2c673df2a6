from __future__ import annotations

import asyncio
import dataclasses
import json

import httpx
import pytest

from readsy.adapters.google_books import (
    GoogleBooksAPIError,
    GoogleBooksClient,
    GoogleBooksSource,
    should_cache_volumes,
)
from readsy.config.google_books import GoogleBooksConfig
from tests.helpers.http import make_client_factory

GooglePayload = dict[str, object]


def _json(payload: object, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


def test_search_by_isbn_returns_first_item(
    google_books_config: GoogleBooksConfig,
    volumes_payload: GooglePayload,
) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return _json(volumes_payload)

    client = GoogleBooksClient(
        config=google_books_config, client_factory=make_client_factory(handler)
    )

    volume = asyncio.run(client.search_by_isbn("9780099590088"))

    assert volume is not None
    assert volume.id == "1EiJAwAAQBAJ"
    assert requests[0].url.path == "/books/v1/volumes"
    assert requests[0].url.params["q"] == "isbn:9780099590088"
    assert requests[0].url.params["key"] == "test-key"


def test_search_without_api_key_omits_key(
    google_books_config: GoogleBooksConfig,
    volumes_payload: GooglePayload,
) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return _json(volumes_payload)

    config = dataclasses.replace(google_books_config, api_key=None)
    client = GoogleBooksClient(config=config, client_factory=make_client_factory(handler))

    asyncio.run(client.search_by_isbn("9780099590088"))

    assert "key" not in requests[0].url.params


def test_search_miss_returns_none(google_books_config: GoogleBooksConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return _json({"kind": "books#volumes", "totalItems": 0})

    client = GoogleBooksClient(
        config=google_books_config, client_factory=make_client_factory(handler)
    )

    assert asyncio.run(client.search_by_isbn("9780099590088")) is None


def test_error_payload_raises(google_books_config: GoogleBooksConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return _json({"error": {"code": 403, "message": "Daily limit exceeded"}})

    client = GoogleBooksClient(
        config=google_books_config, client_factory=make_client_factory(handler)
    )

    with pytest.raises(GoogleBooksAPIError):
        asyncio.run(client.search_by_isbn("9780099590088"))


def test_error_status_raises(google_books_config: GoogleBooksConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    client = GoogleBooksClient(
        config=google_books_config, client_factory=make_client_factory(handler)
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.search_by_isbn("9780099590088"))


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"totalItems": 1, "items": [{"id": "x"}]}, True),
        ({"totalItems": 0}, False),
        ({"items": []}, False),
        (["unexpected"], False),
    ],
)
def test_should_cache_volumes(payload: object, expected: bool) -> None:  # noqa: FBT001
    assert should_cache_volumes(payload) is expected


def test_malformed_optional_fields_still_yield_a_record(
    google_books_config: GoogleBooksConfig,
) -> None:
    payload = {
        "totalItems": 1,
        "items": [
            {
                "id": "abc123",
                "volumeInfo": {
                    "title": None,
                    "authors": ["Yuval Noah Harari", None],
                    "industryIdentifiers": [
                        {"type": "OTHER"},
                        {"type": "ISBN_10", "identifier": "0062316095"},
                    ],
                },
            }
        ],
    }

    def handler(_request: httpx.Request) -> httpx.Response:
        return _json(payload)

    source = GoogleBooksSource(
        GoogleBooksClient(config=google_books_config, client_factory=make_client_factory(handler))
    )

    record = asyncio.run(source.lookup("9780062316097"))

    assert record is not None
    assert record.google_book_id == "abc123"
    assert record.title == ""
    assert record.authors == ("Yuval Noah Harari",)
    assert record.all_isbns == {"9780062316097", "0062316095"}
