"""Shared fixtures for Google Books adapter tests."""

from __future__ import annotations

import pytest

from readsy.config.google_books import GOOGLE_BOOKS_BASE_URL, GoogleBooksConfig
from readsy.config.http_resilience import ResilienceConfig

GooglePayload = dict[str, object]


@pytest.fixture
def google_books_config() -> GoogleBooksConfig:
    return GoogleBooksConfig(
        resilience=ResilienceConfig(
            name="google-books-test",
            base_url=GOOGLE_BOOKS_BASE_URL,
            cache=None,
        ),
        api_key="test-key",
    )


@pytest.fixture
def volumes_payload() -> GooglePayload:
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            {
                "kind": "books#volume",
                "id": "1EiJAwAAQBAJ",
                "volumeInfo": {
                    "title": "Sapiens",
                    "subtitle": "A Brief History of Humankind",
                    "authors": ["Yuval Noah Harari"],
                    "publisher": "Random House",
                    "publishedDate": "2014-09-04",
                    "description": (
                        "100,000 years ago, at least six human species inhabited the earth."
                    ),
                    "industryIdentifiers": [
                        {"type": "ISBN_13", "identifier": "9781448190690"},
                        {"type": "ISBN_10", "identifier": "1448190693"},
                        {"type": "OTHER", "identifier": "UOM:39015066130837"},
                    ],
                    "pageCount": 498,
                    "categories": ["History / World"],
                    "language": "en",
                },
            }
        ],
    }
