"""Shared fixtures for OpenLibrary adapter tests."""

from __future__ import annotations

import pytest

from readsy.config.http_resilience import ResilienceConfig
from readsy.config.openlibrary import DEFAULT_OPENLIBRARY_BASE_URL, OpenLibraryConfig

OpenLibraryPayload = dict[str, object]


@pytest.fixture
def open_library_config() -> OpenLibraryConfig:
    return OpenLibraryConfig(
        resilience=ResilienceConfig(
            name="openlibrary-test",
            base_url=DEFAULT_OPENLIBRARY_BASE_URL,
            cache=None,
        )
    )


@pytest.fixture
def edition_payload() -> OpenLibraryPayload:
    return {
        "key": "/books/OL26973939M",
        "title": "Sapiens",
        "subtitle": "A Brief History of Humankind",
        "authors": [{"key": "/authors/OL7106722A"}, {"key": "/authors/OL9999999A"}],
        "description": {
            "type": "/type/text",
            "value": "From a renowned historian comes a groundbreaking narrative of humanity.",
        },
        "number_of_pages": 464,
        "publishers": ["Harper Perennial", "HarperCollins"],
        "publish_date": "May 24, 2018",
        "subjects": ["Human beings", "Civilization -- History"],
        "isbn_10": ["0062316095"],
        "isbn_13": ["978-0-06-231609-7"],
        "languages": [{"key": "/languages/eng"}],
        "covers": [8372512],
        "revision": 7,
    }


@pytest.fixture
def author_payloads() -> dict[str, OpenLibraryPayload]:
    return {
        "OL7106722A": {"key": "/authors/OL7106722A", "name": "Yuval Noah Harari"},
        "OL9999999A": {"key": "/authors/OL9999999A", "name": "John Purcell"},
    }
