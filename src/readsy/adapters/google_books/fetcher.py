"""Google Books book source."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

import httpx
from pydantic import ValidationError

from readsy.config.google_books import get_google_books_config
from readsy.domain.model import Provider

from .client import GoogleBooksAPIError, GoogleBooksClient, should_cache_volumes
from .translator import translate_volume

if TYPE_CHECKING:
    from readsy.config.google_books import GoogleBooksConfig
    from readsy.domain.model import ExternalRecord

    from .schema import Volume

log = getLogger(__name__)


class VolumeSearchClient(Protocol):
    async def search_by_isbn(self, isbn: str) -> Volume | None: ...


class GoogleBooksSource:
    """``BookSource`` backed by the Google Books volumes search."""

    def __init__(self, client: VolumeSearchClient) -> None:
        self._client = client

    @property
    def provider(self) -> Provider:
        return Provider.GOOGLE_BOOKS

    async def lookup(self, isbn: str) -> ExternalRecord | None:
        try:
            volume = await self._client.search_by_isbn(isbn)
        except (httpx.HTTPError, GoogleBooksAPIError) as exc:
            log.warning("Google Books lookup failed for ISBN %s: %s", isbn, exc)
            return None
        except ValidationError as exc:
            log.warning("Google Books returned malformed data for ISBN %s: %s", isbn, exc)
            return None
        if volume is None:
            log.info("Google Books has no volume for ISBN %s", isbn)
            return None
        return translate_volume(volume, isbn=isbn)


def build_google_books_source(
    *,
    config: GoogleBooksConfig | None = None,
    client: VolumeSearchClient | None = None,
) -> GoogleBooksSource:
    active_client = client or GoogleBooksClient(
        config=config or get_google_books_config(cache_predicate=should_cache_volumes)
    )
    return GoogleBooksSource(active_client)
