"""OpenLibrary book source."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

import httpx
from pydantic import ValidationError

from readsy.config.openlibrary import get_open_library_config
from readsy.domain.model import Provider

from .client import OpenLibraryAPIError, OpenLibraryClient
from .translator import translate_book

if TYPE_CHECKING:
    from readsy.config.openlibrary import OpenLibraryConfig
    from readsy.domain.model import ExternalRecord

    from .client import OpenLibraryBook

log = getLogger(__name__)


class BookLookupClient(Protocol):
    async def fetch_book(self, isbn: str) -> OpenLibraryBook | None: ...


class OpenLibrarySource:
    """``BookSource`` backed by the OpenLibrary edition and author APIs."""

    def __init__(self, client: BookLookupClient) -> None:
        self._client = client

    @property
    def provider(self) -> Provider:
        return Provider.OPEN_LIBRARY

    async def lookup(self, isbn: str) -> ExternalRecord | None:
        try:
            book = await self._client.fetch_book(isbn)
        except (httpx.HTTPError, OpenLibraryAPIError) as exc:
            log.warning("OpenLibrary lookup failed for ISBN %s: %s", isbn, exc)
            return None
        except ValidationError as exc:
            log.warning("OpenLibrary returned malformed data for ISBN %s: %s", isbn, exc)
            return None
        if book is None:
            log.info("OpenLibrary has no edition for ISBN %s", isbn)
            return None
        return translate_book(book, isbn=isbn)


def build_open_library_source(
    *,
    config: OpenLibraryConfig | None = None,
    client: BookLookupClient | None = None,
) -> OpenLibrarySource:
    active_client = client or OpenLibraryClient(config=config or get_open_library_config())
    return OpenLibrarySource(active_client)
