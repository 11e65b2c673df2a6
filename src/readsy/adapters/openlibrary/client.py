"""OpenLibrary API client."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from readsy.adapters.http_resilience import ResilientClient

from .schema import OpenLibraryAuthor, OpenLibraryEdition, bare_key

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from readsy.config.http_resilience import ResilienceConfig
    from readsy.config.openlibrary import OpenLibraryConfig

log = getLogger(__name__)


class OpenLibraryAPIError(RuntimeError):
    """Raised when the OpenLibrary API returns an unexpected response."""


@dataclass(frozen=True, slots=True)
class OpenLibraryBook:
    """An edition payload together with whichever of its authors could be fetched."""

    edition: OpenLibraryEdition
    authors: tuple[OpenLibraryAuthor, ...]


class OpenLibraryClient:
    """Low-level HTTP client for the OpenLibrary edition and author endpoints."""

    def __init__(
        self,
        *,
        config: OpenLibraryConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    async def fetch_book(self, isbn: str) -> OpenLibraryBook | None:
        """Fetch the edition for ``isbn`` and its authors; ``None`` on 404."""

        async with self._client_factory(self._resilience) as client:
            edition = await self._fetch_edition(client, isbn)
            if edition is None:
                return None
            authors = await self._fetch_authors(client, [ref.key for ref in edition.authors])
            return OpenLibraryBook(edition=edition, authors=authors)

    async def _fetch_edition(self, client: ResilientClient, isbn: str) -> OpenLibraryEdition | None:
        # /isbn/<isbn>.json redirects to the edition's /books/<olid>.json
        payload = await self._perform_request(
            client=client, path=f"isbn/{isbn}.json", allow_missing=True
        )
        if payload is None:
            return None
        return OpenLibraryEdition.model_validate(payload)

    async def _fetch_authors(
        self,
        client: ResilientClient,
        keys: Sequence[str],
    ) -> tuple[OpenLibraryAuthor, ...]:
        results = await asyncio.gather(
            *(self._fetch_author(client, key) for key in keys),
            return_exceptions=True,
        )
        authors: list[OpenLibraryAuthor] = []
        for key, result in zip(keys, results, strict=True):
            if isinstance(result, Exception):
                log.warning("OpenLibrary author %s could not be fetched: %s", key, result)
                continue
            if isinstance(result, BaseException):
                raise result
            if result is not None:
                authors.append(result)
        return tuple(authors)

    async def _fetch_author(self, client: ResilientClient, key: str) -> OpenLibraryAuthor | None:
        payload = await self._perform_request(
            client=client, path=f"authors/{bare_key(key)}.json", allow_missing=True
        )
        if payload is None:
            return None
        return OpenLibraryAuthor.model_validate(payload)

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        path: str,
        allow_missing: bool = False,
    ) -> dict[str, object] | None:
        if self._resilience.base_url is None:
            raise OpenLibraryAPIError("Missing OpenLibrary base_url in resilience configuration")
        response = await client.get(path, follow_redirects=True)
        if allow_missing and response.status_code == 404:
            return None
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise OpenLibraryAPIError("Unexpected OpenLibrary response payload")
        return payload
