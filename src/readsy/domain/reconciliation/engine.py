"""Top-level ISBN reconciliation flow.

``reconcile`` checks the local catalog first, then queries both bibliographic
sources concurrently, merges their answers and resolves the merged record
against the catalog. The engine holds only read-only references to its
collaborators; every call builds its own records.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from readsy.domain.genres import genre_key, get_or_create_genres
from readsy.domain.isbn import normalize_isbn
from readsy.domain.reconciliation.contracts import AlreadyExists, NotFoundExternally
from readsy.domain.reconciliation.merge import merge_records
from readsy.domain.reconciliation.resolve import resolve_identity

if TYPE_CHECKING:
    from collections.abc import Callable

    from readsy.domain.model import CanonicalRecord, CatalogEntry, ExternalRecord
    from readsy.domain.ports.fetching import BookSource
    from readsy.domain.ports.unit_of_work import CatalogUnitOfWork
    from readsy.domain.reconciliation.contracts import Outcome

log = getLogger(__name__)

DEFAULT_SOURCE_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True, slots=True)
class ReconciliationEngine:
    """Reconcile ISBNs against the catalog using two external sources."""

    open_library: BookSource
    google_books: BookSource
    unit_of_work: Callable[[], CatalogUnitOfWork]
    source_timeout_seconds: float = DEFAULT_SOURCE_TIMEOUT_SECONDS

    def reconcile(self, isbn: str) -> Outcome:
        """Reconcile one ISBN; raises ``InvalidIsbnError`` for malformed input.

        Store errors propagate. Source failures and timeouts only remove that
        source's contribution.
        """

        cleaned = normalize_isbn(isbn)
        existing = self._find_existing(cleaned)
        if existing is not None:
            return self._already_exists(existing)

        open_library, google_books = asyncio.run(self.fetch_sources(cleaned))
        return self._resolve(cleaned, open_library, google_books)

    async def reconcile_async(self, isbn: str) -> Outcome:
        """Same as ``reconcile`` for callers already running an event loop.

        Store access is blocking, so it runs in worker threads and never on the loop.
        """

        cleaned = normalize_isbn(isbn)
        existing = await asyncio.to_thread(self._find_existing, cleaned)
        if existing is not None:
            return self._already_exists(existing)

        open_library, google_books = await self.fetch_sources(cleaned)
        return await asyncio.to_thread(self._resolve, cleaned, open_library, google_books)

    async def fetch_sources(
        self, isbn: str
    ) -> tuple[ExternalRecord | None, ExternalRecord | None]:
        """Query both sources concurrently and wait for both to settle."""

        results = await asyncio.gather(
            self._bounded_lookup(self.open_library, isbn),
            self._bounded_lookup(self.google_books, isbn),
            return_exceptions=True,
        )
        open_library, google_books = (
            self._settled(source, result)
            for source, result in zip((self.open_library, self.google_books), results, strict=True)
        )
        return open_library, google_books

    async def _bounded_lookup(self, source: BookSource, isbn: str) -> ExternalRecord | None:
        return await asyncio.wait_for(source.lookup(isbn), timeout=self.source_timeout_seconds)

    def _settled(
        self,
        source: BookSource,
        result: ExternalRecord | BaseException | None,
    ) -> ExternalRecord | None:
        if isinstance(result, TimeoutError):
            log.warning(
                "%s lookup timed out after %.1fs", source.provider, self.source_timeout_seconds
            )
            return None
        if isinstance(result, Exception):
            log.warning("%s lookup failed: %s", source.provider, result)
            return None
        if isinstance(result, BaseException):
            raise result
        return result

    def _find_existing(self, isbn: str) -> CatalogEntry | None:
        with self.unit_of_work() as uow:
            return uow.repositories.catalog.find_by_isbn(isbn)

    def _already_exists(self, entry: CatalogEntry) -> AlreadyExists:
        log.info("ISBN already in catalog as %s (%r)", entry.id, entry.title)
        return AlreadyExists(entry=entry)

    def _resolve(
        self,
        isbn: str,
        open_library: ExternalRecord | None,
        google_books: ExternalRecord | None,
    ) -> Outcome:
        canonical = merge_records(open_library, google_books)
        if canonical is None:
            log.info("No source knows ISBN %s", isbn)
            return NotFoundExternally()

        with self.unit_of_work() as uow:
            canonical = _with_stored_genres(canonical, uow)
            outcome = resolve_identity(canonical, uow.repositories)
            uow.commit()

        log.info("Reconciled ISBN %s: %s", isbn, outcome.status)
        return outcome


def _with_stored_genres(canonical: CanonicalRecord, uow: CatalogUnitOfWork) -> CanonicalRecord:
    if not canonical.genre_names:
        return canonical
    genres = get_or_create_genres(sorted(canonical.genre_names), uow.repositories.genres)
    stored = {genre_key(genre.name): genre.name for genre in genres}
    return canonical.with_genre_names(
        frozenset(stored.get(genre_key(name), name) for name in canonical.genre_names)
    )
