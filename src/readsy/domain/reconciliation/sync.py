"""Catalog sync: backfill identifiers and append ISBNs onto a matched entry."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from readsy.domain.reconciliation.contracts import CatalogEntryNotFoundError

if TYPE_CHECKING:
    from readsy.domain.model import CanonicalRecord, CatalogEntry
    from readsy.domain.ports.persistence import CatalogRepository

log = getLogger(__name__)


def sync_catalog_entry(
    entry: CatalogEntry,
    canonical: CanonicalRecord,
    catalog: CatalogRepository,
) -> CatalogEntry:
    """Write what the canonical record adds to ``entry`` and return the re-read entry.

    Identifiers are only set where the stored value is null; ISBNs already attached
    to the entry are skipped. Running this twice with the same inputs writes nothing
    the second time. Both writes share the caller's transaction.
    """

    google_book_id = canonical.google_book_id if entry.google_book_id is None else None
    open_library_id = canonical.open_library_id if entry.open_library_id is None else None
    if google_book_id is not None or open_library_id is not None:
        log.debug(
            "Backfilling identifiers on %s: google=%s openlibrary=%s",
            entry.id,
            google_book_id,
            open_library_id,
        )
        catalog.backfill_identifiers(
            entry.id,
            google_book_id=google_book_id,
            open_library_id=open_library_id,
        )

    new_isbns = sorted(canonical.all_isbns - entry.isbns)
    if new_isbns:
        log.info("Appending %d ISBN(s) to %s", len(new_isbns), entry.id)
        catalog.append_isbns(entry.id, new_isbns)

    updated = catalog.get(entry.id)
    if updated is None:
        raise CatalogEntryNotFoundError(entry.id)
    return updated
