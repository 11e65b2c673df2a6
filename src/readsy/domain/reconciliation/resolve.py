"""Identity resolution of a canonical record against the local catalog.

Steps, in order:

1. resolve the author, by OpenLibrary author key when the record has one and by
   case-insensitive name of the first author otherwise
2. look for an exact duplicate (shared Google id, shared OpenLibrary id, or same
   title and author) and sync it when found
3. otherwise, surface the resolved author's existing books as translation
   candidates, or report a new book
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from readsy.domain.reconciliation.contracts import (
    LinkedToExisting,
    NewBookFound,
    PossibleTranslation,
)
from readsy.domain.reconciliation.sync import sync_catalog_entry

if TYPE_CHECKING:
    from uuid import UUID

    from readsy.domain.model import CanonicalRecord
    from readsy.domain.ports.persistence import AuthorRepository
    from readsy.domain.ports.unit_of_work import CatalogRepositories

log = getLogger(__name__)


def resolve_author(canonical: CanonicalRecord, authors: AuthorRepository) -> UUID | None:
    if canonical.author_external_id is not None:
        author = authors.find_by_external_id(canonical.author_external_id)
    elif canonical.primary_author:
        author = authors.find_by_name_case_insensitive(canonical.primary_author)
    else:
        author = None
    return author.id if author is not None else None


def resolve_identity(
    canonical: CanonicalRecord,
    repositories: CatalogRepositories,
) -> LinkedToExisting | PossibleTranslation | NewBookFound:
    """Classify ``canonical`` against the catalog, syncing an exact duplicate."""

    canonical = canonical.with_resolved_author(resolve_author(canonical, repositories.authors))
    author_id = canonical.resolved_author_id

    duplicate = repositories.catalog.find_exact_duplicate(
        google_book_id=canonical.google_book_id,
        open_library_id=canonical.open_library_id,
        title=canonical.title or None,
        author_id=author_id,
    )
    if duplicate is not None:
        log.info("Matched existing catalog entry %s (%r)", duplicate.id, duplicate.title)
        updated = sync_catalog_entry(duplicate, canonical, repositories.catalog)
        return LinkedToExisting(updated_entry=updated, canonical=canonical)

    if author_id is not None:
        candidates = tuple(repositories.catalog.find_all_by_author(author_id))
        if candidates:
            log.info(
                "No exact match; %d book(s) by the same author might be translations",
                len(candidates),
            )
            return PossibleTranslation(canonical=canonical, candidate_entries=candidates)

    return NewBookFound(canonical=canonical)
