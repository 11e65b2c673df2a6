"""Merge per-source records into one canonical record.

The OpenLibrary record is the base when present, Google the fallback. Base values
win except where noted:

- ``title``: other's title only when the base has none.
- ``description``: other's description when the base one is missing or shorter
  than ``DESCRIPTION_QUALITY_THRESHOLD`` characters.
- ``authors``, ``page_count``, ``publisher``, ``original_publication_year``,
  ``language``: fill-if-missing.
- ``genre_names``: union of both, normalised.
- ``all_isbns``: union of both.
- identifiers: each source is the authority for its own namespace, regardless of
  which record is the base.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from readsy.domain.genres import normalize_genre_names
from readsy.domain.model import CanonicalRecord, ExternalIdKind, Provider, authority_for

if TYPE_CHECKING:
    from readsy.domain.model import ExternalRecord

DESCRIPTION_QUALITY_THRESHOLD: Final[int] = 50


def canonicalize(record: ExternalRecord) -> CanonicalRecord:
    """Lift a single source record to a canonical record."""

    return CanonicalRecord(
        title=record.title,
        authors=record.authors,
        description=record.description,
        genre_names=frozenset(normalize_genre_names(record.genre_names)),
        all_isbns=record.all_isbns,
        google_book_id=record.google_book_id,
        open_library_id=record.open_library_id,
        author_external_id=record.author_external_id,
        page_count=record.page_count,
        publisher=record.publisher,
        original_publication_year=record.original_publication_year,
        language=record.language,
        sources=frozenset({record.source}),
    )


def merge_records(
    open_library: ExternalRecord | None,
    google_books: ExternalRecord | None,
) -> CanonicalRecord | None:
    """Combine the OpenLibrary and Google records; ``None`` only if both are missing."""

    if open_library is None:
        return canonicalize(google_books) if google_books is not None else None
    if google_books is None:
        return canonicalize(open_library)

    base, other = open_library, google_books
    by_provider = {base.source: base, other.source: other}
    return CanonicalRecord(
        title=base.title or other.title,
        authors=base.authors or other.authors,
        description=_merge_description(base.description, other.description),
        genre_names=frozenset(
            normalize_genre_names([*sorted(base.genre_names), *sorted(other.genre_names)])
        ),
        all_isbns=base.all_isbns | other.all_isbns,
        google_book_id=_authoritative_id(ExternalIdKind.GOOGLE_BOOK, by_provider),
        open_library_id=_authoritative_id(ExternalIdKind.OPEN_LIBRARY_EDITION, by_provider),
        author_external_id=base.author_external_id or other.author_external_id,
        page_count=_fill(base.page_count, other.page_count),
        publisher=_fill(base.publisher, other.publisher),
        original_publication_year=_fill(
            base.original_publication_year, other.original_publication_year
        ),
        language=_fill(base.language, other.language),
        sources=frozenset({base.source, other.source}),
    )


def _merge_description(base: str, other: str) -> str:
    if other and len(base) < DESCRIPTION_QUALITY_THRESHOLD:
        return other
    return base


def _authoritative_id(
    kind: ExternalIdKind,
    by_provider: dict[Provider, ExternalRecord],
) -> str | None:
    owner = by_provider.get(authority_for(kind))
    if owner is not None and owner.external_id(kind) is not None:
        return owner.external_id(kind)
    for record in by_provider.values():
        value = record.external_id(kind)
        if value is not None:
            return value
    return None


def _fill[T](base: T | None, other: T | None) -> T | None:
    return base if base is not None else other
