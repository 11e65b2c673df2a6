"""Transient book descriptions produced by source adapters and the merge step.

An ``ExternalRecord`` is what one bibliographic source says about an ISBN. A
``CanonicalRecord`` is the merged view of up to two such records; it is built once
per reconciliation and never mutated afterwards (``with_resolved_author`` returns a
copy).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from readsy.domain.model.enums import ExternalIdKind

if TYPE_CHECKING:
    from uuid import UUID

    from readsy.domain.model.enums import Provider


@dataclass(frozen=True, slots=True, kw_only=True)
class BookDescription:
    """Fields shared by per-source and merged records.

    Text fields use ``""`` for "no data"; optional scalars use ``None``.
    """

    title: str = ""
    authors: tuple[str, ...] = ()
    description: str = ""
    genre_names: frozenset[str] = frozenset()
    all_isbns: frozenset[str] = frozenset()
    google_book_id: str | None = None
    open_library_id: str | None = None
    author_external_id: str | None = None
    page_count: int | None = None
    publisher: str | None = None
    original_publication_year: int | None = None
    language: str | None = None

    def external_id(self, kind: ExternalIdKind) -> str | None:
        match kind:
            case ExternalIdKind.GOOGLE_BOOK:
                return self.google_book_id
            case ExternalIdKind.OPEN_LIBRARY_EDITION:
                return self.open_library_id

    @property
    def primary_author(self) -> str | None:
        return self.authors[0] if self.authors else None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalRecord(BookDescription):
    source: Provider


@dataclass(frozen=True, slots=True, kw_only=True)
class CanonicalRecord(BookDescription):
    sources: frozenset[Provider] = frozenset()
    resolved_author_id: UUID | None = None

    def with_resolved_author(self, author_id: UUID | None) -> CanonicalRecord:
        return replace(self, resolved_author_id=author_id)

    def with_genre_names(self, names: frozenset[str]) -> CanonicalRecord:
        return replace(self, genre_names=names)
