"""Snapshots of rows owned by the local catalog, author and genre stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True, kw_only=True)
class Author:
    id: UUID = field(default_factory=uuid4)
    name: str
    open_library_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Genre:
    id: UUID = field(default_factory=uuid4)
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogEntry:
    """An existing book row as read from the catalog store."""

    id: UUID = field(default_factory=uuid4)
    title: str
    isbns: frozenset[str] = frozenset()
    author_id: UUID | None = None
    google_book_id: str | None = None
    open_library_id: str | None = None
    description: str = ""
    page_count: int | None = None
    publisher: str | None = None
    original_publication_year: int | None = None
    language: str | None = None
