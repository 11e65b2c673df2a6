"""Ports for the local catalog, author and genre stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from readsy.domain.model import Author, CatalogEntry, ExternalIdKind, Genre


@runtime_checkable
class CatalogRepository(Protocol):
    """Persistence contract for catalog entries (books and their ISBNs)."""

    def add(self, entry: CatalogEntry) -> None: ...

    def get(self, entry_id: UUID) -> CatalogEntry | None: ...

    def find_by_isbn(self, isbn: str) -> CatalogEntry | None: ...

    def find_by_external_id(self, kind: ExternalIdKind, value: str) -> CatalogEntry | None: ...

    def find_by_title_and_author(self, title: str, author_id: UUID) -> CatalogEntry | None: ...

    def find_exact_duplicate(
        self,
        *,
        google_book_id: str | None,
        open_library_id: str | None,
        title: str | None,
        author_id: UUID | None,
    ) -> CatalogEntry | None:
        """Return the first entry matching any identifier or title+author."""
        ...

    def find_all_by_author(self, author_id: UUID) -> Sequence[CatalogEntry]: ...

    def backfill_identifiers(
        self,
        entry_id: UUID,
        *,
        google_book_id: str | None = None,
        open_library_id: str | None = None,
    ) -> None:
        """Set each given identifier only where the stored value is null."""
        ...

    def append_isbns(self, entry_id: UUID, isbns: Iterable[str]) -> None:
        """Attach ISBNs to an entry, ignoring ones that already exist."""
        ...


@runtime_checkable
class AuthorRepository(Protocol):
    """Persistence contract for authors."""

    def add(self, author: Author) -> None: ...

    def find_by_external_id(self, open_library_id: str) -> Author | None: ...

    def find_by_name_case_insensitive(self, name: str) -> Author | None: ...


@runtime_checkable
class GenreRepository(Protocol):
    """Persistence contract for the shared genre table."""

    def find_by_names_case_insensitive(self, names: Iterable[str]) -> Sequence[Genre]: ...

    def create_many(self, names: Iterable[str]) -> None:
        """Insert genres by name, skipping names that already exist."""
        ...
