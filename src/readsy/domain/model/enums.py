"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class Provider(StrEnum):
    OPEN_LIBRARY = "openlibrary"
    GOOGLE_BOOKS = "google_books"


class ExternalIdKind(StrEnum):
    """Identifier namespaces a catalog entry can carry for an external source."""

    GOOGLE_BOOK = "google_book"
    OPEN_LIBRARY_EDITION = "open_library_edition"


_ID_AUTHORITIES: Final[dict[ExternalIdKind, Provider]] = {
    ExternalIdKind.GOOGLE_BOOK: Provider.GOOGLE_BOOKS,
    ExternalIdKind.OPEN_LIBRARY_EDITION: Provider.OPEN_LIBRARY,
}


def authority_for(kind: ExternalIdKind) -> Provider:
    """Return the provider that owns identifiers of ``kind``."""

    return _ID_AUTHORITIES[kind]
