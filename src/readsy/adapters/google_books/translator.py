"""Translate Google Books volumes into source records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from readsy.adapters.normalize import first_year, isbn_set
from readsy.domain.model import ExternalRecord, Provider

if TYPE_CHECKING:
    from .schema import Volume

# "OTHER" identifiers are library call numbers, not ISBNs
ISBN_TYPES = frozenset({"ISBN_10", "ISBN_13"})


def translate_volume(volume: Volume, *, isbn: str) -> ExternalRecord:
    """Build the Google Books record for the ISBN that found ``volume``.

    ``all_isbns`` holds the queried ISBN plus the volume's ISBN_10 and ISBN_13
    identifiers. Identifiers of any other type (``OTHER`` carries library
    identifiers such as ``"UOM:39015066130837"``) are left out.
    """

    info = volume.volume_info
    return ExternalRecord(
        source=Provider.GOOGLE_BOOKS,
        google_book_id=volume.id,
        title=info.title.strip(),
        authors=tuple(name.strip() for name in info.authors if name.strip()),
        description=info.description or "",
        genre_names=frozenset(category for category in info.categories if category.strip()),
        all_isbns=isbn_set(
            (entry.identifier for entry in info.industry_identifiers if entry.type in ISBN_TYPES),
            isbn,
        ),
        page_count=info.page_count,
        publisher=info.publisher,
        original_publication_year=first_year(info.published_date),
        language=info.language,
    )
