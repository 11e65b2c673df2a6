"""Translate OpenLibrary payloads into source records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from readsy.adapters.normalize import first_year, isbn_set
from readsy.domain.model import ExternalRecord, Provider

from .schema import bare_key

if TYPE_CHECKING:
    from .client import OpenLibraryBook


def translate_book(book: OpenLibraryBook, *, isbn: str) -> ExternalRecord:
    edition = book.edition
    author_names = tuple(author.name.strip() for author in book.authors if author.name.strip())
    first_author = edition.authors[0].key if edition.authors else None
    language = bare_key(edition.languages[0].key) if edition.languages else None

    return ExternalRecord(
        source=Provider.OPEN_LIBRARY,
        open_library_id=edition.key,
        author_external_id=bare_key(first_author) if first_author else None,
        title=edition.title.strip(),
        authors=author_names,
        description=edition.description or "",
        genre_names=frozenset(subject.strip() for subject in edition.subjects if subject.strip()),
        all_isbns=isbn_set([*edition.isbn_10, *edition.isbn_13], isbn),
        page_count=edition.number_of_pages,
        publisher=edition.first_publisher,
        original_publication_year=first_year(edition.publish_date),
        language=language or None,
    )
