"""SQLAlchemy table metadata for the catalog, author and genre stores.

Domain objects are frozen value snapshots, so the stores work on Core tables and
build domain objects from rows instead of mapping classes onto tables.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table, Text, Uuid

from readsy.domain.model import Author, CatalogEntry, Genre

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import Row
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# Core tables -----------------------------------------------------------------

author_table = Table(
    "author",
    metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    # case-folded name; indexed for case-insensitive lookups
    Column("name_key", String, nullable=False, index=True),
    Column("open_library_id", String, nullable=True, unique=True),
)

book_table = Table(
    "book",
    metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("title", String, nullable=False),
    Column("title_key", String, nullable=False, index=True),
    Column("author_id", UUIDColumnType, ForeignKey("author.id"), nullable=True, index=True),
    Column("google_book_id", String, nullable=True, index=True),
    Column("open_library_id", String, nullable=True, index=True),
    Column("description", Text, nullable=False, default=""),
    Column("page_count", Integer, nullable=True),
    Column("publisher", String, nullable=True),
    Column("original_publication_year", Integer, nullable=True),
    Column("language", String, nullable=True),
)

book_isbn_table = Table(
    "book_isbn",
    metadata,
    Column("isbn", String(13), primary_key=True),
    Column("book_id", UUIDColumnType, ForeignKey("book.id"), nullable=False, index=True),
)

genre_table = Table(
    "genre",
    metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("name_key", String, nullable=False, unique=True),
)


# Row conversion ----------------------------------------------------------------


def name_key(value: str) -> str:
    return value.strip().casefold()


def author_from_row(row: Row[tuple[object, ...]]) -> Author:
    mapping = row._mapping
    return Author(
        id=mapping["id"],
        name=mapping["name"],
        open_library_id=mapping["open_library_id"],
    )


def genre_from_row(row: Row[tuple[object, ...]]) -> Genre:
    mapping = row._mapping
    return Genre(id=mapping["id"], name=mapping["name"])


def catalog_entry_from_row(row: Row[tuple[object, ...]], isbns: Iterable[str]) -> CatalogEntry:
    mapping = row._mapping
    return CatalogEntry(
        id=mapping["id"],
        title=mapping["title"],
        isbns=frozenset(isbns),
        author_id=mapping["author_id"],
        google_book_id=mapping["google_book_id"],
        open_library_id=mapping["open_library_id"],
        description=mapping["description"] or "",
        page_count=mapping["page_count"],
        publisher=mapping["publisher"],
        original_publication_year=mapping["original_publication_year"],
        language=mapping["language"],
    )


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the catalog metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
