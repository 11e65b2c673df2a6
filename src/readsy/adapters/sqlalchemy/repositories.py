"""SQLAlchemy-backed repositories for the catalog, author and genre stores."""

from __future__ import annotations

import uuid
from collections import defaultdict
from typing import TYPE_CHECKING, cast

from sqlalchemy import and_, or_, select, update
from sqlalchemy.dialects import postgresql, sqlite

from readsy.domain.model import ExternalIdKind

from .mappings import (
    author_from_row,
    author_table,
    book_isbn_table,
    book_table,
    catalog_entry_from_row,
    genre_from_row,
    genre_table,
    name_key,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from sqlalchemy import ColumnElement, Row, Select, Table
    from sqlalchemy.orm import Session

    from readsy.domain.model import Author, CatalogEntry, Genre


def insert_ignoring_conflicts(
    session: Session,
    table: Table,
    rows: Sequence[Mapping[str, object]],
) -> None:
    """Insert ``rows``, silently skipping any that violate a unique constraint."""

    if not rows:
        return
    dialect = session.get_bind().dialect.name
    if dialect == "sqlite":
        stmt = sqlite.insert(table).on_conflict_do_nothing()
    elif dialect == "postgresql":
        stmt = postgresql.insert(table).on_conflict_do_nothing()
    else:
        stmt = table.insert().prefix_with("IGNORE", dialect="mysql")
    session.execute(stmt, list(rows))


class SqlAlchemyCatalogRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entry: CatalogEntry) -> None:
        self.session.execute(
            book_table.insert().values(
                id=entry.id,
                title=entry.title,
                title_key=name_key(entry.title),
                author_id=entry.author_id,
                google_book_id=entry.google_book_id,
                open_library_id=entry.open_library_id,
                description=entry.description,
                page_count=entry.page_count,
                publisher=entry.publisher,
                original_publication_year=entry.original_publication_year,
                language=entry.language,
            )
        )
        self.append_isbns(entry.id, entry.isbns)

    def get(self, entry_id: uuid.UUID) -> CatalogEntry | None:
        return self._first(select(book_table).where(book_table.c.id == entry_id))

    def find_by_isbn(self, isbn: str) -> CatalogEntry | None:
        stmt = (
            select(book_table)
            .join(book_isbn_table, book_isbn_table.c.book_id == book_table.c.id)
            .where(book_isbn_table.c.isbn == isbn)
        )
        return self._first(stmt)

    def find_by_external_id(self, kind: ExternalIdKind, value: str) -> CatalogEntry | None:
        return self._first(select(book_table).where(_external_id_column(kind) == value))

    def find_by_title_and_author(self, title: str, author_id: uuid.UUID) -> CatalogEntry | None:
        stmt = select(book_table).where(
            book_table.c.title_key == name_key(title),
            book_table.c.author_id == author_id,
        )
        return self._first(stmt)

    def find_exact_duplicate(
        self,
        *,
        google_book_id: str | None,
        open_library_id: str | None,
        title: str | None,
        author_id: uuid.UUID | None,
    ) -> CatalogEntry | None:
        conditions: list[ColumnElement[bool]] = []
        if google_book_id is not None:
            conditions.append(book_table.c.google_book_id == google_book_id)
        if open_library_id is not None:
            conditions.append(book_table.c.open_library_id == open_library_id)
        if title and author_id is not None:
            conditions.append(
                and_(
                    book_table.c.title_key == name_key(title),
                    book_table.c.author_id == author_id,
                )
            )
        if not conditions:
            return None
        # First row the database returns; several rows may match.
        return self._first(select(book_table).where(or_(*conditions)))

    def find_all_by_author(self, author_id: uuid.UUID) -> list[CatalogEntry]:
        stmt = (
            select(book_table)
            .where(book_table.c.author_id == author_id)
            .order_by(book_table.c.title_key)
        )
        return self._entries(self.session.execute(stmt).all())

    def backfill_identifiers(
        self,
        entry_id: uuid.UUID,
        *,
        google_book_id: str | None = None,
        open_library_id: str | None = None,
    ) -> None:
        for column, value in (
            (book_table.c.google_book_id, google_book_id),
            (book_table.c.open_library_id, open_library_id),
        ):
            if value is None:
                continue
            self.session.execute(
                update(book_table)
                .where(book_table.c.id == entry_id, column.is_(None))
                .values({column.key: value})
            )

    def append_isbns(self, entry_id: uuid.UUID, isbns: Iterable[str]) -> None:
        rows = [{"isbn": isbn, "book_id": entry_id} for isbn in sorted(set(isbns))]
        insert_ignoring_conflicts(self.session, book_isbn_table, rows)

    def _first(self, stmt: Select[tuple[object, ...]]) -> CatalogEntry | None:
        row = self.session.execute(stmt.limit(1)).first()
        if row is None:
            return None
        return self._entries([row])[0]

    def _entries(self, rows: Sequence[Row[tuple[object, ...]]]) -> list[CatalogEntry]:
        if not rows:
            return []
        ids = [cast(uuid.UUID, row._mapping["id"]) for row in rows]
        isbns: dict[uuid.UUID, list[str]] = defaultdict(list)
        isbn_rows = self.session.execute(
            select(book_isbn_table.c.book_id, book_isbn_table.c.isbn).where(
                book_isbn_table.c.book_id.in_(ids)
            )
        )
        for book_id, isbn in isbn_rows:
            isbns[book_id].append(isbn)
        return [catalog_entry_from_row(row, isbns[row._mapping["id"]]) for row in rows]


class SqlAlchemyAuthorRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, author: Author) -> None:
        self.session.execute(
            author_table.insert().values(
                id=author.id,
                name=author.name,
                name_key=name_key(author.name),
                open_library_id=author.open_library_id,
            )
        )

    def find_by_external_id(self, open_library_id: str) -> Author | None:
        stmt = select(author_table).where(author_table.c.open_library_id == open_library_id)
        row = self.session.execute(stmt.limit(1)).first()
        return author_from_row(row) if row is not None else None

    def find_by_name_case_insensitive(self, name: str) -> Author | None:
        stmt = select(author_table).where(author_table.c.name_key == name_key(name))
        row = self.session.execute(stmt.limit(1)).first()
        return author_from_row(row) if row is not None else None


class SqlAlchemyGenreRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_names_case_insensitive(self, names: Iterable[str]) -> list[Genre]:
        keys = {name_key(name) for name in names}
        if not keys:
            return []
        stmt = select(genre_table).where(genre_table.c.name_key.in_(keys))
        return [genre_from_row(row) for row in self.session.execute(stmt).all()]

    def create_many(self, names: Iterable[str]) -> None:
        rows = [
            {"id": uuid.uuid4(), "name": name, "name_key": name_key(name)}
            for name in dict.fromkeys(names)
        ]
        insert_ignoring_conflicts(self.session, genre_table, rows)


def _external_id_column(kind: ExternalIdKind) -> ColumnElement[str | None]:
    match kind:
        case ExternalIdKind.GOOGLE_BOOK:
            return book_table.c.google_book_id
        case ExternalIdKind.OPEN_LIBRARY_EDITION:
            return book_table.c.open_library_id


if TYPE_CHECKING:
    from readsy.domain.ports.persistence import (
        AuthorRepository,
        CatalogRepository,
        GenreRepository,
    )

    _session_stub = cast("Session", object())
    _catalog_repo: CatalogRepository = SqlAlchemyCatalogRepository(_session_stub)
    _author_repo: AuthorRepository = SqlAlchemyAuthorRepository(_session_stub)
    _genre_repo: GenreRepository = SqlAlchemyGenreRepository(_session_stub)
