from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from readsy.adapters.sqlalchemy import create_all_tables
from readsy.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    shutdown,
    startup,
)
from readsy.domain.model import Provider
from readsy.domain.ports.unit_of_work import CatalogRepositories
from readsy.domain.reconciliation import ReconciliationEngine
from tests.helpers.sources import FakeBookSource

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine(tmp_path: Path) -> Iterator[Engine]:
    # file-backed so worker threads see the same database
    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyCatalogUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyCatalogUnitOfWork:
        return SqlAlchemyCatalogUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def repositories(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> Iterator[CatalogRepositories]:
    """Repositories bound to one open unit of work, rolled back after the test."""

    with sqlite_unit_of_work() as uow:
        yield uow.repositories


@pytest.fixture
def open_library_source() -> FakeBookSource:
    return FakeBookSource(provider=Provider.OPEN_LIBRARY)


@pytest.fixture
def google_books_source() -> FakeBookSource:
    return FakeBookSource(provider=Provider.GOOGLE_BOOKS)


@pytest.fixture
def engine(
    open_library_source: FakeBookSource,
    google_books_source: FakeBookSource,
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> ReconciliationEngine:
    return ReconciliationEngine(
        open_library=open_library_source,
        google_books=google_books_source,
        unit_of_work=sqlite_unit_of_work,
        source_timeout_seconds=1.0,
    )
