"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from readsy.adapters.google_books import build_google_books_source
from readsy.adapters.openlibrary import build_open_library_source
from readsy.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    is_started,
    startup,
)
from readsy.config import get_reconciliation_config
from readsy.domain.ports.unit_of_work import CatalogUnitOfWork
from readsy.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from readsy.config import ReconciliationConfig
    from readsy.domain.ports.fetching import BookSource
    from readsy.domain.reconciliation import Outcome

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


def initialize_database(*, database_uri: str | None = None) -> None:
    """Start the SQLAlchemy adapter, creating missing tables."""

    if is_started():
        return
    startup(database_uri=database_uri)


def build_reconciliation_engine(
    *,
    open_library: BookSource | None = None,
    google_books: BookSource | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ReconciliationConfig | None = None,
) -> ReconciliationEngine:
    """Wire the engine to the configured sources and store, filling in defaults."""

    if unit_of_work_factory is None:
        initialize_database()
    effective_config = config or get_reconciliation_config()
    return ReconciliationEngine(
        open_library=open_library or build_open_library_source(),
        google_books=google_books or build_google_books_source(),
        unit_of_work=unit_of_work_factory or SqlAlchemyCatalogUnitOfWork,
        source_timeout_seconds=effective_config.source_timeout_seconds,
    )


def lookup_isbn(
    isbn: str,
    *,
    open_library: BookSource | None = None,
    google_books: BookSource | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ReconciliationConfig | None = None,
) -> Outcome:
    """Reconcile one ISBN using the configured adapters."""

    engine = build_reconciliation_engine(
        open_library=open_library,
        google_books=google_books,
        unit_of_work_factory=unit_of_work_factory,
        config=config,
    )
    log.info("Looking up ISBN %s", isbn)
    return engine.reconcile(isbn)
