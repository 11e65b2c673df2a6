"""SQLAlchemy-backed unit of work over the catalog stores.

The adapter holds one process-wide engine. ``startup`` binds it (creating any
missing tables) and every ``SqlAlchemyCatalogUnitOfWork`` opens a fresh session
from it, so each unit of work is one transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from readsy.config.storage import get_database_uri
from readsy.domain.ports.unit_of_work import CatalogRepositories

from .mappings import create_all_tables
from .repositories import (
    SqlAlchemyAuthorRepository,
    SqlAlchemyCatalogRepository,
    SqlAlchemyGenreRepository,
)

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the catalog store is used before ``startup`` or started twice."""


@dataclass(slots=True)
class _CatalogStore:
    engine: Engine
    session_factory: sessionmaker[Session]


_store: _CatalogStore | None = None


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the catalog store to ``engine`` (or a new one for ``database_uri``).

    Missing tables are created. Rebinding a started store needs ``force=True``; the
    previous engine is disposed.
    """

    global _store  # noqa: PLW0603
    if _store is not None and not force:
        raise StartupError("Catalog store already started. Pass force=True to rebind it.")

    bound = engine or create_engine(database_uri or get_database_uri(), future=True)
    create_all_tables(bound)
    if _store is not None and _store.engine is not bound:
        _store.engine.dispose()
    _store = _CatalogStore(
        engine=bound,
        session_factory=sessionmaker(bind=bound, expire_on_commit=False),
    )
    log.debug("Catalog store bound to %s", bound.url)


def configured_engine() -> Engine | None:
    return _store.engine if _store is not None else None


def is_started() -> bool:
    return _store is not None


def shutdown() -> None:
    """Dispose the bound engine; the next unit of work needs another ``startup``."""

    global _store  # noqa: PLW0603
    if _store is not None:
        _store.engine.dispose()
    _store = None


def _default_session_factory() -> sessionmaker[Session]:
    if _store is None:
        raise StartupError(
            "Catalog store not started. Call readsy.adapters.sqlalchemy.startup() first."
        )
    return _store.session_factory


class SqlAlchemyCatalogUnitOfWork:
    """One SQLAlchemy session exposing the catalog, author and genre repositories."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self.session_factory = session_factory or _default_session_factory()
        self._session: Session | None = None
        self._repositories: CatalogRepositories | None = None

    def __enter__(self) -> SqlAlchemyCatalogUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work already entered")
        session = self.session_factory()
        self._session = session
        self._repositories = CatalogRepositories(
            catalog=SqlAlchemyCatalogRepository(session),
            authors=SqlAlchemyAuthorRepository(session),
            genres=SqlAlchemyGenreRepository(session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work has no open session; use it as a context manager")
        return self._session

    @property
    def repositories(self) -> CatalogRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work has no open session; use it as a context manager")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from readsy.domain.ports.unit_of_work import CatalogUnitOfWork

    _uow_check: CatalogUnitOfWork = SqlAlchemyCatalogUnitOfWork()
