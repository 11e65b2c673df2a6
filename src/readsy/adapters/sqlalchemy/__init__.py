"""SQLAlchemy adapter package for Readsy."""

from __future__ import annotations

from .mappings import create_all_tables, metadata
from .repositories import (
    SqlAlchemyAuthorRepository,
    SqlAlchemyCatalogRepository,
    SqlAlchemyGenreRepository,
)
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyAuthorRepository",
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyGenreRepository",
    "StartupError",
    "create_all_tables",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
]
