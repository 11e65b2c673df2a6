"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import BookSource
from .persistence import AuthorRepository, CatalogRepository, GenreRepository
from .unit_of_work import CatalogRepositories, CatalogUnitOfWork

__all__ = [
    "AuthorRepository",
    "BookSource",
    "CatalogRepositories",
    "CatalogRepository",
    "CatalogUnitOfWork",
    "GenreRepository",
]
