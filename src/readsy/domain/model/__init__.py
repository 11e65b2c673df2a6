"""Domain model for ISBN reconciliation."""

from __future__ import annotations

from .catalog import Author, CatalogEntry, Genre
from .enums import ExternalIdKind, Provider, authority_for
from .records import BookDescription, CanonicalRecord, ExternalRecord

__all__ = [
    "Author",
    "BookDescription",
    "CanonicalRecord",
    "CatalogEntry",
    "ExternalIdKind",
    "ExternalRecord",
    "Genre",
    "Provider",
    "authority_for",
]
