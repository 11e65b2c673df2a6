"""ISBN reconciliation: merge source records and resolve them against the catalog."""

from __future__ import annotations

from .contracts import (
    AlreadyExists,
    CatalogEntryNotFoundError,
    LinkedToExisting,
    NewBookFound,
    NotFoundExternally,
    Outcome,
    OutcomeStatus,
    PossibleTranslation,
)
from .engine import ReconciliationEngine
from .merge import DESCRIPTION_QUALITY_THRESHOLD, canonicalize, merge_records
from .resolve import resolve_author, resolve_identity
from .sync import sync_catalog_entry

__all__ = [
    "DESCRIPTION_QUALITY_THRESHOLD",
    "AlreadyExists",
    "CatalogEntryNotFoundError",
    "LinkedToExisting",
    "NewBookFound",
    "NotFoundExternally",
    "Outcome",
    "OutcomeStatus",
    "PossibleTranslation",
    "ReconciliationEngine",
    "canonicalize",
    "merge_records",
    "resolve_author",
    "resolve_identity",
    "sync_catalog_entry",
]
