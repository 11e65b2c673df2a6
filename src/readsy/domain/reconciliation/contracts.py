"""Outcome variants returned by ISBN reconciliation.

Each reconciliation call returns exactly one of these; callers dispatch on the
type (``match``) or on ``status``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from readsy.domain.model import CanonicalRecord, CatalogEntry


class OutcomeStatus(StrEnum):
    ALREADY_EXISTS = "already_exists"
    LINKED_TO_EXISTING = "linked_to_existing"
    POSSIBLE_TRANSLATION = "possible_translation"
    NEW_BOOK_FOUND = "new_book_found"
    NOT_FOUND_EXTERNALLY = "not_found_externally"


@dataclass(frozen=True, slots=True, kw_only=True)
class AlreadyExists:
    """The ISBN was already in the catalog; no source was queried."""

    entry: CatalogEntry
    status: Literal[OutcomeStatus.ALREADY_EXISTS] = OutcomeStatus.ALREADY_EXISTS


@dataclass(frozen=True, slots=True, kw_only=True)
class LinkedToExisting:
    """An exact duplicate was found and synced with the merged record."""

    updated_entry: CatalogEntry
    canonical: CanonicalRecord
    status: Literal[OutcomeStatus.LINKED_TO_EXISTING] = OutcomeStatus.LINKED_TO_EXISTING


@dataclass(frozen=True, slots=True, kw_only=True)
class PossibleTranslation:
    """No exact duplicate, but the resolved author already has books in the catalog."""

    canonical: CanonicalRecord
    candidate_entries: tuple[CatalogEntry, ...]
    status: Literal[OutcomeStatus.POSSIBLE_TRANSLATION] = OutcomeStatus.POSSIBLE_TRANSLATION


@dataclass(frozen=True, slots=True, kw_only=True)
class NewBookFound:
    canonical: CanonicalRecord
    status: Literal[OutcomeStatus.NEW_BOOK_FOUND] = OutcomeStatus.NEW_BOOK_FOUND


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundExternally:
    status: Literal[OutcomeStatus.NOT_FOUND_EXTERNALLY] = OutcomeStatus.NOT_FOUND_EXTERNALLY


type Outcome = (
    AlreadyExists | LinkedToExisting | PossibleTranslation | NewBookFound | NotFoundExternally
)


class CatalogEntryNotFoundError(LookupError):
    """Raised when a catalog entry disappears between match and re-read."""

    def __init__(self, entry_id: object) -> None:
        super().__init__(f"Catalog entry {entry_id} not found")
        self.entry_id = entry_id
