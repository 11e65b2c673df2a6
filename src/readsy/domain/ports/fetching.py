"""Ports for looking up books at external bibliographic sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from readsy.domain.model import ExternalRecord, Provider


@runtime_checkable
class BookSource(Protocol):
    """One external source that can describe a book by ISBN.

    Implementations never raise for "not found" or transient failures; both
    yield ``None``.
    """

    @property
    def provider(self) -> Provider: ...

    async def lookup(self, isbn: str) -> ExternalRecord | None: ...


__all__ = ["BookSource"]
