"""Transaction boundary around the catalog, author and genre stores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from readsy.domain.ports.persistence import (
        AuthorRepository,
        CatalogRepository,
        GenreRepository,
    )


@dataclass(slots=True, frozen=True)
class CatalogRepositories:
    """Repositories bound to one open transaction."""

    catalog: CatalogRepository
    authors: AuthorRepository
    genres: GenreRepository


@runtime_checkable
class CatalogUnitOfWork(Protocol):
    """One transaction over the catalog stores.

    Entering opens the transaction and leaving with an exception rolls it back.
    Nothing is persisted without an explicit ``commit``.
    """

    @property
    def repositories(self) -> CatalogRepositories: ...

    def __enter__(self) -> CatalogUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool | None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
