"""Google Books API client."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

from readsy.adapters.http_resilience import ResilientClient

from .schema import Volume, VolumesResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from readsy.config.google_books import GoogleBooksConfig
    from readsy.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class GoogleBooksAPIError(RuntimeError):
    """Raised when the Google Books API returns an unexpected response."""


def should_cache_volumes(payload: object) -> bool:
    """Only cache searches that found something; a miss may be filled in later."""

    if not isinstance(payload, Mapping):
        return False
    items = cast(Mapping[str, object], payload).get("items")
    return isinstance(items, list) and bool(items)


class GoogleBooksClient:
    """Low-level HTTP client for the Google Books volumes search."""

    def __init__(
        self,
        *,
        config: GoogleBooksConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    async def search_by_isbn(self, isbn: str) -> Volume | None:
        """Return the first volume matching ``isbn``, or ``None`` when there is none."""

        params = {"q": f"isbn:{isbn}"}
        if self._config.api_key:
            params["key"] = self._config.api_key

        async with self._client_factory(self._resilience) as client:
            response = await self._perform_request(client=client, path="volumes", params=params)

        if not response.items:
            return None
        return response.items[0]

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        path: str,
        params: dict[str, str],
    ) -> VolumesResponse:
        if self._resilience.base_url is None:
            raise GoogleBooksAPIError("Missing Google Books base_url in resilience configuration")
        response = await client.get(path, params=params)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise GoogleBooksAPIError("Unexpected Google Books response payload")
        if "error" in payload:
            raise GoogleBooksAPIError(f"Google Books error payload: {payload['error']}")

        return VolumesResponse.model_validate(payload)
