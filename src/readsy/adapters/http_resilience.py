"""Shared async HTTP client for the external book sources.

``ResilientClient`` wraps ``httpx.AsyncClient`` with what every source needs: a
request timeout, retries on transient failures, an optional rate limit and an
optional response cache. Clients are opened per lookup with ``async with``.
"""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from readsy.config.http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from readsy.config.storage import get_http_cache_path

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import QueryParamTypes

    from readsy.config.http_resilience import ShouldCacheHook

__all__ = [
    "CacheConfig",
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
]

log = getLogger(__name__)


class GetOptions(TypedDict, total=False):
    params: QueryParamTypes | None
    follow_redirects: bool


class _ClientOptions(TypedDict):
    base_url: str
    timeout: float
    headers: dict[str, str]
    transport: httpx.AsyncBaseTransport


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


def build_cache_storage(config: CacheConfig) -> AsyncSqliteStorage:
    if config.backend == "sqlite":
        database_path = config.sqlite_path or str(get_http_cache_path())
    elif config.backend == "memory":
        database_path = ":memory:"
    else:
        raise ValueError(f"Unsupported cache backend: {config.backend}")
    return AsyncSqliteStorage(database_path=database_path, default_ttl=config.ttl_seconds)


class JsonBodyFilter(BaseFilter[HishelCacheResponse]):
    """Cache a response only if its JSON body satisfies ``predicate``.

    Bodies that are not JSON are never cached.
    """

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if body is None:
            return False
        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return False
        return bool(self._predicate(payload))


def build_cache_policy(config: CacheConfig) -> FilterPolicy | None:
    if config.should_cache is None:
        return None
    return FilterPolicy(response_filters=[JsonBodyFilter(config.should_cache)])


def _build_limiter(ratelimit: RateLimit | None) -> AsyncLimiter | None:
    if ratelimit is None:
        return None
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


class ResilientClient:
    """Async HTTP client for one source.

    ``transport`` replaces the network transport underneath the retry layer;
    tests pass an ``httpx.MockTransport`` here.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = _build_limiter(config.ratelimit)

        options: _ClientOptions = {
            "base_url": config.base_url or "",
            "timeout": config.timeout_seconds,
            "headers": dict(config.default_headers or {}),
            "transport": RetryTransport(transport=transport, retry=build_retry(config.retry)),
        }
        cache = config.cache
        if cache is not None and cache.enabled:
            self._client: httpx.AsyncClient = AsyncCacheClient(
                **options,
                storage=build_cache_storage(cache),
                policy=build_cache_policy(cache),
            )
        else:
            self._client = httpx.AsyncClient(**options)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Unpack[GetOptions]) -> httpx.Response:
        if self._limiter is None:
            response = await self._client.get(url, **kwargs)
        else:
            async with self._limiter:
                response = await self._client.get(url, **kwargs)
        log.debug(
            "%s GET %s -> %s", self.config.name, response.request.url, response.status_code
        )
        return response
