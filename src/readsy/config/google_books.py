"""Google Books configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
    ShouldCacheHook,
)

GOOGLE_BOOKS_BASE_URL = "https://www.googleapis.com/books/v1"
GOOGLE_BOOKS_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class GoogleBooksConfig:
    """Holds Google Books API configuration values."""

    resilience: ResilienceConfig
    api_key: str | None = None


def get_google_books_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> GoogleBooksConfig:
    return GoogleBooksConfig(
        api_key=optional_env_var("GOOGLE_BOOKS_API_KEY"),
        resilience=resilience
        or ResilienceConfig(
            name="google_books",
            base_url=GOOGLE_BOOKS_BASE_URL,
            timeout_seconds=GOOGLE_BOOKS_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            retry=RetryPolicy(total=2),
            cache=CacheConfig(should_cache=cache_predicate),
        ),
    )
