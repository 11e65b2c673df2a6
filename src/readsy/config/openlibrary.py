"""OpenLibrary configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from readsy import __version__

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_OPENLIBRARY_BASE_URL = "https://openlibrary.org"
OPENLIBRARY_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class OpenLibraryConfig:
    resilience: ResilienceConfig


def open_library_user_agent(contact: str | None) -> str:
    if contact is None:
        return f"Readsy/{__version__}"
    return f"Readsy/{__version__} (contact: {contact})"


def get_open_library_config() -> OpenLibraryConfig:
    # OpenLibrary asks API consumers to identify themselves via the User-Agent.
    user_agent = open_library_user_agent(optional_env_var("OPENLIBRARY_CONTACT"))

    resilience = ResilienceConfig(
        name="openlibrary",
        base_url=DEFAULT_OPENLIBRARY_BASE_URL,
        timeout_seconds=OPENLIBRARY_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=3, per_seconds=1.0),
        retry=RetryPolicy(total=2),
        cache=CacheConfig(),
        default_headers={"User-Agent": user_agent},
    )

    return OpenLibraryConfig(resilience=resilience)
