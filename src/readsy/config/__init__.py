"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_float, optional_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .google_books import GoogleBooksConfig, get_google_books_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, get_log_level
from .openlibrary import OpenLibraryConfig, get_open_library_config
from .reconciliation import ReconciliationConfig, get_reconciliation_config
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_database_uri,
    get_storage_config,
)

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "GoogleBooksConfig",
    "InvalidConfigurationError",
    "OpenLibraryConfig",
    "RateLimit",
    "ReconciliationConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_database_uri",
    "get_google_books_config",
    "get_log_level",
    "get_open_library_config",
    "get_reconciliation_config",
    "get_storage_config",
    "optional_env_float",
    "optional_env_var",
]
