"""Public interface for the Google Books adapter."""

from __future__ import annotations

from .client import GoogleBooksAPIError, GoogleBooksClient, should_cache_volumes
from .fetcher import GoogleBooksSource, build_google_books_source
from .schema import Volume, VolumeInfo, VolumesResponse
from .translator import translate_volume

__all__ = [
    "GoogleBooksAPIError",
    "GoogleBooksClient",
    "GoogleBooksSource",
    "Volume",
    "VolumeInfo",
    "VolumesResponse",
    "build_google_books_source",
    "should_cache_volumes",
    "translate_volume",
]
