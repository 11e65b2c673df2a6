"""Public interface for the OpenLibrary adapter."""

from __future__ import annotations

from .client import OpenLibraryAPIError, OpenLibraryBook, OpenLibraryClient
from .fetcher import OpenLibrarySource, build_open_library_source
from .schema import OpenLibraryAuthor, OpenLibraryEdition
from .translator import translate_book

__all__ = [
    "OpenLibraryAPIError",
    "OpenLibraryAuthor",
    "OpenLibraryBook",
    "OpenLibraryClient",
    "OpenLibraryEdition",
    "OpenLibrarySource",
    "build_open_library_source",
    "translate_book",
]
