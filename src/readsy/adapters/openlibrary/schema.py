"""Pydantic models for the OpenLibrary edition and author payloads.

Only the fields the reconciliation reads are modelled. Optional values with an
unexpected shape are dropped rather than failing the whole payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from readsy.adapters.normalize import mapping_items, text_items, text_or_empty, text_or_none


def _key_refs(value: object) -> object:
    return mapping_items(value, required="key")


def _int_or_none(value: object) -> object:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


class OpenLibraryBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenLibraryKeyRef(OpenLibraryBaseModel):
    """``{"key": "/authors/OL26320A"}`` style reference."""

    key: str


class OpenLibraryEdition(OpenLibraryBaseModel):
    key: str
    title: str = ""
    authors: list[OpenLibraryKeyRef] = Field(default_factory=list)
    description: str | None = None
    number_of_pages: int | None = None
    publishers: list[str] = Field(default_factory=list)
    publish_date: str | None = None
    subjects: list[str] = Field(default_factory=list)
    isbn_10: list[str] = Field(default_factory=list)
    isbn_13: list[str] = Field(default_factory=list)
    languages: list[OpenLibraryKeyRef] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _flatten_description(cls, value: object) -> object:
        # Either a plain string or {"type": "/type/text", "value": "..."}
        if isinstance(value, Mapping):
            return text_or_none(cast(Mapping[str, object], value).get("value"))
        return text_or_none(value)

    _normalize_pages = field_validator("number_of_pages", mode="before")(_int_or_none)
    _normalize_title = field_validator("title", mode="before")(text_or_empty)
    _normalize_date = field_validator("publish_date", mode="before")(text_or_none)
    _normalize_texts = field_validator(
        "publishers", "subjects", "isbn_10", "isbn_13", mode="before"
    )(text_items)
    _normalize_refs = field_validator("authors", "languages", mode="before")(_key_refs)

    @property
    def first_publisher(self) -> str | None:
        return self.publishers[0] if self.publishers else None


class OpenLibraryAuthor(OpenLibraryBaseModel):
    key: str
    name: str = ""

    _normalize_name = field_validator("name", mode="before")(text_or_empty)


def bare_key(key: str) -> str:
    """``"/authors/OL26320A"`` -> ``"OL26320A"``."""

    return key.rstrip("/").rsplit("/", 1)[-1]
