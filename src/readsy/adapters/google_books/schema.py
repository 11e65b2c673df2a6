"""Pydantic models describing the Google Books volumes search payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from readsy.adapters.normalize import mapping_items, text_items, text_or_empty, text_or_none


def _identifiers(value: object) -> object:
    return mapping_items(value, required="identifier")


def _volumes(value: object) -> object:
    return mapping_items(value, required="id")


def _count_or_zero(value: object) -> object:
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _object_or_empty(value: object) -> object:
    return value if isinstance(value, Mapping) else {}


class GoogleBooksBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IndustryIdentifier(GoogleBooksBaseModel):
    type: str = ""
    identifier: str

    _normalize_type = field_validator("type", mode="before")(text_or_empty)


class VolumeInfo(GoogleBooksBaseModel):
    title: str = ""
    authors: list[str] = Field(default_factory=list)
    description: str | None = None
    categories: list[str] = Field(default_factory=list)
    page_count: int | None = Field(default=None, alias="pageCount")
    publisher: str | None = None
    published_date: str | None = Field(default=None, alias="publishedDate")
    language: str | None = None
    industry_identifiers: list[IndustryIdentifier] = Field(
        default_factory=list, alias="industryIdentifiers"
    )

    _normalize_title = field_validator("title", mode="before")(text_or_empty)
    _normalize_text = field_validator(
        "description", "publisher", "published_date", "language", mode="before"
    )(text_or_none)
    _normalize_lists = field_validator("authors", "categories", mode="before")(text_items)
    _normalize_identifiers = field_validator("industry_identifiers", mode="before")(
        _identifiers
    )

    @field_validator("page_count", mode="before")
    @classmethod
    def _positive_page_count(cls, value: object) -> object:
        # Google reports 0 when the page count is unknown
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return None


class Volume(GoogleBooksBaseModel):
    id: str
    volume_info: VolumeInfo = Field(default_factory=VolumeInfo, alias="volumeInfo")

    _normalize_info = field_validator("volume_info", mode="before")(_object_or_empty)


class VolumesResponse(GoogleBooksBaseModel):
    total_items: int = Field(default=0, alias="totalItems")
    items: list[Volume] = Field(default_factory=list)

    _normalize_total = field_validator("total_items", mode="before")(_count_or_zero)
    _normalize_items = field_validator("items", mode="before")(_volumes)
