"""Small payload-normalisation helpers shared by the source adapters."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final, cast

from readsy.domain.isbn import clean_isbn

if TYPE_CHECKING:
    from collections.abc import Iterable

_YEAR: Final = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def text_or_none(value: object) -> str | None:
    """Stripped text; blanks and non-string values become ``None``."""

    if not isinstance(value, str):
        return None
    return value.strip() or None


def text_or_empty(value: object) -> str:
    return text_or_none(value) or ""


def text_items(value: object) -> list[str]:
    """Non-blank strings of a list payload, skipping elements of any other shape."""

    if not isinstance(value, list):
        return []
    texts: list[str] = []
    for item in cast(list[object], value):
        text = text_or_none(item)
        if text is not None:
            texts.append(text)
    return texts


def mapping_items(value: object, *, required: str) -> list[Mapping[str, object]]:
    """Objects of a list payload that carry a non-blank string under ``required``."""

    if not isinstance(value, list):
        return []
    return [
        cast(Mapping[str, object], item)
        for item in cast(list[object], value)
        if isinstance(item, Mapping)
        and text_or_none(cast(Mapping[str, object], item).get(required)) is not None
    ]


def first_year(text: str | None) -> int | None:
    """Return the first four-digit number in a free-form date (``"March 2015"``)."""

    if not text:
        return None
    match = _YEAR.search(text)
    return int(match.group(1)) if match else None


def isbn_set(values: Iterable[str], queried: str) -> frozenset[str]:
    """Cleaned, de-duplicated ISBNs that always include the queried one."""

    cleaned = {clean_isbn(value) for value in values}
    cleaned.discard("")
    cleaned.add(queried)
    return frozenset(cleaned)
