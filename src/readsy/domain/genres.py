"""Genre tag normalisation and get-or-create against the shared genre table.

Sources describe genres as free text: Google returns breadcrumb-like categories
(``"Fiction / Science Fiction / General"``), OpenLibrary returns subject lists with
inconsistent casing. Tags are split on ``/``, ``:`` and ``,`` anywhere, and on ``-``
when it stands between words (``"History - Europe"``) but not inside a word
(``"Sci-Fi"``). Each piece is trimmed, title-cased word by word and de-duplicated
case-insensitively in first-seen order.
"""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from readsy.domain.model import Genre
    from readsy.domain.ports.persistence import GenreRepository

log = getLogger(__name__)

_TAG_SEPARATORS: Final = re.compile(r"\s*[/:,]\s*|\s+-\s*|\s*-\s+")


def split_tag(tag: str) -> list[str]:
    return [piece.strip() for piece in _TAG_SEPARATORS.split(tag) if piece.strip()]


def canonical_genre_name(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split())


def genre_key(name: str) -> str:
    """Case-insensitive identity of a genre name."""

    return name.casefold()


def normalize_genre_names(tags: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    names: list[str] = []
    for tag in tags:
        for piece in split_tag(tag):
            name = canonical_genre_name(piece)
            key = genre_key(name)
            if key in seen:
                continue
            seen.add(key)
            names.append(name)
    return tuple(names)


def get_or_create_genres(tags: Iterable[str], repository: GenreRepository) -> list[Genre]:
    """Return one stored genre per distinct normalised tag, creating missing ones."""

    names = normalize_genre_names(tags)
    if not names:
        return []

    existing = repository.find_by_names_case_insensitive(names)
    known = {genre_key(genre.name) for genre in existing}
    missing = [name for name in names if genre_key(name) not in known]
    if missing:
        log.info("Creating %d new genre(s): %s", len(missing), ", ".join(missing))
        repository.create_many(missing)

    stored = repository.find_by_names_case_insensitive(names)
    order = {genre_key(name): index for index, name in enumerate(names)}
    return sorted(stored, key=lambda genre: order.get(genre_key(genre.name), len(order)))
