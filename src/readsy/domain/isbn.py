"""ISBN cleaning and checksum validation."""

from __future__ import annotations

import re
from typing import Final

_SEPARATORS: Final = re.compile(r"[-\s]")
_ISBN10: Final = re.compile(r"\d{9}[\dX]")
_ISBN13: Final = re.compile(r"\d{13}")


class InvalidIsbnError(ValueError):
    """Raised when an input string is not a valid ISBN-10 or ISBN-13."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Not a valid ISBN: {value!r}")
        self.value = value


def clean_isbn(value: str) -> str:
    """Strip hyphens and whitespace and upper-case an ``x`` check digit."""

    return _SEPARATORS.sub("", value).upper()


def is_valid_isbn(value: str) -> bool:
    if _ISBN13.fullmatch(value):
        return _isbn13_checksum_ok(value)
    if _ISBN10.fullmatch(value):
        return _isbn10_checksum_ok(value)
    return False


def normalize_isbn(value: str) -> str:
    """Return the cleaned ISBN or raise ``InvalidIsbnError``."""

    cleaned = clean_isbn(value)
    if not is_valid_isbn(cleaned):
        raise InvalidIsbnError(value)
    return cleaned


def _isbn10_checksum_ok(value: str) -> bool:
    total = 0
    for position, char in enumerate(value):
        digit = 10 if char == "X" else int(char)
        total += (10 - position) * digit
    return total % 11 == 0


def _isbn13_checksum_ok(value: str) -> bool:
    total = sum(int(char) * (3 if index % 2 else 1) for index, char in enumerate(value))
    return total % 10 == 0
