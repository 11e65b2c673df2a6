from __future__ import annotations

import pytest

from readsy.domain.isbn import InvalidIsbnError, clean_isbn, is_valid_isbn, normalize_isbn


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("978-0-14-312779-6", "9780143127796"),
        (" 0 14 312779 9 ", "0143127799"),
        ("080442957x", "080442957X"),
    ],
)
def test_normalize_isbn_strips_separators(raw: str, expected: str) -> None:
    assert normalize_isbn(raw) == expected


def test_clean_isbn_keeps_other_characters() -> None:
    assert clean_isbn("isbn 978-0") == "ISBN9780"


@pytest.mark.parametrize("value", ["9780143127796", "0143127799", "080442957X", "9781846558238"])
def test_is_valid_isbn_accepts_checksum_valid_values(value: str) -> None:
    assert is_valid_isbn(value)


@pytest.mark.parametrize(
    "value",
    ["9780143127797", "0143127798", "12345", "97801431277960", "X143127799", ""],
)
def test_is_valid_isbn_rejects_bad_checksums_and_shapes(value: str) -> None:
    assert not is_valid_isbn(value)


def test_normalize_isbn_raises_with_original_value() -> None:
    with pytest.raises(InvalidIsbnError) as exc:
        normalize_isbn("not-an-isbn")

    assert exc.value.value == "not-an-isbn"
    assert isinstance(exc.value, ValueError)
