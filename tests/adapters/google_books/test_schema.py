from __future__ import annotations

from readsy.adapters.google_books import VolumeInfo, VolumesResponse

GooglePayload = dict[str, object]


def test_volumes_response_parses_payload(volumes_payload: GooglePayload) -> None:
    response = VolumesResponse.model_validate(volumes_payload)

    assert response.total_items == 1
    volume = response.items[0]
    assert volume.id == "1EiJAwAAQBAJ"
    assert volume.volume_info.page_count == 498
    assert volume.volume_info.published_date == "2014-09-04"
    assert len(volume.volume_info.industry_identifiers) == 3


def test_empty_search_has_no_items() -> None:
    response = VolumesResponse.model_validate({"kind": "books#volumes", "totalItems": 0})

    assert response.items == []


def test_volume_info_drops_unknown_page_count_and_blank_text() -> None:
    info = VolumeInfo.model_validate(
        {"pageCount": 0, "publisher": "  ", "categories": "History", "language": ""}
    )

    assert info.page_count is None
    assert info.publisher is None
    assert info.categories == []
    assert info.language is None


def test_volume_info_treats_null_title_as_missing() -> None:
    info = VolumeInfo.model_validate({"title": None, "description": 42})

    assert info.title == ""
    assert info.description is None


def test_volume_info_skips_malformed_list_elements() -> None:
    info = VolumeInfo.model_validate(
        {
            "title": "Sapiens",
            "authors": ["Yuval Noah Harari", None],
            "categories": ["History", 7],
            "industryIdentifiers": [
                {"type": "OTHER"},
                {"type": "ISBN_13", "identifier": None},
                "9780062316097",
                {"type": "ISBN_13", "identifier": "9780062316097"},
            ],
        }
    )

    assert info.authors == ["Yuval Noah Harari"]
    assert info.categories == ["History"]
    assert [(item.type, item.identifier) for item in info.industry_identifiers] == [
        ("ISBN_13", "9780062316097")
    ]


def test_volumes_response_skips_volumes_without_id() -> None:
    response = VolumesResponse.model_validate(
        {
            "totalItems": "many",
            "items": [{"volumeInfo": {"title": "Orphan"}}, {"id": "abc", "volumeInfo": None}],
        }
    )

    assert response.total_items == 0
    assert [volume.id for volume in response.items] == ["abc"]
    assert response.items[0].volume_info.title == ""
