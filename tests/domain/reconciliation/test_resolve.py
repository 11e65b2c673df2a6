from __future__ import annotations

from typing import TYPE_CHECKING

from readsy.domain.model import Author
from readsy.domain.reconciliation import (
    LinkedToExisting,
    NewBookFound,
    PossibleTranslation,
    canonicalize,
    merge_records,
    resolve_author,
    resolve_identity,
)
from tests.helpers.records import (
    OTHER_ISBN_13,
    SAPIENS_ISBN_13,
    make_entry,
    make_google_record,
    make_open_library_record,
)

if TYPE_CHECKING:
    from readsy.domain.ports.unit_of_work import CatalogRepositories


def test_resolve_author_by_external_key(repositories: CatalogRepositories) -> None:
    author = Author(name="Yuval Noah Harari", open_library_id="OL26320A")
    repositories.authors.add(author)

    canonical = canonicalize(make_open_library_record(author_external_id="OL26320A"))

    assert resolve_author(canonical, repositories.authors) == author.id


def test_resolve_author_by_key_does_not_fall_back_to_name(
    repositories: CatalogRepositories,
) -> None:
    repositories.authors.add(Author(name="Yuval Noah Harari"))

    canonical = canonicalize(make_open_library_record(author_external_id="OL999A"))

    assert resolve_author(canonical, repositories.authors) is None


def test_resolve_author_by_first_name_case_insensitively(
    repositories: CatalogRepositories,
) -> None:
    author = Author(name="Yuval Noah Harari")
    repositories.authors.add(author)

    canonical = canonicalize(
        make_open_library_record(authors=("YUVAL NOAH HARARI", "Someone Else"))
    )

    assert resolve_author(canonical, repositories.authors) == author.id


def test_resolve_author_without_authors(repositories: CatalogRepositories) -> None:
    canonical = canonicalize(make_open_library_record(authors=()))

    assert resolve_author(canonical, repositories.authors) is None


def test_new_book_when_nothing_matches(repositories: CatalogRepositories) -> None:
    canonical = merge_records(make_open_library_record(), make_google_record())
    assert canonical is not None

    outcome = resolve_identity(canonical, repositories)

    assert isinstance(outcome, NewBookFound)
    assert outcome.canonical.title == "Sapiens"
    assert outcome.canonical.resolved_author_id is None


def test_linked_by_shared_google_id(repositories: CatalogRepositories) -> None:
    entry = make_entry(isbns=[OTHER_ISBN_13], google_book_id="abc123")
    repositories.catalog.add(entry)
    canonical = canonicalize(make_google_record())

    outcome = resolve_identity(canonical, repositories)

    assert isinstance(outcome, LinkedToExisting)
    assert outcome.updated_entry.id == entry.id
    assert SAPIENS_ISBN_13 in outcome.updated_entry.isbns


def test_linked_by_title_and_author(repositories: CatalogRepositories) -> None:
    author = Author(name="Yuval Noah Harari")
    repositories.authors.add(author)
    entry = make_entry("SAPIENS", isbns=[OTHER_ISBN_13], author_id=author.id)
    repositories.catalog.add(entry)

    outcome = resolve_identity(canonicalize(make_open_library_record()), repositories)

    assert isinstance(outcome, LinkedToExisting)
    assert outcome.updated_entry.id == entry.id
    assert outcome.updated_entry.open_library_id == "/books/OL123M"
    assert outcome.canonical.resolved_author_id == author.id


def test_same_title_by_unknown_author_is_not_a_duplicate(
    repositories: CatalogRepositories,
) -> None:
    repositories.catalog.add(make_entry("Sapiens", isbns=[OTHER_ISBN_13]))

    outcome = resolve_identity(
        canonicalize(make_open_library_record(open_library_id=None)), repositories
    )

    assert isinstance(outcome, NewBookFound)


def test_possible_translation_for_known_author(repositories: CatalogRepositories) -> None:
    author = Author(name="Yuval Noah Harari", open_library_id="OL26320A")
    repositories.authors.add(author)
    translated = make_entry(
        "Sapiens: Eine kurze Geschichte der Menschheit",
        isbns=[OTHER_ISBN_13],
        author_id=author.id,
    )
    repositories.catalog.add(translated)

    outcome = resolve_identity(
        canonicalize(make_open_library_record(author_external_id="OL26320A")),
        repositories,
    )

    assert isinstance(outcome, PossibleTranslation)
    assert [entry.id for entry in outcome.candidate_entries] == [translated.id]
    assert outcome.canonical.resolved_author_id == author.id
