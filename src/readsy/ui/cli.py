from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from enum import Enum
from signal import SIGINT, signal
from typing import TYPE_CHECKING
from uuid import UUID

from dotenv import load_dotenv

from readsy.app import initialize_database, lookup_isbn
from readsy.config import configure_logging
from readsy.domain.isbn import InvalidIsbnError
from readsy.domain.reconciliation import (
    AlreadyExists,
    LinkedToExisting,
    NewBookFound,
    NotFoundExternally,
    PossibleTranslation,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from readsy.domain.model import CanonicalRecord, CatalogEntry
    from readsy.domain.reconciliation import Outcome

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile ISBNs against the Readsy catalog")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="Reconcile one ISBN")
    lookup.add_argument("isbn", type=str, help="ISBN-10 or ISBN-13, hyphens allowed")
    lookup.add_argument(
        "--json",
        action="store_true",
        help="Print the outcome as JSON instead of a summary",
    )

    subparsers.add_parser("init-db", help="Create the catalog tables")

    return parser.parse_args(list(argv))


def _json_default(value: object) -> object:
    if isinstance(value, (set, frozenset)):
        return sorted(str(item) for item in value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def outcome_to_json(outcome: Outcome) -> str:
    return json.dumps(dataclasses.asdict(outcome), default=_json_default, indent=2, sort_keys=True)


def _describe_entry(entry: CatalogEntry) -> str:
    return f"{entry.title!r} [{entry.id}] isbns={', '.join(sorted(entry.isbns))}"


def _describe_canonical(canonical: CanonicalRecord) -> str:
    authors = ", ".join(canonical.authors) or "unknown author"
    return f"{canonical.title!r} by {authors} isbns={', '.join(sorted(canonical.all_isbns))}"


def describe_outcome(outcome: Outcome) -> str:
    match outcome:
        case AlreadyExists(entry=entry):
            return f"Already in catalog: {_describe_entry(entry)}"
        case LinkedToExisting(updated_entry=entry):
            return f"Linked to existing entry: {_describe_entry(entry)}"
        case PossibleTranslation(canonical=canonical, candidate_entries=candidates):
            lines = [f"Possible translation: {_describe_canonical(canonical)}"]
            lines.extend(f"  candidate: {_describe_entry(entry)}" for entry in candidates)
            return "\n".join(lines)
        case NewBookFound(canonical=canonical):
            return f"New book found: {_describe_canonical(canonical)}"
        case NotFoundExternally():
            return "Not found in any external source"


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "lookup":
            outcome = lookup_isbn(parsed_args.isbn)
            output = outcome_to_json(outcome) if parsed_args.json else describe_outcome(outcome)
            print(output)  # noqa: T201
        elif parsed_args.command == "init-db":
            initialize_database()
            log.info("Catalog tables ready")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except InvalidIsbnError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during lookup")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point: load ``.env`` and install the SIGINT handler."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
