from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from custsync.adapters.external import InvalidPayloadError, load_external_customer
from custsync.app import match_external_customer, sync_external_customer
from custsync.config import configure_logging, env_flag
from custsync.domain.conflicts import CustomerConflictError
from custsync.domain.matching import MatchResult

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from custsync.domain.matching import MatchOutcome

log = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INVALID = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="custsync",
        description="Reconcile external customers with stored customers",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=env_flag("CUSTSYNC_VERBOSE"),
        help="Log every synchronization stage",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Synchronize one external customer")
    sync.add_argument("payload", type=Path, help="JSON file holding the external customer")

    match = subparsers.add_parser(
        "match",
        help="Show how an external customer would be matched without writing anything",
    )
    match.add_argument("payload", type=Path, help="JSON file holding the external customer")

    return parser.parse_args(list(argv))


def _describe_match(outcome: MatchOutcome) -> str:
    if not isinstance(outcome, MatchResult):
        return f"conflict ({outcome.kind}): {outcome.message}"
    primary = outcome.customer
    primary_text = "none (new customer)" if primary is None else str(primary.internal_id)
    duplicates = ", ".join(
        "new" if duplicate is None else str(duplicate.internal_id)
        for duplicate in outcome.duplicates
    )
    return (
        f"primary={primary_text}, match_term={outcome.match_term}, "
        f"duplicates=[{duplicates}]"
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        external = load_external_customer(parsed_args.payload)
    except (OSError, InvalidPayloadError):
        log.exception("Could not read external customer from %s", parsed_args.payload)
        sys.exit(EXIT_INVALID)

    try:
        if parsed_args.command == "sync":
            result = sync_external_customer(external)
            log.info(
                "%s customer %s",
                "Created" if result.created else "Updated",
                result.customer.internal_id,
            )
        elif parsed_args.command == "match":
            outcome = match_external_customer(external)
            log.info("Match for %s: %s", external.external_id, _describe_match(outcome))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except CustomerConflictError as exc:
        log.error("Conflict: %s", exc)  # noqa: TRY400
        sys.exit(EXIT_INVALID)
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(EXIT_FAILURE)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
