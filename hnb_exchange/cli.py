"""Fetch HNB exchange rates for a date range and print them."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from hnb_exchange.errors import (
    DecodeError,
    HNBExchangeError,
    HttpStatusError,
    InvalidArgument,
    TransportError,
)
from hnb_exchange.ingestion.hnb_requests import HNBRequestsClient
from hnb_exchange.render import export_csv, format_records
from hnb_exchange.utils.date_range import format_date, resolve_query
from hnb_exchange.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)

__all__ = ["EXIT_CODES", "parse_args", "main"]

# Ordered from most to least specific; the first matching class wins.
EXIT_CODES: tuple[tuple[type[HNBExchangeError], int, str], ...] = (
    (InvalidArgument, 2, "arguments"),
    (TransportError, 3, "transport"),
    (HttpStatusError, 4, "upstream"),
    (DecodeError, 5, "decode"),
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hnb-exchange", description=__doc__)
    parser.add_argument(
        "-c",
        "--currency",
        dest="currency",
        help="Currency short name, e.g. EUR (all currencies when omitted)",
    )
    parser.add_argument(
        "-s",
        "--start-date",
        dest="start_date",
        help="Start date in format yyyy-MM-dd",
    )
    parser.add_argument(
        "-e",
        "--end-date",
        dest="end_date",
        help="End date in format yyyy-MM-dd",
    )
    parser.add_argument(
        "-p",
        "--past-days",
        dest="past_days",
        help="Number of past days to include; cannot be combined with -s/-e",
    )
    parser.add_argument(
        "--output",
        dest="output",
        help="Optional CSV file receiving every decoded field",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    query = resolve_query(args.currency, args.start_date, args.end_date, args.past_days)
    LOGGER.info(
        "Getting rates for %s from %s to %s",
        query.currency or "all currencies",
        format_date(query.start_date),
        format_date(query.end_date),
    )
    with HNBRequestsClient() as client:
        records = client.fetch(query)
    print(format_records(records))
    if args.output:
        if records:
            path = export_csv(records, args.output)
            LOGGER.info("Saved %s rates → %s", len(records), path)
        else:
            LOGGER.warning("No rates to export; %s not written", args.output)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        set_level(args.log_level)
    except ValueError as exc:
        LOGGER.error("arguments: %s", exc)
        return 2
    try:
        run(args)
    except HNBExchangeError as exc:
        for error_type, code, stage in EXIT_CODES:
            if isinstance(exc, error_type):
                LOGGER.error("%s: %s", stage, exc)
                return code
        raise
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
