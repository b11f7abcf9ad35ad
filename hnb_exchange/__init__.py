"""Public interface for the hnb_exchange package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata

from hnb_exchange.errors import (
    DecodeError,
    HNBExchangeError,
    HttpStatusError,
    InvalidArgument,
    MalformedDate,
    MalformedNumber,
    SchemaMismatch,
    TransportError,
)
from hnb_exchange.ingestion.hnb_requests import HNBRequestsClient, fetch_rates
from hnb_exchange.ingestion.models import ExchangeRateRecord
from hnb_exchange.utils.date_range import DateRangeQuery, Explicit, PastDays, resolve_query

__all__ = [
    "__version__",
    "DateRangeQuery",
    "DecodeError",
    "ExchangeRateRecord",
    "Explicit",
    "HNBExchangeError",
    "HNBRequestsClient",
    "HttpStatusError",
    "InvalidArgument",
    "MalformedDate",
    "MalformedNumber",
    "PastDays",
    "SchemaMismatch",
    "TransportError",
    "fetch_rates",
    "get_rates",
    "resolve_query",
]

try:
    __version__ = importlib_metadata.version("hnb-exchange")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def get_rates(
    currency: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    past_days: str | None = None,
    *,
    today: date | None = None,
) -> list[ExchangeRateRecord]:
    """Resolve the range from raw inputs and fetch it in one call.

    Accepts the same values as the command line; see :func:`resolve_query`.
    """

    query = resolve_query(currency, start_date, end_date, past_days, today=today)
    return fetch_rates(query)
