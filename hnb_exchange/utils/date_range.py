"""Resolve HNB query date ranges from command-line style inputs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Union

from hnb_exchange.errors import InvalidArgument
from hnb_exchange.utils.hnb import (
    CURRENCY_PARAM,
    DATE_FORMAT,
    END_DATE_PARAM,
    FORWARD_PAD_DAYS,
    START_DATE_PARAM,
)

_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date


@dataclass(frozen=True)
class PastDays:
    """Range starting ``days`` before today and ending after the forward pad."""

    days: int


@dataclass(frozen=True)
class Explicit:
    """Range given by optional absolute start/end dates."""

    start: date | None = None
    end: date | None = None


RangeMode = Union[PastDays, Explicit]


@dataclass(frozen=True)
class DateRangeQuery:
    """Fully resolved query sent to the HNB rate API.

    ``currency`` may be empty, in which case HNB returns every currency.
    """

    currency: str
    start_date: date
    end_date: date
    mode: RangeMode

    def as_params(self) -> dict[str, str]:
        """Return the upstream query parameters for this range."""
        return {
            CURRENCY_PARAM: self.currency,
            START_DATE_PARAM: format_date(self.start_date),
            END_DATE_PARAM: format_date(self.end_date),
        }


def strict_iso_date(value: str) -> date:
    """Parse ``yyyy-MM-dd`` without accepting unpadded or trailing parts.

    Raises :class:`ValueError` on any mismatch so callers can choose their own
    error type.
    """

    if not isinstance(value, str) or not _ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"expected yyyy-MM-dd, got {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_date(value: str | date, *, field: str = "date") -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    try:
        return strict_iso_date(value)
    except ValueError as exc:
        raise InvalidArgument(f"Invalid {field} {value!r}: expected format yyyy-MM-dd") from exc


def parse_past_days(value: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise InvalidArgument(f"Invalid past days {value!r}: expected an integer")
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidArgument(f"Invalid past days: {len(value)}-digit value is too large") from exc


def format_date(value: date) -> str:
    return value.isoformat()


def utc_today() -> date:
    """Return the current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def build_mode(
    start: str | None = None,
    end: str | None = None,
    past_days: str | None = None,
) -> RangeMode:
    """Validate raw inputs and pick the range mode they describe.

    ``past_days`` cannot be combined with ``start`` or ``end``; the conflict is
    reported before the individual values are parsed.
    """

    if past_days is not None:
        if start is not None or end is not None:
            raise InvalidArgument("--past-days cannot be combined with --start-date or --end-date")
        return PastDays(parse_past_days(past_days))
    return Explicit(
        start=parse_date(start, field="start date") if start is not None else None,
        end=parse_date(end, field="end date") if end is not None else None,
    )


def resolve_range(mode: RangeMode, today: date) -> DateRange:
    """Turn ``mode`` into concrete dates relative to ``today``."""

    try:
        padded_end = today + timedelta(days=FORWARD_PAD_DAYS)
        if isinstance(mode, PastDays):
            return DateRange(start=today - timedelta(days=mode.days), end=padded_end)
    except OverflowError as exc:
        raise InvalidArgument(f"Date range out of bounds for {mode!r}") from exc
    return DateRange(start=mode.start or today, end=mode.end or padded_end)


def resolve_query(
    currency: str | None = None,
    start: str | None = None,
    end: str | None = None,
    past_days: str | None = None,
    *,
    today: date | None = None,
) -> DateRangeQuery:
    """Build a :class:`DateRangeQuery` from raw command-line values.

    ``None`` means absent; an empty string is parsed and rejected. ``today``
    defaults to the current UTC date and is evaluated once so both ends of the
    range share it.
    """

    mode = build_mode(start, end, past_days)
    resolved = resolve_range(mode, today or utc_today())
    return DateRangeQuery(
        currency=currency or "",
        start_date=resolved.start,
        end_date=resolved.end,
        mode=mode,
    )


__all__ = [
    "DateRange",
    "DateRangeQuery",
    "Explicit",
    "PastDays",
    "RangeMode",
    "build_mode",
    "format_date",
    "parse_date",
    "parse_past_days",
    "resolve_query",
    "resolve_range",
    "strict_iso_date",
    "utc_today",
]
