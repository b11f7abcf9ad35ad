"""Decode HNB rate API payloads into ``ExchangeRateRecord`` rows.

HNB serialises every rate as a Croatian-localized string (``.`` groups
thousands, ``,`` separates decimals) and every date as ``yyyy-MM-dd``. A single
bad element aborts the whole decode.
"""

from __future__ import annotations

import math
import re
from datetime import date
from typing import Any, Mapping

from hnb_exchange.errors import MalformedDate, MalformedNumber, SchemaMismatch
from hnb_exchange.ingestion.models import ExchangeRateRecord
from hnb_exchange.utils.date_range import strict_iso_date

FIELD_MAP: dict[str, str] = {
    "exchange_number": "broj_tecajnice",
    "exchange_date": "datum_primjene",
    "country": "drzava",
    "country_iso": "drzava_iso",
    "currency_code": "sifra_valute",
    "currency": "valuta",
    "unit": "jedinica",
    "buying_rate": "kupovni_tecaj",
    "middle_rate": "srednji_tecaj",
    "selling_rate": "prodajni_tecaj",
}

_TEXT_FIELDS = ("exchange_number", "country", "country_iso", "currency_code", "currency")
_RATE_FIELDS = ("buying_rate", "middle_rate", "selling_rate")
_DECIMAL_LITERAL = re.compile(r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def parse_localized_number(value: str) -> float:
    """Parse ``"1.234,56"`` style text into ``1234.56``."""

    if not isinstance(value, str):
        raise SchemaMismatch(f"expected a string, got {type(value).__name__}")
    normalised = value.replace(".", "").replace(",", ".")
    if not _DECIMAL_LITERAL.fullmatch(normalised):
        raise MalformedNumber(f"invalid localized number {value!r}")
    result = float(normalised)
    if not math.isfinite(result):
        raise MalformedNumber(f"localized number out of range {value!r}")
    return result


def parse_iso_date(value: str) -> date:
    if not isinstance(value, str):
        raise SchemaMismatch(f"expected a string, got {type(value).__name__}")
    try:
        return strict_iso_date(value)
    except ValueError as exc:
        raise MalformedDate(f"invalid date {value!r}") from exc


def _require(payload: Mapping[str, Any], attribute: str) -> Any:
    key = FIELD_MAP[attribute]
    if key not in payload:
        raise SchemaMismatch(f"missing field {key!r}")
    return payload[key]


def _field_error(error: Exception, key: str) -> Exception:
    return type(error)(f"field {key!r}: {error}")


def decode_record(payload: Mapping[str, Any]) -> ExchangeRateRecord:
    """Decode one JSON object from the HNB API."""

    if not isinstance(payload, Mapping):
        raise SchemaMismatch(f"expected a JSON object, got {type(payload).__name__}")

    values: dict[str, Any] = {}
    for attribute in _TEXT_FIELDS:
        raw = _require(payload, attribute)
        if not isinstance(raw, str):
            raise SchemaMismatch(
                f"field {FIELD_MAP[attribute]!r}: expected a string, got {type(raw).__name__}"
            )
        values[attribute] = raw

    unit = _require(payload, "unit")
    # bool is an int subclass but never a valid unit.
    if isinstance(unit, bool) or not isinstance(unit, int):
        raise SchemaMismatch(f"field 'jedinica': expected an integer, got {type(unit).__name__}")
    if unit < 0:
        raise SchemaMismatch(f"field 'jedinica': expected a non-negative integer, got {unit}")
    values["unit"] = unit

    raw_date = _require(payload, "exchange_date")
    try:
        values["exchange_date"] = parse_iso_date(raw_date)
    except (MalformedDate, SchemaMismatch) as exc:
        raise _field_error(exc, FIELD_MAP["exchange_date"]) from exc

    for attribute in _RATE_FIELDS:
        key = FIELD_MAP[attribute]
        raw_rate = _require(payload, attribute)
        try:
            rate = parse_localized_number(raw_rate)
        except (MalformedNumber, SchemaMismatch) as exc:
            raise _field_error(exc, key) from exc
        if rate < 0:
            raise MalformedNumber(f"field {key!r}: rate must not be negative, got {rate}")
        values[attribute] = rate

    return ExchangeRateRecord(**values)


def decode_records(payload: Any) -> list[ExchangeRateRecord]:
    """Decode a full API response, preserving the upstream order."""

    if not isinstance(payload, list):
        raise SchemaMismatch(f"expected a JSON array, got {type(payload).__name__}")
    records: list[ExchangeRateRecord] = []
    for index, item in enumerate(payload):
        try:
            records.append(decode_record(item))
        except (MalformedNumber, MalformedDate, SchemaMismatch) as exc:
            raise type(exc)(f"record {index}: {exc}") from exc
    return records


__all__ = [
    "FIELD_MAP",
    "decode_record",
    "decode_records",
    "parse_iso_date",
    "parse_localized_number",
]
