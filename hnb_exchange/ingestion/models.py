"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ExchangeRateRecord:
    """Representation of a single currency row from an HNB rate bulletin.

    Rates are quoted in the domestic currency per ``unit`` units of ``currency``.
    """

    exchange_number: str
    exchange_date: date
    country: str
    country_iso: str
    currency_code: str
    currency: str
    unit: int
    buying_rate: float
    middle_rate: float
    selling_rate: float
