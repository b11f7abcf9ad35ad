"""Console and CSV rendering for decoded HNB rates."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from hnb_exchange.ingestion.models import ExchangeRateRecord

FRAME_COLUMNS = (
    "exchange_number",
    "exchange_date",
    "currency",
    "unit",
    "buying_rate",
    "middle_rate",
    "selling_rate",
    "country",
    "country_iso",
    "currency_code",
)
CONSOLE_COLUMNS = ("exchange_number", "exchange_date", "currency", "unit", "middle_rate")


def records_to_frame(records: Sequence[ExchangeRateRecord]) -> pd.DataFrame:
    """Return ``records`` as a DataFrame, keeping the bulletin order."""

    rows = [{column: getattr(record, column) for column in FRAME_COLUMNS} for record in records]
    return pd.DataFrame(rows, columns=list(FRAME_COLUMNS))


def format_records(records: Sequence[ExchangeRateRecord]) -> str:
    """Render the console table: bulletin, date, currency, unit and middle rate."""

    if not records:
        return "No exchange rates found for the requested range."
    frame = records_to_frame(records).loc[:, list(CONSOLE_COLUMNS)]
    frame = frame.assign(
        exchange_date=frame["exchange_date"].map(lambda value: value.isoformat()),
        middle_rate=frame["middle_rate"].map(lambda value: f"{value:.7f}"),
    )
    return frame.to_string(index=False)


def export_csv(records: Sequence[ExchangeRateRecord], path: str | Path) -> Path:
    if not records:
        raise ValueError("records collection is empty")
    csv_path = Path(path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    records_to_frame(records).to_csv(csv_path, index=False, encoding="utf-8")
    return csv_path


__all__ = ["CONSOLE_COLUMNS", "FRAME_COLUMNS", "export_csv", "format_records", "records_to_frame"]
