"""HNB-specific constants and invariants used across the package."""

from __future__ import annotations

import os

HNB_API_URL = "http://api.hnb.hr/tecajn/v2"
HNB_API_URL_ENV_VAR = "HNB_API_URL"

DATE_FORMAT = "%Y-%m-%d"

# HNB publishes some bulletins ahead of their application date.
FORWARD_PAD_DAYS = 5

CURRENCY_PARAM = "valuta"
START_DATE_PARAM = "datum-primjene-od"
END_DATE_PARAM = "datum-primjene-do"


def resolve_api_url(override: str | None = None) -> str:
    """Return the rate API endpoint, honouring ``HNB_API_URL`` when set."""

    if override:
        return override
    return os.getenv(HNB_API_URL_ENV_VAR) or HNB_API_URL


__all__ = [
    "HNB_API_URL",
    "HNB_API_URL_ENV_VAR",
    "DATE_FORMAT",
    "FORWARD_PAD_DAYS",
    "CURRENCY_PARAM",
    "START_DATE_PARAM",
    "END_DATE_PARAM",
    "resolve_api_url",
]
