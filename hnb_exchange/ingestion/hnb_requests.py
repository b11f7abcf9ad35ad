"""requests-based client for the HNB exchange rate API."""

from __future__ import annotations

from typing import Optional

import requests

from hnb_exchange.errors import DecodeError, HttpStatusError, TransportError
from hnb_exchange.ingestion.codec import decode_records
from hnb_exchange.ingestion.models import ExchangeRateRecord
from hnb_exchange.utils.date_range import DateRangeQuery
from hnb_exchange.utils.hnb import resolve_api_url
from hnb_exchange.utils.logger import get_logger

LOGGER = get_logger(__name__)


class HNBRequestsClient:
    """Issue a single GET against the HNB rate API and decode the bulletin rows."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = resolve_api_url(base_url)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def fetch(self, query: DateRangeQuery) -> list[ExchangeRateRecord]:
        """Return every rate HNB published for ``query``, in upstream order."""

        params = query.as_params()
        LOGGER.debug("Requesting %s with %s", self.base_url, params)
        try:
            response = self.session.get(
                self.base_url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Unable to reach HNB API at {self.base_url}: {exc}") from exc

        LOGGER.info("URL: %s", response.url)
        self._raise_for_status(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"HNB API returned a body that is not JSON: {exc}") from exc
        records = decode_records(payload)
        LOGGER.info("Decoded %s rates from %s", len(records), response.url)
        return records

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        reason = f" {response.reason}" if response.reason else ""
        raise HttpStatusError(
            status,
            response.url,
            f"HNB API responded with HTTP {status}{reason} for {response.url}",
        )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HNBRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def fetch_rates(
    query: DateRangeQuery, *, session: requests.Session | None = None
) -> list[ExchangeRateRecord]:
    """Download and decode HNB rates for ``query``."""

    with HNBRequestsClient(session=session) as client:
        return client.fetch(query)


__all__ = ["HNBRequestsClient", "fetch_rates"]
