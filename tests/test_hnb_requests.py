from __future__ import annotations

import json
from datetime import date
from typing import Any
from urllib.parse import urlencode

import pytest
import requests

from hnb_exchange.errors import (
    DecodeError,
    HttpStatusError,
    MalformedNumber,
    TransportError,
)
from hnb_exchange.ingestion import hnb_requests
from hnb_exchange.ingestion.hnb_requests import HNBRequestsClient, fetch_rates
from hnb_exchange.utils.date_range import resolve_query
from hnb_exchange.utils.hnb import HNB_API_URL


class _DummyResponse:
    def __init__(self, payload: Any = None, *, status_code: int = 200, text: str | None = None, url: str = HNB_API_URL) -> None:
        self.status_code = status_code
        self.reason = "Internal Server Error" if status_code >= 500 else ""
        self.url = url
        self.text = text if text is not None else json.dumps(payload)
        self.json_calls = 0

    def json(self) -> Any:
        self.json_calls += 1
        return json.loads(self.text)


class _DummySession:
    def __init__(self, response: _DummyResponse | None = None, error: Exception | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        self.response.url = f"{url}?{urlencode(params or {})}"
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def query():
    return resolve_query("AUD", "2020-08-21", "2020-08-26", today=date(2020, 8, 21))


def test_fetch_sends_expected_params(query, aud_payload) -> None:
    session = _DummySession(_DummyResponse([aud_payload]))
    client = HNBRequestsClient(session=session)

    records = client.fetch(query)

    assert session.calls == [
        {
            "url": HNB_API_URL,
            "params": {
                "valuta": "AUD",
                "datum-primjene-od": "2020-08-21",
                "datum-primjene-do": "2020-08-26",
            },
            "headers": {"Accept": "application/json"},
            "timeout": None,
        }
    ]
    assert session.headers == {}
    assert len(records) == 1
    assert records[0].middle_rate == 4.553552


def test_fetch_sends_empty_currency(aud_payload, huf_payload) -> None:
    session = _DummySession(_DummyResponse([huf_payload, aud_payload]))
    query = resolve_query(past_days="2", today=date(2020, 8, 21))

    records = HNBRequestsClient(session=session).fetch(query)

    assert session.calls[0]["params"]["valuta"] == ""
    assert session.calls[0]["params"]["datum-primjene-od"] == "2020-08-19"
    assert [record.currency for record in records] == ["HUF", "AUD"]


def test_fetch_wraps_transport_errors(query) -> None:
    session = _DummySession(error=requests.ConnectionError("name resolution failed"))
    with pytest.raises(TransportError, match="name resolution failed"):
        HNBRequestsClient(session=session).fetch(query)


def test_fetch_wraps_timeouts(query) -> None:
    session = _DummySession(error=requests.Timeout("read timed out"))
    with pytest.raises(TransportError):
        HNBRequestsClient(session=session, timeout=0.1).fetch(query)
    assert session.calls[0]["timeout"] == 0.1


@pytest.mark.parametrize("status", [301, 404, 500, 503])
def test_non_success_status_skips_decode(query, status: int) -> None:
    response = _DummyResponse(text="<html>oops</html>", status_code=status)
    session = _DummySession(response)

    with pytest.raises(HttpStatusError) as excinfo:
        HNBRequestsClient(session=session).fetch(query)

    assert excinfo.value.status_code == status
    assert "valuta=AUD" in excinfo.value.url
    assert response.json_calls == 0


def test_non_json_body_is_decode_error(query) -> None:
    session = _DummySession(_DummyResponse(text="<html>maintenance</html>"))
    with pytest.raises(DecodeError, match="not JSON"):
        HNBRequestsClient(session=session).fetch(query)


def test_malformed_record_fails_whole_response(query, aud_payload, huf_payload) -> None:
    broken = dict(huf_payload, kupovni_tecaj="abc")
    session = _DummySession(_DummyResponse([aud_payload, broken]))
    with pytest.raises(MalformedNumber):
        HNBRequestsClient(session=session).fetch(query)


def test_base_url_can_be_overridden(monkeypatch: pytest.MonkeyPatch, query) -> None:
    monkeypatch.setenv("HNB_API_URL", "http://mirror.example/tecajn/v2")
    session = _DummySession(_DummyResponse([]))

    HNBRequestsClient(session=session).fetch(query)
    HNBRequestsClient(session=session, base_url="http://explicit.example").fetch(query)

    assert [call["url"] for call in session.calls] == [
        "http://mirror.example/tecajn/v2",
        "http://explicit.example",
    ]


def test_client_leaves_borrowed_session_untouched() -> None:
    session = _DummySession()
    session.headers["Accept"] = "text/plain"
    with HNBRequestsClient(session=session):
        pass
    assert session.closed is False
    assert session.headers == {"Accept": "text/plain"}


def test_fetch_rates_closes_owned_session(monkeypatch: pytest.MonkeyPatch, query, aud_payload) -> None:
    created: list[_DummySession] = []

    def _session_factory() -> _DummySession:
        session = _DummySession(_DummyResponse([aud_payload]))
        created.append(session)
        return session

    monkeypatch.setattr(hnb_requests.requests, "Session", _session_factory)

    records = fetch_rates(query)

    assert [record.currency for record in records] == ["AUD"]
    assert len(created) == 1
    assert created[0].closed is True
