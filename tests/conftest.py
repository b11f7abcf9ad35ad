from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def aud_payload() -> dict[str, Any]:
    return {
        "broj_tecajnice": "161",
        "datum_primjene": "2020-08-21",
        "drzava": "Australija",
        "drzava_iso": "AUS",
        "sifra_valute": "036",
        "valuta": "AUD",
        "jedinica": 1,
        "kupovni_tecaj": "4,539891",
        "srednji_tecaj": "4,553552",
        "prodajni_tecaj": "4,567213",
    }


@pytest.fixture
def huf_payload() -> dict[str, Any]:
    return {
        "broj_tecajnice": "161",
        "datum_primjene": "2020-08-21",
        "drzava": "Mađarska",
        "drzava_iso": "HUN",
        "sifra_valute": "348",
        "valuta": "HUF",
        "jedinica": 100,
        "kupovni_tecaj": "2,143256",
        "srednji_tecaj": "2,149705",
        "prodajni_tecaj": "2,156154",
    }


@pytest.fixture(autouse=True)
def _default_api_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HNB_API_URL", raising=False)
